import json
from app.cli import main


def test_cli_analyze(capsys):
    assert main(["analyze", "Hello hello world."]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["wordCount"] == 3
    assert data["sentenceCount"] == 1
    assert data["mostFrequentWord"] == {"word": "Hello", "frequency": 2}


def test_cli_analyze_file(tmp_path, capsys):
    """Test reading the text from a file."""
    path = tmp_path / "input.txt"
    path.write_text("One. Two.", encoding="utf-8")

    assert main(["analyze", "--file", str(path)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["sentenceCount"] == 2
    assert data["charCount"] == 8


def test_cli_similarity(capsys):
    assert main(["similarity", "the cat sat", "the dog sat"]) == 0
    assert json.loads(capsys.readouterr().out) == {"similarity": 66.67}


def test_cli_rejects_invalid_input(capsys):
    """Test that rejected input exits with status 2 and reports on stderr."""
    assert main(["analyze"]) == 2
    assert "Input text is required." in capsys.readouterr().err

    assert main(["similarity", "...", "!!!"]) == 2
    assert "text2" in capsys.readouterr().err


def test_cli_rejects_unreadable_file(tmp_path, capsys):
    """Test that missing and non-UTF-8 files are reported instead of crashing."""
    missing = tmp_path / "missing.txt"
    assert main(["analyze", "--file", str(missing)]) == 2
    assert "Cannot read" in capsys.readouterr().err

    binary = tmp_path / "binary.txt"
    binary.write_bytes(b"\xff\xfe abc")
    assert main(["analyze", "--file", str(binary)]) == 2
    assert "Cannot read" in capsys.readouterr().err
