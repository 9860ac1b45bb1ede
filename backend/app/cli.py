"""
Command line access to the text analysis services.

Usage:
    text-analyzer analyze "Some text to analyze."
    text-analyzer analyze --file notes.txt
    text-analyzer similarity "the cat sat" "the dog sat"
"""

import argparse
import json
import sys
from typing import List, Optional

from app.core.errors import InvalidInputError, TextAnalysisError
from app.services.similarity_service import calculate_similarity
from app.services.stats_service import calculate_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="text-analyzer", description="Text statistics and similarity"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser("analyze", help="Compute text statistics")
    analyze_parser.add_argument("text", nargs="?", help="Text to analyze")
    analyze_parser.add_argument(
        "--file", help="Read the text from a UTF-8 file instead"
    )

    similarity_parser = subparsers.add_parser(
        "similarity", help="Score vocabulary overlap between two texts"
    )
    similarity_parser.add_argument("text1", help="First text")
    similarity_parser.add_argument("text2", help="Second text")

    return parser


def _read_text_file(path: str) -> str:
    """Reads a UTF-8 text file, rejecting files that cannot be read or decoded.

    Raises:
        InvalidInputError: If the file is missing, unreadable or not UTF-8.
    """
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidInputError(f"Cannot read {path}: {e}")


def main(argv: Optional[List[str]] = None) -> int:
    """Parse args, run the requested analysis and print the JSON result.

    Returns:
        int: 0 on success, 2 if the input was rejected.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "analyze":
            text = args.text
            if args.file:
                text = _read_text_file(args.file)
            result = calculate_stats(text)
        else:
            result = calculate_similarity(args.text1, args.text2)
    except TextAnalysisError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(json.dumps(result.model_dump(by_alias=True), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
