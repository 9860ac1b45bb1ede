import os
from typing import List
from dotenv import load_dotenv

load_dotenv()


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


CORS_ORIGINS = _split_origins(
    os.environ.get("CORS_ORIGINS", "http://localhost:3000")
)

# Upper bound on a single text field; similarity scoring is quadratic in word count
MAX_TEXT_LENGTH = int(os.environ.get("MAX_TEXT_LENGTH", "100000"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
