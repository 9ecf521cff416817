"""Load WAV files from disk into ParsedWav values."""

from __future__ import annotations

from pathlib import Path

from wavparse.config import ParserSettings
from wavparse.container import parse_wav
from wavparse.models import ParsedWav


def load_wav(path: str | Path, settings: ParserSettings | None = None) -> ParsedWav:
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(str(file_path))
    return parse_wav(file_path.read_bytes(), settings)
