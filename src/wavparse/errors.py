"""Error taxonomy for WAV container parsing."""

from __future__ import annotations


class WavError(ValueError):
    """Base class for every parse failure."""

    kind = "wav_error"


class TruncatedInput(WavError):
    """Raised when the buffer ends before a field or declared chunk does."""

    kind = "truncated_input"


class MalformedContainer(WavError):
    """Raised on tag mismatches and size or arithmetic inconsistencies."""

    kind = "malformed_container"


class UnsupportedEncoding(WavError):
    """Raised for format tags or bit depths that are not implemented."""

    kind = "unsupported_encoding"
