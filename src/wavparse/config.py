"""Parser settings, overridable from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class ParserSettings:
    strict_block_align: bool = True
    skip_unknown_chunks: bool = False
    max_input_bytes: int = 0

    @staticmethod
    def from_env() -> ParserSettings:
        defaults = ParserSettings()
        max_raw = os.getenv("WAVPARSE_MAX_INPUT_BYTES", "").strip()
        try:
            max_input_bytes = int(max_raw) if max_raw else defaults.max_input_bytes
        except ValueError:
            max_input_bytes = defaults.max_input_bytes
        return ParserSettings(
            strict_block_align=_env_flag("WAVPARSE_STRICT_BLOCK_ALIGN", defaults.strict_block_align),
            skip_unknown_chunks=_env_flag("WAVPARSE_SKIP_UNKNOWN_CHUNKS", defaults.skip_unknown_chunks),
            max_input_bytes=max(max_input_bytes, 0),
        )


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    return default
