"""RIFF/WAVE container parsing into typed chunks and sample frames."""

from wavparse.chunks import read_chunk_header, read_data_chunk, read_fact_chunk, read_format_chunk, read_riff_header
from wavparse.config import ParserSettings
from wavparse.container import data_chunk_offset, parse_wav
from wavparse.errors import MalformedContainer, TruncatedInput, UnsupportedEncoding, WavError
from wavparse.loader import load_wav
from wavparse.models import (
    ChannelSample,
    DataChunk,
    FactChunk,
    FloatPCM,
    FormatChunk,
    FormatFields,
    FormatTag,
    FrameLayout,
    IntegerPCM,
    Mono,
    Multi,
    ParsedWav,
    RiffHeader,
    SampleFrame,
    SampleWidth,
    Stereo,
)
from wavparse.samples import decode_sample, decode_samples

__all__ = [
    "ChannelSample",
    "DataChunk",
    "FactChunk",
    "FloatPCM",
    "FormatChunk",
    "FormatFields",
    "FormatTag",
    "FrameLayout",
    "IntegerPCM",
    "MalformedContainer",
    "Mono",
    "Multi",
    "ParsedWav",
    "ParserSettings",
    "RiffHeader",
    "SampleFrame",
    "SampleWidth",
    "Stereo",
    "TruncatedInput",
    "UnsupportedEncoding",
    "WavError",
    "data_chunk_offset",
    "decode_sample",
    "decode_samples",
    "load_wav",
    "parse_wav",
    "read_chunk_header",
    "read_data_chunk",
    "read_fact_chunk",
    "read_format_chunk",
    "read_riff_header",
]
