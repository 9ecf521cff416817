"""Assemble a ParsedWav from a complete in-memory RIFF/WAVE buffer."""

from __future__ import annotations

from wavparse.chunks import (
    RIFF_HEADER_SIZE,
    read_chunk_header,
    read_data_chunk,
    read_fact_chunk,
    read_format_chunk,
    read_riff_header,
)
from wavparse.config import ParserSettings
from wavparse.errors import MalformedContainer
from wavparse.models import DATA_ID, FACT_ID, FactChunk, FormatChunk, ParsedWav
from wavparse.samples import decode_samples, sample_width_for


def parse_wav(buffer: bytes | bytearray | memoryview, settings: ParserSettings | None = None) -> ParsedWav:
    """Parse ``buffer`` chunk by chunk, raising the first ``WavError`` met.

    Chunk offsets are derived from the encoded size of the chunks before
    them, so format extensions and an optional fact chunk move the data
    chunk accordingly.
    """
    config = settings or ParserSettings()
    data = bytes(buffer)
    if config.max_input_bytes and len(data) > config.max_input_bytes:
        raise MalformedContainer(f"input of {len(data)} bytes exceeds the {config.max_input_bytes}-byte limit")

    riff = read_riff_header(data)
    fmt = read_format_chunk(data, RIFF_HEADER_SIZE)
    _validate_format(fmt, config)

    fact, data_offset = _locate_data(data, RIFF_HEADER_SIZE + fmt.encoded_size, config)
    data_chunk = read_data_chunk(data, data_offset)
    frames = decode_samples(data_chunk.samples, fmt.channels, fmt.bits_per_sample)
    return ParsedWav(riff=riff, format=fmt, fact=fact, data=data_chunk, frames=frames)


def data_chunk_offset(buffer: bytes, settings: ParserSettings | None = None) -> int:
    """Return the absolute offset of the data chunk header in ``buffer``."""
    data = bytes(buffer)
    read_riff_header(data)
    fmt = read_format_chunk(data, RIFF_HEADER_SIZE)
    _, offset = _locate_data(data, RIFF_HEADER_SIZE + fmt.encoded_size, settings or ParserSettings())
    return offset


def _validate_format(fmt: FormatChunk, config: ParserSettings) -> None:
    width = sample_width_for(fmt.bits_per_sample)
    expected = fmt.channels * width.byte_width
    if config.strict_block_align and fmt.block_align != expected:
        raise MalformedContainer(
            f"block align {fmt.block_align} does not match {fmt.channels} channels x {width.byte_width} bytes"
        )


def _locate_data(buffer: bytes, offset: int, config: ParserSettings) -> tuple[FactChunk | None, int]:
    fact = read_fact_chunk(buffer, offset)
    if fact is not None:
        offset += fact.encoded_size
    if not config.skip_unknown_chunks:
        return fact, offset

    while True:
        header = read_chunk_header(buffer, offset)
        if header.chunk_id == DATA_ID:
            return fact, offset
        if header.chunk_id == FACT_ID and fact is None:
            fact = read_fact_chunk(buffer, offset)
        offset += header.encoded_size
