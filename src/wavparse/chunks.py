"""Readers for the individual chunks of a RIFF/WAVE container.

Every reader takes the whole buffer plus the absolute offset of the chunk
it reads. Multi-byte fields are always decoded little-endian and every
read is bounds-checked so malformed input surfaces as a ``WavError``.
"""

from __future__ import annotations

from wavparse.errors import MalformedContainer, TruncatedInput, UnsupportedEncoding
from wavparse.models import (
    CHUNK_HEADER_SIZE,
    DATA_ID,
    FACT_ID,
    FMT_ID,
    RIFF_ID,
    WAVE_ID,
    ChunkHeader,
    DataChunk,
    FactChunk,
    FloatPCM,
    FormatChunk,
    FormatFields,
    FormatTag,
    IntegerPCM,
    RiffHeader,
)

RIFF_HEADER_SIZE = 12
FORMAT_SHARED_SIZE = 24
FORMAT_MIN_BODY_SIZE = 16
FORMAT_EXTENSIBLE_BODY_SIZE = 18
FACT_CHUNK_SIZE = 12


def _require(buffer: bytes, offset: int, length: int, what: str) -> None:
    available = len(buffer) - offset
    if offset < 0 or available < length:
        raise TruncatedInput(
            f"{what} needs {length} bytes at offset {offset}, only {max(available, 0)} available"
        )


def _u16(buffer: bytes, offset: int) -> int:
    return int.from_bytes(buffer[offset : offset + 2], "little", signed=False)


def _u32(buffer: bytes, offset: int) -> int:
    return int.from_bytes(buffer[offset : offset + 4], "little", signed=False)


def _tag(buffer: bytes, offset: int) -> bytes:
    return bytes(buffer[offset : offset + 4])


def read_chunk_header(buffer: bytes, offset: int) -> ChunkHeader:
    _require(buffer, offset, CHUNK_HEADER_SIZE, "chunk header")
    return ChunkHeader(chunk_id=_tag(buffer, offset), body_size=_u32(buffer, offset + 4), offset=offset)


def read_riff_header(buffer: bytes) -> RiffHeader:
    _require(buffer, 0, RIFF_HEADER_SIZE, "RIFF header")
    chunk_id = _tag(buffer, 0)
    if chunk_id != RIFF_ID:
        raise MalformedContainer(f"expected RIFF tag, found {chunk_id!r}")
    form_type = _tag(buffer, 8)
    if form_type != WAVE_ID:
        raise MalformedContainer(f"expected WAVE form type, found {form_type!r}")
    return RiffHeader(chunk_id=chunk_id, body_size=_u32(buffer, 4), form_type=form_type)


def read_format_chunk(buffer: bytes, offset: int = RIFF_HEADER_SIZE) -> FormatChunk:
    # The tag is checked before the full shared length so a wrong chunk
    # reports as malformed rather than truncated.
    _require(buffer, offset, 4, "format chunk tag")
    chunk_id = _tag(buffer, offset)
    if chunk_id != FMT_ID:
        raise MalformedContainer(f"expected 'fmt ' chunk at offset {offset}, found {chunk_id!r}")
    _require(buffer, offset, FORMAT_SHARED_SIZE, "format chunk")

    body_size = _u32(buffer, offset + 4)
    if body_size < FORMAT_MIN_BODY_SIZE:
        raise MalformedContainer(f"format chunk body is {body_size} bytes, expected at least 16")

    raw_tag = _u16(buffer, offset + 8)
    try:
        format_tag = FormatTag(raw_tag)
    except ValueError as exc:
        raise UnsupportedEncoding(f"unsupported format tag: {raw_tag:#06x}") from exc

    fields = FormatFields(
        chunk_id=chunk_id,
        body_size=body_size,
        format_tag=format_tag,
        channels=_u16(buffer, offset + 10),
        sample_rate=_u32(buffer, offset + 12),
        byte_rate=_u32(buffer, offset + 16),
        block_align=_u16(buffer, offset + 20),
        bits_per_sample=_u16(buffer, offset + 22),
    )
    if fields.channels < 1:
        raise MalformedContainer("format chunk declares zero channels")

    if format_tag is FormatTag.INTEGER_PCM:
        return IntegerPCM(fields=fields)
    return _read_float_extension(buffer, offset, fields)


def _read_float_extension(buffer: bytes, offset: int, fields: FormatFields) -> FloatPCM:
    if fields.body_size < FORMAT_EXTENSIBLE_BODY_SIZE:
        return FloatPCM(fields=fields)

    size_offset = offset + FORMAT_SHARED_SIZE
    _require(buffer, size_offset, 2, "format extension size")
    extension_size = _u16(buffer, size_offset)
    if FORMAT_EXTENSIBLE_BODY_SIZE + extension_size > fields.body_size:
        raise MalformedContainer(
            f"format extension of {extension_size} bytes overruns the {fields.body_size}-byte chunk body"
        )
    _require(buffer, size_offset + 2, extension_size, "format extension")
    extra = bytes(buffer[size_offset + 2 : size_offset + 2 + extension_size])
    return FloatPCM(fields=fields, extension_size=extension_size, extra_fields=extra)


def read_fact_chunk(buffer: bytes, offset: int) -> FactChunk | None:
    """Return the fact chunk at ``offset`` or None when another chunk starts there."""
    if len(buffer) - offset < 4 or _tag(buffer, offset) != FACT_ID:
        return None
    _require(buffer, offset, FACT_CHUNK_SIZE, "fact chunk")
    body_size = _u32(buffer, offset + 4)
    if body_size < FACT_CHUNK_SIZE - 8:
        raise MalformedContainer(f"fact chunk body is {body_size} bytes, too small for its frame count")
    return FactChunk(
        chunk_id=FACT_ID,
        body_size=body_size,
        frame_count=_u32(buffer, offset + 8),
    )


def read_data_chunk(buffer: bytes, offset: int) -> DataChunk:
    header = read_chunk_header(buffer, offset)
    if header.chunk_id != DATA_ID:
        raise MalformedContainer(f"expected 'data' chunk at offset {offset}, found {header.chunk_id!r}")
    start = offset + CHUNK_HEADER_SIZE
    _require(buffer, start, header.body_size, "data chunk payload")
    return DataChunk(
        chunk_id=header.chunk_id,
        body_size=header.body_size,
        samples=bytes(buffer[start : start + header.body_size]),
    )
