import pytest

from wavparse.config import ParserSettings
from wavparse.container import data_chunk_offset, parse_wav
from wavparse.errors import MalformedContainer, TruncatedInput, UnsupportedEncoding
from wavparse.models import FloatPCM, IntegerPCM, Stereo


def _le(value: int, size: int) -> bytes:
    return value.to_bytes(size, "little")


def _build_wav(
    payload: bytes,
    channels: int = 2,
    bits: int = 16,
    format_tag: int = 1,
    block_align: int | None = None,
    fmt_tail: bytes = b"",
    fact_frames: int | None = None,
    extra_chunks: bytes = b"",
    data_size: int | None = None,
) -> bytes:
    align = block_align if block_align is not None else channels * bits // 8
    fmt_body = (
        _le(format_tag, 2)
        + _le(channels, 2)
        + _le(8000, 4)
        + _le(8000 * align, 4)
        + _le(align, 2)
        + _le(bits, 2)
        + fmt_tail
    )
    body = b"WAVE" + b"fmt " + _le(len(fmt_body), 4) + fmt_body
    if len(fmt_body) % 2:
        body += b"\x00"
    if fact_frames is not None:
        body += b"fact" + _le(4, 4) + _le(fact_frames, 4)
    body += extra_chunks
    body += b"data" + _le(len(payload) if data_size is None else data_size, 4) + payload
    return b"RIFF" + _le(len(body), 4) + body


def _stereo_payload(pairs: list[tuple[int, int]]) -> bytes:
    return b"".join(
        left.to_bytes(2, "little", signed=True) + right.to_bytes(2, "little", signed=True) for left, right in pairs
    )


def test_parse_stereo_16bit() -> None:
    pairs = [(0, 0), (100, -100), (-32768, 32767), (7, 8)]
    wav = _build_wav(_stereo_payload(pairs))

    parsed = parse_wav(wav)

    assert parsed.riff.body_size == len(wav) - 8
    assert isinstance(parsed.format, IntegerPCM)
    assert parsed.fact is None
    assert parsed.data.body_size == 16
    assert parsed.frame_count == 4
    assert all(isinstance(frame, Stereo) for frame in parsed.frames)
    assert [(f.left.value, f.right.value) for f in parsed.frames] == pairs
    assert parsed.duration_sec == pytest.approx(4 / 8000)


def test_parse_accepts_bytearray_and_memoryview() -> None:
    wav = _build_wav(b"\x01\x02", channels=1, bits=8)
    assert parse_wav(bytearray(wav)).frame_count == 2
    assert parse_wav(memoryview(wav)).frame_count == 2


def test_fact_chunk_shifts_data_offset_by_twelve() -> None:
    payload = _stereo_payload([(1, 2)])
    without_fact = _build_wav(payload)
    with_fact = _build_wav(payload, fact_frames=1)

    assert data_chunk_offset(with_fact) - data_chunk_offset(without_fact) == 12
    parsed = parse_wav(with_fact)
    assert parsed.fact is not None
    assert parsed.fact.frame_count == 1
    assert parse_wav(without_fact).frames == parsed.frames


def test_float_pcm_extension_moves_data_chunk() -> None:
    payload = b"\x00\x00\x80\x3f" * 2
    wav = _build_wav(payload, channels=1, bits=32, format_tag=3, fmt_tail=_le(2, 2) + b"\xaa\xbb", fact_frames=2)

    parsed = parse_wav(wav)

    assert isinstance(parsed.format, FloatPCM)
    assert parsed.format.extra_fields == b"\xaa\xbb"
    assert data_chunk_offset(wav) == 12 + 8 + 20 + 12
    assert [frame.sample.value for frame in parsed.frames] == [0x3F800000, 0x3F800000]


def test_odd_format_body_is_padded() -> None:
    wav = _build_wav(b"\x05", channels=1, bits=8, fmt_tail=b"\x00")
    assert data_chunk_offset(wav) == 12 + 8 + 18
    assert parse_wav(wav).frames[0].sample.value == 5


def test_data_payload_is_sliced_to_declared_size() -> None:
    wav = _build_wav(_stereo_payload([(1, 1), (2, 2)]), data_size=4)
    parsed = parse_wav(wav + b"\x00" * 3)
    assert parsed.frame_count == 1


def test_rifx_is_malformed() -> None:
    wav = bytearray(_build_wav(_stereo_payload([(1, 1)])))
    wav[0:4] = b"RIFX"
    with pytest.raises(MalformedContainer):
        parse_wav(bytes(wav))


def test_header_without_data_chunk_is_truncated() -> None:
    wav = _build_wav(b"")[:36]
    assert len(wav) < 44
    with pytest.raises(TruncatedInput):
        parse_wav(wav)


def test_declared_data_size_beyond_buffer_is_truncated() -> None:
    with pytest.raises(TruncatedInput):
        parse_wav(_build_wav(b"\x00" * 4, data_size=64))


def test_unknown_bit_depth_is_unsupported() -> None:
    with pytest.raises(UnsupportedEncoding):
        parse_wav(_build_wav(b"\x00" * 6, channels=2, bits=12, block_align=3))


def test_unknown_format_tag_is_unsupported() -> None:
    with pytest.raises(UnsupportedEncoding):
        parse_wav(_build_wav(b"\x00" * 4, format_tag=0xFFFE))


def test_block_align_mismatch_is_malformed_unless_relaxed() -> None:
    wav = _build_wav(_stereo_payload([(1, 2), (3, 4)]), block_align=8)
    with pytest.raises(MalformedContainer):
        parse_wav(wav)

    relaxed = parse_wav(wav, ParserSettings(strict_block_align=False))
    assert relaxed.frame_count == 2


def test_payload_not_multiple_of_block_align_is_malformed() -> None:
    with pytest.raises(MalformedContainer):
        parse_wav(_build_wav(b"\x00" * 6))


def test_unknown_chunk_before_data() -> None:
    list_chunk = b"LIST" + _le(5, 4) + b"INFOx" + b"\x00"
    wav = _build_wav(_stereo_payload([(9, 10)]), fact_frames=1, extra_chunks=list_chunk)

    with pytest.raises(MalformedContainer):
        parse_wav(wav)

    parsed = parse_wav(wav, ParserSettings(skip_unknown_chunks=True))
    assert parsed.fact is not None
    assert parsed.frames[0].channels[1].value == 10


def test_fact_after_unknown_chunk_is_found_when_skipping() -> None:
    list_chunk = b"LIST" + _le(4, 4) + b"INFO" + b"fact" + _le(4, 4) + _le(1, 4)
    wav = _build_wav(_stereo_payload([(1, 2)]), extra_chunks=list_chunk)

    parsed = parse_wav(wav, ParserSettings(skip_unknown_chunks=True))

    assert parsed.fact is not None
    assert parsed.fact.frame_count == 1


def test_max_input_bytes_limit() -> None:
    wav = _build_wav(_stereo_payload([(1, 2)]))
    with pytest.raises(MalformedContainer):
        parse_wav(wav, ParserSettings(max_input_bytes=len(wav) - 1))
    assert parse_wav(wav, ParserSettings(max_input_bytes=len(wav))).frame_count == 1


def test_empty_fact_body_before_data_is_malformed() -> None:
    wav = _build_wav(_stereo_payload([(1, 2)]), extra_chunks=b"fact" + _le(0, 4))
    with pytest.raises(MalformedContainer):
        parse_wav(wav)
