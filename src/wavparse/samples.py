"""Decode a data chunk payload into interleaved sample frames."""

from __future__ import annotations

from wavparse.errors import MalformedContainer, UnsupportedEncoding
from wavparse.models import ChannelSample, FrameLayout, Mono, Multi, SampleFrame, SampleWidth, Stereo


def sample_width_for(bits_per_sample: int) -> SampleWidth:
    try:
        return SampleWidth(bits_per_sample)
    except ValueError as exc:
        raise UnsupportedEncoding(f"unsupported bits per sample: {bits_per_sample}") from exc


def decode_sample(chunk: bytes, width: SampleWidth) -> ChannelSample:
    if len(chunk) != width.byte_width:
        raise MalformedContainer(f"{width.name} sample needs {width.byte_width} bytes, got {len(chunk)}")
    if width is SampleWidth.U8:
        return ChannelSample(width=width, value=chunk[0])
    if width is SampleWidth.I16:
        return ChannelSample(width=width, value=int.from_bytes(chunk, "little", signed=True))
    if width is SampleWidth.I24:
        sign = b"\xff" if chunk[2] & 0x80 else b"\x00"
        return ChannelSample(width=width, value=int.from_bytes(bytes(chunk) + sign, "little", signed=True))
    return ChannelSample(width=width, value=int.from_bytes(chunk, "little", signed=True))


def assemble_frame(samples: list[ChannelSample], channels: int) -> SampleFrame:
    if len(samples) < channels:
        raise MalformedContainer(f"frame decoded {len(samples)} samples for {channels} channels")
    layout = FrameLayout.for_channels(channels)
    if layout is FrameLayout.MONO:
        return Mono(sample=samples[0])
    if layout is FrameLayout.STEREO:
        return Stereo(left=samples[0], right=samples[1])
    return Multi(samples=tuple(samples[:channels]))


def decode_samples(payload: bytes, channels: int, bits_per_sample: int) -> tuple[SampleFrame, ...]:
    """Split ``payload`` into frames of ``channels`` samples each.

    Frames keep payload order and samples inside a frame keep the
    interleaved channel order. The payload must hold a whole number of
    frames.
    """
    width = sample_width_for(bits_per_sample)
    if channels < 1:
        raise MalformedContainer(f"invalid channel count: {channels}")

    sample_size = width.byte_width
    frame_size = channels * sample_size
    if len(payload) % frame_size:
        raise MalformedContainer(
            f"data payload of {len(payload)} bytes is not a multiple of the {frame_size}-byte frame size"
        )

    view = memoryview(payload)
    frames: list[SampleFrame] = []
    for frame_start in range(0, len(payload), frame_size):
        frame = view[frame_start : frame_start + frame_size]
        decoded = [
            decode_sample(frame[offset : offset + sample_size], width)
            for offset in range(0, frame_size, sample_size)
        ]
        frames.append(assemble_frame(decoded, channels))
    return tuple(frames)
