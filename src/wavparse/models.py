"""Parsed WAV container models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

RIFF_ID = b"RIFF"
WAVE_ID = b"WAVE"
FMT_ID = b"fmt "
FACT_ID = b"fact"
DATA_ID = b"data"

CHUNK_HEADER_SIZE = 8


def padded_size(body_size: int) -> int:
    return body_size + (body_size & 1)


class FormatTag(IntEnum):
    INTEGER_PCM = 1
    FLOAT_PCM = 3


class SampleWidth(IntEnum):
    U8 = 8
    I16 = 16
    I24 = 24
    I32 = 32

    @property
    def byte_width(self) -> int:
        return self.value // 8


class FrameLayout(str, Enum):
    MONO = "mono"
    STEREO = "stereo"
    MULTI = "multi"

    @staticmethod
    def for_channels(channels: int) -> FrameLayout:
        if channels == 1:
            return FrameLayout.MONO
        if channels == 2:
            return FrameLayout.STEREO
        return FrameLayout.MULTI


@dataclass(frozen=True, slots=True)
class ChunkHeader:
    chunk_id: bytes
    body_size: int
    offset: int

    @property
    def encoded_size(self) -> int:
        return CHUNK_HEADER_SIZE + padded_size(self.body_size)


@dataclass(frozen=True, slots=True)
class RiffHeader:
    chunk_id: bytes
    body_size: int
    form_type: bytes


@dataclass(frozen=True, slots=True)
class FormatFields:
    chunk_id: bytes
    body_size: int
    format_tag: FormatTag
    channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int


class _FormatChunkBase:
    """Accessors shared by both format chunk variants."""

    __slots__ = ()

    fields: FormatFields

    @property
    def format_tag(self) -> FormatTag:
        return self.fields.format_tag

    @property
    def channels(self) -> int:
        return self.fields.channels

    @property
    def sample_rate(self) -> int:
        return self.fields.sample_rate

    @property
    def block_align(self) -> int:
        return self.fields.block_align

    @property
    def bits_per_sample(self) -> int:
        return self.fields.bits_per_sample

    @property
    def encoded_size(self) -> int:
        return CHUNK_HEADER_SIZE + padded_size(self.fields.body_size)


@dataclass(frozen=True, slots=True)
class IntegerPCM(_FormatChunkBase):
    fields: FormatFields


@dataclass(frozen=True, slots=True)
class FloatPCM(_FormatChunkBase):
    fields: FormatFields
    extension_size: int = 0
    extra_fields: bytes = b""


FormatChunk = IntegerPCM | FloatPCM


@dataclass(frozen=True, slots=True)
class FactChunk:
    chunk_id: bytes
    body_size: int
    frame_count: int

    @property
    def encoded_size(self) -> int:
        return CHUNK_HEADER_SIZE + padded_size(self.body_size)


@dataclass(frozen=True, slots=True)
class DataChunk:
    chunk_id: bytes
    body_size: int
    samples: bytes = field(repr=False)


@dataclass(frozen=True, slots=True)
class ChannelSample:
    width: SampleWidth
    value: int


@dataclass(frozen=True, slots=True)
class Mono:
    sample: ChannelSample

    @property
    def layout(self) -> FrameLayout:
        return FrameLayout.MONO

    @property
    def channels(self) -> tuple[ChannelSample, ...]:
        return (self.sample,)


@dataclass(frozen=True, slots=True)
class Stereo:
    left: ChannelSample
    right: ChannelSample

    @property
    def layout(self) -> FrameLayout:
        return FrameLayout.STEREO

    @property
    def channels(self) -> tuple[ChannelSample, ...]:
        return (self.left, self.right)


@dataclass(frozen=True, slots=True)
class Multi:
    samples: tuple[ChannelSample, ...]

    @property
    def layout(self) -> FrameLayout:
        return FrameLayout.MULTI

    @property
    def channels(self) -> tuple[ChannelSample, ...]:
        return self.samples


SampleFrame = Mono | Stereo | Multi


@dataclass(frozen=True, slots=True)
class ParsedWav:
    riff: RiffHeader
    format: FormatChunk
    fact: FactChunk | None
    data: DataChunk
    frames: tuple[SampleFrame, ...] = field(repr=False)

    @property
    def channels(self) -> int:
        return self.format.channels

    @property
    def sample_rate(self) -> int:
        return self.format.sample_rate

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    @property
    def duration_sec(self) -> float:
        if self.sample_rate <= 0:
            return 0.0
        return self.frame_count / self.sample_rate
