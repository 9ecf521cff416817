"""FastAPI request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel


class RiffSummary(BaseModel):
    chunk_id: str
    body_size: int
    form_type: str


class FormatSummary(BaseModel):
    encoding: str
    format_tag: int
    body_size: int
    channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    extension_size: int = 0


class FactSummary(BaseModel):
    body_size: int
    frame_count: int


class DataSummary(BaseModel):
    body_size: int


class FramePreview(BaseModel):
    layout: str
    values: list[int]


class ParseResponse(BaseModel):
    riff: RiffSummary
    format: FormatSummary
    fact: FactSummary | None = None
    data: DataSummary
    frame_count: int
    duration_sec: float
    frames: list[FramePreview]


class ParseErrorDetail(BaseModel):
    error: str
    message: str
