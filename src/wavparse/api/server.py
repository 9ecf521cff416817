"""HTTP endpoint that parses uploaded WAV bytes."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from wavparse.api.schemas import (
    DataSummary,
    FactSummary,
    FormatSummary,
    FramePreview,
    ParseErrorDetail,
    ParseResponse,
    RiffSummary,
)
from wavparse.config import ParserSettings
from wavparse.container import parse_wav
from wavparse.errors import UnsupportedEncoding, WavError
from wavparse.models import FloatPCM, ParsedWav


def create_app(settings: ParserSettings | None = None) -> FastAPI:
    app = FastAPI(title="wavparse API", version="0.1.0")
    parser_settings = settings or ParserSettings.from_env()

    @app.get("/")
    def root() -> dict[str, str]:
        return {
            "service": "wavparse API",
            "status": "ok",
            "docs": "/docs",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    def favicon() -> Response:
        return Response(status_code=204)

    @app.post("/v1/wav/parse", response_model=ParseResponse)
    async def parse(request: Request, preview_frames: int = Query(default=8, ge=0, le=1024)) -> ParseResponse:
        body = await request.body()
        if not body:
            detail = ParseErrorDetail(error="empty_body", message="request body must contain WAV bytes")
            raise HTTPException(status_code=400, detail=detail.model_dump())
        try:
            parsed = await run_in_threadpool(parse_wav, body, parser_settings)
        except WavError as exc:
            status = 415 if isinstance(exc, UnsupportedEncoding) else 400
            detail = ParseErrorDetail(error=exc.kind, message=str(exc))
            raise HTTPException(status_code=status, detail=detail.model_dump()) from exc
        return _to_response(parsed, preview_frames)

    return app


def _to_response(parsed: ParsedWav, preview_frames: int) -> ParseResponse:
    fmt = parsed.format
    fields = fmt.fields
    return ParseResponse(
        riff=RiffSummary(
            chunk_id=parsed.riff.chunk_id.decode("ascii"),
            body_size=parsed.riff.body_size,
            form_type=parsed.riff.form_type.decode("ascii"),
        ),
        format=FormatSummary(
            encoding=fmt.format_tag.name.lower(),
            format_tag=int(fmt.format_tag),
            body_size=fields.body_size,
            channels=fields.channels,
            sample_rate=fields.sample_rate,
            byte_rate=fields.byte_rate,
            block_align=fields.block_align,
            bits_per_sample=fields.bits_per_sample,
            extension_size=fmt.extension_size if isinstance(fmt, FloatPCM) else 0,
        ),
        fact=(
            FactSummary(body_size=parsed.fact.body_size, frame_count=parsed.fact.frame_count)
            if parsed.fact is not None
            else None
        ),
        data=DataSummary(body_size=parsed.data.body_size),
        frame_count=parsed.frame_count,
        duration_sec=parsed.duration_sec,
        frames=[
            FramePreview(layout=frame.layout.value, values=[sample.value for sample in frame.channels])
            for frame in parsed.frames[:preview_frames]
        ],
    )


app = create_app()
