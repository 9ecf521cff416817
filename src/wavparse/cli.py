"""Command line entry point: parse a WAV file and print its structure."""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Sequence

from wavparse.config import ParserSettings
from wavparse.errors import WavError
from wavparse.loader import load_wav
from wavparse.models import FloatPCM, ParsedWav, SampleFrame


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wavparse", description="Parse a RIFF/WAVE file and print its chunks.")
    parser.add_argument("path", help="WAV file to parse")
    parser.add_argument("--frames", type=int, default=0, help="number of leading frames to print")
    parser.add_argument("--skip-unknown-chunks", action="store_true", help="skip chunks such as LIST before data")
    parser.add_argument(
        "--no-strict-block-align",
        action="store_true",
        help="skip the block align check; frames use channels x bits/8",
    )
    return parser


def describe(parsed: ParsedWav, frame_limit: int = 0) -> list[str]:
    fmt = parsed.format
    lines = [
        f"riff: size={parsed.riff.body_size} form={parsed.riff.form_type.decode('ascii')}",
        (
            f"fmt: tag={fmt.format_tag.name} channels={fmt.channels} rate={fmt.sample_rate} "
            f"byte_rate={fmt.fields.byte_rate} block_align={fmt.block_align} bits={fmt.bits_per_sample}"
        ),
    ]
    if isinstance(fmt, FloatPCM):
        lines.append(f"fmt extension: {fmt.extension_size} bytes")
    if parsed.fact is None:
        lines.append("fact: absent")
    else:
        lines.append(f"fact: frames={parsed.fact.frame_count}")
    lines.append(f"data: size={parsed.data.body_size} frames={parsed.frame_count} duration={parsed.duration_sec:.3f}s")
    for index, frame in enumerate(parsed.frames[: max(frame_limit, 0)]):
        lines.append(f"  [{index}] {_format_frame(frame)}")
    return lines


def _format_frame(frame: SampleFrame) -> str:
    values = ", ".join(str(sample.value) for sample in frame.channels)
    return f"{frame.layout.value}({values})"


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = ParserSettings.from_env()
    if args.skip_unknown_chunks:
        settings = replace(settings, skip_unknown_chunks=True)
    if args.no_strict_block_align:
        settings = replace(settings, strict_block_align=False)
    try:
        parsed = load_wav(args.path, settings)
    except (WavError, FileNotFoundError) as exc:
        print(f"parse failed: {exc}")
        return 1
    for line in describe(parsed, args.frames):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
