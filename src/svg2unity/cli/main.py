#!/usr/bin/env python3
"""
svg2unity: Convert a numbered SVG path sequence into a Unity keyframe animation.

Every frame's path commands are sampled into one keyframe sequence, which is
written either as a Unity .anim clip or as a MelonLoader C# script that builds
the same curves at runtime.
"""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.console import Console

from ..config import AppConfig, OutputFormat, create_config_from_env
from ..core.errors import ConversionError, ExitCode, SvgOpenError
from ..output.logger import SimpleLogger
from ..output.report import create_run_header, create_summary
from ..output.writers import open_output, write_output
from ..processing.sequence import SequenceProcessor, resolve_frames

console = Console()


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    Unset options are None so that environment and built-in defaults apply.
    """
    p = argparse.ArgumentParser(
        prog="svg2unity",
        description="Convert numbered SVG path frames to a Unity .anim clip or MelonLoader C# script.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument("-d", "--svg-dir", type=Path, help="Directory holding the numbered SVG frames")
    p.add_argument("-o", "--output", type=Path, help="Output file. Defaults to '{name}.{format}'")
    p.add_argument("--format", choices=[f.value for f in OutputFormat], help="Output format (inferred from -o when omitted)")
    p.add_argument("--name", help="Clip and mod class name")

    frames = p.add_argument_group("frames")
    frames.add_argument("--start", type=int, help="First frame number")
    frames.add_argument("--end", type=int, help="Last frame number")
    frames.add_argument(
        "--discover",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Scan the SVG directory instead of using --end",
    )
    frames.add_argument("--pad-digits", type=int, help="Zero-padding width of frame file names")

    sampling = p.add_argument_group("sampling")
    sampling.add_argument("--spacing", type=float, help="Minimum path distance between keyframes (0 keeps every point)")
    sampling.add_argument("--edge", type=float, help="Drop points closer than this to the viewport edge")
    sampling.add_argument("--width", type=int, help="SVG viewport width in path units")
    sampling.add_argument("--height", type=int, help="SVG viewport height in path units")
    sampling.add_argument("--scale-inset", type=float, help="Normalization divisor is (width - inset) / 2")
    sampling.add_argument("--x-sign", type=int, choices=[-1, 1], help="Sign of the normalized x axis")
    sampling.add_argument("--y-sign", type=int, choices=[-1, 1], help="Sign of the normalized y axis")
    sampling.add_argument("--fps", type=int, help="Keyframes per second")

    breaks = p.add_argument_group("curve breaks")
    breaks.add_argument(
        "--breaks",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Insert hold frames between disjoint curves (default: on for cs, off for anim)",
    )
    breaks.add_argument("--eoc-margin", type=int, help="Hold frames on each side of a curve break")

    p.add_argument("--decimals", type=int, help="Decimal places of numbers in the generated script")
    p.add_argument("--log-file", type=Path, help="Append log lines to this file")
    p.add_argument("--progress-interval", type=int, help="Frames between progress lines")
    return p.parse_args(argv)


def resolve_format(args: argparse.Namespace) -> OutputFormat | None:
    """Pick the output format from --format, else from the -o suffix.

    Raises:
        UnknownExtensionError: if -o has a suffix with no writer
    """
    if args.format:
        return OutputFormat(args.format)
    if args.output is not None:
        return OutputFormat.from_path(args.output)
    return None


def build_config(args: argparse.Namespace, base: AppConfig | None = None) -> AppConfig:
    """Layer CLI options over the environment-backed configuration.

    Raises:
        pydantic.ValidationError: for out-of-range values
        UnknownExtensionError: for an output suffix with no writer
    """
    config = base if base is not None else create_config_from_env()
    overrides: dict[str, dict[str, Any]] = {
        "input": {
            "svg_dir": args.svg_dir,
            "frame_start": args.start,
            "frame_end": args.end,
            "discover": args.discover,
            "pad_digits": args.pad_digits,
        },
        "viewport": {
            "width": args.width,
            "height": args.height,
            "edge_margin": args.edge,
            "scale_inset": args.scale_inset,
        },
        "sampling": {
            "point_spacing": args.spacing,
            "x_sign": args.x_sign,
            "y_sign": args.y_sign,
            "fps": args.fps,
        },
        "breaks": {
            "enabled": args.breaks,
            "eoc_margin": args.eoc_margin,
        },
        "output": {
            "name": args.name,
            "format": resolve_format(args),
            "path": args.output,
            "decimal_places": args.decimals,
        },
        "report": {
            "log_file": args.log_file,
            "progress_interval": args.progress_interval,
        },
    }
    return config.with_overrides(overrides)


def run(config: AppConfig, logger: SimpleLogger) -> ExitCode:
    """Convert the configured frames; returns the exit status."""
    output_path = config.output.resolve_path()
    frames = resolve_frames(config.input)
    console.print(create_run_header(config, output_path, len(frames)))

    t0 = time.time()
    try:
        if not frames:
            raise SvgOpenError(config.input.svg_dir, "no numbered frames found")

        # The output is created up front and held open; on failure it is left behind.
        with open_output(output_path) as out:
            processor = SequenceProcessor(config, logger)
            result = processor.run(frames)
            write_output(result.keyframes, out, config)
    except ConversionError as ex:
        logger.error(str(ex))
        if ex.frame is not None:
            logger.error(f"Error occurred at file {ex.frame}")
        return ex.exit_code

    console.print(create_summary(result.keyframes, result.files, result.paths, config.sampling.fps, time.time() - t0))
    logger.success(f"Wrote {output_path}")
    return ExitCode.NONE


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    args = parse_args(argv)

    try:
        config = build_config(args)
    except ValidationError as ex:
        for err in ex.errors():
            loc = ".".join(str(part) for part in err["loc"]) or ex.title
            print(f"Invalid setting {loc}: {err['msg']}", file=sys.stderr)
        print(ExitCode.INVALID_CONFIG.message)
        return int(ExitCode.INVALID_CONFIG)
    except ConversionError as ex:
        print(str(ex), file=sys.stderr)
        print(ex.exit_code.message)
        return int(ex.exit_code)

    logger = SimpleLogger(config.report.log_file)
    try:
        code = run(config, logger)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    logger.status(code.message)
    return int(code)


if __name__ == "__main__":
    sys.exit(main())
