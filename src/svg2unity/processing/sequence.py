"""
Frame sequence processing for svg2unity.

Resolves the numbered SVG frames and runs every path of every frame through a
single PathSampler, strictly one file at a time.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..config import AppConfig, InputSettings
from ..core.errors import ConversionError
from ..core.types import KeyframeSequence
from ..output.logger import SimpleLogger
from ..utils.path import find_frame_files, numbered_frames
from .sampler import PathSampler
from .tokenizer import read_path_data, tokenize


@dataclass
class SequenceResult:
    """Outcome of a traversal."""

    keyframes: KeyframeSequence
    files: int
    paths: int


def resolve_frames(settings: InputSettings) -> list[Path]:
    """List the frame files to read, in playback order."""
    if settings.discover:
        return find_frame_files(settings.svg_dir, settings.extension, settings.frame_start)
    return numbered_frames(
        settings.svg_dir, settings.frame_start, settings.frame_end, settings.pad_digits, settings.extension
    )


class SequenceProcessor:
    """Processor turning a frame sequence into one KeyframeSequence."""

    def __init__(self, config: AppConfig, logger: SimpleLogger | None = None) -> None:
        self.config = config
        self.logger = logger
        self.keyframes = KeyframeSequence()
        self.sampler = PathSampler(
            self.keyframes,
            config.viewport,
            config.sampling,
            curve_breaks=config.curve_breaks,
            eoc_margin=config.breaks.eoc_margin,
        )

    def process_file(self, svg_file: Path) -> int:
        """Sample every path of one frame; returns the number of paths read."""
        self.sampler.reset()
        paths = read_path_data(svg_file)
        for d in paths:
            self.sampler.feed(tokenize(d))
        return len(paths)

    def run(self, frames: list[Path]) -> SequenceResult:
        """
        Process frames in order, aborting on the first failure.

        Raises:
            ConversionError: from the first frame that fails, with `frame` set to that file
        """
        total = len(frames)
        interval = self.config.report.progress_interval
        path_count = 0

        for i, svg_file in enumerate(frames, 1):
            try:
                path_count += self.process_file(svg_file)
            except ConversionError as ex:
                ex.frame = svg_file
                raise

            if self.logger and (i % interval == 0 or i == total):
                self.logger.progress(i, total, svg_file, len(self.keyframes))

        return SequenceResult(keyframes=self.keyframes, files=total, paths=path_count)
