"""Output dispatch: one writer per OutputFormat."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from ..config import AppConfig, OutputFormat
from ..core.errors import OutputCreateError, UnknownExtensionError
from ..core.types import KeyframeSequence
from .melon_script import write_melon_script
from .unity_anim import write_anim


def write_output(keyframes: KeyframeSequence, out: TextIO, config: AppConfig) -> None:
    """Render ``keyframes`` in the configured output format.

    Raises:
        UnknownExtensionError: if the format has no writer
    """
    fmt = config.output.format
    fps = config.sampling.fps
    if fmt is OutputFormat.ANIM:
        write_anim(keyframes, out, config.output, fps)
    elif fmt is OutputFormat.CS:
        write_melon_script(keyframes, out, config.output, fps, config.breaks)
    else:
        raise UnknownExtensionError(str(fmt))


def open_output(path: Path) -> TextIO:
    """Create (or truncate) the output file for writing.

    Raises:
        OutputCreateError: if the file cannot be created
    """
    try:
        return open(path, "w", encoding="utf-8", newline="\n")
    except OSError as ex:
        raise OutputCreateError(path, ex.strerror or str(ex)) from ex
