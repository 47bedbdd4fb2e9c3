"""
Path and file system utilities for svg2unity.

This module handles all path-related functionality including:
- Filename parsing for numbered frames
- Frame file naming and discovery
"""

from __future__ import annotations

import re
from pathlib import Path


def parse_stem(stem: str) -> tuple[str, int] | None:
    """Parse a filename stem into a (prefix, trailing_number).

    Finds a number at the very end of the stem.
    Examples:
        "frame_0001" -> ("frame_", 1)
        "0001" -> ("", 1)
        "no_number" -> None

    Args:
        stem (str): Filename stem to parse.

    Returns:
        Optional[Tuple[str, int]]: (prefix, number) if matched, else None.
    """
    match = re.search(r"(\d+)$", stem)
    if not match:
        return None
    number_str = match.group(1)
    prefix = stem[: -len(number_str)]
    return prefix, int(number_str)


def frame_file_name(index: int, pad_digits: int, extension: str = ".svg") -> str:
    """Zero-padded frame file name, e.g. ``frame_file_name(7, 4) -> "0007.svg"``."""
    return f"{index:0{pad_digits}d}{extension}"


def numbered_frames(svg_dir: Path, start: int, end: int, pad_digits: int, extension: str = ".svg") -> list[Path]:
    """Frame paths for every index in ``start..end`` inclusive, existing or not."""
    return [svg_dir / frame_file_name(i, pad_digits, extension) for i in range(start, end + 1)]


def find_frame_files(svg_dir: Path, extension: str = ".svg", start: int = 1) -> list[Path]:
    """
    Scan svg_dir for files whose stem ends in a number.

    Files are returned in numeric order; numbers below ``start`` are skipped.
    Subdirectories are not searched.

    Args:
        svg_dir: Directory to scan
        extension: Frame file extension (lowercase, with dot)
        start: Lowest frame number to include

    Returns:
        Sorted list of frame paths (empty if the directory does not exist)
    """
    if not svg_dir.is_dir():
        return []

    numbered: list[tuple[int, Path]] = []
    for f_path in svg_dir.iterdir():
        if not f_path.is_file() or f_path.suffix.lower() != extension:
            continue
        parsed = parse_stem(f_path.stem)
        if parsed and parsed[1] >= start:
            numbered.append((parsed[1], f_path))

    numbered.sort(key=lambda item: (item[0], item[1].name))
    return [p for _, p in numbered]
