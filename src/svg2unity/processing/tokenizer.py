"""
SVG reading utilities for svg2unity.

Pulls the ``d`` attribute out of every ``<path>`` element of a frame file and
splits it into the whitespace-delimited tokens the sampler consumes.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path

from ..core.errors import PathSyntaxError, SvgOpenError

_SEPARATORS = re.compile(r"[\s,]+")


def _local_name(tag: str) -> str:
    # "{http://www.w3.org/2000/svg}path" -> "path"
    return tag.rsplit("}", 1)[-1]


def read_path_data(svg_file: Path) -> list[str]:
    """Return the ``d`` attribute of every path element, in document order.

    Args:
        svg_file: SVG frame to read.

    Returns:
        List of path data strings; empty if the document has no paths.

    Raises:
        SvgOpenError: if the file cannot be opened or read.
        PathSyntaxError: if the file is not well-formed XML.
    """
    try:
        with open(svg_file, "rb") as f:
            tree = ET.parse(f)
    except OSError as ex:
        raise SvgOpenError(svg_file, ex.strerror or str(ex)) from ex
    except ET.ParseError as ex:
        raise PathSyntaxError(f"{svg_file}: {ex}") from ex

    return [
        el.attrib["d"]
        for el in tree.getroot().iter()
        if isinstance(el.tag, str) and _local_name(el.tag) == "path" and "d" in el.attrib
    ]


def tokenize(path_data: str) -> list[str]:
    """Split path data on whitespace and commas."""
    return [t for t in _SEPARATORS.split(path_data.strip()) if t]
