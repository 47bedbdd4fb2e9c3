from __future__ import annotations

from pathlib import Path

import pytest

SVG_TEMPLATE = """<?xml version="1.0" standalone="no"?>
<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 20010904//EN"
 "http://www.w3.org/TR/2001/REC-SVG-20010904/DTD/svg10.dtd">
<svg version="1.0" xmlns="http://www.w3.org/2000/svg"
 width="1440.000000pt" height="1080.000000pt" viewBox="0 0 1440.000000 1080.000000"
 preserveAspectRatio="xMidYMid meet">
<g transform="translate(0.000000,1080.000000) scale(0.100000,-0.100000)"
fill="#000000" stroke="none">
{paths}
</g>
</svg>
"""

# Coordinates chosen inside the default 14400x10800 viewport.
THREE_FRAMES = [
    ["M1000 1000 l100 0 100 0z"],
    ["M2000 2000 c10 10 20 20 50 0 l0 50z m100 100 l10 10z"],
    ["M7200 5400 l6200 0z"],
]


def svg_text(*path_data: str) -> str:
    return SVG_TEMPLATE.format(paths="\n".join(f'<path d="{d}"/>' for d in path_data))


def write_svg(directory: Path, index: int, *path_data: str, pad: int = 4) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{index:0{pad}d}.svg"
    path.write_text(svg_text(*path_data), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    import os

    for key in list(os.environ):
        if key.upper().startswith("SVG2UNITY_"):
            monkeypatch.delenv(key)


@pytest.fixture
def svg_dir(tmp_path: Path) -> Path:
    """Directory with three numbered frames 0001.svg..0003.svg."""
    d = tmp_path / "svgs"
    for i, paths in enumerate(THREE_FRAMES, 1):
        write_svg(d, i, *paths)
    return d
