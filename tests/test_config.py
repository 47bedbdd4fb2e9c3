from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from svg2unity.config import (
    AppConfig,
    InputSettings,
    OutputFormat,
    OutputSettings,
    SamplingSettings,
    ViewportSettings,
)
from svg2unity.core.errors import ExitCode, UnknownExtensionError


def test_default_viewport_geometry():
    vp = ViewportSettings()
    assert (vp.center_x, vp.center_y) == (7200, 5400)
    assert vp.divisor == 6200
    assert vp.is_interior(30, 30)
    assert not vp.is_interior(29.9, 500)
    assert not vp.is_interior(500, 10771)


def test_viewport_rejects_margin_without_interior():
    with pytest.raises(ValidationError):
        ViewportSettings(width=100, height=50, edge_margin=25)


def test_viewport_rejects_non_positive_divisor():
    with pytest.raises(ValidationError):
        ViewportSettings(width=1000, height=1000, scale_inset=1000)


def test_axis_sign_must_be_unit():
    with pytest.raises(ValidationError):
        SamplingSettings(x_sign=2)


def test_negative_spacing_rejected():
    with pytest.raises(ValidationError):
        SamplingSettings(point_spacing=-1)


def test_input_extension_and_range():
    assert InputSettings(extension=".SVG").extension == ".svg"
    with pytest.raises(ValidationError):
        InputSettings(extension="svg")
    with pytest.raises(ValidationError):
        InputSettings(frame_start=10, frame_end=5)
    # the range is irrelevant when scanning
    assert InputSettings(frame_start=10, frame_end=5, discover=True).discover


def test_output_format_from_path():
    assert OutputFormat.from_path(Path("OsziApple.cs")) is OutputFormat.CS
    assert OutputFormat.from_path(Path("clip.ANIM")) is OutputFormat.ANIM
    with pytest.raises(UnknownExtensionError) as exc:
        OutputFormat.from_path(Path("clip.yaml"))
    assert exc.value.exit_code is ExitCode.UNKNOWN_EXT


def test_curve_breaks_follow_format_unless_set():
    config = AppConfig()
    assert config.curve_breaks is True
    anim = config.with_overrides({"output": {"format": OutputFormat.ANIM}})
    assert anim.curve_breaks is False
    forced = anim.with_overrides({"breaks": {"enabled": True}})
    assert forced.curve_breaks is True


def test_with_overrides_ignores_none_and_revalidates():
    config = AppConfig()
    same = config.with_overrides({"sampling": {"fps": None}})
    assert same.sampling.fps == 1024
    with pytest.raises(ValidationError):
        config.with_overrides({"input": {"pad_digits": 0}})


def test_exit_code_messages():
    assert ExitCode.NONE.message == "Output file successfully generated"
    assert ExitCode.FCREATE_FAIL.message == "Error: failure to create output file"
    assert ExitCode.MALFORMED_PATH.message == "Error: malformed SVG path data"


def test_output_format_follows_path_suffix():
    assert OutputSettings(path=Path("clip.anim")).format is OutputFormat.ANIM
    assert OutputSettings(path=Path("clip.cs"), format=OutputFormat.CS).format is OutputFormat.CS
    with pytest.raises(ValidationError):
        OutputSettings(path=Path("clip.cs"), format=OutputFormat.ANIM)
    with pytest.raises(UnknownExtensionError):
        OutputSettings(path=Path("clip.txt"), format=OutputFormat.CS)


def test_overriding_path_rederives_format():
    config = AppConfig().with_overrides({"output": {"path": Path("clip.anim")}})
    assert config.output.format is OutputFormat.ANIM
    assert config.curve_breaks is False
