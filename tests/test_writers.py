from __future__ import annotations

import io
from pathlib import Path

import pytest

from svg2unity.config import AppConfig, CurveBreakSettings, OutputFormat, OutputSettings
from svg2unity.core.errors import OutputCreateError
from svg2unity.core.types import KeyframeSequence, Point
from svg2unity.output.melon_script import write_melon_script
from svg2unity.output.unity_anim import write_anim
from svg2unity.output.writers import open_output, write_output


def sample_sequence() -> KeyframeSequence:
    seq = KeyframeSequence()
    seq.append(Point(0.5, -0.25))
    seq.hold(Point(0.5, -0.25), 2)
    seq.mark_break()
    seq.append(Point(-1.0, 0.125))
    return seq


def render_anim(seq: KeyframeSequence, fps: int = 4) -> str:
    buf = io.StringIO()
    write_anim(seq, buf, OutputSettings(name="Clip"), fps)
    return buf.getvalue()


def render_cs(seq: KeyframeSequence, **settings) -> str:
    buf = io.StringIO()
    write_melon_script(seq, buf, OutputSettings(**settings), 1024, CurveBreakSettings(eoc_margin=2))
    return buf.getvalue()


def test_anim_header_and_sample_rate():
    text = render_anim(sample_sequence())
    assert text.startswith("%YAML 1.1\n%TAG !u! tag:unity3d.com,2011:\n")
    assert "  m_Name: Clip\n" in text
    assert "  m_SampleRate: 4\n" in text
    assert "    m_StopTime: 1\n" in text
    assert text.endswith("  m_Events: []\n")


def test_anim_position_and_editor_curves():
    text = render_anim(sample_sequence())
    assert text.count("        value: {x: 0.5, y: 0, z: -0.25}\n") == 3
    assert "        time: 0.75\n        value: {x: -1, y: 0, z: 0.125}\n" in text
    # x and z editor curves each carry every keyframe
    assert text.count("        tangentMode: 103\n") == 8
    assert "    attribute: m_LocalPosition.x\n" in text
    assert "    attribute: m_LocalPosition.z\n" in text
    assert "        time: 0.25\n        value: -0.25\n" in text


def test_anim_uses_six_significant_digits():
    seq = KeyframeSequence()
    seq.append(Point(1 / 3, 0.0))
    seq.append(Point(0.0, 0.0))
    text = render_anim(seq, fps=1024)
    assert "value: {x: 0.333333, y: 0, z: 0}" in text
    assert "time: 0.000976562\n" in text


def test_cs_embeds_data_and_breaks():
    text = render_cs(sample_sequence())
    assert "\t\t\t\tdouble[] dataXY = {0.500,-0.250,0.500,-0.250,0.500,-0.250,-1.000,0.125};\n" in text
    assert "\t\t\t\tint[] eocIndices = {3};\n" in text
    assert "\t\t\t\tint vecLen = 4;\n" in text
    assert "\t\t\t\tint eocLen = 1;\n" in text
    assert "\t\t\t\tint eocMargin = 2;\n" in text
    assert "\t\t\t\tfloat zIn = 3.460f;\n" in text
    assert "\t\t\t\tfloat zOut = 512.000f;\n" in text
    assert "\t\t\t\tint fps = 1024;\n" in text


def test_cs_uses_configured_names():
    text = render_cs(
        sample_sequence(),
        name="Tracer",
        namespace="TracerMod",
        scene_name="Lab",
        target_object="/Scope",
        decimal_places=1,
    )
    assert "namespace TracerMod\n" in text
    assert "\tpublic class Tracer : MelonMod\n" in text
    assert 'SceneManager.GetActiveScene().name == "Lab"' in text
    assert 'GameObject.Find("/Scope")' in text
    assert 'string clipName = "Tracer";' in text
    assert "dataXY = {0.5,-0.2,0.5,-0.2,0.5,-0.2,-1.0,0.1};" in text


def test_cs_with_empty_sequence():
    text = render_cs(KeyframeSequence())
    assert "double[] dataXY = {};" in text
    assert "int[] eocIndices = {};" in text
    assert "int vecLen = 0;" in text


def test_write_output_dispatches_on_format():
    seq = sample_sequence()
    for fmt, marker in ((OutputFormat.ANIM, "AnimationClip:"), (OutputFormat.CS, "using MelonLoader;")):
        config = AppConfig().with_overrides({"output": {"format": fmt}})
        buf = io.StringIO()
        write_output(seq, buf, config)
        assert marker in buf.getvalue()


def test_open_output_failure(tmp_path: Path):
    with pytest.raises(OutputCreateError):
        open_output(tmp_path / "missing" / "out.cs")


def test_keyframe_sequence_bounds_and_timing():
    seq = sample_sequence()
    assert seq.duration(4) == 1.0
    assert seq.time_at(3, 4) == 0.75
    assert seq.as_array().shape == (4, 2)
    assert seq.bounds() == (-1.0, -0.25, 0.5, 0.125)
    assert KeyframeSequence().bounds() is None
    assert KeyframeSequence().as_array().shape == (0, 2)
