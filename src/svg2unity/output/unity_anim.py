"""
Unity ``.anim`` clip writer.

Emits a legacy AnimationClip whose position and editor curves hold the sampled
keyframes: the normalized x goes to ``m_LocalPosition.x`` and the normalized y
to ``m_LocalPosition.z``. Numbers are printed with six significant digits.
"""

from __future__ import annotations

from typing import TextIO

from ..config import OutputSettings
from ..core.types import KeyframeSequence, Point


def _num(value: float) -> str:
    return f"{value:g}"


def _preamble(name: str) -> str:
    return (
        "%YAML 1.1\n"
        "%TAG !u! tag:unity3d.com,2011:\n"
        "--- !u!74 &7400000\n"
        "AnimationClip:\n"
        "  m_ObjectHideFlags: 0\n"
        "  m_CorrespondingSourceObject: {fileID: 0}\n"
        "  m_PrefabInstance: {fileID: 0}\n"
        "  m_PrefabAsset: {fileID: 0}\n"
        f"  m_Name: {name}\n"
        "  serializedVersion: 6\n"
        "  m_Legacy: 0\n"
        "  m_Compressed: 0\n"
        "  m_UseHighQualityCurve: 0\n"
        "  m_RotationCurves: []\n"
        "  m_CompressedRotationCurves: []\n"
        "  m_EulerCurves: []\n"
        "  m_PositionCurves:\n"
        "  - curve:\n"
        "      serializedVersion: 2\n"
        "      m_Curve:\n"
    )


def _position_key(point: Point, time: float) -> str:
    return (
        "      - serializedVersion: 3\n"
        f"        time: {_num(time)}\n"
        f"        value: {{x: {_num(point.x)}, y: 0, z: {_num(point.y)}}}\n"
        "        inSlope: {x: Infinity, y: 0, z: Infinity}\n"
        "        outSlope: {x: Infinity, y: 0, z: Infinity}\n"
        "        tangentMode: 0\n"
        "        weightedMode: 0\n"
        "        inWeight: {x: 0.33333334, y: 0.33333334, z: 0.33333334}\n"
        "        outWeight: {x: 0.33333334, y: 0.33333334, z: 0.33333334}\n"
    )


def _scalar_key(value: float, time: float) -> str:
    return (
        "      - serializedVersion: 3\n"
        f"        time: {_num(time)}\n"
        f"        value: {_num(value)}\n"
        "        inSlope: Infinity\n"
        "        outSlope: Infinity\n"
        "        tangentMode: 103\n"
        "        weightedMode: 0\n"
        "        inWeight: 0.33333334\n"
        "        outWeight: 0.33333334\n"
    )


def _curve_footer(bone_path: str, attribute: str | None = None) -> str:
    text = (
        "      m_PreInfinity: 2\n"
        "      m_PostInfinity: 2\n"
        "      m_RotationOrder: 4\n"
    )
    if attribute is None:
        return text + f"    path: {bone_path}\n"
    return text + (
        f"    attribute: {attribute}\n"
        f"    path: {bone_path}\n"
        "    classID: 4\n"
        "    script: {fileID: 0}\n"
    )


def _clip_settings(settings: OutputSettings, fps: int, stop_time: float) -> str:
    return (
        "  m_ScaleCurves: []\n"
        "  m_FloatCurves: []\n"
        "  m_PPtrCurves: []\n"
        f"  m_SampleRate: {fps}\n"
        "  m_WrapMode: 0\n"
        "  m_Bounds:\n"
        "    m_Center: {x: 0, y: 0, z: 0}\n"
        "    m_Extent: {x: 0, y: 0, z: 0}\n"
        "  m_ClipBindingConstant:\n"
        "    genericBindings:\n"
        "    - serializedVersion: 2\n"
        f"      path: {settings.binding_path_hash}\n"
        "      attribute: 1\n"
        "      script: {fileID: 0}\n"
        "      typeID: 4\n"
        "      customType: 0\n"
        "      isPPtrCurve: 0\n"
        "    pptrCurveMapping: []\n"
        "  m_AnimationClipSettings:\n"
        "    serializedVersion: 2\n"
        "    m_AdditiveReferencePoseClip: {fileID: 0}\n"
        "    m_AdditiveReferencePoseTime: 0\n"
        "    m_StartTime: 0\n"
        f"    m_StopTime: {_num(stop_time)}\n"
        "    m_OrientationOffsetY: 0\n"
        "    m_Level: 0\n"
        "    m_CycleOffset: 0\n"
        "    m_HasAdditiveReferencePose: 0\n"
        "    m_LoopTime: 1\n"
        "    m_LoopBlend: 0\n"
        "    m_LoopBlendOrientation: 0\n"
        "    m_LoopBlendPositionY: 0\n"
        "    m_LoopBlendPositionXZ: 0\n"
        "    m_KeepOriginalOrientation: 0\n"
        "    m_KeepOriginalPositionY: 1\n"
        "    m_KeepOriginalPositionXZ: 0\n"
        "    m_HeightFromFeet: 0\n"
        "    m_Mirror: 0\n"
    )


_CURVE_HEADER = (
    "  - curve:\n"
    "      serializedVersion: 2\n"
    "      m_Curve:\n"
)


def write_anim(keyframes: KeyframeSequence, out: TextIO, settings: OutputSettings, fps: int) -> None:
    """Write a complete Unity AnimationClip for ``keyframes`` to ``out``."""
    times = [keyframes.time_at(i, fps) for i in range(len(keyframes))]

    out.write(_preamble(settings.name))
    for point, t in zip(keyframes, times):
        out.write(_position_key(point, t))
    out.write(_curve_footer(settings.bone_path))
    out.write(_clip_settings(settings, fps, keyframes.duration(fps)))

    out.write("  m_EditorCurves:\n")
    for axis, attribute in (("x", "m_LocalPosition.x"), ("y", "m_LocalPosition.z")):
        out.write(_CURVE_HEADER)
        for point, t in zip(keyframes, times):
            out.write(_scalar_key(getattr(point, axis), t))
        out.write(_curve_footer(settings.bone_path, attribute))

    out.write(
        "  m_EulerEditorCurves: []\n"
        "  m_HasGenericRootTransform: 0\n"
        "  m_HasMotionFloatCurves: 0\n"
        "  m_Events: []\n"
    )
