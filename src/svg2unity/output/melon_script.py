"""
MelonLoader C# script writer.

The generated mod embeds the keyframes as an interleaved ``dataXY`` literal and
the curve breaks as ``eocIndices``. When the configured scene loads it builds a
legacy AnimationClip: x/y position curves from the data, plus a z curve that
pushes the tracer out of the camera frustum around every break so no trail is
drawn between disjoint curves.
"""

from __future__ import annotations

from typing import TextIO

from ..config import CurveBreakSettings, OutputSettings
from ..core.types import KeyframeSequence


def write_melon_script(
    keyframes: KeyframeSequence,
    out: TextIO,
    settings: OutputSettings,
    fps: int,
    breaks: CurveBreakSettings,
) -> None:
    """Write the mod source for ``keyframes`` to ``out``."""
    places = settings.decimal_places

    def num(value: float) -> str:
        return f"{value:.{places}f}"

    data_xy = ",".join(f"{num(p.x)},{num(p.y)}" for p in keyframes)
    eoc = ",".join(str(i) for i in keyframes.breaks)
    bone = settings.bone_path

    out.write(
        "using MelonLoader;\n"
        "using UnityEngine;\n"
        "using UnityEngine.SceneManagement;\n"
        f"namespace {settings.namespace}\n"
        "{\n"
        "\tpublic class Storage\n"
        "\t{\n"
        "\t\tpublic bool isLoaded = false;\n"
        "\t}\n"
        f"\tpublic class {settings.name} : MelonMod\n"
        "\t{\n"
        "\t\tStorage storage;\n"
        "\t\tpublic override void OnUpdate()\n"
        "\t\t{\n"
        "\t\t\tif(storage == null)\n"
        "\t\t\t{\n"
        "\t\t\t\tstorage = new Storage();\n"
        "\t\t\t}\n"
        f"\t\t\tif(!storage.isLoaded && SceneManager.GetActiveScene().name == \"{settings.scene_name}\")\n"
        "\t\t\t{\n"
    )
    # even indices hold x, odd indices hold y
    out.write(f"\t\t\t\tdouble[] dataXY = {{{data_xy}}};\n")
    out.write(f"\t\t\t\tint[] eocIndices = {{{eoc}}};\n")
    out.write(
        f"\t\t\t\tstring clipName = \"{settings.name}\";\n"
        f"\t\t\t\tint fps = {fps};\n"
        f"\t\t\t\tint vecLen = {len(keyframes)};\n"
        f"\t\t\t\tint eocLen = {len(keyframes.breaks)};\n"
        f"\t\t\t\tint eocMargin = {breaks.eoc_margin};\n"
        f"\t\t\t\tfloat zIn = {num(breaks.z_in)}f;\n"
        f"\t\t\t\tfloat zOut = {num(breaks.z_out)}f;\n"
        "\t\t\t\tstring[] dims = {\"x\", \"y\"};\n"
    )
    out.write(
        f"\t\t\t\tGameObject osziObj = GameObject.Find(\"{settings.target_object}\");\n"
        "\t\t\t\tAnimation animn = osziObj.GetComponent<Animation>();\n"
        "\t\t\t\tAnimationClip clip = new AnimationClip();\n"
        "\t\t\t\tKeyframe[] keys = new Keyframe[vecLen];\n"
        "\t\t\t\tKeyframe[] keysEoc = new Keyframe[eocLen * 3];\n"
        "\t\t\t\tint index;\n"
        "\t\t\t\tint dimInd;\n"
        "\t\t\t\tif (!animn) animn = osziObj.AddComponent<Animation>();\n"
        "\t\t\t\tclip.name = clipName;\n"
        "\t\t\t\tclip.legacy = true;\n"
    )
    out.write(
        "\t\t\t\tfor(dimInd = 0; dimInd < dims.Length; ++dimInd)\n"
        "\t\t\t\t{\n"
        "\t\t\t\t\tfor(index = 0; index < vecLen; ++index)\n"
        "\t\t\t\t\t{\n"
        "\t\t\t\t\t\tkeys[index] = new Keyframe((float)index / fps, (float)dataXY[index * dims.Length + dimInd]);\n"
        "\t\t\t\t\t}\n"
        f"\t\t\t\t\tclip.SetCurve(\"{bone}\", Transform.Il2CppType, \"localPosition.\" + dims[dimInd], new AnimationCurve(keys));\n"
        "\t\t\t\t}\n"
    )
    # z pulses zIn -> zOut -> zIn around each break
    out.write(
        "\t\t\t\tfor(index = 0; index < eocLen; ++index)\n"
        "\t\t\t\t{\n"
        "\t\t\t\t\tkeysEoc[index * 3] = new Keyframe((float)(eocIndices[index] - eocMargin) / fps, zIn);\n"
        "\t\t\t\t\tkeysEoc[index * 3 + 1] = new Keyframe((float)(eocIndices[index]) / fps, zOut);\n"
        "\t\t\t\t\tkeysEoc[index * 3 + 2] = new Keyframe((float)(eocIndices[index] + eocMargin) / fps, zIn);\n"
        "\t\t\t\t}\n"
        f"\t\t\t\tclip.SetCurve(\"{bone}\", Transform.Il2CppType, \"localPosition.z\", new AnimationCurve(keysEoc));\n"
    )
    out.write(
        "\t\t\t\tosziObj.GetComponent<Animator>().enabled = false;\n"
        "\t\t\t\tanimn.clip = clip;\n"
        "\t\t\t\tanimn.AddClip(clip, clip.name);\n"
        "\t\t\t\tanimn.wrapMode = WrapMode.Loop;\n"
        "\t\t\t\tanimn.Play();\n"
        "\t\t\t\tstorage.isLoaded = true;\n"
        f"\t\t\t\tMelonLogger.Msg(\"{settings.loaded_message}\");\n"
        "\t\t\t}\n"
        "\t\t}\n"
        "\t}\n"
        "}\n"
    )
