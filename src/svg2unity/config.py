"""
Consolidated configuration system for svg2unity.

This module provides a centralized Pydantic-based configuration system that groups
the viewport geometry, sampling thresholds, curve-break timing, input discovery and
output naming into a single, validated structure with environment variable support.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.errors import UnknownExtensionError

# =============================================================================
# VIEWPORT SETTINGS
# =============================================================================

class ViewportSettings(BaseModel):
    """Source SVG viewport geometry and the mapping to normalized coordinates."""

    model_config = ConfigDict(frozen=True)

    width: Annotated[int, Field(
        gt=0,
        description="Width of the SVG coordinate space in path units"
    )] = 14400

    height: Annotated[int, Field(
        gt=0,
        description="Height of the SVG coordinate space in path units"
    )] = 10800

    edge_margin: Annotated[float, Field(
        ge=0,
        description="Points closer than this to any viewport edge are treated as clipped"
    )] = 30

    scale_inset: Annotated[float, Field(
        description="Subtracted from the width before halving to get the normalization divisor"
    )] = 2000

    @model_validator(mode="after")
    def validate_geometry(self) -> ViewportSettings:
        """Ensure the margin leaves an interior and the divisor is positive."""
        if 2 * self.edge_margin >= min(self.width, self.height):
            raise ValueError(
                f"edge_margin {self.edge_margin} leaves no interior in a {self.width}x{self.height} viewport"
            )
        if self.width - self.scale_inset <= 0:
            raise ValueError(f"scale_inset {self.scale_inset} must be smaller than width {self.width}")
        return self

    @property
    def center_x(self) -> float:
        return self.width / 2

    @property
    def center_y(self) -> float:
        return self.height / 2

    @property
    def divisor(self) -> float:
        """Scale from path units to output units."""
        return (self.width - self.scale_inset) / 2

    def is_interior(self, x: float, y: float) -> bool:
        """True when (x, y) is at least ``edge_margin`` away from every edge."""
        m = self.edge_margin
        return m <= x <= self.width - m and m <= y <= self.height - m


# =============================================================================
# SAMPLING SETTINGS
# =============================================================================

class SamplingSettings(BaseModel):
    """Point spacing and axis orientation of the emitted keyframes."""

    model_config = ConfigDict(frozen=True)

    point_spacing: Annotated[float, Field(
        ge=0.0,
        description="Minimum path distance between accepted points (0 keeps every interior point)"
    )] = 0.0

    x_sign: Annotated[Literal[-1, 1], Field(
        description="Sign applied to the normalized horizontal axis"
    )] = -1

    y_sign: Annotated[Literal[-1, 1], Field(
        description="Sign applied to the normalized vertical axis"
    )] = 1

    fps: Annotated[int, Field(
        ge=1,
        description="Keyframes played per second"
    )] = 1024


# =============================================================================
# CURVE BREAK SETTINGS
# =============================================================================

class CurveBreakSettings(BaseModel):
    """Hold frames and depth pulse inserted between disjoint curves."""

    model_config = ConfigDict(frozen=True)

    enabled: Annotated[bool | None, Field(
        description="Insert hold frames at curve breaks; None follows the output format"
    )] = None

    eoc_margin: Annotated[int, Field(
        ge=0,
        description="Hold frames added on each side of a break"
    )] = 4

    z_in: Annotated[float, Field(
        description="Depth at which the tracer is barely inside the camera frustum"
    )] = 3.46

    z_out: Annotated[float, Field(
        description="Depth at which the tracer is well outside the camera frustum"
    )] = 512


# =============================================================================
# INPUT SETTINGS
# =============================================================================

class InputSettings(BaseModel):
    """Location and numbering of the SVG frame files."""

    model_config = ConfigDict(frozen=True)

    svg_dir: Annotated[Path, Field(
        description="Directory holding the numbered SVG frames"
    )] = Path("svgs")

    frame_start: Annotated[int, Field(
        ge=1,
        description="First frame number to read"
    )] = 1

    frame_end: Annotated[int, Field(
        ge=1,
        description="Last frame number to read"
    )] = 6562

    discover: Annotated[bool, Field(
        description="Scan svg_dir for numbered frames instead of using frame_end"
    )] = False

    pad_digits: Annotated[int, Field(
        ge=1,
        le=10,
        description="Zero-padding width of frame file names"
    )] = 4

    extension: Annotated[str, Field(
        description="Frame file extension"
    )] = ".svg"

    @field_validator('extension')
    @classmethod
    def validate_extension_format(cls, v):
        """Ensure extension starts with dot."""
        if not v.startswith('.'):
            raise ValueError(f"Extension must start with dot, got: {v}")
        return v.lower()

    @model_validator(mode="after")
    def validate_range(self) -> InputSettings:
        if not self.discover and self.frame_end < self.frame_start:
            raise ValueError(f"frame_end {self.frame_end} is before frame_start {self.frame_start}")
        return self


# =============================================================================
# OUTPUT FORMAT ENUM
# =============================================================================

class OutputFormat(str, Enum):
    """Supported output files."""

    CS = "cs"
    ANIM = "anim"

    @property
    def extension(self) -> str:
        """File extension for outputs."""
        return self.value

    @property
    def breaks_by_default(self) -> bool:
        """Only the generated script animates depth, so only it needs break frames."""
        return self is OutputFormat.CS

    @classmethod
    def from_path(cls, path: Path) -> OutputFormat:
        """Infer the format from a file suffix.

        Raises:
            UnknownExtensionError: when the suffix has no writer
        """
        ext = path.suffix.lstrip(".").lower()
        try:
            return cls(ext)
        except ValueError:
            raise UnknownExtensionError(path.suffix or "(none)") from None


# =============================================================================
# OUTPUT SETTINGS
# =============================================================================

class OutputSettings(BaseModel):
    """Naming and formatting of the generated animation."""

    model_config = ConfigDict(frozen=True)

    name: Annotated[str, Field(
        min_length=1,
        description="Clip name; also the default output file stem"
    )] = "OsziApple"

    format: OutputFormat = OutputFormat.CS

    path: Annotated[Path | None, Field(
        description="Output file; defaults to '{name}.{format}' in the working directory"
    )] = None

    decimal_places: Annotated[int, Field(
        ge=0,
        le=15,
        description="Decimals used for numeric literals in the generated script"
    )] = 3

    bone_path: str = "Armature/Bone_001"
    binding_path_hash: int = 2729491044
    scene_name: str = "LAB_Labyrinth"
    target_object: str = "/Events/LAB_PatternPond/Oszilloskop"
    namespace: str = "OsziAppleMod"
    loaded_message: str = "Bad Apple Loaded Successfully"

    @model_validator(mode="before")
    @classmethod
    def infer_format_from_path(cls, data: Any) -> Any:
        """Take the format from the path suffix; an explicit format must agree with it.

        Raises:
            UnknownExtensionError: when the path suffix has no writer
        """
        if not isinstance(data, dict) or data.get("path") is None:
            return data
        path = Path(data["path"])
        inferred = OutputFormat.from_path(path)
        given = data.get("format")
        if given is None:
            return {**data, "format": inferred}
        if OutputFormat(given) is not inferred:
            raise ValueError(
                f"format {OutputFormat(given).value!r} does not match output file suffix {path.suffix!r}"
            )
        return data

    def resolve_path(self) -> Path:
        return self.path if self.path is not None else Path(f"{self.name}.{self.format.extension}")


# =============================================================================
# REPORT SETTINGS
# =============================================================================

class ReportSettings(BaseModel):
    """Console and log file reporting."""

    model_config = ConfigDict(frozen=True)

    progress_interval: Annotated[int, Field(
        gt=0,
        description="Number of frames between progress lines"
    )] = 500

    log_file: Path | None = None


# =============================================================================
# MAIN APPLICATION CONFIGURATION
# =============================================================================

class AppConfig(BaseSettings):
    """
    Main application configuration with environment variable support.

    All settings can be overridden via environment variables with SVG2UNITY_ prefix.
    Example: SVG2UNITY_SAMPLING__POINT_SPACING=40
    """

    model_config = SettingsConfigDict(
        env_prefix="SVG2UNITY_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    viewport: ViewportSettings = ViewportSettings()
    sampling: SamplingSettings = SamplingSettings()
    breaks: CurveBreakSettings = CurveBreakSettings()
    input: InputSettings = InputSettings()
    output: OutputSettings = OutputSettings()
    report: ReportSettings = ReportSettings()

    @property
    def curve_breaks(self) -> bool:
        """Whether the sampler inserts hold frames at curve breaks for this run."""
        if self.breaks.enabled is not None:
            return self.breaks.enabled
        return self.output.format.breaks_by_default

    def with_overrides(self, overrides: dict[str, dict[str, Any]]) -> AppConfig:
        """Return a copy with per-section values replaced and re-validated.

        Args:
            overrides: section name -> {field: value}; None values are ignored

        Raises:
            pydantic.ValidationError: when an overridden section fails validation
            UnknownExtensionError: when an output path has no writer
        """
        updates: dict[str, BaseModel] = {}
        for section, values in overrides.items():
            values = {k: v for k, v in values.items() if v is not None}
            if not values:
                continue
            current: BaseModel = getattr(self, section)
            # Only explicitly set fields are carried over so derived values are re-derived.
            updates[section] = type(current).model_validate({**current.model_dump(exclude_unset=True), **values})
        return self.model_copy(update=updates)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def create_config_from_env() -> AppConfig:
    """Create a new configuration instance from environment variables."""
    return AppConfig()
