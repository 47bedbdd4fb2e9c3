"""
Rich renderables for the run header and summary.
"""

from __future__ import annotations

from pathlib import Path

from rich.panel import Panel
from rich.table import Table

from ..config import AppConfig
from ..core.types import KeyframeSequence


def _two_column_table() -> Table:
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column(style="dim")
    table.add_column()
    return table


def create_run_header(config: AppConfig, output_path: Path, frame_count: int) -> Panel:
    """Build the header panel describing the run configuration."""
    inp = config.input
    vp = config.viewport
    sampling = config.sampling
    if inp.discover:
        frames = f"{frame_count} discovered (from {inp.frame_start})"
    else:
        frames = f"{inp.frame_start}..{inp.frame_end} ({frame_count} files)"

    table = _two_column_table()
    table.add_row("Source:", str(inp.svg_dir))
    table.add_row("Frames:", frames)
    table.add_row("Output:", str(output_path))
    table.add_row("Format:", config.output.format.value.upper())
    table.add_row("Viewport:", f"{vp.width}x{vp.height} (edge {vp.edge_margin:g}, divisor {vp.divisor:g})")
    table.add_row("Spacing:", f"{sampling.point_spacing:g}")
    table.add_row("Axis signs:", f"x {sampling.x_sign:+d}, y {sampling.y_sign:+d}")
    table.add_row("FPS:", str(sampling.fps))
    breaks = f"margin {config.breaks.eoc_margin}" if config.curve_breaks else "off"
    table.add_row("Curve breaks:", breaks)
    return Panel(table, title="[bold cyan]Run Configuration[/bold cyan]", border_style="cyan", title_align="left")


def create_summary(keyframes: KeyframeSequence, files: int, paths: int, fps: int, elapsed: float) -> Panel:
    """Build the summary panel shown after a successful run."""
    table = _two_column_table()
    table.add_row("Frames Read:", f"{files:,}")
    table.add_row("Paths Sampled:", f"{paths:,}")
    table.add_row("Keyframes:", f"[green]{len(keyframes):,}[/]")
    table.add_row("Curve Breaks:", f"{len(keyframes.breaks):,}")
    table.add_row("Clip Length:", f"{keyframes.duration(fps):.3f}s")
    bounds = keyframes.bounds()
    if bounds is not None:
        table.add_row(
            "Extent:",
            f"x [{bounds.min_x:.3f}, {bounds.max_x:.3f}]  y [{bounds.min_y:.3f}, {bounds.max_y:.3f}]",
        )
    table.add_row("Total Time:", f"{elapsed:.1f}s")
    return Panel(table, title="[bold cyan]Summary[/bold cyan]", border_style="cyan", title_align="left")
