"""
Path sampling for svg2unity.

Walks the tokens of an SVG path, tracks the pen position through the relative
commands and turns the visited points into keyframes: points near the viewport
edge are dropped, the rest are spaced by accumulated path distance, normalized
and appended to a shared KeyframeSequence.
"""

from __future__ import annotations

from typing import Iterator

from ..config import SamplingSettings, ViewportSettings
from ..core.errors import PathSyntaxError, UnknownCommandError
from ..core.types import ORIGIN, Command, KeyframeSequence, Point

CLOSE_PATH = frozenset("zZ")


def _is_numeric_start(token: str) -> bool:
    c = token[0]
    return c.isdigit() or c in "-+."


def _parse_number(token: str) -> float:
    # A closepath may be glued to the last number of a subpath ("-15z").
    text = token.rstrip("zZ")
    try:
        return float(text)
    except ValueError:
        raise PathSyntaxError(f"Malformed number {token!r} in path data") from None


class PathSampler:
    """Stateful sampler feeding one KeyframeSequence across many paths.

    Args:
        sequence: keyframes shared by the whole run
        viewport: source geometry, edge margin and normalization
        sampling: spacing threshold and axis signs
        curve_breaks: insert hold frames and a break marker between disjoint curves
        eoc_margin: hold frames added on each side of a break
    """

    def __init__(
        self,
        sequence: KeyframeSequence,
        viewport: ViewportSettings,
        sampling: SamplingSettings,
        curve_breaks: bool = False,
        eoc_margin: int = 0,
    ) -> None:
        self.sequence = sequence
        self.viewport = viewport
        self.sampling = sampling
        self.curve_breaks = curve_breaks
        self.eoc_margin = eoc_margin
        self.reset()

    def reset(self) -> None:
        """Forget pen position and command state; called at the start of every file."""
        self.command: Command | None = None
        self.previous: Point = ORIGIN
        self.distance = 0.0
        self.new_curve = False

    # ------------------------------
    # Token walking
    # ------------------------------

    def feed(self, tokens: list[str]) -> int:
        """Process the tokens of one path.

        Returns:
            Number of keyframes appended to the sequence.

        Raises:
            UnknownCommandError: on a command letter other than M, m, c, l (or z)
            PathSyntaxError: on malformed numbers or missing arguments
        """
        before = len(self.sequence)
        it = iter(tokens)
        for token in it:
            first = self._consume_command(token, it)
            if first is None:
                continue
            self._perform(first, it)
        return len(self.sequence) - before

    def _consume_command(self, token: str, it: Iterator[str]) -> str | None:
        """Update the command state from ``token``; return the first number token."""
        if _is_numeric_start(token):
            if self.command is None:
                raise PathSyntaxError(f"Path data starts with a number: {token!r}")
            return token

        letter, rest = token[0], token[1:]
        if letter in CLOSE_PATH and not rest:
            return None
        try:
            self.command = Command(letter)
        except ValueError:
            raise UnknownCommandError(letter) from None
        if self.command.is_move:
            self.new_curve = True
        if rest:
            return rest
        return self._next(it)

    def _next(self, it: Iterator[str]) -> str:
        try:
            return next(it)
        except StopIteration:
            raise PathSyntaxError(f"Path data ends inside a '{self.command.value}' command") from None

    def _perform(self, first: str, it: Iterator[str]) -> None:
        cmd = self.command
        args = [first]
        for _ in range(cmd.skipped_args + 1):
            args.append(self._next(it))
        # Control points of a cubic are discarded; the curve is treated as a line.
        dx, dy = (_parse_number(t) for t in args[-2:])

        if cmd is Command.MOVE_ABS:
            current = Point(dx, dy)
        else:
            current = self.previous.offset(dx, dy)

        if cmd.is_move:
            self.distance = 0.0
            self.previous = current
        self._process_point(current)

    # ------------------------------
    # Acceptance filter
    # ------------------------------

    def _process_point(self, current: Point) -> None:
        if not self.viewport.is_interior(current.x, current.y):
            # A clipped point breaks the visible curve.
            self.new_curve = True
            self.distance = 0.0
            self.previous = current
            return

        self.distance += self.previous.distance_to(current)
        if self.distance >= self.sampling.point_spacing:
            self.distance = 0.0
            self._accept(self.normalize(current))
        self.previous = current

    def _accept(self, point: Point) -> None:
        seq = self.sequence
        if self.new_curve:
            self.new_curve = False
            last = seq.last
            if self.curve_breaks and last is not None:
                seq.hold(last, self.eoc_margin)
                seq.mark_break()
                seq.hold(point, self.eoc_margin)
        seq.append(point)

    def normalize(self, point: Point) -> Point:
        """Map a path-space point to output space, centred on the viewport."""
        vp = self.viewport
        return Point(
            self.sampling.x_sign * (point.x - vp.center_x) / vp.divisor,
            self.sampling.y_sign * (point.y - vp.center_y) / vp.divisor,
        )
