"""Typed SVG path data.

Paths are handled internally as an immutable sequence of ``PathCommand``
values. Text is only produced at the output boundary (``PathData.serialize``)
and only parsed when accepting input from outside the engine
(``parse_path``).

Serialized form: a command letter followed by whitespace-separated operands,
e.g. ``"M 0 120 L 0 72 Q 360 24 720 84 Z"``. Uppercase letters are absolute,
lowercase relative.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import NamedTuple

from wavecrest.core.geometry.defaults import COORDINATE_PRECISION

# Operands consumed per repetition of each command
COMMAND_ARITY: dict[str, int] = {
    "M": 2,
    "L": 2,
    "T": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "A": 7,
    "Z": 0,
}

_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_TOKEN_RE = re.compile(rf"(?P<cmd>[MmLlHhVvCcSsQqTtAaZz])|(?P<num>{_NUMBER})|(?P<sep>[\s,]+)")


class PathParseError(ValueError):
    """Raised when path text does not tokenize into complete commands."""


class Point(NamedTuple):
    """Absolute 2D coordinate."""

    x: float
    y: float


def format_number(value: float, precision: int | None = COORDINATE_PRECISION) -> str:
    """Format a coordinate for serialization.

    Rounds to ``precision`` decimals, trims trailing zeros and normalizes
    negative zero. With ``precision=None`` the shortest text that parses
    back to the same float is used, so parsed input is written back
    unchanged.

    Example:
        >>> format_number(72.0)
        '72'
        >>> format_number(1439.90000001)
        '1439.9'
        >>> format_number(10.12345, precision=None)
        '10.12345'
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot serialize non-finite coordinate {value!r}")
    if precision is None:
        text = repr(float(value)).removesuffix(".0")
    else:
        text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


@dataclass(frozen=True)
class PathCommand:
    """A single path command with all of its operands.

    One command may carry several operand groups (``L 1 2 3 4`` is two
    line-tos); ``args`` must be a whole number of groups.
    """

    code: str
    args: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        kind = self.code.upper()
        if kind not in COMMAND_ARITY:
            raise PathParseError(f"Unknown path command '{self.code}'")
        arity = COMMAND_ARITY[kind]
        if arity == 0:
            if self.args:
                raise PathParseError(f"Command '{self.code}' takes no operands")
        elif not self.args or len(self.args) % arity:
            raise PathParseError(
                f"Command '{self.code}' expects a multiple of {arity} operands, "
                f"got {len(self.args)}"
            )

    @property
    def kind(self) -> str:
        """Uppercase command letter."""
        return self.code.upper()

    @property
    def is_relative(self) -> bool:
        return self.code.islower()

    def groups(self) -> Iterator[tuple[float, ...]]:
        """Iterate operand groups (one per implicit repetition)."""
        arity = COMMAND_ARITY[self.kind]
        for i in range(0, len(self.args), arity):
            yield self.args[i : i + arity]

    def with_code(self, code: str) -> PathCommand:
        return PathCommand(code, self.args)

    def with_args(self, args: Iterable[float]) -> PathCommand:
        return PathCommand(self.code, tuple(args))

    def serialize(self, precision: int | None = COORDINATE_PRECISION) -> str:
        if not self.args:
            return self.code
        return " ".join([self.code, *(format_number(a, precision) for a in self.args)])


@dataclass(frozen=True)
class PathData:
    """Immutable sequence of path commands."""

    commands: tuple[PathCommand, ...] = ()

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __getitem__(self, index: int) -> PathCommand:
        return self.commands[index]

    def __str__(self) -> str:
        return self.serialize()

    @property
    def is_empty(self) -> bool:
        return not self.commands

    def serialize(self, precision: int | None = COORDINATE_PRECISION) -> str:
        """Serialize to path text.

        Generated geometry uses the default precision. Paths parsed from
        outside pass ``precision=None`` to keep every operand exact.
        """
        return " ".join(cmd.serialize(precision) for cmd in self.commands)

    def points(self) -> list[Point]:
        """Every coordinate pair in drawing order, resolved to absolute.

        Control points of curve commands are included (they are part of the
        polyline approximation); arcs contribute their endpoint only. H/V
        commands resolve against the current point, and close-path emits no
        point.
        """
        result: list[Point] = []
        cx = cy = 0.0
        start_x = start_y = 0.0

        for cmd in self.commands:
            kind = cmd.kind
            rel = cmd.is_relative

            if kind == "Z":
                cx, cy = start_x, start_y
                continue

            for index, group in enumerate(cmd.groups()):
                ox, oy = (cx, cy) if rel else (0.0, 0.0)

                if kind == "H":
                    cx = ox + group[0]
                    result.append(Point(cx, cy))
                elif kind == "V":
                    cy = (cy if rel else 0.0) + group[0]
                    result.append(Point(cx, cy))
                elif kind == "A":
                    cx, cy = ox + group[5], oy + group[6]
                    result.append(Point(cx, cy))
                else:
                    # M, L, T, C, S, Q: pairs, relative to the group's start point
                    for j in range(0, len(group), 2):
                        result.append(Point(ox + group[j], oy + group[j + 1]))
                    cx, cy = result[-1]

                if kind == "M" and index == 0:
                    start_x, start_y = cx, cy

        return result


def parse_path(text: str) -> PathData:
    """Tokenize and parse path text.

    Handles mixed absolute/relative commands, comma or whitespace separators,
    numbers without separators (``10-20``) and repeated operand groups after
    a single command letter.

    Args:
        text: Path text.

    Returns:
        Parsed path. Empty or whitespace-only text gives an empty path.

    Raises:
        PathParseError: If the text contains stray characters, operands
            before the first command, or incomplete operand groups.

    Example:
        >>> parse_path("M0,120 L 0 72Z").serialize()
        'M 0 120 L 0 72 Z'
    """
    commands: list[PathCommand] = []
    code: str | None = None
    args: list[float] = []
    pos = 0

    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            raise PathParseError(f"Unexpected character {text[pos]!r} at position {pos}")
        pos = match.end()

        if match.lastgroup == "cmd":
            if code is not None:
                commands.append(PathCommand(code, tuple(args)))
            code = match.group("cmd")
            args = []
        elif match.lastgroup == "num":
            if code is None:
                raise PathParseError("Path data must start with a command")
            args.append(float(match.group("num")))

    if code is not None:
        commands.append(PathCommand(code, tuple(args)))

    return PathData(tuple(commands))


def _runs_together(previous: str, current: str) -> bool:
    """True if ``current`` written right after ``previous`` would lex as one number."""
    if not previous or current[0] in "+-":
        return False
    if current[0] == ".":
        return "." not in previous and "e" not in previous.lower()
    return True


OperandRewrite = Callable[[str, int, str], str]


def rewrite_operands(text: str, rewrite: OperandRewrite) -> str:
    """Rewrite the numeric operands of path text in place.

    ``rewrite(code, index, token)`` gets the command letter, the operand's
    position within its operand group and the operand text, and returns the
    replacement text. Command letters, separators and operands returned
    unchanged are copied verbatim, so the result differs from ``text`` only
    where an operand was rewritten.

    Args:
        text: Path text that ``parse_path`` accepts.
        rewrite: Operand rewrite callback.

    Returns:
        Rewritten path text.

    Raises:
        PathParseError: If the text does not parse.
    """
    parse_path(text)

    parts: list[str] = []
    code = ""
    index = 0
    previous = ""
    after_rewrite = False

    for match in _TOKEN_RE.finditer(text):
        token = match.group()
        if match.lastgroup == "num":
            new = rewrite(code, index % COMMAND_ARITY[code.upper()], token)
            index += 1
            changed = new != token
            if (changed or after_rewrite) and _runs_together(previous, new):
                parts.append(" ")
            parts.append(new)
            previous, after_rewrite = new, changed
            continue

        if match.lastgroup == "cmd":
            code, index = token, 0
        parts.append(token)
        previous = ""
        after_rewrite = False

    return "".join(parts)


def as_path_data(path: str | PathData) -> PathData:
    """Accept path text or an already typed path."""
    if isinstance(path, PathData):
        return path
    return parse_path(path)


def move_to(x: float, y: float) -> PathCommand:
    return PathCommand("M", (x, y))


def line_to(x: float, y: float) -> PathCommand:
    return PathCommand("L", (x, y))


def quad_to(x1: float, y1: float, x: float, y: float) -> PathCommand:
    return PathCommand("Q", (x1, y1, x, y))


def cubic_to(x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> PathCommand:
    return PathCommand("C", (x1, y1, x2, y2, x, y))


def close_path() -> PathCommand:
    return PathCommand("Z")


def smooth_segments(
    points: list[Point], handles: list[float] | None = None
) -> list[PathCommand]:
    """Cubic segments through ``points`` with horizontal tangents.

    Each point gets a horizontal handle of length ``handles[i]`` on both
    sides, so consecutive segments join smoothly. Without ``handles`` every
    handle is 40% of the distance to the neighbouring point.

    Args:
        points: Curve points, ordered left to right (at least two).
        handles: Optional per-point handle lengths in px.

    Returns:
        One cubic command per consecutive pair of points.
    """
    if len(points) < 2:
        raise ValueError(f"smooth_segments needs at least 2 points, got {len(points)}")
    if handles is not None and len(handles) != len(points):
        raise ValueError("handles must have one entry per point")

    segments: list[PathCommand] = []
    for i in range(len(points) - 1):
        (x0, y0), (x1, y1) = points[i], points[i + 1]
        if handles is None:
            out_len = in_len = (x1 - x0) * 0.4
        else:
            out_len, in_len = handles[i], handles[i + 1]
        segments.append(cubic_to(x0 + out_len, y0, x1 - in_len, y1, x1, y1))
    return segments


def close_region(
    start: Point, curve: list[PathCommand], width: float, height: float
) -> PathData:
    """Close a left-to-right curve against the bottom baseline.

    Produces ``M 0 height``, a line up to ``start``, the curve commands, a
    line down to ``(width, height)`` and a close-path.
    """
    return PathData(
        (
            move_to(0.0, height),
            line_to(start.x, start.y),
            *curve,
            line_to(width, height),
            close_path(),
        )
    )
