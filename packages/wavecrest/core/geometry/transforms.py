"""Geometric path transforms.

Pure path-to-path transforms. Each operation has a typed form working on
``PathData`` and a text form that parses its input, transforms it and
serializes the result. Text that fails to parse is returned unchanged with a
warning.

Reflections are command aware: absolute coordinates reflect about the
extent (``v -> extent - v``), relative ones negate (``dv -> -dv``). Arcs
reflect their endpoint, negate their x-axis rotation and toggle their sweep
flag so the arc keeps bulging the right way.

The text forms of the reflections rewrite operands in place with decimal
arithmetic, so applying one twice returns the input text exactly. The other
text forms serialize without rounding.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from wavecrest.core.geometry.defaults import BELOW_REGION_OVERSCAN, TOP_REGION_BASELINE
from wavecrest.core.geometry.path import (
    PathCommand,
    PathData,
    PathParseError,
    format_number,
    parse_path,
    rewrite_operands,
)

logger = logging.getLogger(__name__)

_X, _Y = 0, 1

# Operand roles under a reflection
_COORD, _ROTATION, _SWEEP = "coord", "rotation", "sweep"


def _operand_role(kind: str, index: int, axis: int) -> str | None:
    """Role of operand ``index`` (within its group) when reflecting along ``axis``."""
    if kind == "Z":
        return None
    if kind == "H":
        return _COORD if axis == _X else None
    if kind == "V":
        return _COORD if axis == _Y else None
    if kind == "A":
        # (rx, ry, rotation, large-arc, sweep, x, y)
        return {2: _ROTATION, 4: _SWEEP, 5 + axis: _COORD}.get(index)
    # M, L, T, C, S, Q: flat (x, y) pairs
    return _COORD if index % 2 == axis else None


def _reflect_command(cmd: PathCommand, axis: int, extent: float) -> PathCommand:
    """Reflect one command's coordinates along ``axis``."""
    if cmd.kind == "Z":
        return cmd

    arity = len(next(cmd.groups()))
    args = list(cmd.args)
    for i, value in enumerate(args):
        role = _operand_role(cmd.kind, i % arity, axis)
        if role == _SWEEP:
            args[i] = 0.0 if value == 1 else 1.0
        elif role == _ROTATION or (role == _COORD and cmd.is_relative):
            args[i] = -value
        elif role == _COORD:
            args[i] = extent - value

    return cmd.with_args(args)


def _decimal_text(value: Decimal) -> str:
    text = format(value, "f")
    return "0" if text == "-0" else text


def _reflect_text(path: str, axis: int, extent: float) -> str:
    """Reflect path text along ``axis`` without touching unrelated operands."""
    extent_value = Decimal(format_number(extent, precision=None))

    def rewrite(code: str, index: int, token: str) -> str:
        role = _operand_role(code.upper(), index, axis)
        if role is None:
            return token
        value = Decimal(token)
        if role == _SWEEP:
            return "0" if value == 1 else "1"
        if role == _ROTATION or code.islower():
            return token if value == 0 else _decimal_text(value.copy_negate())
        return _decimal_text(extent_value - value)

    return rewrite_operands(path, rewrite)


def mirror_path_data(path: PathData, width: float) -> PathData:
    """Reflect every x coordinate about ``width / 2``."""
    return PathData(tuple(_reflect_command(cmd, _X, width) for cmd in path))


def flip_path_data(path: PathData, height: float) -> PathData:
    """Reflect every y coordinate about ``height / 2``."""
    return PathData(tuple(_reflect_command(cmd, _Y, height) for cmd in path))


def _is_baseline_closed(path: PathData) -> bool:
    """True for ``M x y, L x y, ..., L x y, Z`` shaped regions."""
    cmds = path.commands
    return (
        len(cmds) >= 4
        and cmds[0].code == "M"
        and len(cmds[0].args) == 2
        and cmds[1].code.isupper()
        and cmds[-1].kind == "Z"
        and cmds[-2].code == "L"
        and len(cmds[-2].args) == 2
    )


def contour_path_data(path: PathData) -> PathData:
    """Strip the baseline closure, leaving only the curve.

    Paths without a baseline closure are returned unchanged.
    """
    if not _is_baseline_closed(path):
        return path
    cmds = path.commands
    return PathData((cmds[1].with_code("M"), *cmds[2:-2]))


def rebase_path_data(path: PathData, baseline_y: float) -> PathData:
    """Move both baseline corners of a closed region to ``baseline_y``."""
    if not _is_baseline_closed(path):
        return path
    cmds = list(path.commands)
    start, end = cmds[0], cmds[-2]
    cmds[0] = start.with_args((start.args[0], baseline_y))
    cmds[-2] = end.with_args((end.args[0], baseline_y))
    return PathData(tuple(cmds))


def _parse_or_none(path: str, operation: str) -> PathData | None:
    try:
        return parse_path(path)
    except PathParseError as e:
        logger.warning("%s: returning malformed path unchanged (%s)", operation, e)
        return None


def mirror_horizontal(path: str, width: float) -> str:
    """Mirror a path horizontally: ``x -> width - x``.

    Applying it twice with the same width restores the path text exactly;
    separators and operands that do not move are kept as written.

    Args:
        path: Path text.
        width: Viewbox width.

    Returns:
        Mirrored path text, or the input unchanged if it does not parse.
    """
    try:
        return _reflect_text(path, _X, width)
    except PathParseError as e:
        logger.warning("mirror_horizontal: returning malformed path unchanged (%s)", e)
        return path


def flip_vertically(path: str, height: float) -> str:
    """Flip a path vertically: ``y -> height - y`` (relative: ``dy -> -dy``).

    Turns a downward wave into an upward one. Handles M, L, T, H, V, C, S,
    Q and A commands, absolute or relative, including repeated operand
    groups after a single command letter.

    Args:
        path: Path text.
        height: Viewbox height.

    Returns:
        Flipped path text, or the input unchanged if it does not parse.

    Example:
        >>> flip_vertically("M 0 120 L 0 72 Z", 120)
        'M 0 0 L 0 48 Z'
    """
    try:
        return _reflect_text(path, _Y, height)
    except PathParseError as e:
        logger.warning("flip_vertically: returning malformed path unchanged (%s)", e)
        return path


def extract_contour(path: str) -> str:
    """Return only the curve of a closed region, for outline strokes.

    Drops the leading baseline move, turns the following command into a
    move, and drops the trailing baseline line-to and close-path.

    Example:
        >>> extract_contour("M 0 120 L 0 72 L 1440 60 L 1440 120 Z")
        'M 0 72 L 1440 60'
    """
    parsed = _parse_or_none(path, "extract_contour")
    if parsed is None:
        return path
    return contour_path_data(parsed).serialize(precision=None)


def invert_to_top_region(path: str) -> str:
    """Move the baseline corners above the drawing area.

    The result fills the complementary region, on the other side of the
    curve from the original fill.
    """
    parsed = _parse_or_none(path, "invert_to_top_region")
    if parsed is None:
        return path
    return rebase_path_data(parsed, TOP_REGION_BASELINE).serialize(precision=None)


def extend_below_region(path: str, height: float) -> str:
    """Push the baseline corners to ``height + 50``, below the visible area.

    Avoids a visible seam when the region is clipped by a fixed viewport.
    """
    parsed = _parse_or_none(path, "extend_below_region")
    if parsed is None:
        return path
    return rebase_path_data(parsed, height + BELOW_REGION_OVERSCAN).serialize(precision=None)
