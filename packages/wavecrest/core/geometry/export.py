"""Standalone SVG export.

Builds an SVG document for a single wave by regenerating the path from its
config, so the same config always exports the same document.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from wavecrest.core.geometry.models import PatternConfig, PatternName
from wavecrest.core.geometry.path import format_number
from wavecrest.core.geometry.patterns import generate_path

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

DEFAULT_FILL_COLOR = "#6c5ce7"
DEFAULT_BACKGROUND_COLOR = "#ffffff"


def _build_svg(
    path: str,
    width: float,
    height: float,
    fill_color: str,
    background_color: str | None,
    stroke_color: str | None,
    stroke_width: float | None,
    stroke_only: bool,
) -> ET.Element:
    w, h = format_number(width), format_number(height)
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NAMESPACE,
            "viewBox": f"0 0 {w} {h}",
            "preserveAspectRatio": "none",
        },
    )

    if background_color is not None:
        ET.SubElement(root, "rect", {"width": w, "height": h, "fill": background_color})

    path_attrs = {"d": path, "fill": "none" if stroke_only else fill_color}
    if stroke_color is not None:
        path_attrs["stroke"] = stroke_color
        width_attr = stroke_width if stroke_width is not None else 1.0
        path_attrs["stroke-width"] = format_number(width_attr)
    ET.SubElement(root, "path", path_attrs)

    return root


def export_svg(
    pattern: PatternName | str = PatternName.SMOOTH,
    config: PatternConfig | None = None,
    fill_color: str = DEFAULT_FILL_COLOR,
    background_color: str | None = DEFAULT_BACKGROUND_COLOR,
    stroke_color: str | None = None,
    stroke_width: float | None = None,
    stroke_only: bool = False,
) -> str:
    """Render a wave as a standalone SVG document.

    Args:
        pattern: Pattern to generate.
        config: Generator config. Defaults to ``PatternConfig()``.
        fill_color: Wave fill.
        background_color: Background rect fill; None omits the rect.
        stroke_color: Optional outline color.
        stroke_width: Outline width (1 if a stroke color is given without one).
        stroke_only: Draw the outline without filling the region.

    Returns:
        SVG document text.

    Example:
        >>> svg = export_svg("smooth", PatternConfig(height=200))
        >>> 'viewBox="0 0 1440 200"' in svg
        True
    """
    config = config or PatternConfig()
    path = generate_path(pattern, config)

    root = _build_svg(
        path,
        config.width,
        config.height,
        fill_color,
        background_color,
        stroke_color,
        stroke_width,
        stroke_only,
    )
    ET.indent(root, space="  ", level=0)
    return ET.tostring(root, encoding="unicode")


def write_svg(svg: str, file_path: Path | str) -> Path:
    """Write SVG text to a file, creating parent directories.

    Returns:
        The written path.
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(svg, encoding="utf-8")
    logger.debug("Wrote SVG to %s", file_path)
    return file_path
