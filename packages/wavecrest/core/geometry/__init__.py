"""Wave geometry engine: pattern generation, transforms and derived shapes."""

from wavecrest.core.geometry.export import export_svg, write_svg
from wavecrest.core.geometry.interlock import generate_cross_boundary, generate_interlock, separate
from wavecrest.core.geometry.keyframes import (
    MorphPreset,
    MorphSettings,
    generate_dual_frames,
    generate_frames,
    generate_preset_frames,
    keyframe_offsets,
)
from wavecrest.core.geometry.models import (
    DualPathResult,
    EdgeConfig,
    InterlockMode,
    InterlockOptions,
    PatternConfig,
    PatternName,
    PolygonPoints,
    RegionEdge,
    WaveSeparationConfig,
)
from wavecrest.core.geometry.path import PathData, PathParseError, parse_path
from wavecrest.core.geometry.patterns import generate_layered_paths, generate_path, layer_opacities
from wavecrest.core.geometry.polygon import to_dual_polygon, to_polygon
from wavecrest.core.geometry.presets import WavePreset, list_presets, resolve_preset
from wavecrest.core.geometry.sampling import build_from_samples, sample_y
from wavecrest.core.geometry.simplification import simplify_path, simplify_rdp
from wavecrest.core.geometry.transforms import (
    extend_below_region,
    extract_contour,
    flip_vertically,
    invert_to_top_region,
    mirror_horizontal,
)

__all__ = [
    "DualPathResult",
    "EdgeConfig",
    "InterlockMode",
    "InterlockOptions",
    "MorphPreset",
    "MorphSettings",
    "PathData",
    "PathParseError",
    "PatternConfig",
    "PatternName",
    "PolygonPoints",
    "RegionEdge",
    "WavePreset",
    "WaveSeparationConfig",
    "build_from_samples",
    "export_svg",
    "extend_below_region",
    "extract_contour",
    "flip_vertically",
    "generate_cross_boundary",
    "generate_dual_frames",
    "generate_frames",
    "generate_interlock",
    "generate_layered_paths",
    "generate_path",
    "generate_preset_frames",
    "invert_to_top_region",
    "keyframe_offsets",
    "layer_opacities",
    "list_presets",
    "mirror_horizontal",
    "parse_path",
    "resolve_preset",
    "sample_y",
    "separate",
    "simplify_path",
    "simplify_rdp",
    "to_dual_polygon",
    "to_polygon",
    "write_svg",
]
