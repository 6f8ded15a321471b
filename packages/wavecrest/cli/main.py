"""Command-line interface for wavecrest.

Every command writes its result to stdout (a path, a polygon, or JSON) so it
can be piped; diagnostics and errors go to stderr.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wavecrest.core.config.loader import configure_logging, load_app_config
from wavecrest.core.config.models import AppConfig
from wavecrest.core.geometry.export import export_svg, write_svg
from wavecrest.core.geometry.interlock import generate_interlock, separate
from wavecrest.core.geometry.keyframes import (
    MORPH_PRESETS,
    MorphPreset,
    generate_frames,
    generate_preset_frames,
    keyframe_offsets,
)
from wavecrest.core.geometry.models import (
    EdgeConfig,
    InterlockMode,
    InterlockOptions,
    PatternConfig,
    RegionEdge,
    WaveSeparationConfig,
)
from wavecrest.core.geometry.patterns import (
    DEFAULT_LAYER_OPACITY,
    generate_layered_paths,
    generate_path,
    layer_opacities,
)
from wavecrest.core.geometry.polygon import to_polygon
from wavecrest.core.geometry.presets import PRESETS, resolve_preset
from wavecrest.core.geometry.sampling import build_from_samples, sample_y
from wavecrest.core.geometry.simplification import simplify_path
from wavecrest.core.geometry.transforms import (
    extend_below_region,
    extract_contour,
    flip_vertically,
    invert_to_top_region,
    mirror_horizontal,
)
from wavecrest.core.utils.json import json_default, write_json

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

Command = Callable[[argparse.Namespace, AppConfig], int]

DEFAULT_LAYER_COUNT = 3


def _emit(text: str) -> None:
    console.print(text, soft_wrap=True, markup=False, highlight=False, emoji=False)


def _output_path(out: str, config: AppConfig) -> Path:
    """Resolve ``--out`` against the configured output directory.

    Absolute paths are used as given.
    """
    return Path(config.output_dir) / out


def _emit_json(data: object, out: str | None, config: AppConfig) -> None:
    """Print JSON to stdout, or write it under the output directory."""
    if out is None:
        console.print_json(data=data, default=json_default)
        return
    path = _output_path(out, config)
    write_json(path, data)
    err_console.print(f"[green]Wrote[/green] {escape(str(path))}")


def _pattern_config(args: argparse.Namespace, config: AppConfig) -> PatternConfig:
    """Build a PatternConfig from CLI flags, falling back to the app config."""
    geometry = config.geometry
    height = args.height
    amplitude = args.amplitude
    frequency = args.frequency

    if getattr(args, "preset", None):
        preset = resolve_preset(args.preset)
        if preset is None:
            raise ValueError(f"Unknown preset '{args.preset}'. Available: {', '.join(PRESETS)}")
        height = height if height is not None else preset.height
        amplitude = amplitude if amplitude is not None else preset.amplitude
        frequency = frequency if frequency is not None else preset.frequency
        if args.pattern is None:
            args.pattern = preset.pattern.value

    return PatternConfig(
        width=args.width if args.width is not None else geometry.viewbox_width,
        height=height if height is not None else geometry.default_height,
        amplitude=amplitude if amplitude is not None else 0.5,
        frequency=frequency if frequency is not None else 1.0,
        phase=args.phase,
        mirror=args.mirror,
        seed=args.seed if args.seed is not None else geometry.seed,
    )


def cmd_generate(args: argparse.Namespace, config: AppConfig) -> int:
    pattern_config = _pattern_config(args, config)
    _emit(generate_path(args.pattern or "smooth", pattern_config))
    return 0


def cmd_layers(args: argparse.Namespace, config: AppConfig) -> int:
    pattern_config = _pattern_config(args, config)
    preset = resolve_preset(args.preset) if args.preset else None
    count = args.layers
    if count is None:
        count = preset.layers if preset is not None else DEFAULT_LAYER_COUNT
    opacity = args.layer_opacity
    if opacity is None:
        opacity = preset.layer_opacity if preset is not None else DEFAULT_LAYER_OPACITY

    paths = generate_layered_paths(args.pattern or "smooth", count, pattern_config)
    if args.json:
        layers = [
            {"path": path, "opacity": layer_opacity}
            for path, layer_opacity in zip(paths, layer_opacities(count, opacity), strict=True)
        ]
        _emit_json({"layers": layers}, None, config)
        return 0
    for path in paths:
        _emit(path)
    return 0


def cmd_interlock(args: argparse.Namespace, config: AppConfig) -> int:
    """Interlock one pattern, or separate two regions when --lower is given."""
    pattern_config = _pattern_config(args, config)
    pattern = args.pattern or "smooth"

    if args.lower is None:
        result = generate_interlock(
            InterlockOptions(
                pattern=pattern,
                width=pattern_config.width,
                height=pattern_config.height,
                amplitude=pattern_config.amplitude,
                frequency=pattern_config.frequency,
                intensity=args.intensity,
                mode=args.mode,
                seed=pattern_config.effective_seed,
                gap=args.gap,
                phase=pattern_config.phase,
                mirror=pattern_config.mirror,
            )
        )
    else:
        lower_config = pattern_config.with_updates(
            height=args.lower_height if args.lower_height is not None else pattern_config.height,
            amplitude=(
                args.lower_amplitude
                if args.lower_amplitude is not None
                else pattern_config.amplitude
            ),
            seed=args.lower_seed if args.lower_seed is not None else pattern_config.seed,
        )
        result = separate(
            EdgeConfig(pattern=pattern, config=pattern_config),
            EdgeConfig(pattern=args.lower, config=lower_config),
            WaveSeparationConfig(mode=args.mode, intensity=args.intensity, gap=args.gap),
        )

    _emit_json(result, args.out, config)
    return 0


def cmd_frames(args: argparse.Namespace, config: AppConfig) -> int:
    pattern_config = _pattern_config(args, config)
    pattern = args.pattern or "smooth"

    if args.morph is not None:
        frames = generate_preset_frames(args.morph, pattern, pattern_config)
    else:
        frames = generate_frames(
            pattern,
            args.count,
            pattern_config,
            phase_range=args.phase_range,
            amplitude_variation=args.amplitude_variation,
        )

    _emit_json({"offsets": keyframe_offsets(len(frames)), "frames": frames}, args.out, config)
    return 0


def cmd_transform(args: argparse.Namespace, config: AppConfig) -> int:
    geometry = config.geometry
    width = args.width if args.width is not None else geometry.viewbox_width
    height = args.height if args.height is not None else geometry.default_height

    transforms: dict[str, Callable[[str], str]] = {
        "mirror": lambda p: mirror_horizontal(p, width),
        "flip": lambda p: flip_vertically(p, height),
        "contour": extract_contour,
        "top": invert_to_top_region,
        "below": lambda p: extend_below_region(p, height),
    }
    _emit(transforms[args.op](args.path))
    return 0


def cmd_sample(args: argparse.Namespace, config: AppConfig) -> int:
    """Sample a path, or rebuild a smooth region through the samples with --rebuild."""
    geometry = config.geometry
    width = args.width if args.width is not None else geometry.viewbox_width
    count = args.count if args.count is not None else geometry.sample_count
    samples = sample_y(args.path, width, count)

    if args.rebuild:
        height = args.height if args.height is not None else geometry.default_height
        _emit(build_from_samples(samples, width, height).serialize())
    else:
        _emit_json({"samples": samples}, None, config)
    return 0


def cmd_simplify(args: argparse.Namespace, config: AppConfig) -> int:
    epsilon = args.epsilon if args.epsilon is not None else config.geometry.simplify_epsilon
    _emit(simplify_path(args.path, epsilon))
    return 0


def cmd_polygon(args: argparse.Namespace, config: AppConfig) -> int:
    geometry = config.geometry
    polygon = to_polygon(
        args.path,
        args.height if args.height is not None else geometry.default_height,
        args.edge,
        args.width if args.width is not None else geometry.viewbox_width,
    )
    _emit(polygon.serialize())
    return 0


def cmd_svg(args: argparse.Namespace, config: AppConfig) -> int:
    pattern_config = _pattern_config(args, config)
    svg = export_svg(
        args.pattern or "smooth",
        pattern_config,
        fill_color=args.fill,
        background_color=None if args.no_background else args.background,
        stroke_color=args.stroke,
        stroke_width=args.stroke_width,
        stroke_only=args.stroke_only,
    )

    if args.out is None:
        _emit(svg)
    else:
        written = write_svg(svg, _output_path(args.out, config))
        err_console.print(f"[green]Wrote[/green] {escape(str(written))}")
    return 0


def cmd_presets(args: argparse.Namespace, config: AppConfig) -> int:
    table = Table(title="Wave presets")
    table.add_column("Name", style="bold")
    table.add_column("Pattern")
    table.add_column("Height", justify="right")
    table.add_column("Amplitude", justify="right")
    table.add_column("Frequency", justify="right")
    table.add_column("Layers", justify="right")
    table.add_column("Layer opacity", justify="right")
    for name, preset in PRESETS.items():
        table.add_row(
            name,
            preset.pattern.value,
            f"{preset.height:g}",
            f"{preset.amplitude:g}",
            f"{preset.frequency:g}",
            str(preset.layers),
            f"{preset.layer_opacity:g}",
        )
    console.print(table)

    morph = Table(title="Morph presets")
    morph.add_column("Name", style="bold")
    morph.add_column("Frames", justify="right")
    morph.add_column("Phase range", justify="right")
    morph.add_column("Amplitude variation", justify="right")
    for preset_name, settings in MORPH_PRESETS.items():
        morph.add_row(
            preset_name.value,
            str(settings.frame_count),
            f"{settings.phase_range:g}",
            f"{settings.amplitude_variation:g}",
        )
    console.print(morph)
    return 0


COMMANDS: dict[str, Command] = {
    "generate": cmd_generate,
    "layers": cmd_layers,
    "interlock": cmd_interlock,
    "frames": cmd_frames,
    "transform": cmd_transform,
    "sample": cmd_sample,
    "simplify": cmd_simplify,
    "polygon": cmd_polygon,
    "svg": cmd_svg,
    "presets": cmd_presets,
}


def _add_pattern_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("pattern", nargs="?", default=None, help="Pattern name (default: smooth)")
    p.add_argument("--preset", help="Region preset supplying pattern/height/amplitude/frequency")
    p.add_argument("--width", type=float, help="Viewbox width (default: from config)")
    p.add_argument("--height", type=float, help="Viewbox height (default: from config)")
    p.add_argument("--amplitude", type=float, help="Wave height fraction (default: 0.5)")
    p.add_argument("--frequency", type=float, help="Target peak count (default: 1)")
    p.add_argument("--phase", type=float, default=0.0, help="Phase shift (default: 0)")
    p.add_argument("--mirror", action="store_true", help="Mirror horizontally")
    p.add_argument("--seed", type=int, help="Seed for organic patterns (default: from config)")


def _add_size_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--width", type=float, help="Viewbox width (default: from config)")
    p.add_argument("--height", type=float, help="Viewbox height (default: from config)")


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="wavecrest",
        description="wavecrest - decorative wave boundary geometry",
    )
    p.add_argument("--config", help="Path to app config (.json, .yaml or .yml)")
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    p.add_argument("--structured-logs", action="store_true", help="Log JSON lines")
    sub = p.add_subparsers(dest="cmd", required=True)

    generate = sub.add_parser("generate", help="Generate a wave path")
    _add_pattern_args(generate)

    layers = sub.add_parser("layers", help="Generate a stack of layered paths")
    _add_pattern_args(layers)
    layers.add_argument(
        "--layers", type=int, help="Number of layers (default: from preset, else 3)"
    )
    layers.add_argument(
        "--layer-opacity",
        type=float,
        help="Base opacity of the back layers (default: from preset, else 0.3)",
    )
    layers.add_argument(
        "--json", action="store_true", help="Print paths with their opacities as JSON"
    )

    interlock = sub.add_parser("interlock", help="Generate two interlocking edges")
    _add_pattern_args(interlock)
    interlock.add_argument(
        "--mode",
        choices=[m.value for m in InterlockMode],
        default=InterlockMode.INTERLOCK.value,
        help="Interlock mode (default: interlock)",
    )
    interlock.add_argument("--intensity", type=float, default=0.5, help="Offset intensity [0, 1]")
    interlock.add_argument("--gap", type=float, default=0.0, help="Gap between edges in px")
    interlock.add_argument("--lower", help="Pattern of the lower region (cross-boundary mode)")
    interlock.add_argument("--lower-height", type=float, help="Lower region height")
    interlock.add_argument("--lower-amplitude", type=float, help="Lower region amplitude")
    interlock.add_argument("--lower-seed", type=int, help="Lower region seed")
    interlock.add_argument(
        "--out", help="Write the JSON result to a file under output_dir (default: stdout)"
    )

    frames = sub.add_parser("frames", help="Generate loopable morph frames")
    _add_pattern_args(frames)
    frames.add_argument(
        "--morph", choices=[m.value for m in MorphPreset], help="Named morph preset"
    )
    frames.add_argument("--count", type=int, default=5, help="Frame count (default: 5)")
    frames.add_argument("--phase-range", type=float, default=0.4, help="Peak phase shift")
    frames.add_argument(
        "--amplitude-variation", type=float, default=0.05, help="Peak relative amplitude change"
    )
    frames.add_argument(
        "--out", help="Write the JSON result to a file under output_dir (default: stdout)"
    )

    transform = sub.add_parser("transform", help="Transform an existing path")
    transform.add_argument("path", help="Path data")
    transform.add_argument(
        "--op",
        choices=["mirror", "flip", "contour", "top", "below"],
        required=True,
        help="Transform to apply",
    )
    _add_size_args(transform)

    sample = sub.add_parser("sample", help="Sample a path's y-values at evenly spaced x")
    sample.add_argument("path", help="Path data")
    sample.add_argument("--count", type=int, help="Number of samples (default: from config)")
    sample.add_argument(
        "--rebuild", action="store_true", help="Print a smooth region rebuilt from the samples"
    )
    _add_size_args(sample)

    simplify = sub.add_parser("simplify", help="Simplify a path with RDP")
    simplify.add_argument("path", help="Path data")
    simplify.add_argument("--epsilon", type=float, help="Tolerance in px (default: from config)")

    polygon = sub.add_parser("polygon", help="Convert a path to a percentage polygon")
    polygon.add_argument("path", help="Path data")
    polygon.add_argument(
        "--edge",
        choices=[e.value for e in RegionEdge],
        default=RegionEdge.BOTTOM.value,
        help="Which side of the region the curve bounds (default: bottom)",
    )
    _add_size_args(polygon)

    svg = sub.add_parser("svg", help="Export a standalone SVG document")
    _add_pattern_args(svg)
    svg.add_argument("--out", help="Output file under output_dir (default: stdout)")
    svg.add_argument("--fill", default="#6c5ce7", help="Wave fill color")
    svg.add_argument("--background", default="#ffffff", help="Background color")
    svg.add_argument("--no-background", action="store_true", help="Omit the background rect")
    svg.add_argument("--stroke", help="Outline color")
    svg.add_argument("--stroke-width", type=float, help="Outline width")
    svg.add_argument("--stroke-only", action="store_true", help="Outline without fill")

    sub.add_parser("presets", help="List built-in presets")

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        config = load_app_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        err_console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        return 1

    if args.log_level or args.structured_logs:
        logging_config = config.logging.model_copy(
            update={
                "level": args.log_level or config.logging.level,
                "structured": args.structured_logs or config.logging.structured,
            }
        )
        config = config.model_copy(update={"logging": logging_config})
    configure_logging(config)

    logger.debug("Running command %s", args.cmd)
    try:
        return COMMANDS[args.cmd](args, config)
    except ValueError as e:
        err_console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1
