"""Command-line entry-point: solve an ASCII map file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from wavepath.errors import InvalidInput, WavePathError
from wavepath.finder import WavePathfinder
from wavepath.types import Coord
from wavepath.utils.maps import RenderConfig, parse_ascii_map, render_distances, render_path

LOGGER = logging.getLogger("wavepath")

OUTPUT_FORMATS = ("path", "ascii", "json")


@dataclass(slots=True)
class OutputConfig:
    format: str = "path"
    show_distances: bool = False


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Wave (Lee algorithm) shortest path on an ASCII map")
    parser.add_argument(
        "--map",
        type=Path,
        required=True,
        help="Path to an ASCII map file (|A| |x|B| rows)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to YAML config",
    )
    parser.add_argument(
        "--start",
        type=str,
        default=None,
        help="Override start cell as ROW,COL",
    )
    parser.add_argument(
        "--finish",
        type=str,
        default=None,
        help="Override finish cell as ROW,COL",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Override output format from config",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Python logging level",
    )
    return parser.parse_args(argv)


def load_config(path: Optional[Path]) -> dict[str, Any]:
    if path is None:
        return {}
    with path.open("r", encoding="utf-8") as handle:
        try:
            cfg = yaml.safe_load(handle)
        except (yaml.YAMLError, UnicodeDecodeError) as exc:
            raise InvalidInput(f"Config {path} is not valid YAML: {exc}") from exc
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise InvalidInput(f"Config {path} must be a mapping, got {type(cfg).__name__}")
    return cfg


def _section(cfg: dict[str, Any], name: str) -> dict[str, Any]:
    section = cfg.get(name) or {}
    if not isinstance(section, dict):
        raise InvalidInput(f"Config section {name!r} must be a mapping, got {type(section).__name__}")
    return section


def build_render_config(cfg: dict[str, Any]) -> RenderConfig:
    render_cfg = _section(cfg, "render")
    return RenderConfig(
        path_token=str(render_cfg.get("path_token", "*")),
        blocked_token=str(render_cfg.get("blocked_token", "x")),
        open_token=str(render_cfg.get("open_token", " ")),
        number_steps=bool(render_cfg.get("number_steps", False)),
    )


def build_output_config(cfg: dict[str, Any], args: argparse.Namespace) -> OutputConfig:
    out_cfg = _section(cfg, "output")
    fmt = args.format or str(out_cfg.get("format", "path"))
    if fmt not in OUTPUT_FORMATS:
        raise InvalidInput(f"Unknown output format {fmt!r}; expected one of {OUTPUT_FORMATS}")
    return OutputConfig(
        format=fmt,
        show_distances=bool(out_cfg.get("show_distances", False)),
    )


def parse_coord(text: str) -> Coord:
    parts = text.replace(" ", "").split(",")
    if len(parts) != 2:
        raise InvalidInput(f"Coordinate {text!r} must look like ROW,COL")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise InvalidInput(f"Coordinate {text!r} must hold two integers") from exc


def _format_result(
    path: Optional[List[Coord]],
    finder: WavePathfinder,
    start: Coord,
    finish: Coord,
    output: OutputConfig,
    render: RenderConfig,
) -> str:
    if output.format == "json":
        payload: Dict[str, Any] = {
            "start": list(start),
            "finish": list(finish),
            "path": [list(coord) for coord in path] if path is not None else None,
            "distance": len(path) - 1 if path is not None else None,
        }
        return json.dumps(payload)
    if output.format == "ascii":
        return render_path(finder.grid.to_list(), path, start=start, finish=finish, config=render)
    if path is None:
        return "no path"
    return "\n".join(f"{r},{c}" for r, c in path)


def run(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    render = build_render_config(cfg)
    output = build_output_config(cfg, args)

    try:
        drawing = args.map.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidInput(f"Map {args.map} is not UTF-8 text: {exc}") from exc
    ascii_map = parse_ascii_map(drawing)
    start = parse_coord(args.start) if args.start else ascii_map.start
    finish = parse_coord(args.finish) if args.finish else ascii_map.finish
    if start is None or finish is None:
        raise InvalidInput("Map needs A/B markers or explicit --start/--finish")

    finder = WavePathfinder(ascii_map.passable)
    field = finder.expand_wave(start)
    path = finder.backtrace_path(finish)
    LOGGER.info(
        "Solved %dx%d map from %s to %s: %s",
        finder.grid.rows,
        finder.grid.cols,
        start,
        finish,
        f"{len(path) - 1} steps" if path is not None else "no path",
    )

    print(_format_result(path, finder, start, finish, output, render))
    if output.show_distances:
        print()
        print(render_distances(field))
    return 0 if path is not None else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    try:
        return run(args)
    except (WavePathError, OSError) as exc:
        LOGGER.debug("wavepath failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
