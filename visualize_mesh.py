#!/usr/bin/env python3
"""Run one greedy meshing pass and save the colored quads as a PNG."""

import argparse
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import structlog

from py_gmesh.config import settings
from py_gmesh.core import MeshingPipeline, PatternType
from py_gmesh.core.render import paint_grid, paint_quads, save_image
from py_gmesh.logging_config import configure_logging

logger = structlog.get_logger()


def side_length_arg(value: str) -> int:
    """argparse type enforcing the configured side length bounds."""
    try:
        return settings.check_side_length(int(value))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Greedy-mesh an occupancy grid and render the quads")
    parser.add_argument(
        "--side-length", type=side_length_arg, default=settings.default_side_length,
        help=f"Grid side length ({settings.min_side_length}-{settings.max_side_length})",
    )
    parser.add_argument(
        "--pattern", default=settings.default_pattern,
        help=f"Occupancy pattern ({', '.join(p.value for p in PatternType)})",
    )
    parser.add_argument("--seed", default=settings.seed, help="Seed for uniform patterns and palettes")
    parser.add_argument("--output", help="PNG path (defaults to a timestamped file in output_dir)")
    parser.add_argument(
        "--show-grid", action="store_true",
        help="Also save the occupancy grid before meshing",
    )
    return parser


def visualize_mesh(side_length: int, pattern: str, seed: Optional[str] = None,
                   output: Optional[str] = None, show_grid: bool = False) -> List[Path]:
    """Run one pass and write the rendered images; returns the written paths."""
    pipeline = MeshingPipeline(side_length=side_length, pattern=pattern, seed=seed)

    if output is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output = str(Path(settings.output_dir) / f"mesh_{pattern}_{side_length}_{timestamp}.png")
    output_path = Path(output)

    written = []
    if show_grid:
        grid_path = output_path.with_name(f"{output_path.stem}_grid{output_path.suffix}")
        written.append(save_image(paint_grid(pipeline.grid), grid_path))

    result = pipeline.run()
    image = paint_quads(result.side_length, result.quads, result.coloring)
    written.append(save_image(image, output_path))

    logger.info(
        "Mesh visualization saved",
        path=str(output_path),
        quad_count=result.mesh.quad_count,
        color_count=result.coloring.color_count,
    )
    return written


def main(argv: Optional[List[str]] = None) -> None:
    """Main function."""
    args = build_parser().parse_args(argv)
    configure_logging()
    visualize_mesh(args.side_length, args.pattern, args.seed, args.output, args.show_grid)


if __name__ == "__main__":
    main()
