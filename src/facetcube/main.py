"""
Application Entry Point
=======================
Builds a CubeScene from the command line, lays it out and either summarizes,
exports or previews it.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Instantiates the scene state (generators, palette, style).
3. Runs the layout and hands the instance pools to the requested output
   (log summary, .npz export, PyVista preview).
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from facetcube.logging_config import setup_logging
from facetcube.model.state import CubeScene, SceneLayout
from facetcube.model.style import StyleParameters

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]]) -> argparse.Namespace:
    """Parse the given argument vector.

    .. Keyword Arguments:
    :param argv: The arguments to be parsed.

    .. Returns:
    :returns: The parsed arguments.
    :rtype: A argparse namespace object.

    """
    fmtr = argparse.RawDescriptionHelpFormatter
    kdesc = "Faceted cube pattern generator"
    parser = argparse.ArgumentParser(prog="facetcube", description=kdesc, formatter_class=fmtr)
    defaults = StyleParameters()
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the configuration generators.")
    parser.add_argument("--side", type=float, default=defaults.main_cube_side,
                        help="Main cube side length.")
    parser.add_argument("--thickness", type=float, default=defaults.thickness,
                        help="Relative border thickness.")
    parser.add_argument("--explosion", type=float, default=defaults.explosion,
                        help="Outward displacement of the faces.")
    parser.add_argument("--scale", type=float, default=defaults.sub_squares_scale,
                        help="Sub-square scale within its grid cell.")
    parser.add_argument("--cylinder-thickness", type=float, default=defaults.cylinder_thickness,
                        help="Corner cylinder thickness.")
    parser.add_argument("--color", action="append", default=[], metavar="I=HEX",
                        help="Override the color of face I (repeatable).")
    parser.add_argument("--export", metavar="NPZ", default=None,
                        help="Write instance matrices and colors of both cubes to a .npz file.")
    parser.add_argument("--preview", action="store_true",
                        help="Open a PyVista preview window.")
    parser.add_argument("--screenshot", metavar="PNG", default=None,
                        help="Render off-screen and save a screenshot.")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable debug logging.")
    return parser.parse_args(argv)


def parse_color_override(text: str) -> tuple[int, str]:
    index, sep, color = text.partition("=")
    if not sep or not index.strip().isdigit():
        raise ValueError(f"Color override '{text}' must look like 'I=#rrggbb'.")
    return int(index), color.strip()


def export_layout(scene_layout: SceneLayout, filepath: str) -> None:
    logger.info(f"Exporting instance pools to: {filepath}")
    np.savez(
        filepath,
        primary_box_matrices=scene_layout.primary.box_matrices(),
        primary_box_colors=scene_layout.primary.box_colors(),
        primary_cylinder_matrices=scene_layout.primary.cylinder_matrices(),
        primary_cylinder_colors=scene_layout.primary.cylinder_colors(),
        secondary_box_matrices=scene_layout.secondary.box_matrices(),
        secondary_box_colors=scene_layout.secondary.box_colors(),
        secondary_cylinder_matrices=scene_layout.secondary.cylinder_matrices(),
        secondary_cylinder_colors=scene_layout.secondary.cylinder_colors(),
    )


def log_summary(scene: CubeScene) -> None:
    for i, (primary, secondary) in enumerate(zip(scene.primary, scene.secondary)):
        logger.info(
            f"Face {i} ({scene.palette[i]}): capacity {len(primary)}, "
            f"primary active {primary.active_count}, secondary active {secondary.active_count}"
        )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    style = StyleParameters(
        main_cube_side=args.side,
        thickness=args.thickness,
        explosion=args.explosion,
        sub_squares_scale=args.scale,
        cylinder_thickness=args.cylinder_thickness,
    )
    scene = CubeScene.create(seed=args.seed, style=style)
    for override in args.color:
        scene.set_color(*parse_color_override(override))

    scene_layout = scene.compute_layout()
    log_summary(scene)

    if args.export:
        export_layout(scene_layout, args.export)

    if args.preview or args.screenshot:
        # Imported lazily: PyVista pulls in VTK
        from facetcube.view.preview import show_preview
        show_preview(
            scene_layout.primary,
            scene.style,
            secondary=scene_layout.secondary,
            background_color=scene.background_color,
            screenshot=args.screenshot,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
