"""
3D Preview (PyVista Adapter)
============================
Turns the instance pools of a layout into PyVista meshes and shows them.

Zero-scale (hidden) instances are skipped while building meshes; the pools
in the model keep their fixed size.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np
import numpy.typing as npt
import pyvista as pv

from facetcube.config import CYLINDER_HEIGHT, CYLINDER_RADIUS, DEFAULT_BACKGROUND_COLOR
from facetcube.model.instances import InstanceTransform, LayoutResult
from facetcube.model.style import StyleParameters

logger = logging.getLogger(__name__)

CAMERA_POSITION = [(0.0, 0.0, 25.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0)]


def box_base_mesh(side: float) -> pv.PolyData:
    """Cube with edge `side` centered at the origin (the box pool geometry)."""
    return pv.Cube(x_length=side, y_length=side, z_length=side).triangulate()


def cylinder_base_mesh(resolution: int = 32) -> pv.PolyData:
    """Unit-height cylinder along Y (the cylinder pool geometry)."""
    return pv.Cylinder(
        center=(0.0, 0.0, 0.0),
        direction=(0.0, 1.0, 0.0),
        radius=CYLINDER_RADIUS,
        height=CYLINDER_HEIGHT,
        resolution=resolution,
    ).triangulate()


def instance_mesh(base: pv.PolyData, instances: List[InstanceTransform]) -> Optional[pv.PolyData]:
    """
    Merge one transformed copy of `base` per visible instance.

    Returns:
        A PolyData with an RGB point array 'colors' (uint8), or None if every
        instance is hidden.
    """
    visible = [inst for inst in instances if not inst.is_hidden]
    if not visible:
        return None

    base_points = np.asarray(base.points, dtype=np.float64)
    # triangulated: each face record is [3, a, b, c]
    base_faces = np.asarray(base.faces).reshape(-1, 4)
    n_pts = len(base_points)

    points_list: List[npt.NDArray[np.float64]] = []
    faces_list: List[npt.NDArray[np.int64]] = []
    colors_list: List[npt.NDArray[np.uint8]] = []
    for k, inst in enumerate(visible):
        m = inst.matrix()
        points_list.append(base_points @ m[:3, :3].T + m[:3, 3])

        faces = base_faces.copy()
        faces[:, 1:] += k * n_pts
        faces_list.append(faces)

        rgb = np.round(np.asarray(inst.color) * 255).astype(np.uint8)
        colors_list.append(np.tile(rgb, (n_pts, 1)))

    mesh = pv.PolyData(np.vstack(points_list), np.vstack(faces_list).ravel())
    mesh.point_data["colors"] = np.vstack(colors_list)
    return mesh


def build_scene_meshes(layout: LayoutResult, style: StyleParameters) -> Tuple[Optional[pv.PolyData], Optional[pv.PolyData]]:
    """(boxes, cylinders) meshes for one cube."""
    boxes = instance_mesh(box_base_mesh(style.main_cube_side), layout.boxes)
    cylinders = instance_mesh(cylinder_base_mesh(), layout.cylinders)
    logger.debug(
        f"Built preview meshes: {0 if boxes is None else boxes.n_cells} box cells, "
        f"{0 if cylinders is None else cylinders.n_cells} cylinder cells."
    )
    return boxes, cylinders


def add_cube(
    plotter: pv.Plotter,
    layout: LayoutResult,
    style: StyleParameters,
    wireframe: bool = False,
) -> None:
    boxes, cylinders = build_scene_meshes(layout, style)
    render_style = "wireframe" if wireframe else "surface"
    if cylinders is not None:
        plotter.add_mesh(
            cylinders, scalars="colors", rgb=True,
            opacity=style.cylinder_opacity, style=render_style,
        )
    if boxes is not None:
        plotter.add_mesh(
            boxes, scalars="colors", rgb=True,
            opacity=style.sub_square_opacity, style=render_style, smooth_shading=False,
        )


def show_preview(
    primary: LayoutResult,
    style: StyleParameters,
    secondary: Optional[LayoutResult] = None,
    background_color: str = DEFAULT_BACKGROUND_COLOR,
    off_screen: bool = False,
    screenshot: Optional[str] = None,
) -> None:
    """
    Open a PyVista window with the primary cube (and the secondary cube as a
    wireframe overlay, if given). With `screenshot`, the render is saved there.
    """
    logger.info("Opening 3D preview.")
    plotter = pv.Plotter(off_screen=off_screen or screenshot is not None)
    plotter.set_background(background_color)

    add_cube(plotter, primary, style)
    if secondary is not None:
        add_cube(plotter, secondary, style, wireframe=True)

    plotter.camera_position = CAMERA_POSITION
    if screenshot is not None:
        plotter.show(screenshot=screenshot)
        logger.info(f"Screenshot saved to: {screenshot}")
    else:
        plotter.show()
