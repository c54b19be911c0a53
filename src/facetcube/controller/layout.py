"""
Cube Layout Engine
==================
Translates a CubeConfig into per-instance transforms for the two instance
pools consumed by the renderer.

Why is this file needed?
------------------------
1. Placement: It maps a flat row-major grid index onto an oriented position
   on one of the six cube faces (face orientation, explosion offset, border
   thickness, grid centering).
2. Stable indexing: Every cell gets a box slot and four cylinder slots whether
   it is active or not. Inactive slots are zero-scaled, never dropped.

Base geometry the transforms are relative to:
    - Box: a cube with edge `main_cube_side`, centered at the origin.
    - Cylinder: radius `CYLINDER_RADIUS`, height 1, axis along local Y.

The layout is a pure function of (config, palette, style).
"""
from __future__ import annotations

import logging
import math
from typing import List, Tuple

from facetcube.config import CORNER_SIGNALS, CYLINDER_RADIUS, NUM_FACES
from facetcube.controller.orientation import FACE_ORIENTATIONS, FaceOrientation
from facetcube.model.cube_config import CubeConfig, FaceGrid, InvalidGridLengthError
from facetcube.model.geometry_primitives import Quaternion, Vector, UNIT_X, ZERO
from facetcube.model.instances import InstanceTransform, LayoutResult
from facetcube.model.palette import Palette
from facetcube.model.style import StyleParameters

logger = logging.getLogger(__name__)

RIGHT_ANGLE = math.pi / 2
# Local quarter turn that lays the Y-axis cylinder along the box normal
_CYLINDER_TILT = Quaternion.from_axis_angle(UNIT_X, RIGHT_ANGLE)


def _grid_side(face_index: int, grid: FaceGrid) -> int:
    try:
        return grid.side
    except ValueError as e:
        raise InvalidGridLengthError(f"Face {face_index}: {e}") from e


class CubeLayoutEngine:
    """
    Computes box and cylinder instance transforms for one cube.

    Args:
        cylinder_radius: Radius of the base cylinder geometry, used to pull the
            corner cylinders inside the sub-square outline.
    """

    def __init__(self, cylinder_radius: float = CYLINDER_RADIUS):
        self.cylinder_radius = cylinder_radius

    def layout(self, config: CubeConfig, palette: Palette, style: StyleParameters) -> LayoutResult:
        """
        Lay out every face in face-index order.

        Box index = running cell counter across faces (row-major inside a face).
        Cylinder index = 4 * box index + corner index.
        """
        if len(config) != NUM_FACES or len(palette) != NUM_FACES:
            raise InvalidGridLengthError(
                f"Layout needs {NUM_FACES} faces and colors, got {len(config)} and {len(palette)}."
            )

        result = LayoutResult()
        for face_index, grid in enumerate(config):
            result.face_offsets.append(len(result.boxes))
            boxes, cylinders = self.layout_face(face_index, grid, palette, style)
            result.boxes.extend(boxes)
            result.cylinders.extend(cylinders)

        if len(result.cylinders) != 4 * len(result.boxes) or len(result.boxes) != config.total_cells:
            raise RuntimeError("Instance pool sizes are inconsistent with the configuration.")

        logger.info(
            f"Drawn cube: {len(result.boxes)} boxes ({result.active_box_count()} active), "
            f"{len(result.cylinders)} cylinders."
        )
        return result

    def layout_face(
        self,
        face_index: int,
        grid: FaceGrid,
        palette: Palette,
        style: StyleParameters,
    ) -> Tuple[List[InstanceTransform], List[InstanceTransform]]:
        """
        Lay out one face. Faces are independent, the output depends only on
        the arguments.

        Returns:
            (boxes, cylinders) with len(cylinders) == 4 * len(boxes) == 4 * len(grid).
        """
        orient: FaceOrientation = FACE_ORIENTATIONS[face_index]
        n = _grid_side(face_index, grid)
        color = palette.rgb(face_index)

        side = style.main_cube_side
        half_side = style.half_side
        scale = style.clamped_scale
        thickness = style.effective_thickness
        cyl_thickness = style.clamped_cylinder_thickness

        sub_real_side = side / n
        sub_rel_side_scaled = (1.0 / n) * scale

        # Outward displacement of every cell on this face
        static_displacement = orient.static_axis * (
            (half_side + style.absolute_thickness + style.explosion) * orient.sign
        )
        m1, m2 = orient.moving_axis_1, orient.moving_axis_2
        start = (m1 + m2) * (half_side - sub_real_side / 2)

        box_rotation = Quaternion.from_axis_angle(orient.rotation_axis, RIGHT_ANGLE)
        cylinder_rotation = box_rotation * _CYLINDER_TILT

        box_scale = Vector(sub_rel_side_scaled * scale, sub_rel_side_scaled * scale, thickness)
        cylinder_scale = Vector(cyl_thickness, side + 2 * style.explosion, cyl_thickness)
        corner_distance = sub_rel_side_scaled * scale * side

        boxes: List[InstanceTransform] = []
        cylinders: List[InstanceTransform] = []
        for row in range(n):
            for col in range(n):
                active = grid[row * n + col]
                center = start - m1 * (row * sub_real_side) - m2 * (col * sub_real_side)

                boxes.append(InstanceTransform(
                    position=static_displacement + center,
                    rotation=box_rotation,
                    scale=box_scale if active else ZERO,
                    color=color,
                ))

                # Cylinders run through the whole cube, so they skip the static displacement
                for s1, s2 in CORNER_SIGNALS:
                    offset_1 = s1 * corner_distance / 2 - s1 * cyl_thickness * self.cylinder_radius
                    offset_2 = s2 * corner_distance / 2 - s2 * cyl_thickness * self.cylinder_radius
                    cylinders.append(InstanceTransform(
                        position=center + m1 * offset_1 + m2 * offset_2,
                        rotation=cylinder_rotation,
                        scale=cylinder_scale if active else ZERO,
                        color=color,
                    ))

        return boxes, cylinders
