"""
Face Orientation Table
======================
Fixed per-face lookup of the static (normal) axis, the two moving axes that
span the face grid, the outward sign and the box rotation axis.

Built once at import time from the outward normals; the layout loop only
reads it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from facetcube.model.geometry_primitives import Vector, UNIT_X, UNIT_Y, UNIT_Z

FACE_NORMALS: Tuple[Tuple[int, int, int], ...] = (
    (0, 0, 1),
    (1, 0, 0),
    (0, 0, -1),
    (-1, 0, 0),
    (0, 1, 0),
    (0, -1, 0),
)

_AXES: Tuple[Vector, Vector, Vector] = (UNIT_X, UNIT_Y, UNIT_Z)


@dataclass(frozen=True)
class FaceOrientation:
    normal: Vector
    normal_axis: int  # 0=x, 1=y, 2=z
    sign: int  # +1 or -1
    moving_axis_1: Vector  # grid rows advance along this axis
    moving_axis_2: Vector  # grid columns advance along this axis
    rotation_axis: Vector

    @property
    def static_axis(self) -> Vector:
        """Unsigned unit vector parallel to the normal."""
        return _AXES[self.normal_axis]


def _build_orientation(normal: Tuple[int, int, int]) -> FaceOrientation:
    nonzero = [i for i, c in enumerate(normal) if c != 0]
    if len(nonzero) != 1 or abs(normal[nonzero[0]]) != 1:
        raise ValueError(f"Face normal {normal} is not a signed unit axis.")

    axis = nonzero[0]
    sign = normal[axis]
    moving = [a for i, a in enumerate(_AXES) if i != axis]
    static = _AXES[axis]
    # x/y components swapped, scaled by the outward sign
    rotation_axis = Vector(static.y, static.x, static.z) * sign

    return FaceOrientation(
        normal=Vector(*map(float, normal)),
        normal_axis=axis,
        sign=sign,
        moving_axis_1=moving[0],
        moving_axis_2=moving[1],
        rotation_axis=rotation_axis,
    )


FACE_ORIENTATIONS: Tuple[FaceOrientation, ...] = tuple(_build_orientation(n) for n in FACE_NORMALS)
