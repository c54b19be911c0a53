"""
Instance Transforms
===================
The output of the layout engine: one rigid+scale transform and one color per
instance, for two pools (sub-square boxes and corner cylinders).

Pool sizes never depend on how many cells are active. Hidden instances carry
a zero scale instead of being dropped, so instance indices stay stable.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple, TYPE_CHECKING

import numpy as np

from facetcube.model.geometry_primitives import Vector, Quaternion, ZERO

if TYPE_CHECKING:
    import numpy.typing as npt

RGB = Tuple[float, float, float]


@dataclass(frozen=True)
class InstanceTransform:
    position: Vector
    rotation: Quaternion
    scale: Vector
    color: RGB

    @property
    def is_hidden(self) -> bool:
        return self.scale == ZERO

    def matrix(self) -> npt.NDArray[np.float64]:
        """4x4 TRS matrix (translation @ rotation @ scale)."""
        m = np.eye(4)
        m[:3, :3] = self.rotation.to_matrix() * self.scale.to_array()
        m[:3, 3] = self.position.to_array()
        return m


@dataclass
class LayoutResult:
    """Box and cylinder pools of one cube. `cylinders[4 * i + k]` is corner k of `boxes[i]`."""
    boxes: List[InstanceTransform] = field(default_factory=list)
    cylinders: List[InstanceTransform] = field(default_factory=list)
    face_offsets: List[int] = field(default_factory=list)  # first box index of each face

    def active_box_count(self) -> int:
        return sum(1 for b in self.boxes if not b.is_hidden)

    def face_slice(self, face_index: int) -> slice:
        """Box index range covered by one face."""
        start = self.face_offsets[face_index]
        stop = self.face_offsets[face_index + 1] if face_index + 1 < len(self.face_offsets) else len(self.boxes)
        return slice(start, stop)

    def corners_of(self, box_index: int) -> List[InstanceTransform]:
        return self.cylinders[4 * box_index:4 * box_index + 4]

    def box_matrices(self) -> npt.NDArray[np.float64]:
        return _stack_matrices(self.boxes)

    def cylinder_matrices(self) -> npt.NDArray[np.float64]:
        return _stack_matrices(self.cylinders)

    def box_colors(self) -> npt.NDArray[np.float32]:
        return _stack_colors(self.boxes)

    def cylinder_colors(self) -> npt.NDArray[np.float32]:
        return _stack_colors(self.cylinders)


def _stack_matrices(instances: List[InstanceTransform]) -> npt.NDArray[np.float64]:
    if not instances:
        return np.zeros((0, 4, 4))
    return np.stack([inst.matrix() for inst in instances])


def _stack_colors(instances: List[InstanceTransform]) -> npt.NDArray[np.float32]:
    return np.array([inst.color for inst in instances], dtype=np.float32).reshape(-1, 3)
