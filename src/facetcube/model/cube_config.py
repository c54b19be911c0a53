"""
Cube Face Configuration
=======================
Defines the immutable grid structures that describe which sub-squares of the
cube are active (rendered) and which are hidden.

Classes:
    FaceGrid: Row-major N x N boolean grid for one face.
    CubeConfig: Exactly six FaceGrids, index-aligned with the face table.
"""
from __future__ import annotations

from dataclasses import dataclass
import numbers
from typing import Iterable, Iterator, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from facetcube.config import NUM_FACES, VALID_GRID_LENGTHS
from facetcube.utils import integer_sqrt

if TYPE_CHECKING:
    import numpy.typing as npt


class InvalidGridLengthError(ValueError):
    """A face grid whose length is not one of the fixed perfect-square capacities."""


def _as_cell(value: object) -> bool:
    """A cell state from a bool, numpy bool or the integers 0/1."""
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, numbers.Integral) and value in (0, 1):
        return bool(value)
    raise ValueError(f"Cell state must be a bool or 0/1, got {value!r}.")


@dataclass(frozen=True)
class FaceGrid:
    """
    Ordered cell states for one face.
    Order is row-major relative to the face's local 2D coordinate frame.
    """
    cells: Tuple[bool, ...]

    def __post_init__(self) -> None:
        # Only booleans and the integers 0/1 are cell states; anything else is rejected
        object.__setattr__(self, "cells", tuple(_as_cell(c) for c in self.cells))
        if len(self.cells) not in VALID_GRID_LENGTHS:
            raise InvalidGridLengthError(
                f"Face grid length {len(self.cells)} is not one of {sorted(VALID_GRID_LENGTHS)}."
            )

    @classmethod
    def from_iterable(cls, values: Iterable) -> FaceGrid:
        return cls(tuple(values))

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[bool]:
        return iter(self.cells)

    def __getitem__(self, index: int) -> bool:
        return self.cells[index]

    @property
    def side(self) -> int:
        """Number of cells per grid line (N)."""
        return integer_sqrt(len(self.cells))

    @property
    def active_count(self) -> int:
        return sum(self.cells)

    def cell(self, row: int, col: int) -> bool:
        return self.cells[row * self.side + col]

    def to_array(self) -> npt.NDArray[np.bool_]:
        """(N, N) boolean array view of the grid."""
        n = self.side
        return np.array(self.cells, dtype=bool).reshape(n, n)


@dataclass(frozen=True)
class CubeConfig:
    """
    Exactly six FaceGrids, one per cube face, indexed 0..5 in the order of
    the face orientation table (+Z, +X, -Z, -X, +Y, -Y).
    """
    faces: Tuple[FaceGrid, ...]

    def __post_init__(self) -> None:
        faces = tuple(f if isinstance(f, FaceGrid) else FaceGrid.from_iterable(f) for f in self.faces)
        object.__setattr__(self, "faces", faces)
        if len(faces) != NUM_FACES:
            raise InvalidGridLengthError(f"A cube needs exactly {NUM_FACES} faces, got {len(faces)}.")

    @classmethod
    def from_lists(cls, faces: Sequence[Iterable]) -> CubeConfig:
        """Build a config from plain 0/1 (or bool) sequences."""
        return cls(tuple(FaceGrid.from_iterable(f) for f in faces))

    def __len__(self) -> int:
        return len(self.faces)

    def __iter__(self) -> Iterator[FaceGrid]:
        return iter(self.faces)

    def __getitem__(self, index: int) -> FaceGrid:
        return self.faces[index]

    @property
    def face_lengths(self) -> list[int]:
        return [len(f) for f in self.faces]

    @property
    def active_counts(self) -> list[int]:
        return [f.active_count for f in self.faces]

    @property
    def total_cells(self) -> int:
        return sum(self.face_lengths)

    def flattened(self) -> list[bool]:
        """All cells concatenated in face order (the box instance order)."""
        return [cell for face in self.faces for cell in face]

    def to_lists(self) -> list[list[int]]:
        return [[int(c) for c in face] for face in self.faces]
