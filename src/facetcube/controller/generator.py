"""
Face Configuration Generators
=============================
Produces randomized CubeConfigs.

Why is this file needed?
------------------------
1. Primary cube: `FaceConfigGenerator` draws, for every face, how many cells
   are active and where they sit (uniform random permutation).
2. Secondary cube: `IntersectionConfigGenerator` derives a second config whose
   per-face active count is bounded by the primary face's remaining capacity.

Randomness is injected as a `numpy.random.Generator` (or anything
`numpy.random.default_rng` accepts, e.g. an int seed), so a fixed seed always
gives the same configuration. Each face draws from its own spawned child
generator, so no two faces share randomness state.
"""
from __future__ import annotations

import logging
from typing import List, Sequence, Union

import numpy as np

from facetcube.config import FACE_CAPACITIES, NUM_FACES
from facetcube.model.cube_config import CubeConfig, FaceGrid, InvalidGridLengthError

logger = logging.getLogger(__name__)

SeedLike = Union[None, int, np.random.SeedSequence, np.random.Generator]


def build_face(capacity: int, active_count: int, rng: np.random.Generator) -> FaceGrid:
    """
    Build one face grid with `active_count` active cells in a uniformly random order.

    Args:
        capacity: Grid length (one of the face capacities).
        active_count: Number of active cells, 0 <= active_count <= capacity.
        rng: Generator used for the permutation.

    Raises:
        ValueError: If `active_count` is outside [0, capacity].
    """
    if not 0 <= active_count <= capacity:
        raise ValueError(f"Active count {active_count} outside [0, {capacity}].")

    cells = np.zeros(capacity, dtype=bool)
    cells[:active_count] = True
    return FaceGrid(tuple(rng.permutation(cells)))


class _SeededGenerator:
    def __init__(self, seed: SeedLike = None, capacities: Sequence[int] = FACE_CAPACITIES):
        if len(capacities) != NUM_FACES:
            raise InvalidGridLengthError(f"Expected {NUM_FACES} face capacities, got {len(capacities)}.")
        self.capacities: tuple[int, ...] = tuple(capacities)
        self._rng: np.random.Generator = np.random.default_rng(seed)

    def _face_generators(self) -> List[np.random.Generator]:
        return self._rng.spawn(NUM_FACES)


class FaceConfigGenerator(_SeededGenerator):
    """Generates the primary cube configuration."""

    def generate(self) -> CubeConfig:
        faces = []
        for i, (capacity, face_rng) in enumerate(zip(self.capacities, self._face_generators())):
            # Upper bound is exclusive, so the inclusive cap equals the capacity
            active_count = int(face_rng.integers(0, capacity + 1))
            faces.append(build_face(capacity, active_count, face_rng))
            logger.debug(f"Face {i}: {active_count}/{capacity} active.")

        config = CubeConfig(tuple(faces))
        logger.info(f"Generated cube config, active per face: {config.active_counts}")
        return config


class IntersectionConfigGenerator(_SeededGenerator):
    """
    Derives a secondary configuration from a primary one.

    The relationship is a budget on counts only: each secondary face draws its
    active count from [0, len(face) + 1 - occupied), where `occupied` is the
    primary face's active count. Cell positions are permuted independently and
    may overlap the primary's active cells.
    """

    def secondary_bounds(self, primary: CubeConfig) -> List[int]:
        """
        Exclusive upper bound of the secondary active-count draw, per face.

        The capacity of each secondary face is the primary face's own cell
        count, so any valid CubeConfig can be intersected.
        """
        return [len(face) + 1 - face.active_count for face in primary]

    def derive_secondary(self, primary: CubeConfig) -> CubeConfig:
        bounds = self.secondary_bounds(primary)

        faces = []
        for i, (face, bound, face_rng) in enumerate(zip(primary, bounds, self._face_generators())):
            # A fully occupied face leaves the single value 0 (bound == 1)
            active_count = int(face_rng.integers(0, bound))
            faces.append(build_face(len(face), active_count, face_rng))
            logger.debug(f"Secondary face {i}: {active_count} active (bound {bound}).")

        config = CubeConfig(tuple(faces))
        logger.info(f"Derived secondary config, active per face: {config.active_counts}")
        return config


def generate_cube_pair(seed: SeedLike = None) -> tuple[CubeConfig, CubeConfig]:
    """Primary config plus an intersecting secondary, both drawn from one seed."""
    rng = np.random.default_rng(seed)
    primary = FaceConfigGenerator(rng).generate()
    secondary = IntersectionConfigGenerator(rng).derive_secondary(primary)
    return primary, secondary
