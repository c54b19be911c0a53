import pytest

from facetcube.config import FACE_CAPACITIES
from facetcube.controller.layout import CubeLayoutEngine
from facetcube.model.cube_config import CubeConfig
from facetcube.model.palette import Palette
from facetcube.model.style import StyleParameters


def make_config(active_faces=()):
    """Config with full-capacity faces; faces listed in `active_faces` are all active."""
    return CubeConfig.from_lists(
        [[1 if i in active_faces else 0] * capacity for i, capacity in enumerate(FACE_CAPACITIES)]
    )


@pytest.fixture
def engine():
    return CubeLayoutEngine()


@pytest.fixture
def palette():
    return Palette()


@pytest.fixture
def style():
    return StyleParameters(main_cube_side=10.0, thickness=0.01, explosion=0.0)


@pytest.fixture
def checkerboard_config():
    return CubeConfig.from_lists(
        [[(j % 2) for j in range(capacity)] for capacity in FACE_CAPACITIES]
    )


@pytest.fixture
def config_factory():
    return make_config
