"""Procedural faceted-cube pattern: configuration generators and instance layout."""
from facetcube.controller.generator import FaceConfigGenerator, IntersectionConfigGenerator, generate_cube_pair
from facetcube.controller.layout import CubeLayoutEngine
from facetcube.model.cube_config import CubeConfig, FaceGrid, InvalidGridLengthError
from facetcube.model.palette import Palette, PaletteAssigner
from facetcube.model.state import CubeScene
from facetcube.model.style import OutOfRangeStyleParameterError, StyleParameters

__all__ = [
    "CubeConfig",
    "CubeLayoutEngine",
    "CubeScene",
    "FaceConfigGenerator",
    "FaceGrid",
    "IntersectionConfigGenerator",
    "InvalidGridLengthError",
    "OutOfRangeStyleParameterError",
    "Palette",
    "PaletteAssigner",
    "StyleParameters",
    "generate_cube_pair",
]
