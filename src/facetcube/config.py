"""
Configuration & Global Constants
================================
This module serves as the central registry for the fixed tables and default
values shared by the generators, the layout engine and the scene state.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (face capacities, base geometry
   sizes) being scattered throughout the code.
2. Defaults: The UI/config collaborator and the CLI read the same default
   style values from one place.

Exports:
    FACE_CAPACITIES (tuple): Number of grid cells per cube face.
    DEFAULT_COLORS (tuple): Default face colors (hex).
    DEFAULT_STYLE (dict): Default style parameter values.
"""
from typing import Dict, Tuple

# Cube topology
NUM_FACES: int = 6
FACE_CAPACITIES: Tuple[int, ...] = (9, 16, 25, 36, 49, 64)
VALID_GRID_LENGTHS = frozenset(FACE_CAPACITIES)

# Palette
DEFAULT_COLORS: Tuple[str, ...] = (
    "#ff003c",
    "#ff7b00",
    "#ffcd00",
    "#5ED723",
    "#1E63FF",
    "#ba0dbe",
)
DEFAULT_BACKGROUND_COLOR: str = "#202426"

# Base geometry of the two instance pools
THICKNESS_FLOOR: float = 1e-5
CYLINDER_RADIUS: float = 0.05  # radius of the unit-height cylinder
CYLINDER_HEIGHT: float = 1.0
CORNER_SIGNALS: Tuple[Tuple[int, int], ...] = ((1, 1), (1, -1), (-1, -1), (-1, 1))

# Style defaults (snake_case names, see model.style.StyleParameters)
DEFAULT_STYLE: Dict[str, float] = {
    "main_cube_side": 10.0,
    "thickness": 0.01,
    "explosion": 0.1,
    "sub_squares_scale": 0.9,
    "sub_square_opacity": 0.9,
    "cylinder_thickness": 0.1,
    "cylinder_opacity": 0.8,
}
