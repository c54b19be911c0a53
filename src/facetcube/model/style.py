"""
Style Parameters
================
Scalar configuration consumed by the layout engine.

The option names of the UI/config surface are camelCase (`mainCubeSide`);
the dataclass fields are snake_case. `OPTION_ALIASES` maps between them.
"""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping
import math
import numbers

import numpy as np

from facetcube.config import DEFAULT_STYLE, THICKNESS_FLOOR
from facetcube.utils import clamp, floor_magnitude


class OutOfRangeStyleParameterError(ValueError):
    """A style scalar outside its documented domain that can't be safely clamped."""


OPTION_ALIASES: Dict[str, str] = {
    "mainCubeSide": "main_cube_side",
    "thickness": "thickness",
    "explosion": "explosion",
    "subSquaresScale": "sub_squares_scale",
    "subSquareOpacity": "sub_square_opacity",
    "cylinderThickness": "cylinder_thickness",
    "cylinderOpacity": "cylinder_opacity",
}


def resolve_option_name(name: str) -> str:
    """Map a camelCase or snake_case option name onto a StyleParameters field."""
    if name in OPTION_ALIASES:
        return OPTION_ALIASES[name]
    if name in OPTION_ALIASES.values():
        return name
    raise KeyError(f"Unknown style option '{name}'.")


@dataclass(frozen=True)
class StyleParameters:
    main_cube_side: float = DEFAULT_STYLE["main_cube_side"]
    thickness: float = DEFAULT_STYLE["thickness"]
    explosion: float = DEFAULT_STYLE["explosion"]
    sub_squares_scale: float = DEFAULT_STYLE["sub_squares_scale"]
    sub_square_opacity: float = DEFAULT_STYLE["sub_square_opacity"]
    cylinder_thickness: float = DEFAULT_STYLE["cylinder_thickness"]
    cylinder_opacity: float = DEFAULT_STYLE["cylinder_opacity"]

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, numbers.Real) or isinstance(value, (bool, np.bool_)) or not math.isfinite(value):
                raise OutOfRangeStyleParameterError(f"'{f.name}' must be a finite number, got {value!r}.")
            object.__setattr__(self, f.name, float(value))

        if self.main_cube_side <= 0.0:
            raise OutOfRangeStyleParameterError(
                f"'main_cube_side' must be positive, got {self.main_cube_side}."
            )
        if self.explosion < 0.0:
            raise OutOfRangeStyleParameterError(
                f"'explosion' must be non-negative, got {self.explosion}."
            )

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> StyleParameters:
        """Build from a mapping of UI option names (camelCase or snake_case)."""
        kwargs = {resolve_option_name(k): v for k, v in options.items()}
        return cls(**kwargs)

    def with_option(self, name: str, value: float) -> StyleParameters:
        return replace(self, **{resolve_option_name(name): value})

    # --- Derived values used by the layout ---

    @property
    def half_side(self) -> float:
        return self.main_cube_side / 2.0

    @property
    def clamped_scale(self) -> float:
        return clamp(self.sub_squares_scale, 0.0, 1.0)

    @property
    def effective_thickness(self) -> float:
        """Relative thickness with near-zero magnitudes floored."""
        return floor_magnitude(self.thickness, THICKNESS_FLOOR)

    @property
    def absolute_thickness(self) -> float:
        return self.half_side * self.effective_thickness

    @property
    def clamped_cylinder_thickness(self) -> float:
        return clamp(self.cylinder_thickness, 0.0, 1.0)

    def to_options(self) -> Dict[str, float]:
        """camelCase option mapping (inverse of `from_options`)."""
        return {alias: getattr(self, name) for alias, name in OPTION_ALIASES.items()}
