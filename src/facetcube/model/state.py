"""
Scene State (Data Model)
========================
This module defines the central data structure for a running cube scene.

Why is this file needed?
------------------------
1. State Management: It holds the primary and secondary configurations, the
   palette and the style parameters in one place.
2. Configuration surface: `apply_option` is the single entry point for the
   UI/config collaborator (style sliders, color0..color5, regenerate).
3. Recompute signaling: Every change marks the scene dirty; `compute_layout`
   recomputes both cubes synchronously and clears the flag.

Classes:
    SceneLayout: Layout results for both cubes.
    CubeScene: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Optional, TYPE_CHECKING

import numpy as np

from facetcube.config import DEFAULT_BACKGROUND_COLOR, NUM_FACES
from facetcube.controller.generator import FaceConfigGenerator, IntersectionConfigGenerator, SeedLike
from facetcube.controller.layout import CubeLayoutEngine
from facetcube.model.cube_config import CubeConfig
from facetcube.model.palette import PaletteAssigner, Palette
from facetcube.model.style import StyleParameters, resolve_option_name

if TYPE_CHECKING:
    from facetcube.model.instances import LayoutResult

logger = logging.getLogger(__name__)

COLOR_OPTIONS = {f"color{i}": i for i in range(NUM_FACES)}


@dataclass
class SceneLayout:
    primary: LayoutResult
    secondary: LayoutResult


@dataclass(eq=False)
class CubeScene:
    """
    Holds the entire state of one cube scene.
    Build it with `CubeScene.create(seed)`; pass it to the views.
    """
    primary: CubeConfig
    secondary: CubeConfig
    primary_generator: FaceConfigGenerator
    secondary_generator: IntersectionConfigGenerator
    assigner: PaletteAssigner = field(default_factory=PaletteAssigner)
    style: StyleParameters = field(default_factory=StyleParameters)
    background_color: str = DEFAULT_BACKGROUND_COLOR

    needs_layout: bool = True
    layout_version: int = 0

    def __post_init__(self) -> None:
        self.assigner.palette_changed.connect(self._on_palette_changed)

    @classmethod
    def create(
        cls,
        seed: SeedLike = None,
        style: Optional[StyleParameters] = None,
        assigner: Optional[PaletteAssigner] = None,
    ) -> CubeScene:
        """Generate an initial primary/secondary pair from one seeded generator."""
        rng = np.random.default_rng(seed)
        primary_generator = FaceConfigGenerator(rng)
        secondary_generator = IntersectionConfigGenerator(rng)
        primary = primary_generator.generate()
        secondary = secondary_generator.derive_secondary(primary)
        return cls(
            primary=primary,
            secondary=secondary,
            primary_generator=primary_generator,
            secondary_generator=secondary_generator,
            assigner=assigner if assigner is not None else PaletteAssigner(),
            style=style or StyleParameters(),
        )

    @property
    def palette(self) -> Palette:
        return self.assigner.palette

    def _mark_dirty(self, reason: str) -> None:
        self.needs_layout = True
        logger.debug(f"Scene needs layout: {reason}")

    def _on_palette_changed(self, face_index: int, palette: Palette) -> None:
        self._mark_dirty(f"color{face_index} changed")

    # ------------------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------------------

    def regenerate(self) -> None:
        """Draw a new primary config and a new intersecting secondary."""
        self.primary = self.primary_generator.generate()
        self.secondary = self.secondary_generator.derive_secondary(self.primary)
        logger.info("Scene regenerated.")
        self._mark_dirty("regenerate")

    def set_color(self, face_index: int, color: Any) -> None:
        """Grid activity is untouched; only colors change."""
        self.assigner.set_color(face_index, color)

    def set_style(self, style: StyleParameters) -> None:
        if style != self.style:
            self.style = style
            self._mark_dirty("style changed")

    def apply_option(self, name: str, value: Any = None) -> None:
        """
        Apply one option of the configuration surface.

        Raises:
            KeyError: If `name` is not a recognized option.
            OutOfRangeStyleParameterError: If a style value is rejected.
        """
        if name == "regenerate":
            self.regenerate()
        elif name in COLOR_OPTIONS:
            self.set_color(COLOR_OPTIONS[name], value)
        elif name in ("backgroundColor", "background_color"):
            self.background_color = value
        else:
            self.set_style(self.style.with_option(resolve_option_name(name), value))

    # ------------------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------------------

    def compute_layout(self, engine: Optional[CubeLayoutEngine] = None) -> SceneLayout:
        """Lay out both cubes with the current palette and style (blocking)."""
        engine = engine or CubeLayoutEngine()
        scene_layout = SceneLayout(
            primary=engine.layout(self.primary, self.palette, self.style),
            secondary=engine.layout(self.secondary, self.palette, self.style),
        )
        self.needs_layout = False
        self.layout_version += 1
        return scene_layout
