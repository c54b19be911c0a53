"""
Face Palette
============
Maps each face index to a display color.

Why is this file needed?
------------------------
1. Ownership: The only mutable state crossing layout computations is the
   palette. `PaletteAssigner` is the single place allowed to change it.
2. Signaling: Every color change emits `palette_changed` so the owner of the
   layout knows it has to recompute (the "regenerate" action at the caller).

Classes:
    Palette: Immutable sequence of six colors.
    PaletteAssigner: Holds the current Palette and exposes `set_color`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
import logging

from matplotlib.colors import to_hex, to_rgb
from PySide6.QtCore import QObject, Signal

from facetcube.config import DEFAULT_COLORS, NUM_FACES

logger = logging.getLogger(__name__)

ColorLike = str | Tuple[float, float, float]


@dataclass(frozen=True)
class Palette:
    """Six colors stored as lowercase '#rrggbb' strings, index-aligned with CubeConfig faces."""
    colors: Tuple[str, ...] = DEFAULT_COLORS

    def __post_init__(self) -> None:
        if len(self.colors) != NUM_FACES:
            raise ValueError(f"A palette needs exactly {NUM_FACES} colors, got {len(self.colors)}.")
        # to_hex raises ValueError for anything matplotlib can't parse
        object.__setattr__(self, "colors", tuple(to_hex(c) for c in self.colors))

    def __len__(self) -> int:
        return len(self.colors)

    def __getitem__(self, index: int) -> str:
        return self.colors[index]

    def rgb(self, face_index: int) -> Tuple[float, float, float]:
        """Float RGB triple in [0, 1] for a face."""
        return to_rgb(self.colors[face_index])

    def with_color(self, face_index: int, color: ColorLike) -> Palette:
        if not 0 <= face_index < NUM_FACES:
            raise IndexError(f"Face index {face_index} out of range 0..{NUM_FACES - 1}.")
        colors = list(self.colors)
        colors[face_index] = color
        return Palette(tuple(colors))


class PaletteAssigner(QObject):
    """
    Holds the current Palette.
    Pass `palette` into the layout engine; change colors only through `set_color`.
    `palette_changed(face_index, new_palette)` is emitted after every change.
    """
    palette_changed = Signal(int, object)

    def __init__(self, palette: Optional[Palette] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.palette: Palette = palette if palette is not None else Palette()

    @classmethod
    def from_colors(cls, colors: Sequence[ColorLike]) -> PaletteAssigner:
        return cls(palette=Palette(tuple(colors)))

    def set_color(self, face_index: int, color: ColorLike) -> bool:
        """
        Replace one palette entry.

        Returns:
            True if the palette changed (dependent layouts must be recomputed),
            False if the color was already set.
        """
        new_palette = self.palette.with_color(face_index, color)
        if new_palette == self.palette:
            return False

        self.palette = new_palette
        logger.info(f"Face {face_index} color set to {new_palette[face_index]}.")
        self.palette_changed.emit(face_index, new_palette)
        return True

    def reset(self) -> None:
        """Restore the default colors, emitting `palette_changed` for every face that changes."""
        for i, color in enumerate(DEFAULT_COLORS):
            self.set_color(i, color)
