import math

import numpy as np
import pytest

from facetcube.config import DEFAULT_COLORS
from facetcube.model.palette import Palette, PaletteAssigner
from facetcube.model.style import OutOfRangeStyleParameterError, StyleParameters


# --- Style ---

def test_default_style():
    style = StyleParameters()
    assert style.main_cube_side == 10.0
    assert style.sub_squares_scale == 0.9
    assert style.explosion == 0.1


@pytest.mark.parametrize("side", [0.0, -1.0])
def test_non_positive_side_is_rejected(side):
    with pytest.raises(OutOfRangeStyleParameterError):
        StyleParameters(main_cube_side=side)


def test_negative_explosion_is_rejected():
    with pytest.raises(OutOfRangeStyleParameterError):
        StyleParameters(explosion=-0.1)


@pytest.mark.parametrize("value", [math.nan, math.inf, "10", None, True])
def test_non_numeric_values_are_rejected(value):
    with pytest.raises(OutOfRangeStyleParameterError):
        StyleParameters(thickness=value)


def test_numpy_scalars_are_accepted():
    style = StyleParameters(main_cube_side=np.float32(10.0), explosion=np.int64(1))
    assert style.main_cube_side == 10.0
    assert style.explosion == 1.0
    assert type(style.main_cube_side) is float


def test_numpy_bool_is_rejected():
    with pytest.raises(OutOfRangeStyleParameterError):
        StyleParameters(thickness=np.bool_(True))


def test_scales_are_clamped():
    style = StyleParameters(sub_squares_scale=1.7, cylinder_thickness=-0.3)
    assert style.clamped_scale == 1.0
    assert style.clamped_cylinder_thickness == 0.0


@pytest.mark.parametrize("thickness, expected", [
    (0.0, 1e-5),
    (1e-9, 1e-5),
    (-1e-9, -1e-5),
    (0.25, 0.25),
    (-0.5, -0.5),
])
def test_thickness_floor(thickness, expected):
    assert StyleParameters(thickness=thickness).effective_thickness == expected


def test_absolute_thickness():
    assert StyleParameters(main_cube_side=8.0, thickness=0.5).absolute_thickness == pytest.approx(2.0)


def test_opacities_pass_through():
    style = StyleParameters(sub_square_opacity=0.3, cylinder_opacity=0.7)
    assert style.sub_square_opacity == 0.3
    assert style.cylinder_opacity == 0.7


def test_from_options_accepts_both_spellings():
    style = StyleParameters.from_options({"mainCubeSide": 4, "sub_squares_scale": 0.5})
    assert style.main_cube_side == 4.0
    assert style.sub_squares_scale == 0.5
    assert StyleParameters.from_options(style.to_options()) == style


def test_unknown_option_raises_key_error():
    with pytest.raises(KeyError):
        StyleParameters.from_options({"wobble": 1})


def test_with_option_revalidates():
    with pytest.raises(OutOfRangeStyleParameterError):
        StyleParameters().with_option("mainCubeSide", 0)


# --- Palette ---

def test_default_palette():
    palette = Palette()
    assert len(palette) == 6
    assert palette[3] == DEFAULT_COLORS[3].lower()
    assert palette.rgb(0) == pytest.approx((1.0, 0.0, 60 / 255))


def test_palette_needs_six_colors():
    with pytest.raises(ValueError):
        Palette(("#000000",) * 5)


def test_palette_rejects_bad_color():
    with pytest.raises(ValueError):
        Palette().with_color(0, "not-a-color")


def test_palette_index_range():
    with pytest.raises(IndexError):
        Palette().with_color(6, "#000000")


def test_set_color_emits_palette_changed():
    assigner = PaletteAssigner()
    calls = []
    assigner.palette_changed.connect(lambda i, p: calls.append((i, p[i])))

    assert assigner.set_color(4, "#00FF00")
    assert assigner.palette[4] == "#00ff00"
    assert calls == [(4, "#00ff00")]


def test_set_color_same_value_is_a_no_op():
    assigner = PaletteAssigner()
    calls = []
    assigner.palette_changed.connect(lambda i, p: calls.append(i))
    assert not assigner.set_color(0, DEFAULT_COLORS[0])
    assert calls == []


def test_set_color_accepts_rgb_tuples():
    assigner = PaletteAssigner.from_colors(["#000000"] * 6)
    assigner.set_color(1, (1.0, 1.0, 1.0))
    assert assigner.palette[1] == "#ffffff"


def test_reset_restores_defaults():
    assigner = PaletteAssigner.from_colors(["#000000"] * 6)
    assigner.reset()
    assert assigner.palette == Palette()


def test_palette_is_immutable():
    palette = Palette()
    palette.with_color(0, "#000000")
    assert palette[0] == DEFAULT_COLORS[0]
