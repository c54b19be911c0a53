import pytest

pv = pytest.importorskip("pyvista")

from facetcube.view.preview import box_base_mesh, build_scene_meshes, cylinder_base_mesh, instance_mesh


def test_hidden_instances_produce_no_mesh(engine, palette, style, config_factory):
    result = engine.layout(config_factory(), palette, style)
    assert build_scene_meshes(result, style) == (None, None)


def test_one_mesh_copy_per_visible_instance(engine, palette, style, config_factory):
    result = engine.layout(config_factory(active_faces=(0,)), palette, style)
    boxes, cylinders = build_scene_meshes(result, style)

    assert boxes.n_points == 9 * box_base_mesh(style.main_cube_side).n_points
    assert cylinders.n_points == 36 * cylinder_base_mesh().n_points
    assert boxes["colors"].shape == (boxes.n_points, 3)


def test_box_mesh_bounds(engine, palette, style, config_factory):
    result = engine.layout(config_factory(active_faces=(0,)), palette, style)
    mesh = instance_mesh(box_base_mesh(style.main_cube_side), result.boxes)

    half_width = (1 / 3) * 0.9 * 0.9 * 10 / 2
    reach = 10 / 2 - 10 / 6 + half_width
    xmin, xmax, ymin, ymax, zmin, zmax = mesh.bounds
    assert xmax == pytest.approx(reach)
    assert xmin == pytest.approx(-reach)
    assert ymax == pytest.approx(reach)
    assert zmin == pytest.approx(5.0)
    assert zmax == pytest.approx(5.1)


def test_mesh_colors_match_face(engine, palette, style, config_factory):
    result = engine.layout(config_factory(active_faces=(4,)), palette, style)
    boxes, _ = build_scene_meshes(result, style)
    expected = [round(c * 255) for c in palette.rgb(4)]
    assert boxes["colors"][0].tolist() == expected
