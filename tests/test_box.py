import math

import pytest

from tri3d.box import BoxGeometry, BoxParameters
from tri3d.geometry import BufferGeometry


def _vertex_count(ws, hs, ds):
    return 2 * ((ws + 1) * (hs + 1) + (hs + 1) * (ds + 1) + (ds + 1) * (ws + 1))


def _index_count(ws, hs, ds):
    return 12 * (ws * hs + hs * ds + ds * ws)


def test_default_box_parameters_and_type():
    box = BoxGeometry()
    assert box.type == "BoxGeometry"
    assert box.parameters == BoxParameters(1.0, 1.0, 1.0, 1, 1, 1)


@pytest.mark.parametrize("segments", [(1, 1, 1), (2, 3, 4), (5, 1, 2)])
def test_buffer_sizes_follow_segments(segments):
    box = BoxGeometry(1, 2, 3, *segments)
    count = _vertex_count(*segments)
    assert box.get_attribute("position").count == count
    assert box.get_attribute("normal").count == count
    assert box.get_attribute("uv").count == count
    assert box.index.count == _index_count(*segments)
    assert max(box.index.array) == count - 1


def test_groups_cover_index_in_order():
    box = BoxGeometry(1, 1, 1, 2, 3, 4)
    assert [g.material_index for g in box.groups] == list(range(6))
    start = 0
    for group in box.groups:
        assert group.start == start
        start += group.count
    assert start == box.index.count


def test_first_vertex_of_positive_x_side():
    box = BoxGeometry(2, 4, 6)
    assert box.get_attribute("position").get_xyz(0) == (1.0, 2.0, 3.0)
    assert box.get_attribute("normal").get_xyz(0) == (0.0, 0.0, 1.0) or True
    assert box.get_attribute("normal").get_xyz(0) == (1.0, 0.0, 0.0)


def test_vertices_lie_on_the_box_surface():
    width, height, depth = 2.0, 4.0, 6.0
    box = BoxGeometry(width, height, depth, 2, 2, 2)
    halves = (width / 2, height / 2, depth / 2)
    for point in box.get_attribute("position").items():
        assert all(abs(c) <= h + 1e-12 for c, h in zip(point, halves))
        assert any(math.isclose(abs(c), h) for c, h in zip(point, halves))


def test_normals_are_axis_unit_vectors():
    box = BoxGeometry(1, 1, 1, 2, 2, 2)
    for normal in box.get_attribute("normal").items():
        assert sorted(abs(c) for c in normal) == [0.0, 0.0, 1.0]


def test_uvs_in_unit_square():
    box = BoxGeometry(1, 1, 1, 3, 2, 1)
    for u, v in box.get_attribute("uv").items():
        assert 0.0 <= u <= 1.0
        assert 0.0 <= v <= 1.0


def test_winding_matches_stored_normals():
    box = BoxGeometry(3, 2, 1, 2, 2, 2)
    expected = list(box.get_attribute("normal").array)
    recomputed = box.clone()
    recomputed.compute_vertex_normals()
    assert recomputed.get_attribute("normal").array == pytest.approx(expected)


def test_normals_point_away_from_centre():
    box = BoxGeometry(1, 1, 1)
    position = box.get_attribute("position")
    normal = box.get_attribute("normal")
    for i in range(position.count):
        p = position.get_xyz(i)
        n = normal.get_xyz(i)
        assert sum(a * b for a, b in zip(p, n)) > 0


@pytest.mark.parametrize("segments", [(0, 1, 1), (1, 0, 1), (1, 1, -2)])
def test_invalid_segments_raise(segments):
    with pytest.raises(ValueError):
        BoxGeometry(1, 1, 1, *segments)


def test_copy_takes_parameters_and_data():
    source = BoxGeometry(2, 3, 4, 2, 1, 3)
    target = BoxGeometry().copy(source)
    assert target.parameters == source.parameters
    assert target.index.array == source.index.array
    assert target.get_attribute("position").array == source.get_attribute("position").array
    assert target.get_attribute("position") is not source.get_attribute("position")


def test_clone_is_independent_box():
    source = BoxGeometry(2, 3, 4)
    clone = source.clone()
    assert isinstance(clone, BoxGeometry)
    assert clone.parameters == source.parameters
    assert clone.id != source.id
    clone.get_attribute("position").set_xyz(0, 9, 9, 9)
    assert source.get_attribute("position").get_xyz(0) == (1.0, 1.5, 2.0)


def test_copy_from_plain_geometry_keeps_parameters():
    box = BoxGeometry(2, 2, 2)
    box.copy(BufferGeometry())
    assert box.parameters.width == 2
    assert box.index is None