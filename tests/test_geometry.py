import math

import pytest

from tri3d.attributes import BufferAttribute
from tri3d.geometry import BufferGeometry, DrawRange, GeometryGroup

TRIANGLE = [(0, 0, 0), (1, 0, 0), (0, 1, 0)]


def _triangle_geometry():
    return BufferGeometry().set_from_points(TRIANGLE)


def test_new_geometry_defaults():
    g = BufferGeometry()
    assert g.type == "BufferGeometry"
    assert g.name == ""
    assert g.index is None
    assert g.attributes == {}
    assert g.groups == []
    assert g.draw_range == DrawRange(0, math.inf)


def test_ids_increase_and_uuids_differ():
    a, b = BufferGeometry(), BufferGeometry()
    assert b.id == a.id + 1
    assert a.uuid != b.uuid
    assert len(a.uuid) == 36


def test_set_index_from_list_and_attribute():
    g = BufferGeometry()
    g.set_index([0, 1, 2])
    assert g.index.item_size == 1
    assert g.index.array == [0, 1, 2]
    attr = BufferAttribute([2, 1, 0], 1)
    g.set_index(attr)
    assert g.index is attr


def test_attribute_management():
    g = BufferGeometry()
    attr = BufferAttribute([1, 2, 3], 3)
    assert g.get_attribute("position") is None
    assert g.set_attribute("position", attr) is g
    assert g.has_attribute("position")
    assert g.get_attribute("position") is attr
    g.delete_attribute("position")
    assert not g.has_attribute("position")
    g.delete_attribute("missing")
    assert g.attributes == {}


def test_groups_and_draw_range():
    g = BufferGeometry()
    g.add_group(0, 6)
    g.add_group(6, 6, 2)
    assert g.groups == [GeometryGroup(0, 6, 0), GeometryGroup(6, 6, 2)]
    g.clear_groups()
    assert g.groups == []
    g.set_draw_range(3, 9)
    assert (g.draw_range.start, g.draw_range.count) == (3, 9)


def test_set_from_points_creates_position():
    g = BufferGeometry().set_from_points([(1, 2), (3, 4, 5)])
    pos = g.get_attribute("position")
    assert pos.item_size == 3
    assert pos.array == [1, 2, 0, 3, 4, 5]


def test_set_from_points_overwrites_existing_and_warns_on_overflow():
    g = BufferGeometry().set_from_points([(0, 0, 0), (0, 0, 0)])
    with pytest.warns(UserWarning):
        g.set_from_points([(1, 1, 1), (2, 2, 2), (3, 3, 3)])
    pos = g.get_attribute("position")
    assert pos.count == 2
    assert pos.array == [1, 1, 1, 2, 2, 2]
    assert pos.needs_update


def test_vertex_normals_non_indexed_face_z():
    g = _triangle_geometry()
    g.compute_vertex_normals()
    normal = g.get_attribute("normal")
    for i in range(3):
        assert normal.get_xyz(i) == pytest.approx((0, 0, 1))


def test_vertex_normals_indexed_are_unit_length():
    g = BufferGeometry().set_from_points([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 1)])
    g.set_index([0, 1, 2, 0, 2, 3])
    g.compute_vertex_normals()
    normal = g.get_attribute("normal")
    assert normal.count == 4
    for i in range(4):
        assert math.dist(normal.get_xyz(i), (0, 0, 0)) == pytest.approx(1.0)


def test_vertex_normals_reset_existing_normals():
    g = _triangle_geometry()
    g.set_attribute("normal", BufferAttribute([5.0] * 9, 3))
    g.compute_vertex_normals()
    assert g.get_attribute("normal").get_xyz(1) == pytest.approx((0, 0, 1))


def test_normalize_normals_keeps_zero_vectors():
    g = BufferGeometry()
    g.set_attribute("normal", BufferAttribute([0, 0, 0, 0, 3, 4], 3))
    g.normalize_normals()
    normal = g.get_attribute("normal")
    assert normal.get_xyz(0) == (0, 0, 0)
    assert math.dist(normal.get_xyz(1), (0, 0, 0)) == pytest.approx(1.0)


def test_to_non_indexed_expands_attributes():
    g = BufferGeometry().set_from_points([(0, 0, 0), (1, 0, 0), (0, 1, 0)])
    g.set_index([2, 0, 1, 1])
    g.add_group(0, 3, 1)
    g.morph_attributes["position"] = [BufferAttribute([0, 0, 0, 1, 1, 1, 2, 2, 2], 3)]
    g.morph_targets_relative = True
    flat = g.to_non_indexed()
    assert flat is not g
    assert flat.index is None
    pos = flat.get_attribute("position")
    assert [pos.get_xyz(i) for i in range(4)] == [
        (0, 1, 0), (0, 0, 0), (1, 0, 0), (1, 0, 0)
    ]
    assert flat.morph_attributes["position"][0].get_xyz(0) == (2, 2, 2)
    assert flat.morph_targets_relative is True
    assert flat.groups == [GeometryGroup(0, 3, 1)]


def test_to_non_indexed_warns_when_not_indexed():
    g = _triangle_geometry()
    with pytest.warns(UserWarning):
        assert g.to_non_indexed() is g


def test_clone_is_independent():
    g = _triangle_geometry()
    g.name = "tri"
    g.set_index([0, 1, 2])
    g.add_group(0, 3)
    g.set_draw_range(0, 3)
    c = g.clone()
    assert c.id != g.id
    assert c.name == "tri"
    assert c.get_attribute("position") == g.get_attribute("position")
    assert c.index == g.index
    assert c.groups == g.groups
    assert c.draw_range == g.draw_range
    c.get_attribute("position").set_xyz(0, 9, 9, 9)
    assert g.get_attribute("position").get_xyz(0) == (0, 0, 0)


def test_copy_resets_previous_data():
    target = BufferGeometry()
    target.set_attribute("uv", BufferAttribute([0, 0], 2))
    target.add_group(0, 1)
    target.copy(_triangle_geometry())
    assert not target.has_attribute("uv")
    assert target.has_attribute("position")
    assert target.groups == []


def test_dispose_dispatches_event():
    g = BufferGeometry()
    seen = []
    g.add_listener("dispose", seen.append)
    g.dispose()
    assert len(seen) == 1
    assert seen[0].type_name == "dispose"
    assert seen[0].target is g