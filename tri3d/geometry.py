"""Indexed or non-indexed geometry made of named per-vertex attributes."""

from __future__ import annotations

import itertools
import math
import uuid
import warnings
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .attributes import BufferAttribute
from .events import EventDispatcher

_geometry_ids = itertools.count()

Vec3 = Tuple[float, float, float]


def _sub(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return a[0] - b[0], a[1] - b[1], a[2] - b[2]


def _add(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return a[0] + b[0], a[1] + b[1], a[2] + b[2]


def _cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(v: Sequence[float]) -> Vec3:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2]) or 1.0
    return v[0] / length, v[1] / length, v[2] / length


@dataclass
class GeometryGroup:
    """A range of the geometry drawn with one material."""

    start: int
    count: int
    material_index: int = 0


@dataclass
class DrawRange:
    """The part of the geometry that is rendered."""

    start: int = 0
    count: float = math.inf


class BufferGeometry(EventDispatcher):
    """Vertex data held as named attributes, with an optional index."""

    def __init__(self) -> None:
        super().__init__()
        self.id: int = next(_geometry_ids)
        self.uuid: str = str(uuid.uuid4()).upper()
        self.name: str = ""
        self.type: str = "BufferGeometry"

        self.index: Optional[BufferAttribute] = None
        self.attributes: Dict[str, BufferAttribute] = {}
        self.morph_attributes: Dict[str, List[BufferAttribute]] = {}
        self.morph_targets_relative: bool = False
        self.groups: List[GeometryGroup] = []
        self.draw_range = DrawRange()
        self.user_data: Dict[str, Any] = {}

    def set_index(self, index: Union[BufferAttribute, Iterable[int], None]) -> BufferGeometry:
        """Set the index from an attribute, or from a sequence of vertex numbers."""
        if index is None or isinstance(index, BufferAttribute):
            self.index = index
        else:
            self.index = BufferAttribute([int(i) for i in index], 1)
        return self

    def get_attribute(self, name: str) -> Optional[BufferAttribute]:
        """The attribute of that name, or None."""
        return self.attributes.get(name)

    def set_attribute(self, name: str, attribute: BufferAttribute) -> BufferGeometry:
        """Store an attribute under a name."""
        self.attributes[name] = attribute
        return self

    def delete_attribute(self, name: str) -> BufferGeometry:
        """Remove an attribute; unknown names are ignored."""
        self.attributes.pop(name, None)
        return self

    def has_attribute(self, name: str) -> bool:
        """Tell whether an attribute of that name exists."""
        return name in self.attributes

    def add_group(self, start: int, count: int, material_index: int = 0) -> None:
        """Append a material group."""
        self.groups.append(GeometryGroup(start, count, material_index))

    def clear_groups(self) -> None:
        """Drop every material group."""
        self.groups = []

    def set_draw_range(self, start: int, count: float) -> None:
        """Limit rendering to ``count`` elements from ``start``."""
        self.draw_range.start = start
        self.draw_range.count = count

    def set_from_points(self, points: Sequence[Sequence[float]]) -> BufferGeometry:
        """Fill the position attribute from 2D or 3D points."""
        coords = [(p[0], p[1], p[2] if len(p) > 2 else 0) for p in points]
        position = self.get_attribute("position")
        if position is None:
            flat = [c for point in coords for c in point]
            self.set_attribute("position", BufferAttribute(flat, 3))
            return self

        for i, (x, y, z) in zip(range(position.count), coords):
            position.set_xyz(i, x, y, z)
        if len(coords) > position.count:
            warnings.warn(
                "BufferGeometry: buffer size too small for points data; "
                "dispose and create a new geometry.",
                stacklevel=2,
            )
        position.needs_update = True
        return self

    def compute_vertex_normals(self) -> None:
        """Compute smooth (indexed) or flat (non-indexed) vertex normals."""
        position = self.get_attribute("position")
        if position is None:
            return

        normal = self.get_attribute("normal")
        if normal is None:
            normal = BufferAttribute([0.0] * (position.count * 3), 3)
            self.set_attribute("normal", normal)
        else:
            for i in range(normal.count):
                normal.set_xyz(i, 0, 0, 0)

        if self.index is not None:
            indices = [int(v) for v in self.index.array]
            for a, b, c in zip(indices[0::3], indices[1::3], indices[2::3]):
                pa, pb, pc = position.get_xyz(a), position.get_xyz(b), position.get_xyz(c)
                face = _cross(_sub(pc, pb), _sub(pa, pb))
                for vertex in (a, b, c):
                    normal.set_xyz(vertex, *_add(normal.get_xyz(vertex), face))
        else:
            for i in range(0, position.count - 2, 3):
                pa, pb, pc = (position.get_xyz(i + k) for k in range(3))
                face = _cross(_sub(pc, pb), _sub(pa, pb))
                for k in range(3):
                    normal.set_xyz(i + k, *face)

        self.normalize_normals()
        normal.needs_update = True

    def normalize_normals(self) -> None:
        """Scale every normal to unit length; zero normals stay zero."""
        normals = self.attributes["normal"]
        for i in range(normals.count):
            normals.set_xyz(i, *_normalize(normals.get_xyz(i)))

    def to_non_indexed(self) -> BufferGeometry:
        """A new geometry with every indexed vertex written out in order."""
        if self.index is None:
            warnings.warn(
                "BufferGeometry.to_non_indexed(): geometry is already non-indexed.",
                stacklevel=2,
            )
            return self

        result = BufferGeometry()
        indices = [int(v) for v in self.index.array]

        for name, attribute in self.attributes.items():
            result.set_attribute(name, attribute.take(indices))

        for name, morph in self.morph_attributes.items():
            result.morph_attributes[name] = [attribute.take(indices) for attribute in morph]

        result.morph_targets_relative = self.morph_targets_relative

        for group in self.groups:
            result.add_group(group.start, group.count, group.material_index)

        return result

    def copy(self, source: BufferGeometry) -> BufferGeometry:
        """Replace this geometry's data with copies of the source's."""
        self.index = None
        self.attributes = {}
        self.morph_attributes = {}
        self.groups = []

        self.name = source.name

        if source.index is not None:
            self.set_index(source.index.clone())

        for name, attribute in source.attributes.items():
            self.set_attribute(name, attribute.clone())

        for name, morph in source.morph_attributes.items():
            self.morph_attributes[name] = [attribute.clone() for attribute in morph]

        self.morph_targets_relative = source.morph_targets_relative

        for group in source.groups:
            self.add_group(group.start, group.count, group.material_index)

        self.draw_range.start = source.draw_range.start
        self.draw_range.count = source.draw_range.count

        self.user_data = source.user_data
        return self

    def clone(self) -> BufferGeometry:
        """A new geometry of the same class holding copies of this one's data."""
        return type(self)().copy(self)

    def dispose(self) -> None:
        """Notify listeners that the geometry is no longer used."""
        self.dispatch_event("dispose")