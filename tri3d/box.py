"""Axis-aligned box geometry with per-face material groups."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import List, Tuple

from .attributes import BufferAttribute
from .geometry import BufferGeometry


@dataclass(frozen=True)
class BoxParameters:
    """The dimensions and subdivisions a box was built from."""

    width: float = 1.0
    height: float = 1.0
    depth: float = 1.0
    width_segments: int = 1
    height_segments: int = 1
    depth_segments: int = 1


@dataclass
class _Buffers:
    indices: List[int] = dataclasses.field(default_factory=list)
    vertices: List[float] = dataclasses.field(default_factory=list)
    normals: List[float] = dataclasses.field(default_factory=list)
    uvs: List[float] = dataclasses.field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // 3


def _build_plane(
    buffers: _Buffers,
    axes: Tuple[int, int, int],
    udir: float,
    vdir: float,
    width: float,
    height: float,
    depth: float,
    grid_x: int,
    grid_y: int,
) -> int:
    """Append one side of the box to the buffers; return its index count."""
    u, v, w = axes
    segment_width = width / grid_x
    segment_height = height / grid_y
    width_half = width / 2
    height_half = height / 2
    depth_half = depth / 2
    first_vertex = buffers.vertex_count
    row = grid_x + 1

    for iy in range(grid_y + 1):
        y = iy * segment_height - height_half
        for ix in range(grid_x + 1):
            x = ix * segment_width - width_half

            position = [0.0, 0.0, 0.0]
            position[u] = x * udir
            position[v] = y * vdir
            position[w] = depth_half
            buffers.vertices.extend(position)

            normal = [0.0, 0.0, 0.0]
            normal[w] = 1.0 if depth > 0 else -1.0
            buffers.normals.extend(normal)

            buffers.uvs.append(ix / grid_x)
            buffers.uvs.append(1.0 - iy / grid_y)

    count = 0
    for iy in range(grid_y):
        for ix in range(grid_x):
            a = first_vertex + ix + row * iy
            b = first_vertex + ix + row * (iy + 1)
            c = first_vertex + (ix + 1) + row * (iy + 1)
            d = first_vertex + (ix + 1) + row * iy
            buffers.indices.extend((a, b, d, b, c, d))
            count += 6
    return count


class BoxGeometry(BufferGeometry):
    """A box centred on the origin, one material group per side (+x, -x, +y, -y, +z, -z)."""

    def __init__(
        self,
        width: float = 1.0,
        height: float = 1.0,
        depth: float = 1.0,
        width_segments: int = 1,
        height_segments: int = 1,
        depth_segments: int = 1,
    ) -> None:
        super().__init__()
        self.type = "BoxGeometry"

        segments = (int(width_segments), int(height_segments), int(depth_segments))
        if min(segments) < 1:
            raise ValueError(f"segment counts must be at least 1, got {segments}")
        ws, hs, ds = segments

        self.parameters = BoxParameters(width, height, depth, ws, hs, ds)

        x, y, z = 0, 1, 2
        sides = [
            ((z, y, x), -1, -1, depth, height, width, ds, hs),
            ((z, y, x), 1, -1, depth, height, -width, ds, hs),
            ((x, z, y), 1, 1, width, depth, height, ws, ds),
            ((x, z, y), 1, -1, width, depth, -height, ws, ds),
            ((x, y, z), 1, -1, width, height, depth, ws, hs),
            ((x, y, z), -1, -1, width, height, -depth, ws, hs),
        ]

        buffers = _Buffers()
        group_start = 0
        for material_index, side in enumerate(sides):
            group_count = _build_plane(buffers, *side)
            self.add_group(group_start, group_count, material_index)
            group_start += group_count

        self.set_index(buffers.indices)
        self.set_attribute("position", BufferAttribute(buffers.vertices, 3))
        self.set_attribute("normal", BufferAttribute(buffers.normals, 3))
        self.set_attribute("uv", BufferAttribute(buffers.uvs, 2))

    def copy(self, source: BufferGeometry) -> BoxGeometry:
        """Copy the source's data and, if it is a box, its parameters."""
        super().copy(source)
        if isinstance(source, BoxGeometry):
            self.parameters = dataclasses.replace(source.parameters)
        return self