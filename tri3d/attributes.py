"""Typed per-vertex data stored as a flat sequence of numbers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple


@dataclass
class BufferAttribute:
    """A flat array holding ``count`` items of ``item_size`` numbers each."""

    array: List[float]
    item_size: int
    normalized: bool = False
    needs_update: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if self.item_size < 1:
            raise ValueError(f"item_size must be positive, got {self.item_size}")
        self.array = list(self.array)
        if len(self.array) % self.item_size:
            raise ValueError(
                f"array length {len(self.array)} is not a multiple of item_size {self.item_size}"
            )

    @property
    def count(self) -> int:
        """Number of items in the attribute."""
        return len(self.array) // self.item_size

    def __len__(self) -> int:
        return self.count

    def _offset(self, index: int, width: int) -> int:
        if self.item_size < width:
            raise ValueError(
                f"attribute holds {self.item_size} components per item, {width} are needed"
            )
        if not 0 <= index < self.count:
            raise IndexError(f"item index {index} out of range 0..{self.count - 1}")
        return index * self.item_size

    def get_x(self, index: int) -> float:
        """First component of the item at ``index``."""
        return self.array[self._offset(index, 1)]

    def get_xyz(self, index: int) -> Tuple[float, float, float]:
        """First three components of the item at ``index``."""
        start = self._offset(index, 3)
        x, y, z = self.array[start:start + 3]
        return x, y, z

    def set_xyz(self, index: int, x: float, y: float, z: float) -> BufferAttribute:
        """Overwrite the first three components of the item at ``index``."""
        start = self._offset(index, 3)
        self.array[start:start + 3] = [x, y, z]
        return self

    def set_xyzw(self, index: int, x: float, y: float, z: float, w: float) -> BufferAttribute:
        """Overwrite the first four components of the item at ``index``."""
        start = self._offset(index, 4)
        self.array[start:start + 4] = [x, y, z, w]
        return self

    def items(self) -> Iterable[Sequence[float]]:
        """Yield each item as a slice of ``item_size`` numbers."""
        size = self.item_size
        for start in range(0, len(self.array), size):
            yield self.array[start:start + size]

    def clone(self) -> BufferAttribute:
        """An independent copy with the same data, item size and normalisation."""
        return BufferAttribute(list(self.array), self.item_size, self.normalized)

    def take(self, indices: Iterable[int]) -> BufferAttribute:
        """A new attribute made of the items at ``indices``, in that order."""
        size = self.item_size
        data: List[float] = []
        for index in indices:
            start = self._offset(int(index), 1)
            data.extend(self.array[start:start + size])
        return BufferAttribute(data, size, self.normalized)