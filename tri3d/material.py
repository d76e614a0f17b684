"""Base class holding the render state shared by all materials."""

from __future__ import annotations

import copy as _copy
import itertools
import json
import uuid
import warnings
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .events import EventDispatcher

_material_ids = itertools.count()

_FRONT_SIDE = 0
_NORMAL_BLENDING = 1
_ADD_EQUATION = 100
_SRC_ALPHA_FACTOR = 204
_ONE_MINUS_SRC_ALPHA_FACTOR = 205
_LESS_EQUAL_DEPTH = 3
_ALWAYS_STENCIL_FUNC = 519
_KEEP_STENCIL_OP = 7680

_MISSING = object()
_PLAIN_TYPES = (bool, int, float, str, bytes, list, tuple, dict, set)


class Material(EventDispatcher):
    """Blending, depth, stencil and other render settings of a material."""

    def __init__(self) -> None:
        super().__init__()
        self.id: int = next(_material_ids)
        self.uuid: str = str(uuid.uuid4()).upper()
        self.name: str = ""
        self.type: str = "Material"

        self.blending: int = _NORMAL_BLENDING
        self.side: int = _FRONT_SIDE
        self.vertex_colors: bool = False

        self.opacity: float = 1.0
        self.transparent: bool = False
        self.alpha_hash: bool = False

        self.blend_src: int = _SRC_ALPHA_FACTOR
        self.blend_dst: int = _ONE_MINUS_SRC_ALPHA_FACTOR
        self.blend_equation: int = _ADD_EQUATION
        self.blend_src_alpha: Optional[int] = None
        self.blend_dst_alpha: Optional[int] = None
        self.blend_equation_alpha: Optional[int] = None
        self.blend_color: Tuple[float, float, float] = (0.0, 0.0, 0.0)
        self.blend_alpha: float = 0.0

        self.depth_func: int = _LESS_EQUAL_DEPTH
        self.depth_test: bool = True
        self.depth_write: bool = True

        self.stencil_write_mask: int = 0xFF
        self.stencil_func: int = _ALWAYS_STENCIL_FUNC
        self.stencil_ref: int = 0
        self.stencil_func_mask: int = 0xFF
        self.stencil_fail: int = _KEEP_STENCIL_OP
        self.stencil_z_fail: int = _KEEP_STENCIL_OP
        self.stencil_z_pass: int = _KEEP_STENCIL_OP
        self.stencil_write: bool = False

        self.clipping_planes: Optional[List[Any]] = None
        self.clip_intersection: bool = False
        self.clip_shadows: bool = False

        self.shadow_side: Optional[int] = None
        self.color_write: bool = True
        self.precision: Optional[str] = None

        self.polygon_offset: bool = False
        self.polygon_offset_factor: float = 0.0
        self.polygon_offset_units: float = 0.0

        self.dithering: bool = False

        self.alpha_to_coverage: bool = False
        self.premultiplied_alpha: bool = False
        self.force_single_pass: bool = False

        self.visible: bool = True
        self.tone_mapped: bool = True
        self.user_data: Dict[str, Any] = {}

        self.version: int = 0
        self._alpha_test: float = 0.0

    @property
    def alpha_test(self) -> float:
        """Alpha threshold below which fragments are discarded."""
        return self._alpha_test

    @alpha_test.setter
    def alpha_test(self, value: float) -> None:
        if (self._alpha_test > 0) != (value > 0):
            self.version += 1
        self._alpha_test = value

    def _mark_needs_update(self, value: bool) -> None:
        if value is True:
            self.version += 1

    needs_update = property(None, _mark_needs_update, doc="Setting True bumps the version.")

    def set_values(self, values: Optional[Mapping[str, Any]]) -> None:
        """Assign known properties from a mapping, warning about unusable keys."""
        if values is None:
            return
        for key, new_value in values.items():
            if new_value is None:
                warnings.warn(f"Material: parameter '{key}' has value of None.", stacklevel=2)
                continue
            try:
                current = getattr(self, key, _MISSING)
            except AttributeError:
                current = _MISSING
            if current is _MISSING or key.startswith("_"):
                warnings.warn(f"Material: '{key}' is not a property of {self.type}.", stacklevel=2)
                continue

            if current is None or isinstance(current, _PLAIN_TYPES):
                setattr(self, key, new_value)
            elif callable(getattr(current, "set", None)):
                current.set(new_value)
            elif isinstance(new_value, type(current)) and callable(getattr(current, "copy", None)):
                current.copy(new_value)
            else:
                setattr(self, key, new_value)

    def copy(self, source: Material) -> Material:
        """Take over the source's settings; clipping planes and user data are copied."""
        self.name = source.name

        self.blending = source.blending
        self.side = source.side
        self.vertex_colors = source.vertex_colors

        self.opacity = source.opacity
        self.transparent = source.transparent

        self.blend_src = source.blend_src
        self.blend_dst = source.blend_dst
        self.blend_equation = source.blend_equation
        self.blend_src_alpha = source.blend_src_alpha
        self.blend_dst_alpha = source.blend_dst_alpha
        self.blend_equation_alpha = source.blend_equation_alpha
        self.blend_color = tuple(source.blend_color)
        self.blend_alpha = source.blend_alpha

        self.depth_func = source.depth_func
        self.depth_test = source.depth_test
        self.depth_write = source.depth_write

        self.stencil_write_mask = source.stencil_write_mask
        self.stencil_func = source.stencil_func
        self.stencil_ref = source.stencil_ref
        self.stencil_func_mask = source.stencil_func_mask
        self.stencil_fail = source.stencil_fail
        self.stencil_z_fail = source.stencil_z_fail
        self.stencil_z_pass = source.stencil_z_pass
        self.stencil_write = source.stencil_write

        planes = source.clipping_planes
        self.clipping_planes = None if planes is None else [_copy.copy(p) for p in planes]
        self.clip_intersection = source.clip_intersection
        self.clip_shadows = source.clip_shadows

        self.shadow_side = source.shadow_side
        self.color_write = source.color_write
        self.precision = source.precision

        self.polygon_offset = source.polygon_offset
        self.polygon_offset_factor = source.polygon_offset_factor
        self.polygon_offset_units = source.polygon_offset_units

        self.dithering = source.dithering

        self.alpha_test = source.alpha_test
        self.alpha_hash = source.alpha_hash
        self.alpha_to_coverage = source.alpha_to_coverage
        self.premultiplied_alpha = source.premultiplied_alpha
        self.force_single_pass = source.force_single_pass

        self.visible = source.visible
        self.tone_mapped = source.tone_mapped

        self.user_data = json.loads(json.dumps(source.user_data))
        return self

    def clone(self) -> Material:
        """A new material of the same class with this one's settings."""
        return type(self)().copy(self)

    def dispose(self) -> None:
        """Notify listeners that the material is no longer used."""
        self.dispatch_event("dispose")