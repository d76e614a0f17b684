"""Unlit material that draws geometry in a flat colour."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from .material import Material

_MULTIPLY_OPERATION = 0

Rgb = Tuple[float, float, float]
ColorValue = Union[int, Sequence[float]]


def _to_rgb(value: ColorValue) -> Rgb:
    """Turn a 0xRRGGBB number or an (r, g, b) sequence into a float triple."""
    if isinstance(value, bool):
        raise TypeError("a colour cannot be a bool")
    if isinstance(value, int):
        if not 0 <= value <= 0xFFFFFF:
            raise ValueError(f"hex colour out of range: {value:#x}")
        return (
            ((value >> 16) & 0xFF) / 255,
            ((value >> 8) & 0xFF) / 255,
            (value & 0xFF) / 255,
        )
    try:
        r, g, b = (float(c) for c in value)
    except (TypeError, ValueError) as exc:
        raise TypeError(f"cannot use {value!r} as a colour") from exc
    return r, g, b


class MeshBasicMaterial(Material):
    """A material not affected by lights, drawing surfaces in its colour."""

    def __init__(self, parameters: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__()
        self.type = "MeshBasicMaterial"

        self._color: Rgb = _to_rgb(0xFFFFFF)

        self.map: Any = None

        self.light_map: Any = None
        self.light_map_intensity: float = 1.0

        self.ao_map: Any = None
        self.ao_map_intensity: float = 1.0

        self.specular_map: Any = None

        self.alpha_map: Any = None

        self.env_map: Any = None
        self.env_map_rotation: Tuple[float, float, float] = (0.0, 0.0, 0.0)
        self.combine: int = _MULTIPLY_OPERATION
        self.reflectivity: float = 1.0
        self.refraction_ratio: float = 0.98

        self.wireframe: bool = False
        self.wireframe_linewidth: float = 1.0
        self.wireframe_linecap: str = "round"
        self.wireframe_linejoin: str = "round"

        self.fog: bool = True

        self.set_values(parameters)

    @property
    def color(self) -> Rgb:
        """The surface colour as (r, g, b) floats in 0..1."""
        return self._color

    @color.setter
    def color(self, value: ColorValue) -> None:
        self._color = _to_rgb(value)

    def copy(self, source: Material) -> MeshBasicMaterial:
        """Take over the source's settings, including the basic-material ones."""
        super().copy(source)
        if not isinstance(source, MeshBasicMaterial):
            return self

        self.color = source.color

        self.map = source.map

        self.light_map = source.light_map
        self.light_map_intensity = source.light_map_intensity

        self.ao_map = source.ao_map
        self.ao_map_intensity = source.ao_map_intensity

        self.specular_map = source.specular_map

        self.alpha_map = source.alpha_map

        self.env_map = source.env_map
        self.env_map_rotation = tuple(source.env_map_rotation)
        self.combine = source.combine
        self.reflectivity = source.reflectivity
        self.refraction_ratio = source.refraction_ratio

        self.wireframe = source.wireframe
        self.wireframe_linewidth = source.wireframe_linewidth
        self.wireframe_linecap = source.wireframe_linecap
        self.wireframe_linejoin = source.wireframe_linejoin

        self.fog = source.fog
        return self