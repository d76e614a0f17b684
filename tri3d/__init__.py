"""3D building blocks: events, layer masks, buffer attributes and geometry, boxes and materials."""

__version__ = "0.1.0"

__all__ = [
    "attributes",
    "basic_material",
    "box",
    "constants",
    "events",
    "geometry",
    "layers",
    "material",
]