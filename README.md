# tri3d

Building blocks for describing 3D content in plain Python: an event
dispatcher, 32-bit layer masks, flat per-vertex buffer attributes,
indexed buffer geometry, a box geometry generator and simple materials.
Only the standard library is used.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module                  | Contents                                                          |
|-------------------------|-------------------------------------------------------------------|
| `tri3d.constants`       | `REVISION`, `WASM_VERSION`; `ColorSpace`, `CullFace`, `Format`    |
| `tri3d.events`          | `Event` and `EventDispatcher`                                     |
| `tri3d.layers`          | `Layers`, a 32-bit channel mask                                   |
| `tri3d.attributes`      | `BufferAttribute`, flat per-vertex data with an item size         |
| `tri3d.geometry`        | `BufferGeometry`, `GeometryGroup`, `DrawRange`                    |
| `tri3d.box`             | `BoxGeometry` and its `BoxParameters`                             |
| `tri3d.material`        | `Material`, the base of all materials                             |
| `tri3d.basic_material`  | `MeshBasicMaterial`, an unlit material with a single colour       |

## Examples

### Events

```python
from tri3d.events import EventDispatcher

dispatcher = EventDispatcher()

def on_dispose(event):
    print("disposed:", event.type_name, event.target)

dispatcher.add_listener("dispose", on_dispose)
dispatcher.dispatch_event("dispose")
dispatcher.remove_listener("dispose", on_dispose)
```

A listener is registered at most once per event type, and listeners may
remove themselves while an event is being dispatched. `BufferGeometry`
and `Material` are dispatchers; their `dispose()` sends a `"dispose"`
event.

### Layers

```python
from tri3d.layers import Layers

camera_layers = Layers()        # channel 0 enabled
object_layers = Layers()
object_layers.set(3)            # only channel 3

camera_layers.test(object_layers)   # False
camera_layers.enable(3)
camera_layers.test(object_layers)   # True
```

Channels outside 0..31 select no bit.

### Buffer attributes

```python
from tri3d.attributes import BufferAttribute

positions = BufferAttribute([0, 0, 0, 1, 0, 0, 0, 1, 0], 3)
positions.count                 # 3
positions.get_xyz(1)            # (1, 0, 0)
positions.set_xyz(2, 0, 2, 0)
reordered = positions.take([2, 0])
```

The array length must be a multiple of `item_size`; out-of-range item
indices raise `IndexError`.

### Geometry

```python
from tri3d.box import BoxGeometry

box = BoxGeometry(1, 1, 1)
position = box.get_attribute("position")
print(position.get_xyz(0))
print(box.parameters, len(box.groups))   # six groups, one per side

flat = box.to_non_indexed()
flat.compute_vertex_normals()
```

`BufferGeometry` also offers `set_index`, `set_attribute`,
`delete_attribute`, `has_attribute`, `add_group`, `clear_groups`,
`set_draw_range`, `set_from_points`, `normalize_normals`, `copy` and
`clone`. Segment counts of a box below 1 raise `ValueError`.

### Materials

```python
from tri3d.basic_material import MeshBasicMaterial

green = MeshBasicMaterial({"color": 0x00FF00})
green.color                     # (0.0, 1.0, 0.0)
green.alpha_test = 0.5          # bumps green.version
copy = green.clone()
```

`set_values` assigns known properties from a mapping and warns about
unknown keys or `None` values.

## What it does not do

There is no renderer, no scene, camera or mesh object, no transform
matrices, and no bounding box or bounding sphere computation. Materials
hold render settings only; texture slots such as `map` are plain
attributes that nothing reads.