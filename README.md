# sillyengine

A small 3D game engine. Game objects carry a `Transform3D` (position,
rotation quaternion and scale) and may have a `Model` that produces a
coloured mesh. A pygame renderer updates every object once per frame, places
each model's mesh with its object's transform and draws it as flat-coloured
triangles, together with the world axes, through a perspective camera that
you can fly around with the keyboard.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the demo

```
sillyengine-demo
```

This opens a window titled "game engine window" showing a red cube. The cube
is scaled by ten and tilted 45 degrees about the x axis. It drifts along the
x axis at one unit per second, and a background thread pushes it one more unit
along x once a second for ten seconds. Close the window to quit.

Camera keys:

| Key         | Moves the camera |
|-------------|------------------|
| W / S       | forward / back   |
| A / D       | left / right     |
| Space       | up               |
| Left Shift  | down             |

The window can be resized up to 1920 x 1080.

## Using the library

A scene is a list of game objects, each wrapped in `new_shared(...)` so that
other threads can safely change it while the renderer runs:

```python
import uuid

from sillyengine.component import Transform3D
from sillyengine.mesh import RED, ColoredMesh, Mesh
from sillyengine.object import GameObject, Model
from sillyengine.renderer import EngineRenderer
from sillyengine.utils import deg_to_rad, new_shared, normalize, quat_from_axis_angle


class Cube(Model):
    def gm(self):
        return ColoredMesh(Mesh.cube(), RED)


class Riser(GameObject):
    def __init__(self):
        self._id = uuid.uuid4()
        rotation = quat_from_axis_angle(normalize((0.0, 1.0, 0.0)), deg_to_rad(30.0))
        self._transform = Transform3D((0.0, 0.0, 0.0), rotation, (5.0, 5.0, 5.0))
        self._model = new_shared(Cube())

    def id(self):
        return self._id

    def model(self):
        return self._model

    def transform(self):
        return self._transform

    def update(self, delta):
        self._transform.position[1] += delta

    def physics_update(self, delta):
        pass


renderer = EngineRenderer([new_shared(Riser())])
renderer.start_render()
```

### Modules

- `sillyengine.utils`
  - `deg_to_rad`, `rad_to_deg` convert angles.
  - `normalize(vector)` returns a unit vector; it raises `ValueError` for a
    zero or non-finite vector.
  - `quat_from_axis_angle(axis, angle)` builds a quaternion `(x, y, z, w)`
    from a normalized axis and an angle in radians (`ValueError` if the axis
    is not a unit 3-vector).
  - `quat_to_matrix`, `translation_matrix` and `scale_matrix` return 4x4
    numpy matrices.
  - `Shared` / `new_shared` hold a value behind a re-entrant lock. Use it as a
    context manager (`with shared as obj: ...`) to work on the value while
    holding the lock; `replace(value)` swaps the value and returns the old one.
- `sillyengine.component`
  - `Component` is the abstract base with `label()`.
  - `Transform3D(position, rotation, scale)` stores numpy arrays (3, 4 and 3
    components; `ValueError` otherwise). `label()` returns `"Transform3D"`,
    `matrix()` returns translation · rotation · scale as a 4x4 matrix, and
    `copy()` returns an independent copy.
- `sillyengine.mesh`
  - `Mesh(positions, indices)` holds vertex positions and triangle indices
    (`ValueError` for an index out of range). `Mesh.cube()` spans -1 to 1 on
    every axis; `transformed(matrix)` returns a copy moved by a 4x4 matrix.
  - `ColoredMesh(mesh, color)` pairs a mesh with an RGBA colour (`WHITE` by
    default; `RED` is also provided) and has its own `transformed(matrix)`.
- `sillyengine.object`
  - `Model` requires `gm()`, returning a `ColoredMesh`; `clone()` makes a deep
    copy.
  - `GameObject` requires `id()`, `model()` (a `Shared` model or `None`),
    `transform()`, `update(delta)` and `physics_update(delta)`; `clone()`
    makes a deep copy.
- `sillyengine.camera`
  - `Camera(position, target, up, fov_degrees=45.0, z_near=0.1,
    z_far=1000.0, width=1280, height=720)` with `set_viewport`,
    `view_matrix`, `projection_matrix` and `project(points)`, which maps world
    points to pixel coordinates and depth, giving NaN rows for points behind
    the camera.
  - `FlyControl(speed=10.0)`; `handle_keys(camera, pressed, delta)` moves the
    camera and its target by the held direction names (`forward`, `back`,
    `left`, `right`, `up`, `down`) and returns whether it moved.
- `sillyengine.renderer`
  - `EngineRenderer(objects)` keeps the scene and passes it to a
    `PygameRenderer`; `set_objects(objects)` replaces the scene and
    `start_render()` runs the window loop until the window is closed.
  - `PygameRenderer` can also be driven without a window: `step(delta)` calls
    `update(delta)` on every object, and `frame_meshes()` returns the
    world-space `ColoredMesh` of every object that has a model.
  - `object_gm(obj)` returns a shared object's model mesh, or raises
    `MissingModelError` if it has none; such objects are skipped (and logged)
    when a frame is drawn.
  - `Renderer` is the abstract base with `start_render()` and
    `set_objects(objects)`.
- `sillyengine.demo` holds the demo scene (`TestModel`, `TestObj`) and
  `main()`, which the `sillyengine-demo` command runs.

## What it does not do

- The render loop calls `update` on each object but never calls
  `physics_update`; there is no physics step.
- There is no lighting or shading: every triangle is filled in its model's
  single colour, and triangles are ordered back to front by average depth
  rather than with a depth buffer.
- `Transform3D` is the only component provided.