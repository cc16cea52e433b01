"""A demo scene: a red cube that drifts along the x axis."""

from __future__ import annotations

import argparse
import threading
import time
import uuid
from collections.abc import Sequence
from dataclasses import dataclass

from .component import Transform3D
from .mesh import RED, ColoredMesh, Mesh
from .object import GameObject, Model
from .renderer import EngineRenderer
from .utils import Shared, deg_to_rad, new_shared, normalize, quat_from_axis_angle


@dataclass
class TestModel(Model):
    """A red cube."""

    __test__ = False

    def gm(self) -> ColoredMesh:
        return ColoredMesh(Mesh.cube(), RED)

    def clone(self) -> TestModel:
        return TestModel()


class TestObj(GameObject):
    """An object that moves one unit per second along x."""

    __test__ = False

    def __init__(self, transform: Transform3D, model: TestModel) -> None:
        self._transform = transform
        self._model = new_shared(model)
        self.physics_time = 0.0

    def id(self) -> uuid.UUID:
        return uuid.uuid4()

    def model(self) -> Shared[Model] | None:
        with self._model as m:
            return new_shared(m.clone())

    def transform(self) -> Transform3D:
        return self._transform

    def update(self, delta: float) -> None:
        self._transform.position[0] += 1.0 * delta

    def physics_update(self, delta: float) -> None:
        """Count physics time; the object has no forces acting on it."""
        self.physics_time += delta

    def clone(self) -> TestObj:
        with self._model as m:
            return TestObj(self._transform.copy(), m.clone())

    def __repr__(self) -> str:
        return f"TestObj(transform={self._transform!r})"


def _nudge(objects: list[Shared[GameObject]]) -> None:
    for _ in range(10):
        time.sleep(1.0)
        with objects[0] as obj:
            obj.transform().position[0] += 1.0


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window showing the demo scene."""
    argparse.ArgumentParser(description="Show a drifting red cube.").parse_args(argv)

    renderer = EngineRenderer([])
    transform = Transform3D(
        position=(1.0, 0.5, 0.0),
        rotation=quat_from_axis_angle(normalize((1.0, 0.0, 0.0)), deg_to_rad(45.0)),
        scale=(10.0, 10.0, 10.0),
    )
    objects: list[Shared[GameObject]] = [new_shared(TestObj(transform, TestModel()))]
    renderer.set_objects(objects)

    threading.Thread(target=_nudge, args=(list(objects),), daemon=True).start()

    renderer.start_render()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())