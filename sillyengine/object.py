"""Base classes for models and game objects."""

from __future__ import annotations

import copy
import uuid
from abc import ABC, abstractmethod

from .component import Transform3D
from .mesh import ColoredMesh
from .utils import Shared


class Model(ABC):
    @abstractmethod
    def gm(self) -> ColoredMesh:
        """Return the geometry and material to draw."""

    def clone(self) -> Model:
        return copy.deepcopy(self)


class GameObject(ABC):
    @abstractmethod
    def id(self) -> uuid.UUID: ...

    @abstractmethod
    def model(self) -> Shared[Model] | None: ...

    @abstractmethod
    def transform(self) -> Transform3D:
        """Return the object's transform; changes to it move the object."""

    @abstractmethod
    def update(self, delta: float) -> None: ...

    @abstractmethod
    def physics_update(self, delta: float) -> None: ...

    def clone(self) -> GameObject:
        return copy.deepcopy(self)