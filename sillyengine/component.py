"""Components that can be attached to game objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from .utils import quat_to_matrix, scale_matrix, translation_matrix


class Component(ABC):
    @abstractmethod
    def label(self) -> str:
        """Return the component's name."""


@dataclass(eq=False)
class Transform3D(Component):
    """Position, rotation quaternion (x, y, z, w) and scale of an object."""

    position: np.ndarray
    rotation: np.ndarray
    scale: np.ndarray

    def __post_init__(self) -> None:
        self.position = np.array(self.position, dtype=float)
        self.rotation = np.array(self.rotation, dtype=float)
        self.scale = np.array(self.scale, dtype=float)
        if self.position.shape != (3,) or self.scale.shape != (3,) or self.rotation.shape != (4,):
            raise ValueError("position and scale need three components, rotation four")

    def label(self) -> str:
        return "Transform3D"

    def matrix(self) -> np.ndarray:
        """Return translation * rotation * scale as a 4x4 matrix."""
        return translation_matrix(self.position) @ quat_to_matrix(self.rotation) @ scale_matrix(self.scale)

    def copy(self) -> Transform3D:
        return Transform3D(self.position, self.rotation, self.scale)