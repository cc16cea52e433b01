"""Triangle meshes and coloured meshes ready for drawing."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

Color = tuple[int, int, int, int]

RED: Color = (255, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)

_CUBE_POSITIONS = [(x, y, z) for z in (-1, 1) for x, y in ((-1, -1), (1, -1), (1, 1), (-1, 1))]
# Counter-clockwise when seen from outside the cube.
_CUBE_TRIANGLES = [
    (4, 5, 6), (4, 6, 7), (1, 0, 3), (1, 3, 2), (5, 1, 2), (5, 2, 6),
    (0, 4, 7), (0, 7, 3), (7, 6, 2), (7, 2, 3), (0, 1, 5), (0, 5, 4),
]


@dataclass(eq=False)
class Mesh:
    """Vertex positions (N x 3) and triangle indices (M x 3)."""

    positions: np.ndarray
    indices: np.ndarray

    def __post_init__(self) -> None:
        self.positions = np.array(self.positions, dtype=float).reshape(-1, 3)
        self.indices = np.array(self.indices, dtype=int).reshape(-1, 3)
        if self.indices.size and (self.indices.min() < 0 or self.indices.max() >= len(self.positions)):
            raise ValueError("triangle index out of range")

    @staticmethod
    def cube() -> Mesh:
        """Return a cube spanning -1 to 1 on every axis."""
        return Mesh(_CUBE_POSITIONS, _CUBE_TRIANGLES)

    def transformed(self, matrix) -> Mesh:
        """Return a copy with every vertex multiplied by a 4x4 matrix."""
        m = np.asarray(matrix, dtype=float)
        if m.shape != (4, 4):
            raise ValueError("matrix must be 4x4")
        return Mesh(self.positions @ m[:3, :3].T + m[:3, 3], self.indices)


@dataclass(eq=False)
class ColoredMesh:
    """A mesh drawn in a single colour."""

    mesh: Mesh
    color: Color = WHITE

    def transformed(self, matrix) -> ColoredMesh:
        return ColoredMesh(self.mesh.transformed(matrix), self.color)