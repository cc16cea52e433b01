"""Perspective camera and keyboard fly control."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from .utils import deg_to_rad, normalize


@dataclass(eq=False)
class Camera:
    """A perspective camera looking from position towards target."""

    position: np.ndarray
    target: np.ndarray
    up: np.ndarray
    fov_degrees: float = 45.0
    z_near: float = 0.1
    z_far: float = 1000.0
    width: int = 1280
    height: int = 720

    def __post_init__(self) -> None:
        self.position, self.target, self.up = (
            np.array(v, dtype=float) for v in (self.position, self.target, self.up))
        if any(v.shape != (3,) for v in (self.position, self.target, self.up)):
            raise ValueError("position, target and up need three components")
        if not 0.0 < self.fov_degrees < 180.0 or not 0.0 < self.z_near < self.z_far:
            raise ValueError("need 0 < fov < 180 and 0 < z_near < z_far")
        self.set_viewport(self.width, self.height)

    def set_viewport(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"viewport must be positive, got {width}x{height}")
        self.width, self.height = int(width), int(height)

    def view_matrix(self) -> np.ndarray:
        forward = normalize(self.target - self.position)
        side = normalize(np.cross(forward, self.up))
        m = np.identity(4)
        m[:3, :3] = [side, np.cross(side, forward), -forward]
        m[:3, 3] = -(m[:3, :3] @ self.position)
        return m

    def projection_matrix(self) -> np.ndarray:
        f = 1.0 / math.tan(deg_to_rad(self.fov_degrees) / 2.0)
        near, far = self.z_near, self.z_far
        m = np.zeros((4, 4))
        m[0, 0] = f * self.height / self.width
        m[1, 1] = f
        m[2, 2] = (far + near) / (near - far)
        m[2, 3] = 2.0 * far * near / (near - far)
        m[3, 2] = -1.0
        return m

    def project(self, points) -> np.ndarray:
        """Map world points (N x 3) to pixel x, pixel y and depth; NaN rows for points behind."""
        p = np.asarray(points, dtype=float).reshape(-1, 3)
        clip = np.hstack([p, np.ones((len(p), 1))]) @ (self.projection_matrix() @ self.view_matrix()).T
        out = np.full((len(p), 3), np.nan)
        visible = clip[:, 3] > 0.0
        ndc = clip[visible, :3] / clip[visible, 3:]
        out[visible] = np.column_stack([
            (ndc[:, 0] + 1.0) * 0.5 * self.width,
            (1.0 - ndc[:, 1]) * 0.5 * self.height,
            ndc[:, 2],
        ])
        return out


@dataclass
class FlyControl:
    """Moves a camera by the direction names forward, back, left, right, up and down."""

    speed: float = 10.0

    def handle_keys(self, camera: Camera, pressed: Iterable[str], delta: float) -> bool:
        """Move the camera for the held direction names; return whether it moved."""
        forward = normalize(camera.target - camera.position)
        right = normalize(np.cross(forward, camera.up))
        up = normalize(camera.up)
        axes = {"forward": forward, "back": -forward, "right": right,
                "left": -right, "up": up, "down": -up}
        step = sum((axes[name] for name in set(pressed) if name in axes), np.zeros(3))
        if not np.any(step):
            return False
        offset = step * self.speed * delta
        camera.position = camera.position + offset
        camera.target = camera.target + offset
        return True