"""Angle conversion, shared values and small 3D math helpers."""

from __future__ import annotations

import copy
import math
import threading
from typing import Generic, TypeVar

import numpy as np

T = TypeVar("T")


class Shared(Generic[T]):
    """A value guarded by a lock; the context yields the value while holding it."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._lock = threading.RLock()

    def __enter__(self) -> T:
        self._lock.acquire()
        return self._value

    def __exit__(self, exc_type, exc, tb) -> None:
        self._lock.release()

    def replace(self, value: T) -> T:
        """Swap in a new value and return the old one."""
        with self._lock:
            old, self._value = self._value, value
        return old

    def __deepcopy__(self, memo) -> Shared[T]:
        with self._lock:
            return Shared(copy.deepcopy(self._value, memo))


def new_shared(value: T) -> Shared[T]:
    """Wrap a value so it can be shared between threads."""
    return Shared(value)


def deg_to_rad(deg: float) -> float:
    return deg * (math.pi / 180.0)


def rad_to_deg(rad: float) -> float:
    return rad * (180.0 / math.pi)


def normalize(vector) -> np.ndarray:
    """Return the vector scaled to unit length."""
    v = np.asarray(vector, dtype=float)
    length = float(np.linalg.norm(v))
    if length == 0.0 or not math.isfinite(length):
        raise ValueError(f"cannot normalize vector {v.tolist()}")
    return v / length


def quat_from_axis_angle(axis, angle: float) -> np.ndarray:
    """Return the quaternion (x, y, z, w) rotating by angle radians about a unit axis."""
    a = np.asarray(axis, dtype=float)
    if a.shape != (3,) or abs(float(np.linalg.norm(a)) - 1.0) > 1e-4:
        raise ValueError("axis must be a normalized 3-vector")
    return np.append(a * math.sin(angle * 0.5), math.cos(angle * 0.5))


def quat_to_matrix(quat) -> np.ndarray:
    """Return the 4x4 rotation matrix of a quaternion (x, y, z, w)."""
    x, y, z, w = (float(c) for c in quat)
    m = np.identity(4)
    m[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return m


def translation_matrix(position) -> np.ndarray:
    m = np.identity(4)
    m[:3, 3] = np.asarray(position, dtype=float)
    return m


def scale_matrix(scale) -> np.ndarray:
    return np.diag(np.append(np.asarray(scale, dtype=float), 1.0))