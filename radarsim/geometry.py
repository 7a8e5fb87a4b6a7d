"""Vector and rotation primitives used by the simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

_SMALL_NUMBER = 1e-8


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale: object) -> Vec3:
        if not isinstance(scale, Real) or isinstance(scale, bool):
            return NotImplemented
        s = float(scale)
        return Vec3(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __truediv__(self, scale: object) -> Vec3:
        if not isinstance(scale, Real) or isinstance(scale, bool):
            return NotImplemented
        s = float(scale)
        return Vec3(self.x / s, self.y / s, self.z / s)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Return a unit vector in the same direction, or the zero vector if too small."""
        size = self.length()
        if size * size <= _SMALL_NUMBER:
            return Vec3()
        return self / size

    def distance(self, other: Vec3) -> float:
        """Return the distance to ``other``."""
        return (self - other).length()


@dataclass(frozen=True)
class Rotator:
    """A rotation given as pitch, yaw and roll in degrees."""

    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0

    def forward_vector(self) -> Vec3:
        """Return the unit vector this rotation points along."""
        pitch = math.radians(self.pitch)
        yaw = math.radians(self.yaw)
        cos_pitch = math.cos(pitch)
        return Vec3(
            cos_pitch * math.cos(yaw),
            cos_pitch * math.sin(yaw),
            math.sin(pitch),
        )


def look_at_rotation(start: Vec3, target: Vec3) -> Rotator:
    """Return the rotation that points from ``start`` towards ``target``."""
    d = target - start
    yaw = math.degrees(math.atan2(d.y, d.x))
    pitch = math.degrees(math.atan2(d.z, math.hypot(d.x, d.y)))
    return Rotator(pitch=pitch, yaw=yaw, roll=0.0)