"""Vector and quaternion value types used by the bot behaviors.

Conventions follow the virtual-world client:
- Y is up, the avatar faces -Z when its orientation is identity.
- Euler angles are in degrees; pitch about X, yaw about Y, roll about Z.
- Quaternions are stored as (x, y, z, w).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

# Below this dot product the slerp angle is too small to divide by
_SLERP_EPSILON = 1e-6


@dataclass(frozen=True)
class Vec3:
    """Immutable 3-vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vec3:
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def length(self) -> float:
        """Euclidean length."""
        return float(np.linalg.norm(self.to_array()))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_array(cls, values: np.ndarray) -> Vec3:
        return cls(float(values[0]), float(values[1]), float(values[2]))

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}


UP = Vec3(0.0, 1.0, 0.0)
FRONT = Vec3(0.0, 0.0, -1.0)


@dataclass(frozen=True)
class Quat:
    """Immutable rotation quaternion (x, y, z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def identity(cls) -> Quat:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def angle_axis(cls, angle_deg: float, axis: Vec3) -> Quat:
        """Rotation of ``angle_deg`` degrees around ``axis``.

        Args:
            angle_deg: Rotation angle in degrees.
            axis: Rotation axis; normalized here.

        Returns:
            Unit quaternion for the rotation.
        """
        axis_array = axis.to_array()
        norm = np.linalg.norm(axis_array)
        if norm == 0.0:
            return cls.identity()
        axis_array = axis_array / norm
        half = math.radians(angle_deg) / 2.0
        s = math.sin(half)
        return cls(
            float(axis_array[0] * s),
            float(axis_array[1] * s),
            float(axis_array[2] * s),
            math.cos(half),
        )

    @classmethod
    def from_pitch_yaw_roll_degrees(cls, pitch: float, yaw: float, roll: float) -> Quat:
        """Build a quaternion from Euler angles in degrees.

        Same composition as a quaternion constructed from an (x, y, z)
        Euler vector in the client math library.
        """
        half = np.radians([pitch, yaw, roll]) / 2.0
        cx, cy, cz = np.cos(half)
        sx, sy, sz = np.sin(half)
        return cls(
            float(sx * cy * cz - cx * sy * sz),
            float(cx * sy * cz + sx * cy * sz),
            float(cx * cy * sz - sx * sy * cz),
            float(cx * cy * cz + sx * sy * sz),
        )

    def __mul__(self, other: Quat) -> Quat:
        """Hamilton product: apply ``other`` first, then ``self``."""
        x1, y1, z1, w1 = self.x, self.y, self.z, self.w
        x2, y2, z2, w2 = other.x, other.y, other.z, other.w
        return Quat(
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
        )

    def rotate(self, v: Vec3) -> Vec3:
        """Rotate a vector by this quaternion."""
        u = np.array([self.x, self.y, self.z], dtype=float)
        vec = v.to_array()
        t = 2.0 * np.cross(u, vec)
        return Vec3.from_array(vec + self.w * t + np.cross(u, t))

    @property
    def front(self) -> Vec3:
        """Forward direction (-Z rotated by this orientation)."""
        return self.rotate(FRONT)

    def normalized(self) -> Quat:
        arr = self.to_array()
        norm = np.linalg.norm(arr)
        if norm == 0.0:
            return Quat.identity()
        return Quat.from_array(arr / norm)

    def dot(self, other: Quat) -> float:
        return float(np.dot(self.to_array(), other.to_array()))

    def mix(self, target: Quat, t: float) -> Quat:
        """Spherical interpolation toward ``target`` along the shortest arc.

        Args:
            target: Orientation to interpolate toward.
            t: Fraction of the way to go (0.0 = self, 1.0 = target).

        Returns:
            Interpolated unit quaternion.
        """
        start = self.to_array()
        end = target.to_array()
        cos_theta = float(np.dot(start, end))
        if cos_theta < 0.0:
            end = -end
            cos_theta = -cos_theta

        if cos_theta > 1.0 - _SLERP_EPSILON:
            # Nearly parallel: plain lerp is accurate and avoids 0/0
            result = start + (end - start) * t
        else:
            theta = math.acos(min(1.0, cos_theta))
            sin_theta = math.sin(theta)
            result = (
                start * math.sin((1.0 - t) * theta) + end * math.sin(t * theta)
            ) / sin_theta

        return Quat.from_array(result).normalized()

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z, self.w], dtype=float)

    @classmethod
    def from_array(cls, values: np.ndarray) -> Quat:
        return cls(float(values[0]), float(values[1]), float(values[2]), float(values[3]))

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z, "w": self.w}
