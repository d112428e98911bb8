"""Small 2D/3D vectors and matrices with the engine's own conventions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class Vec2:
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: Number) -> Vec2:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec2(self.x * factor, self.y * factor)


@dataclass(frozen=True)
class Vec3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def xy(self) -> Vec2:
        """Return the x and y components as a Vec2."""
        return Vec2(self.x, self.y)

    @classmethod
    def from_xy(cls, xy: Vec2, z: float) -> Vec3:
        """Build a Vec3 from a Vec2 and a z component."""
        return cls(xy.x, xy.y, z)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: Number) -> Vec3:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec3(self.x * factor, self.y * factor, self.z * factor)


@dataclass(frozen=True)
class Mat2:
    """A 2x2 matrix built from rows (m00, m01) and (m10, m11).

    ``data`` gives the column-major layout used for uploads.
    """

    m00: float
    m01: float
    m10: float
    m11: float

    @property
    def data(self) -> tuple[float, float, float, float]:
        return (self.m00, self.m10, self.m01, self.m11)

    @classmethod
    def identity(cls, value: float = 1.0) -> Mat2:
        """Return a diagonal matrix with ``value`` on the diagonal."""
        return cls(value, 0.0, 0.0, value)

    @classmethod
    def rotate(cls, angle: float) -> Mat2:
        c, s = math.cos(angle), math.sin(angle)
        return cls(c, -s, s, c)

    @classmethod
    def scale(cls, x: float, y: float | None = None) -> Mat2:
        """Return a scale matrix; a single factor scales both axes."""
        if y is None:
            y = x
        return cls(x, 0.0, 0.0, y)

    def __mul__(self, other: Union[Vec2, Mat2]) -> Union[Vec2, Mat2]:
        if isinstance(other, Vec2):
            return Vec2(
                self.m00 * other.x + self.m01 * other.y,
                self.m10 * other.x + self.m11 * other.y,
            )
        if isinstance(other, Mat2):
            v = other
            return Mat2(
                v.m00 * self.m00 + v.m10 * self.m10,
                v.m01 * self.m00 + v.m11 * self.m10,
                v.m00 * self.m10 + v.m10 * self.m11,
                v.m01 * self.m10 + v.m11 * self.m11,
            )
        return NotImplemented


@dataclass(frozen=True)
class Mat3:
    """A 3x3 matrix whose fields follow the column-major ``data`` order."""

    m00: float
    m10: float
    m20: float
    m01: float
    m11: float
    m21: float
    m02: float
    m12: float
    m22: float

    @property
    def data(self) -> tuple[float, ...]:
        return (
            self.m00, self.m10, self.m20,
            self.m01, self.m11, self.m21,
            self.m02, self.m12, self.m22,
        )

    @classmethod
    def identity(cls, value: float = 1.0) -> Mat3:
        """Return a diagonal matrix with ``value`` on the diagonal."""
        return cls(value, 0.0, 0.0, 0.0, value, 0.0, 0.0, 0.0, value)

    @classmethod
    def rotate_x(cls, angle: float) -> Mat3:
        c, s = math.cos(angle), math.sin(angle)
        return cls(1.0, 0.0, 0.0, 0.0, c, -s, 0.0, s, c)

    @classmethod
    def rotate_y(cls, angle: float) -> Mat3:
        c, s = math.cos(angle), math.sin(angle)
        return cls(c, 0.0, s, 0.0, 1.0, 0.0, -s, 0.0, c)

    @classmethod
    def rotate_z(cls, angle: float) -> Mat3:
        c, s = math.cos(angle), math.sin(angle)
        return cls(c, -s, 0.0, s, c, 0.0, 0.0, 0.0, 1.0)

    def __mul__(self, other: Union[Vec3, Mat3]) -> Union[Vec3, Mat3]:
        if isinstance(other, Vec3):
            return Vec3(
                (self.m00 + self.m01 + self.m02) * other.x,
                (self.m10 + self.m11 + self.m12) * other.y,
                (self.m20 + self.m21 + self.m22) * other.z,
            )
        if isinstance(other, Mat3):
            v = other
            return Mat3(
                v.m00 * self.m00 + v.m10 * self.m10 + v.m20 * self.m20,
                v.m01 * self.m00 + v.m11 * self.m10 + v.m21 * self.m20,
                v.m02 * self.m00 + v.m12 * self.m10 + v.m22 * self.m20,
                v.m00 * self.m01 + v.m10 * self.m11 + v.m20 * self.m21,
                v.m01 * self.m01 + v.m11 * self.m11 + v.m21 * self.m21,
                v.m02 * self.m01 + v.m12 * self.m11 + v.m22 * self.m21,
                v.m00 * self.m02 + v.m10 * self.m12 + v.m20 * self.m22,
                v.m01 * self.m02 + v.m11 * self.m12 + v.m21 * self.m22,
                v.m02 * self.m02 + v.m12 * self.m12 + v.m22 * self.m22,
            )
        return NotImplemented


Vector = Union[Vec2, Vec3]


def _components(v: Vector) -> tuple[float, ...]:
    if isinstance(v, Vec3):
        return (v.x, v.y, v.z)
    if isinstance(v, Vec2):
        return (v.x, v.y)
    raise TypeError(f"expected Vec2 or Vec3, got {type(v).__name__}")


def lerp(a: Vector, b: Vector, t: float) -> Vector:
    """Linearly interpolate from ``a`` to ``b``."""
    return a + (b - a) * t


def sqrt_length(v: Vector) -> float:
    """Return the squared length of ``v``."""
    return sum(c * c for c in _components(v))


def length(v: Vector) -> float:
    return math.sqrt(sqrt_length(v))


def normalize(v: Vector) -> Vector:
    """Return ``v`` scaled to unit length; a zero vector raises ZeroDivisionError."""
    size = length(v)
    return type(v)(*(c / size for c in _components(v)))


def dot_product(a: Vector, b: Vector) -> float:
    if type(a) is not type(b):
        raise TypeError("dot product needs two vectors of the same kind")
    return sum(x * y for x, y in zip(_components(a), _components(b)))


def clamp(value: float, minimum: float, maximum: float) -> float:
    return max(min(value, maximum), minimum)