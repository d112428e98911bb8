"""A data-oriented world of transforms, and a camera living in it."""

from __future__ import annotations

import math
from typing import Iterable, Sequence, Union

import numpy as np

from .vector import Vec3

VectorLike = Union[Vec3, Sequence[float], np.ndarray]

_NEAR = 0.1
_FAR = 100.0


def as_vec3(value: VectorLike) -> np.ndarray:
    """Convert a Vec3 or any three numbers to a float array of shape (3,)."""
    if isinstance(value, Vec3):
        return np.array((value.x, value.y, value.z), dtype=float)
    array = np.array(value, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected three components, got shape {array.shape}")
    return array


def _is_single_vector(value) -> bool:
    if isinstance(value, Vec3):
        return True
    return np.shape(value) == (3,) and not isinstance(value[0], (Vec3, Sequence, np.ndarray))


def _translate(offset: np.ndarray) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = offset
    return matrix


def _scale(factors: np.ndarray) -> np.ndarray:
    return np.diag((*factors, 1.0))


def _rotate(angle: float, axis: int) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    matrix = np.identity(4)
    i, j = [k for k in range(3) if k != axis]
    if axis == 1:
        # keep the right-handed sign convention about the y axis
        i, j = j, i
    matrix[i, i] = c
    matrix[i, j] = -s
    matrix[j, i] = s
    matrix[j, j] = c
    return matrix


def look_at(eye: np.ndarray, center: np.ndarray, up: np.ndarray) -> np.ndarray:
    """Right-handed view matrix."""
    forward = center - eye
    forward = forward / np.linalg.norm(forward)
    side = np.cross(forward, up)
    side = side / np.linalg.norm(side)
    upward = np.cross(side, forward)
    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = upward
    matrix[2, :3] = -forward
    matrix[0, 3] = -np.dot(side, eye)
    matrix[1, 3] = -np.dot(upward, eye)
    matrix[2, 3] = np.dot(forward, eye)
    return matrix


def perspective(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with depth mapped to -1..1."""
    tan_half = math.tan(fov / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


class World:
    """Parallel arrays of position, rotation and scale indexed by entity id."""

    def __init__(self) -> None:
        self.g = 0.0
        self._positions: list[np.ndarray] = []
        self._rotations: list[np.ndarray] = []
        self._scales: list[np.ndarray] = []
        self._free_slots: list[int] = []

    @property
    def size(self) -> int:
        """Number of slots ever allocated, freed ones included."""
        return len(self._positions)

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"entity index {index} out of range")

    def create_entity(self) -> int:
        """Reuse the most recently freed slot, or append a new one."""
        if self._free_slots:
            return self._free_slots.pop()
        self._positions.append(np.zeros(3))
        self._rotations.append(np.zeros(3))
        self._scales.append(np.ones(3))
        return self.size - 1

    def free_entity(self, index: int) -> None:
        """Reset an entity's transform and make its slot reusable."""
        self._check(index)
        self._positions[index] = np.zeros(3)
        self._rotations[index] = np.zeros(3)
        self._scales[index] = np.ones(3)
        self._free_slots.append(index)

    @staticmethod
    def _values_for(indices: Sequence[int], values) -> Iterable[tuple[int, np.ndarray]]:
        indices = list(indices)
        if _is_single_vector(values):
            single = as_vec3(values)
            return ((i, single) for i in indices)
        values = list(values)
        if len(values) != len(indices):
            raise ValueError("indices and values differ in length")
        return zip(indices, (as_vec3(v) for v in values))

    def get_position(self, index: int) -> np.ndarray:
        self._check(index)
        return self._positions[index].copy()

    def set_position(self, index: int, position: VectorLike) -> None:
        self._check(index)
        self._positions[index] = as_vec3(position)

    def set_positions(self, indices: Sequence[int], positions) -> None:
        """Set one shared position, or one position per index."""
        for index, value in self._values_for(indices, positions):
            self.set_position(index, value)

    def get_rotation(self, index: int) -> np.ndarray:
        self._check(index)
        return self._rotations[index].copy()

    def set_rotation(self, index: int, rotation: VectorLike) -> None:
        self._check(index)
        self._rotations[index] = as_vec3(rotation)

    def set_rotations(self, indices: Sequence[int], rotations) -> None:
        """Set one shared rotation, or one rotation per index."""
        for index, value in self._values_for(indices, rotations):
            self.set_rotation(index, value)

    def get_scale(self, index: int) -> np.ndarray:
        self._check(index)
        return self._scales[index].copy()

    def set_scale(self, index: int, scale: VectorLike) -> None:
        self._check(index)
        self._scales[index] = as_vec3(scale)

    def set_scales(self, indices: Sequence[int], scales) -> None:
        """Set one shared scale, or one scale per index."""
        for index, value in self._values_for(indices, scales):
            self.set_scale(index, value)

    def model_matrix(self, index: int) -> np.ndarray:
        """Translate, then rotate about x, y, z (radians), then scale."""
        rotation = self.get_rotation(index)
        return (
            _translate(self.get_position(index))
            @ _rotate(rotation[0], 0)
            @ _rotate(rotation[1], 1)
            @ _rotate(rotation[2], 2)
            @ _scale(self.get_scale(index))
        )

    def model_matrices(self) -> list[np.ndarray]:
        """Model matrices for every slot, in index order."""
        return [self.model_matrix(i) for i in range(self.size)]


class Camera3D:
    """A perspective camera stored as an entity: rotation holds its view direction."""

    def __init__(self, world: World, position: VectorLike, direction: VectorLike,
                 fov: float, width: int, height: int) -> None:
        self.world = world
        self.fov = math.radians(fov)
        self.aspect = width / height
        self.id = world.create_entity()
        world.set_position(self.id, position)
        world.set_rotation(self.id, direction)
        world.set_scale(self.id, (1.0, 1.0, 1.0))

    def matrix(self) -> np.ndarray:
        """Projection times view."""
        position = self.world.get_position(self.id)
        view = look_at(position, position + self.world.get_rotation(self.id),
                       np.array((0.0, 1.0, 0.0)))
        projection = perspective(self.fov, self.aspect, _NEAR, _FAR)
        return projection @ view