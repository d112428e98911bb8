"""Simple rigid-body motion for world entities."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .ecs import VectorLike, World, as_vec3


class Physics:
    """Mass, bounce and velocity for one entity of a World."""

    def __init__(self, world: World, entity_id: Optional[int] = None) -> None:
        self.world = world
        self.id = world.create_entity() if entity_id is None else entity_id
        self.mass = 1.0
        self.bounce = 1.0
        self._force = np.zeros(3)
        self._acceleration = np.zeros(3)
        self._velocity = np.zeros(3)

    @property
    def velocity(self) -> np.ndarray:
        return self._velocity.copy()

    @velocity.setter
    def velocity(self, value: VectorLike) -> None:
        self._velocity = as_vec3(value)

    @property
    def acceleration(self) -> np.ndarray:
        return self._acceleration.copy()

    def apply_force(self, force: VectorLike) -> None:
        """Accumulate a force for the next update."""
        self._force = self._force + as_vec3(force)

    def update(self, dt: float) -> None:
        """Integrate one step and clear the accumulated force."""
        self._acceleration = self._force / self.mass
        self._velocity = self._velocity + self._acceleration * dt
        position = self.world.get_position(self.id)
        self.world.set_position(self.id, position + self._velocity * dt)
        self._force = np.zeros(3)

    def resolve_collision(self, other: Physics, r1: float, r2: float) -> None:
        """Exchange impulse with ``other`` as two spheres of radii r1 and r2.

        Bodies already separating are left alone; if they overlap, this body
        is pushed out along the contact normal.
        """
        p1 = self.world.get_position(self.id)
        p2 = self.world.get_position(other.id)
        relative = p1 - p2
        dist = float(np.linalg.norm(relative))
        with np.errstate(divide="ignore", invalid="ignore"):
            normal = relative / dist

        v1 = self._velocity
        v2 = other._velocity
        approach = float(np.dot(v1 - v2, normal))
        if approach > 0:
            return
        inv_mass1 = 1.0 / self.mass
        inv_mass2 = 1.0 / other.mass
        impulse = -(1.0 + self.bounce) * approach / (inv_mass1 + inv_mass2)

        self._velocity = v1 + impulse * inv_mass1 * normal
        other._velocity = v2 - impulse * inv_mass2 * normal

        overlap = (r1 + r2) - dist
        if overlap > 0:
            self.world.set_position(self.id, p1 + normal * overlap)