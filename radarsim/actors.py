"""Basic scene actors: the actor base, movement bounds and flying drones."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from radarsim.geometry import Rotator, Vec3


@dataclass(eq=False)
class Actor:
    """Something placed in the scene, identified by object identity."""

    name: str
    location: Vec3 = field(default_factory=Vec3)
    rotation: Rotator = field(default_factory=Rotator)
    tags: list[str] = field(default_factory=list)
    destroyed: bool = field(default=False, init=False)

    @property
    def forward_vector(self) -> Vec3:
        return self.rotation.forward_vector()

    def destroy(self) -> None:
        """Remove the actor from play; later calls do nothing."""
        self.destroyed = True


@dataclass(frozen=True)
class BoundingBox:
    """An axis-aligned box given by its centre and half-extents."""

    center: Vec3
    extent: Vec3

    def random_point(self, rng: random.Random) -> Vec3:
        """Return a uniformly random point inside the box."""
        return Vec3(
            *(c + rng.uniform(-e, e) for c, e in zip(self.center, self.extent))
        )


@dataclass(eq=False)
class Drone(Actor):
    """A drone that wanders between random points of its bounding box."""

    bounding_box: BoundingBox | None = None
    acceptance_radius: float = 200.0
    max_speed: float = 1200.0
    rng: random.Random = field(default_factory=random.Random, repr=False)
    current_target: Vec3 = field(init=False)

    def __post_init__(self) -> None:
        self.current_target = self.location
        self.choose_new_location()

    def set_movement_bounding_box(self, box: BoundingBox | None) -> None:
        """Set the area the drone roams in and pick a new destination."""
        self.bounding_box = box
        self.choose_new_location()

    def choose_new_location(self) -> None:
        """Pick a random destination inside the bounding box, if there is one."""
        if self.bounding_box is not None:
            self.current_target = self.bounding_box.random_point(self.rng)

    def tick(self, dt: float) -> None:
        """Advance the drone towards its destination by ``dt`` seconds."""
        if self.destroyed:
            return
        if self.location.distance(self.current_target) <= self.acceptance_radius:
            self.choose_new_location()
        direction = (self.current_target - self.location).normalized()
        self.location = self.location + direction * (self.max_speed * dt)

    def explode(self) -> None:
        """Blow the drone up."""
        self.destroy()