"""Homing missiles that chase a target and blow up drones on contact."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from radarsim.actors import Actor, Drone
from radarsim.geometry import Vec3, look_at_rotation

LAUNCH_GRAVITY_SCALE = 0.1


def predicted_location(current: Vec3, last: Vec3, dt: float) -> Vec3:
    """Extrapolate a position from its last two samples taken ``dt`` apart."""
    if dt <= 0:
        raise ValueError("dt must be positive")
    direction = current - last
    speed = current.distance(last) / dt
    return current + direction * speed


@dataclass(eq=False)
class Missile(Actor):
    """A missile that homes in on its target, slowing as it closes in."""

    target: Actor | None = None
    initial_impulse_force: float = 2.0
    max_speed: float = 3.0
    hit_radius: float = 50.0
    gravity_scale: float = 1.0
    force: Vec3 = field(default_factory=Vec3)
    destroyed_callbacks: list[Callable[[Actor | None], None]] = field(
        default_factory=list, repr=False
    )
    last_target_pos: Vec3 = field(default_factory=Vec3)
    last_missile_pos: Vec3 = field(default_factory=Vec3)

    def __post_init__(self) -> None:
        if self.max_speed <= 0:
            raise ValueError("max_speed must be positive")

    def set_target(self, target: Actor | None) -> None:
        """Lock onto ``target`` and launch; a missing target is ignored."""
        if target is None:
            return
        self.target = target
        self.on_target_sent()

    def on_target_sent(self) -> None:
        """Apply the launch impulse along the missile's heading."""
        self.gravity_scale = LAUNCH_GRAVITY_SCALE
        self.force = self.force + self.forward_vector * self.initial_impulse_force

    def tick(self, dt: float) -> None:
        """Advance the missile towards its target by one step."""
        if self.destroyed or self.target is None or self.target.destroyed:
            return
        target_location = self.target.location
        target_prediction = predicted_location(target_location, self.last_target_pos, dt)
        missile_prediction = predicted_location(self.location, self.last_missile_pos, dt)

        push = (target_prediction - missile_prediction).normalized()
        slowdown = 100.0 / self.max_speed
        step = self.location.distance(target_location) / slowdown
        self.location = self.location + push * step
        self.rotation = look_at_rotation(self.location, target_location)

        self.last_target_pos = target_location
        self.last_missile_pos = self.location

        if self.location.distance(target_location) <= self.hit_radius:
            self.on_overlap(self.target)

    def on_overlap(self, other: Actor) -> None:
        """Explode against a drone, taking it down too."""
        if isinstance(other, Drone):
            other.explode()
            self.destroy()

    def destroy(self) -> None:
        """Destroy the missile and tell listeners which target it was after."""
        if self.destroyed:
            return
        for callback in list(self.destroyed_callbacks):
            callback(self.target)
        super().destroy()