"""A spinning radar that spots actors inside its cone and reports them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from radarsim.actors import Actor
from radarsim.analyser import RadarAnalyser
from radarsim.decision import DecisionComponent
from radarsim.geometry import Rotator, Vec3

_PI_APPROX = 3.14
_METRES_TO_UNITS = 100.0


def short_name(name: str) -> str:
    """Shorten a name for the console: first three characters, then the last three reversed."""
    if len(name) < 3:
        raise ValueError(f"name {name!r} is shorter than three characters")
    return name[:3] + name[-1] + name[-2] + name[-3]


@dataclass(eq=False)
class Radar(Actor):
    """Detects actors within ``active_angle`` of its spinning main axis."""

    rotation_speed: float = 0.08
    active_angle: float = 30.0
    action_area_diameter_meter: float = 30.0
    decision_component: DecisionComponent = field(default_factory=DecisionComponent)
    analyser: RadarAnalyser | None = None
    action_area_scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))
    mesh_rotation: Rotator = field(init=False)

    def __post_init__(self) -> None:
        self.mesh_rotation = self.rotation

    @property
    def action_area_radius(self) -> float:
        return self.action_area_diameter_meter * _METRES_TO_UNITS / 2

    def begin_play(self) -> None:
        """Size the action area and start the decision component."""
        d = self.action_area_diameter_meter
        self.action_area_scale = Vec3(d, d, self.action_area_scale.z)
        self.decision_component.radar = self
        self.decision_component.begin_play()

    def tick(self, actors: Iterable[Actor], dt: float) -> None:
        """Scan ``actors``, spin the antenna and refresh the analyser."""
        for actor in actors:
            if actor is self or actor.destroyed or not self._overlaps(actor):
                continue
            if self.is_in_active_zone(actor.location):
                self.decision_component.add_noise_entry(actor, dt)

        r = self.mesh_rotation
        self.mesh_rotation = Rotator(r.pitch, r.yaw + self.rotation_speed * dt, r.roll)
        self._update_analyser(dt)

    def main_axis_points(self) -> tuple[Vec3, Vec3]:
        """Return the start and end of the radar's main axis."""
        start = self.location
        length = self.action_area_diameter_meter * _METRES_TO_UNITS
        end = start + self.mesh_rotation.forward_vector() * length
        return start, end

    def angle_to(self, location: Vec3) -> float:
        """Return the angle in degrees between the main axis and ``location``."""
        start, end = self.main_axis_points()
        main_direction = (end - start).normalized()
        noise_direction = (location - start).normalized()
        cosine = max(-1.0, min(1.0, main_direction.dot(noise_direction)))
        return abs(math.acos(cosine) * 180 / _PI_APPROX)

    def is_in_active_zone(self, location: Vec3) -> bool:
        """Tell whether ``location`` lies inside the active angle."""
        return self.angle_to(location) < self.active_angle

    def left_rotated_axis(self) -> Vec3:
        """Return the end of the main axis turned by minus the active angle."""
        return self._rotated_axis(-self.active_angle)

    def right_rotated_axis(self) -> Vec3:
        """Return the end of the main axis turned by the active angle."""
        return self._rotated_axis(self.active_angle)

    def _rotated_axis(self, angle: float) -> Vec3:
        radians = angle * _PI_APPROX / 180
        start, end = self.main_axis_points()
        d = end - start
        cos_a, sin_a = math.cos(radians), math.sin(radians)
        return Vec3(
            start.x + d.x * cos_a - d.y * sin_a,
            start.y + d.x * sin_a + d.y * cos_a,
            end.z,
        )

    def _overlaps(self, actor: Actor) -> bool:
        offset = actor.location - self.location
        return math.hypot(offset.x, offset.y) <= self.action_area_radius

    def _update_analyser(self, dt: float) -> None:
        if self.analyser is None:
            return
        self.analyser.update_angle(self.rotation_speed, dt)
        self.analyser.saved_target_names = [
            short_name(entry.name) for entry in self.decision_component.saved_target_entries
        ]