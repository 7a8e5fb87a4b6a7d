"""Visual read-out of a radar: a sweeping scope angle and saved target names."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class RadarAnalyser:
    """Console that mirrors the radar sweep and lists the saved targets."""

    radar_visualizer_speed_factor: float = 0.17
    radar_angle_degrees: float = 0.0
    radar_angle_radians: float = 0.0
    saved_target_names: list[str] = field(default_factory=list)

    def update_angle(self, rotation_speed: float, dt: float) -> float:
        """Advance the scope angle by one frame and return it in radians."""
        delta = rotation_speed * self.radar_visualizer_speed_factor * dt
        self.radar_angle_degrees = math.fmod(self.radar_angle_degrees + delta, 360.0)
        self.radar_angle_radians = math.radians(self.radar_angle_degrees)
        return self.radar_angle_radians