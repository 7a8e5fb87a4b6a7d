"""Filters radar noise and hands confirmed targets to a missile launcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from radarsim.actors import Actor
from radarsim.launcher import MissileLauncher

DETECTION_TAG = "detectedEntity"


@dataclass(eq=False)
class DecisionComponent:
    """Tracks how long each detected actor stays in view.

    Every ``noise_filter_timer_value`` seconds, actors seen for at most half
    that time are dropped as noise; the rest become saved targets and are
    passed to the missile launcher.
    """

    noise_filter_timer_value: float = 1.0
    time_before_lock: float = 3.0
    radar: Any = None
    missile_launcher: MissileLauncher | None = None
    detection_tag: str = DETECTION_TAG
    current_detected_index: int = 1
    noise_filter_timer: float = 0.0
    noise_threshold: float = field(init=False)
    detected_noise: dict[Actor, float] = field(default_factory=dict)
    saved_target_entries: list[Actor] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.noise_threshold = self.noise_filter_timer_value

    def begin_play(self) -> None:
        """Reset the filter timer and listen for missiles the launcher sends."""
        self.noise_filter_timer = self.noise_filter_timer_value
        self.noise_threshold = self.noise_filter_timer_value
        if self.missile_launcher is not None:
            callbacks = self.missile_launcher.missile_sent_callbacks
            if self.remove_saved_entry not in callbacks:
                callbacks.append(self.remove_saved_entry)

    def tick(self, dt: float) -> None:
        """Advance the noise filter by ``dt`` seconds."""
        self.noise_filter(dt)

    def add_noise_entry(self, noise: Actor | None, dt: float) -> None:
        """Record that the radar saw ``noise`` during a frame of length ``dt``."""
        if noise is None:
            return
        is_new = not noise.tags or self.detection_tag not in noise.tags[0]
        if is_new:
            tag = f"{self.detection_tag}-{self.current_detected_index}"
            self.current_detected_index += 1
            if noise.tags:
                noise.tags[0] = tag
            else:
                noise.tags.append(tag)
            self.detected_noise[noise] = 0.0
            return
        for tracked in self.detected_noise:
            if tracked.tags and tracked.tags[0] in noise.tags:
                self.detected_noise[tracked] += dt

    def noise_filter(self, dt: float) -> None:
        """When the timer runs out, drop short-lived noise and send the rest on."""
        self.noise_filter_timer -= dt
        if self.noise_filter_timer > 0.0:
            return
        if self.detected_noise:
            limit = self.noise_threshold / 2
            to_remove = [n for n, seen in self.detected_noise.items() if seen <= limit]
            to_send = [n for n, seen in self.detected_noise.items() if seen > limit]
            for noise in to_remove:
                if noise.tags:
                    noise.tags.pop(0)
            for target in to_send:
                self.saved_target_entries.append(target)
                if self.missile_launcher is not None:
                    self.missile_launcher.receive_action(target)
            self.detected_noise.clear()
        self.noise_filter_timer = self.noise_filter_timer_value

    def remove_saved_entry(self, actor: Actor | None) -> None:
        """Forget the last saved target sharing ``actor``'s name."""
        if actor is None:
            return
        matches = [
            i
            for i, entry in enumerate(self.saved_target_entries)
            if entry is not None and entry.name == actor.name
        ]
        if matches:
            del self.saved_target_entries[matches[-1]]