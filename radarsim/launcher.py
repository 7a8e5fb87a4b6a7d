"""A missile launcher that fires queued targets and reloads when empty."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Callable, Iterable

from radarsim.actors import Actor
from radarsim.geometry import Rotator, Vec3
from radarsim.missile import Missile

MissileFactory = Callable[[Vec3, Rotator], Missile]

_spawn_counter = itertools.count(1)


def _default_missile_factory(location: Vec3, rotation: Rotator) -> Missile:
    return Missile(name=f"missile-{next(_spawn_counter)}", location=location, rotation=rotation)


@dataclass(eq=False)
class MissileLauncher(Actor):
    """Fires one missile per queued target, first in first out, then reloads.

    Missiles are taken from the rack last in, first out. When the rack is
    empty, a reload after ``reload_time_value`` seconds puts a fresh missile
    back in every slot recorded by :meth:`attach_missiles`.
    """

    fire_rate_value: float = 1.5
    reload_time_value: float = 5.0
    missile_factory: MissileFactory = field(default=_default_missile_factory, repr=False)
    fire_rate: float = 0.0
    reload_time: float = 0.0
    is_reloading: bool = False
    can_shoot: bool = True
    targets: list[Actor | None] = field(default_factory=list)
    missiles: list[Missile] = field(default_factory=list)
    missile_transforms: list[tuple[Vec3, Rotator]] = field(default_factory=list)
    missile_sent_callbacks: list[Callable[[Actor | None], None]] = field(
        default_factory=list, repr=False
    )

    def begin_play(self) -> None:
        """Reset the fire-rate and reload timers to their configured values."""
        self.fire_rate = self.fire_rate_value
        self.reload_time = self.reload_time_value

    def tick(self, dt: float) -> None:
        """Fire if possible, then advance the fire-rate and reload timers."""
        self._send_missile_if_ready()
        self._manage_fire_rate(dt)
        self._manage_reload(dt)

    def receive_action(self, target: Actor | None) -> bool:
        """Queue ``target`` to be shot at."""
        self.targets.append(target)
        return True

    def attach_missiles(self, missiles: Iterable[object]) -> None:
        """Rack the given missiles and remember their placement for reloads."""
        for missile in missiles:
            if isinstance(missile, Missile):
                self.missiles.append(missile)
                self.missile_transforms.append((missile.location, missile.rotation))

    def launch_missile(self, target: Actor | None) -> None:
        """Send the last racked missile after ``target``."""
        if not self.missiles or target is None:
            return
        missile = self.missiles.pop()
        if self._on_missile_destroyed not in missile.destroyed_callbacks:
            missile.destroyed_callbacks.append(self._on_missile_destroyed)
        missile.set_target(target)
        if not self.missiles:
            self.is_reloading = True

    def reload(self) -> None:
        """Spawn a new missile in every recorded slot."""
        for location, rotation in self.missile_transforms:
            self.missiles.append(self.missile_factory(location, rotation))

    def _send_missile_if_ready(self) -> None:
        if not (self.can_shoot and not self.is_reloading and self.missiles and self.targets):
            return
        target = self.targets[0]
        if target is None:
            return
        self.can_shoot = False
        self.launch_missile(target)
        self.targets.pop(0)

    def _manage_fire_rate(self, dt: float) -> None:
        if self.can_shoot:
            return
        self.fire_rate -= dt
        if self.fire_rate <= 0:
            self.fire_rate = self.fire_rate_value
            self.can_shoot = True

    def _manage_reload(self, dt: float) -> None:
        if not self.is_reloading:
            return
        self.reload_time -= dt
        if self.reload_time <= 0:
            self.reload()
            self.is_reloading = False
            self.reload_time = self.reload_time_value

    def _on_missile_destroyed(self, target: Actor | None) -> None:
        for callback in list(self.missile_sent_callbacks):
            callback(target)