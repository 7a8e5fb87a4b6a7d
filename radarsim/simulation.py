"""A complete scene: a radar guarding an area, a launcher and roaming drones."""

from __future__ import annotations

import argparse
import itertools
import random
from dataclasses import dataclass, field
from typing import Sequence

from radarsim.actors import BoundingBox, Drone
from radarsim.analyser import RadarAnalyser
from radarsim.geometry import Rotator, Vec3
from radarsim.launcher import MissileLauncher
from radarsim.missile import Missile
from radarsim.radar import Radar


@dataclass
class Simulation:
    """Wires a radar, its launcher and the drones together and steps them."""

    radar: Radar
    launcher: MissileLauncher
    drones: list[Drone] = field(default_factory=list)
    missiles: list[Missile] = field(default_factory=list)
    time: float = 0.0

    def __post_init__(self) -> None:
        self.radar.decision_component.missile_launcher = self.launcher
        self.radar.begin_play()
        self.launcher.begin_play()
        self._track_launcher_missiles()

    @classmethod
    def default(cls, seed: int = 0, drone_count: int = 3) -> Simulation:
        """Build the standard scene: drones roaming in front of the radar."""
        if drone_count < 0:
            raise ValueError("drone_count must not be negative")
        rng = random.Random(seed)
        box = BoundingBox(center=Vec3(1000.0, 0.0, 0.0), extent=Vec3(400.0, 400.0, 100.0))
        drones = [
            Drone(
                name=f"drone-{i}",
                location=box.random_point(rng),
                bounding_box=box,
                max_speed=300.0,
                rng=rng,
            )
            for i in range(1, drone_count + 1)
        ]
        counter = itertools.count(1)

        def make_missile(location: Vec3, rotation: Rotator) -> Missile:
            return Missile(
                name=f"missile-{next(counter)}",
                location=location,
                rotation=rotation,
                max_speed=20.0,
            )

        launcher = MissileLauncher(
            name="launcher", location=Vec3(0.0, -300.0, 0.0), missile_factory=make_missile
        )
        launcher.attach_missiles(
            make_missile(Vec3(0.0, -300.0 + offset, 100.0), Rotator())
            for offset in (-75.0, -25.0, 25.0, 75.0)
        )
        radar = Radar(name="radar", analyser=RadarAnalyser())
        return cls(radar=radar, launcher=launcher, drones=drones)

    @property
    def destroyed_drones(self) -> int:
        return sum(drone.destroyed for drone in self.drones)

    def step(self, dt: float) -> None:
        """Advance every part of the scene by ``dt`` seconds."""
        if dt <= 0:
            raise ValueError("dt must be positive")
        for drone in self.drones:
            drone.tick(dt)
        self.radar.tick([d for d in self.drones if not d.destroyed], dt)
        self.radar.decision_component.tick(dt)
        self.launcher.tick(dt)
        self._track_launcher_missiles()
        for missile in self.missiles:
            if missile.target is not None and not missile.destroyed:
                missile.tick(dt)
        self.time += dt

    def run(self, seconds: float, dt: float) -> int:
        """Step the scene until ``seconds`` have passed; return the number of steps."""
        if dt <= 0:
            raise ValueError("dt must be positive")
        if seconds < 0:
            raise ValueError("seconds must not be negative")
        end = self.time + seconds
        steps = 0
        while self.time < end - dt * 1e-6:
            self.step(dt)
            steps += 1
        return steps

    def _track_launcher_missiles(self) -> None:
        known = {id(m) for m in self.missiles}
        self.missiles.extend(m for m in self.launcher.missiles if id(m) not in known)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the standard scene and print a short report."""
    parser = argparse.ArgumentParser(prog="radarsim", description="Run the radar scene.")
    parser.add_argument("--seconds", type=float, default=10.0)
    parser.add_argument("--dt", type=float, default=1 / 60)
    parser.add_argument("--drones", type=int, default=3)
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args(argv)

    try:
        sim = Simulation.default(seed=args.seed, drone_count=args.drones)
        sim.run(args.seconds, args.dt)
    except ValueError as exc:
        parser.error(str(exc))

    print(f"simulated {sim.time:.2f} s")
    print(f"drones destroyed: {sim.destroyed_drones}/{len(sim.drones)}")
    launched = sum(m.target is not None for m in sim.missiles)
    print(f"missiles launched: {launched}")
    names = sim.radar.analyser.saved_target_names if sim.radar.analyser else []
    print(f"saved targets: {', '.join(names) or '-'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())