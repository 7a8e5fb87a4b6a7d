# radarsim

A small air-defence simulation in plain Python with no third-party
dependencies.

A radar spins in place and watches a cone around its main axis. An actor
that stays in the cone long enough is confirmed as a target by the radar's
decision component and handed to a missile launcher. The launcher fires
homing missiles one target at a time, waits out a fire rate between shots,
and reloads once its rack is empty. Drones wander between random points
inside a bounding box. A missile that reaches a drone destroys the drone and
itself. A radar analyser tracks the sweep angle and lists short names for the
targets that are currently saved.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The command

```
radarsim [--seconds SECONDS] [--dt DT] [--drones N] [--seed SEED]
```

The command builds the standard scene with `Simulation.default`. It steps the
scene forward in fixed time steps and then prints four lines: the simulated
time, the number of drones destroyed, the number of missiles launched, and
the short names of the saved targets. The options are:

- `--seconds`: how long to simulate. The default is 10.
- `--dt`: the length of one time step. The default is 1/60.
- `--drones`: how many drones to place. The default is 3.
- `--seed`: the random seed for drone placement and movement. The default is 0.

A time step that is not positive, a negative duration, or a negative drone
count is reported as a usage error.

## Using it from Python

```python
from radarsim.simulation import Simulation

sim = Simulation.default(seed=0, drone_count=3)
steps = sim.run(seconds=30.0, dt=1 / 60)
print(sim.time, sim.destroyed_drones)
```

`Simulation.run(seconds, dt)` returns the number of steps it took.
`Simulation.step(dt)` advances the scene by a single step. Each step moves
the drones, runs the radar scan, ticks the decision component and the
launcher, and then moves every missile that has a target.

A `Simulation` can also be built by hand from a `Radar`, a `MissileLauncher`
and a list of `Drone`s. The constructor connects the radar's decision
component to the launcher and starts both of them.

### Modules

- `radarsim.geometry`
  - `Vec3` is an immutable vector with `dot`, `length`, `normalized` and `distance`.
  - `Rotator` holds pitch, yaw and roll in degrees and provides `forward_vector`.
  - `look_at_rotation(start, target)` returns the rotation that points from `start` towards `target`.
- `radarsim.actors`
  - `Actor` has a name, a location, a rotation and tags, and can be destroyed with `destroy()`.
  - `BoundingBox` is a centre plus half-extents; `random_point(rng)` returns a random point inside it.
  - `Drone` moves at `max_speed` towards a random point in its box. It picks a new point once it comes within `acceptance_radius`. `explode()` destroys it.
- `radarsim.missile`
  - `Missile` homes in on its target after `set_target`. Its step size is proportional to its distance from the target. It hits once it comes within `hit_radius`. When it is destroyed it calls its `destroyed_callbacks` with the target.
  - `predicted_location(current, last, dt)` extrapolates a position from its last two samples. It raises `ValueError` if `dt` is not positive.
- `radarsim.launcher`
  - `MissileLauncher` shoots its queued targets first in, first out, and takes missiles from the rack last in, first out. Between shots it waits `fire_rate_value` seconds.
  - Once the rack is empty, it waits `reload_time_value` seconds and then puts a new missile in every slot recorded by `attach_missiles`.
- `radarsim.decision`
  - `DecisionComponent` tags each new detection as `detectedEntity-<n>` and adds up how long each tagged actor is seen.
  - Every `noise_filter_timer_value` seconds, actors seen for no more than half of that time are dropped as noise. The others are saved and passed to the launcher.
  - When a missile is destroyed, `remove_saved_entry` removes the matching saved target.
- `radarsim.analyser`
  - `RadarAnalyser.update_angle(rotation_speed, dt)` advances the scope angle, wraps it at 360 degrees, and returns the angle in radians.
- `radarsim.radar`
  - `Radar` sees actors that are within half its action-area diameter horizontally and less than `active_angle` degrees off its main axis.
  - It provides `main_axis_points`, `angle_to`, `is_in_active_zone`, `left_rotated_axis` and `right_rotated_axis`.
  - `short_name(name)` keeps the first three characters of a name and appends the last three in reverse order. It raises `ValueError` for names shorter than three characters.
- `radarsim.simulation`
  - `Simulation` ties the other parts together.
  - `main(argv=None)` is the entry point for the command.

## What it does not do

The package simulates the scene and prints a text report, nothing more. It
has no graphics, no 3D view and no interactive controls. It has no physics
engine: collisions are distance checks. Drones and missiles move in straight
steps, and gravity and launch force are stored on a missile but do not affect
its motion.