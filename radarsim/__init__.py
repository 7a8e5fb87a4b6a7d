"""Air-defence simulation: a spinning radar, noise filtering, a missile launcher, homing missiles and drones."""

__version__ = "0.1.0"