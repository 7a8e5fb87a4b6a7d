import random

import pytest

from radarsim.actors import Actor, BoundingBox, Drone
from radarsim.geometry import Vec3


BOX = BoundingBox(center=Vec3(100.0, -200.0, 300.0), extent=Vec3(1000.0, 500.0, 50.0))


def bounds(box):
    return [(c - e, c + e) for c, e in zip(box.center, box.extent)]


@pytest.mark.parametrize("seed", range(20))
def test_random_point_is_inside_box(seed):
    rng = random.Random(seed)
    for _ in range(50):
        point = BOX.random_point(rng)
        for (low, high), value in zip(bounds(BOX), point):
            assert low <= value <= high


def test_random_point_is_deterministic_for_seed():
    first_rng = random.Random(7)
    second_rng = random.Random(7)
    first = [tuple(BOX.random_point(first_rng)) for _ in range(5)]
    second = [tuple(BOX.random_point(second_rng)) for _ in range(5)]
    assert first == second
    assert len(first) == 5
    assert first[0] != first[1]


def test_random_point_of_flat_box_is_center():
    box = BoundingBox(center=Vec3(1.0, 2.0, 3.0), extent=Vec3())
    assert box.random_point(random.Random(0)) == box.center


def test_actor_destroy_marks_destroyed():
    actor = Actor("thing")
    assert actor.destroyed is False
    actor.destroy()
    actor.destroy()
    assert actor.destroyed is True


def test_actors_compare_by_identity():
    a = Actor("same")
    b = Actor("same")
    assert (a == b) is False
    assert len({a, b}) == 2


def test_drone_without_box_targets_own_location():
    drone = Drone("drone", location=Vec3(5.0, 6.0, 7.0))
    assert drone.current_target == drone.location


def test_drone_with_box_targets_point_inside_box():
    drone = Drone("drone", bounding_box=BOX, rng=random.Random(3))
    target = drone.current_target
    for (low, high), value in zip(bounds(BOX), target):
        assert low <= value <= high


def test_set_movement_bounding_box_chooses_target_inside():
    drone = Drone("drone", rng=random.Random(11))
    drone.set_movement_bounding_box(BOX)
    assert drone.bounding_box is BOX
    for (low, high), value in zip(bounds(BOX), drone.current_target):
        assert low <= value <= high


def test_tick_moves_towards_target_at_max_speed():
    drone = Drone("drone")
    drone.current_target = Vec3(1000.0, 0.0, 0.0)
    start = drone.location.distance(drone.current_target)
    drone.tick(0.1)
    after = drone.location.distance(drone.current_target)
    assert after == pytest.approx(start - drone.max_speed * 0.1)


def test_tick_within_acceptance_radius_picks_next_point():
    drone = Drone("drone", bounding_box=BOX, rng=random.Random(5))
    drone.location = drone.current_target
    drone.tick(0.01)
    reference = random.Random(5)
    BOX.random_point(reference)
    assert drone.current_target == BOX.random_point(reference)


def test_tick_at_target_without_box_stays_put():
    drone = Drone("drone", location=Vec3(1.0, 1.0, 1.0))
    drone.tick(1.0)
    assert drone.location == Vec3(1.0, 1.0, 1.0)


def test_explode_destroys_and_stops_movement():
    drone = Drone("drone")
    drone.current_target = Vec3(1000.0, 0.0, 0.0)
    drone.explode()
    drone.tick(1.0)
    assert drone.destroyed is True
    assert drone.location == Vec3()