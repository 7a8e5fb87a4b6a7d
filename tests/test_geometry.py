import math

import pytest

from radarsim.geometry import Rotator, Vec3, look_at_rotation


def approx_vec(v):
    return pytest.approx(tuple(v), abs=1e-9)


def test_add_then_sub_round_trip():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(-7.0, 4.5, 0.5)
    assert tuple((a + b) - b) == approx_vec(a)


def test_negation_cancels():
    a = Vec3(3.0, -4.0, 12.0)
    assert tuple(a + (-a)) == approx_vec(Vec3())


def test_scalar_multiplication_commutes():
    a = Vec3(2.0, -3.0, 5.0)
    assert a * 2.5 == 2.5 * a


def test_division_undoes_multiplication():
    a = Vec3(2.0, -3.0, 5.0)
    assert tuple((a * 4.0) / 4.0) == approx_vec(a)


def test_multiplying_by_vector_is_type_error():
    with pytest.raises(TypeError):
        Vec3(1.0, 2.0, 3.0) * Vec3(1.0, 1.0, 1.0)


def test_multiplying_by_string_is_type_error():
    with pytest.raises(TypeError):
        Vec3(1.0, 2.0, 3.0) * "x"


def test_dot_of_orthogonal_vectors_is_zero():
    assert Vec3(1.0, 2.0, 0.0).dot(Vec3(-2.0, 1.0, 5.0)) == pytest.approx(0.0)


def test_dot_with_self_is_length_squared():
    a = Vec3(3.0, -4.0, 12.0)
    assert a.dot(a) == pytest.approx(a.length() ** 2)


@pytest.mark.parametrize(
    "v", [Vec3(3.0, 4.0, 0.0), Vec3(-1.0, 2.0, -3.0), Vec3(0.0, 0.0, 1e4)]
)
def test_normalized_has_unit_length(v):
    assert v.normalized().length() == pytest.approx(1.0)


def test_normalized_preserves_direction():
    v = Vec3(-1.0, 2.0, -3.0)
    assert tuple(v.normalized() * v.length()) == approx_vec(v)


def test_normalized_zero_vector_is_zero():
    assert Vec3().normalized() == Vec3()


def test_distance_is_symmetric_and_matches_difference_length():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 9.0)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(b) == pytest.approx((a - b).length())


def test_distance_to_self_is_zero():
    a = Vec3(1.0, 2.0, 3.0)
    assert a.distance(a) == 0.0


def test_forward_of_default_rotator_is_x_axis():
    assert tuple(Rotator().forward_vector()) == approx_vec(Vec3(1.0, 0.0, 0.0))


@pytest.mark.parametrize("pitch,yaw", [(0.0, 45.0), (30.0, -120.0), (-80.0, 200.0)])
def test_forward_vector_is_unit(pitch, yaw):
    assert Rotator(pitch, yaw, 0.0).forward_vector().length() == pytest.approx(1.0)


@pytest.mark.parametrize(
    "start,target",
    [
        (Vec3(0.0, 0.0, 0.0), Vec3(10.0, 0.0, 0.0)),
        (Vec3(1.0, 2.0, 3.0), Vec3(-5.0, 7.0, 1.0)),
        (Vec3(100.0, -50.0, 0.0), Vec3(100.0, 50.0, 400.0)),
    ],
)
def test_look_at_points_towards_target(start, target):
    rot = look_at_rotation(start, target)
    expected = (target - start).normalized()
    assert tuple(rot.forward_vector()) == approx_vec(expected)
    assert rot.roll == 0.0


def test_look_at_yaw_sign_follows_y():
    left = look_at_rotation(Vec3(), Vec3(1.0, -1.0, 0.0))
    right = look_at_rotation(Vec3(), Vec3(1.0, 1.0, 0.0))
    assert left.yaw == pytest.approx(-right.yaw)
    assert math.isclose(left.pitch, 0.0, abs_tol=1e-12)