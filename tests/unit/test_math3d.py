"""Unit tests for the vector and quaternion types."""

from __future__ import annotations

import math

import pytest

from avatar_bot.behaviors.math3d import FRONT, UP, Quat, Vec3


def _assert_vec(actual: Vec3, expected: Vec3, abs_tol: float = 1e-9) -> None:
    assert actual.x == pytest.approx(expected.x, abs=abs_tol)
    assert actual.y == pytest.approx(expected.y, abs=abs_tol)
    assert actual.z == pytest.approx(expected.z, abs=abs_tol)


def _same_rotation(a: Quat, b: Quat) -> bool:
    # q and -q are the same rotation
    return abs(abs(a.dot(b)) - 1.0) < 1e-9


class TestVec3:
    """Tests for Vec3 arithmetic."""

    def test_add_sub(self) -> None:
        a = Vec3(1.0, 2.0, 3.0)
        b = Vec3(0.5, -1.0, 2.0)

        assert a + b == Vec3(1.5, 1.0, 5.0)
        assert a - b == Vec3(0.5, 3.0, 1.0)

    def test_scale(self) -> None:
        v = Vec3(1.0, -2.0, 4.0)

        assert v * 0.5 == Vec3(0.5, -1.0, 2.0)
        assert 2.0 * v == Vec3(2.0, -4.0, 8.0)

    def test_length(self) -> None:
        assert Vec3(3.0, 4.0, 0.0).length() == pytest.approx(5.0)
        assert Vec3().length() == 0.0


class TestQuat:
    """Tests for Quat construction and rotation."""

    def test_identity_front(self) -> None:
        """Identity orientation faces -Z."""
        _assert_vec(Quat.identity().front, FRONT)

    def test_angle_axis_yaw(self) -> None:
        """Positive yaw turns the front vector toward -X."""
        q = Quat.angle_axis(90.0, UP)

        _assert_vec(q.front, Vec3(-1.0, 0.0, 0.0))

    def test_angle_axis_normalizes_axis(self) -> None:
        q1 = Quat.angle_axis(30.0, Vec3(0.0, 5.0, 0.0))
        q2 = Quat.angle_axis(30.0, UP)

        assert _same_rotation(q1, q2)

    def test_angle_axis_zero_axis_is_identity(self) -> None:
        assert Quat.angle_axis(45.0, Vec3()) == Quat.identity()

    def test_pitch_yaw_roll_matches_angle_axis(self) -> None:
        """Single-axis Euler angles match the angle-axis construction."""
        assert _same_rotation(
            Quat.from_pitch_yaw_roll_degrees(0.0, 90.0, 0.0), Quat.angle_axis(90.0, UP)
        )
        assert _same_rotation(
            Quat.from_pitch_yaw_roll_degrees(45.0, 0.0, 0.0),
            Quat.angle_axis(45.0, Vec3(1.0, 0.0, 0.0)),
        )
        assert _same_rotation(
            Quat.from_pitch_yaw_roll_degrees(0.0, 0.0, 60.0),
            Quat.angle_axis(60.0, Vec3(0.0, 0.0, 1.0)),
        )

    def test_pitch_yaw_roll_is_unit(self) -> None:
        q = Quat.from_pitch_yaw_roll_degrees(12.0, -70.0, 33.0)

        assert math.isclose(q.dot(q), 1.0, rel_tol=1e-12)

    def test_multiply_identity(self) -> None:
        q = Quat.angle_axis(40.0, UP)

        assert _same_rotation(q * Quat.identity(), q)
        assert _same_rotation(Quat.identity() * q, q)

    def test_multiply_composes_yaw(self) -> None:
        """Two yaws around the same axis add up."""
        q = Quat.angle_axis(30.0, UP) * Quat.angle_axis(60.0, UP)

        assert _same_rotation(q, Quat.angle_axis(90.0, UP))

    def test_rotate_preserves_length(self) -> None:
        q = Quat.from_pitch_yaw_roll_degrees(20.0, 50.0, -10.0)
        v = Vec3(1.0, 2.0, -3.0)

        assert q.rotate(v).length() == pytest.approx(v.length())


class TestQuatMix:
    """Tests for spherical interpolation."""

    def test_endpoints(self) -> None:
        start = Quat.identity()
        end = Quat.angle_axis(80.0, UP)

        assert _same_rotation(start.mix(end, 0.0), start)
        assert _same_rotation(start.mix(end, 1.0), end)

    def test_halfway(self) -> None:
        start = Quat.identity()
        end = Quat.angle_axis(90.0, UP)

        assert _same_rotation(start.mix(end, 0.5), Quat.angle_axis(45.0, UP))

    def test_shortest_path(self) -> None:
        """Mixing toward -q behaves the same as mixing toward q."""
        start = Quat.identity()
        end = Quat.angle_axis(60.0, UP)
        negated = Quat(-end.x, -end.y, -end.z, -end.w)

        assert _same_rotation(start.mix(end, 0.3), start.mix(negated, 0.3))

    def test_nearly_equal_quaternions(self) -> None:
        q = Quat.angle_axis(10.0, UP)

        mixed = q.mix(q, 0.15)

        assert _same_rotation(mixed, q)
        assert math.isclose(mixed.dot(mixed), 1.0, rel_tol=1e-12)

    def test_repeated_mix_converges(self) -> None:
        """Repeated 15% steps converge on the target."""
        current = Quat.identity()
        target = Quat.angle_axis(-70.0, UP)

        for _ in range(200):
            current = current.mix(target, 0.15)

        assert _same_rotation(current, target)
