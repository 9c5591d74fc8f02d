import math

import numpy as np
import pytest

from chain_ik import local_orientations, world_orientations
from chain_ik.chain_orientation import link_angle, orientations_to_world, world_to_local
from chain_ik.vector_math import signed_angle, wrap_angle


def test_rest_pose_has_zero_rotation():
    positions = np.array([[0.0, 0.0], [0.0, 200.0], [0.0, 300.0]])
    assert np.allclose(world_orientations(positions), 0.0)
    assert np.allclose(local_orientations(positions), 0.0)


def test_rotation_is_measured_from_up_axis():
    assert link_angle(np.array([1.0, 0.0])) == pytest.approx(-math.pi / 2)
    assert link_angle(np.array([-1.0, 0.0])) == pytest.approx(math.pi / 2)
    # Straight down wraps to +pi
    assert link_angle(np.array([0.0, -1.0])) == pytest.approx(math.pi)


def test_world_and_local_rotations_of_bent_arm():
    positions = np.array([[0.0, 0.0], [0.0, 100.0], [100.0, 100.0], [100.0, 0.0]])

    assert np.allclose(world_orientations(positions), [0.0, -math.pi / 2, math.pi])
    assert np.allclose(local_orientations(positions), [0.0, -math.pi / 2, -math.pi / 2])


def test_zero_length_link_inherits_previous_rotation():
    positions = np.array([[0.0, 0.0], [100.0, 0.0], [100.0, 0.0], [100.0, 100.0]])

    world = world_orientations(positions)

    assert np.allclose(world, [-math.pi / 2, -math.pi / 2, 0.0])
    assert np.all(np.isfinite(world))


def test_collapsed_chain_has_zero_rotation():
    assert np.array_equal(world_orientations(np.zeros((4, 2))), np.zeros(3))


def test_local_and_world_conversions_agree():
    world = np.array([0.3, -2.9, 3.0, -0.1])
    assert np.allclose(orientations_to_world(world_to_local(world)), world)


def test_wrap_angle_range():
    assert wrap_angle(math.pi) == pytest.approx(math.pi)
    assert wrap_angle(-math.pi) == pytest.approx(math.pi)
    assert wrap_angle(3 * math.pi / 2) == pytest.approx(-math.pi / 2)
    assert np.allclose(wrap_angle(np.array([0.0, 2 * math.pi])), [0.0, 0.0])


def test_signed_angle_direction():
    up = np.array([0.0, 1.0])
    assert signed_angle(up, np.array([-1.0, 0.0])) == pytest.approx(math.pi / 2)
    assert signed_angle(up, np.array([1.0, 0.0])) == pytest.approx(-math.pi / 2)
