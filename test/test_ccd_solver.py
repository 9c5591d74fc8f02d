import math

import numpy as np
import pytest

from chain_ik import (
    CcdSolver, InvalidChainError, SolveStatus, forward_kinematics, solve_ccd
)


def _hand_error(chain, target):
    return float(np.linalg.norm(chain.end_effector - np.asarray(target)))


def test_distance_never_grows_between_sweeps(three_link_chain):
    target = (100.0, 50.0)
    initial = forward_kinematics(three_link_chain.root, three_link_chain.lengths,
                                 three_link_chain.orientations)[-1]
    errors = [float(np.linalg.norm(initial - target))]

    for sweeps in range(1, 13):
        result = CcdSolver(max_iterations=sweeps).solve(three_link_chain, target)
        errors.append(result.final_error)

    assert all(later <= earlier + 1e-9 for earlier, later in zip(errors, errors[1:]))
    assert errors[-1] <= errors[0]


def test_reaches_target_with_enough_sweeps(three_link_chain):
    result = CcdSolver(max_iterations=30).solve(three_link_chain, (100.0, 50.0))

    assert result.status is SolveStatus.SOLVED
    assert result.converged
    assert result.final_error <= 0.01
    assert result.iterations == 30


def test_rotation_is_clamped_per_sweep(three_link_chain):
    clamp = math.radians(5.0)

    result = CcdSolver(max_iterations=1, max_rotation_per_iteration=clamp).solve(
        three_link_chain, (-300.0, -100.0)
    )

    assert np.all(np.abs(result.chain.orientations) <= clamp + 1e-12)
    assert np.any(result.chain.orientations != 0.0)


def test_target_on_root_leaves_root_joint_alone(two_link_chain):
    result = CcdSolver(max_iterations=15).solve(two_link_chain, (0.0, 0.0))

    assert result.chain.orientations[0] == 0.0
    assert np.all(np.isfinite(result.chain.orientations))
    assert np.all(np.isfinite(result.chain.positions))


def test_unreachable_target_is_best_effort(two_link_chain):
    target = (1000.0, 0.0)
    solver = CcdSolver(max_iterations=15)

    result = solver.solve(two_link_chain, target)

    assert result.status is SolveStatus.SOLVED
    assert not result.converged
    assert result.final_error < np.linalg.norm(np.array([0.0, 200.0]) - target)
    assert result.final_error >= 800.0 - 1e-9


def test_result_positions_follow_orientations(three_link_chain):
    result = CcdSolver().solve(three_link_chain, (-150.0, 200.0))
    chain = result.chain

    rebuilt = forward_kinematics(chain.root, chain.lengths, chain.orientations)

    assert np.allclose(rebuilt, chain.positions, atol=1e-6)
    assert np.allclose(np.linalg.norm(np.diff(chain.positions, axis=0), axis=1), chain.lengths)


def test_solve_ccd_matches_solver_and_keeps_inputs(three_link_chain):
    orientations = np.zeros(3)
    positions = forward_kinematics((0.0, 0.0), three_link_chain.lengths, orientations)
    joint_positions = positions[:-1].copy()
    hand = positions[-1].copy()

    updated = solve_ccd(orientations, joint_positions, three_link_chain.lengths, hand, (100.0, 50.0),
                        max_iterations=10, max_rotation_per_iteration=math.radians(10.0), epsilon=0.01)

    expected = CcdSolver(max_iterations=10).solve(three_link_chain, (100.0, 50.0)).chain.orientations
    assert updated.shape == (3,)
    assert np.allclose(updated, expected)
    assert np.array_equal(orientations, np.zeros(3))
    assert np.array_equal(joint_positions, positions[:-1])


def test_zero_sweeps_changes_nothing(three_link_chain):
    result = CcdSolver(max_iterations=0).solve(three_link_chain, (100.0, 50.0))

    assert np.array_equal(result.chain.orientations, three_link_chain.orientations)
    assert result.final_error == pytest.approx(np.linalg.norm(np.array([0.0, 450.0]) - [100.0, 50.0]))


def test_hand_on_target_skips_every_joint(two_link_chain):
    result = CcdSolver().solve(two_link_chain, (0.0, 200.0))

    assert np.array_equal(result.chain.orientations, [0.0, 0.0])
    assert result.converged


def test_solve_ccd_rejects_mismatched_sizes():
    with pytest.raises(InvalidChainError):
        solve_ccd([0.0, 0.0], [[0.0, 0.0], [0.0, 1.0]], [1.0], (0.0, 2.0), (1.0, 1.0))
    with pytest.raises(InvalidChainError):
        solve_ccd([0.0, 0.0], [[0.0, 0.0]], [1.0, 1.0], (0.0, 2.0), (1.0, 1.0))


def test_solve_ccd_rejects_negative_budget():
    with pytest.raises(ValueError):
        solve_ccd([0.0], [[0.0, 0.0]], [1.0], (0.0, 1.0), (1.0, 0.0), max_iterations=-1)


def test_target_on_straight_chain_line_converges(two_link_chain, three_link_chain):
    result = CcdSolver(max_iterations=40).solve(two_link_chain, (0.0, 150.0))
    assert result.converged
    assert np.any(result.chain.orientations != 0.0)

    result = CcdSolver(max_iterations=20).solve(three_link_chain, (0.0, 100.0))
    assert result.converged


def test_straight_chain_short_of_target_stays_straight(two_link_chain):
    result = CcdSolver(max_iterations=15).solve(two_link_chain, (0.0, 500.0))

    assert np.array_equal(result.chain.orientations, [0.0, 0.0])
    assert result.final_error == pytest.approx(300.0)


def test_solve_ccd_rejects_positions_that_disagree_with_lengths():
    with pytest.raises(InvalidChainError):
        solve_ccd([0.0, 0.0], [[0.0, 0.0], [0.0, 100.0]], [100.0, 100.0], (0.0, 250.0), (50.0, 50.0))
    with pytest.raises(InvalidChainError):
        solve_ccd([0.0, 0.0], [[0.0, 0.0], [0.0, 80.0]], [100.0, 100.0], (0.0, 180.0), (50.0, 50.0))
