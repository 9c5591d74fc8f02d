import math
import re
from pathlib import Path

import numpy as np
import pytest

import chain_config
from chain_ik import CcdSolver, FabrikSolver, UnreachablePolicy
from ik_demo.ik_demo_node import build_parser, create_solver, main, run
from ik_demo.target_generator import CircularTargetGenerator


def test_target_moves_on_circle():
    generator = CircularTargetGenerator(center=(10.0, 20.0), radius=5.0, period=4.0)

    assert np.allclose(generator.position_at(0.0), [15.0, 20.0])
    assert np.allclose(generator.position_at(1.0), [10.0, 25.0])
    assert np.allclose(generator.position_at(4.0), [15.0, 20.0])


def test_ticks_cover_duration():
    generator = CircularTargetGenerator()
    ticks = list(generator.ticks(tick_rate=10.0, duration=0.5))

    assert [tick for tick, _, _ in ticks] == [0, 1, 2, 3, 4]
    assert ticks[-1][1] == pytest.approx(0.4)


def test_generator_rejects_bad_timing():
    with pytest.raises(ValueError):
        CircularTargetGenerator(period=0.0)
    with pytest.raises(ValueError):
        list(CircularTargetGenerator().ticks(tick_rate=0.0, duration=1.0))


def test_create_solver_from_arguments():
    fabrik = create_solver(build_parser().parse_args(['--unreachable', 'stretch', '--max-iterations', '7']))
    assert isinstance(fabrik, FabrikSolver)
    assert fabrik.unreachable_policy is UnreachablePolicy.STRETCH
    assert fabrik.default_max_iterations == 7

    ccd = create_solver(build_parser().parse_args(['--solver', 'ccd', '--max-rotation-deg', '5']))
    assert isinstance(ccd, CcdSolver)
    assert ccd.max_rotation_per_iteration == pytest.approx(math.radians(5.0))


def test_fabrik_run_solves_every_tick():
    args = build_parser().parse_args(['--rate', '10', '--duration', '1'])

    stats = run(args)

    assert stats['ticks'] == 10
    assert stats['solves'] == 10
    assert stats['unreachable'] == 0


def test_run_with_several_arms_and_ccd():
    args = build_parser().parse_args([
        '--solver', 'ccd', '--rate', '5', '--duration', '1',
        '--root', '0', '0', '--root', '300', '0'
    ])

    stats = run(args)

    assert stats['solves'] == 10
    assert stats['unreachable'] == 0


def test_short_arm_reports_or_stretches():
    base = ['--lengths', '10', '10', '--rate', '4', '--duration', '1']

    assert run(build_parser().parse_args(base))['unreachable'] == 4
    assert run(build_parser().parse_args(base + ['--unreachable', 'stretch']))['stretched'] == 4


def test_main_exit_codes():
    assert main(['--rate', '2', '--duration', '1']) == 0
    assert main(['--lengths', '-5', '--rate', '2', '--duration', '1']) == 1


def test_config_version_matches_package():
    setup_py = (Path(__file__).resolve().parents[1] / 'setup.py').read_text()
    assert re.search(r"version='([^']+)'", setup_py).group(1) == chain_config.__version__
