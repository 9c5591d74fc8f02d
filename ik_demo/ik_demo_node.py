#!/usr/bin/env python3
"""
IK Demo Node
============
Headless driver for the planar IK solvers. Registers one or more arms,
moves a target along a circle and solves every arm once per simulated tick,
logging the outcome the way a scene layer would consume it.
"""

import argparse
import logging
import math
import sys
from typing import List, Optional

import numpy as np

from chain_config import motion as motion_config
from chain_config import physical as phys_config
from chain_config import system as sys_config
from chain_ik import (
    CcdSolver, ChainRegistry, FabrikSolver, IkSolver, InvalidChainError,
    SolveStatus, build_chain
)
from .target_generator import CircularTargetGenerator

logger = logging.getLogger(sys_config.DEMO_LOGGER_NAME)


def setup_logging(level: str = sys_config.LOG_LEVEL, debug_solver: bool = False) -> None:
    """Configure console logging for the demo. Solver internals log at DEBUG only on request."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=sys_config.LOG_FORMAT,
        datefmt=sys_config.LOG_DATE_FORMAT,
        stream=sys.stdout,
    )
    logging.getLogger(sys_config.LOGGER_NAME).setLevel(logging.DEBUG if debug_solver else logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Solve planar arms for a target moving on a circle'
    )
    parser.add_argument('--solver', choices=['fabrik', 'ccd'], default=motion_config.DEMO_SOLVER,
                        help='IK strategy (default: %(default)s)')
    parser.add_argument('--lengths', type=float, nargs='+',
                        default=phys_config.DEFAULT_SEGMENT_LENGTHS,
                        help='Link lengths of each arm, root to hand')
    parser.add_argument('--root', type=float, nargs=2, action='append', metavar=('X', 'Y'),
                        help='Root of an arm; repeat for several arms (default: %s)'
                        % (phys_config.DEFAULT_ROOT,))
    parser.add_argument('--tolerance', type=float, default=motion_config.FABRIK_TOLERANCE,
                        help='FABRIK convergence tolerance (default: %(default)s)')
    parser.add_argument('--max-iterations', type=int, default=None,
                        help='Iteration cap (default: %d for FABRIK, %d for CCD)'
                        % (motion_config.FABRIK_MAX_ITERATIONS, motion_config.CCD_MAX_ITERATIONS))
    parser.add_argument('--unreachable', choices=['report', 'stretch'],
                        default=motion_config.FABRIK_UNREACHABLE_POLICY,
                        help='FABRIK policy for targets out of reach (default: %(default)s)')
    parser.add_argument('--max-rotation-deg', type=float,
                        default=math.degrees(motion_config.CCD_MAX_ROTATION_PER_ITERATION),
                        help='CCD clamp per joint per sweep in degrees (default: %(default)s)')
    parser.add_argument('--epsilon', type=float, default=motion_config.CCD_EPSILON,
                        help='CCD on-target distance (default: %(default)s)')
    parser.add_argument('--center', type=float, nargs=2, default=list(motion_config.DEMO_CENTER),
                        metavar=('X', 'Y'), help='Center of the target circle')
    parser.add_argument('--radius', type=float, default=motion_config.DEMO_RADIUS,
                        help='Radius of the target circle (default: %(default)s)')
    parser.add_argument('--period', type=float, default=motion_config.DEMO_PERIOD,
                        help='Seconds per full circle (default: %(default)s)')
    parser.add_argument('--rate', type=float, default=motion_config.DEMO_TICK_RATE,
                        help='Simulated ticks per second (default: %(default)s)')
    parser.add_argument('--duration', type=float, default=motion_config.DEMO_DURATION,
                        help='Simulated seconds (default: %(default)s)')
    parser.add_argument('--log-level', default=sys_config.LOG_LEVEL,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Console log level (default: %(default)s)')
    parser.add_argument('--debug-solver', action='store_true',
                        help='Show per-iteration solver diagnostics')
    return parser


def create_solver(args: argparse.Namespace) -> IkSolver:
    """Build the selected strategy from parsed arguments."""
    if args.solver == 'ccd':
        max_iterations = args.max_iterations
        if max_iterations is None:
            max_iterations = motion_config.CCD_MAX_ITERATIONS
        return CcdSolver(
            max_iterations=max_iterations,
            max_rotation_per_iteration=math.radians(args.max_rotation_deg),
            epsilon=args.epsilon,
        )

    max_iterations = args.max_iterations
    if max_iterations is None:
        max_iterations = motion_config.FABRIK_MAX_ITERATIONS
    return FabrikSolver(
        default_tolerance=args.tolerance,
        default_max_iterations=max_iterations,
        unreachable_policy=args.unreachable,
    )


def run(args: argparse.Namespace) -> dict:
    """
    Run the simulated target sweep.

    Returns:
        Dictionary of counters:
            - 'ticks': int - Number of simulated ticks
            - 'solves': int - Number of chain solves
            - 'converged': int - Solves that ended within tolerance
            - 'unreachable': int - Solves rejected as out of reach
            - 'stretched': int - Solves answered with the stretch pose
            - 'max_error': float - Largest final error over reachable solves
    """
    solver = create_solver(args)
    roots = args.root or [list(phys_config.DEFAULT_ROOT)]

    registry = ChainRegistry()
    for root in roots:
        registry.add(build_chain(root, args.lengths))

    generator = CircularTargetGenerator(args.center, args.radius, args.period)

    logger.info('IK demo started')
    logger.info(f'  Solver: {args.solver}')
    logger.info(f'  Arms: {len(registry)} x {len(args.lengths)} links, lengths {args.lengths}')
    logger.info(f'  Target circle: center ({args.center[0]:.1f}, {args.center[1]:.1f}), radius {args.radius:.1f}')
    logger.info(f'  Ticks: {args.rate:.0f}Hz for {args.duration:.1f}s')

    stats = {'ticks': 0, 'solves': 0, 'converged': 0, 'unreachable': 0, 'stretched': 0,
             'max_error': 0.0}

    for tick, elapsed_sec, target in generator.ticks(args.rate, args.duration):
        stats['ticks'] += 1
        results = registry.solve_all(target, solver)

        for handle, result in results.items():
            stats['solves'] += 1
            if result.status is SolveStatus.UNREACHABLE:
                stats['unreachable'] += 1
                logger.debug(f'[t={elapsed_sec:.2f}s] arm {handle}: target out of reach')
                continue
            if result.status is SolveStatus.STRETCHED:
                stats['stretched'] += 1
                continue

            stats['max_error'] = max(stats['max_error'], result.final_error)
            if result.converged:
                stats['converged'] += 1
            elif args.solver == 'fabrik':
                logger.warning(
                    f'[t={elapsed_sec:.2f}s] arm {handle}: did not converge after '
                    f'{result.iterations} iterations, error: {result.final_error:.3f}'
                )

            if tick % sys_config.LOG_THROTTLE_TICKS == 0:
                hand = result.chain.end_effector
                angles = np.degrees(result.chain.orientations)
                logger.info(
                    f'[t={elapsed_sec:.2f}s] arm {handle}: target ({target[0]:.1f}, {target[1]:.1f}) '
                    f'hand ({hand[0]:.1f}, {hand[1]:.1f}) error {result.final_error:.3f} '
                    f'rotations {np.array2string(angles, precision=1)}'
                )

    logger.info(
        f"Done: {stats['solves']} solves, {stats['converged']} converged, "
        f"{stats['unreachable']} unreachable, {stats['stretched']} stretched, "
        f"max error {stats['max_error']:.3f}"
    )
    return stats


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.debug_solver)

    try:
        run(args)
    except InvalidChainError as exc:
        logger.error(f'Invalid arm configuration: {exc}')
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == '__main__':
    sys.exit(main())
