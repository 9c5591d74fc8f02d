#!/usr/bin/env python3
"""
Circular Target Generator
Moves the target point along a circular path in the chain's plane.
Useful for testing continuous motion and hot-started solves.
"""

import math

import numpy as np

from chain_config import motion as motion_config


class CircularTargetGenerator:
    def __init__(self,
                 center=motion_config.DEMO_CENTER,
                 radius: float = motion_config.DEMO_RADIUS,
                 period: float = motion_config.DEMO_PERIOD):
        if period <= 0:
            raise ValueError(f'period must be positive, got {period}')
        self.center = np.asarray(center, dtype=np.float64)
        self.radius = radius
        self.period = period

    def position_at(self, elapsed_sec: float) -> np.ndarray:
        """Target position after elapsed_sec seconds (one full circle every period)."""
        angle = 2.0 * math.pi * (elapsed_sec / self.period)
        return self.center + self.radius * np.array([math.cos(angle), math.sin(angle)])

    def ticks(self, tick_rate: float, duration: float):
        """Yield (tick, elapsed_sec, target) for a simulated run."""
        if tick_rate <= 0:
            raise ValueError(f'tick_rate must be positive, got {tick_rate}')
        num_ticks = int(round(duration * tick_rate))
        for tick in range(num_ticks):
            elapsed_sec = tick / tick_rate
            yield tick, elapsed_sec, self.position_at(elapsed_sec)
