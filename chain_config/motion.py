"""
Motion Planning Parameters
===========================
Parameters for the inverse kinematics solvers and the demo target path.
"""

import math

# =============================================================================
# FABRIK IK SOLVER
# =============================================================================

FABRIK_TOLERANCE = 0.01
"""Convergence tolerance in world units"""

FABRIK_MAX_ITERATIONS = 15
"""Maximum FABRIK iterations before giving up"""

FABRIK_UNREACHABLE_POLICY = 'report'
"""What to do with an out-of-reach target: 'report' (leave chain) or 'stretch'"""

FABRIK_USE_HOT_START = True
"""Start from the previous solution instead of the cold start pose"""

FABRIK_COLLINEAR_TURN = math.radians(10.0)
"""Rotation about the root applied to a chain lying on one line with its target (10° in radians)"""

FABRIK_COLLINEAR_EPSILON = 1e-6
"""Largest distance from the line at which points still count as collinear"""

# =============================================================================
# CCD IK SOLVER
# =============================================================================

CCD_MAX_ITERATIONS = 10
"""Number of full root-to-hand sweeps per solve"""

CCD_MAX_ROTATION_PER_ITERATION = math.radians(10.0)
"""Largest rotation one joint may take in one sweep (10° in radians)"""

CCD_EPSILON = 0.01
"""Distance below which the hand counts as on target, or a vector as degenerate"""

# =============================================================================
# NUMERICS
# =============================================================================

DEGENERATE_EPSILON = 1e-9
"""Vectors shorter than this cannot be normalized"""

# =============================================================================
# DEMO TARGET PATH
# =============================================================================

DEMO_SOLVER = 'fabrik'
"""Strategy used by the demo driver: 'fabrik' or 'ccd'"""

DEMO_CENTER = (150.0, 150.0)
"""Center of the circular target path"""

DEMO_RADIUS = 200.0
"""Radius of the circular target path"""

DEMO_PERIOD = 4.0
"""Time for one full circle (seconds)"""

DEMO_TICK_RATE = 60.0
"""Simulated solve rate in Hz"""

DEMO_DURATION = 4.0
"""Simulated run length (seconds)"""
