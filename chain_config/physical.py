"""
Chain Physical Parameters
=========================
Default arm geometry and the rest-pose convention shared by every solver.

All lengths are in world units (the demo scene uses pixels).
"""

import math

# =============================================================================
# DEFAULT ARM
# =============================================================================

DEFAULT_ROOT = (0.0, 0.0)
"""Base position of the default arm"""

DEFAULT_SEGMENT_LENGTHS = [200.0, 100.0, 150.0, 150.0]
"""Link lengths of the default four-link arm, root to hand"""

DEFAULT_ANGLE_MIN = -math.pi
"""Declared lower joint angle (radians). Stored on each joint, never enforced"""

DEFAULT_ANGLE_MAX = math.pi
"""Declared upper joint angle (radians). Stored on each joint, never enforced"""

# =============================================================================
# REST POSE CONVENTION
# =============================================================================

REST_AXIS = (0.0, 1.0)
"""Direction every link points along at zero rotation (+Y, "up")"""

REST_AXIS_OFFSET = math.pi / 2.0
"""Angle of REST_AXIS from +X. Subtracted from atan2 to get link rotation"""

REST_POSITION_TOLERANCE = 1e-12
"""Maximum distance from the root for a chain to count as collapsed at rest"""
