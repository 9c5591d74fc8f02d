"""
Chain Configuration Package
===========================

Centralized configuration for the planar IK chains and their solvers.
All parameters are organized into logical modules:

- physical: Default arm geometry and the rest-pose convention
- motion: FABRIK, CCD and demo target path parameters
- system: Logger names and log formatting

Usage:
    from chain_config import physical, motion, system

    # Or import specific values
    from chain_config.physical import DEFAULT_SEGMENT_LENGTHS
    from chain_config.motion import FABRIK_TOLERANCE
    from chain_config.system import LOGGER_NAME
"""

from . import physical
from . import motion
from . import system

__version__ = '0.1.0'
__all__ = ['physical', 'motion', 'system']
