"""
System Parameters
=================
Logger names and log formatting.
"""

# =============================================================================
# LOGGING
# =============================================================================

LOGGER_NAME = 'chain_ik'
"""Root logger of the solver package"""

DEMO_LOGGER_NAME = 'ik_demo'
"""Logger of the demo driver"""

LOG_LEVEL = 'INFO'
"""Default log level of the demo driver"""

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)-24s | %(message)s'
"""Console log line format"""

LOG_DATE_FORMAT = '%H:%M:%S'
"""Timestamp format of console log lines"""

LOG_THROTTLE_TICKS = 30
"""Demo ticks between repeated per-chain status lines"""
