#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/logging_config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import sys


def setup_logging(level: int = logging.WARNING):
    """
    Configure the 'wireframe_cube' package logger with a single stderr handler.

    Safe to call more than once; existing handlers are replaced.
    """
    logger = logging.getLogger("wireframe_cube")
    logger.setLevel(level)

    if logger.handlers:
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(handler)
    return logger
