#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

class CubeError(Exception):
    """Base class for every failure the demo treats as fatal."""


class WindowInitError(CubeError):
    """Video subsystem, window, canvas or event source could not be created."""


class DrawError(CubeError):
    """A drawing primitive rejected its arguments or the surface is gone."""
