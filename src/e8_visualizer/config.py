"""
Configuration
=============
Global constants for the E8 root system and the default view settings.

Exports:
    DIMENSION (int): Dimension of the ambient space.
    ROOT_COUNT (int): Number of roots produced by the generator.
    WEYL_GROUP_ORDER (int): Order of the Weyl group of E8.
    LOG_LEVEL (str): Log level name, read from E8_VISUALIZER_LOG_LEVEL at import.
    get_log_level: Reads E8_VISUALIZER_LOG_LEVEL at call time.
"""
import os

# Root system
DIMENSION: int = 8
ROOT_COUNT: int = 240
WEYL_GROUP_ORDER: int = 696729600

# 2D view
VIEW_2D_THRESHOLD: float = 0.8
VIEW_2D_EDGE_LIMIT: int = 50
VIEW_2D_DISPLAY_OPTIONS: tuple = (60, 120, 180, ROOT_COUNT)
VIEW_2D_DEFAULT_ROOTS: int = 120

# 3D view
VIEW_3D_SCALE: float = 2.5
VIEW_3D_THRESHOLD: float = 1.2
VIEW_3D_MIN_DISTANCE: float = 0.1

# Auto rotation, radians per frame
AUTO_ROTATE_BASE_STEP: float = 0.002
AUTO_ROTATE_STEP_INCREMENT: float = 0.0003


def get_log_level(default: str = "INFO") -> str:
    """Log level name from E8_VISUALIZER_LOG_LEVEL, upper-cased."""
    return os.environ.get("E8_VISUALIZER_LOG_LEVEL", default).upper()


LOG_LEVEL: str = get_log_level()
