"""RCG - version constants and numeric defaults.

Keep this module tiny and dependency-free. It is imported by geometry,
colour, settings and the CLI, and must not have side effects.
"""

APP_NAME = "RusticCanvasGeom"
APP_SHORT = "RCG"

APP_VERSION = "0.1.0"
# Scene schema version used for .rcg files.
# NOTE: int, compared as integer by rcg.core.scene.Scene.from_dict.
SCHEMA_VERSION = 1

# Geometry defaults
DEFAULT_POINT_RADIUS = 3.0
# Step of t when flattening curves. Smaller = more secants, slower.
DEFAULT_CURVE_RESOLUTION = 0.01
# 0.0 = exact `d == 0` parallel test.
DEFAULT_PARALLEL_EPS = 0.0

# Canvas defaults for scenes/export (px)
DEFAULT_CANVAS_PX = (640.0, 480.0)
