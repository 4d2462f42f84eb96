"""
Animation Runtime Settings

All configuration constants for the skeleton runtime.
Modify these values to change sampling behavior.
"""

from pathlib import Path

# ============================================================================
# Project Paths
# ============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ASSETS_DIR = PROJECT_ROOT / "examples" / "assets"

# ============================================================================
# Curve Interpolation
# ============================================================================

# Number of segments a bezier curve is flattened into at load time.
# Interior samples stored per curve = BEZIER_SEGMENTS - 1
BEZIER_SEGMENTS = 10

# Rotation keyframes are normalized into (-ANGLE_WRAP_DEGREES, ANGLE_WRAP_DEGREES]
ANGLE_WRAP_DEGREES = 180.0

# ============================================================================
# Skins & Slots
# ============================================================================

# Skin used as fallback when the requested skin has no attachment for a slot
DEFAULT_SKIN_NAME = "default"

# Slot color used when a document omits it (RRGGBBAA)
DEFAULT_COLOR_HEX = "FFFFFFFF"

# Tint emitted for slots without a color timeline (opaque white)
DEFAULT_TINT = (255, 255, 255, 255)

# ============================================================================
# Sampling
# ============================================================================

DEFAULT_SAMPLE_DELTA = 1.0 / 60.0  # Seconds between streamed samples (60 FPS)
