"""
Constants and lookup tables for colormatrix.

Centralizes the contrast table, the identity transform and the parameter
limits used by the adjustment operations.
"""

from __future__ import annotations

# =============================================================================
# Matrix Layout
# =============================================================================

MATRIX_SIZE = 5  # 5x5 homogeneous transform (R, G, B, A, 1)
MATRIX_LENGTH = MATRIX_SIZE * MATRIX_SIZE  # 25 stored values
ARRAY_LENGTH = 20  # Rows 0-3 exported to the renderer

IDENTITY_MATRIX: tuple[float, ...] = (
    1.0, 0.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 0.0, 1.0,
)  # fmt: skip

# Offset column of rows 0-3 (R, G, B, A)
OFFSET_INDICES = (4, 9, 14, 19)

# Offsets are built in 0-255 pixel units and exported in 0-1 units
OFFSET_SCALE = 255.0

# =============================================================================
# Adjustment Limits
# =============================================================================

BRIGHTNESS_LIMIT = 100.0
CONTRAST_LIMIT = 100.0
SATURATION_LIMIT = 100.0
HUE_LIMIT = 180.0  # Degrees

# =============================================================================
# Contrast
# =============================================================================

# Midpoint of the 0-255 channel range used by the contrast curve
CONTRAST_MIDPOINT = 127.0

# Contrast multipliers for integer contrast values 0..100
DELTA_INDEX: tuple[float, ...] = (
    0, 0.01, 0.02, 0.04, 0.05, 0.06, 0.07, 0.08, 0.1, 0.11,
    0.12, 0.14, 0.15, 0.16, 0.17, 0.18, 0.20, 0.21, 0.22, 0.24,
    0.25, 0.27, 0.28, 0.30, 0.32, 0.34, 0.36, 0.38, 0.40, 0.42,
    0.44, 0.46, 0.48, 0.5, 0.53, 0.56, 0.59, 0.62, 0.65, 0.68,
    0.71, 0.74, 0.77, 0.80, 0.83, 0.86, 0.89, 0.92, 0.95, 0.98,
    1.0, 1.06, 1.12, 1.18, 1.24, 1.30, 1.36, 1.42, 1.48, 1.54,
    1.60, 1.66, 1.72, 1.78, 1.84, 1.90, 1.96, 2.0, 2.12, 2.25,
    2.37, 2.50, 2.62, 2.75, 2.87, 3.0, 3.2, 3.4, 3.6, 3.8,
    4.0, 4.3, 4.7, 4.9, 5.0, 5.5, 6.0, 6.5, 6.8, 7.0,
    7.3, 7.5, 7.8, 8.0, 8.4, 8.7, 9.0, 9.4, 9.6, 9.8,
    10.0,
)  # fmt: skip

# =============================================================================
# Luminance Weights
# =============================================================================

# Saturation: perceptual RGB weights (R, G, B)
SATURATION_LUMINANCE = (0.3086, 0.6094, 0.0820)

# Hue rotation: BT.601-style weights (R, G, B)
HUE_LUMINANCE = (0.213, 0.715, 0.072)

# Cross-channel terms of the hue rotation's green row (R, G, B columns)
HUE_CROSS_RG = 0.143
HUE_CROSS_GG = 0.140
HUE_CROSS_GB = 0.283
