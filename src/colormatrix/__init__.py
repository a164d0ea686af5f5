"""
colormatrix - Affine Color Matrix Adjustments

Composes brightness, contrast, saturation and hue adjustments into a single
5x5 color transform that renderers apply to RGBA pixels.

Features:
- 25-value row-major matrix over homogeneous [R, G, B, A, 1] pixels
- Brightness, contrast (tabulated curve), saturation and hue rotation
- In-place composition in call order via Numba-compiled kernels
- Repair-not-fail input handling: clamping, NaN skipping, length repair
- 20-value export for color matrix filters
- Named looks via ColorAdjustment presets

Example:
    >>> from colormatrix import ColorMatrix
    >>>
    >>> matrix = ColorMatrix()
    >>> matrix.adjust_color(brightness=-76, contrast=-71, saturation=-33, hue=-25)
    >>> values = matrix.to_array()  # hand to the renderer's filter

Example - Presets:
    >>> from colormatrix import ColorAdjustment
    >>>
    >>> values = ColorAdjustment.vivid().to_matrix().to_array()
"""

__version__ = "0.1.0"

# Constant tables
from colormatrix.constants import DELTA_INDEX, IDENTITY_MATRIX

# Core matrix
from colormatrix.matrix import ColorMatrix, clean_value, fix_matrix

# Presets
from colormatrix.presets import ColorAdjustment

__all__ = [
    # Version
    "__version__",
    # Core classes
    "ColorMatrix",
    "ColorAdjustment",
    # Tables
    "DELTA_INDEX",
    "IDENTITY_MATRIX",
    # Utils
    "clean_value",
    "fix_matrix",
]
