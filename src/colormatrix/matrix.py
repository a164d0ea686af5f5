"""
ColorMatrix: 5x5 affine color transform for brightness, contrast, saturation and hue.

The matrix is stored as a flat row-major float64 buffer of 25 values. Applied
to a homogeneous pixel vector [R, G, B, A, 1] it yields [R', G', B', A', 1].
Rows 0-3 produce the output channels and row 4 keeps the homogeneous
coordinate.

Adjustments compose into the current state in call order, so a matrix can be
built once and handed to a renderer as a single 4x5 transform:

Example:
    >>> matrix = ColorMatrix()
    >>> matrix.adjust_color(brightness=10, contrast=20, saturation=-30, hue=15)
    >>> values = matrix.to_array()  # 20 floats, rows 0-3
    >>> len(values)
    20

Invalid input is repaired rather than rejected: parameters are clamped to
their limits, zero or NaN parameters skip their step, and matrices of the
wrong length are padded with identity values or truncated.
"""

from __future__ import annotations

import logging
import math
import sys
from collections.abc import Iterable, Iterator
from copy import deepcopy
from typing import Any

# Python 3.10 compatibility: Self was added in Python 3.11
if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

import numpy as np

from colormatrix.constants import (
    ARRAY_LENGTH,
    BRIGHTNESS_LIMIT,
    CONTRAST_LIMIT,
    CONTRAST_MIDPOINT,
    DELTA_INDEX,
    HUE_CROSS_GB,
    HUE_CROSS_GG,
    HUE_CROSS_RG,
    HUE_LIMIT,
    HUE_LUMINANCE,
    IDENTITY_MATRIX,
    MATRIX_LENGTH,
    MATRIX_SIZE,
    OFFSET_SCALE,
    SATURATION_LIMIT,
    SATURATION_LUMINANCE,
)
from colormatrix.kernels import (
    compose_matrices_numba,
    multiply_matrix_numba,
    scale_offsets_numba,
)

logger = logging.getLogger(__name__)

MatrixLike = Iterable[Any]


def _to_float(value: Any) -> float:
    """Convert a matrix entry or parameter to float, NaN if not numeric."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _format_value(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def clean_value(value: float, limit: float) -> float:
    """
    Clamp a value into [-limit, limit].

    NaN is returned unchanged so callers can detect it.

    Example:
        >>> clean_value(150, 100)
        100
        >>> clean_value(-150, 100)
        -100
    """
    if isinstance(value, float) and math.isnan(value):
        return value
    return min(limit, max(-limit, value))


def fix_matrix(matrix: MatrixLike | None) -> list[Any]:
    """
    Normalize a matrix to exactly 25 entries.

    Shorter input is padded with the identity values at the missing
    positions, longer input is truncated. ``None`` and non-iterable input
    give the identity. Entries are not converted.

    Args:
        matrix: Any iterable of values, a numpy array or a ColorMatrix

    Returns:
        New list of 25 entries
    """
    if matrix is None:
        return list(IDENTITY_MATRIX)

    if isinstance(matrix, np.ndarray):
        values = matrix.ravel().tolist()
    elif isinstance(matrix, Iterable):
        values = list(matrix)
    else:
        logger.debug(
            "[ColorMatrix] Replacing non-iterable %s with identity", type(matrix).__name__
        )
        return list(IDENTITY_MATRIX)

    if len(values) < MATRIX_LENGTH:
        logger.debug(
            "[ColorMatrix] Padding %d-element matrix with identity values", len(values)
        )
        values.extend(IDENTITY_MATRIX[len(values) :])
    elif len(values) > MATRIX_LENGTH:
        logger.debug("[ColorMatrix] Truncating %d-element matrix to 25", len(values))
        values = values[:MATRIX_LENGTH]

    return values


def _as_buffer(matrix: MatrixLike | None) -> np.ndarray:
    if isinstance(matrix, ColorMatrix):
        return matrix._matrix.copy()
    return np.array([_to_float(v) for v in fix_matrix(matrix)], dtype=np.float64)


# ============================================================================
# Adjustment matrix builders (None means the step is a no-op)
# ============================================================================


def brightness_matrix(value: Any) -> np.ndarray | None:
    """Identity with ``value`` added to the R, G and B offsets."""
    value = clean_value(_to_float(value), BRIGHTNESS_LIMIT)
    if value == 0 or math.isnan(value):
        return None

    return np.array(
        [
            1, 0, 0, 0, value,
            0, 1, 0, 0, value,
            0, 0, 1, 0, value,
            0, 0, 0, 1, 0,
            0, 0, 0, 0, 1,
        ],
        dtype=np.float64,
    )  # fmt: skip


def contrast_matrix(value: Any) -> np.ndarray | None:
    """
    Scale R, G and B around the midpoint.

    Negative values map linearly onto [0, 127]. Positive values read the
    contrast table, interpolating between neighbours for fractional input.
    """
    value = clean_value(_to_float(value), CONTRAST_LIMIT)
    if value == 0 or math.isnan(value):
        return None

    if value < 0:
        x = CONTRAST_MIDPOINT + value / 100 * CONTRAST_MIDPOINT
    else:
        frac = value % 1
        index = int(value)
        if frac == 0:
            x = DELTA_INDEX[index]
        else:
            upper = min(index + 1, len(DELTA_INDEX) - 1)
            x = DELTA_INDEX[index] * (1 - frac) + DELTA_INDEX[upper] * frac
        x = x * CONTRAST_MIDPOINT + CONTRAST_MIDPOINT

    scale = x / CONTRAST_MIDPOINT
    offset = 0.5 * (CONTRAST_MIDPOINT - x)
    return np.array(
        [
            scale, 0, 0, 0, offset,
            0, scale, 0, 0, offset,
            0, 0, scale, 0, offset,
            0, 0, 0, 1, 0,
            0, 0, 0, 0, 1,
        ],
        dtype=np.float64,
    )  # fmt: skip


def saturation_matrix(value: Any) -> np.ndarray | None:
    """
    Blend each channel between its luminance projection and itself.

    Boosting ramps three times faster than desaturating.
    """
    value = clean_value(_to_float(value), SATURATION_LIMIT)
    if value == 0 or math.isnan(value):
        return None

    x = 1 + (3 * value / 100 if value > 0 else value / 100)
    lum_r, lum_g, lum_b = SATURATION_LUMINANCE
    return np.array(
        [
            lum_r * (1 - x) + x, lum_g * (1 - x), lum_b * (1 - x), 0, 0,
            lum_r * (1 - x), lum_g * (1 - x) + x, lum_b * (1 - x), 0, 0,
            lum_r * (1 - x), lum_g * (1 - x), lum_b * (1 - x) + x, 0, 0,
            0, 0, 0, 1, 0,
            0, 0, 0, 0, 1,
        ],
        dtype=np.float64,
    )  # fmt: skip


def hue_matrix(value: Any) -> np.ndarray | None:
    """Rotate colors around the gray axis by ``value`` degrees."""
    value = clean_value(_to_float(value), HUE_LIMIT) / 180 * math.pi
    if value == 0 or math.isnan(value):
        return None

    cos_val = math.cos(value)
    sin_val = math.sin(value)
    lum_r, lum_g, lum_b = HUE_LUMINANCE
    return np.array(
        [
            lum_r + cos_val * (1 - lum_r) + sin_val * (-lum_r),
            lum_g + cos_val * (-lum_g) + sin_val * (-lum_g),
            lum_b + cos_val * (-lum_b) + sin_val * (1 - lum_b),
            0, 0,
            lum_r + cos_val * (-lum_r) + sin_val * HUE_CROSS_RG,
            lum_g + cos_val * (1 - lum_g) + sin_val * HUE_CROSS_GG,
            lum_b + cos_val * (-lum_b) + sin_val * (-HUE_CROSS_GB),
            0, 0,
            lum_r + cos_val * (-lum_r) + sin_val * (-(1 - lum_r)),
            lum_g + cos_val * (-lum_g) + sin_val * lum_g,
            lum_b + cos_val * (1 - lum_b) + sin_val * lum_b,
            0, 0,
            0, 0, 0, 1, 0,
            0, 0, 0, 0, 1,
        ],
        dtype=np.float64,
    )  # fmt: skip


class ColorMatrix:
    """
    Composable 5x5 color transform with named adjustments.

    Each adjustment derives its own matrix from a clamped parameter and
    composes it into the current state (``current = current @ adjustment``).
    Adjustments with a zero or NaN parameter leave the matrix untouched.

    Operations:
    - adjust_color: hue, contrast, brightness, saturation, then offsets / 255
    - adjust_brightness: offset R, G, B by [-100, 100]
    - adjust_contrast: scale around 127 using the contrast table
    - adjust_saturation: luminance-preserving saturation in [-100, 100]
    - adjust_hue: rotation around the gray axis in [-180, 180] degrees
    - multiply_matrix: compose an arbitrary matrix

    Example:
        >>> matrix = ColorMatrix()
        >>> matrix.adjust_color(-76, -71, -33, -25)
        >>> filter_values = matrix.to_array()
    """

    __slots__ = ("_matrix",)

    clean_value = staticmethod(clean_value)
    fix_matrix = staticmethod(fix_matrix)

    def __init__(self, matrix: MatrixLike | None = None):
        """
        Initialize the matrix.

        Args:
            matrix: Optional initial values. Any iterable, numpy array or
                ColorMatrix; repaired to 25 entries. None gives the identity.
        """
        self._matrix: np.ndarray = _as_buffer(matrix)

    # ========================================================================
    # Properties
    # ========================================================================

    @property
    def is_identity(self) -> bool:
        """Check if the matrix equals the identity transform."""
        return bool(np.array_equal(self._matrix, IDENTITY_MATRIX))

    # ========================================================================
    # State
    # ========================================================================

    def reset(self) -> None:
        """Reset the matrix to the identity transform."""
        self._matrix[:] = IDENTITY_MATRIX
        logger.debug("[ColorMatrix] Reset to identity")

    def copy_matrix(self, matrix: MatrixLike | None) -> None:
        """
        Copy another matrix's values into this one.

        Args:
            matrix: Source values, repaired to 25 entries
        """
        self._matrix[:] = _as_buffer(matrix)

    # ========================================================================
    # Adjustments
    # ========================================================================

    def adjust_color(
        self,
        brightness: float = 0,
        contrast: float = 0,
        saturation: float = 0,
        hue: float = 0,
    ) -> None:
        """
        Apply hue, contrast, brightness and saturation in that order.

        Brightness and contrast build their offsets in 0-255 pixel units.
        After all four steps the R, G, B and A offsets are divided by 255
        once, whether or not any step changed the matrix.

        Args:
            brightness: Brightness offset (-100 to 100, 0=no change)
            contrast: Contrast (-100 to 100, 0=no change)
            saturation: Saturation (-100 to 100, 0=no change, -100=grayscale)
            hue: Hue rotation in degrees (-180 to 180, 0=no change)
        """
        steps = [
            hue_matrix(hue),
            contrast_matrix(contrast),
            brightness_matrix(brightness),
            saturation_matrix(saturation),
        ]
        active = [step for step in steps if step is not None]

        if active:
            compose_matrices_numba(np.stack(active), self._matrix)
        scale_offsets_numba(self._matrix, OFFSET_SCALE)

        logger.debug(
            "[ColorMatrix] Adjusted color (brightness=%s, contrast=%s, saturation=%s, hue=%s, %d steps)",
            brightness,
            contrast,
            saturation,
            hue,
            len(active),
        )

    def adjust_brightness(self, value: float) -> None:
        """
        Compose a brightness offset.

        Args:
            value: Offset added to R, G and B (-100 to 100, 0=no change)
        """
        self._compose(brightness_matrix(value), "brightness", value)

    def adjust_contrast(self, value: float) -> None:
        """
        Compose a contrast adjustment.

        Args:
            value: Contrast (-100 to 100, 0=no change). Fractional positive
                values interpolate between neighbouring table entries.
        """
        self._compose(contrast_matrix(value), "contrast", value)

    def adjust_saturation(self, value: float) -> None:
        """
        Compose a saturation adjustment.

        Args:
            value: Saturation (-100 to 100, 0=no change, -100=grayscale)
        """
        self._compose(saturation_matrix(value), "saturation", value)

    def adjust_hue(self, value: float) -> None:
        """
        Compose a hue rotation.

        Args:
            value: Rotation in degrees (-180 to 180, 0=no change)
        """
        self._compose(hue_matrix(value), "hue", value)

    # Underscore aliases
    _adjust_brightness = adjust_brightness
    _adjust_contrast = adjust_contrast
    _adjust_saturation = adjust_saturation
    _adjust_hue = adjust_hue

    def _compose(self, step: np.ndarray | None, name: str, value: Any) -> None:
        if step is None:
            logger.debug("[ColorMatrix] Skipping %s=%s (no-op)", name, value)
            return
        multiply_matrix_numba(self._matrix, step)

    def multiply_matrix(self, matrix: MatrixLike) -> None:
        """
        Compose another matrix into this one (``self = self @ matrix``).

        Args:
            matrix: Matrix to compose, repaired to 25 entries
        """
        multiply_matrix_numba(self._matrix, _as_buffer(matrix))

    # ========================================================================
    # Export
    # ========================================================================

    def to_array(self) -> list[float]:
        """
        Return rows 0-3 as 20 floats for a renderer's color matrix filter.

        Returns:
            Row-major list [R row, G row, B row, A row], 5 values each
        """
        return self._matrix[:ARRAY_LENGTH].tolist()

    def to_numpy(self) -> np.ndarray:
        """Return a copy of rows 0-3 as a [4, 5] float64 array."""
        return self._matrix[:ARRAY_LENGTH].reshape(4, MATRIX_SIZE).copy()

    def to_string(self) -> str:
        """Return all 25 values as a diagnostic string."""
        return "ColorMatrix [ " + " , ".join(_format_value(v) for v in self) + " ]"

    def copy(self) -> Self:
        """
        Create an independent copy of this matrix.

        Example:
            >>> base = ColorMatrix()
            >>> base.adjust_hue(30)
            >>> variant = base.copy()
            >>> variant.adjust_saturation(50)  # base is unchanged
        """
        return deepcopy(self)

    # ========================================================================
    # Sequence protocol
    # ========================================================================

    def __len__(self) -> int:
        return MATRIX_LENGTH

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._matrix[index].tolist()
        return float(self._matrix[index])

    def __setitem__(self, index, value: Any) -> None:
        if isinstance(index, slice) and isinstance(value, Iterable) and not isinstance(value, str):
            self._matrix[index] = [_to_float(v) for v in value]
            return
        self._matrix[index] = _to_float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._matrix.tolist())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorMatrix):
            return bool(np.array_equal(self._matrix, other._matrix))
        if isinstance(other, np.ndarray):
            other = other.ravel().tolist()
        if isinstance(other, (list, tuple)):
            if len(other) != MATRIX_LENGTH:
                return False
            values = np.array([_to_float(v) for v in other], dtype=np.float64)
            return bool(np.array_equal(self._matrix, values))
        return NotImplemented

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        status = "identity" if self.is_identity else "adjusted"
        return f"ColorMatrix({status}) {self.to_array()}"

    def __copy__(self) -> Self:
        """Shallow copy delegates to deep copy."""
        return self.copy()

    def __deepcopy__(self, memo) -> Self:
        new = type(self).__new__(type(self))
        new._matrix = self._matrix.copy()
        return new
