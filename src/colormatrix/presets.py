"""
ColorAdjustment: Named parameter sets for common color matrix looks.

Bundles the four adjust_color parameters so a look can be stored, compared
and turned into a ColorMatrix for a renderer.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from colormatrix.constants import (
    BRIGHTNESS_LIMIT,
    CONTRAST_LIMIT,
    HUE_LIMIT,
    SATURATION_LIMIT,
)
from colormatrix.matrix import ColorMatrix

_LIMITS = {
    "brightness": BRIGHTNESS_LIMIT,
    "contrast": CONTRAST_LIMIT,
    "saturation": SATURATION_LIMIT,
    "hue": HUE_LIMIT,
}


@dataclass(frozen=True)
class ColorAdjustment:
    """
    Pre-configured color adjustment.

    Attributes:
        brightness: Brightness offset (-100 to 100, 0=no change)
        contrast: Contrast (-100 to 100, 0=no change)
        saturation: Saturation (-100 to 100, 0=no change)
        hue: Hue rotation in degrees (-180 to 180, 0=no change)

    Example:
        >>> look = ColorAdjustment.faded()
        >>> matrix = look.to_matrix()
        >>> filter_values = matrix.to_array()
    """

    brightness: float = 0.0
    contrast: float = 0.0
    saturation: float = 0.0
    hue: float = 0.0

    def __post_init__(self):
        """Validate parameter ranges."""
        for name, limit in _LIMITS.items():
            value = getattr(self, name)
            if not isinstance(value, (int, float)):
                raise TypeError(f"{name} must be a number, got {type(value).__name__}")
            if not -limit <= value <= limit:
                raise ValueError(f"{name}={value} is outside valid range [{-limit}, {limit}]")

    @property
    def params(self) -> dict[str, float]:
        """Parameters as a dict in adjust_color keyword form."""
        return asdict(self)

    def apply_to(self, matrix: ColorMatrix) -> ColorMatrix:
        """
        Apply this adjustment to an existing matrix in place.

        Args:
            matrix: Matrix to adjust

        Returns:
            The same matrix, for chaining
        """
        matrix.adjust_color(**self.params)
        return matrix

    def to_matrix(self) -> ColorMatrix:
        """Build a fresh ColorMatrix with this adjustment applied."""
        return self.apply_to(ColorMatrix())

    @classmethod
    def neutral(cls) -> ColorAdjustment:
        """Identity transformation (no changes)."""
        return cls()

    @classmethod
    def faded(cls) -> ColorAdjustment:
        """
        Faded print look: darker, flat, muted, shifted towards green.
        """
        return cls(brightness=-76, contrast=-71, saturation=-33, hue=-25)

    @classmethod
    def vivid(cls) -> ColorAdjustment:
        """Boosted contrast and saturation."""
        return cls(brightness=5, contrast=20, saturation=40)

    @classmethod
    def grayscale(cls) -> ColorAdjustment:
        """Full desaturation onto luminance."""
        return cls(saturation=-100)

    @classmethod
    def high_contrast(cls) -> ColorAdjustment:
        return cls(contrast=60)

    @classmethod
    def inverted_hue(cls) -> ColorAdjustment:
        """Rotate all hues half way around the color wheel."""
        return cls(hue=180)

    def __repr__(self) -> str:
        """String representation of the adjustment."""
        active_params = [(k, v) for k, v in self.params.items() if v != 0]
        param_str = ", ".join(f"{k}={v:g}" for k, v in active_params)
        return f"ColorAdjustment({param_str})" if param_str else "ColorAdjustment(neutral)"
