"""
Example: color matrix usage.

Demonstrates how to use colormatrix for:
- Combined brightness/contrast/saturation/hue adjustment
- Individual adjustments composed in call order
- Preset looks
- Handing the 4x5 matrix to a renderer (simulated with NumPy)
"""

import logging

import numpy as np

from colormatrix import ColorAdjustment, ColorMatrix

# Configure logging to see skipped steps and repairs
logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


def apply_like_renderer(matrix: ColorMatrix, pixels: np.ndarray) -> np.ndarray:
    """Apply a color matrix filter the way a renderer does (RGBA in [0, 1])."""
    rows = matrix.to_numpy()
    homogeneous = np.concatenate([pixels, np.ones((len(pixels), 1))], axis=1)
    return np.clip(homogeneous @ rows.T, 0.0, 1.0)


def example_1_adjust_color():
    """Example 1: Combined adjustment."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: adjust_color(brightness, contrast, saturation, hue)")
    print("=" * 70)

    matrix = ColorMatrix()
    matrix.adjust_color(-76, -71, -33, -25)

    print(matrix)
    print(f"Filter values ({len(matrix.to_array())}): {matrix.to_array()}")


def example_2_individual_steps():
    """Example 2: Individual adjustments."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: Individual Adjustments")
    print("=" * 70)

    matrix = ColorMatrix()
    matrix.adjust_hue(30)
    matrix.adjust_saturation(50)
    matrix.adjust_brightness(0)  # Skipped (no-op)

    print(matrix.to_numpy())

    matrix.reset()
    print(f"After reset, identity: {matrix.is_identity}")


def example_3_presets():
    """Example 3: Preset looks applied to sample pixels."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: Presets")
    print("=" * 70)

    pixels = np.array(
        [
            [1.0, 0.0, 0.0, 1.0],
            [0.0, 1.0, 0.0, 1.0],
            [0.0, 0.0, 1.0, 1.0],
            [0.5, 0.5, 0.5, 1.0],
        ]
    )

    for look in (ColorAdjustment.grayscale(), ColorAdjustment.vivid(), ColorAdjustment.faded()):
        result = apply_like_renderer(look.to_matrix(), pixels)
        print(f"{look!r}:")
        print(np.round(result, 3))


def main():
    """Run all examples."""
    print("\n" + "=" * 70)
    print("COLORMATRIX EXAMPLES")
    print("=" * 70)

    example_1_adjust_color()
    example_2_individual_steps()
    example_3_presets()

    print("\n" + "=" * 70)
    print("ALL EXAMPLES COMPLETED")
    print("=" * 70)


if __name__ == "__main__":
    main()
