"""
Numba-optimized kernels for color matrix composition.

The kernels operate on flat row-major float64 buffers of length 25.
They are compiled without fastmath so the summation order is fixed and
composed matrices are reproducible bit for bit.
"""

import numpy as np
from numba import njit

# ============================================================================
# Matrix Composition Kernels
# ============================================================================


@njit(cache=True, nogil=True)
def multiply_matrix_numba(matrix: np.ndarray, other: np.ndarray) -> None:
    """
    Compose ``other`` into ``matrix`` in place (``matrix = matrix @ other``).

    Each row of ``matrix`` is copied out before it is overwritten, so the
    receiver can be updated without a second 25-element buffer.

    Args:
        matrix: Receiver buffer [25] (modified in-place)
        other: Matrix to compose with [25]
    """
    row = np.empty(5, dtype=np.float64)

    for i in range(5):
        base = i * 5
        for k in range(5):
            row[k] = matrix[base + k]

        for j in range(5):
            val = 0.0
            for k in range(5):
                val += other[j + k * 5] * row[k]
            matrix[base + j] = val


@njit(cache=True, nogil=True)
def compose_matrices_numba(matrices: np.ndarray, out: np.ndarray) -> None:
    """
    Fold a stack of matrices into ``out`` in order.

    Equivalent to calling :func:`multiply_matrix_numba` once per row of
    ``matrices``, starting from the current contents of ``out``.

    Args:
        matrices: Matrix stack [M, 25]
        out: Accumulator buffer [25] (modified in-place)
    """
    for m in range(matrices.shape[0]):
        multiply_matrix_numba(out, matrices[m])


@njit(cache=True, nogil=True)
def scale_offsets_numba(matrix: np.ndarray, divisor: float) -> None:
    """
    Divide the offset column of rows 0-3 by ``divisor`` in place.

    Args:
        matrix: Matrix buffer [25] (modified in-place)
        divisor: Offset divisor (255 converts pixel units to 0-1 units)
    """
    for i in range(4):
        matrix[i * 5 + 4] /= divisor
