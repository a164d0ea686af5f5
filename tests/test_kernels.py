"""Tests for Numba matrix kernels."""

import numpy as np
import pytest

from colormatrix.constants import IDENTITY_MATRIX
from colormatrix.kernels import (
    compose_matrices_numba,
    multiply_matrix_numba,
    scale_offsets_numba,
)


@pytest.fixture
def random_matrices():
    """Generate a stack of random 5x5 matrices as flat buffers."""
    rng = np.random.default_rng(42)
    return rng.standard_normal((4, 25))


class TestMultiplyMatrixNumba:
    """Test the in-place 5x5 multiply."""

    def test_matches_numpy(self, random_matrices):
        """Kernel computes matrix @ other."""
        matrix = random_matrices[0].copy()
        other = random_matrices[1]

        multiply_matrix_numba(matrix, other)

        expected = random_matrices[0].reshape(5, 5) @ other.reshape(5, 5)
        np.testing.assert_allclose(matrix, expected.ravel(), rtol=1e-12, atol=1e-12)

    def test_identity_is_exact(self, random_matrices):
        matrix = random_matrices[0].copy()
        identity = np.array(IDENTITY_MATRIX, dtype=np.float64)

        multiply_matrix_numba(matrix, identity)

        np.testing.assert_array_equal(matrix, random_matrices[0])

    def test_operand_not_modified(self, random_matrices):
        matrix = random_matrices[0].copy()
        other = random_matrices[1].copy()

        multiply_matrix_numba(matrix, other)

        np.testing.assert_array_equal(other, random_matrices[1])

    def test_nan_propagates(self, random_matrices):
        matrix = random_matrices[0].copy()
        other = random_matrices[1].copy()
        other[0] = np.nan

        multiply_matrix_numba(matrix, other)

        assert np.isnan(matrix[0])
        assert np.isnan(matrix[5])


class TestComposeMatricesNumba:
    """Test folding a matrix stack."""

    def test_matches_sequential_multiply(self, random_matrices):
        """Composing a stack equals multiplying one matrix at a time."""
        folded = np.array(IDENTITY_MATRIX, dtype=np.float64)
        compose_matrices_numba(random_matrices, folded)

        sequential = np.array(IDENTITY_MATRIX, dtype=np.float64)
        for m in random_matrices:
            multiply_matrix_numba(sequential, m)

        np.testing.assert_allclose(folded, sequential, rtol=0, atol=1e-12)

    def test_empty_stack_is_noop(self, random_matrices):
        out = random_matrices[0].copy()

        compose_matrices_numba(np.empty((0, 25), dtype=np.float64), out)

        np.testing.assert_array_equal(out, random_matrices[0])


class TestScaleOffsetsNumba:
    """Test the offset rescale."""

    def test_divides_offset_column(self):
        matrix = np.arange(25, dtype=np.float64)

        scale_offsets_numba(matrix, 255.0)

        for index in (4, 9, 14, 19):
            assert matrix[index] == index / 255.0
        assert matrix[24] == 24.0
        assert matrix[0] == 0.0
        assert matrix[3] == 3.0
