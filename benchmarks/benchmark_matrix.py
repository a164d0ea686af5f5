"""
Benchmark color matrix composition (Numba kernels).
"""

import time

import numpy as np

from colormatrix import ColorMatrix

NUM_ITERATIONS = 10_000

print("=" * 80)
print("COLOR MATRIX BENCHMARK (Numba)")
print(f"{NUM_ITERATIONS:,} iterations")
print("=" * 80)

# Warmup (triggers JIT compilation)
print("\nWarming up...")
matrix = ColorMatrix()
for _ in range(20):
    matrix.adjust_color(10, 20, 30, 40)
    matrix.reset()

# Benchmark adjust_color on a fresh matrix
print(f"\nBenchmarking adjust_color() - {NUM_ITERATIONS:,} iterations...")
times_adjust = []
for _ in range(NUM_ITERATIONS):
    start = time.perf_counter()
    matrix.adjust_color(-76, -71, -33, -25)
    times_adjust.append((time.perf_counter() - start) * 1e6)
    matrix.reset()

print("\nResults (adjust_color):")
print(f"  Time: {np.mean(times_adjust):.2f} us +/- {np.std(times_adjust):.2f} us")

# Benchmark single multiply
other = np.random.rand(25).tolist()
print(f"\nBenchmarking multiply_matrix() - {NUM_ITERATIONS:,} iterations...")
times_multiply = []
for _ in range(NUM_ITERATIONS):
    start = time.perf_counter()
    matrix.multiply_matrix(other)
    times_multiply.append((time.perf_counter() - start) * 1e6)
    matrix.reset()

print("\nResults (multiply_matrix):")
print(f"  Time: {np.mean(times_multiply):.2f} us +/- {np.std(times_multiply):.2f} us")

# Benchmark export
print(f"\nBenchmarking to_array() - {NUM_ITERATIONS:,} iterations...")
times_export = []
for _ in range(NUM_ITERATIONS):
    start = time.perf_counter()
    matrix.to_array()
    times_export.append((time.perf_counter() - start) * 1e6)

print("\nResults (to_array):")
print(f"  Time: {np.mean(times_export):.2f} us +/- {np.std(times_export):.2f} us")
print("=" * 80)
