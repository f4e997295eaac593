"""numba-compiled kernels for the hot path of the integrator.

The kernels use numpy semantics for floating-point errors, so coincident
bodies yield ``inf``/``nan`` exactly like the numpy implementation instead
of raising ``ZeroDivisionError``.
"""

import numba as nb
import numpy as np


@nb.njit(error_model="numpy")
def pairwise_accelerations_jit(positions, masses, g_const):
    n = masses.shape[0]
    acc = np.zeros_like(positions)
    for i in range(n):
        for j in range(i + 1, n):
            dx = positions[j, 0] - positions[i, 0]
            dy = positions[j, 1] - positions[i, 1]
            dz = positions[j, 2] - positions[i, 2]
            dist_sq = dx * dx + dy * dy + dz * dz
            inv_dist_cubed = 1.0 / (dist_sq * np.sqrt(dist_sq))
            fi = g_const * masses[j] * inv_dist_cubed
            fj = g_const * masses[i] * inv_dist_cubed
            acc[i, 0] += fi * dx
            acc[i, 1] += fi * dy
            acc[i, 2] += fi * dz
            acc[j, 0] -= fj * dx
            acc[j, 1] -= fj * dy
            acc[j, 2] -= fj * dz
    return acc
