import time

import numpy as np

from tribody.integrators import advance, compute_accelerations
from tribody.presets import load_preset


def compute_accelerations_python(positions, masses, g_constant=1.0):
    n = len(masses)
    acc = np.zeros((n, 3), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            r_vec = positions[j] - positions[i]
            dist = np.sqrt(np.dot(r_vec, r_vec))
            acc[i] += g_constant * masses[j] * r_vec / dist ** 3
    return acc


if __name__ == "__main__":
    state, masses = load_preset("Figure eight")

    # warm up JIT
    compute_accelerations(state.x, masses, use_jit=True)

    baseline = compute_accelerations_python(state.x, masses)
    assert np.allclose(baseline, compute_accelerations(state.x, masses))
    assert np.allclose(baseline, compute_accelerations(state.x, masses, use_jit=True))

    steps = 5000
    t0 = time.time()
    advance(state, steps * 0.001, masses, steps)
    t1 = time.time()
    advance(state, steps * 0.001, masses, steps, use_jit=True)
    t2 = time.time()

    print(f"numpy kernel: {steps / (t1 - t0):.0f} steps/s")
    print(f"numba kernel: {steps / (t2 - t1):.0f} steps/s")
