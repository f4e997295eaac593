import numpy as np

from tribody.integrators import compute_accelerations, step
from tribody.jit import pairwise_accelerations_jit
from tribody.presets import load_preset


def test_jit_matches_python_multiple_bodies():
    positions = np.array(
        [[0.0, 0.0, 0.0], [1.0, 0.0, 0.5], [0.0, 1.0, -2.0]], dtype=float
    )
    masses = np.array([1.0, 2.0, 3.0], dtype=float)

    acc_python = compute_accelerations(positions, masses, g_constant=1.0)
    acc_jit = pairwise_accelerations_jit(positions, masses, 1.0)

    assert np.allclose(acc_jit, acc_python, rtol=1e-12, atol=0.0)


def test_jit_coincident_bodies_give_non_finite_values():
    positions = np.array([[0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
    acc = pairwise_accelerations_jit(positions, np.ones(3), 1.0)
    assert not np.all(np.isfinite(acc[0]))


def test_jit_step_tracks_python_step():
    state, masses = load_preset("Figure eight")
    a = state
    b = state
    for _ in range(50):
        a = step(a, 0.001, masses)
        b = step(b, 0.001, masses, use_jit=True)
    assert np.allclose(a.x, b.x, atol=1e-10)
    assert np.allclose(a.v, b.v, atol=1e-10)
