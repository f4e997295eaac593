import math

import numpy as np

from tribody import State, step, system_energy, total_energy, total_momentum
from tribody.physics import angular_momentum


def test_energy_of_static_configuration_counts_each_pair_once():
    state = State(
        [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 2.0, 0.0]],
        np.zeros((3, 3)),
    )
    masses = [1.0, 2.0, 3.0]
    kinetic, potential, total = system_energy(state, masses)
    expected = -(1.0 * 2.0 / 1.0 + 1.0 * 3.0 / 2.0 + 2.0 * 3.0 / math.sqrt(5.0))
    assert kinetic == 0.0
    assert math.isclose(potential, expected, rel_tol=1e-12)
    assert total == potential


def test_kinetic_energy_and_momentum():
    state = State(
        [[0.0, 0.0, 0.0], [100.0, 0.0, 0.0], [0.0, 100.0, 0.0]],
        [[1.0, 0.0, 0.0], [0.0, 2.0, 0.0], [0.0, 0.0, -3.0]],
    )
    masses = [2.0, 1.0, 0.5]
    kinetic, _, _ = system_energy(state, masses)
    assert math.isclose(kinetic, 0.5 * (2.0 * 1.0 + 1.0 * 4.0 + 0.5 * 9.0))
    assert np.allclose(total_momentum(state, masses), [2.0, 2.0, -1.5])


def test_gravitational_constant_scales_potential():
    state = State(np.eye(3), np.zeros((3, 3)))
    masses = [1.0, 1.0, 1.0]
    assert math.isclose(
        total_energy(state, masses, g_constant=3.0),
        3.0 * total_energy(state, masses),
    )


def test_angular_momentum_of_circular_orbit():
    state = State(
        [[0.0, 0.0, 0.0], [2.0, 0.0, 0.0], [0.0, 0.0, 0.0]],
        [[0.0, 0.0, 0.0], [0.0, 3.0, 0.0], [0.0, 0.0, 0.0]],
    )
    assert np.allclose(angular_momentum(state, [1.0, 4.0, 1.0]), [0.0, 0.0, 24.0])


def test_energy_conservation_short_run():
    state = State(
        [[0.0, 0.0, 0.0], [20.0, 0.0, 0.0], [20.0, 0.0, 1.0]],
        [[0.0, 0.0, 0.0], [0.0, 0.0, 7.07], [0.0, 4.0, 7.07]],
    )
    masses = [1000.0, 16.0, 0.1]
    e0 = total_energy(state, masses)
    for _ in range(1000):
        state = step(state, 0.001, masses)
    e1 = total_energy(state, masses)
    assert math.isclose(e0, e1, rel_tol=1e-8)
