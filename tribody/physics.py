"""Conserved-quantity diagnostics for a three-body :class:`~tribody.state.State`.

These are read every frame for display and are the main quantities the
tests use to check the integrator.
"""
import numpy as np

from . import constants as C


def total_momentum(state, masses):
    """Return ``sum_i m_i * v_i``."""
    masses = np.asarray(masses, dtype=float)
    return np.sum(masses[:, np.newaxis] * state.v, axis=0)


def angular_momentum(state, masses):
    """Return ``sum_i m_i * (x_i cross v_i)`` about the origin."""
    masses = np.asarray(masses, dtype=float)
    return np.sum(masses[:, np.newaxis] * np.cross(state.x, state.v), axis=0)


def system_energy(state, masses, g_constant=C.G):
    """Return kinetic, potential and total energy.

    The potential term sums every unordered pair exactly once.  Coincident
    bodies are not skipped; the potential is then infinite.
    """
    masses = np.asarray(masses, dtype=float)
    kinetic = 0.0
    potential = 0.0
    for m, v in zip(masses, state.v):
        kinetic += 0.5 * m * np.dot(v, v)
    n = len(masses)
    for i in range(n):
        for j in range(i + 1, n):
            r = np.linalg.norm(state.x[i] - state.x[j])
            with np.errstate(divide="ignore"):
                potential -= g_constant * masses[i] * masses[j] / r
    return kinetic, potential, kinetic + potential


def total_energy(state, masses, g_constant=C.G):
    return system_energy(state, masses, g_constant)[2]
