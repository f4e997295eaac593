import numpy as np

from . import constants as C
from .jit import pairwise_accelerations_jit
from .state import State, add, scale


def compute_accelerations(
    positions: np.ndarray,
    masses: np.ndarray,
    g_constant: float = C.G,
    use_jit: bool = False,
) -> np.ndarray:
    """Return the gravitational acceleration of every body.

    For body ``i`` this is ``sum_j G * m_j * (x_j - x_i) / |x_j - x_i|**3``
    over all ``j != i``.  Each unordered pair is visited once and its equal
    and opposite contributions are applied to both bodies.

    Coincident bodies are not guarded against: the affected accelerations
    come out as ``inf``/``nan`` and are returned as such.

    Parameters
    ----------
    use_jit : bool, optional
        Evaluate the pair sum with the numba-compiled kernel from
        :mod:`tribody.jit` instead of the numpy loop.
    """
    positions = np.asarray(positions, dtype=np.float64)
    masses = np.asarray(masses, dtype=np.float64)
    if use_jit:
        return pairwise_accelerations_jit(positions, masses, float(g_constant))

    n = len(masses)
    acc = np.zeros_like(positions)

    for i in range(n):
        for j in range(i + 1, n):
            # 从i指向j的相对位置
            r_vec_ij = positions[j] - positions[i]
            dist_sq = np.dot(r_vec_ij, r_vec_ij)

            with np.errstate(divide="ignore", invalid="ignore"):
                inv_dist_cubed = 1.0 / (dist_sq * np.sqrt(dist_sq))
                acc[i] += (g_constant * masses[j] * inv_dist_cubed) * r_vec_ij
                acc[j] -= (g_constant * masses[i] * inv_dist_cubed) * r_vec_ij

    return acc


def acceleration(state, masses, g_constant=C.G, use_jit=False):
    """Acceleration of each body of ``state`` under mutual gravity."""
    return compute_accelerations(state.x, masses, g_constant, use_jit)


def derivative(state, masses, g_constant=C.G, use_jit=False):
    """Time derivative of ``state``: positions move with ``v``, velocities with ``a``."""
    return State(state.v, acceleration(state, masses, g_constant, use_jit))


def step(state, h, masses, g_constant=C.G, use_jit=False):
    """Advance ``state`` by one classical RK4 step of size ``h``.

    The input state is left untouched and a new :class:`State` is returned.
    Every stage is evaluated on its own snapshot, so the result depends only
    on ``(state, h, masses)``.
    """

    def f(s):
        return derivative(s, masses, g_constant, use_jit)

    k1 = scale(f(state), h)
    k2 = scale(f(add(state, scale(k1, 0.5))), h)
    k3 = scale(f(add(state, scale(k2, 0.5))), h)
    k4 = scale(f(add(state, k3)), h)

    total = add(add(add(k1, scale(k2, 2.0)), scale(k3, 2.0)), k4)
    return add(state, scale(total, 1.0 / 6.0))


def advance(state, dt, masses, substeps=1, g_constant=C.G, use_jit=False):
    """Advance ``state`` by ``dt`` using ``substeps`` RK4 steps of ``dt / substeps``.

    Sub-stepping trades CPU time for stability when the effective speed
    multiplier is large.
    """
    substeps = max(1, int(substeps))
    h = dt / substeps
    for _ in range(substeps):
        state = step(state, h, masses, g_constant, use_jit)
    return state


def rk4_step_arrays(
    positions,
    velocities,
    masses,
    dt,
    g_constant=C.G,
    *,
    use_jit: bool = False,
) -> tuple[np.ndarray, np.ndarray]:
    """RK4 step on raw ``(3, 3)`` position and velocity arrays."""
    new_state = step(State(positions, velocities), dt, masses, g_constant, use_jit)
    return new_state.x, new_state.v
