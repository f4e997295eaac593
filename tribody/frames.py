"""Reference-frame operations on a :class:`~tribody.state.State`.

None of these advance simulation time.  Translations and rotations are
symmetries of Newtonian gravity, so applying them between integration steps
changes only the frame the system is viewed in, not its dynamics.
"""
import numpy as np

from . import constants as C
from .state import State


def center_of_mass(state, masses):
    """Return the centre-of-mass position and velocity."""
    masses = np.asarray(masses, dtype=float)
    total_mass = np.sum(masses)
    com_pos = np.sum(masses[:, np.newaxis] * state.x, axis=0) / total_mass
    com_vel = np.sum(masses[:, np.newaxis] * state.v, axis=0) / total_mass
    return com_pos, com_vel


def zero_momentum(state, masses):
    """Remove the centre-of-mass drift so total momentum becomes zero.

    Positions are left untouched.
    """
    _, com_vel = center_of_mass(state, masses)
    return State(state.x, state.v - com_vel)


def recenter(state, k):
    """Translate positions so that body ``k`` sits exactly at the origin."""
    return State(state.x - state.x[k], state.v)


def rotation_between(a, b):
    """Return the rotation matrix turning the direction of ``a`` onto ``b``.

    Returns ``None`` when no unique rotation exists: either vector is zero,
    or the two are antiparallel.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    na = np.linalg.norm(a)
    nb = np.linalg.norm(b)
    if na == 0.0 or nb == 0.0:
        return None
    a = a / na
    b = b / nb

    axis = np.cross(a, b)
    sin_angle = np.linalg.norm(axis)
    cos_angle = np.dot(a, b)

    if sin_angle <= 1e-12 * max(abs(cos_angle), 1.0):
        if cos_angle > 0:
            return np.eye(3)
        return None

    # Rodrigues' formula; sin/cos re-derived from the angle keep the matrix orthonormal
    angle = np.arctan2(sin_angle, cos_angle)
    k = axis / sin_angle
    kx = np.array([
        [0.0, -k[2], k[1]],
        [k[2], 0.0, -k[0]],
        [-k[1], k[0], 0.0],
    ])
    return np.eye(3) + np.sin(angle) * kx + (1.0 - np.cos(angle)) * (kx @ kx)


def rotate(state, rotation):
    """Apply ``rotation`` to every position and velocity."""
    rotation = np.asarray(rotation, dtype=float)
    return State(state.x @ rotation.T, state.v @ rotation.T)


def align(state, r, axis=C.ALIGN_AXIS):
    """Rotate the frame so body ``r`` lies on ``axis``.

    When the rotation is undefined (``x[r]`` is zero, or points exactly
    opposite to ``axis``) the state is returned unchanged.
    """
    rotation = rotation_between(state.x[r], axis)
    if rotation is None:
        return state.copy()
    return rotate(state, rotation)


def follow(state, k, r=None, axis=C.ALIGN_AXIS):
    """Recenter on body ``k`` and, if ``r`` is given, align body ``r`` with ``axis``."""
    out = recenter(state, k)
    if r is not None and r != k:
        out = align(out, r, axis)
    return out


def set_body_speed(state, i, speed):
    """Rescale the velocity of body ``i`` to ``speed``, keeping its direction.

    A body at rest has no direction to keep and is left unchanged.
    """
    current = np.linalg.norm(state.v[i])
    out = state.copy()
    if current == 0.0:
        return out
    out.v[i] = state.v[i] * (speed / current)
    return out
