"""Position/velocity state of the three simulated bodies.

A :class:`State` is a value: every operation in the engine returns a new
instance and never aliases the arrays of its inputs.  For the purposes of
integration a state behaves like a flat vector of real numbers, so it
supports component-wise addition and scalar multiplication through
:func:`add` and :func:`scale`.
"""
import numpy as np

from . import constants as C


def _as_vectors(values, count):
    """Return ``values`` as a ``(count, 3)`` float array, zero padding 2-D input."""
    arr = np.array(values, dtype=float)
    if arr.ndim != 2 or arr.shape[0] != count:
        raise ValueError(f"Expected {count} vectors, got array of shape {arr.shape}")
    if arr.shape[1] < 3:
        arr = np.pad(arr, ((0, 0), (0, 3 - arr.shape[1])))
    elif arr.shape[1] > 3:
        raise ValueError(f"Vectors must have at most 3 components, got {arr.shape[1]}")
    return arr


class State:
    """Positions ``x`` and velocities ``v`` of every body at one instant."""

    __slots__ = ("x", "v")

    def __init__(self, x, v):
        """Create a state from per-body positions and velocities.

        Parameters
        ----------
        x : array-like
            One position per body. Vectors with fewer than three components
            are padded with zeros.
        v : array-like
            One velocity per body, index-aligned with ``x``.

        Raises
        ------
        ValueError
            If either sequence does not hold exactly ``BODY_COUNT`` vectors.
        """
        self.x = _as_vectors(x, C.BODY_COUNT)
        self.v = _as_vectors(v, C.BODY_COUNT)

    def copy(self):
        return State(self.x.copy(), self.v.copy())

    def as_flat(self):
        """Return positions followed by velocities as one flat array."""
        return np.concatenate([self.x.reshape(-1), self.v.reshape(-1)])

    @staticmethod
    def from_flat(values):
        arr = np.asarray(values, dtype=float).reshape(2, C.BODY_COUNT, 3)
        return State(arr[0], arr[1])

    def __add__(self, other):
        return add(self, other)

    def __mul__(self, k):
        return scale(self, k)

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return np.array_equal(self.x, other.x) and np.array_equal(self.v, other.v)

    __hash__ = None

    def __repr__(self):
        return f"State(x={self.x.tolist()}, v={self.v.tolist()})"


def add(a, b):
    """Component-wise sum of two states."""
    return State(a.x + b.x, a.v + b.v)


def scale(s, k):
    """Multiply every position and velocity component of ``s`` by ``k``."""
    return State(s.x * k, s.v * k)


def is_finite(s):
    return bool(np.all(np.isfinite(s.x)) and np.all(np.isfinite(s.v)))


def as_masses(masses):
    """Return ``masses`` as a float array with one entry per body."""
    m = np.array(masses, dtype=float).reshape(-1)
    if m.size != C.BODY_COUNT:
        raise ValueError(f"Expected {C.BODY_COUNT} masses, got {m.size}")
    return m
