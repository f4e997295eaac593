import numpy as np
from hypothesis import given, settings, strategies as st

from tribody.frames import align, recenter, zero_momentum
from tribody.integrators import step
from tribody.physics import total_energy, total_momentum
from tribody.state import State

vectors = st.lists(
    st.floats(-100.0, 100.0, allow_nan=False, allow_infinity=False),
    min_size=3,
    max_size=3,
)
masses_st = st.lists(
    st.floats(0.01, 1000.0, allow_nan=False, allow_infinity=False),
    min_size=3,
    max_size=3,
)


@st.composite
def separated_system(draw):
    """Three bodies on a ring of radius 10-50 with arbitrary velocities."""
    radius = draw(st.floats(10.0, 50.0))
    phase = draw(st.floats(0.0, 2 * np.pi))
    angles = phase + 2 * np.pi * np.arange(3) / 3
    heights = draw(st.lists(st.floats(-5.0, 5.0), min_size=3, max_size=3))
    x = np.stack([radius * np.cos(angles), radius * np.sin(angles), heights], axis=1)
    v = np.array([draw(st.lists(st.floats(-5.0, 5.0), min_size=3, max_size=3)) for _ in range(3)])
    masses = np.array(draw(st.lists(st.floats(0.1, 100.0), min_size=3, max_size=3)))
    return State(x, v), masses


@given(st.lists(vectors, min_size=3, max_size=3), st.lists(vectors, min_size=3, max_size=3), masses_st)
@settings(max_examples=50)
def test_zero_momentum_property(x, v, masses):
    state = State(x, v)
    masses = np.array(masses)
    out = zero_momentum(state, masses)
    scale = max(1.0, float(np.sum(masses * np.linalg.norm(state.v, axis=1))))
    assert np.linalg.norm(total_momentum(out, masses)) <= 1e-10 * scale

    again = zero_momentum(out, masses)
    assert np.allclose(again.v, out.v, rtol=0.0, atol=1e-10 * max(1.0, float(np.max(np.abs(state.v)))))


@given(st.lists(vectors, min_size=3, max_size=3), st.lists(vectors, min_size=3, max_size=3), st.integers(0, 2))
@settings(max_examples=50)
def test_recenter_fixed_point_property(x, v, k):
    out = recenter(State(x, v), k)
    assert np.all(out.x[k] == 0.0)


@given(st.lists(vectors, min_size=3, max_size=3), st.lists(vectors, min_size=3, max_size=3), st.integers(0, 2))
@settings(max_examples=50)
def test_align_never_fails_and_preserves_norms(x, v, r):
    state = State(x, v)
    out = align(state, r)
    assert np.allclose(np.linalg.norm(out.x, axis=1), np.linalg.norm(state.x, axis=1), atol=1e-9)
    assert np.allclose(np.linalg.norm(out.v, axis=1), np.linalg.norm(state.v, axis=1), atol=1e-9)


@given(separated_system())
@settings(max_examples=10, deadline=None)
def test_step_conserves_momentum_and_energy(system):
    state, masses = system
    p0 = total_momentum(state, masses)
    e0 = total_energy(state, masses)

    for _ in range(20):
        state = step(state, 0.001, masses)

    p1 = total_momentum(state, masses)
    e1 = total_energy(state, masses)
    p_scale = max(1.0, float(np.sum(masses * np.linalg.norm(state.v, axis=1))))
    assert np.linalg.norm(p1 - p0) <= 1e-10 * p_scale
    assert abs(e1 - e0) <= 1e-8 * max(1.0, abs(e0))
