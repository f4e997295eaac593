import numpy as np
import pytest

from tribody.state import State, add, scale, is_finite, as_masses


def _sample_state():
    return State(
        [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]],
        [[0.1, 0.2, 0.3], [0.4, 0.5, 0.6], [0.7, 0.8, 0.9]],
    )


def test_two_component_vectors_are_padded():
    s = State([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]], [[0.0, 1.0], [1.0, 0.0], [0.0, 0.0]])
    assert s.x.shape == (3, 3)
    assert np.allclose(s.x[:, 2], 0.0)
    assert np.allclose(s.v[1], [1.0, 0.0, 0.0])


def test_wrong_body_count_rejected():
    with pytest.raises(ValueError):
        State([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]], [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]])


def test_state_does_not_alias_input_arrays():
    x = np.zeros((3, 3))
    v = np.zeros((3, 3))
    s = State(x, v)
    x[0, 0] = 99.0
    assert s.x[0, 0] == 0.0

    c = s.copy()
    c.v[1, 1] = 5.0
    assert s.v[1, 1] == 0.0


def test_add_and_scale_are_componentwise():
    s = _sample_state()
    total = add(s, s)
    assert np.allclose(total.x, 2 * s.x)
    assert np.allclose(total.v, 2 * s.v)

    half = scale(s, 0.5)
    assert np.allclose(half.x, 0.5 * s.x)
    assert np.allclose(half.v, 0.5 * s.v)

    assert (s + s) == total
    assert (s * 0.5) == half
    assert (0.5 * s) == half


def test_flat_conversion():
    s = _sample_state()
    flat = s.as_flat()
    assert flat.shape == (18,)
    assert State.from_flat(flat) == s


def test_is_finite_detects_nan():
    s = _sample_state()
    assert is_finite(s)
    s.v[2, 0] = np.nan
    assert not is_finite(s)


def test_as_masses_requires_three():
    assert np.allclose(as_masses([1, 2, 3]), [1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        as_masses([1.0, 2.0])
