import json

import numpy as np
import pytest

from tribody.presets import body_names, load_preset
from tribody.state_io import load_state, save_state


def test_save_and_load_state(tmp_path):
    state, masses = load_preset("Sun-Earth-Moon")
    path = tmp_path / "save.json"
    save_state(path, state, masses, body_names("Sun-Earth-Moon"))

    loaded, loaded_masses, names = load_state(path)
    assert loaded == state
    assert np.array_equal(loaded_masses, masses)
    assert names == ["Sol", "Earth", "Luna"]


def test_default_names(tmp_path):
    state, masses = load_preset("Figure eight")
    path = save_state(tmp_path / "s.json", state, masses)
    _, _, names = load_state(path)
    assert names == ["Body 0", "Body 1", "Body 2"]


def test_load_rejects_wrong_body_count(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"bodies": [{"mass": 1.0, "pos": [0, 0, 0], "vel": [0, 0, 0]}]}))
    with pytest.raises(ValueError):
        load_state(path)


def _write_bodies(path, bodies):
    path.write_text(json.dumps({"bodies": bodies}))
    return path


def test_load_rejects_missing_mass(tmp_path):
    bodies = [{"mass": 1.0, "pos": [i, 0, 0], "vel": [0, 0, 0]} for i in range(3)]
    del bodies[2]["mass"]
    with pytest.raises(ValueError):
        load_state(_write_bodies(tmp_path / "nomass.json", bodies))


def test_load_rejects_non_positive_mass(tmp_path):
    bodies = [{"mass": 1.0, "pos": [i, 0, 0], "vel": [0, 0, 0]} for i in range(3)]
    bodies[0]["mass"] = 0.0
    with pytest.raises(ValueError):
        load_state(_write_bodies(tmp_path / "zeromass.json", bodies))
