import json
import logging
from pathlib import Path

import numpy as np

from .state import State, as_masses

logger = logging.getLogger(__name__)


def save_state(filepath, state, masses, names=None):
    """Write a ``(State, masses)`` snapshot to a JSON file."""
    names = list(names) if names is not None else [f"Body {i}" for i in range(len(masses))]
    data = {
        "bodies": [
            {
                "name": name,
                "mass": float(m),
                "pos": x.tolist(),
                "vel": v.tolist(),
            }
            for name, m, x, v in zip(names, masses, state.x, state.v)
        ]
    }
    path = Path(filepath)
    path.write_text(json.dumps(data, indent=2))
    logger.info("Saved state to %s", path)
    return path


def load_state(filepath):
    """Read a snapshot written by :func:`save_state`.

    Returns
    -------
    tuple
        ``(state, masses, names)``.

    Raises
    ------
    ValueError
        If the file does not describe exactly three bodies with positive
        masses.
    """
    data = json.loads(Path(filepath).read_text())
    bodies = data.get("bodies", []) if isinstance(data, dict) else []
    state = State(
        [b.get("pos", [0.0, 0.0, 0.0]) for b in bodies],
        [b.get("vel", [0.0, 0.0, 0.0]) for b in bodies],
    )
    if any("mass" not in b for b in bodies):
        raise ValueError("Every body in a saved state needs a 'mass'")
    masses = as_masses([b["mass"] for b in bodies])
    if np.any(masses <= 0):
        raise ValueError(f"Masses must be positive, got {masses.tolist()}")
    names = [b.get("name") or f"Body {i}" for i, b in enumerate(bodies)]
    logger.info("Loaded state from %s", filepath)
    return state, masses, names
