"""Named initial conditions.

Each preset is a list of three body descriptions.  Positions and velocities
are in simulation units (G = 1); ``radius`` and ``color`` are display only.
"""
import math

from . import constants as C
from .state import State, as_masses


def _lagrange_triangle(mass=1000.0, radius=5.0):
    """Equal masses on an equilateral triangle, rotating rigidly about its centre."""
    speed = math.sqrt(mass / (math.sqrt(3.0) * radius))
    bodies = []
    for i, (name, color) in enumerate(
        [("alpha", C.STAR_RED), ("beta", C.STAR_GREEN), ("gamma", C.EARTH_BLUE)]
    ):
        angle = 2.0 * math.pi * i / 3.0
        bodies.append({
            "name": name,
            "mass": mass,
            "pos": [radius * math.cos(angle), radius * math.sin(angle), 0.0],
            "vel": [-speed * math.sin(angle), speed * math.cos(angle), 0.0],
            "radius": 6,
            "color": color,
        })
    return bodies


# Chenciner-Montgomery figure-eight, scaled by 10 in length and velocity;
# masses of 1000 keep the period unchanged.
_FIGURE_EIGHT_X1 = [9.7000436, 0.0, -2.4308753]
_FIGURE_EIGHT_V3 = [-9.3240737, 0.0, -8.6473146]


PRESETS = {
    "Sun-Earth-Moon": [
        {"name": "Sol", "mass": 1000.0, "pos": [0.0, 0.0, 0.0], "vel": [0.0, 0.0, 0.0],
         "radius": 12, "color": C.SUN_YELLOW},
        {"name": "Earth", "mass": 16.0, "pos": [20.0, 0.0, 0.0], "vel": [0.0, 0.0, 7.07],
         "radius": 5, "color": C.EARTH_BLUE},
        {"name": "Luna", "mass": 0.1, "pos": [20.0, 0.0, 1.0], "vel": [0.0, 4.0, 7.07],
         "radius": 3, "color": C.MOON_GRAY},
    ],
    "Equilateral stars": [
        {"name": "Sol", "mass": 1000.0, "pos": [0.0, 0.0, 0.0], "vel": [0.0, 0.0, 0.0],
         "radius": 6, "color": C.SUN_YELLOW},
        {"name": "Earth", "mass": 1000.0, "pos": [20.0, 0.0, 0.0], "vel": [0.0, 0.0, 7.07],
         "radius": 6, "color": C.STAR_RED},
        {"name": "Luna", "mass": 1000.0, "pos": [0.0, 0.0, 20.0], "vel": [0.0, 4.0, 7.07],
         "radius": 6, "color": C.STAR_GREEN},
    ],
    "Sol-Earth-Luna": [
        {"name": "Sol", "mass": 10.0, "pos": [0.0, 0.0, 0.0], "vel": [0.0, 0.0, -5.0],
         "radius": 12, "color": C.SUN_YELLOW},
        {"name": "Earth", "mass": 1.0, "pos": [8.0, 0.0, 0.0], "vel": [0.0, 0.0, 50.0],
         "radius": 5, "color": C.EARTH_BLUE},
        {"name": "Luna", "mass": 0.001, "pos": [8.0, 0.0, 1.0], "vel": [0.0, 10.0, 50.0],
         "radius": 3, "color": C.MOON_GRAY},
    ],
    "Lagrange triangle": _lagrange_triangle(),
    "Figure eight": [
        {"name": "A", "mass": 1000.0, "pos": _FIGURE_EIGHT_X1,
         "vel": [-0.5 * c for c in _FIGURE_EIGHT_V3], "radius": 6, "color": C.STAR_RED},
        {"name": "B", "mass": 1000.0, "pos": [-c for c in _FIGURE_EIGHT_X1],
         "vel": [-0.5 * c for c in _FIGURE_EIGHT_V3], "radius": 6, "color": C.STAR_GREEN},
        {"name": "C", "mass": 1000.0, "pos": [0.0, 0.0, 0.0],
         "vel": list(_FIGURE_EIGHT_V3), "radius": 6, "color": C.EARTH_BLUE},
    ],
}


def _get(name):
    if name not in PRESETS:
        raise KeyError(f"Preset '{name}' not found")
    return PRESETS[name]


def load_preset(name):
    """Return the initial ``(State, masses)`` pair of preset ``name``."""
    bodies = _get(name)
    state = State([b["pos"] for b in bodies], [b["vel"] for b in bodies])
    masses = as_masses([b["mass"] for b in bodies])
    return state, masses


def body_names(name):
    return [b["name"] for b in _get(name)]


def body_styles(name):
    """Return ``(color, radius)`` for each body of preset ``name``."""
    return [(tuple(b["color"]), int(b["radius"])) for b in _get(name)]


_PERIODS = {
    "Figure eight": 6.3259139829,
    "Lagrange triangle": 2.0 * math.pi * 5.0 / math.sqrt(1000.0 / (math.sqrt(3.0) * 5.0)),
}


def preset_period(name):
    """Known period of the periodic presets, or ``None``."""
    return _PERIODS.get(name)
