"""Three-body gravitational simulation."""

from importlib.metadata import PackageNotFoundError, version

from .state import State, add, scale, is_finite, as_masses
from .integrators import acceleration, compute_accelerations, step, advance
from .frames import (
    zero_momentum,
    recenter,
    align,
    follow,
    rotation_between,
    center_of_mass,
    set_body_speed,
)
from .physics import total_momentum, total_energy, system_energy, angular_momentum
from .constants import G, ALIGN_AXIS, TIME_STEP_BASE
from .presets import PRESETS, load_preset
from .state_io import save_state, load_state

try:
    __version__ = version("tribody")
except PackageNotFoundError:
    # Fallback when package metadata is unavailable (e.g. running from source)
    __version__ = "0.0.0"

__all__ = [
    "State",
    "add",
    "scale",
    "is_finite",
    "as_masses",
    "acceleration",
    "compute_accelerations",
    "step",
    "advance",
    "zero_momentum",
    "recenter",
    "align",
    "follow",
    "rotation_between",
    "center_of_mass",
    "set_body_speed",
    "total_momentum",
    "total_energy",
    "system_energy",
    "angular_momentum",
    "G",
    "ALIGN_AXIS",
    "TIME_STEP_BASE",
    "PRESETS",
    "load_preset",
    "save_state",
    "load_state",
    "__version__",
]
