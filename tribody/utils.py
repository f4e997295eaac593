"""Formatting helpers for on-screen read-outs."""

import numpy as np


def scalar_to_display(value: float, precision: int = 4) -> str:
    if not np.isfinite(value):
        return "N/A"
    if value != 0 and (abs(value) >= 1e5 or abs(value) < 10 ** -precision):
        return f"{value:.{precision}e}"
    return f"{value:.{precision}f}"


def vector_to_display(vec, precision: int = 2) -> str:
    x, y, z = (float(c) for c in vec)
    return f"x: {x:.{precision}f}\ny: {y:.{precision}f}\nz: {z:.{precision}f}"


def time_to_display(t: float) -> str:
    if t < 0:
        return "N/A"
    return f"t = {t:.3f}"
