import csv
import os
from collections import deque

import numpy as np
import pygame

from . import constants as C
from .physics import system_energy


class EnergyMonitor:
    """Track and plot the relative drift of total energy."""

    def __init__(self, max_points=C.ENERGY_HISTORY_POINTS):
        self.history = deque(maxlen=max_points)
        self.initial_energy = None

    def set_initial_energy(self, state, masses, g_constant=C.G):
        _, _, self.initial_energy = system_energy(state, masses, g_constant)
        self.history.clear()

    def update(self, state, masses, g_constant=C.G):
        if self.initial_energy is None or abs(self.initial_energy) < 1e-12:
            return
        _, _, current_energy = system_energy(state, masses, g_constant)
        drift = ((current_energy - self.initial_energy) / abs(self.initial_energy)) * 100
        self.history.append(drift)

    @property
    def max_drift(self):
        finite = [abs(d) for d in self.history if np.isfinite(d)]
        return max(finite) if finite else 0.0

    def draw(self, surface):
        if len(self.history) < 2:
            return

        width, height = surface.get_size()
        max_drift = max(self.max_drift, 1e-12)
        points = []
        for i, drift in enumerate(self.history):
            if not np.isfinite(drift):
                continue
            x = (i / (self.history.maxlen - 1)) * width
            y = height / 2 - (drift / max_drift) * (height / 2 - 5)
            points.append((x, y))

        if len(points) >= 2:
            pygame.draw.lines(surface, (255, 100, 100), False, points, 2)
        # 0% baseline
        pygame.draw.line(surface, C.DARK_GRAY, (0, height / 2), (width, height / 2), 1)

        font = pygame.font.Font(None, C.FONT_SIZE)
        text = font.render(f"Energy drift: {self.history[-1]:.3e} %", True, (200, 200, 200))
        surface.blit(text, (10, 5))

    def export_csv(self, file, delimiter=","):
        """Export the recorded energy drift history to a CSV file.

        Parameters
        ----------
        file : str or file-like
            Destination filename or open file object.
        delimiter : str, optional
            Delimiter used between columns (default is ',').
        """
        close = False
        if isinstance(file, (str, bytes, os.PathLike)):
            f = open(file, "w", newline="")
            close = True
        else:
            f = file
        try:
            writer = csv.writer(f, delimiter=delimiter)
            writer.writerow(["step", "energy_drift_percent"])
            for i, drift in enumerate(self.history):
                writer.writerow([i, drift])
        finally:
            if close:
                f.close()
