"""Drawing helpers for the interactive viewer.

:class:`BodySprite` carries the display-only attributes of a body (colour,
radius, name) and its bounded motion trail.  Physics never reads it.
"""

from collections import deque

import numpy as np
import pygame
import pygame.gfxdraw

from . import constants as C


class BodySprite:
    """Visual representation of one body."""

    def __init__(
        self,
        name,
        color,
        radius,
        max_trail_length=C.DEFAULT_TRAIL_LENGTH,
        show_trail=True,
    ):
        self.name = name
        self.color = tuple(color)
        self.radius_pixels = max(1, int(radius))
        self.show_trail = show_trail
        self.max_trail_length = self._clamp_trail_length(max_trail_length)
        self.trail = deque(maxlen=self.max_trail_length)

    @staticmethod
    def _clamp_trail_length(length):
        return max(C.MIN_TRAIL_LENGTH, min(int(length), C.MAX_TRAIL_LENGTH))

    def update_trail(self, pos):
        """Append a world-space position to the trail."""
        if not self.show_trail:
            if len(self.trail) > 0:
                self.trail.clear()
            return
        pos = np.asarray(pos, dtype=float)
        if np.all(np.isfinite(pos)):
            self.trail.append(pos.copy())

    def clear_trail(self):
        self.trail.clear()

    def set_trail_length(self, length):
        self.max_trail_length = self._clamp_trail_length(length)
        self.trail = deque(self.trail, maxlen=self.max_trail_length)

    def draw(self, screen, camera, pos, draw_labels=True):
        if self.show_trail and len(self.trail) > 1:
            points, _ = camera.world_to_screen(np.array(self.trail))
            pygame.draw.aalines(screen, self.color, False, [(int(px), int(py)) for px, py in points])

        if not np.all(np.isfinite(pos)):
            return
        (sx, sy), _ = camera.world_to_screen(pos)
        x, y = int(sx), int(sy)
        radius = self.radius_pixels
        pygame.gfxdraw.filled_circle(screen, x, y, radius, self.color)
        pygame.gfxdraw.aacircle(screen, x, y, radius, self.color)

        if draw_labels:
            font = pygame.font.Font(None, C.FONT_SIZE)
            label = font.render(self.name, True, C.WHITE)
            screen.blit(label, (x + radius + 2, y - radius - 2))


def draw_scene(screen, camera, state, sprites, draw_labels=True):
    """Draw every body back to front so nearer bodies overlap farther ones."""
    _, depths = camera.world_to_screen(state.x)
    order = np.argsort(-np.nan_to_num(depths, nan=0.0))
    for i in order:
        sprites[i].draw(screen, camera, state.x[i], draw_labels=draw_labels)


def draw_axes(screen, camera, length=5.0):
    """Draw short world axes through the origin."""
    origin, _ = camera.world_to_screen(np.zeros(3))
    for axis, color in zip(np.eye(3) * length, [(160, 60, 60), (60, 160, 60), (60, 60, 160)]):
        end, _ = camera.world_to_screen(axis)
        pygame.draw.line(screen, color, origin, end, 1)
