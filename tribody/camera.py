import numpy as np

from . import constants as C


class Camera:
    """Orthographic view of the 3-D scene with yaw/pitch orbiting and zoom."""

    def __init__(self, zoom=C.ZOOM_BASE, yaw=C.DEFAULT_YAW, pitch=C.DEFAULT_PITCH, screen_center=None):
        self.zoom = float(zoom)
        self.target_zoom = self.zoom
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        if screen_center is None:
            screen_center = ((C.WIDTH - C.UI_SIDEBAR_WIDTH) / 2, C.HEIGHT / 2)
        self.screen_center = np.array(screen_center, dtype=float)
        self.focus = np.zeros(3)
        self.target_focus = np.zeros(3)

    def rotation(self):
        """World-to-view rotation: yaw about the y axis, then pitch about x."""
        cy, sy = np.cos(self.yaw), np.sin(self.yaw)
        cp, sp = np.cos(self.pitch), np.sin(self.pitch)
        yaw = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
        pitch = np.array([[1.0, 0.0, 0.0], [0.0, cp, -sp], [0.0, sp, cp]])
        return pitch @ yaw

    def world_to_view(self, pos):
        pos = np.asarray(pos, dtype=float)
        return (pos - self.focus) @ self.rotation().T

    def world_to_screen(self, pos):
        """Convert world positions to screen pixels; returns ``(xy, depth)``."""
        view = self.world_to_view(pos)
        xy = np.stack([view[..., 0], -view[..., 1]], axis=-1) * self.zoom + self.screen_center
        return xy, view[..., 2]

    def orbit(self, d_yaw, d_pitch):
        self.yaw += d_yaw
        self.pitch = float(np.clip(self.pitch + d_pitch, -np.pi / 2, np.pi / 2))

    def zoom_by(self, factor):
        self.target_zoom = float(np.clip(self.target_zoom * factor, C.MIN_ZOOM, C.MAX_ZOOM))

    def fit(self, state, margin=0.8):
        """Aim at the bodies' centroid and choose a zoom that frames them all."""
        self.target_focus = state.x.mean(axis=0)
        extent = np.max(np.linalg.norm(state.x - self.target_focus, axis=1))
        if np.isfinite(extent) and extent > 0:
            half = min(self.screen_center) * margin
            self.target_zoom = float(np.clip(half / extent, C.MIN_ZOOM, C.MAX_ZOOM))
        self.focus = self.target_focus.copy()
        self.zoom = self.target_zoom

    def update(self):
        """Move current zoom/focus a fraction of the way towards their targets."""
        self.zoom += (self.target_zoom - self.zoom) * C.CAMERA_SMOOTHING
        self.focus += (self.target_focus - self.focus) * C.CAMERA_SMOOTHING
