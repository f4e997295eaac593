import numpy as np

from tribody import constants as C
from tribody.camera import Camera
from tribody.presets import load_preset


def test_focus_projects_to_screen_center():
    cam = Camera(zoom=10.0, yaw=0.3, pitch=0.7, screen_center=(400, 300))
    cam.focus = np.array([1.0, 2.0, 3.0])
    xy, depth = cam.world_to_screen([1.0, 2.0, 3.0])
    assert np.allclose(xy, [400, 300])
    assert depth == 0.0


def test_front_view_maps_axes():
    cam = Camera(zoom=2.0, yaw=0.0, pitch=0.0, screen_center=(0, 0))
    xy, _ = cam.world_to_screen(np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]))
    assert np.allclose(xy[0], [2.0, 0.0])
    # screen y grows downwards
    assert np.allclose(xy[1], [0.0, -2.0])


def test_rotation_is_orthonormal():
    cam = Camera(yaw=1.2, pitch=-0.4)
    rot = cam.rotation()
    assert np.allclose(rot @ rot.T, np.eye(3))


def test_pitch_is_clamped():
    cam = Camera(pitch=0.0)
    cam.orbit(0.0, 10.0)
    assert cam.pitch == np.pi / 2


def test_fit_frames_all_bodies():
    cam = Camera()
    state, _ = load_preset("Sun-Earth-Moon")
    cam.fit(state)
    xy, _ = cam.world_to_screen(state.x)
    width = C.WIDTH - C.UI_SIDEBAR_WIDTH
    assert np.all(xy[:, 0] >= 0) and np.all(xy[:, 0] <= width)
    assert np.all(xy[:, 1] >= 0) and np.all(xy[:, 1] <= C.HEIGHT)


def test_zoom_is_clamped_and_smoothed():
    cam = Camera(zoom=1.0)
    cam.zoom_by(1e9)
    assert cam.target_zoom == C.MAX_ZOOM
    cam.update()
    assert 1.0 < cam.zoom < C.MAX_ZOOM
