"""Interactive driver tying the physics engine to the pygame front end.

:class:`Simulation` owns the current :class:`~tribody.state.State` and mass
vector.  Each frame it advances the state with sub-stepped RK4, optionally
re-derives the display frame (follow one body, keep a second on a fixed
bearing) and feeds the diagnostics read-outs.  Constructed with
``init_pygame=False`` it runs headless, which is how the tests drive it.
"""

import argparse
import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import numpy as np
import pygame
import pygame_gui

from . import constants as C
from .analysis import EnergyMonitor
from .camera import Camera
from .frames import align, follow, set_body_speed, zero_momentum
from .integrators import advance
from .physics import total_energy, total_momentum
from .presets import PRESETS, body_names, body_styles, load_preset
from .rendering import BodySprite, draw_axes, draw_scene
from .state import as_masses, is_finite
from .state_io import load_state, save_state
from .ui_manager import ControlPanel

try:
    __version__ = version("tribody")
except PackageNotFoundError:
    __version__ = "0.0.0"

logger = logging.getLogger(__name__)


class Simulation:
    """Interactive three-body simulation wrapper."""

    def __init__(
        self,
        init_pygame: bool = True,
        *,
        preset: str = C.DEFAULT_PRESET,
        time_step: float = C.TIME_STEP_BASE,
        speed_factor: int = C.SPEED_FACTOR,
        use_jit: bool = False,
        save_file: str = C.DEFAULT_SAVE_FILE,
    ):
        self.state = None
        self.masses = None
        self.names = []
        self.sprites = []
        self.current_preset = preset
        self.simulation_time = 0.0
        self.time_step = float(time_step)
        self.speed_factor = int(speed_factor)
        self.use_jit = use_jit
        self.save_file = save_file
        self.paused = False
        self.single_step = False
        self.running = False
        self.follow_body = None
        self.align_body = None
        self.trail_length = C.DEFAULT_TRAIL_LENGTH
        self.show_trails = C.SHOW_TRAILS
        self.energy_monitor = EnergyMonitor()
        self.camera = Camera()
        self._warned_non_finite = False
        self._frame = 0

        self.screen = None
        self.clock = None
        self.manager = None
        self.control = None
        if init_pygame:
            pygame.init()
            self.screen = pygame.display.set_mode((C.WIDTH, C.HEIGHT))
            pygame.display.set_caption(f"Three-Body Simulation v{__version__}")
            self.clock = pygame.time.Clock()
            theme_path = Path(__file__).with_name("theme.json")
            self.manager = pygame_gui.UIManager((C.WIDTH, C.HEIGHT), theme_path)
            self.control = ControlPanel(self.manager, preset)

        self.load_preset(preset)

    # ------------------------------------------------------------------
    def load_preset(self, preset_name: str) -> None:
        """Replace the state and masses with the named preset."""
        state, masses = load_preset(preset_name)
        styles = body_styles(preset_name)
        self._install(state, masses, body_names(preset_name), styles)
        self.current_preset = preset_name
        logger.info("Loaded preset '%s'", preset_name)

    def _install(self, state, masses, names, styles=None):
        if styles is None:
            styles = [(C.WHITE, 6)] * len(names)
        self.state = state
        self.masses = as_masses(masses)
        self.names = list(names)
        self.sprites = [
            BodySprite(name, color, radius, max_trail_length=self.trail_length, show_trail=self.show_trails)
            for name, (color, radius) in zip(self.names, styles)
        ]
        self.simulation_time = 0.0
        self._warned_non_finite = False
        self.apply_frame()
        self.energy_monitor.set_initial_energy(self.state, self.masses)
        self.camera.fit(self.state)
        self._sync_panel()

    def reset(self) -> None:
        self.load_preset(self.current_preset)

    # ------------------------------------------------------------------
    def set_follow(self, k) -> None:
        self.follow_body = k
        self._clear_trails()
        self.apply_frame()

    def set_align(self, r) -> None:
        self.align_body = r
        self._clear_trails()
        self.apply_frame()

    def apply_frame(self) -> None:
        """Re-derive the display frame from the current follow/align selection."""
        if self.follow_body is not None:
            self.state = follow(self.state, self.follow_body, self.align_body)
        elif self.align_body is not None:
            self.state = align(self.state, self.align_body)

    def zero_momentum(self) -> None:
        self.state = zero_momentum(self.state, self.masses)
        self.energy_monitor.set_initial_energy(self.state, self.masses)
        self._clear_trails()

    def set_mass(self, i: int, mass: float) -> None:
        if mass <= 0:
            logger.warning("Ignoring non-positive mass %s for body %d", mass, i)
            return
        self.masses = self.masses.copy()
        self.masses[i] = float(mass)
        self.energy_monitor.set_initial_energy(self.state, self.masses)

    def set_speed(self, i: int, speed: float) -> None:
        self.state = set_body_speed(self.state, i, speed)
        self.energy_monitor.set_initial_energy(self.state, self.masses)

    def set_speed_factor(self, factor: int) -> None:
        self.speed_factor = int(np.clip(factor, C.MIN_SPEED_FACTOR, C.MAX_SPEED_FACTOR))

    def set_trail_length(self, length: int) -> None:
        self.trail_length = int(length)
        for sprite in self.sprites:
            sprite.set_trail_length(length)

    def _clear_trails(self):
        for sprite in self.sprites:
            sprite.clear_trail()

    def speeds(self):
        return np.linalg.norm(self.state.v, axis=1)

    # ------------------------------------------------------------------
    def save(self, path=None) -> None:
        save_state(path or self.save_file, self.state, self.masses, self.names)

    def load(self, path=None) -> None:
        state, masses, names = load_state(path or self.save_file)
        self._install(state, masses, names)

    # ------------------------------------------------------------------
    def update_physics(self) -> None:
        """Advance the simulation by one frame."""
        if (self.paused and not self.single_step) or self.state is None:
            return

        # One frame advances speed_factor base steps, taken as that many sub-steps.
        substeps = max(1, self.speed_factor)
        frame_dt = self.time_step * substeps
        self.state = advance(self.state, frame_dt, self.masses, substeps, use_jit=self.use_jit)
        self.simulation_time += frame_dt
        self.single_step = False

        self.apply_frame()
        if not is_finite(self.state) and not self._warned_non_finite:
            logger.warning(
                "State became non-finite at t=%.6f; bodies may have collided",
                self.simulation_time,
            )
            self._warned_non_finite = True

        self.energy_monitor.update(self.state, self.masses)
        for sprite, pos in zip(self.sprites, self.state.x):
            sprite.update_trail(pos)

    def diagnostics(self):
        """Return ``(momentum, energy, drift_percent)`` for display."""
        momentum = total_momentum(self.state, self.masses)
        energy = total_energy(self.state, self.masses)
        drift = self.energy_monitor.history[-1] if self.energy_monitor.history else 0.0
        return momentum, energy, drift

    # ------------------------------------------------------------------
    def apply_action(self, action, value=None) -> None:
        """Apply a control-panel action."""
        if action == "toggle_pause":
            self.paused = not self.paused
            if self.control is not None:
                self.control.set_paused(self.paused)
        elif action == "step":
            self.single_step = True
        elif action == "reset":
            self.reset()
        elif action == "zero_momentum":
            self.zero_momentum()
        elif action == "save":
            self.save()
        elif action == "load":
            try:
                self.load()
            except (OSError, ValueError) as exc:
                logger.warning("Could not load %s: %s", self.save_file, exc)
        elif action == "preset":
            self.load_preset(value)
        elif action == "follow":
            self.set_follow(value)
        elif action == "align":
            self.set_align(value)
        elif action == "speed_factor":
            self.set_speed_factor(value)
        elif action == "trail_length":
            self.set_trail_length(value)
        elif action == "mass":
            self.set_mass(*value)
        elif action == "body_speed":
            self.set_speed(*value)
        else:
            raise ValueError(f"Unknown action '{action}'")

    def _sync_panel(self):
        if self.control is not None:
            self.control.sync_bodies(self.masses, self.speeds(), self.names)

    # ------------------------------------------------------------------
    def handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.apply_action("toggle_pause")
                elif event.key == pygame.K_r:
                    self.reset()
                elif event.key == pygame.K_f:
                    self.camera.fit(self.state)
            elif event.type == pygame.MOUSEWHEEL:
                self.camera.zoom_by(C.ZOOM_STEP ** event.y)
            elif event.type == pygame.MOUSEMOTION and event.buttons[2]:
                dx, dy = event.rel
                self.camera.orbit(dx * C.ROTATE_SPEED, dy * C.ROTATE_SPEED)

            if self.control is not None:
                request = self.control.process_event(event)
                if request is not None:
                    self.apply_action(*request)
                self.manager.process_events(event)

    def draw(self) -> None:
        """Render the current frame."""
        if self.screen is None:
            return
        self.screen.fill(C.BLACK)
        draw_axes(self.screen, self.camera)
        draw_scene(self.screen, self.camera, self.state, self.sprites)

        plot = self.screen.subsurface(
            pygame.Rect(0, C.HEIGHT - C.ENERGY_PLOT_HEIGHT, C.WIDTH - C.UI_SIDEBAR_WIDTH, C.ENERGY_PLOT_HEIGHT)
        )
        self.energy_monitor.draw(plot)
        self.manager.draw_ui(self.screen)
        pygame.display.flip()

    def run(self) -> None:
        """Main application loop."""
        if self.screen is None or self.clock is None:
            raise RuntimeError("Simulation cannot run without pygame initialized")
        self.running = True
        while self.running:
            time_delta = self.clock.tick(C.FPS) / 1000.0
            self.handle_events()
            self.update_physics()
            self.camera.update()
            self._frame += 1
            if self._frame % 10 == 0:
                self.control.update_info(self.simulation_time, *self.diagnostics())
            self.manager.update(time_delta)
            self.draw()
        pygame.quit()


def build_parser():
    parser = argparse.ArgumentParser(description="Interactive three-body simulation")
    parser.add_argument("--preset", default=C.DEFAULT_PRESET, choices=list(PRESETS), help="Initial conditions")
    parser.add_argument("--dt", type=float, default=C.TIME_STEP_BASE, help="RK4 step size")
    parser.add_argument("--speed", type=int, default=C.SPEED_FACTOR, help="RK4 steps per frame")
    parser.add_argument("--follow", type=int, choices=range(C.BODY_COUNT), help="Keep this body at the origin")
    parser.add_argument("--align", type=int, choices=range(C.BODY_COUNT), help="Keep this body on the x axis")
    parser.add_argument("--zero-momentum", action="store_true", help="Cancel total momentum at start")
    parser.add_argument("--trail-length", type=int, help="Override body trail length")
    parser.add_argument("--jit", action="store_true", help="Use the numba acceleration kernel")
    parser.add_argument("--load", help="Start from a saved JSON state")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    sim = Simulation(
        preset=args.preset,
        time_step=args.dt,
        speed_factor=args.speed,
        use_jit=args.jit,
    )
    if args.load:
        sim.load(args.load)
    if args.trail_length is not None:
        sim.set_trail_length(args.trail_length)
    if args.zero_momentum:
        sim.zero_momentum()
    if args.align is not None:
        sim.set_align(args.align)
    if args.follow is not None:
        sim.set_follow(args.follow)
    sim.run()


if __name__ == "__main__":
    main()
