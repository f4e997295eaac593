import math

import pygame
import pygame_gui

from . import constants as C
from .presets import PRESETS
from .utils import scalar_to_display, time_to_display, vector_to_display

NO_SELECTION = "None"
BODY_OPTIONS = [NO_SELECTION] + [f"Body {i}" for i in range(C.BODY_COUNT)]

# Mass sliders work on log10(mass) so that both 0.001 and 1000 are reachable.
MASS_LOG_RANGE = (-3.0, 4.0)
SPEED_RANGE = (0.0, 100.0)


def option_to_index(text):
    """Map a body selector option back to a body index (``None`` for no selection)."""
    if text == NO_SELECTION:
        return None
    return int(text.split()[-1])


def index_to_option(index):
    return NO_SELECTION if index is None else f"Body {index}"


class ControlPanel:
    """Side panel with playback, frame and per-body controls.

    :meth:`process_event` translates pygame_gui events into ``(action, value)``
    pairs which the simulation applies; the panel itself never touches the
    physics state.
    """

    def __init__(self, manager: pygame_gui.UIManager, default_preset: str):
        width = C.UI_SIDEBAR_WIDTH
        self.manager = manager
        self.panel = pygame_gui.elements.UIPanel(
            pygame.Rect(C.WIDTH - width, 0, width, C.HEIGHT),
            manager=manager,
            object_id="#control_panel",
        )
        inner = width - 20
        y = 0
        pygame_gui.elements.UILabel(
            pygame.Rect(0, y, width, 30),
            text="Controls",
            manager=manager,
            container=self.panel,
            object_id="#title_label",
        )
        y += 35
        self.preset_menu = pygame_gui.elements.UIDropDownMenu(
            list(PRESETS.keys()),
            default_preset,
            pygame.Rect(10, y, inner, 25),
            manager=manager,
            container=self.panel,
        )
        y += 32
        self.play_button = self._button("Pause", 10, y, 80)
        self.step_button = self._button("Step", 95, y, 80)
        self.reset_button = self._button("Reset", 180, y, 80)
        y += 30
        self.zero_p_button = self._button("Zero P", 10, y, 80)
        self.save_button = self._button("Save", 95, y, 80)
        self.load_button = self._button("Load", 180, y, 80)
        y += 32

        self.speed_label = self._label(f"Speed: x{C.SPEED_FACTOR}", y)
        y += 20
        self.speed_slider = pygame_gui.elements.UIHorizontalSlider(
            pygame.Rect(10, y, inner, 20),
            start_value=C.SPEED_FACTOR,
            value_range=(C.MIN_SPEED_FACTOR, C.MAX_SPEED_FACTOR),
            manager=manager,
            container=self.panel,
        )
        y += 25
        self.trail_label = self._label(f"Trail: {C.DEFAULT_TRAIL_LENGTH}", y)
        y += 20
        self.trail_slider = pygame_gui.elements.UIHorizontalSlider(
            pygame.Rect(10, y, inner, 20),
            start_value=C.DEFAULT_TRAIL_LENGTH,
            value_range=(C.MIN_TRAIL_LENGTH, C.MAX_TRAIL_LENGTH),
            manager=manager,
            container=self.panel,
        )
        y += 28

        self._label("Follow", y, width=60)
        self.follow_menu = pygame_gui.elements.UIDropDownMenu(
            BODY_OPTIONS,
            NO_SELECTION,
            pygame.Rect(70, y, inner - 60, 25),
            manager=manager,
            container=self.panel,
        )
        y += 28
        self._label("Align", y, width=60)
        self.align_menu = pygame_gui.elements.UIDropDownMenu(
            BODY_OPTIONS,
            NO_SELECTION,
            pygame.Rect(70, y, inner - 60, 25),
            manager=manager,
            container=self.panel,
        )
        y += 32

        self.mass_labels = []
        self.mass_sliders = []
        self.speed_labels = []
        self.speed_sliders = []
        for i in range(C.BODY_COUNT):
            self.mass_labels.append(self._label(f"Body {i} mass", y))
            y += 20
            self.mass_sliders.append(
                pygame_gui.elements.UIHorizontalSlider(
                    pygame.Rect(10, y, inner, 18),
                    start_value=0.0,
                    value_range=MASS_LOG_RANGE,
                    manager=manager,
                    container=self.panel,
                )
            )
            y += 20
            self.speed_labels.append(self._label(f"Body {i} speed", y))
            y += 20
            self.speed_sliders.append(
                pygame_gui.elements.UIHorizontalSlider(
                    pygame.Rect(10, y, inner, 18),
                    start_value=0.0,
                    value_range=SPEED_RANGE,
                    manager=manager,
                    container=self.panel,
                )
            )
            y += 24

        self.info_box = pygame_gui.elements.UITextBox(
            "",
            pygame.Rect(10, y, inner, max(60, C.HEIGHT - y - 10)),
            manager,
            container=self.panel,
        )

    def _button(self, text, x, y, w):
        return pygame_gui.elements.UIButton(
            pygame.Rect(x, y, w, 25),
            text,
            self.manager,
            container=self.panel,
        )

    def _label(self, text, y, width=None):
        return pygame_gui.elements.UILabel(
            pygame.Rect(10, y, width or C.UI_SIDEBAR_WIDTH - 20, 20),
            text,
            self.manager,
            container=self.panel,
        )

    # ------------------------------------------------------------------
    def process_event(self, event):
        """Return the ``(action, value)`` requested by ``event``, or ``None``."""
        if event.type == pygame_gui.UI_BUTTON_PRESSED:
            buttons = {
                self.play_button: "toggle_pause",
                self.step_button: "step",
                self.reset_button: "reset",
                self.zero_p_button: "zero_momentum",
                self.save_button: "save",
                self.load_button: "load",
            }
            action = buttons.get(event.ui_element)
            return (action, None) if action else None

        if event.type == pygame_gui.UI_DROP_DOWN_MENU_CHANGED:
            if event.ui_element == self.preset_menu:
                return "preset", event.text
            if event.ui_element == self.follow_menu:
                return "follow", option_to_index(event.text)
            if event.ui_element == self.align_menu:
                return "align", option_to_index(event.text)
            return None

        if event.type == pygame_gui.UI_HORIZONTAL_SLIDER_MOVED:
            if event.ui_element == self.speed_slider:
                self.speed_label.set_text(f"Speed: x{int(event.value)}")
                return "speed_factor", int(event.value)
            if event.ui_element == self.trail_slider:
                self.trail_label.set_text(f"Trail: {int(event.value)}")
                return "trail_length", int(event.value)
            for i, slider in enumerate(self.mass_sliders):
                if event.ui_element == slider:
                    mass = 10.0 ** event.value
                    self.mass_labels[i].set_text(f"Body {i} mass: {mass:.3g}")
                    return "mass", (i, mass)
            for i, slider in enumerate(self.speed_sliders):
                if event.ui_element == slider:
                    self.speed_labels[i].set_text(f"Body {i} speed: {event.value:.2f}")
                    return "body_speed", (i, float(event.value))
        return None

    # ------------------------------------------------------------------
    def set_paused(self, paused):
        self.play_button.set_text("Play" if paused else "Pause")

    def sync_bodies(self, masses, speeds, names):
        """Move the per-body sliders to the current masses and speeds."""
        lo, hi = MASS_LOG_RANGE
        for i, (m, s, name) in enumerate(zip(masses, speeds, names)):
            self.mass_sliders[i].set_current_value(min(max(math.log10(m), lo), hi))
            self.mass_labels[i].set_text(f"{name} mass: {m:.3g}")
            self.speed_sliders[i].set_current_value(min(max(s, SPEED_RANGE[0]), SPEED_RANGE[1]))
            self.speed_labels[i].set_text(f"{name} speed: {s:.2f}")

    def update_info(self, sim_time, momentum, energy, drift):
        text = (
            f"{time_to_display(sim_time)}<br>"
            f"<b>Total momentum</b><br>"
            f"{vector_to_display(momentum).replace(chr(10), '<br>')}<br>"
            f"<b>Total energy</b>: {scalar_to_display(energy)}<br>"
            f"Drift: {scalar_to_display(drift, 3)} %"
        )
        self.info_box.set_text(text)
