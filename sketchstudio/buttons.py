"""Toolbar buttons: their layout, hit testing, drawing and the actions they trigger."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from .element import (
    DARKGRAY,
    GRAY,
    GREEN,
    LIGHTGRAY,
    Color,
    ElementKind,
    Frame,
    Key,
    MouseButton,
    TextDimensions,
    Vec2,
)

BUTTON_SIZE = 21.0
_MARGIN = 10.0


class StudioButtons(Enum):
    """Every button the toolbar knows about."""

    UNDO = auto()
    REDO = auto()
    HELP = auto()
    GRID = auto()
    SNAP = auto()
    COLOR = auto()
    LINE = auto()
    ARC = auto()
    POLY = auto()
    CIRCLE = auto()
    ELLIPSE = auto()
    RECTANGLE = auto()
    TRIANGLE = auto()
    HEXAGON = auto()

    def text(self) -> str:
        return self.name

    def dimensions(self, frame: Frame) -> TextDimensions:
        return frame.measure_text(self.text(), float(int(BUTTON_SIZE)))

    @classmethod
    def from_element(cls, kind: ElementKind) -> StudioButtons:
        """The button that selects the given element kind."""
        return _ELEMENT_BUTTONS[kind]


_ELEMENT_BUTTONS = {
    ElementKind.LINE: StudioButtons.LINE,
    ElementKind.CIRCLE: StudioButtons.CIRCLE,
    ElementKind.ELLIPSE: StudioButtons.ELLIPSE,
    ElementKind.RECTANGLE: StudioButtons.RECTANGLE,
    ElementKind.TRIANGLE: StudioButtons.TRIANGLE,
}

_SHAPE_BUTTONS = {
    StudioButtons.ELLIPSE: ElementKind.ELLIPSE,
    StudioButtons.LINE: ElementKind.LINE,
    StudioButtons.TRIANGLE: ElementKind.TRIANGLE,
    StudioButtons.RECTANGLE: ElementKind.RECTANGLE,
    StudioButtons.CIRCLE: ElementKind.CIRCLE,
}

_ELEMENT_FAMILY = frozenset(
    {
        StudioButtons.CIRCLE,
        StudioButtons.ELLIPSE,
        StudioButtons.LINE,
        StudioButtons.ARC,
        StudioButtons.RECTANGLE,
        StudioButtons.TRIANGLE,
        StudioButtons.HEXAGON,
        StudioButtons.POLY,
    }
)


@dataclass(frozen=True)
class StudioButton:
    """A button placed on screen; (x, y) is the text baseline origin."""

    button: StudioButtons
    x: float
    y: float
    size: float

    def contains(self, frame: Frame, position: Vec2) -> bool:
        dims = self.button.dimensions(frame)
        return (
            self.x <= position.x <= self.x + dims.width
            and self.y - dims.height <= position.y <= self.y
        )


def _left_aligned(frame: Frame, buttons: list[StudioButtons], y: float) -> list[StudioButton]:
    placed = []
    x = _MARGIN
    for button in reversed(buttons):
        placed.append(StudioButton(button, x, y, BUTTON_SIZE))
        x += button.dimensions(frame).width + _MARGIN
    return placed


def _right_aligned(
    frame: Frame, buttons: list[StudioButtons], right: float, y: float
) -> list[StudioButton]:
    placed = []
    x = right
    for button in reversed(buttons):
        x -= button.dimensions(frame).width + _MARGIN
        placed.append(StudioButton(button, x, y, BUTTON_SIZE))
    return placed


def list_buttons(frame: Frame) -> list[StudioButton]:
    """Lay out all visible buttons for the current screen size."""
    width = frame.screen_width()
    height = frame.screen_height()
    left_top = _left_aligned(
        frame,
        [StudioButtons.GRID, StudioButtons.SNAP, StudioButtons.REDO, StudioButtons.UNDO],
        20.0,
    )
    left_bottom = _left_aligned(
        frame,
        [
            StudioButtons.LINE,
            StudioButtons.CIRCLE,
            StudioButtons.ELLIPSE,
            StudioButtons.RECTANGLE,
            StudioButtons.TRIANGLE,
        ],
        height - BUTTON_SIZE / 2.0,
    )
    right_top = _right_aligned(frame, [StudioButtons.HELP], width, 20.0)
    right_bottom = _right_aligned(frame, [StudioButtons.COLOR], width, height - 10.0)
    return [*left_top, *left_bottom, *right_top, *right_bottom]


def find_button(frame: Frame) -> StudioButton | None:
    """The button under the mouse, if any."""
    position = frame.mouse_position()
    return next((b for b in list_buttons(frame) if b.contains(frame, position)), None)


def _button_color(state: Any, button: StudioButtons, hovered: bool) -> Color:
    if button is StudioButtons.UNDO:
        if not state.stack_undo:
            return DARKGRAY
        return LIGHTGRAY if hovered else GRAY
    if button is StudioButtons.REDO:
        if not state.stack_redo:
            return DARKGRAY
        return LIGHTGRAY if hovered else GRAY
    if button is StudioButtons.HELP:
        return GREEN if hovered or state.help else GRAY
    if button is StudioButtons.SNAP:
        return GREEN if hovered or state.snap else GRAY
    if button is StudioButtons.GRID:
        return GREEN if hovered or state.grid >= 1 else GRAY
    if button in _ELEMENT_FAMILY:
        selected = button is StudioButtons.from_element(state.element) and state.draw
        return GREEN if hovered or selected else GRAY
    return LIGHTGRAY if hovered else GRAY


def draw_buttons(state: Any, frame: Frame) -> None:
    """Draw every button, coloured by hover and by the studio state."""
    position = frame.mouse_position()
    for placed in list_buttons(frame):
        hovered = placed.contains(frame, position)
        color = _button_color(state, placed.button, hovered)
        frame.draw_text(placed.button.text(), placed.x, placed.y, placed.size, color)


def _cycle_grid(state: Any) -> None:
    state.grid = 0 if state.grid > 2 else state.grid + 1


def button_actions(state: Any, frame: Frame) -> None:
    """Apply keyboard shortcuts and button clicks to the studio state."""
    command = frame.is_key_down(Key.LEFT_SUPER)
    if frame.is_key_pressed(Key.Z) and command:
        state.undo()
    if frame.is_key_pressed(Key.Y) and command:
        state.redo()
    if frame.is_key_pressed(Key.S) and command:
        state.snap = not state.snap
    if frame.is_key_pressed(Key.G) and command:
        _cycle_grid(state)
    if frame.is_key_pressed(Key.KEY1) and command:
        state.element = ElementKind.LINE

    if frame.is_key_down(Key.H):
        state.help = True
    if frame.is_key_released(Key.H):
        state.help = False
    if frame.is_key_pressed(Key.E):
        state.export()

    if not frame.is_mouse_button_pressed(MouseButton.LEFT):
        return
    placed = find_button(frame)
    if placed is None:
        return
    button = placed.button

    if button in _SHAPE_BUTTONS:
        state.draw = (not state.draw) if state.button is button else True
        state.button = button
        state.element = _SHAPE_BUTTONS[button]
    elif button is StudioButtons.UNDO:
        state.button = button
        state.undo()
    elif button is StudioButtons.REDO:
        state.button = button
        state.redo()
    elif button is StudioButtons.HELP:
        state.button = button
        state.help = not state.help
    elif button is StudioButtons.GRID:
        state.button = button
        _cycle_grid(state)
    elif button is StudioButtons.SNAP:
        state.button = button
        state.snap = not state.snap