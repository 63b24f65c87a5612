"""Background guides (grid and display frames) and the help overlay."""

from __future__ import annotations

from typing import Any

from .element import GRAY, LIGHTGRAY, RED, YELLOW, Frame
from .state import DISPLAY_SIZE, DISPLAY_SIZE_HD, SIZE_GRID

HELP_ITEMS = (
    ("HELP", ""),
    ("[CMD+Z]", "Undo the last action"),
    ("[CMD+Y]", "Redo the undone action"),
    ("[CMD+S]", "Toggle snap mode, align to nearby points"),
    ("[CMD+G]", "Toggle background grid visibility"),
    ("[H]", "Show or hide this help overlay"),
)


def _draw_grid(frame: Frame, grid_size: float, width: float, height: float) -> None:
    grid_color = GRAY.with_alpha(0.1)
    for i in range(int(width) // int(grid_size) + 1):
        x = i * grid_size
        frame.draw_line(x, 0.0, x, height, 1.0, grid_color)
    for i in range(int(height) // int(grid_size) + 1):
        y = i * grid_size
        frame.draw_line(0.0, y, width, y, 1.0, grid_color)


def draw_helps(state: Any, frame: Frame) -> None:
    """Draw the grid (fine, plus coarse at level 2) and the two display outlines."""
    width = frame.screen_width()
    height = frame.screen_height()

    if state.grid >= 1:
        _draw_grid(frame, SIZE_GRID, width, height)
    if state.grid == 2:
        _draw_grid(frame, SIZE_GRID * 5.0, width, height)

    labels = (
        (DISPLAY_SIZE, f"{round(DISPLAY_SIZE.x)}X{round(DISPLAY_SIZE_HD.y)}"),
        (DISPLAY_SIZE_HD, f"{round(DISPLAY_SIZE_HD.x)}X{round(DISPLAY_SIZE_HD.y)}"),
    )
    for size, label in labels:
        display_x = width / 2.0 - size.x / 2.0
        display_y = height / 2.0 - size.y / 2.0
        frame.draw_text(label, display_x, display_y - 10.0, 18.0, RED.with_alpha(0.5))
        frame.draw_rectangle_lines(
            display_x, display_y, size.x, size.y, 2.0, RED.with_alpha(0.3)
        )


def help_actions(state: Any, frame: Frame) -> None:
    """Draw the keyboard shortcut overlay while help is on."""
    if not state.help:
        return
    text_size = 20.0
    spacing = 6.0
    line_height = text_size + spacing
    total_height = len(HELP_ITEMS) * line_height
    start_y = frame.screen_height() / 2.0 - total_height / 2.0
    padding = 20.0

    for row, (shortcut, description) in enumerate(HELP_ITEMS):
        y = start_y + row * line_height
        if not description:
            frame.draw_text(shortcut, padding, y, text_size, YELLOW)
        else:
            frame.draw_text(shortcut, padding, y, text_size, LIGHTGRAY)
            frame.draw_text(description, padding + 80.0, y, text_size, GRAY)