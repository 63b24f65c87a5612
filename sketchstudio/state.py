"""Editing state of the studio: shapes, history, toggles and cursor snapping."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .buttons import StudioButtons
from .element import (
    WHITE,
    YELLOW,
    CircleValue,
    Color,
    ElementKind,
    Frame,
    LineValue,
    RectangleValue,
    StudioElement,
    Vec2,
)

DISPLAY_SIZE = Vec2(640.0, 480.0)
DISPLAY_SIZE_HD = Vec2(1280.0, 720.0)

STICKY = 10.0
STICKY_ELEMENT = 5.0

SIZE_GRID = 10.0
SIZE_POINT = 3.0


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _debug_float(value: float) -> str:
    return repr(float(value))


def _debug_color(color: Color) -> str:
    return (
        f"Color {{ r: {_debug_float(color.r)}, g: {_debug_float(color.g)}, "
        f"b: {_debug_float(color.b)}, a: {_debug_float(color.a)} }}"
    )


def _rectangle_corners(value: RectangleValue) -> list[Vec2]:
    """Corners of a rectangle taken as centred on its point, then rotated."""
    hw = value.width / 2.0
    hh = value.height / 2.0
    cos_r = math.cos(value.rotation)
    sin_r = math.sin(value.rotation)
    return [
        Vec2(cx * cos_r - cy * sin_r, cx * sin_r + cy * cos_r) + value.point
        for cx, cy in ((-hw, -hh), (hw, -hh), (hw, hh), (-hw, hh))
    ]


@dataclass
class StudioState:
    """Everything the studio remembers between frames."""

    element: ElementKind = ElementKind.LINE
    element_thickness: float = 1.0
    element_color: Color = field(default_factory=lambda: WHITE.with_alpha(0.5))
    stack: list[StudioElement] = field(default_factory=list)
    stack_undo: list[list[StudioElement]] = field(default_factory=list)
    stack_redo: list[list[StudioElement]] = field(default_factory=list)
    current: Vec2 | None = None
    button: StudioButtons | None = StudioButtons.LINE
    draw: bool = True
    snap: bool = True
    grid: int = 2
    help: bool = False
    drag: bool = False
    drag_offset: Vec2 | None = None

    def save(self) -> None:
        """Remember the current shapes before a change."""
        self.stack_undo.append(list(self.stack))
        self.stack_redo.clear()

    def undo(self) -> None:
        if self.stack_undo:
            previous = self.stack_undo.pop()
            self.stack_redo.append(list(self.stack))
            self.stack = previous

    def redo(self) -> None:
        if self.stack_redo:
            following = self.stack_redo.pop()
            self.stack_undo.append(list(self.stack))
            self.stack = following

    def export(self) -> str:
        """Print drawing calls for circles and rectangles, relative to their bounds.

        Returns the printed content.
        """
        min_x = min_y = math.inf
        max_x = max_y = -math.inf
        for item in self.stack:
            match item.value:
                case CircleValue(center=center, radius=radius):
                    min_x = min(min_x, center.x - radius)
                    min_y = min(min_y, center.y - radius)
                    max_x = max(max_x, center.x + radius)
                    max_y = max(max_y, center.y + radius)
                case RectangleValue() as rect:
                    for corner in _rectangle_corners(rect):
                        min_x = min(min_x, corner.x)
                        min_y = min(min_y, corner.y)
                        max_x = max(max_x, corner.x)
                        max_y = max(max_y, corner.y)

        width = max_x - min_x
        height = max_y - min_y
        rows = [
            f"draw_rectangle_lines({0.0:.1f}, {0.0:.1f}, {width:.1f}, {height:.1f}, "
            f"1.2, {_debug_color(YELLOW)});"
        ]
        for item in self.stack:
            match item.value:
                case CircleValue(center=center, radius=radius):
                    rows.append(
                        f"draw_circle({center.x - min_x:.1f}, {center.y - min_y:.1f}, "
                        f"{radius:.1f}, {_debug_color(item.color)});"
                    )
                case RectangleValue(point=point, width=w, height=h, rotation=rot):
                    params = (
                        "DrawRectangleParams { offset: Vec2(0.0, 0.0), "
                        f"rotation: {_debug_float(rot)}, color: {_debug_color(item.color)} }}"
                    )
                    rows.append(
                        f"draw_rectangle_ex({point.x - min_x:.1f}, {point.y - min_y:.1f}, "
                        f"{w:.1f}, {h:.1f}, {params});"
                    )
        content = "".join(row + "\n" for row in rows)
        print(f"\n{content}")
        return content

    def position(self, frame: Frame) -> Vec2:
        """The mouse position, snapped to grid, displays, edges and shapes when snapping is on.

        Guide lines for display snaps are drawn on the frame.
        """
        position = frame.mouse_position()
        if not self.snap:
            return position

        width = frame.screen_width()
        height = frame.screen_height()
        color = YELLOW.with_alpha(0.2)
        x, y = position.x, position.y

        if self.grid > 0:
            nearest_x = _round_half_away(x / SIZE_GRID) * SIZE_GRID
            if abs(x - nearest_x) < STICKY:
                x = nearest_x
            nearest_y = _round_half_away(y / SIZE_GRID) * SIZE_GRID
            if abs(y - nearest_y) < STICKY:
                y = nearest_y

        for size in (DISPLAY_SIZE, DISPLAY_SIZE_HD):
            left = width / 2.0 - size.x / 2.0
            top = height / 2.0 - size.y / 2.0
            if abs(position.x - left) < STICKY:
                x = left
                frame.draw_line(x, 0.0, x, height, 1.0, color)
            if abs(position.x - (left + size.x)) < STICKY:
                x = left + size.x
                frame.draw_line(x, 0.0, x, height, 1.0, color)
            if abs(position.y - top) < STICKY:
                y = top
                frame.draw_line(0.0, y, width, y, 1.0, color)
            if abs(position.y - (top + size.y)) < STICKY:
                y = top + size.y
                frame.draw_line(0.0, y, width, y, 1.0, color)

        if abs(position.x) < STICKY:
            x = 0.0
        if abs(position.x - width) < STICKY:
            x = width
        if abs(position.y) < STICKY:
            y = 0.0
        if abs(position.y - height) < STICKY:
            y = height

        for item in self.stack:
            match item.value:
                case LineValue(point_a=a, point_b=b):
                    for point in (a, b):
                        if position.distance(point) <= STICKY_ELEMENT:
                            x, y = point.x, point.y
                    for point in (a, b):
                        if abs(position.x - point.x) < SIZE_POINT:
                            x = point.x
                        if abs(position.y - point.y) < SIZE_POINT:
                            y = point.y
                case CircleValue(center=center, radius=radius):
                    point1 = Vec2(center.x, center.y + radius)
                    point2 = Vec2(center.x, center.y - radius)
                    point3 = Vec2(center.x + radius, center.y)
                    point4 = Vec2(center.x - radius, center.y)
                    for point in (center, point1, point2, point3, point4):
                        if position.distance(point) <= STICKY_ELEMENT:
                            x, y = point.x, point.y

                    if abs(position.x - center.x) < SIZE_POINT:
                        x = center.x
                    if abs(position.y - center.y) < SIZE_POINT:
                        y = center.y
                    if abs(position.y - point1.y) < SIZE_POINT:
                        y = point1.y
                    if abs(position.y - point2.y) < SIZE_POINT:
                        y = point2.y
                    if abs(position.x - point3.x) < SIZE_POINT:
                        x = point3.x
                    if abs(position.x - point4.x) < SIZE_POINT:
                        x = point4.x

                    direction = (position - center).normalize()
                    on_circle = center + direction * radius
                    if abs(position.x - on_circle.x) < SIZE_POINT:
                        x = on_circle.x
                    if abs(position.y - on_circle.y) < SIZE_POINT:
                        y = on_circle.y

        return Vec2(x, y)