"""Creating, dragging and drawing the shapes placed on the studio canvas."""

from __future__ import annotations

import math
from dataclasses import replace

from .element import (
    DARKGRAY,
    YELLOW,
    CircleValue,
    Color,
    ElementKind,
    EllipseValue,
    Frame,
    LineValue,
    MouseButton,
    RectangleValue,
    StudioElement,
    TriangleValue,
    Vec2,
)
from .state import SIZE_POINT, StudioState

SIZE_RESTRICTION = 10.0


def build_element(state: StudioState, current: Vec2, position: Vec2) -> StudioElement:
    """The shape of the selected kind spanned from ``current`` to ``position``."""
    kind = state.element
    match kind:
        case ElementKind.CIRCLE:
            value = CircleValue(center=current, radius=current.distance(position))
        case ElementKind.ELLIPSE:
            value = EllipseValue(
                center=current,
                width=abs(position.x - current.x),
                height=abs(position.y - current.y),
                rotation=0.0,
            )
        case ElementKind.LINE:
            value = LineValue(
                point_a=current, point_b=position, thickness=state.element_thickness
            )
        case ElementKind.RECTANGLE:
            value = RectangleValue(
                point=Vec2(min(current.x, position.x), min(current.y, position.y)),
                width=abs(position.x - current.x),
                height=abs(position.y - current.y),
                rotation=0.0,
            )
        case ElementKind.TRIANGLE:
            value = TriangleValue(
                point_a=current,
                point_b=position,
                point_c=Vec2(current.x, current.y * 0.5),
            )
        case _:
            raise ValueError(f"unknown element kind: {kind!r}")
    return StudioElement(kind, value, state.element_color)


def _circle_under(stack: list[StudioElement], position: Vec2) -> int | None:
    """Index of the first circle that contains the position."""
    return next(
        (
            index
            for index, item in enumerate(stack)
            if isinstance(item.value, CircleValue)
            and position.distance(item.value.center) <= item.value.radius
        ),
        None,
    )


def _vertical(frame: Frame, x: float, length: float, color: Color) -> None:
    frame.draw_line(x, 0.0, x, length, 1.0, color)


def _horizontal(frame: Frame, y: float, length: float, color: Color) -> None:
    frame.draw_line(0.0, y, length, y, 1.0, color)


def _line_guides(
    frame: Frame, value: LineValue, position: Vec2, snap: bool, width: float, height: float, color: Color
) -> None:
    a, b = value.point_a, value.point_b
    if position.distance(a) <= SIZE_POINT or position.distance(b) <= SIZE_POINT:
        frame.draw_circle_lines(a.x, a.y, SIZE_POINT, 1.0, color)
        frame.draw_circle_lines(b.x, b.y, SIZE_POINT, 1.0, color)
    if snap:
        for point in (a, b):
            if abs(position.x - point.x) < SIZE_POINT:
                _vertical(frame, point.x, height, color)
            if abs(position.y - point.y) < SIZE_POINT:
                _horizontal(frame, point.y, width, color)


def _circle_guides(
    frame: Frame, value: CircleValue, position: Vec2, snap: bool, width: float, height: float, color: Color
) -> None:
    center, radius = value.center, value.radius
    point1 = Vec2(center.x, center.y + radius)
    point2 = Vec2(center.x, center.y - radius)
    point3 = Vec2(center.x + radius, center.y)
    point4 = Vec2(center.x - radius, center.y)
    if any(
        position.distance(point) <= SIZE_POINT
        for point in (center, point1, point2, point3, point4)
    ):
        frame.draw_circle_lines(center.x, center.y, SIZE_POINT, 1.0, color)
    if snap:
        if abs(position.x - center.x) < SIZE_POINT:
            _vertical(frame, center.x, height, color)
        if abs(position.y - center.y) < SIZE_POINT:
            _horizontal(frame, center.y, width, color)
        if abs(position.y - point1.y) < SIZE_POINT:
            _horizontal(frame, point1.y, width, color)
        if abs(position.y - point2.y) < SIZE_POINT:
            _horizontal(frame, point2.y, width, color)
        if abs(position.x - point3.x) < SIZE_POINT:
            _vertical(frame, point3.x, height, color)
        if abs(position.x - point4.x) < SIZE_POINT:
            _vertical(frame, point4.x, height, color)


def _rectangle_guides(
    frame: Frame, value: RectangleValue, position: Vec2, snap: bool, color: Color
) -> None:
    point = value.point
    hw = value.width / 2.0
    hh = value.height / 2.0
    cos_r = math.cos(value.rotation)
    sin_r = math.sin(value.rotation)
    corners = [
        Vec2(cx * cos_r - cy * sin_r, cx * sin_r + cy * cos_r) + point
        for cx, cy in ((-hw, -hh), (hw, -hh), (hw, hh), (-hw, hh))
    ]
    if position.distance(point) <= SIZE_POINT or any(
        position.distance(corner) <= SIZE_POINT for corner in corners
    ):
        frame.draw_circle_lines(point.x, point.y, SIZE_POINT, 1.0, color)
    if snap:
        # Guide lengths follow the rectangle's own size, not the screen's.
        for guide in (point, *corners):
            if abs(position.x - guide.x) < SIZE_POINT:
                _vertical(frame, guide.x, value.height, color)
            if abs(position.y - guide.y) < SIZE_POINT:
                _horizontal(frame, guide.y, value.width, color)


def draw_elements(state: StudioState, frame: Frame) -> None:
    """Draw the preview, move a dragged circle, draw all shapes and their snap guides."""
    width = frame.screen_width()
    height = frame.screen_height()
    position = state.position(frame)

    if state.draw and not state.drag and state.current is not None:
        build_element(state, state.current, position).draw(frame, DARKGRAY)

    if not state.draw and state.drag:
        index = _circle_under(state.stack, position)
        if index is not None:
            item = state.stack[index]
            offset = position if state.drag_offset is None else state.drag_offset
            state.stack[index] = replace(
                item, value=replace(item.value, center=position - offset)
            )

    for item in state.stack:
        item.draw(frame)

    color = YELLOW.with_alpha(0.2)
    for item in state.stack:
        match item.value:
            case LineValue() as line:
                _line_guides(frame, line, position, state.snap, width, height, color)
            case CircleValue() as circle:
                _circle_guides(frame, circle, position, state.snap, width, height, color)
            case RectangleValue() as rect:
                _rectangle_guides(frame, rect, position, state.snap, color)


def element_actions(state: StudioState, frame: Frame) -> None:
    """Start and finish shapes while drawing; grab and release circles otherwise."""
    position = state.position(frame)
    pressed = frame.is_mouse_button_pressed(MouseButton.LEFT)
    released = frame.is_mouse_button_released(MouseButton.LEFT)

    if pressed and state.draw:
        state.current = position

    if released and state.draw and state.current is not None:
        current, state.current = state.current, None
        if current.distance(position) > SIZE_RESTRICTION:
            element = build_element(state, current, position)
            state.save()
            state.stack.append(element)

    if pressed and not state.draw:
        index = _circle_under(state.stack, position)
        if index is not None:
            state.drag_offset = position - state.stack[index].value.center
            state.drag = True

    if released and not state.draw:
        state.drag = False