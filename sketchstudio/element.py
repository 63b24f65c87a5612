"""Geometry, colours, per-frame input and drawing primitives for the studio."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional point or vector."""

    x: float
    y: float

    def distance(self, other: Vec2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def normalize(self) -> Vec2:
        """Return the unit vector; a zero vector has no direction and yields NaN."""
        length = math.hypot(self.x, self.y)
        if length == 0.0:
            return Vec2(math.nan, math.nan)
        return Vec2(self.x / length, self.y / length)

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec2(self.x * factor, self.y * factor)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def with_alpha(self, alpha: float) -> Color:
        return Color(self.r, self.g, self.b, alpha)


BLACK = Color(0.0, 0.0, 0.0, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)
GRAY = Color(0.51, 0.51, 0.51, 1.0)
DARKGRAY = Color(0.31, 0.31, 0.31, 1.0)
LIGHTGRAY = Color(0.78, 0.78, 0.78, 1.0)
GREEN = Color(0.0, 0.89, 0.19, 1.0)
YELLOW = Color(0.99, 0.98, 0.0, 1.0)
RED = Color(0.9, 0.16, 0.22, 1.0)
DARKBLUE = Color(0.0, 0.32, 0.67, 1.0)
ORANGE = Color(1.0, 0.63, 0.0, 1.0)


class Key(Enum):
    """Keyboard keys the studio reacts to."""

    C = auto()
    E = auto()
    G = auto()
    H = auto()
    P = auto()
    R = auto()
    S = auto()
    U = auto()
    Y = auto()
    Z = auto()
    KEY1 = auto()
    LEFT_SUPER = auto()


class MouseButton(Enum):
    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()


@dataclass(frozen=True)
class TextDimensions:
    width: float
    height: float
    offset_y: float


@dataclass
class Frame:
    """Input state for one frame plus a record of everything drawn in it.

    Drawing methods append ``(name, args)`` tuples to ``commands``; a
    windowed frame overrides them to render on screen.
    """

    width: float = 800.0
    height: float = 600.0
    mouse: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    keys_down: set[Key] = field(default_factory=set)
    keys_pressed: set[Key] = field(default_factory=set)
    keys_released: set[Key] = field(default_factory=set)
    buttons_down: set[MouseButton] = field(default_factory=set)
    buttons_pressed: set[MouseButton] = field(default_factory=set)
    buttons_released: set[MouseButton] = field(default_factory=set)
    commands: list[tuple[str, tuple]] = field(default_factory=list)

    def screen_width(self) -> float:
        return self.width

    def screen_height(self) -> float:
        return self.height

    def mouse_position(self) -> Vec2:
        return self.mouse

    def is_key_down(self, key: Key) -> bool:
        return key in self.keys_down or key in self.keys_pressed

    def is_key_pressed(self, key: Key) -> bool:
        return key in self.keys_pressed

    def is_key_released(self, key: Key) -> bool:
        return key in self.keys_released

    def is_mouse_button_down(self, button: MouseButton) -> bool:
        return button in self.buttons_down or button in self.buttons_pressed

    def is_mouse_button_pressed(self, button: MouseButton) -> bool:
        return button in self.buttons_pressed

    def is_mouse_button_released(self, button: MouseButton) -> bool:
        return button in self.buttons_released

    def measure_text(self, text: str, font_size: float) -> TextDimensions:
        """Estimate text extents with a fixed-advance font."""
        height = font_size * 0.7
        return TextDimensions(len(text) * font_size * 0.5, height, height)

    def _record(self, name: str, *args: object) -> None:
        self.commands.append((name, args))

    def clear_background(self, color: Color) -> None:
        self._record("clear", color)

    def draw_line(self, x1, y1, x2, y2, thickness, color) -> None:
        self._record("line", x1, y1, x2, y2, thickness, color)

    def draw_circle(self, x, y, radius, color) -> None:
        self._record("circle", x, y, radius, color)

    def draw_circle_lines(self, x, y, radius, thickness, color) -> None:
        self._record("circle_lines", x, y, radius, thickness, color)

    def draw_ellipse(self, x, y, width, height, rotation, color) -> None:
        self._record("ellipse", x, y, width, height, rotation, color)

    def draw_rectangle_ex(self, x, y, width, height, rotation, color) -> None:
        self._record("rectangle", x, y, width, height, rotation, color)

    def draw_rectangle_lines(self, x, y, width, height, thickness, color) -> None:
        self._record("rectangle_lines", x, y, width, height, thickness, color)

    def draw_triangle(self, a: Vec2, b: Vec2, c: Vec2, color) -> None:
        self._record("triangle", a, b, c, color)

    def draw_text(self, text, x, y, font_size, color) -> None:
        self._record("text", text, x, y, font_size, color)


class ElementKind(Enum):
    """Kinds of shapes that can be placed on the canvas."""

    LINE = auto()
    CIRCLE = auto()
    ELLIPSE = auto()
    RECTANGLE = auto()
    TRIANGLE = auto()

    def text(self) -> str:
        return self.name


@dataclass(frozen=True)
class LineValue:
    point_a: Vec2
    point_b: Vec2
    thickness: float


@dataclass(frozen=True)
class CircleValue:
    center: Vec2
    radius: float


@dataclass(frozen=True)
class EllipseValue:
    center: Vec2
    width: float
    height: float
    rotation: float


@dataclass(frozen=True)
class RectangleValue:
    point: Vec2
    width: float
    height: float
    rotation: float


@dataclass(frozen=True)
class TriangleValue:
    point_a: Vec2
    point_b: Vec2
    point_c: Vec2


ElementValue = LineValue | CircleValue | EllipseValue | RectangleValue | TriangleValue


@dataclass(frozen=True)
class StudioElement:
    """A placed shape: its kind, geometry and colour."""

    element: ElementKind
    value: ElementValue
    color: Color

    def draw(self, frame: Frame, color: Color | None = None) -> None:
        """Draw the shape, optionally in a colour other than its own."""
        color = self.color if color is None else color
        match self.value:
            case LineValue(point_a=a, point_b=b, thickness=thickness):
                frame.draw_line(a.x, a.y, b.x, b.y, thickness, color)
            case CircleValue(center=center, radius=radius):
                frame.draw_circle(center.x, center.y, radius, color)
            case EllipseValue(center=center, width=w, height=h, rotation=rot):
                frame.draw_ellipse(center.x, center.y, w, h, rot, color)
            case RectangleValue(point=point, width=w, height=h, rotation=rot):
                frame.draw_rectangle_ex(point.x, point.y, w, h, rot, color)
            case TriangleValue(point_a=a, point_b=b, point_c=c):
                frame.draw_triangle(a, b, c, color)