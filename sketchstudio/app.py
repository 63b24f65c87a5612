"""The studio main loop and its pygame window."""

from __future__ import annotations

import argparse
import math
from dataclasses import replace
from typing import Callable, Protocol

import pygame

from .buttons import button_actions, draw_buttons
from .config import WindowConfig, default
from .element import BLACK, Color, Frame, Key, MouseButton, TextDimensions, Vec2
from .elements import draw_elements, element_actions
from .helps import draw_helps, help_actions
from .state import StudioState

_KEYS = {
    pygame.K_c: Key.C,
    pygame.K_e: Key.E,
    pygame.K_g: Key.G,
    pygame.K_h: Key.H,
    pygame.K_p: Key.P,
    pygame.K_r: Key.R,
    pygame.K_s: Key.S,
    pygame.K_u: Key.U,
    pygame.K_y: Key.Y,
    pygame.K_z: Key.Z,
    pygame.K_1: Key.KEY1,
    pygame.K_LGUI: Key.LEFT_SUPER,
}

_MOUSE_BUTTONS = {1: MouseButton.LEFT, 2: MouseButton.MIDDLE, 3: MouseButton.RIGHT}

_ELLIPSE_SEGMENTS = 48

Painter = Callable[[pygame.Surface, tuple, float, float], None]


def _rgba(color: Color) -> tuple[int, int, int, int]:
    return tuple(
        max(0, min(255, round(component * 255)))
        for component in (color.r, color.g, color.b, color.a)
    )


class PygameFrame(Frame):
    """A frame that reads input from and renders into a pygame window."""

    def __init__(self, config: WindowConfig | None = None) -> None:
        config = default() if config is None else config
        super().__init__(width=float(config.window_width), height=float(config.window_height))
        pygame.init()
        flags = pygame.RESIZABLE if config.window_resizable else 0
        if config.fullscreen:
            flags |= pygame.FULLSCREEN
        self._surface = pygame.display.set_mode(
            (config.window_width, config.window_height), flags
        )
        pygame.display.set_caption(config.window_title)
        self._clock = pygame.time.Clock()
        self._fonts: dict[int, pygame.font.Font] = {}
        self._started = False

    def begin_frame(self) -> bool:
        """Show the previous frame, then gather input; False once the window closes."""
        if self._started:
            pygame.display.flip()
            self._clock.tick(60)
        self._started = True

        self.keys_pressed.clear()
        self.keys_released.clear()
        self.buttons_pressed.clear()
        self.buttons_released.clear()
        self.commands.clear()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key in _KEYS:
                self.keys_pressed.add(_KEYS[event.key])
                self.keys_down.add(_KEYS[event.key])
            elif event.type == pygame.KEYUP and event.key in _KEYS:
                self.keys_released.add(_KEYS[event.key])
                self.keys_down.discard(_KEYS[event.key])
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button in _MOUSE_BUTTONS:
                self.buttons_pressed.add(_MOUSE_BUTTONS[event.button])
                self.buttons_down.add(_MOUSE_BUTTONS[event.button])
            elif event.type == pygame.MOUSEBUTTONUP and event.button in _MOUSE_BUTTONS:
                self.buttons_released.add(_MOUSE_BUTTONS[event.button])
                self.buttons_down.discard(_MOUSE_BUTTONS[event.button])

        self._surface = pygame.display.get_surface()
        width, height = self._surface.get_size()
        self.width, self.height = float(width), float(height)
        mouse_x, mouse_y = pygame.mouse.get_pos()
        self.mouse = Vec2(float(mouse_x), float(mouse_y))
        return True

    def _font(self, size: float) -> pygame.font.Font:
        key = max(1, int(size))
        if key not in self._fonts:
            self._fonts[key] = pygame.font.Font(None, key)
        return self._fonts[key]

    def _paint(self, color: Color, bounds: tuple[float, float, float, float], painter: Painter) -> None:
        """Paint a shape, blending it through a layer when it is translucent."""
        rgba = _rgba(color)
        if rgba[3] >= 255:
            painter(self._surface, rgba[:3], 0.0, 0.0)
            return
        if rgba[3] <= 0:
            return
        screen_w, screen_h = self._surface.get_size()
        left = max(math.floor(bounds[0]) - 1, 0)
        top = max(math.floor(bounds[1]) - 1, 0)
        right = min(math.ceil(bounds[2]) + 1, screen_w)
        bottom = min(math.ceil(bounds[3]) + 1, screen_h)
        if right <= left or bottom <= top:
            return
        layer = pygame.Surface((right - left, bottom - top), pygame.SRCALPHA)
        painter(layer, rgba, -left, -top)
        self._surface.blit(layer, (left, top))

    def _polygon(self, points: list[tuple[float, float]], color: Color) -> None:
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]

        def painter(surface, rgba, dx, dy):
            pygame.draw.polygon(surface, rgba, [(x + dx, y + dy) for x, y in points])

        self._paint(color, (min(xs), min(ys), max(xs), max(ys)), painter)

    def measure_text(self, text: str, font_size: float) -> TextDimensions:
        font = self._font(font_size)
        width, _ = font.size(text)
        ascent = float(font.get_ascent())
        return TextDimensions(float(width), ascent, ascent)

    def clear_background(self, color: Color) -> None:
        self._surface.fill(_rgba(color)[:3])

    def draw_line(self, x1, y1, x2, y2, thickness, color) -> None:
        width = max(1, round(thickness))

        def painter(surface, rgba, dx, dy):
            pygame.draw.line(surface, rgba, (x1 + dx, y1 + dy), (x2 + dx, y2 + dy), width)

        bounds = (min(x1, x2) - width, min(y1, y2) - width, max(x1, x2) + width, max(y1, y2) + width)
        self._paint(color, bounds, painter)

    def draw_circle(self, x, y, radius, color) -> None:
        def painter(surface, rgba, dx, dy):
            pygame.draw.circle(surface, rgba, (x + dx, y + dy), radius)

        self._paint(color, (x - radius, y - radius, x + radius, y + radius), painter)

    def draw_circle_lines(self, x, y, radius, thickness, color) -> None:
        width = max(1, round(thickness))

        def painter(surface, rgba, dx, dy):
            pygame.draw.circle(surface, rgba, (x + dx, y + dy), radius, width)

        self._paint(color, (x - radius, y - radius, x + radius, y + radius), painter)

    def draw_ellipse(self, x, y, width, height, rotation, color) -> None:
        cos_r, sin_r = math.cos(rotation), math.sin(rotation)
        points = []
        for step in range(_ELLIPSE_SEGMENTS):
            angle = 2.0 * math.pi * step / _ELLIPSE_SEGMENTS
            px, py = width * math.cos(angle), height * math.sin(angle)
            points.append((x + px * cos_r - py * sin_r, y + px * sin_r + py * cos_r))
        self._polygon(points, color)

    def draw_rectangle_ex(self, x, y, width, height, rotation, color) -> None:
        cos_r, sin_r = math.cos(rotation), math.sin(rotation)
        points = [
            (x + cx * cos_r - cy * sin_r, y + cx * sin_r + cy * cos_r)
            for cx, cy in ((0.0, 0.0), (width, 0.0), (width, height), (0.0, height))
        ]
        self._polygon(points, color)

    def draw_rectangle_lines(self, x, y, width, height, thickness, color) -> None:
        line_width = max(1, round(thickness))

        def painter(surface, rgba, dx, dy):
            rect = pygame.Rect(round(x + dx), round(y + dy), round(width), round(height))
            pygame.draw.rect(surface, rgba, rect, line_width)

        self._paint(color, (x, y, x + width, y + height), painter)

    def draw_triangle(self, a: Vec2, b: Vec2, c: Vec2, color) -> None:
        self._polygon([(a.x, a.y), (b.x, b.y), (c.x, c.y)], color)

    def draw_text(self, text, x, y, font_size, color) -> None:
        rgba = _rgba(color)
        if rgba[3] <= 0 or not text:
            return
        font = self._font(font_size)
        image = font.render(text, True, rgba[:3])
        if rgba[3] < 255:
            image.set_alpha(rgba[3])
        self._surface.blit(image, (x, y - font.get_ascent()))


class _FrameSource(Protocol):
    def begin_frame(self) -> bool: ...


class Studio:
    """The drawing studio: a background colour and the editing state."""

    def __init__(self) -> None:
        self.color: Color = BLACK
        self.state = StudioState()

    def step(self, frame: Frame) -> None:
        """Handle input and draw one frame."""
        frame.clear_background(self.color)
        button_actions(self.state, frame)
        draw_buttons(self.state, frame)
        element_actions(self.state, frame)
        draw_elements(self.state, frame)
        help_actions(self.state, frame)
        draw_helps(self.state, frame)

    def run(self, frame: Frame) -> None:
        """Step frame after frame until the frame source reports it has closed."""
        while frame.begin_frame():
            self.step(frame)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="sketchstudio", description="Vector sketching studio.")
    parser.add_argument("--width", type=int, help="initial window width in pixels")
    parser.add_argument("--height", type=int, help="initial window height in pixels")
    args = parser.parse_args(argv)

    config = default()
    if args.width:
        config = replace(config, window_width=args.width)
    if args.height:
        config = replace(config, window_height=args.height)

    frame = PygameFrame(config)
    try:
        Studio().run(frame)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())