"""Window configuration for the studio."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WindowConfig:
    """Settings for the application window."""

    window_title: str = ""
    window_width: int = 800
    window_height: int = 600
    fullscreen: bool = False
    window_resizable: bool = True


def default() -> WindowConfig:
    """Return the configuration the studio window opens with."""
    return WindowConfig(window_title="UNKNOWN Studio")