import dataclasses

import pytest

from sketchstudio.config import WindowConfig, default


def test_default_title():
    assert default().window_title == "UNKNOWN Studio"


def test_default_window_size():
    config = default()
    assert (config.window_width, config.window_height) == (800, 600)


def test_default_is_windowed_and_resizable():
    config = default()
    assert config.fullscreen is False
    assert config.window_resizable is True


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        default().window_title = "other"


def test_replace_keeps_other_fields():
    changed = dataclasses.replace(default(), window_width=1280)
    assert changed.window_width == 1280
    assert changed.window_title == default().window_title
    assert isinstance(changed, WindowConfig) and changed != default()