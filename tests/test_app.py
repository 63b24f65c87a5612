from dataclasses import dataclass

from sketchstudio.app import Studio
from sketchstudio.element import (
    BLACK,
    DARKGRAY,
    GRAY,
    YELLOW,
    Frame,
    Key,
    LineValue,
    MouseButton,
    Vec2,
)


def _texts(frame):
    return [args for name, args in frame.commands if name == "text"]


def test_step_starts_by_clearing_to_black():
    studio = Studio()
    frame = Frame()
    studio.step(frame)
    assert frame.commands[0] == ("clear", (BLACK,))


def test_step_draws_toolbar_labels():
    studio = Studio()
    frame = Frame()
    studio.step(frame)
    labels = {args[0] for args in _texts(frame)}
    assert {"UNDO", "REDO", "GRID", "SNAP", "HELP", "COLOR", "LINE", "TRIANGLE"} <= labels


def test_drawing_a_line_over_two_frames_enables_undo():
    studio = Studio()
    first = Frame(mouse=Vec2(100.0, 100.0), buttons_pressed={MouseButton.LEFT})
    studio.step(first)
    undo_first = next(args for args in _texts(first) if args[0] == "UNDO")
    assert undo_first[-1] == DARKGRAY

    studio.step(Frame(mouse=Vec2(200.0, 150.0), buttons_released={MouseButton.LEFT}))
    assert [item.value for item in studio.state.stack] == [
        LineValue(Vec2(100.0, 100.0), Vec2(200.0, 150.0), 1.0)
    ]

    third = Frame(mouse=Vec2(400.0, 300.0))
    studio.step(third)
    undo_third = next(args for args in _texts(third) if args[0] == "UNDO")
    assert undo_third[-1] == GRAY


def test_holding_h_shows_help_overlay():
    studio = Studio()
    frame = Frame(keys_down={Key.H})
    studio.step(frame)
    assert studio.state.help is True
    assert any(args[0] == "HELP" and args[-1] == YELLOW for args in _texts(frame))
    assert any(args[0] == "[CMD+Z]" for args in _texts(frame))


@dataclass
class _ScriptedFrame(Frame):
    remaining: int = 3
    frames: int = 0

    def begin_frame(self) -> bool:
        if self.remaining == 0:
            return False
        self.remaining -= 1
        self.frames += 1
        self.commands.clear()
        return True


def test_run_steps_until_frame_source_closes():
    studio = Studio()
    frame = _ScriptedFrame()
    studio.run(frame)
    assert frame.frames == 3
    assert frame.commands[0] == ("clear", (BLACK,))
    assert studio.state.stack == []