from dataclasses import dataclass, field

import pytest

from sketchstudio.buttons import (
    BUTTON_SIZE,
    StudioButton,
    StudioButtons,
    button_actions,
    draw_buttons,
    find_button,
    list_buttons,
)
from sketchstudio.element import (
    DARKGRAY,
    GRAY,
    GREEN,
    LIGHTGRAY,
    ElementKind,
    Frame,
    Key,
    MouseButton,
    Vec2,
)


@dataclass
class _State:
    stack_undo: list = field(default_factory=list)
    stack_redo: list = field(default_factory=list)
    help: bool = False
    snap: bool = True
    grid: int = 2
    element: ElementKind = ElementKind.LINE
    draw: bool = True
    button: StudioButtons | None = StudioButtons.LINE
    undo_calls: int = 0
    redo_calls: int = 0
    export_calls: int = 0

    def undo(self):
        self.undo_calls += 1

    def redo(self):
        self.redo_calls += 1

    def export(self):
        self.export_calls += 1


def _placed(frame, button):
    return next(b for b in list_buttons(frame) if b.button is button)


def _hover(frame, button):
    placed = _placed(frame, button)
    frame.mouse = Vec2(placed.x + 1.0, placed.y - 1.0)
    return frame


def _click(frame, button):
    _hover(frame, button)
    frame.buttons_pressed = {MouseButton.LEFT}
    return frame


def _drawn_color(frame, text):
    return next(args[4] for name, args in frame.commands if name == "text" and args[0] == text)


def test_text_matches_labels():
    assert StudioButtons.UNDO.text() == "UNDO"
    assert StudioButtons.RECTANGLE.text() == "RECTANGLE"
    assert StudioButtons.COLOR.text() == "COLOR"


@pytest.mark.parametrize("kind", list(ElementKind))
def test_from_element_maps_by_label(kind):
    assert StudioButtons.from_element(kind).text() == kind.text()


def test_dimensions_use_button_size():
    frame = Frame()
    assert StudioButtons.HELP.dimensions(frame) == frame.measure_text("HELP", BUTTON_SIZE)


def test_layout_order():
    buttons = [b.button for b in list_buttons(Frame())]
    assert buttons == [
        StudioButtons.UNDO,
        StudioButtons.REDO,
        StudioButtons.SNAP,
        StudioButtons.GRID,
        StudioButtons.TRIANGLE,
        StudioButtons.RECTANGLE,
        StudioButtons.ELLIPSE,
        StudioButtons.CIRCLE,
        StudioButtons.LINE,
        StudioButtons.HELP,
        StudioButtons.COLOR,
    ]


def test_first_button_origin_and_size():
    first = list_buttons(Frame())[0]
    assert (first.x, first.y) == (10.0, 20.0)
    assert all(b.size == BUTTON_SIZE for b in list_buttons(Frame()))


def test_left_buttons_do_not_overlap():
    frame = Frame()
    top = list_buttons(frame)[:4]
    for prev, nxt in zip(top, top[1:]):
        assert nxt.x == pytest.approx(prev.x + prev.button.dimensions(frame).width + 10.0)
        assert nxt.y == prev.y


def test_bottom_and_right_placement():
    frame = Frame(width=1000.0, height=700.0)
    bottom = [b for b in list_buttons(frame)[4:9]]
    assert all(b.y == 700.0 - BUTTON_SIZE / 2.0 for b in bottom)
    help_button = _placed(frame, StudioButtons.HELP)
    color_button = _placed(frame, StudioButtons.COLOR)
    for placed in (help_button, color_button):
        assert placed.x + placed.button.dimensions(frame).width == pytest.approx(990.0)
    assert help_button.y == 20.0
    assert color_button.y == 690.0


def test_contains():
    frame = Frame()
    placed = StudioButton(StudioButtons.UNDO, 10.0, 20.0, BUTTON_SIZE)
    assert placed.contains(frame, Vec2(11.0, 19.0))
    assert not placed.contains(frame, Vec2(5.0, 19.0))
    assert not placed.contains(frame, Vec2(11.0, 25.0))


def test_find_button_under_mouse():
    frame = _hover(Frame(), StudioButtons.SNAP)
    assert find_button(frame).button is StudioButtons.SNAP


def test_find_button_none_in_middle():
    frame = Frame(mouse=Vec2(400.0, 300.0))
    assert find_button(frame) is None


def test_draw_emits_text_per_button():
    frame = Frame(mouse=Vec2(400.0, 300.0))
    draw_buttons(_State(), frame)
    texts = [args[0] for name, args in frame.commands if name == "text"]
    assert texts == [b.button.text() for b in list_buttons(frame)]


def test_undo_colors():
    frame = Frame(mouse=Vec2(400.0, 300.0))
    draw_buttons(_State(), frame)
    assert _drawn_color(frame, "UNDO") == DARKGRAY

    frame = Frame(mouse=Vec2(400.0, 300.0))
    draw_buttons(_State(stack_undo=[[]]), frame)
    assert _drawn_color(frame, "UNDO") == GRAY

    frame = _hover(Frame(), StudioButtons.UNDO)
    draw_buttons(_State(stack_undo=[[]]), frame)
    assert _drawn_color(frame, "UNDO") == LIGHTGRAY


def test_selected_element_is_green_only_when_drawing():
    frame = Frame(mouse=Vec2(400.0, 300.0))
    draw_buttons(_State(element=ElementKind.CIRCLE, draw=True), frame)
    assert _drawn_color(frame, "CIRCLE") == GREEN
    assert _drawn_color(frame, "LINE") == GRAY

    frame = Frame(mouse=Vec2(400.0, 300.0))
    draw_buttons(_State(element=ElementKind.CIRCLE, draw=False), frame)
    assert _drawn_color(frame, "CIRCLE") == GRAY


def test_toggle_buttons_colors():
    frame = Frame(mouse=Vec2(400.0, 300.0))
    draw_buttons(_State(help=False, snap=True, grid=0), frame)
    assert _drawn_color(frame, "HELP") == GRAY
    assert _drawn_color(frame, "SNAP") == GREEN
    assert _drawn_color(frame, "GRID") == GRAY


def test_color_button_hover():
    frame = _hover(Frame(), StudioButtons.COLOR)
    draw_buttons(_State(), frame)
    assert _drawn_color(frame, "COLOR") == LIGHTGRAY


def test_shortcut_undo_redo_need_super():
    state = _State()
    button_actions(state, Frame(keys_pressed={Key.Z}))
    assert state.undo_calls == 0
    button_actions(state, Frame(keys_pressed={Key.Z, Key.Y}, keys_down={Key.LEFT_SUPER}))
    assert (state.undo_calls, state.redo_calls) == (1, 1)


def test_shortcut_grid_cycles():
    state = _State(grid=3)
    frame = Frame(keys_pressed={Key.G}, keys_down={Key.LEFT_SUPER})
    button_actions(state, frame)
    assert state.grid == 0
    button_actions(state, frame)
    assert state.grid == 1


def test_shortcut_snap_and_line():
    state = _State(snap=True, element=ElementKind.CIRCLE)
    button_actions(state, Frame(keys_pressed={Key.S, Key.KEY1}, keys_down={Key.LEFT_SUPER}))
    assert state.snap is False
    assert state.element is ElementKind.LINE


def test_help_key_held_and_released():
    state = _State()
    button_actions(state, Frame(keys_down={Key.H}))
    assert state.help is True
    button_actions(state, Frame(keys_released={Key.H}))
    assert state.help is False


def test_export_key():
    state = _State()
    button_actions(state, Frame(keys_pressed={Key.E}))
    assert state.export_calls == 1


def test_click_same_shape_toggles_draw():
    state = _State(button=StudioButtons.LINE, draw=True)
    button_actions(state, _click(Frame(), StudioButtons.LINE))
    assert state.draw is False
    button_actions(state, _click(Frame(), StudioButtons.LINE))
    assert state.draw is True


def test_click_other_shape_selects_it():
    state = _State(button=StudioButtons.LINE, draw=False)
    button_actions(state, _click(Frame(), StudioButtons.CIRCLE))
    assert state.draw is True
    assert state.button is StudioButtons.CIRCLE
    assert state.element is ElementKind.CIRCLE


def test_click_undo_redo_help_grid_snap():
    state = _State(grid=1, help=False, snap=True)
    button_actions(state, _click(Frame(), StudioButtons.UNDO))
    button_actions(state, _click(Frame(), StudioButtons.REDO))
    button_actions(state, _click(Frame(), StudioButtons.HELP))
    button_actions(state, _click(Frame(), StudioButtons.GRID))
    button_actions(state, _click(Frame(), StudioButtons.SNAP))
    assert (state.undo_calls, state.redo_calls) == (1, 1)
    assert state.help is True
    assert state.grid == 2
    assert state.snap is False
    assert state.button is StudioButtons.SNAP


def test_click_color_changes_nothing():
    state = _State()
    before = _State()
    button_actions(state, _click(Frame(), StudioButtons.COLOR))
    assert state == before


def test_click_outside_buttons_changes_nothing():
    state = _State()
    frame = Frame(mouse=Vec2(400.0, 300.0), buttons_pressed={MouseButton.LEFT})
    button_actions(state, frame)
    assert state == _State()