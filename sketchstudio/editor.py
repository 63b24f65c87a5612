"""A minimal line editor with snapping, point dragging and undo/redo."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .element import GRAY, Frame, Key, MouseButton, Vec2

MatchingPoint = tuple[int, bool, Vec2]


@dataclass(frozen=True)
class Line:
    start: Vec2
    end: Vec2


@dataclass
class EditorState:
    """Lines on the canvas plus the state of drawing, dragging and history."""

    lines: list[Line] = field(default_factory=list)
    current_start: Vec2 | None = None
    sticky_radius: float = 10.0
    dragging_point: tuple[int, bool] | None = None
    drag_start_mouse_pos: Vec2 | None = None
    drag_original_positions: list[MatchingPoint] = field(default_factory=list)
    undo_stack: list[list[Line]] = field(default_factory=list)
    redo_stack: list[list[Line]] = field(default_factory=list)
    show_points: bool = True

    def save_history(self) -> None:
        self.undo_stack.append(list(self.lines))
        self.redo_stack.clear()

    def undo(self) -> None:
        if self.undo_stack:
            previous = self.undo_stack.pop()
            self.redo_stack.append(list(self.lines))
            self.lines = previous

    def redo(self) -> None:
        if self.redo_stack:
            following = self.redo_stack.pop()
            self.undo_stack.append(list(self.lines))
            self.lines = following


def handle_undo_redo_input(state: EditorState, frame: Frame) -> None:
    if frame.is_key_pressed(Key.U):
        state.undo()
    if frame.is_key_pressed(Key.R):
        state.redo()


def handle_toggle_points(state: EditorState, frame: Frame) -> None:
    if frame.is_key_pressed(Key.P):
        state.show_points = not state.show_points


def get_all_matching_points(
    lines: list[Line], target_point: Vec2, epsilon: float
) -> list[MatchingPoint]:
    """Every line endpoint lying within epsilon of the target."""
    result: list[MatchingPoint] = []
    for index, line in enumerate(lines):
        if line.start.distance(target_point) < epsilon:
            result.append((index, True, line.start))
        if line.end.distance(target_point) < epsilon:
            result.append((index, False, line.end))
    return result


def handle_sticky_line_drawing(state: EditorState, frame: Frame, mouse_pos: Vec2) -> None:
    """Create lines with press/release, snapping both ends to nearby points."""
    if state.dragging_point is not None:
        return
    if frame.is_mouse_button_pressed(MouseButton.LEFT):
        snap = find_closest_point(mouse_pos, state.lines, state.sticky_radius)
        state.current_start = mouse_pos if snap is None else snap

    if frame.is_mouse_button_released(MouseButton.LEFT) and state.current_start is not None:
        start, state.current_start = state.current_start, None
        snap = find_closest_point(mouse_pos, state.lines, state.sticky_radius)
        end = mouse_pos if snap is None else snap
        if start.distance(end) > 2.0 * state.sticky_radius:
            state.save_history()
            state.lines.append(Line(start, end))


def handle_point_dragging(state: EditorState, frame: Frame, mouse_pos: Vec2) -> None:
    """Drag an endpoint together with every endpoint that coincides with it."""
    if frame.is_mouse_button_pressed(MouseButton.LEFT) and state.dragging_point is None:
        hit = find_closest_point_for_drag(mouse_pos, state.lines, 5.0)
        if hit is not None:
            index, is_start = hit
            state.save_history()
            line = state.lines[index]
            original = line.start if is_start else line.end
            state.dragging_point = hit
            state.drag_start_mouse_pos = mouse_pos
            state.drag_original_positions = get_all_matching_points(
                state.lines, original, 0.01
            )

    if (
        state.dragging_point is not None
        and state.drag_start_mouse_pos is not None
        and frame.is_mouse_button_down(MouseButton.LEFT)
    ):
        delta = mouse_pos - state.drag_start_mouse_pos
        for index, is_start, origin in state.drag_original_positions:
            new_pos = origin + delta
            snap = find_closest_point_excluding_multiple(
                state.lines, new_pos, state.sticky_radius, state.drag_original_positions
            )
            if snap is not None:
                new_pos = snap_to_screen_edge(
                    snap, 5.0, frame.screen_width(), frame.screen_height()
                )
            if index < len(state.lines):
                line = state.lines[index]
                state.lines[index] = (
                    replace(line, start=new_pos) if is_start else replace(line, end=new_pos)
                )

    if frame.is_mouse_button_released(MouseButton.LEFT):
        state.dragging_point = None
        state.drag_start_mouse_pos = None
        state.drag_original_positions.clear()


def snap_to_screen_edge(
    pos: Vec2, snap_threshold: float, screen_w: float, screen_h: float
) -> Vec2:
    """Pull a point onto a screen edge when it lies within the threshold of it."""
    x, y = pos.x, pos.y
    if abs(pos.x) < snap_threshold:
        x = 0.0
    elif abs(pos.x - screen_w) < snap_threshold:
        x = screen_w
    if abs(pos.y) < snap_threshold:
        y = 0.0
    elif abs(pos.y - screen_h) < snap_threshold:
        y = screen_h
    return Vec2(x, y)


def find_closest_point_excluding_multiple(
    lines: list[Line],
    target: Vec2,
    radius: float,
    exclude_points: list[MatchingPoint],
) -> Vec2 | None:
    """Closest endpoint within radius; meeting an excluded endpoint skips the rest of its line."""
    closest: Vec2 | None = None
    closest_dist = radius
    for line in lines:
        for point in (line.start, line.end):
            if any(point.distance(excluded) < 0.01 for _, _, excluded in exclude_points):
                break
            dist = target.distance(point)
            if dist <= closest_dist:
                closest = point
                closest_dist = dist
    return closest


def find_closest_point_for_drag(
    target: Vec2, lines: list[Line], radius: float
) -> tuple[int, bool] | None:
    """Index and end (True for start) of the closest endpoint; later ties win."""
    closest: tuple[int, bool] | None = None
    closest_dist = radius
    for index, line in enumerate(lines):
        dist_start = target.distance(line.start)
        if dist_start <= closest_dist:
            closest = (index, True)
            closest_dist = dist_start
        dist_end = target.distance(line.end)
        if dist_end <= closest_dist:
            closest = (index, False)
            closest_dist = dist_end
    return closest


def find_closest_point(target: Vec2, lines: list[Line], radius: float) -> Vec2 | None:
    """Closest endpoint strictly within radius; earlier ties win."""
    closest: Vec2 | None = None
    closest_dist = radius
    for line in lines:
        for point in (line.start, line.end):
            dist = target.distance(point)
            if dist < closest_dist:
                closest = point
                closest_dist = dist
    return closest


def export_lines(lines: list[Line]) -> str:
    """Print the distinct segments as a constant table and return the printed text."""
    unique: list[Line] = []
    for line in lines:
        duplicate = any(
            (seen.start == line.start and seen.end == line.end)
            or (seen.start == line.end and seen.end == line.start)
            for seen in unique
        )
        if not duplicate:
            unique.append(line)

    rows = [
        "",
        "// Exported Line Segments",
        "const POLYLINES: &[([f32; 2], [f32; 2])] = &[",
        *(
            f"    ([{line.start.x:.1f}, {line.start.y:.1f}], "
            f"[{line.end.x:.1f}, {line.end.y:.1f}]),"
            for line in unique
        ),
        "];",
    ]
    text = "\n".join(rows)
    print(text)
    return text


def draw_help_text(frame: Frame) -> None:
    frame.draw_text(
        "C: Clear | E: Export | U: Undo | R: Redo | P: Points", 10.0, 20.0, 20.0, GRAY
    )