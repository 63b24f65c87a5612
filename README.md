# sketchstudio

A small vector sketching studio. You draw lines, circles, ellipses,
rectangles and triangles on a canvas. The cursor can snap to a grid, to the
edges of the window, to two reference display frames (640×480 and 1280×720,
centred in the window) and to the key points of the lines and circles already
drawn. Edits can be undone and redone. Circles and rectangles can be exported
as drawing calls printed to standard output.

## Installation

```
pip install .
```

This also installs pygame, which the editor window uses.

## Running

```
sketchstudio
```

The window opens at 800×600 with the title "UNKNOWN Studio". To choose
another starting size:

```
sketchstudio --width 1280 --height 800
```

## Controls

Toolbar buttons:

- **UNDO / REDO**: step back or forward through your edits. The button is dimmed when there is nothing to undo or redo.
- **GRID**: step through the grid levels 0 → 1 → 2 → 3 → 0. The studio starts at level 2. Level 0 shows no grid. Levels 1 and 3 show a fine 10-pixel grid. Level 2 adds a coarse 50-pixel grid. At any level above 0, snapping also pulls the cursor onto the fine grid.
- **SNAP**: turn cursor snapping on or off. Snapping is on at start.
- **HELP**: show or hide the help overlay.
- **LINE, CIRCLE, ELLIPSE, RECTANGLE, TRIANGLE**: choose the shape to draw. Clicking the shape that is already active turns drawing off. While drawing is off, you can press on a circle and drag it.
- **COLOR**: is laid out and drawn, but clicking it does nothing.

Keyboard shortcuts. Cmd means the left Super key:

| Key       | Action                                              |
|-----------|-----------------------------------------------------|
| Cmd+Z     | Undo                                                |
| Cmd+Y     | Redo                                                |
| Cmd+S     | Toggle snapping                                     |
| Cmd+G     | Step to the next grid level                         |
| Cmd+1     | Select the line shape                               |
| H (hold)  | Show the help overlay while the key is held down    |
| E         | Print the circles and rectangles as drawing calls   |

To draw a shape, press the mouse button, drag, and release. The shape is
added only when the release point is more than 10 pixels from the press
point.

## Using it as a library

The editing logic works without a window. Each part draws on a `Frame`.

- `sketchstudio.element` defines `Vec2`, `Color` and the shape values (`LineValue`, `CircleValue`, `EllipseValue`, `RectangleValue`, `TriangleValue`). It also defines `StudioElement` and `Frame`. A plain `Frame` takes its input from its own fields and records every drawing call in `commands`, which makes it useful for tests and headless use.
- `sketchstudio.state.StudioState` holds the shapes and the undo/redo stacks. `save()`, `undo()` and `redo()` manage the history. `position(frame)` returns the snapped cursor position. `export()` prints the drawing calls and returns them as a string.
- `sketchstudio.elements` provides `build_element`, `element_actions` and `draw_elements`.
- `sketchstudio.buttons` provides the toolbar layout (`list_buttons`, `find_button`), `draw_buttons` and `button_actions`.
- `sketchstudio.helps` provides `draw_helps` for the grid and display frames and `help_actions` for the overlay.
- `sketchstudio.app.Studio` runs one frame with `step(frame)`. `run(frame)` keeps stepping until `frame.begin_frame()` returns false. `PygameFrame` is a frame backed by a pygame window, and `main(argv=None)` is the command's entry point.
- `sketchstudio.config.default()` returns the `WindowConfig` the window opens with.
- `sketchstudio.editor` is a separate, simpler editor for line segments only. It has `EditorState` with undo/redo, sticky endpoint snapping, dragging of joined endpoints, and `export_lines`, which prints the distinct segments as a constant table and returns the text. The studio window does not use it.

## What it does not do

- Drawings cannot be saved to a file or loaded back. Export only prints to standard output, and it covers circles and rectangles only.
- Colours cannot be changed. Every new shape is half-transparent white.
- Shapes cannot be selected, resized or deleted. Only circles can be moved.

## Tests

```
pip install .[test]
pytest
```