"""A small vector sketching studio with snapping, undo/redo and export."""

__version__ = "0.0.1"

__all__ = ["__version__"]