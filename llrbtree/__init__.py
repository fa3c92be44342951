"""Left-leaning red-black tree with a menu shell, file loading, rendering and timing."""

__version__ = "0.1.0"
__all__ = ["tree", "render", "prompt", "timing", "cli"]