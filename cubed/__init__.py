"""Top-down raycasting sandbox with a framebuffer, XPM loader and colour names."""

__version__ = "0.1.0"
__all__ = ["app", "colors", "image", "linereader", "player", "render", "textutil", "xpm"]