"""In-memory pixel images, XPM loading, X11 colour names and printf-style formatting."""

__version__ = "0.1.0"
__all__ = ["colornames", "wordtab", "color", "image", "xpm", "sprintf"]