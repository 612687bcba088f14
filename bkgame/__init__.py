"""A side-scrolling rabbit game with a jumping arc, and a simple image viewer."""

__version__ = "0.0.1"
__all__ = ["messages", "physics", "game", "viewer"]