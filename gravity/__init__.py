"""Pygame game engine skeleton: input callbacks, named file roots, log formatting and a main loop."""

__version__ = "0.1.0"
__all__ = ["callback", "file_manager", "log_format", "core", "app"]