"""Play YouTube videos in mpv."""

from .version import __version__

__all__ = ["__version__"]
