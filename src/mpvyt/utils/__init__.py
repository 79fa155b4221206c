"""Utility functions and classes for mpvyt."""

from .config import Config
from .languages import get_language_name
from .logging import log_error

__all__ = ["Config", "get_language_name", "log_error"]
