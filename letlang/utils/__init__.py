"""
Shared utilities for letlang.

- logger: get_logger for namespaced logging
"""

from .logger import get_logger

__all__ = ["get_logger"]
