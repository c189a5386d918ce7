"""
Utils Package - Exports all utility functions
"""

from .formatters import Formatters
from .helpers import Helpers

__all__ = [
    "Formatters",
    "Helpers"
]
