"""
Utility modules for the skill matcher.
"""

from .config import Config

__all__ = [
    "Config",
]
