"""
API configuration package.
Contains settings and configuration management.
"""

from payapi.config.settings import settings

__all__ = [
    "settings",
]
