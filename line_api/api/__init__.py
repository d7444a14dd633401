"""
LINE API Package
"""

from .client import LineAPIClient
from .models import APIResponse

__all__ = [
    'LineAPIClient',
    'APIResponse',
]
