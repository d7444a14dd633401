"""
LINE Bot Package
"""

from .context import LineContext

__all__ = [
    'LineContext',
]
