"""
LINE Utils Package
"""

from .helpers import (
    get_user_profile,
    build_session,
    build_context,
    set_default_api_client,
    get_default_api_client,
)

__all__ = [
    'get_user_profile',
    'build_session',
    'build_context',
    'set_default_api_client',
    'get_default_api_client',
]
