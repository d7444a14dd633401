"""
Helper functions for LINE bot operations
"""

import logging
import os
from typing import Optional

import requests

from ..api import LineAPIClient
from ..bot.context import DEFAULT_MESSAGE_DELAY, LineContext
from ..exceptions import LineAPIError
from ..models import LineEvent, LineSession, LineUser

logger = logging.getLogger(__name__)


# Default API client instance (can be overridden)
_default_api_client: Optional[LineAPIClient] = None


def set_default_api_client(client: Optional[LineAPIClient]):
    """Set the default API client for helper functions"""
    global _default_api_client
    _default_api_client = client


def get_default_api_client() -> LineAPIClient:
    """
    Get or create the default API client
    
    A lazily created client reads LINE_CHANNEL_ACCESS_TOKEN and, if set,
    LINE_API_BASE_URL from the environment.
    """
    global _default_api_client
    if _default_api_client is None:
        base_url = os.getenv("LINE_API_BASE_URL")
        token = os.getenv("LINE_CHANNEL_ACCESS_TOKEN", "")
        if base_url:
            _default_api_client = LineAPIClient(channel_access_token=token, base_url=base_url)
        else:
            _default_api_client = LineAPIClient(channel_access_token=token)
    return _default_api_client


def get_user_profile(user_id: str, api_client: Optional[LineAPIClient] = None) -> LineUser:
    """
    Get a user's profile
    
    Args:
        user_id: LINE user id
        api_client: Optional API client instance (uses default if not provided)
        
    Returns:
        LineUser
    """
    client = api_client or get_default_api_client()
    return client.get_user_profile(user_id)


def build_session(
    event: LineEvent,
    api_client: Optional[LineAPIClient] = None,
    fetch_profile: bool = False
) -> Optional[LineSession]:
    """
    Build the session for the sender of an event
    
    Args:
        event: Incoming webhook event
        api_client: Optional API client instance (uses default if not provided)
        fetch_profile: Look up the sender's profile (display name etc.)
        
    Returns:
        LineSession, or None when the event has no user id
    """
    if not event.user_id:
        return None
    
    profile = None
    if fetch_profile:
        try:
            profile = get_user_profile(event.user_id, api_client=api_client)
        except (LineAPIError, requests.exceptions.RequestException) as e:
            # Users who blocked the bot have no readable profile
            logger.error(f"Error fetching profile for {event.user_id}: {e}", exc_info=True)
    
    return LineSession.from_event(event, profile=profile)


def build_context(
    event: LineEvent,
    api_client: Optional[LineAPIClient] = None,
    fetch_profile: bool = False,
    message_delay: int = DEFAULT_MESSAGE_DELAY
) -> LineContext:
    """
    Create the context handed to a handler for one event
    
    Args:
        event: Incoming webhook event
        api_client: Optional API client instance (uses default if not provided)
        fetch_profile: Look up the sender's profile for the session
        message_delay: Delay before each message in milliseconds
        
    Returns:
        LineContext
    """
    client = api_client or get_default_api_client()
    session = build_session(event, api_client=client, fetch_profile=fetch_profile)
    return LineContext(client, event, session=session, message_delay=message_delay)
