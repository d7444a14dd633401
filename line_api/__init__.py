"""
LINE API Library
Conversation context and Messaging API client for LINE bots
"""

# Main exports
from .api import LineAPIClient, APIResponse
from .bot import LineContext

# Model exports
from .models import (
    LineUser,
    EventSource,
    LineEvent,
    LineSession,
    TextMessage,
    ImageMessage,
    VideoMessage,
    AudioMessage,
    LocationMessage,
    StickerMessage,
    ImagemapMessage,
    TemplateMessage,
    ButtonsTemplate,
    ConfirmTemplate,
    CarouselTemplate,
    ImageCarouselTemplate,
)

# Exception exports
from .exceptions import LineError, LineAPIError, ReplyTokenUsedError

# Utils exports
from .utils import (
    get_user_profile,
    build_session,
    build_context,
    set_default_api_client,
    get_default_api_client,
)

__version__ = "0.1.0"

__all__ = [
    # Main classes
    'LineAPIClient',
    'APIResponse',
    'LineContext',
    # Models
    'LineUser',
    'EventSource',
    'LineEvent',
    'LineSession',
    'TextMessage',
    'ImageMessage',
    'VideoMessage',
    'AudioMessage',
    'LocationMessage',
    'StickerMessage',
    'ImagemapMessage',
    'TemplateMessage',
    'ButtonsTemplate',
    'ConfirmTemplate',
    'CarouselTemplate',
    'ImageCarouselTemplate',
    # Exceptions
    'LineError',
    'LineAPIError',
    'ReplyTokenUsedError',
    # Utils
    'get_user_profile',
    'build_session',
    'build_context',
    'set_default_api_client',
    'get_default_api_client',
]
