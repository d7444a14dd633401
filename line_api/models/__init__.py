"""
LINE Models Package
"""

from .user import LineUser
from .event import EventSource, LineEvent
from .session import LineSession
from .message import (
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

__all__ = [
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
]
