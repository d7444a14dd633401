"""
Conversation context for LINE bots

A LineContext is built for every incoming webhook event and handed to the
handler. It offers reply/push/send helpers for each message kind:

    async def handler(ctx):
        await ctx.reply_text("Hello!")
        await ctx.send_sticker("446", "1988")

Replies use the event's single-use reply token, pushes and sends go to the
session's user id. Every call waits ``message_delay`` milliseconds first to
look like a person typing.
"""

import asyncio
import inspect
import logging
import warnings
from typing import Any, Callable, Optional

from ..exceptions import ReplyTokenUsedError
from ..models import LineEvent, LineSession

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE_DELAY = 1000


async def _call_client(method: Callable, *args, **kwargs) -> Any:
    """Await async client methods, run blocking ones in a worker thread"""
    if inspect.iscoroutinefunction(method):
        return await method(*args, **kwargs)
    result = await asyncio.to_thread(method, *args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result


class LineContext:
    """Context object passed to LINE event handlers"""

    def __init__(
        self,
        client,
        event: LineEvent,
        session: Optional[LineSession] = None,
        message_delay: int = DEFAULT_MESSAGE_DELAY
    ):
        """
        Initialize LINE context

        Args:
            client: Messaging client shared by all contexts (not closed here)
            event: Incoming webhook event
            session: Session of the sender, None when the event has no user
            message_delay: Delay before each message in milliseconds (default: 1000)
        """
        self._client = client
        self._event = event
        self._session = session
        self._message_delay = message_delay
        self._replied = False

    @property
    def platform(self) -> str:
        """The name of the platform"""
        return "line"

    @property
    def client(self):
        return self._client

    @property
    def event(self) -> LineEvent:
        return self._event

    @property
    def session(self) -> Optional[LineSession]:
        return self._session

    @property
    def replied(self) -> bool:
        """Whether the reply token is already used"""
        return self._replied

    @property
    def message_delay(self) -> int:
        return self._message_delay

    @message_delay.setter
    def message_delay(self, milliseconds: int):
        self._message_delay = milliseconds

    def set_message_delay(self, milliseconds: int):
        self._message_delay = milliseconds

    async def typing(self, milliseconds: int):
        """
        Delay for the given milliseconds

        LINE has no typing indicator, so the pause itself is the effect.
        """
        await asyncio.sleep(milliseconds / 1000)

    async def _reply(self, method_name: str, args: tuple, kwargs: dict) -> Any:
        if self._replied:
            raise ReplyTokenUsedError()

        self._replied = True

        method = getattr(self._client, method_name)
        await self.typing(self._message_delay)
        return await _call_client(method, self._event.reply_token, *args, **kwargs)

    async def _push(self, name: str, method_name: str, delay: int, args: tuple, kwargs: dict) -> Any:
        if self._session is None:
            logger.warning(f"{name}: should not be called in context without session")
            return None

        # Resolved after the session check so a no-op never touches the client
        method = getattr(self._client, method_name)
        user_id = self._session.user.id
        await self.typing(delay)
        return await _call_client(method, user_id, *args, **kwargs)

    def _warn_deprecated(self, name: str, replacement: str):
        # Logged on every call; the warnings filter may hide repeats
        logger.warning(f"{name} is deprecated. Use {replacement} instead.")
        warnings.warn(
            f"{name} is deprecated. Use {replacement} instead.",
            DeprecationWarning,
            stacklevel=3,
        )

    # Text

    async def send_text(self, text: str) -> Any:
        """Send text to the owner of the session"""
        return await self._push("send_text", "push_text", self._message_delay, (text,), {})

    async def send_text_with_delay(self, delay: int, text: str) -> Any:
        """Send text to the owner of the session after ``delay`` milliseconds"""
        return await self._push("send_text_with_delay", "push_text", delay, (text,), {})

    async def reply_text(self, *args, **kwargs) -> Any:
        """Reply a text message to the event"""
        return await self._reply("reply_text", args, kwargs)

    async def push_text(self, *args, **kwargs) -> Any:
        """Push a text message to the owner of the session"""
        return await self._push("push_text", "push_text", self._message_delay, args, kwargs)

    # Image

    async def reply_image(self, *args, **kwargs) -> Any:
        """Reply an image message to the event"""
        return await self._reply("reply_image", args, kwargs)

    async def push_image(self, *args, **kwargs) -> Any:
        """Push an image message to the owner of the session"""
        return await self._push("push_image", "push_image", self._message_delay, args, kwargs)

    async def send_image(self, *args, **kwargs) -> Any:
        return await self._push("send_image", "push_image", self._message_delay, args, kwargs)

    async def send_image_with_delay(self, delay: int, *args, **kwargs) -> Any:
        self._warn_deprecated("send_image_with_delay", "send_image")
        return await self._push("send_image_with_delay", "push_image", delay, args, kwargs)

    # Video

    async def reply_video(self, *args, **kwargs) -> Any:
        """Reply a video message to the event"""
        return await self._reply("reply_video", args, kwargs)

    async def push_video(self, *args, **kwargs) -> Any:
        """Push a video message to the owner of the session"""
        return await self._push("push_video", "push_video", self._message_delay, args, kwargs)

    async def send_video(self, *args, **kwargs) -> Any:
        return await self._push("send_video", "push_video", self._message_delay, args, kwargs)

    async def send_video_with_delay(self, delay: int, *args, **kwargs) -> Any:
        self._warn_deprecated("send_video_with_delay", "send_video")
        return await self._push("send_video_with_delay", "push_video", delay, args, kwargs)

    # Audio

    async def reply_audio(self, *args, **kwargs) -> Any:
        """Reply an audio message to the event"""
        return await self._reply("reply_audio", args, kwargs)

    async def push_audio(self, *args, **kwargs) -> Any:
        """Push an audio message to the owner of the session"""
        return await self._push("push_audio", "push_audio", self._message_delay, args, kwargs)

    async def send_audio(self, *args, **kwargs) -> Any:
        return await self._push("send_audio", "push_audio", self._message_delay, args, kwargs)

    async def send_audio_with_delay(self, delay: int, *args, **kwargs) -> Any:
        self._warn_deprecated("send_audio_with_delay", "send_audio")
        return await self._push("send_audio_with_delay", "push_audio", delay, args, kwargs)

    # Location

    async def reply_location(self, *args, **kwargs) -> Any:
        """Reply a location message to the event"""
        return await self._reply("reply_location", args, kwargs)

    async def push_location(self, *args, **kwargs) -> Any:
        """Push a location message to the owner of the session"""
        return await self._push("push_location", "push_location", self._message_delay, args, kwargs)

    async def send_location(self, *args, **kwargs) -> Any:
        return await self._push("send_location", "push_location", self._message_delay, args, kwargs)

    async def send_location_with_delay(self, delay: int, *args, **kwargs) -> Any:
        self._warn_deprecated("send_location_with_delay", "send_location")
        return await self._push("send_location_with_delay", "push_location", delay, args, kwargs)

    # Sticker

    async def reply_sticker(self, *args, **kwargs) -> Any:
        """Reply a sticker message to the event"""
        return await self._reply("reply_sticker", args, kwargs)

    async def push_sticker(self, *args, **kwargs) -> Any:
        """Push a sticker message to the owner of the session"""
        return await self._push("push_sticker", "push_sticker", self._message_delay, args, kwargs)

    async def send_sticker(self, *args, **kwargs) -> Any:
        return await self._push("send_sticker", "push_sticker", self._message_delay, args, kwargs)

    async def send_sticker_with_delay(self, delay: int, *args, **kwargs) -> Any:
        self._warn_deprecated("send_sticker_with_delay", "send_sticker")
        return await self._push("send_sticker_with_delay", "push_sticker", delay, args, kwargs)

    # Imagemap

    async def reply_imagemap(self, *args, **kwargs) -> Any:
        """Reply an imagemap message to the event"""
        return await self._reply("reply_imagemap", args, kwargs)

    async def push_imagemap(self, *args, **kwargs) -> Any:
        """Push an imagemap message to the owner of the session"""
        return await self._push("push_imagemap", "push_imagemap", self._message_delay, args, kwargs)

    async def send_imagemap(self, *args, **kwargs) -> Any:
        return await self._push("send_imagemap", "push_imagemap", self._message_delay, args, kwargs)

    async def send_imagemap_with_delay(self, delay: int, *args, **kwargs) -> Any:
        self._warn_deprecated("send_imagemap_with_delay", "send_imagemap")
        return await self._push("send_imagemap_with_delay", "push_imagemap", delay, args, kwargs)

    # Button template

    async def reply_button_template(self, *args, **kwargs) -> Any:
        """Reply a buttons template message to the event"""
        return await self._reply("reply_button_template", args, kwargs)

    async def push_button_template(self, *args, **kwargs) -> Any:
        """Push a buttons template message to the owner of the session"""
        return await self._push(
            "push_button_template", "push_button_template", self._message_delay, args, kwargs
        )

    async def send_button_template(self, *args, **kwargs) -> Any:
        return await self._push(
            "send_button_template", "push_button_template", self._message_delay, args, kwargs
        )

    async def send_button_template_with_delay(self, delay: int, *args, **kwargs) -> Any:
        self._warn_deprecated("send_button_template_with_delay", "send_button_template")
        return await self._push(
            "send_button_template_with_delay", "push_button_template", delay, args, kwargs
        )

    # Confirm template

    async def reply_confirm_template(self, *args, **kwargs) -> Any:
        """Reply a confirm template message to the event"""
        return await self._reply("reply_confirm_template", args, kwargs)

    async def push_confirm_template(self, *args, **kwargs) -> Any:
        """Push a confirm template message to the owner of the session"""
        return await self._push(
            "push_confirm_template", "push_confirm_template", self._message_delay, args, kwargs
        )

    async def send_confirm_template(self, *args, **kwargs) -> Any:
        return await self._push(
            "send_confirm_template", "push_confirm_template", self._message_delay, args, kwargs
        )

    async def send_confirm_template_with_delay(self, delay: int, *args, **kwargs) -> Any:
        self._warn_deprecated("send_confirm_template_with_delay", "send_confirm_template")
        return await self._push(
            "send_confirm_template_with_delay", "push_confirm_template", delay, args, kwargs
        )

    # Carousel template

    async def reply_carousel_template(self, *args, **kwargs) -> Any:
        """Reply a carousel template message to the event"""
        return await self._reply("reply_carousel_template", args, kwargs)

    async def push_carousel_template(self, *args, **kwargs) -> Any:
        """Push a carousel template message to the owner of the session"""
        return await self._push(
            "push_carousel_template", "push_carousel_template", self._message_delay, args, kwargs
        )

    async def send_carousel_template(self, *args, **kwargs) -> Any:
        return await self._push(
            "send_carousel_template", "push_carousel_template", self._message_delay, args, kwargs
        )

    async def send_carousel_template_with_delay(self, delay: int, *args, **kwargs) -> Any:
        self._warn_deprecated("send_carousel_template_with_delay", "send_carousel_template")
        return await self._push(
            "send_carousel_template_with_delay", "push_carousel_template", delay, args, kwargs
        )

    # Image carousel template

    async def reply_image_carousel_template(self, *args, **kwargs) -> Any:
        """Reply an image carousel template message to the event"""
        return await self._reply("reply_image_carousel_template", args, kwargs)

    async def push_image_carousel_template(self, *args, **kwargs) -> Any:
        """Push an image carousel template message to the owner of the session"""
        return await self._push(
            "push_image_carousel_template",
            "push_image_carousel_template",
            self._message_delay,
            args,
            kwargs
        )

    async def send_image_carousel_template(self, *args, **kwargs) -> Any:
        return await self._push(
            "send_image_carousel_template",
            "push_image_carousel_template",
            self._message_delay,
            args,
            kwargs
        )

    async def send_image_carousel_template_with_delay(self, delay: int, *args, **kwargs) -> Any:
        self._warn_deprecated("send_image_carousel_template_with_delay", "send_image_carousel_template")
        return await self._push(
            "send_image_carousel_template_with_delay",
            "push_image_carousel_template",
            delay,
            args,
            kwargs
        )
