"""
LINE API Client Module
Handles Messaging API requests, authentication headers and message building
"""

import logging
from typing import Dict, Any, Optional, List, Union
import requests
from requests import Response

from .models import APIResponse
from ..exceptions import LineAPIError
from ..models import (
    LineUser,
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

logger = logging.getLogger(__name__)

Messages = Union[Dict[str, Any], List[Dict[str, Any]]]


class LineAPIClient:
    """
    LINE Messaging API Client

    Automatically handles:
    - Bearer authentication with the channel access token
    - JSON headers for request bodies
    - Error status translation into LineAPIError

    Every ``reply_*`` method takes the event's reply token first, every
    ``push_*`` method takes the recipient id first.
    """

    def __init__(
        self,
        channel_access_token: str = "",
        base_url: str = "https://api.line.me",
        timeout: int = 15
    ):
        """
        Initialize LINE API Client

        Args:
            channel_access_token: Channel access token issued in the LINE console
            base_url: Base URL for the API (default: https://api.line.me)
            timeout: Request timeout in seconds (default: 15)
        """
        self.base_url = base_url.rstrip('/')
        self.channel_access_token = channel_access_token
        self.timeout = timeout

        # Create session for connection pooling
        self.session = requests.Session()

    def _build_headers(
        self,
        payload: Optional[Dict[str, Any]] = None,
        custom_headers: Optional[Dict[str, str]] = None
    ) -> Dict[str, str]:
        """
        Build request headers

        Args:
            payload: Request payload, decides whether a Content-Type is sent
            custom_headers: Additional custom headers to include

        Returns:
            Dictionary of headers
        """
        headers = {
            "Authorization": f"Bearer {self.channel_access_token}",
        }

        if payload is not None:
            headers["Content-Type"] = "application/json"

        # Custom headers take precedence
        if custom_headers:
            headers.update(custom_headers)

        return headers

    def _check_response(self, response: Response) -> Response:
        """Raise LineAPIError for error status codes"""
        if response.status_code >= 400:
            try:
                details = response.json()
            except ValueError:
                details = {"body": response.text[:500]}
            message = details.get("message") if isinstance(details, dict) else None
            raise LineAPIError(
                f"LINE API error {response.status_code}: {message or 'request failed'}",
                status_code=response.status_code,
                details=details
            )
        return response

    def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Response:
        """
        Send GET request

        Args:
            endpoint: API endpoint (e.g., "/v2/bot/profile/{userId}")
            params: Query parameters
            headers: Additional custom headers

        Returns:
            Response object
        """
        url = f"{self.base_url}{endpoint}"
        request_headers = self._build_headers(custom_headers=headers)

        logger.debug(f"GET {endpoint}")
        response = self.session.get(
            url,
            headers=request_headers,
            params=params,
            timeout=self.timeout
        )

        return self._check_response(response)

    def post(
        self,
        endpoint: str,
        payload: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Response:
        """
        Send POST request

        Args:
            endpoint: API endpoint (e.g., "/v2/bot/message/reply")
            payload: JSON request body
            headers: Additional custom headers

        Returns:
            Response object
        """
        url = f"{self.base_url}{endpoint}"
        request_headers = self._build_headers(payload=payload, custom_headers=headers)

        logger.debug(f"POST {endpoint}")
        response = self.session.post(
            url,
            headers=request_headers,
            json=payload,
            timeout=self.timeout
        )

        return self._check_response(response)

    @staticmethod
    def _as_list(messages: Messages) -> List[Dict[str, Any]]:
        if isinstance(messages, dict):
            return [messages]
        return list(messages)

    def reply_message(self, reply_token: str, messages: Messages) -> APIResponse:
        """
        Reply to an event with one or more messages

        Args:
            reply_token: Single-use token taken from the webhook event
            messages: Message dictionary or list of them

        Returns:
            APIResponse
        """
        payload = {
            "replyToken": reply_token,
            "messages": self._as_list(messages),
        }
        return APIResponse.from_response(self.post("/v2/bot/message/reply", payload=payload))

    def push_message(self, to: str, messages: Messages) -> APIResponse:
        """
        Push one or more messages to a user, group or room

        Args:
            to: Recipient id
            messages: Message dictionary or list of them

        Returns:
            APIResponse
        """
        payload = {
            "to": to,
            "messages": self._as_list(messages),
        }
        return APIResponse.from_response(self.post("/v2/bot/message/push", payload=payload))

    def get_user_profile(self, user_id: str) -> LineUser:
        """Get the profile of a user who added the bot as a friend"""
        response = self.get(f"/v2/bot/profile/{user_id}")
        return LineUser.from_dict(response.json())

    # Text

    def reply_text(self, reply_token: str, text: str) -> APIResponse:
        return self.reply_message(reply_token, TextMessage(text).to_dict())

    def push_text(self, to: str, text: str) -> APIResponse:
        return self.push_message(to, TextMessage(text).to_dict())

    # Image

    def reply_image(
        self,
        reply_token: str,
        original_content_url: str,
        preview_image_url: Optional[str] = None
    ) -> APIResponse:
        message = ImageMessage(original_content_url, preview_image_url)
        return self.reply_message(reply_token, message.to_dict())

    def push_image(
        self,
        to: str,
        original_content_url: str,
        preview_image_url: Optional[str] = None
    ) -> APIResponse:
        message = ImageMessage(original_content_url, preview_image_url)
        return self.push_message(to, message.to_dict())

    # Video

    def reply_video(self, reply_token: str, original_content_url: str, preview_image_url: str) -> APIResponse:
        message = VideoMessage(original_content_url, preview_image_url)
        return self.reply_message(reply_token, message.to_dict())

    def push_video(self, to: str, original_content_url: str, preview_image_url: str) -> APIResponse:
        message = VideoMessage(original_content_url, preview_image_url)
        return self.push_message(to, message.to_dict())

    # Audio

    def reply_audio(self, reply_token: str, original_content_url: str, duration: int) -> APIResponse:
        message = AudioMessage(original_content_url, duration)
        return self.reply_message(reply_token, message.to_dict())

    def push_audio(self, to: str, original_content_url: str, duration: int) -> APIResponse:
        message = AudioMessage(original_content_url, duration)
        return self.push_message(to, message.to_dict())

    # Location

    def reply_location(
        self,
        reply_token: str,
        title: str,
        address: str,
        latitude: float,
        longitude: float
    ) -> APIResponse:
        message = LocationMessage(title, address, latitude, longitude)
        return self.reply_message(reply_token, message.to_dict())

    def push_location(
        self,
        to: str,
        title: str,
        address: str,
        latitude: float,
        longitude: float
    ) -> APIResponse:
        message = LocationMessage(title, address, latitude, longitude)
        return self.push_message(to, message.to_dict())

    # Sticker

    def reply_sticker(self, reply_token: str, package_id: str, sticker_id: str) -> APIResponse:
        message = StickerMessage(package_id, sticker_id)
        return self.reply_message(reply_token, message.to_dict())

    def push_sticker(self, to: str, package_id: str, sticker_id: str) -> APIResponse:
        message = StickerMessage(package_id, sticker_id)
        return self.push_message(to, message.to_dict())

    # Imagemap

    def reply_imagemap(
        self,
        reply_token: str,
        alt_text: str,
        base_url: str,
        base_width: int,
        base_height: int,
        actions: List[Dict[str, Any]]
    ) -> APIResponse:
        message = ImagemapMessage(base_url, alt_text, base_width, base_height, actions)
        return self.reply_message(reply_token, message.to_dict())

    def push_imagemap(
        self,
        to: str,
        alt_text: str,
        base_url: str,
        base_width: int,
        base_height: int,
        actions: List[Dict[str, Any]]
    ) -> APIResponse:
        message = ImagemapMessage(base_url, alt_text, base_width, base_height, actions)
        return self.push_message(to, message.to_dict())

    # Templates

    def reply_button_template(
        self,
        reply_token: str,
        alt_text: str,
        text: str,
        actions: List[Dict[str, Any]],
        title: Optional[str] = None,
        thumbnail_image_url: Optional[str] = None
    ) -> APIResponse:
        template = ButtonsTemplate(text, actions, title, thumbnail_image_url)
        return self.reply_message(reply_token, TemplateMessage(alt_text, template).to_dict())

    def push_button_template(
        self,
        to: str,
        alt_text: str,
        text: str,
        actions: List[Dict[str, Any]],
        title: Optional[str] = None,
        thumbnail_image_url: Optional[str] = None
    ) -> APIResponse:
        template = ButtonsTemplate(text, actions, title, thumbnail_image_url)
        return self.push_message(to, TemplateMessage(alt_text, template).to_dict())

    def reply_confirm_template(
        self,
        reply_token: str,
        alt_text: str,
        text: str,
        actions: List[Dict[str, Any]]
    ) -> APIResponse:
        template = ConfirmTemplate(text, actions)
        return self.reply_message(reply_token, TemplateMessage(alt_text, template).to_dict())

    def push_confirm_template(
        self,
        to: str,
        alt_text: str,
        text: str,
        actions: List[Dict[str, Any]]
    ) -> APIResponse:
        template = ConfirmTemplate(text, actions)
        return self.push_message(to, TemplateMessage(alt_text, template).to_dict())

    def reply_carousel_template(
        self,
        reply_token: str,
        alt_text: str,
        columns: List[Dict[str, Any]]
    ) -> APIResponse:
        template = CarouselTemplate(columns)
        return self.reply_message(reply_token, TemplateMessage(alt_text, template).to_dict())

    def push_carousel_template(self, to: str, alt_text: str, columns: List[Dict[str, Any]]) -> APIResponse:
        template = CarouselTemplate(columns)
        return self.push_message(to, TemplateMessage(alt_text, template).to_dict())

    def reply_image_carousel_template(
        self,
        reply_token: str,
        alt_text: str,
        columns: List[Dict[str, Any]]
    ) -> APIResponse:
        template = ImageCarouselTemplate(columns)
        return self.reply_message(reply_token, TemplateMessage(alt_text, template).to_dict())

    def push_image_carousel_template(
        self,
        to: str,
        alt_text: str,
        columns: List[Dict[str, Any]]
    ) -> APIResponse:
        template = ImageCarouselTemplate(columns)
        return self.push_message(to, TemplateMessage(alt_text, template).to_dict())

    def close(self):
        """Close the session"""
        self.session.close()

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        self.close()
