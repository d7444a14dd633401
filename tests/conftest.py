"""Shared fixtures for LINE library tests."""

from unittest.mock import AsyncMock, Mock, patch

import pytest

from line_api import LineContext, LineEvent, LineSession
from line_api.api.models import APIResponse


# Every content kind with sample arguments for the client call
KINDS = [
    ("text", ("hello",)),
    ("image", ("https://example.com/a.jpg", "https://example.com/a_small.jpg")),
    ("video", ("https://example.com/a.mp4", "https://example.com/a.jpg")),
    ("audio", ("https://example.com/a.m4a", 240000)),
    ("location", ("Office", "Tokyo", 35.68, 139.76)),
    ("sticker", ("446", "1988")),
    ("imagemap", ("this is an imagemap", "https://example.com/bot/images/rm001", 1040, 1040, [])),
    ("button_template", ("this is a buttons template", "Please select", [{"type": "postback", "label": "Buy", "data": "buy"}])),
    ("confirm_template", ("this is a confirm template", "Are you sure?", [{"type": "message", "label": "Yes", "text": "yes"}, {"type": "message", "label": "No", "text": "no"}])),
    ("carousel_template", ("this is a carousel template", [{"text": "one", "actions": []}])),
    ("image_carousel_template", ("this is an image carousel template", [{"imageUrl": "https://example.com/1.jpg", "action": {"type": "uri", "uri": "https://example.com"}}])),
]

KIND_NAMES = [kind for kind, _ in KINDS]
NON_TEXT_KINDS = [(kind, args) for kind, args in KINDS if kind != "text"]


@pytest.fixture
def user_event_data():
    """Webhook event sent by a user in a 1:1 chat."""
    return {
        "type": "message",
        "mode": "active",
        "timestamp": 1462629479859,
        "replyToken": "nHuyWiB7yP5Zw52FIkcQobQuGDXCTA",
        "source": {"type": "user", "userId": "U206d25c2ea6bd87c17655609a1c37cb8"},
        "webhookEventId": "01FZ74A0TDDPYRVKNK77XKC3ZR",
        "message": {"id": "325708", "type": "text", "text": "Hello, world"},
    }


@pytest.fixture
def group_event_data():
    """Webhook event from a group without a resolvable user."""
    return {
        "type": "message",
        "timestamp": 1462629479859,
        "replyToken": "b60d432864f44d079f6d8efe86cf404b",
        "source": {"type": "group", "groupId": "Ca56f94637c6a5d7b8e2a2e5a2ab1f8b8"},
        "message": {"id": "325709", "type": "sticker", "packageId": "1", "stickerId": "1"},
    }


@pytest.fixture
def event(user_event_data):
    return LineEvent.from_dict(user_event_data)


@pytest.fixture
def group_event(group_event_data):
    return LineEvent.from_dict(group_event_data)


@pytest.fixture
def session(event):
    return LineSession.from_event(event)


@pytest.fixture
def client():
    """Synchronous client double returning a fixed APIResponse."""
    mock_client = Mock()
    mock_client.ok = APIResponse(data={}, status=200)
    for kind in KIND_NAMES:
        getattr(mock_client, f"reply_{kind}").return_value = mock_client.ok
        getattr(mock_client, f"push_{kind}").return_value = mock_client.ok
    return mock_client


@pytest.fixture
def context(client, event, session):
    return LineContext(client, event, session=session)


@pytest.fixture
def context_without_session(client, group_event):
    return LineContext(client, group_event, session=None)


@pytest.fixture
def typing_mock():
    """Replace the artificial delay so tests do not sleep."""
    with patch.object(LineContext, "typing", new_callable=AsyncMock) as mock_typing:
        yield mock_typing
