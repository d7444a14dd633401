"""Unit tests for LineAPIClient request building and error handling."""

from unittest.mock import Mock, patch

import pytest
import requests

from line_api import LineAPIClient, LineAPIError, LineUser
from line_api.api.models import APIResponse


def make_response(status_code=200, json_data=None, text=""):
    response = Mock()
    response.status_code = status_code
    response.headers = {"X-Line-Request-Id": "req-123"}
    if json_data is None:
        response.content = b""
        response.json.side_effect = ValueError("no json")
    else:
        response.content = b"{...}"
        response.json.return_value = json_data
    response.text = text
    return response


@pytest.fixture
def api_client():
    client = LineAPIClient(channel_access_token="secret-token", base_url="https://api.line.me/")
    yield client
    client.close()


@pytest.fixture
def mock_post(api_client):
    with patch.object(api_client.session, "post", return_value=make_response(json_data={})) as post:
        yield post


def sent_payload(mock_post):
    return mock_post.call_args.kwargs["json"]


class TestRequests:
    """Test the low level request helpers."""

    def test_base_url_trailing_slash_is_removed(self, api_client):
        assert api_client.base_url == "https://api.line.me"

    def test_post_sends_auth_and_json_headers(self, api_client, mock_post):
        api_client.post("/v2/bot/message/push", payload={"to": "U1", "messages": []})

        args, kwargs = mock_post.call_args
        assert args[0] == "https://api.line.me/v2/bot/message/push"
        assert kwargs["headers"]["Authorization"] == "Bearer secret-token"
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert kwargs["timeout"] == 15

    def test_get_has_no_content_type(self, api_client):
        with patch.object(api_client.session, "get", return_value=make_response(json_data={})) as get:
            api_client.get("/v2/bot/info")

        headers = get.call_args.kwargs["headers"]
        assert "Content-Type" not in headers
        assert headers["Authorization"] == "Bearer secret-token"

    def test_custom_headers_take_precedence(self, api_client, mock_post):
        api_client.post("/v2/bot/message/push", payload={}, headers={"X-Line-Retry-Key": "abc"})

        assert mock_post.call_args.kwargs["headers"]["X-Line-Retry-Key"] == "abc"

    def test_error_status_raises_line_api_error(self, api_client):
        error = make_response(status_code=400, json_data={"message": "Invalid reply token"})
        with patch.object(api_client.session, "post", return_value=error):
            with pytest.raises(LineAPIError) as exc_info:
                api_client.reply_text("token", "hi")

        assert exc_info.value.status_code == 400
        assert exc_info.value.details == {"message": "Invalid reply token"}
        assert "Invalid reply token" in str(exc_info.value)

    def test_error_with_non_json_body(self, api_client):
        error = make_response(status_code=502, text="Bad Gateway")
        with patch.object(api_client.session, "post", return_value=error):
            with pytest.raises(LineAPIError) as exc_info:
                api_client.push_text("U1", "hi")

        assert exc_info.value.status_code == 502
        assert exc_info.value.details == {"body": "Bad Gateway"}

    def test_network_errors_propagate(self, api_client):
        with patch.object(api_client.session, "post", side_effect=requests.exceptions.ConnectionError("down")):
            with pytest.raises(requests.exceptions.ConnectionError):
                api_client.push_text("U1", "hi")

    def test_context_manager_closes_session(self):
        client = LineAPIClient(channel_access_token="t")
        with patch.object(client.session, "close") as close:
            with client as entered:
                assert entered is client
            close.assert_called_once()


class TestMessaging:
    """Test reply/push payloads for every message kind."""

    def test_reply_text(self, api_client, mock_post):
        result = api_client.reply_text("reply-token", "hello")

        assert mock_post.call_args.args[0] == "https://api.line.me/v2/bot/message/reply"
        assert sent_payload(mock_post) == {
            "replyToken": "reply-token",
            "messages": [{"type": "text", "text": "hello"}],
        }
        assert isinstance(result, APIResponse)
        assert result.success is True
        assert result.request_id == "req-123"

    def test_push_text(self, api_client, mock_post):
        api_client.push_text("U1", "hello")

        assert mock_post.call_args.args[0] == "https://api.line.me/v2/bot/message/push"
        assert sent_payload(mock_post) == {
            "to": "U1",
            "messages": [{"type": "text", "text": "hello"}],
        }

    def test_image_preview_defaults_to_content_url(self, api_client, mock_post):
        api_client.push_image("U1", "https://example.com/a.jpg")

        assert sent_payload(mock_post)["messages"] == [{
            "type": "image",
            "originalContentUrl": "https://example.com/a.jpg",
            "previewImageUrl": "https://example.com/a.jpg",
        }]

    def test_video_and_audio(self, api_client, mock_post):
        api_client.reply_video("t", "https://example.com/a.mp4", "https://example.com/a.jpg")
        assert sent_payload(mock_post)["messages"][0] == {
            "type": "video",
            "originalContentUrl": "https://example.com/a.mp4",
            "previewImageUrl": "https://example.com/a.jpg",
        }

        api_client.push_audio("U1", "https://example.com/a.m4a", 240000)
        assert sent_payload(mock_post)["messages"][0] == {
            "type": "audio",
            "originalContentUrl": "https://example.com/a.m4a",
            "duration": 240000,
        }

    def test_location(self, api_client, mock_post):
        api_client.reply_location("t", "Office", "Tokyo", 35.68, 139.76)

        assert sent_payload(mock_post)["messages"][0] == {
            "type": "location",
            "title": "Office",
            "address": "Tokyo",
            "latitude": 35.68,
            "longitude": 139.76,
        }

    def test_sticker_ids_are_strings(self, api_client, mock_post):
        api_client.push_sticker("U1", 446, 1988)

        assert sent_payload(mock_post)["messages"][0] == {
            "type": "sticker",
            "packageId": "446",
            "stickerId": "1988",
        }

    def test_imagemap(self, api_client, mock_post):
        actions = [{"type": "uri", "linkUri": "https://example.com", "area": {"x": 0, "y": 0, "width": 520, "height": 1040}}]
        api_client.reply_imagemap("t", "imagemap", "https://example.com/rm001", 1040, 1040, actions)

        assert sent_payload(mock_post)["messages"][0] == {
            "type": "imagemap",
            "baseUrl": "https://example.com/rm001",
            "altText": "imagemap",
            "baseSize": {"width": 1040, "height": 1040},
            "actions": actions,
        }

    def test_button_template(self, api_client, mock_post):
        actions = [{"type": "postback", "label": "Buy", "data": "action=buy"}]
        api_client.push_button_template(
            "U1", "buttons", "Please select", actions,
            title="Menu", thumbnail_image_url="https://example.com/t.jpg"
        )

        assert sent_payload(mock_post)["messages"][0] == {
            "type": "template",
            "altText": "buttons",
            "template": {
                "type": "buttons",
                "thumbnailImageUrl": "https://example.com/t.jpg",
                "title": "Menu",
                "text": "Please select",
                "actions": actions,
            },
        }

    def test_button_template_optional_fields_are_omitted(self, api_client, mock_post):
        api_client.reply_button_template("t", "buttons", "Please select", [])

        template = sent_payload(mock_post)["messages"][0]["template"]
        assert template == {"type": "buttons", "text": "Please select", "actions": []}

    def test_confirm_template(self, api_client, mock_post):
        actions = [{"type": "message", "label": "Yes", "text": "yes"}, {"type": "message", "label": "No", "text": "no"}]
        api_client.reply_confirm_template("t", "confirm", "Are you sure?", actions)

        assert sent_payload(mock_post)["messages"][0]["template"] == {
            "type": "confirm",
            "text": "Are you sure?",
            "actions": actions,
        }

    def test_carousel_templates(self, api_client, mock_post):
        columns = [{"text": "one", "actions": []}]
        api_client.push_carousel_template("U1", "carousel", columns)
        assert sent_payload(mock_post)["messages"][0] == {
            "type": "template",
            "altText": "carousel",
            "template": {"type": "carousel", "columns": columns},
        }

        image_columns = [{"imageUrl": "https://example.com/1.jpg", "action": {"type": "uri", "uri": "https://example.com"}}]
        api_client.reply_image_carousel_template("t", "image carousel", image_columns)
        assert sent_payload(mock_post)["messages"][0]["template"] == {
            "type": "image_carousel",
            "columns": image_columns,
        }

    def test_push_message_accepts_list(self, api_client, mock_post):
        messages = [{"type": "text", "text": "a"}, {"type": "text", "text": "b"}]
        api_client.push_message("U1", messages)

        assert sent_payload(mock_post)["messages"] == messages


class TestProfile:
    """Test user profile lookup."""

    def test_get_user_profile(self, api_client):
        profile = {
            "userId": "U1",
            "displayName": "LINE taro",
            "pictureUrl": "https://profile.line-scdn.net/abc",
            "statusMessage": "Hello, LINE!",
            "language": "en",
        }
        with patch.object(api_client.session, "get", return_value=make_response(json_data=profile)) as get:
            user = api_client.get_user_profile("U1")

        assert get.call_args.args[0] == "https://api.line.me/v2/bot/profile/U1"
        assert user == LineUser(
            id="U1",
            displayName="LINE taro",
            pictureUrl="https://profile.line-scdn.net/abc",
            statusMessage="Hello, LINE!",
            language="en",
        )
