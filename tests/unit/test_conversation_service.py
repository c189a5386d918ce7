"""Unit tests for the Tavus and Retell clients with requests patched out."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from booking_agent.errors import ConversationServiceError
from booking_agent.services.conversation_service import RetellService, TavusService


def _response(status=200, body=None):
    response = MagicMock()
    response.ok = status < 400
    response.status_code = status
    response.text = str(body)
    response.json.return_value = body
    return response


@pytest.fixture
def tavus():
    return TavusService(
        api_key="key",
        persona_id="p_1",
        callback_url="https://example.com/api/execute",
        api_url="https://tavus.test/v2/",
    )


@pytest.fixture
def retell():
    return RetellService(
        api_key="key",
        inbound_agent_id="agent_in",
        outbound_agent_id="agent_out",
        api_url="https://retell.test/v2",
    )


class TestTavusService:
    def test_ends_only_own_active_conversations(self, tavus):
        listing = _response(body={"data": [
            {"conversation_id": "c1", "persona_id": "p_1"},
            {"conversation_id": "c2", "persona_id": "p_other"},
        ]})

        with patch("booking_agent.services.conversation_service.requests") as mock_requests:
            mock_requests.get.return_value = listing

            ended = tavus.end_active_conversations()

        assert ended == 1
        mock_requests.post.assert_called_once()
        assert mock_requests.post.call_args[0][0] == "https://tavus.test/v2/conversations/c1/end"

    def test_cleanup_failure_does_not_raise(self, tavus):
        with patch("booking_agent.services.conversation_service.requests.get") as mock_get:
            mock_get.side_effect = requests.ConnectionError("down")

            assert tavus.end_active_conversations() == 0

    @pytest.mark.parametrize(
        "body",
        ["Unauthorized", {"data": "nope"}, ["c1", None, {"conversation_id": "c3", "persona_id": "p_other"}]],
    )
    def test_cleanup_ignores_unexpected_listing_shapes(self, tavus, body):
        with patch("booking_agent.services.conversation_service.requests.get") as mock_get, \
                patch("booking_agent.services.conversation_service.requests.post") as mock_post:
            mock_get.return_value = _response(body=body)

            assert tavus.end_active_conversations() == 0

        mock_post.assert_not_called()

    def test_create_conversation_survives_string_listing(self, tavus):
        with patch("booking_agent.services.conversation_service.requests.get") as mock_get, \
                patch("booking_agent.services.conversation_service.requests.post") as mock_post:
            mock_get.return_value = _response(status=401, body="Unauthorized")
            mock_post.return_value = _response(body={"conversation_id": "tc_2"})

            result = tavus.create_conversation(name="Ana")

        assert result["conversation_id"] == "tc_2"

    def test_create_conversation_payload(self, tavus):
        created = _response(body={"conversation_id": "tc_1", "conversation_url": "https://tavus.test/c/tc_1"})

        with patch("booking_agent.services.conversation_service.requests.get") as mock_get, \
                patch("booking_agent.services.conversation_service.requests.post") as mock_post:
            mock_get.return_value = _response(body=[])
            mock_post.return_value = created

            result = tavus.create_conversation(name="Ana", reason="a cruise")

        payload = mock_post.call_args.kwargs["json"]
        assert result["conversation_id"] == "tc_1"
        assert payload["persona_id"] == "p_1"
        assert payload["callback_url"] == "https://example.com/api/execute"
        assert "Ana" in payload["conversational_context"]
        assert "a cruise" in payload["conversational_context"]
        assert payload["properties"]["max_call_duration"] == 1200
        assert mock_post.call_args.kwargs["headers"]["x-api-key"] == "key"

    def test_create_conversation_http_error(self, tavus):
        with patch("booking_agent.services.conversation_service.requests.get") as mock_get, \
                patch("booking_agent.services.conversation_service.requests.post") as mock_post:
            mock_get.return_value = _response(body=[])
            mock_post.return_value = _response(status=429, body={"message": "limit"})

            with pytest.raises(ConversationServiceError) as exc_info:
                tavus.create_conversation()

        assert exc_info.value.service == "tavus"
        assert exc_info.value.status_code == 502


class TestRetellService:
    def test_inbound_call_uses_inbound_agent(self, retell):
        with patch("booking_agent.services.conversation_service.requests.post") as mock_post:
            mock_post.return_value = _response(body={"access_token": "tok"})

            result = retell.create_inbound_call()

        body = mock_post.call_args.kwargs["json"]
        assert result == {"access_token": "tok"}
        assert mock_post.call_args[0][0] == "https://retell.test/v2/create-web-call"
        assert body["agent_id"] == "agent_in"
        assert mock_post.call_args.kwargs["headers"]["Authorization"] == "Bearer key"

    def test_outbound_call_overrides_member_name(self, retell):
        with patch("booking_agent.services.conversation_service.requests.post") as mock_post:
            mock_post.return_value = _response(body={"access_token": "tok"})

            retell.create_outbound_call(name="Ana")

        body = mock_post.call_args.kwargs["json"]
        assert body["agent_id"] == "agent_out"
        assert body["retell_llm_dynamic_variables"]["member_name"] == "Ana"

    def test_network_failure(self, retell):
        with patch("booking_agent.services.conversation_service.requests.post") as mock_post:
            mock_post.side_effect = requests.Timeout("slow")

            with pytest.raises(ConversationServiceError):
                retell.create_inbound_call()
