# booking_agent/services/conversation_service.py
"""
Conversation Service - Starts agent conversations with Tavus and Retell
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from config import (
    TAVUS_API_KEY,
    TAVUS_PERSONA_ID,
    TAVUS_API_URL,
    TAVUS_CALLBACK_URL,
    RETELL_API_KEY,
    RETELL_INBOUND_AGENT_ID,
    RETELL_OUTBOUND_AGENT_ID,
    RETELL_API_URL
)
from ..config.settings import (
    CONVERSATION_SETTINGS,
    RETELL_INBOUND_VARIABLES,
    RETELL_OUTBOUND_VARIABLES
)
from ..errors import ConversationServiceError
from ..utils.helpers import Helpers

logger = logging.getLogger(__name__)


class TavusService:
    """Creates Tavus video conversations wired to the tool callback"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        persona_id: Optional[str] = None,
        callback_url: Optional[str] = None,
        api_url: Optional[str] = None
    ):
        self.api_key = api_key or TAVUS_API_KEY
        self.persona_id = persona_id or TAVUS_PERSONA_ID
        self.callback_url = callback_url or TAVUS_CALLBACK_URL
        self.api_url = (api_url or TAVUS_API_URL).rstrip("/")
        self.timeout = CONVERSATION_SETTINGS["request_timeout"]

        if not self.api_key:
            logger.warning("TAVUS_API_KEY not found in environment")

    def _headers(self) -> Dict[str, str]:
        return {"x-api-key": self.api_key or "", "Content-Type": "application/json"}

    def end_active_conversations(self) -> int:
        """
        End active conversations for our persona

        Tavus caps concurrent conversations, so stale ones are closed before
        a new one starts. Failures here are logged and never block creation.
        """
        ended = 0
        try:
            response = requests.get(
                f"{self.api_url}/conversations",
                params={"status": "active"},
                headers=self._headers(),
                timeout=self.timeout
            )
            for conversation in _conversation_list(response.json()):
                if conversation.get("persona_id") != self.persona_id:
                    continue
                requests.post(
                    f"{self.api_url}/conversations/{conversation['conversation_id']}/end",
                    headers=self._headers(),
                    timeout=self.timeout
                )
                ended += 1
        except (requests.RequestException, ValueError, KeyError) as e:
            logger.warning(f"Tavus cleanup skipped: {e}")

        if ended:
            logger.info(f"Ended {ended} active Tavus conversation(s)")
        return ended

    def create_conversation(self, name: Optional[str] = None, reason: Optional[str] = None) -> Dict[str, Any]:
        """Start a conversation greeting the visitor by name"""
        visitor_name = name or "there"
        visitor_reason = reason or "exploring travel options"
        context = (
            f"The visitor's name is {visitor_name}. They reached out because: {visitor_reason}. "
            "Greet them by name and acknowledge why they're reaching out."
        )

        self.end_active_conversations()

        payload = {
            "persona_id": self.persona_id,
            "conversation_name": f"Booking Demo - {name or 'Guest'} - {Helpers.get_timestamp()}",
            "conversational_context": context,
            "callback_url": self.callback_url,
            "properties": {
                "max_call_duration": CONVERSATION_SETTINGS["max_call_duration"],
                "enable_recording": CONVERSATION_SETTINGS["enable_recording"],
                "enable_transcription": CONVERSATION_SETTINGS["enable_transcription"],
                "language": CONVERSATION_SETTINGS["language"]
            }
        }

        try:
            response = requests.post(
                f"{self.api_url}/conversations",
                headers=self._headers(),
                json=payload,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Tavus API failure: {e}")
            raise ConversationServiceError("tavus", str(e))

        return _parse_response("tavus", response)


class RetellService:
    """Creates Retell web calls for the inbound and outbound agents"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        inbound_agent_id: Optional[str] = None,
        outbound_agent_id: Optional[str] = None,
        api_url: Optional[str] = None
    ):
        self.api_key = api_key or RETELL_API_KEY
        self.inbound_agent_id = inbound_agent_id or RETELL_INBOUND_AGENT_ID
        self.outbound_agent_id = outbound_agent_id or RETELL_OUTBOUND_AGENT_ID
        self.api_url = (api_url or RETELL_API_URL).rstrip("/")
        self.timeout = CONVERSATION_SETTINGS["request_timeout"]

        if not self.api_key:
            logger.warning("RETELL_API_KEY not found in environment")

    def create_inbound_call(self) -> Dict[str, Any]:
        return self._create_web_call(self.inbound_agent_id, dict(RETELL_INBOUND_VARIABLES))

    def create_outbound_call(self, name: Optional[str] = None) -> Dict[str, Any]:
        variables = dict(RETELL_OUTBOUND_VARIABLES)
        if name:
            variables["member_name"] = name
        return self._create_web_call(self.outbound_agent_id, variables)

    def _create_web_call(self, agent_id: Optional[str], variables: Dict[str, str]) -> Dict[str, Any]:
        try:
            response = requests.post(
                f"{self.api_url}/create-web-call",
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json"
                },
                json={
                    "agent_id": agent_id,
                    "retell_llm_dynamic_variables": variables
                },
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Retell API failure: {e}")
            raise ConversationServiceError("retell", str(e))

        return _parse_response("retell", response)


def _conversation_list(body: Any) -> List[Dict[str, Any]]:
    """Conversation dicts from a listing body that is a list or {"data": [...]}"""
    if isinstance(body, dict):
        body = body.get("data")
    if not isinstance(body, list):
        return []
    return [item for item in body if isinstance(item, dict)]


def _parse_response(service: str, response: requests.Response) -> Dict[str, Any]:
    if not response.ok:
        logger.error(f"{service} API failed: {response.status_code} - {response.text}")
        raise ConversationServiceError(service, f"HTTP {response.status_code}: {response.text}")

    try:
        return response.json()
    except ValueError as e:
        raise ConversationServiceError(service, f"Invalid JSON response: {e}")
