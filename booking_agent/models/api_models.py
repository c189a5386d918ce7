"""
API Request/Response Models
"""

from pydantic import BaseModel
from typing import Any, Dict, List, Optional


class ToolRunRequest(BaseModel):
    """Playground tool invocation"""
    
    tool: Optional[str] = None
    input: Optional[Dict[str, Any]] = None
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "tool": "initiate_booking",
                "input": {"memberName": "Ana", "travelType": "cruise", "travelers": 2}
            }
        }
    }


class ToolCallRequest(BaseModel):
    """Tool call sent by the video agent runtime"""
    
    conversation_id: Optional[str] = None
    tool_call_id: Optional[str] = None
    tool_name: Optional[str] = None
    tool_input: Optional[Dict[str, Any]] = None
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "conversation_id": "c123",
                "tool_call_id": "call_1",
                "tool_name": "search_inventory",
                "tool_input": {"sessionId": "abc", "filters": {"destination": "caribbean"}}
            }
        }
    }


class ToolCallResponse(BaseModel):
    """Tool result in the shape the agent runtime expects"""
    
    tool_call_id: str
    result: Dict[str, Any]


class PollResponse(BaseModel):
    """Drained UI actions for one conversation"""
    
    actions: List[Dict[str, Any]]


class ConversationRequest(BaseModel):
    """Visitor details for starting an agent conversation"""
    
    name: Optional[str] = None
    reason: Optional[str] = None
