"""
Booking engine module
"""
from .dispatcher import ToolDispatcher, ToolResult
from .state_manager import StateManager

__all__ = [
    "ToolDispatcher",
    "ToolResult",
    "StateManager",
]
