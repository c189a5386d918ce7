"""
Action Queue - Per-conversation UI events for the polling browser
"""

from typing import Any, Dict, List, Optional
import logging
import threading

from ..models.action import ActionType, UIAction

logger = logging.getLogger(__name__)


class ActionQueue:
    """FIFO buckets of UI actions keyed by conversation ID.

    Delivery is at-most-once: ``drain_all`` hands the whole bucket to the
    caller and deletes it.
    """

    def __init__(self):
        self.buckets: Dict[str, List[UIAction]] = {}
        self.lock = threading.RLock()
        self.stats = {
            'pushed': 0,
            'drained': 0
        }

    def push(
        self,
        conversation_id: Optional[str],
        action_type: ActionType,
        data: Dict[str, Any]
    ) -> Optional[UIAction]:
        """Append an action; no-op without a conversation ID"""
        if not conversation_id:
            return None

        action = UIAction(type=action_type, data=data)

        with self.lock:
            self.buckets.setdefault(conversation_id, []).append(action)
            self.stats['pushed'] += 1

        logger.info(f"Queued action: {action.type.value} for conversation {conversation_id}")
        return action

    def drain_all(self, conversation_id: Optional[str]) -> List[UIAction]:
        """Return all queued actions in insertion order and clear the bucket"""
        if not conversation_id:
            return []

        with self.lock:
            actions = self.buckets.pop(conversation_id, [])
            self.stats['drained'] += len(actions)

        if actions:
            logger.info(f"Drained {len(actions)} action(s) for conversation {conversation_id}")

        return actions

    def get_stats(self) -> Dict[str, Any]:
        with self.lock:
            stats = self.stats.copy()
            stats.update({
                'pending_conversations': len(self.buckets),
                'pending_actions': sum(len(bucket) for bucket in self.buckets.values())
            })
            return stats
