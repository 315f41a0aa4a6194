"""
Messenger

Collects status messages for the current request, in the order they were
added. One instance per request; nothing is shared between requests.
"""

from typing import List, Tuple

STATUS = "status"


class Messenger:
    def __init__(self):
        self._messages: List[Tuple[str, str]] = []

    def add_message(self, message: str, message_type: str = STATUS):
        self._messages.append((message_type, message))

    def add_status(self, message: str):
        self.add_message(message, STATUS)

    def all(self) -> List[dict]:
        return [{"type": t, "message": m} for t, m in self._messages]

    def delete_all(self) -> List[dict]:
        """Return and clear all pending messages."""
        messages = self.all()
        self._messages.clear()
        return messages
