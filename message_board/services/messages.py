"""In-memory MessageStore holding every message posted during the process lifetime."""
from __future__ import annotations

from threading import Lock
from typing import Dict, List, Optional
import time

REQUIRED_FIELDS_MESSAGE = "Поля text и senderName обязательны"


class MissingFieldError(ValueError):
    """Raised when ``text`` or ``senderName`` is absent or empty."""

    def __init__(self, message: str = REQUIRED_FIELDS_MESSAGE) -> None:
        super().__init__(message)


def _is_filled(value: object) -> bool:
    return isinstance(value, str) and value != ""


class MessageStore:
    """Append-only, insertion-ordered message list.

    Ids come from a nanosecond clock that is forced to move forward on every
    append, so ids are unique within a store and ``timestamp`` (milliseconds)
    never decreases even if the wall clock is stepped back.
    """

    def __init__(self, clock=time.time_ns) -> None:
        self._messages: List[Dict[str, object]] = []
        self._lock = Lock()
        self._clock = clock
        self._last_ns: Optional[int] = None

    def add(self, text: str, sender_name: str) -> Dict[str, object]:
        if not (_is_filled(text) and _is_filled(sender_name)):
            raise MissingFieldError()

        with self._lock:
            created_ns = self._clock()
            if self._last_ns is not None and created_ns <= self._last_ns:
                created_ns = self._last_ns + 1
            self._last_ns = created_ns

            item = {
                "id": str(created_ns),
                "text": text,
                "senderName": sender_name,
                "timestamp": created_ns // 1_000_000,
            }
            self._messages.append(item)
        return item

    def list(self) -> List[Dict[str, object]]:
        with self._lock:
            return list(self._messages)

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)
