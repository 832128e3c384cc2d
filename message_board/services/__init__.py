"""Services package for the Message Board application.

- MessageStore: in-memory message storage and retrieval
- MissingFieldError: raised when a message lacks text or sender name
"""

from .messages import REQUIRED_FIELDS_MESSAGE, MessageStore, MissingFieldError

__all__ = [
    "MessageStore",
    "MissingFieldError",
    "REQUIRED_FIELDS_MESSAGE",
]
