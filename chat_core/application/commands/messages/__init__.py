"""Message commands."""

from .send_text_message import SendTextMessageCommand, SendTextMessageHandler
from .edit_text_message import EditTextMessageCommand, EditTextMessageHandler
from .mark_message_as_viewed import (
    MarkMessageAsViewedCommand,
    MarkMessageAsViewedHandler,
)

__all__ = [
    "SendTextMessageCommand",
    "SendTextMessageHandler",
    "EditTextMessageCommand",
    "EditTextMessageHandler",
    "MarkMessageAsViewedCommand",
    "MarkMessageAsViewedHandler",
]
