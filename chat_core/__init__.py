"""chat_core - domain layer for users, chat rooms and messages."""

__version__ = "0.1.0"
