"""User commands."""

from .create_user import CreateUserCommand, CreateUserHandler
from .update_user import UpdateUserCommand, UpdateUserHandler

__all__ = [
    "CreateUserCommand",
    "CreateUserHandler",
    "UpdateUserCommand",
    "UpdateUserHandler",
]
