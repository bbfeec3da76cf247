"""User DTOs for API responses."""

from __future__ import annotations
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from chat_core.domain.entities import User


class UserDTO(BaseModel):
    id: str
    name: str
    first_last_name: str
    second_last_name: Optional[str] = None
    full_name: str
    email: str
    can_exec_commands: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls(
            id=user.id,
            name=user.name,
            first_last_name=user.first_last_name,
            second_last_name=user.second_last_name,
            full_name=user.full_name,
            email=user.email,
            can_exec_commands=user.can_exec_commands,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
