"""
User Entity - A chat participant.
"""

from __future__ import annotations
from datetime import datetime
from typing import Optional

from chat_core.domain.entities.entity import Entity, utc_now
from chat_core.domain.exceptions import (
    DomainLogicError,
    InvalidArgumentError,
    UserCreationError,
)
from chat_core.domain.value_objects import (
    DateTimeValueObject,
    UserCanExecCommands,
    UserEmail,
    UserFirstLastName,
    UserId,
    UserName,
    UserSecondLastName,
)


class User(Entity):
    LABEL = "User"

    def __init__(self):
        super().__init__()
        self._id: Optional[UserId] = None
        self._name: Optional[UserName] = None
        self._first_last_name: Optional[UserFirstLastName] = None
        self._second_last_name: Optional[UserSecondLastName] = None
        self._email: Optional[UserEmail] = None
        self._can_exec_commands: Optional[UserCanExecCommands] = None
        self._created_at: Optional[DateTimeValueObject] = None

    # ==================== SETTERS ====================

    def set_id(self, id: str) -> User:
        self._id = UserId(id)
        return self

    def set_name(self, name: str) -> User:
        self._name = UserName(self._trim(name))
        return self

    def set_first_last_name(self, first_last_name: str) -> User:
        self._first_last_name = UserFirstLastName(self._trim(first_last_name))
        return self

    def set_second_last_name(self, second_last_name: Optional[str]) -> User:
        self._second_last_name = UserSecondLastName(self._trim(second_last_name))
        return self

    def set_email(self, email: str) -> User:
        self._email = UserEmail(self._trim(email))
        return self

    def set_can_exec_commands(self, can_exec_commands: bool) -> User:
        self._can_exec_commands = UserCanExecCommands(can_exec_commands)
        return self

    def set_created_at(self, created_at: datetime) -> User:
        self._created_at = DateTimeValueObject(created_at)
        return self

    def set_updated_at(self, updated_at: datetime) -> User:
        self._updated_at = DateTimeValueObject(updated_at)
        return self

    # ==================== GETTERS ====================

    @property
    def id(self) -> str:
        return self._require("id").value

    @property
    def name(self) -> str:
        return self._require("name").value

    @property
    def first_last_name(self) -> str:
        return self._require("first_last_name").value

    @property
    def second_last_name(self) -> Optional[str]:
        return self._require("second_last_name").value

    @property
    def full_name(self) -> str:
        unset_fields = [
            field
            for field in ("name", "first_last_name", "second_last_name")
            if getattr(self, f"_{field}") is None
        ]
        if unset_fields:
            raise DomainLogicError(
                "Cannot retrieve full name without setting " + ", ".join(unset_fields)
            )

        return f"{self._name} {self._first_last_name} {self._second_last_name}".strip()

    @property
    def email(self) -> str:
        return self._require("email").value

    @property
    def can_exec_commands(self) -> bool:
        return self._require("can_exec_commands").value

    @property
    def created_at(self) -> datetime:
        return self._require("created_at").value

    @property
    def updated_at(self) -> datetime:
        return self._require("updated_at").value

    # ==================== UPDATE ====================

    def update_name(self, name: str, is_bulk_update: bool = False) -> User:
        self.set_name(name)
        if not is_bulk_update:
            self._perform_update()
        return self

    def update_first_last_name(
        self, first_last_name: str, is_bulk_update: bool = False
    ) -> User:
        self.set_first_last_name(first_last_name)
        if not is_bulk_update:
            self._perform_update()
        return self

    def update_second_last_name(
        self, second_last_name: Optional[str], is_bulk_update: bool = False
    ) -> User:
        self.set_second_last_name(second_last_name)
        if not is_bulk_update:
            self._perform_update()
        return self

    def update_email(self, email: str, is_bulk_update: bool = False) -> User:
        self.set_email(email)
        if not is_bulk_update:
            self._perform_update()
        return self

    def update_can_exec_commands(
        self, can_exec_commands: bool, is_bulk_update: bool = False
    ) -> User:
        self.set_can_exec_commands(can_exec_commands)
        if not is_bulk_update:
            self._perform_update()
        return self

    def bulk_update(
        self,
        name: Optional[str] = None,
        first_last_name: Optional[str] = None,
        second_last_name: Optional[str] = None,
        email: Optional[str] = None,
        can_exec_commands: Optional[bool] = None,
    ) -> User:
        """
        Update several fields at once, refreshing updated_at a single time.

        None means "leave unchanged", so a second last name cannot be cleared
        here; use update_second_last_name(None) for that.
        """
        if self._all_parameters_are_none(
            name, first_last_name, second_last_name, email, can_exec_commands
        ):
            raise InvalidArgumentError("All parameters cannot be null.")

        if name is not None:
            self.update_name(name, is_bulk_update=True)
        if first_last_name is not None:
            self.update_first_last_name(first_last_name, is_bulk_update=True)
        if second_last_name is not None:
            self.update_second_last_name(second_last_name, is_bulk_update=True)
        if email is not None:
            self.update_email(email, is_bulk_update=True)
        if can_exec_commands is not None:
            self.update_can_exec_commands(can_exec_commands, is_bulk_update=True)

        self._perform_update()
        return self

    # ==================== FACTORIES ====================

    @classmethod
    def create(
        cls,
        name: str,
        first_last_name: str,
        second_last_name: Optional[str],
        email: str,
    ) -> User:
        """Factory method to create a new User with a generated ID and timestamps."""
        user_id = cls._generate_id(UserId, UserCreationError)
        now = utc_now()
        return (
            cls.build()
            .set_id(user_id.value)
            .set_name(name)
            .set_first_last_name(first_last_name)
            .set_second_last_name(second_last_name)
            .set_email(email)
            .set_can_exec_commands(False)
            .set_created_at(now)
            .set_updated_at(now)
        )

    @classmethod
    def restore(
        cls,
        *,
        id: str,
        name: str,
        first_last_name: str,
        second_last_name: Optional[str],
        email: str,
        can_exec_commands: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> User:
        """Rebuild a stored user from primitives, validating every field."""
        return (
            cls.build()
            .set_id(id)
            .set_name(name)
            .set_first_last_name(first_last_name)
            .set_second_last_name(second_last_name)
            .set_email(email)
            .set_can_exec_commands(can_exec_commands)
            .set_created_at(created_at)
            .set_updated_at(updated_at)
        )

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email})"
