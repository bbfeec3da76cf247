"""
Entity - Base class for aggregates with identity.

Provides:
- a pending-events list drained by pull_events()
- _require(): read a field or fail with DomainLogicError naming it
- _perform_update(): refresh updated_at to the current time
- _generate_id(): id generation with bounded retries
"""

from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Any, Optional, TypeVar

from chat_core.domain.events import Event
from chat_core.domain.exceptions import DomainLogicError, EntityCreationError
from chat_core.domain.value_objects import DateTimeValueObject, UuidValueObject

logger = logging.getLogger(__name__)

MAX_ID_GENERATION_ATTEMPTS = 3

IdT = TypeVar("IdT", bound=UuidValueObject)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Entity:
    # Name used in "<label>'s <field> is not set" messages
    LABEL = "Entity"

    def __init__(self):
        self._events: list[Event] = []
        self._updated_at: Optional[DateTimeValueObject] = None

    @classmethod
    def build(cls):
        """Start assembling an empty entity; populate it with the set_* methods."""
        return cls()

    # ==================== EVENTS ====================

    def pull_events(self) -> list[Event]:
        """Return pending events and clear them."""
        events, self._events = self._events, []
        return events

    def get_events(self) -> list[Event]:
        return self.pull_events()

    def _record(self, event: Event) -> None:
        self._events.append(event)

    # ==================== HELPERS ====================

    def _require(self, field: str) -> Any:
        value = getattr(self, f"_{field}", None)
        if value is None:
            raise DomainLogicError(f"{self.LABEL}'s {field} is not set")
        return value

    def _perform_update(self) -> None:
        self._updated_at = DateTimeValueObject(utc_now())

    @staticmethod
    def _trim(value: Any) -> Any:
        # non-strings pass through so the value object reports them
        return value.strip() if isinstance(value, str) else value

    @staticmethod
    def _all_parameters_are_none(*params: Any) -> bool:
        return all(param is None for param in params)

    @staticmethod
    def _generate_id(
        id_type: type[IdT],
        error_type: type[EntityCreationError],
        attempts: int = MAX_ID_GENERATION_ATTEMPTS,
    ) -> IdT:
        """Generate a new id, retrying when the entropy source fails."""
        last_error: Optional[OSError] = None
        for attempt in range(1, attempts + 1):
            try:
                return id_type.generate()
            except OSError as e:
                last_error = e
                logger.warning(
                    "Failed to generate %s (attempt %d/%d): %s",
                    id_type.__name__,
                    attempt,
                    attempts,
                    e,
                )
        raise error_type(
            f"Failed to generate {id_type.__name__} after {attempts} attempts: {last_error}"
        ) from last_error
