"""
Event - Base class for domain events.

Entities record events while they change; the application layer drains them
with Entity.pull_events() and hands them to an EventPublisherPort.
"""

from abc import ABC, abstractmethod
from typing import Any


class Event(ABC):
    DATE_FORMAT = "%Y-%m-%d %H:%M"

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def payload(self) -> dict[str, Any]:
        """Flat mapping of primitive fields."""
        ...

    def get_payload(self) -> dict[str, Any]:
        return self.payload()
