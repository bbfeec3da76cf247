"""
Event Publisher Port - Interface for delivering domain events.
"""

from abc import ABC, abstractmethod

from chat_core.domain.events import Event


class EventPublisherPort(ABC):
    @abstractmethod
    async def publish(self, events: list[Event]) -> None: ...
