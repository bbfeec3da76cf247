"""
PORTS - Abstract collaborators the application layer talks to

Handlers receive these through their constructors. Persistence and event
delivery live outside this package; tests use in-memory fakes.

- repositories/       load and save aggregates
- event_publisher.py  hand drained domain events to whoever listens
"""

from chat_core.domain.ports.event_publisher import EventPublisherPort

__all__ = ["EventPublisherPort"]
