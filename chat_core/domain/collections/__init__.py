"""
COLLECTIONS - Typed containers used inside aggregates
"""

from chat_core.domain.collections.typed_collection import TypedCollection

__all__ = ["TypedCollection"]
