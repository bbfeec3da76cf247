"""
TypedCollection - Ordered, type-checked list of domain values.

One generic collection replaces a hand-written class per element type:
the element type is checked on every insert, and `key` extracts the value
used to compare elements in delete() and contains().

A criterion passed to delete()/contains() may be an element (its key is
extracted) or a raw key, e.g. a user id string for a collection of UserId.
Insertion order is kept and nothing is deduplicated; aggregates call
contains() before append() when they need uniqueness.
"""

from __future__ import annotations
from typing import Any, Callable, Generic, Hashable, Iterable, Iterator, Optional, TypeVar

from chat_core.domain.exceptions import DomainLogicError

T = TypeVar("T")
R = TypeVar("R")


class TypedCollection(Generic[T]):
    def __init__(
        self,
        element_type: type[T],
        key: Callable[[T], Hashable],
        items: Optional[Iterable[T]] = None,
    ):
        self._element_type = element_type
        self._key = key
        self._items: list[T] = []
        if items is not None:
            self.set(items)

    def _ensure_is_correct_instance(self, value: Any) -> None:
        if not isinstance(value, self._element_type):
            raise DomainLogicError(
                f"value must be instance of {self._element_type.__name__}, "
                f"got {type(value).__name__}"
            )

    def _criterion_key(self, criterion: Any) -> Hashable:
        if isinstance(criterion, self._element_type):
            return self._key(criterion)
        return criterion

    def set(self, items: Iterable[T]) -> None:
        items = list(items)
        for item in items:
            self._ensure_is_correct_instance(item)
        self._items = items

    def append(self, value: T) -> None:
        self._ensure_is_correct_instance(value)
        self._items.append(value)

    def prepend(self, value: T) -> None:
        self._ensure_is_correct_instance(value)
        self._items.insert(0, value)

    def delete(self, criterion: Any) -> bool:
        """Remove the first element matching criterion. Returns False if none matched."""
        wanted = self._criterion_key(criterion)
        for index, item in enumerate(self._items):
            if self._key(item) == wanted:
                del self._items[index]
                return True
        return False

    def contains(self, criterion: Any) -> bool:
        wanted = self._criterion_key(criterion)
        return any(self._key(item) == wanted for item in self._items)

    def count(self) -> int:
        return len(self._items)

    def map(self, fn: Callable[[T], R]) -> list[R]:
        return [fn(item) for item in self._items]

    def filter(self, fn: Callable[[T], bool]) -> list[T]:
        return [item for item in self._items if fn(item)]

    def keys(self) -> list[Hashable]:
        return self.map(self._key)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __contains__(self, criterion: Any) -> bool:
        return self.contains(criterion)

    def __repr__(self) -> str:
        return f"TypedCollection[{self._element_type.__name__}]({self._items!r})"
