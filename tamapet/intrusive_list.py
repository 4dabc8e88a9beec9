"""Doubly linked list whose links live inside the elements themselves."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, Optional, TypeVar


class ListElement:
    """Mixin that lets an object be a member of one IntrusiveList at a time."""

    def __init__(self) -> None:
        self._prev: ListElement = self
        self._next: ListElement = self

    def is_linked(self) -> bool:
        return self._next is not self

    def unlink(self) -> None:
        """Remove this element from whatever list it is in."""
        self._prev._next = self._next
        self._next._prev = self._prev
        self._prev = self._next = self

    @staticmethod
    def _link(first: ListElement, second: ListElement) -> None:
        first._next = second
        second._prev = first


T = TypeVar("T", bound=ListElement)


class IntrusiveList(Generic[T]):
    """Ordered list of ListElement objects; adding an element moves it here."""

    def __init__(self) -> None:
        self._bound = ListElement()

    def _nodes(self, forward: bool) -> Iterator[T]:
        node = self._bound._next if forward else self._bound._prev
        while node is not self._bound:
            following = node._next if forward else node._prev
            yield node  # type: ignore[misc]
            node = following

    def __iter__(self) -> Iterator[T]:
        return self._nodes(True)

    def __reversed__(self) -> Iterator[T]:
        return self._nodes(False)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return not self.empty()

    def empty(self) -> bool:
        return self._bound._next is self._bound

    def front(self) -> T:
        if self.empty():
            raise IndexError("front of empty list")
        return self._bound._next  # type: ignore[return-value]

    def back(self) -> T:
        if self.empty():
            raise IndexError("back of empty list")
        return self._bound._prev  # type: ignore[return-value]

    def insert(self, before: Optional[T], value: T) -> T:
        """Insert ``value`` ahead of ``before``; ``None`` means at the end."""
        anchor = self._bound if before is None else before
        if value is not anchor:
            value.unlink()
            ListElement._link(anchor._prev, value)
            ListElement._link(value, anchor)
        return value

    def push_front(self, value: T) -> None:
        self.insert(None if self.empty() else self.front(), value)

    def push_back(self, value: T) -> None:
        self.insert(None, value)

    def pop_front(self) -> T:
        value = self.front()
        value.unlink()
        return value

    def pop_back(self) -> T:
        value = self.back()
        value.unlink()
        return value

    def erase(self, value: T) -> Optional[T]:
        """Remove ``value`` and return the element that followed it, if any."""
        following = value._next
        value.unlink()
        if following is self._bound or following is value:
            return None
        return following  # type: ignore[return-value]

    def clear(self) -> None:
        for node in list(self):
            node.unlink()