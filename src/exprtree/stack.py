from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

from .errors import StackUnderflowError

T = TypeVar("T")


class Stack(Generic[T]):
    """A LIFO container whose pop and peek fail loudly when empty.

    A stack belongs to one owner at a time; it is not thread-safe.
    """

    def __init__(self, items: Iterable[T] = (), name: str = "") -> None:
        self._name = name
        self._items: list[T] = list(items)

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise StackUnderflowError(f"pop from empty stack {self._name}".strip())
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise StackUnderflowError(f"peek at empty stack {self._name}".strip())
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        # bottom to top
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._name!r}, {self._items!r})"
