"""Immutable insertion-ordered set.

`OrderedSet` keeps elements in the order they were first seen and silently
drops later duplicates. It is a read-only `collections.abc.Set`, so equality
with other sets (including built-in `set` and `frozenset`) ignores order,
while iteration and `repr` follow insertion order.
"""

from collections.abc import Iterable, Iterator, Set
from typing import Any, Generic, TypeVar, overload

E = TypeVar("E")


class OrderedSet(Set, Generic[E]):
    """A frozen set that remembers insertion order."""

    __slots__ = ("_items",)

    def __init__(self, iterable: Iterable[E] = ()) -> None:
        # dict keys preserve first-seen order and collapse duplicates
        self._items: dict[E, None] = dict.fromkeys(iterable)

    @classmethod
    def _from_iterable(cls, it: Iterable[Any]) -> "OrderedSet[Any]":
        # used by the Set mixin methods (|, &, -, ^)
        return cls(it)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[E]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> E: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[E, ...]: ...
    def __getitem__(self, index: int | slice) -> E | tuple[E, ...]:
        """Return the element(s) at the given insertion position."""
        return tuple(self._items)[index]

    def __hash__(self) -> int:
        return self._hash()

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_items"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):  # pickle by content
        return (type(self), (list(self._items),))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"
