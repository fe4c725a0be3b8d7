"""Handles for execution resources and equivalence under resource renaming."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union


def _check_id(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an unsigned integer id, got {value!r}")
    if value < 0:
        raise ValueError(f"id must not be negative, got {value}")
    return value


@dataclass(frozen=True, order=True)
class Stream:
    """Handle for a GPU stream; id 0 is the default stream."""

    id: int = 0

    def to_json(self) -> int:
        return self.id

    @classmethod
    def from_json(cls, value: object) -> "Stream":
        return cls(_check_id(value))

    def __str__(self) -> str:
        return str(self.id)


@dataclass(frozen=True, order=True)
class Event:
    """Handle for a GPU event."""

    id: int = 0

    def to_json(self) -> int:
        return self.id

    @classmethod
    def from_json(cls, value: object) -> "Event":
        return cls(_check_id(value))

    def __int__(self) -> int:
        return self.id

    def __str__(self) -> str:
        return str(self.id)


T = TypeVar("T")


@dataclass
class _Bijection(Generic[T]):
    forward: dict = field(default_factory=dict)
    backward: dict = field(default_factory=dict)

    def check_or_insert(self, a: T, b: T) -> bool:
        if a in self.forward:
            return self.forward[a] == b
        if b in self.backward:
            return False
        self.forward[a] = b
        self.backward[b] = a
        return True

    def __str__(self) -> str:
        pairs = ", ".join(f"{a}->{b}" for a, b in sorted(self.forward.items()))
        return "{" + pairs + "}"


Resource = Union[Stream, Event]


class Equivalence:
    """Whether two things are equal under some renaming of streams and events."""

    def __init__(self, truthy: bool = True) -> None:
        self._truthy = truthy
        self._streams: _Bijection[Stream] = _Bijection()
        self._events: _Bijection[Event] = _Bijection()

    def __bool__(self) -> bool:
        return self._truthy

    def check_or_insert(self, a: Resource, b: Resource) -> bool:
        """Map ``a`` to ``b`` if neither is mapped yet, else check the mapping holds."""
        if isinstance(a, Stream) and isinstance(b, Stream):
            return self._streams.check_or_insert(a, b)
        if isinstance(a, Event) and isinstance(b, Event):
            return self._events.check_or_insert(a, b)
        raise TypeError(
            f"cannot relate {type(a).__name__} and {type(b).__name__}"
        )

    @classmethod
    def falsy(cls) -> "Equivalence":
        return cls(False)

    def __str__(self) -> str:
        if not self._truthy:
            return "not equivalent"
        return f"streams: {self._streams} events: {self._events}"