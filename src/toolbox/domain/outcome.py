"""Outcome: the result of a business operation.

An `Outcome` is either a `Success` (with or without a value, optionally
carrying the domain events the operation emitted) or a `Failure` (with zero
or more error messages). Operations return one of these instead of raising,
returning None, or filling in out-parameters.

Outcomes are built through the factory classmethods on `Outcome`:

* `Outcome.success(value, *events)` / `Outcome.success_from(value, events)`
  for a success that carries a value,
* `Outcome.void(*events)` / `Outcome.void_from(events)` for a success
  without a value,
* `Outcome.failure(*errors)` / `Outcome.failure_from(errors)` for a failure.

Events and errors are stored in an `OrderedSet`: first-seen order is kept and
duplicates collapse silently. None is never accepted as a value, a collection,
or an element of a collection. Error messages must be `str` and events must be
hashable. Such calls raise `InvalidArgumentError` before anything is built.
Business failures are data and are never raised.

Example:
    ```py
    outcome = Outcome.success(3, OrderPlaced("order-1"))
    match outcome.map(lambda n: n + 1):
        case Success(value, events):
            ...
        case Failure(errors):
            ...
    ```
"""

import abc
import logging
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from toolbox.domain.errors import (
    InvalidArgumentError,
    InvalidElementError,
    MissingArgumentError,
    MissingElementError,
)
from toolbox.domain.events import DomainEvent
from toolbox.domain.ordered_set import OrderedSet

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")
X = TypeVar("X")

NO_EVENTS: OrderedSet[DomainEvent] = OrderedSet()
NO_ERRORS: OrderedSet[str] = OrderedSet()

VOID_HINT = "use Outcome.void() for results without a value"


# ============================================================================
#                           Argument validation
# ============================================================================


def _violation(error: InvalidArgumentError) -> InvalidArgumentError:
    logger.debug("Outcome contract violation: %s", error)
    return error


def _require_value(value: Any) -> None:
    if value is None:
        raise _violation(MissingArgumentError("value", VOID_HINT))


TEXT_TYPES = (str, bytes, bytearray)


def _ordered_unique(
    items: Iterable[X] | None,
    argument: str,
    accepts: Callable[[Any], bool],
    expected: str,
) -> OrderedSet[X]:
    """Validate `items` and copy them into an `OrderedSet`.

    The container is checked first, then every element, and only then is the
    collection built.

    Args:
        items: The elements to copy. Iterated exactly once.
        argument: Name of the argument being validated (for error messages).
        accepts: Predicate every non-None element must satisfy.
        expected: What `accepts` checks for, used in error messages.

    Returns:
        An `OrderedSet` with the elements in first-seen order. A valid
        `OrderedSet` is returned as is.

    Raises:
        MissingArgumentError: If `items` is None.
        InvalidArgumentError: If `items` is a single str/bytes value.
        MissingElementError: If any element of `items` is None.
        InvalidElementError: If any element fails `accepts`.
    """
    if items is None:
        raise _violation(MissingArgumentError(argument))
    if isinstance(items, TEXT_TYPES):
        # iterating text would yield one element per character (or byte)
        raise _violation(
            InvalidArgumentError(
                argument, f"expected a collection, not a single {type(items).__name__}"
            )
        )
    snapshot = items if isinstance(items, OrderedSet) else tuple(items)
    for index, item in enumerate(snapshot):
        if item is None:
            raise _violation(MissingElementError(argument, index))
        if not accepts(item):
            raise _violation(InvalidElementError(argument, index, expected))
    return snapshot if isinstance(snapshot, OrderedSet) else OrderedSet(snapshot)


def _events(items: Iterable[DomainEvent] | None) -> OrderedSet[DomainEvent]:
    return _ordered_unique(
        items, "events", lambda item: isinstance(item, Hashable), "hashable"
    )


def _messages(items: Iterable[str] | None) -> OrderedSet[str]:
    return _ordered_unique(items, "errors", lambda item: isinstance(item, str), "a str")


# ============================================================================
#                               Outcome
# ============================================================================


class Outcome(abc.ABC, Generic[T]):
    """The result of a business operation: a `Success` or a `Failure`.

    Instances are immutable. Two outcomes are equal when they are the same
    variant and their value, events and errors are equal (events and errors
    compare as sets).
    """

    __slots__ = ()

    # --- Construction: success ---

    @classmethod
    def success(cls, value: X, *events: DomainEvent) -> "Success[X]":
        """Create a successful outcome carrying a value.

        Args:
            value: The main result value. Must not be None.
            *events: Domain events emitted by the operation. Duplicates are removed.

        Returns:
            A `Success` holding `value` and the deduplicated events.

        Raises:
            MissingArgumentError: If `value` is None; use `Outcome.void` instead.
            MissingElementError: If any event is None.
            InvalidElementError: If any event is unhashable.
        """
        _require_value(value)
        return Success(value, _events(events))

    @classmethod
    def success_from(
        cls, value: X, events: Iterable[DomainEvent]
    ) -> "Success[X]":
        """Create a successful outcome from a value and a collection of events.

        Args:
            value: The main result value. Must not be None.
            events: Domain events emitted by the operation, copied into a new
                ordered, duplicate-free collection.

        Raises:
            MissingArgumentError: If `value` or `events` is None.
            InvalidArgumentError: If `events` is a single str or bytes value.
            MissingElementError: If any event is None.
            InvalidElementError: If any event is unhashable.
        """
        _require_value(value)
        return Success(value, _events(events))

    @classmethod
    def void(cls, *events: DomainEvent) -> "Success[None]":
        """Create a successful outcome without a value.

        Called with no arguments this yields a bare success with no events.

        Raises:
            MissingElementError: If any event is None.
            InvalidElementError: If any event is unhashable, such as a set
                passed where its members were meant; use `Outcome.void_from`.
        """
        if not events:
            return Success(None, NO_EVENTS)
        return Success(None, _events(events))

    @classmethod
    def void_from(cls, events: Iterable[DomainEvent]) -> "Success[None]":
        """Create a successful outcome without a value from a collection of events.

        Raises:
            MissingArgumentError: If `events` is None.
            InvalidArgumentError: If `events` is a single str or bytes value.
            MissingElementError: If any event is None.
            InvalidElementError: If any event is unhashable.
        """
        return Success(None, _events(events))

    # --- Construction: failure ---

    @classmethod
    def failure(cls, *errors: str) -> "Failure":
        """Create a failed outcome.

        Messages are optional: a failure without messages is still a failure,
        its `errors` are simply empty.

        Args:
            *errors: Failure messages. Duplicates are removed, first-seen order is kept.

        Raises:
            MissingElementError: If any message is None.
            InvalidElementError: If any message is not a str.
        """
        return Failure(_messages(errors))

    @classmethod
    def failure_from(cls, errors: Iterable[str]) -> "Failure":
        """Create a failed outcome from a collection of messages.

        Args:
            errors: Failure messages. May be empty, but not None and not a
                single str or bytes value.

        Raises:
            MissingArgumentError: If `errors` is None.
            InvalidArgumentError: If `errors` is a single str or bytes value.
            MissingElementError: If any message is None.
            InvalidElementError: If any message is not a str.
        """
        return Failure(_messages(errors))

    # --- Accessors ---

    @property
    @abc.abstractmethod
    def is_success(self) -> bool:
        """True if the operation succeeded."""

    @property
    def is_failure(self) -> bool:
        """True if the operation failed."""
        return not self.is_success

    @property
    @abc.abstractmethod
    def value(self) -> T | None:
        """The result value, or None if there is none (always None on failure)."""

    @property
    @abc.abstractmethod
    def events(self) -> OrderedSet[DomainEvent]:
        """Domain events emitted by a successful operation (empty on failure)."""

    @property
    @abc.abstractmethod
    def errors(self) -> OrderedSet[str]:
        """Error messages of a failed operation (empty on success)."""

    # --- Transformation ---

    @abc.abstractmethod
    def map(self, transform: Callable[[T], R]) -> "Outcome[R]":
        """Transform the value with `transform`, returning a new outcome.

        A failure is returned as a new failure with the same errors, and a
        success without a value as a new valueless success with the same
        events; `transform` is not called in either case. Otherwise
        `transform` is called once with the value and the result is wrapped in
        a success carrying the same events. Exceptions raised by `transform`
        propagate to the caller.

        Raises:
            MissingArgumentError: If `transform` is None.
            InvalidArgumentError: If `transform` is not callable.
        """

    def __str__(self) -> str:
        return (
            f"Outcome(success={self.is_success}, value={self.value!r}, "
            f"events={list(self.events)!r}, errors={list(self.errors)!r})"
        )


def _require_transform(transform: Any) -> None:
    if transform is None:
        raise _violation(MissingArgumentError("transform"))
    if not callable(transform):
        raise _violation(InvalidArgumentError("transform", "must be callable"))


@dataclass(frozen=True, slots=True)
class Success(Outcome[T]):
    """A successful outcome, with or without a value."""

    value: T | None = None
    events: OrderedSet[DomainEvent] = NO_EVENTS

    def __post_init__(self) -> None:
        object.__setattr__(self, "events", _events(self.events))

    @property
    def is_success(self) -> bool:
        return True

    @property
    def errors(self) -> OrderedSet[str]:
        return NO_ERRORS

    def map(self, transform: Callable[[T], R]) -> "Success[R]":
        _require_transform(transform)
        if self.value is None:
            return Success(None, self.events)
        return Success(transform(self.value), self.events)


@dataclass(frozen=True, slots=True)
class Failure(Outcome[Any]):
    """A failed outcome carrying zero or more error messages."""

    errors: OrderedSet[str] = NO_ERRORS

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", _messages(self.errors))

    @property
    def is_success(self) -> bool:
        return False

    @property
    def value(self) -> None:
        return None

    @property
    def events(self) -> OrderedSet[DomainEvent]:
        return NO_EVENTS

    def map(self, transform: Callable[[Any], R]) -> "Failure":
        _require_transform(transform)
        return Failure(self.errors)
