"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                   Outcome construction errors
# ============================================================================


class InvalidArgumentError(DomainError, ValueError):
    """Raised when an Outcome factory or operation receives an argument that
    breaks its contract.

    These are programmer errors, never business failures.
    """

    def __init__(self, argument: str, reason: str) -> None:
        super().__init__(f"Invalid argument '{argument}': {reason}")
        self.argument = argument
        self.reason = reason


class MissingArgumentError(InvalidArgumentError):
    """Raised when a required argument is None."""

    def __init__(self, argument: str, hint: str | None = None) -> None:
        reason = "must not be None"
        if hint:
            reason = f"{reason}; {hint}"
        super().__init__(argument, reason)
        self.hint = hint


class MissingElementError(InvalidArgumentError):
    """Raised when a collection argument contains a None element."""

    def __init__(self, argument: str, index: int) -> None:
        super().__init__(argument, f"must not contain None (found at index {index})")
        self.index = index


class InvalidElementError(InvalidArgumentError):
    """Raised when a collection argument contains an element of the wrong kind."""

    def __init__(self, argument: str, index: int, expected: str) -> None:
        super().__init__(
            argument, f"element at index {index} must be {expected}"
        )
        self.index = index
        self.expected = expected
