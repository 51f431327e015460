"""Domain layer for toolbox.

Contains the `Outcome` result type, the `DomainEvent` marker it carries, and
the errors raised when either is misused. This package is deliberately
technology-agnostic.
"""
