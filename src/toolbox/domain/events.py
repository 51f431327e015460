"""Events"""

import abc
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DomainEvent(abc.ABC):
    """Base class for all domain events.

    An event records something notable that happened during a successful
    operation. Outcomes carry events verbatim; equality and hashing are owned
    by the concrete event type.
    """
