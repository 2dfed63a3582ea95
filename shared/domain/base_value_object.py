"""
Base value object class for DDD.
"""
from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base value object class.

    Subclasses are frozen dataclasses, compared by their fields. Invariants
    go in `validate`, which runs right after construction.
    """

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Raise a domain exception if the value is not acceptable."""
        pass
