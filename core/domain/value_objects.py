"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class AboutData(ValueObject):
    """Descriptive information about a provider."""

    name: str
    description: str
    logo_url: Optional[str] = None

    def __post_init__(self):
        """Validate provider name."""
        if not self.name or not self.name.strip():
            raise ValueError("Provider name cannot be empty")

    def __str__(self) -> str:
        """Return provider name."""
        return self.name
