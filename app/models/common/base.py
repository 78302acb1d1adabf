"""Base entity class for value objects passed between layers."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class BaseEntity:
    """Base class for immutable entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)
