"""Segment handle - a hashable filter over visits."""

import hashlib
from dataclasses import dataclass
from urllib.parse import unquote

from app.models.common.base import BaseEntity


@dataclass(frozen=True)
class Segment(BaseEntity):
    """Canonical segment definition bound to the sites it applies to.

    An empty definition selects all visits.
    """

    definition: str = ""
    site_scope: tuple[int, ...] = ()

    @classmethod
    def build(cls, raw: str | None, site_scope: list[int] | tuple[int, ...] = ()) -> "Segment":
        """Canonicalize a raw (possibly URL-encoded) segment expression."""
        definition = unquote(raw or "").strip()
        return cls(definition=definition, site_scope=tuple(site_scope))

    def is_empty(self) -> bool:
        return not self.definition

    def hash(self) -> str:
        """Stable digest of the definition; empty for the all-visits segment."""
        if self.is_empty():
            return ""
        return hashlib.md5(self.definition.encode("utf-8")).hexdigest()
