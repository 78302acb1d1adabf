"""Visits repositories."""

from app.repositories.visits.access import AccessRepository
from app.repositories.visits.archive import ArchiveRepository

__all__ = [
    "AccessRepository",
    "ArchiveRepository",
]
