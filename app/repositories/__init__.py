"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.common import TransientCache
from app.repositories.db import (
    close_db,
    get_db,
    get_write_connection,
    init_tables,
)
from app.repositories.visits import AccessRepository, ArchiveRepository

__all__ = [
    # DB
    "get_db",
    "close_db",
    "init_tables",
    "get_write_connection",
    # Base
    "BaseRepository",
    # Common
    "TransientCache",
    # Visits
    "AccessRepository",
    "ArchiveRepository",
]
