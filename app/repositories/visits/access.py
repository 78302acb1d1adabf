"""Access repository - per-site access levels by login."""

from loguru import logger

from app.models.visits.access import AccessLevel
from app.repositories.base import BaseRepository


class AccessRepository(BaseRepository):
    """Repository for site access rows."""

    def get_access(self, login: str, site_id: int) -> AccessLevel | None:
        """Access level of a login on a site, if any."""
        row = self.fetchone(
            "SELECT access FROM site_access WHERE login = ? AND site_id = ?",
            [login, site_id],
        )
        if row is None:
            return None
        try:
            return AccessLevel(row[0])
        except ValueError:
            logger.warning("Unknown access level {!r} for {} on site {}", row[0], login, site_id)
            return None

    def set_access(self, login: str, site_id: int, access: AccessLevel) -> None:
        """Grant (or change) access."""
        self._require_writable()
        self.execute(
            "INSERT OR REPLACE INTO site_access (login, site_id, access) VALUES (?, ?, ?)",
            [login, site_id, access.value],
        )
        logger.info("Access {} granted to {} on site {}", access.value, login, site_id)
