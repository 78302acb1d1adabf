"""Access service - view permission checks for the current login."""

from loguru import logger

from app.errors import AccessDenied
from app.repositories.visits.access import AccessRepository


class AccessService:
    """Checks site permissions for one login."""

    def __init__(self, access_repo: AccessRepository, login: str, superuser: bool = False):
        self._access = access_repo
        self.login = login
        self.superuser = superuser

    def has_view_access(self, site_id: int) -> bool:
        if self.superuser:
            return True
        return self._access.get_access(self.login, site_id) is not None

    def check_view_access(self, site_id: int) -> None:
        """Raise AccessDenied unless the login may view the site."""
        if not self.has_view_access(site_id):
            logger.warning("Access denied: login={}, site={}", self.login, site_id)
            raise AccessDenied(site_id, self.login)
