"""Dependency Injection container - initialized at app startup."""

from app.repositories.common.cache import TransientCache
from app.repositories.visits.access import AccessRepository
from app.repositories.visits.archive import ArchiveRepository
from app.services.common.access import AccessService
from app.services.common.formatter import MetricsFormatter
from app.services.common.policy import UniqueVisitorPolicy
from app.services.visits.reports import ReportsProvider
from app.services.visits.summary import VisitsSummary
from settings import ANONYMOUS_LOGIN


class Container:
    """Application DI container - holds process-wide instances.

    Per-request services are built by the factory methods so that each
    request gets its own transient cache.
    """

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons)
        self._archive_repo = ArchiveRepository()
        self._access_repo = AccessRepository()

        # Stateless services (singletons)
        self.reports = ReportsProvider()
        self.unique_policy = UniqueVisitorPolicy.from_settings()
        self.formatter = MetricsFormatter()

        self._initialized = True

    def access_for(self, login: str = ANONYMOUS_LOGIN, superuser: bool = False) -> AccessService:
        """Access checker for one login."""
        self.init()
        return AccessService(self._access_repo, login, superuser=superuser)

    def visits_summary(
        self,
        login: str = ANONYMOUS_LOGIN,
        superuser: bool = False,
        cache: TransientCache | None = None,
    ) -> VisitsSummary:
        """Visits summary API for one request scope."""
        self.init()
        return VisitsSummary(
            access=self.access_for(login, superuser),
            archive_repo=self._archive_repo,
            reports=self.reports,
            unique_policy=self.unique_policy,
            formatter=self.formatter,
            cache=cache if cache is not None else TransientCache(),
        )


# Global container instance
container = Container()
