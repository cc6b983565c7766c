# Standard library imports
from datetime import datetime
from typing import Callable, Optional

# Local application imports
from ..core.config import Settings, get_settings
from ..domain.repositories.device_repository import DeviceRepository
from ..domain.repositories.usage_log_repository import UsageLogRepository
from .base_container import BaseContainer
from .providers import (
    ControlProvider,
    DatabaseProvider,
    DeviceProvider,
    RepositoryProvider,
    UsageProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (DeviceProvider, ControlProvider, UsageProvider) - depend on repositories
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        device_repository: Optional[DeviceRepository] = None,
        usage_log_repository: Optional[UsageLogRepository] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        super().__init__()
        self.settings = settings or get_settings()

        # Explicit collaborators take precedence over the configured backend
        if device_repository is not None:
            self.register_singleton(DeviceRepository, device_repository)
        if usage_log_repository is not None:
            self.register_singleton(UsageLogRepository, usage_log_repository)
        if clock is not None:
            self.register_singleton("clock", clock)

        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        # Step 1: Register database connections (foundation); skipped when
        # both repositories were supplied explicitly
        if not (self.has(DeviceRepository) and self.has(UsageLogRepository)):
            DatabaseProvider.register(self, self.settings)

        # Step 2: Register repositories (depends on database)
        RepositoryProvider.register(self, self.settings)

        # Step 3: Register services (depends on repositories)
        DeviceProvider.register(self)
        ControlProvider.register(self)
        UsageProvider.register(self)


def build_container(**overrides) -> DIContainer:
    """
    Build a fresh container.

    Keyword arguments are passed to DIContainer (settings, device_repository,
    usage_log_repository, clock).
    """
    return DIContainer(**overrides)
