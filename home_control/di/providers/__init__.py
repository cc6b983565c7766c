"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .device_provider import DeviceProvider
from .control_provider import ControlProvider
from .usage_provider import UsageProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "DeviceProvider",
    "ControlProvider",
    "UsageProvider",
]
