"""
Dependencies
============

FastAPI dependency functions.
Services are resolved from the container stored on app.state at startup,
so each application instance carries its own collaborators.
"""
from fastapi import Request

from home_control.application.services.control_service import ControlService
from home_control.application.services.device_service import DeviceService
from home_control.application.services.usage_service import UsageService
from home_control.di.container import DIContainer


def get_container(request: Request) -> DIContainer:
    """Container of the application handling this request."""
    return request.app.state.container


def get_device_service(request: Request) -> DeviceService:
    """
    Get device service instance (singleton per application).

    Returns:
        DeviceService instance
    """
    return get_container(request).get(DeviceService)


def get_control_service(request: Request) -> ControlService:
    """
    Get control service instance (singleton per application).

    Returns:
        ControlService instance
    """
    return get_container(request).get(ControlService)


def get_usage_service(request: Request) -> UsageService:
    """
    Get usage service instance (singleton per application).

    Returns:
        UsageService instance
    """
    return get_container(request).get(UsageService)
