"""Pytest configuration and fixtures for home control tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from home_control.application.services.control_service import ControlService
from home_control.application.services.device_service import DeviceService
from home_control.application.services.usage_service import UsageService
from home_control.di.container import build_container
from home_control.domain.models.device import Device, DeviceStatus
from home_control.infrastructure.memory import InMemoryDeviceRepository, InMemoryUsageLogRepository
from home_control.main import create_application


class FakeClock:
    """Returns strictly increasing timestamps, one second apart."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def device_repository(clock) -> InMemoryDeviceRepository:
    return InMemoryDeviceRepository(clock=clock)


@pytest.fixture
def usage_log_repository() -> InMemoryUsageLogRepository:
    return InMemoryUsageLogRepository()


@pytest.fixture
def lamp(device_repository) -> Device:
    """The lamp-1 device, registered OFF."""
    return device_repository.create(Device(device_id="lamp-1", name="Living Room Lamp", status=DeviceStatus.OFF))


@pytest.fixture
def container(device_repository, usage_log_repository, clock):
    return build_container(
        device_repository=device_repository,
        usage_log_repository=usage_log_repository,
        clock=clock,
    )


@pytest.fixture
def control_service(container) -> ControlService:
    return container.get(ControlService)


@pytest.fixture
def device_service(container) -> DeviceService:
    return container.get(DeviceService)


@pytest.fixture
def usage_service(container) -> UsageService:
    return container.get(UsageService)


@pytest.fixture
def client(container) -> TestClient:
    return TestClient(create_application(container))
