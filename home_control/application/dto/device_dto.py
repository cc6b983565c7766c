"""
Device DTO
==========

Pydantic models for device API requests and responses.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from home_control.domain.models.device import Device, DeviceStatus


class DeviceCreateRequest(BaseModel):
    """DTO for registering a device."""
    device_id: str = Field(..., description="Unique device identifier")
    name: Optional[str] = Field(None, description="Optional display name")
    status: DeviceStatus = Field(DeviceStatus.OFF, description="Initial status")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "device_id": "lamp-1",
                "name": "Living Room Lamp",
                "status": "OFF",
            }
        }
    )


class DeviceResponse(BaseModel):
    """DTO for device data."""
    device_id: str
    name: str
    status: DeviceStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "device_id": "lamp-1",
                "name": "Living Room Lamp",
                "status": "ON",
                "created_at": "2025-12-20T09:11:50.840Z",
                "updated_at": "2025-12-20T09:15:02.113Z",
            }
        }
    )

    @classmethod
    def from_entity(cls, device: Device) -> "DeviceResponse":
        return cls(
            device_id=device.device_id,
            name=device.name,
            status=device.status,
            created_at=device.created_at,
            updated_at=device.updated_at,
        )
