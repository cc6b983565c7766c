"""
Command DTO
===========

Pydantic models for the control API.

action is accepted as a plain string so that unknown actions reach the
dispatcher and are rejected there with InvalidActionError.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from home_control.domain.models.command import CommandIntent, DeviceState
from home_control.domain.models.device import DeviceStatus


class CommandRequest(BaseModel):
    """DTO for a control command."""
    device_id: str = Field(..., description="Target device identifier")
    action: str = Field(..., description="TURN_ON or TURN_OFF")
    source: Optional[str] = Field(None, description="Optional caller tag, e.g. 'mobile-app'")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "device_id": "lamp-1",
                "action": "TURN_ON",
            }
        }
    )

    def to_intent(self) -> CommandIntent:
        return CommandIntent(device_id=self.device_id, action=self.action, source=self.source)


class DeviceStateResponse(BaseModel):
    """DTO for the outcome of a dispatch."""
    device_id: str
    status: DeviceStatus

    @classmethod
    def from_state(cls, state: DeviceState) -> "DeviceStateResponse":
        return cls(device_id=state.device_id, status=state.status)
