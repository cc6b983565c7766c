"""
Control Controller
==================

FastAPI controller that turns control requests into command intents.
"""
from fastapi import APIRouter, HTTPException, status, Depends

from home_control.application.dto.command_dto import CommandRequest, DeviceStateResponse
from home_control.api.v1.dependencies import get_control_service
from home_control.application.services.control_service import ControlService
from home_control.domain.exceptions import (
    CommandFailedError,
    DeviceNotFoundError,
    InvalidActionError,
)

router = APIRouter(tags=["control"])


@router.post(
    "/dispatch",
    response_model=DeviceStateResponse,
    summary="Turn a device on or off",
    description="""
    Dispatch one command to a device.

    - 400 if the action is not TURN_ON or TURN_OFF
    - 404 if the device is not registered
    - 503 if the command could not be completed; it is safe to resubmit

    Every accepted command is recorded in the usage log, including commands
    that leave the status unchanged.
    """
)
async def dispatch_command(
    request: CommandRequest,
    service: ControlService = Depends(get_control_service),
) -> DeviceStateResponse:
    """Dispatch a control command."""
    try:
        state = service.dispatch_intent(request.to_intent())
    except InvalidActionError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except DeviceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except CommandFailedError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )

    return DeviceStateResponse.from_state(state)
