"""
Device Controller
=================

FastAPI controller for device registration and lookup endpoints.
"""
from typing import List, Optional

from fastapi import APIRouter, HTTPException, status, Depends

from home_control.application.dto.device_dto import (
    DeviceCreateRequest,
    DeviceResponse,
)
from home_control.api.v1.dependencies import get_device_service
from home_control.application.services.device_service import DeviceService
from home_control.domain.exceptions import DeviceAlreadyExistsError, StorageFailureError

router = APIRouter(tags=["devices"])


@router.post(
    "/create",
    response_model=DeviceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a device",
    description="""
    Register a new device with its initial on/off status.

    The device identifier cannot be changed afterwards. Status changes go
    through the control endpoints only.
    """
)
async def create_device(
    request: DeviceCreateRequest,
    service: DeviceService = Depends(get_device_service),
) -> DeviceResponse:
    """Register a device."""
    try:
        device = service.register_device(
            device_id=request.device_id,
            name=request.name,
            status=request.status,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except DeviceAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
    except StorageFailureError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )

    return DeviceResponse.from_entity(device)


@router.get(
    "/get/{device_id}",
    response_model=DeviceResponse,
    summary="Get device by ID",
    description="Get details of a specific device, including its current status."
)
async def get_device(
    device_id: str,
    service: DeviceService = Depends(get_device_service),
) -> DeviceResponse:
    """Get a specific device by ID."""
    try:
        device = service.get_device(device_id)
    except StorageFailureError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )

    if not device:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Device '{device_id}' not found"
        )

    return DeviceResponse.from_entity(device)


@router.get(
    "/list",
    response_model=List[DeviceResponse],
    summary="List devices",
    description="Get list of all devices, optionally filtered by status (ON or OFF)."
)
async def list_devices(
    status_filter: Optional[str] = None,
    service: DeviceService = Depends(get_device_service),
) -> List[DeviceResponse]:
    """List devices with optional filters."""
    try:
        devices = service.list_devices(status=status_filter)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid status filter '{status_filter}'. Expected ON or OFF"
        )
    except StorageFailureError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )

    return [DeviceResponse.from_entity(dev) for dev in devices]
