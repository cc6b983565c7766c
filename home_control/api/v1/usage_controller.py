"""
Usage Controller
================

FastAPI controller for usage log reporting.
"""
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status, Depends

from home_control.application.dto.usage_dto import UsageLogEntryResponse, UsageSummaryResponse
from home_control.api.v1.dependencies import get_usage_service
from home_control.application.services.usage_service import UsageService
from home_control.domain.exceptions import DeviceNotFoundError, StorageFailureError

router = APIRouter(tags=["usage"])


@router.get(
    "/list",
    response_model=List[UsageLogEntryResponse],
    summary="List usage entries",
    description="Usage entries in log order, optionally for one device."
)
async def list_usage(
    device_id: Optional[str] = None,
    limit: Optional[int] = Query(None, ge=1),
    service: UsageService = Depends(get_usage_service),
) -> List[UsageLogEntryResponse]:
    try:
        entries = service.list_entries(device_id=device_id, limit=limit)
    except StorageFailureError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )
    return [UsageLogEntryResponse.from_entity(entry) for entry in entries]


@router.get(
    "/summary/{device_id}",
    response_model=UsageSummaryResponse,
    summary="Usage summary for a device",
)
async def usage_summary(
    device_id: str,
    service: UsageService = Depends(get_usage_service),
) -> UsageSummaryResponse:
    try:
        summary = service.summarize(device_id)
    except DeviceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except StorageFailureError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )
    return UsageSummaryResponse.from_summary(summary)
