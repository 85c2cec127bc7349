# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from fastapi import APIRouter, Body, HTTPException, Response, status

# Local application imports
from ...application.dto.device_dto import DeviceCreateRequest, DeviceResponse, DeviceUpdateRequest
from ...application.services.device_service import DeviceService
from ...domain.exceptions import DeviceError, ErrorKind
from ...domain.models.device import DeviceState
from ...di.container import get_container


router = APIRouter(tags=["devices"])

ERROR_STATUS_CODES: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.STORE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _to_http_exception(exception: DeviceError) -> HTTPException:
    return HTTPException(
        status_code=ERROR_STATUS_CODES[exception.kind],
        detail={
            "kind": exception.kind.value,
            "message": exception.message,
            "details": exception.details,
        },
    )


def _get_device_service() -> DeviceService:
    container = get_container()
    return container.get(DeviceService)


@router.post("", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
async def create_device(request: DeviceCreateRequest) -> DeviceResponse:
    """
    Register a new device
    
    Args:
        request: Device creation request with name and brand
        
    Returns:
        DeviceResponse with the created AVAILABLE device
    """
    device_service = _get_device_service()
    
    try:
        return await device_service.create_device(name=request.name, brand=request.brand)
    except DeviceError as exception:
        raise _to_http_exception(exception)


@router.get("/{device_id}", response_model=DeviceResponse)
async def get_device(device_id: str) -> DeviceResponse:
    """
    Get a device by ID
    
    Args:
        device_id: ID of the device
        
    Returns:
        DeviceResponse with device information
    """
    device_service = _get_device_service()
    
    try:
        return await device_service.get_device(device_id)
    except DeviceError as exception:
        raise _to_http_exception(exception)


@router.get("", response_model=List[DeviceResponse])
async def list_devices(
    brand: Optional[str] = None,
    state: Optional[DeviceState] = None,
) -> List[DeviceResponse]:
    """
    List devices, optionally filtered by brand and/or state
    
    Args:
        brand: Only return devices with exactly this brand
        state: Only return devices in this state
        
    Returns:
        List of DeviceResponse objects in store order
    """
    device_service = _get_device_service()
    
    try:
        return await device_service.search_devices(brand=brand, state=state)
    except DeviceError as exception:
        raise _to_http_exception(exception)


@router.put("/{device_id}", response_model=DeviceResponse)
async def update_device(device_id: str, request: DeviceUpdateRequest) -> DeviceResponse:
    """
    Replace a device's name, brand and state
    
    Any id or creation_time in the body is ignored.
    """
    device_service = _get_device_service()
    
    try:
        return await device_service.update_device(device_id, request)
    except DeviceError as exception:
        raise _to_http_exception(exception)


@router.patch("/{device_id}", response_model=DeviceResponse)
async def partial_update_device(
    device_id: str,
    field_changes: Dict[str, Any] = Body(...),
) -> DeviceResponse:
    """
    Change only the fields present in the body
    
    Args:
        device_id: ID of the device
        field_changes: JSON object mapping field names to new values
        
    Returns:
        DeviceResponse with the stored device
    """
    device_service = _get_device_service()
    
    try:
        return await device_service.partial_update_device(device_id, field_changes)
    except DeviceError as exception:
        raise _to_http_exception(exception)


@router.delete("/{device_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_device(device_id: str) -> Response:
    """Delete a device that is not in use."""
    device_service = _get_device_service()
    
    try:
        await device_service.delete_device(device_id)
    except DeviceError as exception:
        raise _to_http_exception(exception)
    
    return Response(status_code=status.HTTP_204_NO_CONTENT)
