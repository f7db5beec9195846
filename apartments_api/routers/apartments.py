from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from apartments_api.database import get_session
from apartments_api.dependencies import ListingQueryParams
from apartments_api.models import Apartment
from apartments_api.schemas.common import ErrorResponse, PaginatedResponse, SingleResponse
from apartments_api.schemas.responses import ApartmentResponse
from apartments_api.services.apartment_service import ApartmentService
from apartments_api.services.apartment_validation import validate_apartment_input

router = APIRouter()
service = ApartmentService(Apartment)


@router.get(
    "",
    response_model=PaginatedResponse[ApartmentResponse],
    responses={400: {"model": ErrorResponse}},
)
async def list_apartments(
    params: ListingQueryParams = Depends(),
    session: AsyncSession = Depends(get_session),
):
    """List apartments with search, price filters, sorting and pagination."""
    spec = params.to_spec()
    items, meta = await service.list_apartments(session, spec)
    return PaginatedResponse(data=items, meta=meta)


@router.get(
    "/{id}",
    response_model=SingleResponse[ApartmentResponse],
    responses={404: {"model": ErrorResponse}},
)
async def get_apartment(
    id: int,
    session: AsyncSession = Depends(get_session),
):
    """Get a single apartment by ID."""
    return SingleResponse(data=await service.get_by_id(session, id))


@router.post(
    "",
    response_model=SingleResponse[ApartmentResponse],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_apartment(
    payload: dict[str, Any] = Body(...),
    session: AsyncSession = Depends(get_session),
):
    """Create a new apartment listing."""
    data = validate_apartment_input(payload)
    return SingleResponse(data=await service.create_apartment(session, data))
