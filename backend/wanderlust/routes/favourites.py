"""
Wanderlust Backend: Favourites Route Handlers
===============================================

What:  POST /favourites, DELETE /favourites/{id}, GET /favourites.
How:   Parses the body, delegates to FavouriteService, returns JSON.

Status codes:
    POST    201 added | 400 missing field | 409 name taken | 500 store error
    DELETE  200 (also when nothing matched) | 500 store error or malformed id
    GET     200 newest first | 500 store error
"""

from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from wanderlust.database import get_db_session
from wanderlust.routes.body import read_body
from wanderlust.schemas.common import MessageResponse
from wanderlust.schemas.favourite import FavouriteCreate, FavouriteResponse
from wanderlust.services.favourite_service import favourite_service


router = APIRouter(prefix="/favourites", tags=["Favourites"])


async def favourite_payload(request: Request) -> FavouriteCreate:
    """Dependency: the posted place as a FavouriteCreate."""
    return FavouriteCreate.model_validate(await read_body(request))


@router.post(
    "",
    status_code=201,
    response_model=MessageResponse,
    responses={
        201: {"description": "Favourite added", "model": MessageResponse},
        400: {"description": "Name or description missing", "model": MessageResponse},
        409: {"description": "Name already saved", "model": MessageResponse},
        500: {"description": "Server error", "model": MessageResponse},
    },
    summary="Add a place to favourites",
)
async def add_favourite(
    payload: FavouriteCreate = Depends(favourite_payload),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await favourite_service.add(db=db, payload=payload)


@router.delete(
    "/{favourite_id}",
    response_model=MessageResponse,
    responses={500: {"description": "Server error", "model": MessageResponse}},
    summary="Delete a favourite by id",
)
async def delete_favourite(
    favourite_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    """
    `favourite_id` is taken as plain text so that a malformed id reaches
    the service and is answered with the route's 500 body rather than 422.
    """
    return await favourite_service.delete(db=db, favourite_id=favourite_id)


@router.get(
    "",
    response_model=List[FavouriteResponse],
    responses={500: {"description": "Server error", "model": MessageResponse}},
    summary="List favourites, newest first",
)
async def list_favourites(
    db: AsyncSession = Depends(get_db_session),
) -> List[FavouriteResponse]:
    return await favourite_service.list_favourites(db=db)
