"""
Wanderlust Backend: Favourite Service
=======================================

What:  Add, delete and list saved places.
Who:   Called by the /favourites route handlers.

Name Uniqueness:
    add() looks the name up first and answers 409 when it is taken. The
    lookup and the insert are separate statements, so two concurrent
    requests for the same name can both pass the lookup; the UNIQUE
    constraint on favourites.name rejects the second insert, and that
    IntegrityError is reported as the same 409.

Deletion:
    Deleting an identifier that matches nothing is a success. A malformed
    identifier cannot reach the store and is reported as a store error (500).
"""

import logging
import uuid
from typing import List

from sqlalchemy import delete, desc, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from wanderlust.exceptions import ConflictError, DatabaseError, ValidationError
from wanderlust.models.favourite import Favourite
from wanderlust.schemas.common import MessageResponse
from wanderlust.schemas.favourite import FavouriteCreate, FavouriteResponse

logger = logging.getLogger(__name__)

FIELDS_REQUIRED = "Name and description are required."
ALREADY_SAVED = "This place is already in your favourites."
SAVE_FAILED = "Server error while saving favourite."
DELETE_FAILED = "Server error while deleting favourite."
FETCH_FAILED = "Could not fetch favourites."


class FavouriteService:
    """Business logic for favourites. Stateless."""

    async def add(self, db: AsyncSession, payload: FavouriteCreate) -> MessageResponse:
        """
        Save a new place unless one with the same name already exists.

        Raises:
            ValidationError: name or description missing (→ 400)
            ConflictError: name already saved (→ 409)
            DatabaseError: lookup, insert or commit failed (→ 500)
        """
        if not payload.name or not payload.description:
            raise ValidationError(message=FIELDS_REQUIRED)

        try:
            result = await db.execute(
                select(Favourite.id).where(Favourite.name == payload.name).limit(1)
            )
            existing_id = result.scalar_one_or_none()
        except Exception as e:
            logger.error("Error looking up favourite %r: %s", payload.name, str(e), exc_info=True)
            raise DatabaseError(
                message=SAVE_FAILED,
                context={"name": payload.name, "error_type": type(e).__name__},
            )

        if existing_id is not None:
            raise ConflictError(
                message=ALREADY_SAVED,
                context={"name": payload.name, "existing_id": str(existing_id)},
            )

        favourite = Favourite(name=payload.name, description=payload.description)
        try:
            db.add(favourite)
            await db.flush()
            await db.commit()
        except IntegrityError as e:
            logger.warning("Unique constraint rejected concurrent favourite %r", payload.name)
            raise ConflictError(
                message=ALREADY_SAVED,
                context={"name": payload.name, "error_type": type(e).__name__},
            )
        except Exception as e:
            logger.error("Error saving favourite %r: %s", payload.name, str(e), exc_info=True)
            raise DatabaseError(
                message=SAVE_FAILED,
                context={"name": payload.name, "error_type": type(e).__name__},
            )

        logger.info("Favourite %s added: %s", favourite.id, favourite.name)
        return MessageResponse(success=True, message="Added to Favourites!")

    async def delete(self, db: AsyncSession, favourite_id: str) -> MessageResponse:
        """
        Delete the favourite with this identifier, if there is one.

        Raises:
            DatabaseError: malformed identifier or store failure (→ 500)
        """
        try:
            key = uuid.UUID(favourite_id)
            result = await db.execute(delete(Favourite).where(Favourite.id == key))
            await db.commit()
        except Exception as e:
            logger.error("Error deleting favourite %s: %s", favourite_id, str(e))
            raise DatabaseError(
                message=DELETE_FAILED,
                context={"favourite_id": favourite_id, "error_type": type(e).__name__},
            )

        if result.rowcount == 0:
            logger.info("Favourite %s not found; nothing deleted", favourite_id)
        else:
            logger.info("Favourite %s deleted", favourite_id)
        return MessageResponse(success=True, message="Favourite deleted.")

    async def list_favourites(self, db: AsyncSession) -> List[FavouriteResponse]:
        """All favourites, newest added_at first."""
        try:
            result = await db.execute(
                select(Favourite).order_by(desc(Favourite.added_at))
            )
            favourites = list(result.scalars().all())
        except Exception as e:
            logger.error("Error fetching favourites: %s", str(e), exc_info=True)
            raise DatabaseError(
                message=FETCH_FAILED,
                context={"error_type": type(e).__name__},
            )

        return [FavouriteResponse.model_validate(favourite) for favourite in favourites]


favourite_service = FavouriteService()
