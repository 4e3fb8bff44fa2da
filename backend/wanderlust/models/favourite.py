"""
Wanderlust Backend: Favourite SQLAlchemy Model
================================================

What:  ORM model for the `favourites` table (places saved by the user).
Who:   Used by FavouriteService for add, delete and list.

Table Design:
    - name is UNIQUE. FavouriteService still looks the name up before
      inserting; the constraint catches the requests that race past that
      check, and the service turns the IntegrityError into the same 409.
    - Index on added_at DESC for the newest-first listing.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from wanderlust.database import Base


class Favourite(Base):
    """
    A saved place.

    Lifecycle:
        1. Created by POST /favourites (rejected with 409 if the name exists)
        2. Deleted by DELETE /favourites/{id}
        3. Never updated
    """

    __tablename__ = "favourites"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Opaque identifier assigned on creation",
    )

    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        unique=True,
        comment="Place name; at most one favourite per name",
    )

    description: Mapped[str] = mapped_column(Text, nullable=False)

    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        comment="When the place was saved (UTC)",
    )

    def __repr__(self) -> str:
        return f"<Favourite(id={self.id}, name='{self.name}', added_at='{self.added_at}')>"


Index("idx_favourites_added_at", Favourite.added_at.desc())
