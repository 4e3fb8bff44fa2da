"""
Wanderlust Backend: Contact SQLAlchemy Model
==============================================

What:  ORM model for the `contacts` table (one row per contact-form submission).
Who:   Written by ContactService.submit, read by ContactService.list_submissions.

Lifecycle:
    Created once by POST /contact; never updated or deleted by this service.
    Listed newest first, so submitted_at carries a descending index.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from wanderlust.database import Base


class Contact(Base):
    """A single contact-form message."""

    __tablename__ = "contacts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Opaque identifier assigned on creation",
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)

    # Assigned at insert time; immutable afterwards
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        comment="When the submission was received (UTC)",
    )

    def __repr__(self) -> str:
        return f"<Contact(id={self.id}, email='{self.email}', submitted_at='{self.submitted_at}')>"


Index("idx_contacts_submitted_at", Contact.submitted_at.desc())
