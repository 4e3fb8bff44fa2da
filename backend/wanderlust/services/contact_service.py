"""
Wanderlust Backend: Contact Service
=====================================

What:  Validates contact-form submissions, stores them, and lists them.
Who:   Called by the POST /contact and GET /submissions route handlers.

Validation Rules (all checked, in this order, no short-circuit):
    name     must be non-empty            → "Name is required."
    email    must be a syntactically valid address
                                          → "A valid email is required."
    message  must be non-empty            → "Please enter a message."
"""

import logging
from typing import List

from email_validator import EmailNotValidError, validate_email
from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from wanderlust.exceptions import DatabaseError, ValidationError
from wanderlust.models.contact import Contact
from wanderlust.schemas.common import MessageResponse
from wanderlust.schemas.contact import ContactResponse, ContactSubmission

logger = logging.getLogger(__name__)

NAME_REQUIRED = "Name is required."
EMAIL_INVALID = "A valid email is required."
MESSAGE_REQUIRED = "Please enter a message."


def is_valid_email(value: str) -> bool:
    """
    Syntax-only check: no DNS lookups and no reserved-domain rules, so
    addresses such as x@mail.test pass. The domain must still contain a dot.
    """
    try:
        result = validate_email(
            value,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError:
        return False
    return "." in result.ascii_domain


class ContactService:
    """
    Business logic for contact submissions.

    Stateless: the session is passed into each call.
    """

    def validate(self, submission: ContactSubmission) -> List[str]:
        """Return every failing rule's message; an empty list means valid."""
        errors = []
        if not submission.name:
            errors.append(NAME_REQUIRED)
        if not submission.email or not is_valid_email(submission.email):
            errors.append(EMAIL_INVALID)
        if not submission.message:
            errors.append(MESSAGE_REQUIRED)
        return errors

    async def submit(
        self, db: AsyncSession, submission: ContactSubmission
    ) -> MessageResponse:
        """
        Validate and persist one submission.

        Raises:
            ValidationError: One or more rules failed (→ 400 with `errors`)
            DatabaseError: The insert or its commit failed (→ 500)
        """
        errors = self.validate(submission)
        if errors:
            raise ValidationError(
                message=errors[0],
                errors=errors,
                context={"failed_rules": len(errors)},
            )

        contact = Contact(
            name=submission.name,
            email=submission.email,
            message=submission.message,
        )
        try:
            db.add(contact)
            await db.flush()
            await db.commit()
        except Exception as e:
            logger.error("Error saving contact submission: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Server error, please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Contact submission %s saved", contact.id)
        return MessageResponse(success=True, message="Thank you for contacting us!")

    async def list_submissions(self, db: AsyncSession) -> List[ContactResponse]:
        """All submissions, newest submitted_at first."""
        try:
            result = await db.execute(
                select(Contact).order_by(desc(Contact.submitted_at))
            )
            contacts = list(result.scalars().all())
        except Exception as e:
            logger.error("Error fetching submissions: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not fetch submissions.",
                context={"error_type": type(e).__name__},
            )

        return [ContactResponse.model_validate(contact) for contact in contacts]


contact_service = ContactService()
