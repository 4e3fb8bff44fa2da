"""
Wanderlust Backend: Contact Route Handlers
============================================

What:  POST /contact (store a contact-form submission) and
       GET /submissions (list every submission, newest first).
How:   Parses the body, delegates to ContactService, returns JSON.
"""

from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from wanderlust.database import get_db_session
from wanderlust.routes.body import read_body
from wanderlust.schemas.common import MessageResponse, ValidationErrorResponse
from wanderlust.schemas.contact import ContactResponse, ContactSubmission
from wanderlust.services.contact_service import contact_service


router = APIRouter(tags=["Contact"])


async def contact_submission(request: Request) -> ContactSubmission:
    """Dependency: the posted contact form as a ContactSubmission."""
    return ContactSubmission.model_validate(await read_body(request))


@router.post(
    "/contact",
    response_model=MessageResponse,
    responses={
        200: {"description": "Submission stored", "model": MessageResponse},
        400: {"description": "One or more fields invalid", "model": ValidationErrorResponse},
        500: {"description": "Server error", "model": MessageResponse},
    },
    summary="Submit the contact form",
)
async def submit_contact(
    submission: ContactSubmission = Depends(contact_submission),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    """
    Accepts `name`, `email` and `message` as JSON or form fields.

    Every failing rule is reported in `errors`, not just the first.
    """
    return await contact_service.submit(db=db, submission=submission)


@router.get(
    "/submissions",
    response_model=List[ContactResponse],
    responses={500: {"description": "Server error", "model": MessageResponse}},
    summary="List contact submissions, newest first",
)
async def list_submissions(
    db: AsyncSession = Depends(get_db_session),
) -> List[ContactResponse]:
    return await contact_service.list_submissions(db=db)
