"""
Wanderlust Backend: Contact Service Unit Tests
================================================

What:  Tests for ContactService validation, persistence and listing.
How:   Uses mock DB sessions (no real database).
"""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from wanderlust.exceptions import DatabaseError, ValidationError
from wanderlust.schemas.contact import ContactSubmission
from wanderlust.services.contact_service import (
    EMAIL_INVALID,
    MESSAGE_REQUIRED,
    NAME_REQUIRED,
    ContactService,
    is_valid_email,
)


class TestContactValidation:
    """Every rule is checked independently; messages come back in rule order."""

    def setup_method(self):
        self.service = ContactService()

    def test_empty_submission_reports_all_three_rules(self):
        errors = self.service.validate(ContactSubmission())
        assert errors == [NAME_REQUIRED, EMAIL_INVALID, MESSAGE_REQUIRED]

    def test_valid_submission_has_no_errors(self):
        submission = ContactSubmission(name="A", email="a@b.com", message="hi")
        assert self.service.validate(submission) == []

    def test_invalid_email_only(self):
        submission = ContactSubmission(name="A", email="not-an-email", message="hi")
        assert self.service.validate(submission) == [EMAIL_INVALID]

    def test_whitespace_only_fields_count_as_empty(self):
        submission = ContactSubmission.model_validate(
            {"name": "   ", "email": "a@b.com", "message": "\n\t"}
        )
        assert self.service.validate(submission) == [NAME_REQUIRED, MESSAGE_REQUIRED]

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("jane@wanderlust.io", True),
            ("a@b.com", True),
            ("missing-at.com", False),
            ("two@@signs.com", False),
            ("spaces in@mail.com", False),
            ("", False),
            ("traveller@mail.test", True),
            ("user@localhost", False),
        ],
    )
    def test_email_syntax(self, value, expected):
        assert is_valid_email(value) is expected


class TestContactSubmit:
    """Tests for ContactService.submit."""

    def setup_method(self):
        self.service = ContactService()

    @pytest.mark.asyncio
    async def test_submit_success_adds_and_commits(self, mock_db_session):
        submission = ContactSubmission(name="A", email="a@b.com", message="hi")

        result = await self.service.submit(mock_db_session, submission)

        assert result.success is True
        assert result.message == "Thank you for contacting us!"
        mock_db_session.add.assert_called_once()
        stored = mock_db_session.add.call_args.args[0]
        assert (stored.name, stored.email, stored.message) == ("A", "a@b.com", "hi")
        mock_db_session.flush.assert_awaited_once()
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_submit_invalid_raises_with_every_error(self, mock_db_session):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.submit(mock_db_session, ContactSubmission(email="nope"))

        assert exc_info.value.errors == [NAME_REQUIRED, EMAIL_INVALID, MESSAGE_REQUIRED]
        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_submit_store_failure_raises_database_error(self, mock_db_session):
        mock_db_session.flush = AsyncMock(side_effect=RuntimeError("connection lost"))
        submission = ContactSubmission(name="A", email="a@b.com", message="hi")

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.submit(mock_db_session, submission)

        assert exc_info.value.message == "Server error, please try again."
        assert "connection lost" not in exc_info.value.message

    @pytest.mark.asyncio
    async def test_commit_failure_raises_database_error(self, mock_db_session):
        mock_db_session.commit = AsyncMock(side_effect=RuntimeError("commit rejected"))
        submission = ContactSubmission(name="A", email="a@b.com", message="hi")

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.submit(mock_db_session, submission)

        assert exc_info.value.message == "Server error, please try again."


class TestContactList:
    """Tests for ContactService.list_submissions."""

    def setup_method(self):
        self.service = ContactService()

    @pytest.mark.asyncio
    async def test_list_maps_rows_to_responses(self, mock_db_session):
        now = datetime.now(timezone.utc)
        rows = []
        for i in range(2):
            row = MagicMock()
            row.id = uuid4()
            row.name = f"Visitor {i}"
            row.email = f"visitor{i}@wanderlust.io"
            row.message = "Hello"
            row.submitted_at = now - timedelta(minutes=i)
            rows.append(row)

        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = rows
        mock_db_session.execute.return_value = mock_result

        result = await self.service.list_submissions(mock_db_session)

        assert [item.name for item in result] == ["Visitor 0", "Visitor 1"]
        assert result[0].submitted_at == now
        assert "submittedAt" in result[0].model_dump(by_alias=True)

    @pytest.mark.asyncio
    async def test_list_store_failure_raises_database_error(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=RuntimeError("down"))

        with pytest.raises(DatabaseError, match="Could not fetch submissions"):
            await self.service.list_submissions(mock_db_session)
