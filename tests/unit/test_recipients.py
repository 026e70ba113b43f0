"""
Tests for mail recipient variants and request body serialization.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from stack0.mail import (
    EmailAddress,
    RawRecipient,
    RecipientList,
    SendBroadcastEmailRequest,
    SendEmailRequest,
    SingleRecipient,
    to_recipient,
)


class TestToRecipient:
    def test_string_is_raw(self):
        recipient = to_recipient("Ada <ada@example.com>")
        assert isinstance(recipient, RawRecipient)
        assert recipient.model_dump() == "Ada <ada@example.com>"

    def test_address_is_single(self):
        recipient = to_recipient(EmailAddress(email="ada@example.com", name="Ada"))
        assert isinstance(recipient, SingleRecipient)
        assert recipient.model_dump() == {"email": "ada@example.com", "name": "Ada"}

    def test_dict_is_single(self):
        recipient = to_recipient({"email": "ada@example.com"})
        assert recipient.model_dump() == {"email": "ada@example.com"}

    def test_list_mixes_addresses_and_strings(self):
        recipient = to_recipient(
            ["ada@example.com", EmailAddress(email="alan@example.com", name="Alan")]
        )
        assert isinstance(recipient, RecipientList)
        assert recipient.model_dump() == [
            "ada@example.com",
            {"email": "alan@example.com", "name": "Alan"},
        ]

    def test_variant_passes_through(self):
        variant = RawRecipient(value="ada@example.com")
        assert to_recipient(variant) is variant

    def test_unsupported_type(self):
        with pytest.raises(ValueError):
            to_recipient(42)


class TestSendEmailRequest:
    def test_minimal_body(self):
        request = SendEmailRequest(
            from_="hi@example.com", to="ada@example.com", subject="Hello"
        )

        assert request.to_body() == {
            "from": "hi@example.com",
            "to": "ada@example.com",
            "subject": "Hello",
        }

    def test_populates_by_wire_name(self):
        request = SendEmailRequest.model_validate(
            {"from": "hi@example.com", "to": ["a@example.com"], "subject": "Hi"}
        )
        assert request.to_body()["to"] == ["a@example.com"]

    def test_full_body_uses_camel_case(self):
        request = SendEmailRequest(
            from_=EmailAddress(email="hi@example.com", name="Example"),
            to=[{"email": "ada@example.com", "name": "Ada"}],
            reply_to="support@example.com",
            subject="Hello",
            template_id="tpl_1",
            template_variables={"first": "Ada"},
            scheduled_at=datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc),
        )

        body = request.to_body()
        assert body["from"] == {"email": "hi@example.com", "name": "Example"}
        assert body["to"] == [{"email": "ada@example.com", "name": "Ada"}]
        assert body["replyTo"] == "support@example.com"
        assert body["templateId"] == "tpl_1"
        assert body["templateVariables"] == {"first": "Ada"}
        assert body["scheduledAt"].startswith("2024-05-01T09:00:00")
        assert "cc" not in body
        assert "html" not in body

    def test_name_is_omitted_when_empty(self):
        request = SendEmailRequest(
            from_=EmailAddress(email="hi@example.com", name=""),
            to="ada@example.com",
            subject="Hello",
        )
        assert request.to_body()["from"] == {"email": "hi@example.com"}

    def test_explicit_none_is_sent_as_null(self):
        request = SendEmailRequest(
            from_="hi@example.com", to="ada@example.com", subject="Hi", html=None
        )
        assert request.to_body()["html"] is None

    def test_unknown_field_is_rejected(self):
        with pytest.raises(ValidationError):
            SendEmailRequest(
                from_="hi@example.com", to="ada@example.com", subject="Hi", bogus=1
            )


class TestSendBroadcastEmailRequest:
    def test_single_to_becomes_list(self):
        request = SendBroadcastEmailRequest(
            from_="hi@example.com", to="ada@example.com", subject="News"
        )
        assert request.to_body()["to"] == ["ada@example.com"]
