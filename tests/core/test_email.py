"""
Unit tests for the Resend email transport.
"""

from unittest.mock import patch

import pytest

from foundation_api.core import email


class TestSendEmail:
    """Tests for send_email."""

    @pytest.mark.asyncio
    async def test_without_api_key_logs_only(self):
        with patch("foundation_api.core.email.resend.Emails.send") as mock_send:
            sent = await email.send_email("jane@example.org", "Hello", "<p>Hi</p>")

        assert sent is True
        mock_send.assert_not_called()

    @pytest.mark.asyncio
    async def test_provider_failure_returns_false(self):
        with (
            patch("foundation_api.core.email._configured", True),
            patch("foundation_api.core.email.resend.api_key", "re_test_key"),
            patch(
                "foundation_api.core.email.resend.Emails.send",
                side_effect=RuntimeError("provider down"),
            ),
        ):
            sent = await email.send_email("jane@example.org", "Hello", "<p>Hi</p>")

        assert sent is False

    @pytest.mark.asyncio
    async def test_sends_through_resend(self):
        with (
            patch("foundation_api.core.email._configured", True),
            patch("foundation_api.core.email.resend.api_key", "re_test_key"),
            patch(
                "foundation_api.core.email.resend.Emails.send",
                return_value={"id": "email-1"},
            ) as mock_send,
        ):
            sent = await email.send_email("jane@example.org", "Hello", "<p>Hi</p>")

        assert sent is True
        params = mock_send.call_args.args[0]
        assert params["to"] == ["jane@example.org"]
        assert params["subject"] == "Hello"


class TestTemplates:
    @pytest.mark.asyncio
    async def test_acknowledgement_escapes_name(self):
        with patch("foundation_api.core.email.send_email", return_value=True) as mock_send:
            await email.send_submission_acknowledgement(
                "jane@example.org", "<b>Jane</b>", "Donation", "DON-12345678-ABCD"
            )

        html = mock_send.call_args.kwargs["html_content"]
        assert "&lt;b&gt;Jane&lt;/b&gt;" in html
        assert "DON-12345678-ABCD" in html
