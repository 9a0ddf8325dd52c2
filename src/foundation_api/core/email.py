"""
Email Service using Resend

Handles sending the submission acknowledgements, admin alerts, status
updates and newsletter welcome emails. Call init_email() once at startup;
without a RESEND_API_KEY messages are logged instead of sent.
"""

import asyncio
import logging
from html import escape

import resend

from foundation_api.core.config import settings

logger = logging.getLogger(__name__)

_configured = False

_STYLES = """
            body { font-family: system-ui, -apple-system, sans-serif; line-height: 1.6; color: #1f2937; }
            .container { max-width: 600px; margin: 0 auto; padding: 40px 20px; }
            .header { color: #1a365d; margin-bottom: 24px; }
            .reference { background-color: #f9fafb; border: 1px solid #e5e7eb; padding: 16px; border-radius: 8px; margin: 16px 0; }
            .message-box { background-color: #eff6ff; border: 1px solid #bfdbfe; padding: 16px; border-radius: 8px; margin: 16px 0; }
            .details td { padding: 4px 12px 4px 0; vertical-align: top; }
            .button { display: inline-block; background-color: #1a365d; color: white; padding: 14px 28px; text-decoration: none; border-radius: 8px; margin: 24px 0; }
            .footer { margin-top: 40px; padding-top: 20px; border-top: 1px solid #e5e7eb; color: #6b7280; font-size: 14px; }
"""


def init_email() -> None:
    """Configure the Resend client from settings."""
    global _configured
    resend.api_key = settings.resend_api_key
    _configured = True
    if settings.resend_api_key:
        logger.info("Email transport configured (Resend)")
    else:
        logger.warning("RESEND_API_KEY not set - emails will be logged instead of sent")


def close_email() -> None:
    """Reset the transport so a later init_email() picks up fresh settings."""
    global _configured
    resend.api_key = None
    _configured = False


def _render(title: str, body_html: str) -> str:
    organization = escape(settings.organization_name)
    return f"""
    <!DOCTYPE html>
    <html>
    <head>
        <style>{_STYLES}        </style>
    </head>
    <body>
        <div class="container">
            <h1 class="header">{escape(title)}</h1>
            {body_html}
            <div class="footer">
                <p>Thank you for supporting our work.</p>
                <p>{organization}</p>
            </div>
        </div>
    </body>
    </html>
    """


async def send_email(
    to_email: str,
    subject: str,
    html_content: str,
) -> bool:
    """
    Send an email using Resend.

    Args:
        to_email: Recipient email address
        subject: Email subject line
        html_content: HTML content of the email

    Returns:
        True if email was sent successfully
    """
    if not _configured:
        init_email()

    if not resend.api_key:
        logger.info(f"EMAIL TO: {to_email} | SUBJECT: {subject}")
        return True

    try:
        params: resend.Emails.SendParams = {
            "from": settings.email_from,
            "to": [to_email],
            "subject": subject,
            "html": html_content,
        }

        # Run sync Resend call in thread pool to avoid blocking event loop
        email = await asyncio.to_thread(resend.Emails.send, params)
        logger.info(f"Email sent successfully to {to_email}, id: {email['id']}")
        return True
    except Exception as e:
        logger.error(f"Failed to send email to {to_email}: {e}")
        return False


async def send_submission_acknowledgement(
    to_email: str,
    recipient_name: str | None,
    form_label: str,
    reference: str,
) -> bool:
    """Confirm receipt of a public submission to the submitter."""
    safe_name = escape(recipient_name or "there")
    safe_label = escape(form_label)
    safe_reference = escape(reference)

    html_content = _render(
        "We Received Your Submission",
        f"""
            <p>Hello {safe_name},</p>

            <p>Thank you for your {safe_label.lower()}. Our team will review it and get back to you soon.</p>

            <div class="reference">
                <p><strong>Your reference:</strong> {safe_reference}</p>
                <p>Please quote this reference if you contact us about your submission.</p>
            </div>
        """,
    )
    return await send_email(
        to_email=to_email,
        subject=f"{safe_label} received - {safe_reference}",
        html_content=html_content,
    )


async def send_admin_submission_alert(
    form_label: str,
    reference: str,
    details: dict[str, object],
) -> bool:
    """Alert the organization inbox about a new submission."""
    if not settings.admin_email:
        logger.debug(f"ADMIN_EMAIL not set - skipping admin alert for {reference}")
        return True

    safe_label = escape(form_label)
    safe_reference = escape(reference)
    rows = "".join(
        f"<tr><td><strong>{escape(str(key).replace('_', ' ').title())}</strong></td>"
        f"<td>{escape(str(value))}</td></tr>"
        for key, value in details.items()
        if value not in (None, "", [])
    )

    html_content = _render(
        f"New {form_label}",
        f"""
            <p>A new {safe_label.lower()} was submitted.</p>

            <div class="reference">
                <p><strong>Reference:</strong> {safe_reference}</p>
            </div>

            <table class="details">{rows}</table>
        """,
    )
    return await send_email(
        to_email=settings.admin_email,
        subject=f"New {safe_label}: {safe_reference}",
        html_content=html_content,
    )


async def send_status_update(
    to_email: str,
    recipient_name: str | None,
    subject: str,
    headline: str,
    body: str,
    reference: str,
    reason: str | None = None,
) -> bool:
    """Tell a submitter their submission entered a new status."""
    safe_name = escape(recipient_name or "there")
    safe_body = escape(body)
    safe_reference = escape(reference)

    reason_html = ""
    if reason:
        reason_html = f"""
            <div class="message-box">
                <p><strong>Note from our team:</strong></p>
                <p>{escape(reason)}</p>
            </div>
        """

    html_content = _render(
        headline,
        f"""
            <p>Hello {safe_name},</p>

            <p>{safe_body}</p>
            {reason_html}
            <p style="color: #6b7280;">Reference: {safe_reference}</p>
        """,
    )
    return await send_email(
        to_email=to_email,
        subject=subject,
        html_content=html_content,
    )


async def send_newsletter_welcome(to_email: str, unsubscribe_token: str) -> bool:
    """Welcome a new (or returning) newsletter subscriber."""
    organization = escape(settings.organization_name)
    unsubscribe_url = f"{settings.api_public_url}/newsletter/unsubscribe/{unsubscribe_token}"

    html_content = _render(
        "Welcome to Our Newsletter",
        f"""
            <p>Hello,</p>

            <p>You are now subscribed to updates from <strong>{organization}</strong>. We will keep you posted on our programs, events and stories from the community.</p>

            <a href="{settings.frontend_url}" class="button">Visit Our Website</a>

            <p style="font-size: 14px;">Don't want these emails? <a href="{unsubscribe_url}">Unsubscribe</a> at any time.</p>
        """,
    )
    return await send_email(
        to_email=to_email,
        subject=f"Welcome to the {organization} newsletter",
        html_content=html_content,
    )
