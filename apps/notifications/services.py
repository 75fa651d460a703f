"""Notification services: rendering and sending guest emails."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.conf import settings  # type: ignore
from django.core.mail import send_mail  # type: ignore
from django.utils.html import escape, strip_tags  # type: ignore

from .qr import generate_qr_base64

if TYPE_CHECKING:  # pragma: no cover
    from apps.bookings.models import Booking

logger = logging.getLogger(__name__)

DATETIME_FORMAT = "%B %d, %Y %I:%M %p UTC"


# ============================================================================
# EMAIL DELIVERY
# ============================================================================

def send_email_notification(recipient_email: str, subject: str, html_message: str) -> None:
    """
    Send one HTML email with a plain-text alternative.

    Errors from the mail backend propagate; the caller decides how a
    failed delivery is recorded.
    """
    send_mail(
        subject=subject,
        message=strip_tags(html_message),
        from_email=f"{settings.NOTIFICATION_FROM_NAME} <{settings.DEFAULT_FROM_EMAIL}>",
        recipient_list=[recipient_email],
        html_message=html_message,
        fail_silently=False,
    )
    logger.info(f"Email sent successfully to {recipient_email}: {subject}")


# ============================================================================
# BOOKING EMAILS
# ============================================================================

def render_booking_approved_email(booking: "Booking") -> tuple[str, str]:
    """Approval email with the booking details and the check-in QR code inline."""
    condo = booking.condo
    subject = f"Booking Approved - {condo.name}"
    qr_base64 = generate_qr_base64(booking.qr_code_data)
    notes_html = (
        f"<li><strong>Notes:</strong> {escape(booking.notes)}</li>" if booking.notes else ""
    )

    html_message = f"""
    <html>
    <body>
        <h2>Dear {escape(booking.full_name)},</h2>
        <p>Your booking request for <strong>{escape(condo.name)}</strong> has been approved.</p>

        <h3>Booking details:</h3>
        <ul>
            <li><strong>Booking ID:</strong> #{booking.pk}</li>
            <li><strong>Condo:</strong> {escape(condo.name)}</li>
            <li><strong>Location:</strong> {escape(condo.location)}</li>
            <li><strong>Guests:</strong> {booking.guest_count}</li>
            <li><strong>Check-in:</strong> {booking.start_datetime.strftime(DATETIME_FORMAT)}</li>
            <li><strong>Check-out:</strong> {booking.end_datetime.strftime(DATETIME_FORMAT)}</li>
            {notes_html}
        </ul>

        <p>Present this QR code at the front desk when you arrive:</p>
        <p><img src="data:image/png;base64,{qr_base64}" alt="Check-in QR code" width="250" height="250"></p>

        <p>Best regards,<br>{escape(settings.NOTIFICATION_FROM_NAME)}</p>
        <p><small>This is an automated email. Please do not reply.</small></p>
    </body>
    </html>
    """
    return subject, html_message


def render_booking_rejected_email(booking: "Booking") -> tuple[str, str]:
    condo = booking.condo
    subject = f"Booking Request - {condo.name}"
    reason_html = (
        f"<h3>Reason:</h3><p>{escape(booking.rejection_reason)}</p>" if booking.rejection_reason else ""
    )

    html_message = f"""
    <html>
    <body>
        <h2>Booking Request Update</h2>
        <p>Dear {escape(booking.full_name)},</p>
        <p>Unfortunately, your booking request for <strong>{escape(condo.name)}</strong> could not be approved at this time.</p>
        {reason_html}
        <p>We apologize for any inconvenience. If you have any questions, please feel free to contact us.</p>
        <p>Best regards,<br>{escape(settings.NOTIFICATION_FROM_NAME)}</p>
        <p><small>This is an automated email. Please do not reply.</small></p>
    </body>
    </html>
    """
    return subject, html_message


def render_booking_cancelled_email(booking: "Booking") -> tuple[str, str]:
    condo = booking.condo
    subject = f"Booking Cancelled - {condo.name}"
    reason_html = (
        f"<h3>Reason:</h3><p>{escape(booking.rejection_reason)}</p>" if booking.rejection_reason else ""
    )

    html_message = f"""
    <html>
    <body>
        <h2>Booking Cancelled</h2>
        <p>Dear {escape(booking.full_name)},</p>
        <p>Your booking #{booking.pk} at <strong>{escape(condo.name)}</strong>
        ({booking.start_datetime.strftime(DATETIME_FORMAT)} - {booking.end_datetime.strftime(DATETIME_FORMAT)})
        has been cancelled by the owner.</p>
        {reason_html}
        <p>Best regards,<br>{escape(settings.NOTIFICATION_FROM_NAME)}</p>
        <p><small>This is an automated email. Please do not reply.</small></p>
    </body>
    </html>
    """
    return subject, html_message
