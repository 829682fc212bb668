"""Outbound SMS through Twilio"""

from typing import Optional

from twilio.rest import Client as TwilioClient
import structlog

from tavola.config import settings

logger = structlog.get_logger()


def send_sms(to: str, body: str) -> Optional[str]:
    """
    Send an SMS and return the Twilio message SID.

    Returns None without sending when Twilio credentials are not configured,
    so callers leave their "sent" flags untouched.
    """
    if not settings.twilio_configured:
        logger.info("SMS not sent, Twilio not configured", to=to, body=body)
        return None

    client = TwilioClient(settings.twilio_account_sid, settings.twilio_auth_token)
    message = client.messages.create(
        body=body,
        from_=settings.twilio_phone_number,
        to=to,
    )
    logger.info("SMS sent", to=to, message_sid=message.sid)
    return message.sid


def reservation_reminder_text(name: str, guests: int, when: str) -> str:
    return (
        f"Hi {name}, this is a reminder of your reservation at {settings.restaurant_name}: "
        f"{guests} guests at {when}. See you soon!"
    )


def table_ready_text(name: str) -> str:
    return f"Hi {name}, your table at {settings.restaurant_name} is ready. Please see the host."
