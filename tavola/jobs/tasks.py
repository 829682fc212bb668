"""Background job tasks"""

from datetime import datetime, timedelta
import asyncio
import structlog

from tavola.jobs.celery_app import celery_app
from tavola.config import settings

logger = structlog.get_logger()


def run_async(coro):
    """Helper to run async functions in sync context"""
    return asyncio.run(coro)


def due_for_reminder(reservation, now: datetime, start_hours: int, end_hours: int) -> bool:
    """True when the reservation starts inside [now + start_hours, now + end_hours]"""
    starts_at = datetime.combine(reservation.date, reservation.time)
    return now + timedelta(hours=start_hours) <= starts_at <= now + timedelta(hours=end_hours)


@celery_app.task(name="send_reservation_reminders")
def send_reservation_reminders():
    """Send reminders for upcoming reservations"""
    logger.info("Sending reservation reminders")

    async def _send_reminders():
        from tavola.database import SessionLocal
        from tavola.repositories import ReservationRepository
        from tavola.services.sms import send_sms, reservation_reminder_text

        now = datetime.utcnow()
        start = settings.reminder_window_start_hours
        end = settings.reminder_window_end_hours
        # The window can straddle midnight
        days = sorted({(now + timedelta(hours=start)).date(), (now + timedelta(hours=end)).date()})

        sent = 0
        async with SessionLocal() as db:
            repo = ReservationRepository(db)
            candidates = await repo.list_due_for_reminder(days)

            for reservation in candidates:
                if not due_for_reminder(reservation, now, start, end):
                    continue
                try:
                    message_sid = send_sms(
                        reservation.phone,
                        reservation_reminder_text(
                            reservation.name,
                            reservation.guests,
                            reservation.time.strftime("%I:%M %p"),
                        ),
                    )
                    if message_sid is None:
                        continue

                    reservation.reminder_sent = True
                    sent += 1

                    logger.info("Sent reservation reminder", reservation_id=reservation.id)

                except Exception as e:
                    logger.error(
                        "Failed to send reservation reminder",
                        reservation_id=reservation.id,
                        error=str(e),
                    )

            await db.commit()

        logger.info("Reservation reminders done", candidates=len(candidates), sent=sent)

    run_async(_send_reminders())


@celery_app.task(name="notify_waitlist_guests")
def notify_waitlist_guests():
    """Text parties whose table is ready"""

    async def _notify():
        from tavola.database import SessionLocal
        from tavola.repositories import WaitlistRepository
        from tavola.services.sms import send_sms, table_ready_text

        async with SessionLocal() as db:
            entries = await WaitlistRepository(db).list_pending_notification()

            for entry in entries:
                try:
                    if send_sms(entry.phone, table_ready_text(entry.name)) is None:
                        continue
                    entry.notification_sent = True
                    logger.info("Waitlist guest notified", entry_id=entry.id)
                except Exception as e:
                    logger.error("Failed to notify waitlist guest", entry_id=entry.id, error=str(e))

            await db.commit()

    run_async(_notify())
