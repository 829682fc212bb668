"""Celery application for SMS reminders and waitlist notifications"""

from celery import Celery
from tavola.config import settings

celery_app = Celery(
    "tavola",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=[
        "tavola.jobs.tasks",
    ],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_time_limit=120,
    task_ignore_result=True,
    worker_prefetch_multiplier=1,
    task_acks_late=True,
    task_reject_on_worker_lost=True,

    # A run that could not start before the next one is due is dropped,
    # so a stalled worker never replays a backlog of texts
    beat_schedule={
        "send-reservation-reminders": {
            "task": "send_reservation_reminders",
            "schedule": 3600.0,  # Every hour
            "options": {"expires": 3300},
        },
        "notify-waitlist-guests": {
            "task": "notify_waitlist_guests",
            "schedule": 60.0,
            "options": {"expires": 55},
        },
    },
)
