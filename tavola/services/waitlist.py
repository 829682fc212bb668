"""Walk-in waitlist management"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from tavola.errors import InvalidArgument, NotFound
from tavola.models.waitlist import WaitlistEntry, WaitlistStatus
from tavola.repositories import WaitlistRepository
from tavola.schemas.waitlist import WaitlistCreate, WaitlistEntryResponse
from tavola.services.notifier import EventType, Notifier

logger = structlog.get_logger()


def serialize_entry(entry: WaitlistEntry) -> dict:
    return WaitlistEntryResponse.model_validate(entry).model_dump(mode="json", by_alias=True)


class WaitlistManager:
    """Check-in and status changes for the walk-in queue"""

    def __init__(self, db: AsyncSession, notifier: Optional[Notifier] = None):
        self.db = db
        self.notifier = notifier
        self.entries = WaitlistRepository(db)

    async def add(self, data: WaitlistCreate) -> WaitlistEntry:
        entry = await self.entries.create(
            **data.model_dump(),
            status=WaitlistStatus.WAITING,
            check_in_time=datetime.utcnow(),
        )
        await self.db.commit()

        logger.info("Waitlist entry added", entry_id=entry.id, party_size=entry.party_size)
        self._emit(EventType.NEW_WAITLIST, serialize_entry(entry))
        return entry

    async def set_status(self, entry_id: int, status: WaitlistStatus) -> WaitlistEntry:
        """Any status may follow any other; only the timestamps depend on the target"""
        try:
            status = WaitlistStatus(status)
        except ValueError:
            raise InvalidArgument(
                f"Unknown waitlist status: {status}",
                errors=[{"field": "status", "message": "Unknown status"}],
            )

        fields = {"status": status}
        if status == WaitlistStatus.SEATED:
            fields["seated_time"] = datetime.utcnow()
        elif status == WaitlistStatus.LEFT:
            fields["left_time"] = datetime.utcnow()
        elif status == WaitlistStatus.NOTIFIED:
            # Picked up by the notify_waitlist_guests job
            fields["notification_sent"] = False

        entry = await self.entries.update(entry_id, **fields)
        if entry is None:
            raise NotFound(f"Waitlist entry {entry_id} not found")
        await self.db.commit()

        logger.info("Waitlist status updated", entry_id=entry.id, status=status.value)
        self._emit(EventType.WAITLIST_STATUS_UPDATED, serialize_entry(entry))
        return entry

    async def current(self) -> List[WaitlistEntry]:
        return await self.entries.list_waiting()

    def _emit(self, event_type: str, payload: dict) -> None:
        if self.notifier is not None:
            self.notifier.publish(event_type, payload)
