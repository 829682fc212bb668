"""Generic async repository over a single model"""

from datetime import datetime
from typing import Any, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tavola.database import Base
from tavola.errors import ConstraintViolation

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """
    Typed CRUD and filtered reads for one model.

    Repositories flush but never commit; the caller owns the transaction.
    """

    model: Type[ModelT]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, record_id: int, fresh: bool = False) -> Optional[ModelT]:
        """Return the record or None; a missing id is not an error.

        `fresh` re-reads the row even when the session already holds it.
        """
        return await self.db.get(self.model, record_id, populate_existing=fresh)

    async def create(self, **fields: Any) -> ModelT:
        record = self.model(**fields)
        self.db.add(record)
        await self._flush()
        return record

    async def update(self, record_id: int, **fields: Any) -> Optional[ModelT]:
        record = await self.get(record_id)
        if record is None:
            return None
        for field, value in fields.items():
            setattr(record, field, value)
        if hasattr(record, "updated_at"):
            record.updated_at = datetime.utcnow()
        await self._flush()
        return record

    async def list(
        self,
        *criteria: Any,
        order_by: Sequence[Any] = (),
        limit: Optional[int] = None,
    ) -> List[ModelT]:
        query = select(self.model).where(*criteria)
        if order_by:
            query = query.order_by(*order_by)
        if limit is not None:
            query = query.limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def first(self, *criteria: Any) -> Optional[ModelT]:
        result = await self.db.execute(select(self.model).where(*criteria).limit(1))
        return result.scalar_one_or_none()

    async def _flush(self) -> None:
        try:
            await self.db.flush()
        except IntegrityError as e:
            await self.db.rollback()
            raise ConstraintViolation(
                f"{self.model.__name__} violates a database constraint",
                errors=[{"field": None, "message": str(e.orig)}],
            ) from e
