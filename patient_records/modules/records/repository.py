from typing import Sequence
from sqlalchemy import select, update, delete, or_
from sqlalchemy.ext.asyncio import AsyncSession
from patient_records.modules.records.models import Record

NEWEST_FIRST = (Record.created_at.desc(), Record.id.desc())

class RecordRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, **data) -> Record:
        obj = Record(**data)
        self.session.add(obj)
        await self.session.flush()
        return obj

    async def get(self, record_id: int) -> Record | None:
        q = select(Record).where(Record.id == record_id)
        res = await self.session.execute(q)
        return res.scalar_one_or_none()

    async def list(self) -> Sequence[Record]:
        q = select(Record).order_by(*NEWEST_FIRST)
        res = await self.session.execute(q)
        return res.scalars().all()

    async def search(self, term: str) -> Sequence[Record]:
        q = select(Record).where(
            or_(
                Record.first_name.icontains(term, autoescape=True),
                Record.last_name.icontains(term, autoescape=True),
                Record.status.icontains(term, autoescape=True),
            )
        ).order_by(*NEWEST_FIRST)
        res = await self.session.execute(q)
        return res.scalars().all()

    async def update(self, record_id: int, **data) -> Record | None:
        obj = await self.get(record_id)
        if not obj:
            return None
        # always issue the UPDATE so the updatedAt trigger fires even when values are unchanged
        await self.session.execute(
            update(Record).where(Record.id == record_id).values(**data)
        )
        return obj

    async def delete(self, record_id: int) -> bool:
        res = await self.session.execute(delete(Record).where(Record.id == record_id))
        return res.rowcount > 0
