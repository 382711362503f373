import logging
from sqlalchemy.ext.asyncio import AsyncSession
from patient_records.modules.records.repository import RecordRepository
from patient_records.modules.records.schemas import RecordCreate, RecordUpdate
from patient_records.modules.records.models import Record

logger = logging.getLogger(__name__)

class RecordService:
    def __init__(self, session: AsyncSession):
        self.repo = RecordRepository(session)
        self.session = session

    async def list(self):
        return await self.repo.list()

    async def search(self, term: str | None):
        term = (term or "").strip()
        if not term:
            return await self.repo.list()
        return await self.repo.search(term)

    async def get(self, record_id: int) -> Record | None:
        return await self.repo.get(record_id)

    async def create(self, payload: RecordCreate) -> Record:
        obj = await self.repo.create(**payload.model_dump())
        await self.session.commit()
        # pick up server-side defaults (createdAt/updatedAt)
        await self.session.refresh(obj)
        logger.info("Created record %s", obj.id)
        return obj

    async def update(self, record_id: int, payload: RecordUpdate) -> Record | None:
        data = payload.model_dump(exclude_unset=True)
        if not data:
            return await self.repo.get(record_id)
        obj = await self.repo.update(record_id, **data)
        if obj:
            await self.session.commit()
            # the trigger rewrote updatedAt
            await self.session.refresh(obj)
            logger.info("Updated record %s fields=%s", record_id, sorted(data))
        return obj

    async def delete(self, record_id: int) -> bool:
        ok = await self.repo.delete(record_id)
        if ok:
            await self.session.commit()
            logger.info("Deleted record %s", record_id)
        return ok
