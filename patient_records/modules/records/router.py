from typing import Annotated
from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession
from patient_records.core.db import get_session
from patient_records.modules.records.schemas import RecordCreate, RecordUpdate, RecordOut, MessageOut
from patient_records.modules.records.service import RecordService

router = APIRouter()

# ids outside SQLite INTEGER range are rejected as malformed
RecordId = Annotated[int, Path(ge=-2**63, le=2**63 - 1)]

def svc(session: AsyncSession = Depends(get_session)) -> RecordService:
    return RecordService(session)

@router.get("", response_model=list[RecordOut])
async def list_records(
    search: str | None = None,
    service: RecordService = Depends(svc),
):
    return await service.search(search)

@router.get("/{record_id}", response_model=RecordOut)
async def get_record(
    record_id: RecordId,
    service: RecordService = Depends(svc),
):
    obj = await service.get(record_id)
    if not obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Record not found")
    return obj

@router.post("", response_model=RecordOut, status_code=status.HTTP_201_CREATED)
async def create_record(
    payload: RecordCreate,
    service: RecordService = Depends(svc),
):
    return await service.create(payload)

@router.put("/{record_id}", response_model=RecordOut)
async def update_record(
    record_id: RecordId,
    payload: RecordUpdate,
    service: RecordService = Depends(svc),
):
    obj = await service.update(record_id, payload)
    if not obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Record not found")
    return obj

@router.delete("/{record_id}", response_model=MessageOut)
async def delete_record(
    record_id: RecordId,
    service: RecordService = Depends(svc),
):
    ok = await service.delete(record_id)
    if not ok:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Record not found")
    return {"message": "Record deleted successfully"}
