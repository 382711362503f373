from fastapi import APIRouter
from patient_records.modules.records.router import router as records_router

api_router = APIRouter()
api_router.include_router(records_router, prefix="/records", tags=["records"])

@api_router.get("/health", tags=["health"])
async def health():
    return {"status": "ok"}
