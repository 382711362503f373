from pathlib import Path
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from patient_records.core.config import settings
from patient_records.modules.records.formatting import format_date, full_name, format_address
from patient_records.modules.records.models import STATUS_VALUES
from patient_records.modules.records.router import svc
from patient_records.modules.records.service import RecordService

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["format_date"] = format_date
templates.env.filters["full_name"] = full_name
templates.env.filters["format_address"] = format_address

router = APIRouter(include_in_schema=False)

@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    search: str | None = None,
    service: RecordService = Depends(svc),
):
    records = await service.search(search)
    return templates.TemplateResponse(request, "index.html", {
        "records": records,
        "search": search or "",
        "statuses": STATUS_VALUES,
        "api_base": f"{settings.API_PREFIX}/records",
    })

# table body only; the page script swaps it in after every list/search/mutation
@router.get("/ui/rows", response_class=HTMLResponse)
async def rows(
    request: Request,
    search: str | None = None,
    service: RecordService = Depends(svc),
):
    records = await service.search(search)
    return templates.TemplateResponse(request, "_rows.html", {"records": records})
