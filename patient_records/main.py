import time
from contextlib import asynccontextmanager
import logging
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from dotenv import load_dotenv

# Load environment variables from .env file before anything else
load_dotenv()

from patient_records.core.config import settings
from patient_records.core.logging import setup_logging, request_id_ctx
from patient_records.core.errors import register_exception_handlers
from patient_records.core.db import init_models, close_engine
from patient_records.api.router import api_router
from patient_records.modules.ui.router import router as ui_router

STATIC_DIR = Path(__file__).resolve().parent / "static"

setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_models()
    yield
    await close_engine()
    logger.info("Database connection closed.")

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
register_exception_handlers(app)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = (time.time() - start_time) * 1000
    formatted_process_time = f"{process_time:.2f}ms"

    logger.info(
        f"Request: {request.method} {request.url.path} - Response: {response.status_code} - Time: {formatted_process_time}"
    )

    return response

# registered last so it runs first and the request log line carries the id
@app.middleware("http")
async def add_request_id(request: Request, call_next):
    rid = request.headers.get("x-request-id", "-")
    request_id_ctx.set(rid)
    response = await call_next(request)
    return response


app.include_router(api_router, prefix=settings.API_PREFIX)
app.include_router(ui_router)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "patient_records.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENV == "local",
        log_level="info",
    )
