"""FastAPI application setup, error mapping and health endpoint."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.errors import VillageError
from app.routers.achievements import router as achievements_router
from app.routers.lessons import router as lessons_router
from app.routers.reports import router as reports_router
from app.routers.tutor import router as tutor_router
from app.settings import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Village API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(lessons_router, prefix="/v1", tags=["lessons"])
app.include_router(tutor_router, prefix="/v1", tags=["tutor"])
app.include_router(reports_router, prefix="/v1", tags=["reports"])
app.include_router(achievements_router, prefix="/v1", tags=["achievements"])


@app.exception_handler(VillageError)
async def village_error_handler(request: Request, exc: VillageError):
    if exc.status_code >= 500:
        logger.error("%s on %s: %s", exc.__class__.__name__, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("Invalid request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/health")
def health():
    """Return a simple health payload for uptime checks."""
    return {"status": "ok", "env": settings.app_env}
