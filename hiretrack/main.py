"""HireTrack API application."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hiretrack.config import settings
from hiretrack.database import Database
from hiretrack.routers import candidates, positions, interviews, pipeline, dashboard
from hiretrack.utils.dependencies import http_error
from hiretrack.utils.exceptions import ServiceError


logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.INFO
)
logger = logging.getLogger(__name__)

ROUTERS = (dashboard, candidates, pipeline, positions, interviews)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the fixture stores for the life of the app."""
    await Database.connect()
    logger.info("%s %s ready", settings.app_name, settings.app_version)
    try:
        yield
    finally:
        await Database.disconnect()


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Service errors that reach the app unhandled keep their HTTP mapping."""
    error = http_error(exc)
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(ServiceError, service_error_handler)

    for module in ROUTERS:
        application.include_router(module.router)

    @application.get("/")
    async def root():
        return {
            "message": "Recruitment Tracker API",
            "version": settings.app_version,
            "resources": sorted(module.router.prefix for module in ROUTERS),
            "docs": "/docs",
        }

    @application.get("/health")
    async def health_check():
        db = Database.db
        return {
            "status": "healthy" if db is not None else "starting",
            "candidates": len(db.candidates) if db is not None else 0,
            "interviews": len(db.interviews) if db is not None else 0,
        }

    return application


app = create_app()
