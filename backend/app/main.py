"""Privacy Shield - FastAPI Application."""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.api.routes import users, scans, brokers, requests, exposures
from app.core.logging import get_logger, setup_logging
from app.db.database import init_db
from app.workers.runner import cancel_background_tasks, wait_for_background_tasks

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Set up logging and the database; drain background runs on shutdown."""
    setup_logging(settings.log_level, settings.log_format)
    await init_db()
    logger.info("app_started", name=settings.app_name)
    yield
    await wait_for_background_tasks(timeout=5)
    await cancel_background_tasks()


app = FastAPI(
    lifespan=lifespan,
    title=settings.app_name,
    description="Personal data exposure scanning and removal tracking",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed input is a 400, not FastAPI's default 422."""
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


# Include routers
app.include_router(users.router, prefix=f"{settings.api_prefix}/users", tags=["Users"])
app.include_router(scans.router, prefix=f"{settings.api_prefix}/scans", tags=["Scans"])
app.include_router(brokers.router, prefix=f"{settings.api_prefix}/data-brokers", tags=["Data Brokers"])
app.include_router(requests.router, prefix=f"{settings.api_prefix}/removal-requests", tags=["Removal Requests"])
app.include_router(exposures.router, prefix=f"{settings.api_prefix}/exposures", tags=["Exposures"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
