"""Main FastAPI application entry point."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from app.config import settings
from app.core.exceptions import SignInError
from app.middleware.request_logging import RequestLoggingMiddleware
from app.models.auth import SignInResponse
import logging

from app.api.auth import router as auth_router

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manages application startup and shutdown events."""
    logger.info(f"Starting {settings.app_name}")
    yield
    logger.info(f"Shutting down {settings.app_name}")


app = FastAPI(
    title=settings.app_name,
    description="Sign-in page backend with a mock credential check",
    version="1.0.0",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)


@app.exception_handler(SignInError)
async def sign_in_error_handler(request: Request, exc: SignInError):
    """Renders a rejected sign-in as the {ok, message} JSON body."""
    body = SignInResponse(ok=False, message=exc.message)
    return JSONResponse(
        status_code=exc.status_code, content=body.model_dump(exclude_none=True)
    )


@app.get("/")
async def root():
    """Provides basic information about the running API."""
    return {
        "message": settings.app_name,
        "status": "running",
        "sign_in_endpoint": "/api/auth/mock-signin",
    }


@app.get("/health")
async def health_check():
    """Performs a health check of the API."""
    return {"status": "healthy"}
