import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from apartments_api.config import settings
from apartments_api.database import async_session
from apartments_api.exceptions import ApiException
from apartments_api.routers import apartments, health
from apartments_api.schemas.common import ErrorResponse
from apartments_api.seed import seed_apartments

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    if settings.SEED_ON_STARTUP:
        async with async_session() as session:
            await seed_apartments(session)
    yield


app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"{request.method} {request.url.path}")
    return await call_next(request)


# Global exception handlers
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"error": ..., "errors": [...]}."""
    errors = exc.errors if isinstance(exc, ApiException) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse.create(message=str(exc.detail), errors=errors).to_content(),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle malformed path parameters and request bodies."""
    errors = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse.create(
            message="Request validation failed", errors=errors
        ).to_content(),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions. Internal details are hidden in production."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    response = ErrorResponse.create(message="Internal Server Error")
    if not settings.is_production:
        response.detail = str(exc)
        response.stack = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=response.to_content(),
    )


app.include_router(health.router, prefix="/api", tags=["Health"])
app.include_router(apartments.router, prefix="/api/apartments", tags=["Apartments"])


@app.get("/")
async def root():
    return {
        "name": settings.API_TITLE,
        "version": settings.API_VERSION,
        "docs": "/api/docs",
    }
