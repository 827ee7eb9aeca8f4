"""FastAPI application setup module."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from salesdash.database.database import build_engine, build_session_factory
from salesdash.endpoints.dashboard import router as dashboard_router
from salesdash.endpoints.seed import router as seed_router
from salesdash.endpoints.transactions import router as transactions_router
from salesdash.exceptions.api_exception import APIException
from salesdash.services.seed_service import build_http_client
from salesdash.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database engine and outbound HTTP client for the app's lifetime."""
    engine = build_engine()
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.http_client = build_http_client()
    logger.info("Application started")
    try:
        yield
    finally:
        await app.state.http_client.aclose()
        await engine.dispose()
        logger.info("Application stopped")


app = FastAPI(
    title="Salesdash API",
    description="Monthly sales dashboard over a seeded product transaction dataset",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# CORS middleware for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException) -> PlainTextResponse:
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    errors = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return PlainTextResponse(
        f"Invalid request: {errors}", status_code=status.HTTP_400_BAD_REQUEST
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return PlainTextResponse(
        "Internal server error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


# Include routers
app.include_router(seed_router)
app.include_router(transactions_router)
app.include_router(dashboard_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
