# -*- coding: utf-8 -*-
import sys
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.responses import JSONResponse

from app import config
from app.modules.vehicle_count import SearchInProgressError, get_container
from app.pydantic_models import HealthCheck
from app.rate_limiter import limiter
from app.routers import pages, vehicle_counts

logger.remove()
logger.add(sys.stdout, level=config.LOG_LEVEL)

if config.SENTRY_ENABLE:
    sentry_sdk.init(
        dsn=config.SENTRY_DSN,
        traces_sample_rate=0,
        environment=config.SENTRY_ENVIRONMENT,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = get_container()
    app.state.dashboard_session = container.session
    logger.info(
        f"Dashboard ready for cameras {config.VEHICLE_COUNT_CAMERA_IDS} "
        f"at {config.VEHICLE_COUNT_BASE_URL}"
    )
    yield

    # Run things on shutdown
    logger.info("Shutting down...")
    app.state.dashboard_session = None
    logger.info("Shutdown complete")


app = FastAPI(
    title="Vehicle Count Dashboard",
    lifespan=lifespan,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

logger.debug("Configuring CORS with the following settings:")
allow_origins = config.ALLOWED_ORIGINS if config.ALLOWED_ORIGINS else ()
logger.debug(f"ALLOWED_ORIGINS: {allow_origins}")
allow_origin_regex = config.ALLOWED_ORIGINS_REGEX if config.ALLOWED_ORIGINS_REGEX else None
logger.debug(f"ALLOWED_ORIGINS_REGEX: {allow_origin_regex}")
logger.debug(f"ALLOWED_METHODS: {config.ALLOWED_METHODS}")
logger.debug(f"ALLOWED_HEADERS: {config.ALLOWED_HEADERS}")
logger.debug(f"ALLOW_CREDENTIALS: {config.ALLOW_CREDENTIALS}")
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_origin_regex=allow_origin_regex,
    allow_methods=config.ALLOWED_METHODS,
    allow_headers=config.ALLOWED_HEADERS,
    allow_credentials=config.ALLOW_CREDENTIALS,
)

app.include_router(pages.router)
app.include_router(vehicle_counts.router)


@app.get(
    "/health",
    tags=["Healthcheck"],
    summary="Performs a health check",
    responses={
        200: {"status": "OK"},
        429: {"error": "Rate limit exceeded"},
        503: {"status": "Service Unavailable"},
    },
    response_model=HealthCheck,
)
@limiter.limit(config.RATE_LIMIT_DEFAULT)
async def healthcheck(request: Request):
    if getattr(request.app.state, "dashboard_session", None) is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "Service Unavailable"},
        )
    return {"status": "OK"}


@app.exception_handler(SearchInProgressError)
def handle_search_in_progress(request: Request, ex: SearchInProgressError):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(ex)})


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, ex: RequestValidationError):
    logger.error(f"RequestValidationError: {ex.errors()}")
    content = {"detail": jsonable_encoder(ex.errors())}
    return JSONResponse(content=content, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
