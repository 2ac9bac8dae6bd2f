import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sora_relay.config import get_settings, settings
from sora_relay.errors import DEFAULT_FAILURE_MESSAGE, RelayError, is_auth_failure
from sora_relay.routers import generation

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Same settings the routes resolve, including test overrides
    app_settings = app.dependency_overrides.get(get_settings, get_settings)()
    cloudinary_config = app_settings.cloudinary()
    logger.info(f"Server is LIVE and listening on http://{app_settings.APP_HOST}:{app_settings.APP_PORT}")
    logger.info(f"Cloudinary cloud name: {cloudinary_config.cloud_name}")
    if cloudinary_config.is_placeholder:
        logger.error("!!! CLOUDINARY CONFIGURATION ERROR: check CLOUDINARY_* settings in .env !!!")
    logger.info(f"Replicate model: {app_settings.REPLICATE_MODEL}")
    logger.info("--- READY TO ACCEPT REQUESTS ---")

    yield


app = FastAPI(title="Sora Cloudinary Relay API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Every failure stays inside its own request; nothing here ends the process.
@app.exception_handler(RelayError)
async def relay_error_handler(_request: Request, exc: RelayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request body"
    return JSONResponse(status_code=400, content={"status": "failed", "error": message})


@app.exception_handler(Exception)
async def unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error: {exc}")
    return JSONResponse(
        status_code=401 if is_auth_failure(exc) else 500,
        content={"status": "failed", "error": str(exc) or DEFAULT_FAILURE_MESSAGE},
    )


app.include_router(generation.router)
