# src/ai_gateway/main.py
import logging
import time
from contextlib import asynccontextmanager
from functools import lru_cache

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.datastructures import UploadFile

from ai_gateway.config import Settings, build_registry
from ai_gateway.errors import DiffTooLargeError, GatewayError, InvalidRequestError
from ai_gateway.models.diagnostic import ReviewResponse
from ai_gateway.models.review import ReviewRequest
from ai_gateway.review.engine import ReviewEngine


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_engine() -> ReviewEngine:
    settings = get_settings()
    return ReviewEngine(
        registry=build_registry(settings),
        default_provider=settings.default_provider,
        default_model=settings.default_model,
        timeout=settings.review_timeout,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())
    logger.info("AI Gateway starting...")

    # Providers are registered before serving starts; fails fast without any key
    engine = get_engine()
    logger.info(f"Available providers: {sorted(engine.registry.list())}")
    yield
    logger.info("AI Gateway shutting down...")


app = FastAPI(title="AI Review Gateway", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.monotonic()
    response = await call_next(request)
    elapsed_ms = (time.monotonic() - start) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
    )
    return response


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    logger.error(f"Review failed: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


@app.get("/health")
async def health():
    return {"status": "healthy", "service": "ai-gateway"}


async def _read_json_request(request: Request, max_size: int) -> ReviewRequest:
    body = await request.body()
    if len(body) > max_size:
        raise DiffTooLargeError(f"Request body exceeds {max_size} bytes")

    try:
        return ReviewRequest.model_validate_json(body)
    except ValidationError as e:
        raise InvalidRequestError(f"Invalid JSON: {e}") from e


async def _read_multipart_request(request: Request, max_size: int) -> ReviewRequest:
    """Read a form with a ``metadata`` JSON field and a ``git_diff`` file."""
    form = await request.form()

    metadata = form.get("metadata")
    if not metadata or not isinstance(metadata, str):
        raise InvalidRequestError("Missing metadata field")

    try:
        review_request = ReviewRequest.model_validate_json(metadata)
    except ValidationError as e:
        raise InvalidRequestError(f"Invalid metadata JSON: {e}") from e

    upload = form.get("git_diff")
    if not isinstance(upload, UploadFile):
        raise InvalidRequestError("Missing or invalid git_diff file")

    diff = await upload.read()
    if len(diff) > max_size:
        raise DiffTooLargeError(f"git_diff exceeds {max_size} bytes")

    return review_request.model_copy(update={"git_diff": diff.decode("utf-8", errors="replace")})


@app.post("/review", response_model=ReviewResponse, response_model_exclude_none=True)
async def review(
    request: Request,
    engine: ReviewEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
):
    """Review a git diff with the requested AI provider.

    Accepts either a JSON ReviewRequest body or multipart form data.
    """
    content_type = request.headers.get("content-type", "")
    logger.info(f"Received review request - Content-Type: {content_type}")

    if "application/json" in content_type:
        review_request = await _read_json_request(request, settings.max_diff_size)
    else:
        review_request = await _read_multipart_request(request, settings.max_diff_size)

    return await engine.review(review_request)


def run() -> None:
    settings = get_settings()
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())
