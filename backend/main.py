from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from init_db import init_database
from api import products, basket
from config.settings import LOG_DIR, SEED_ON_STARTUP, is_development
from constants import HTTPStatus, ServerConfig
from dependencies import get_redis
from dtos.response.api_response import ApiExceptionResponse, ApiResponse, ApiValidationErrorResponse
from utils.logging_utils import clear_logging_context, set_logging_context
import logging
from logging.handlers import RotatingFileHandler
import sys
import traceback
import uuid

# Configure logging with rotating file handler
LOG_DIR.mkdir(parents=True, exist_ok=True)
LOG_FILE = LOG_DIR / "backend.log"

# Create formatters and handlers
log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

# File handler with rotation (10MB per file, keep 5 backups)
file_handler = RotatingFileHandler(
    LOG_FILE,
    maxBytes=10 * 1024 * 1024,  # 10MB
    backupCount=5,
    encoding='utf-8'
)
file_handler.setFormatter(log_formatter)
file_handler.setLevel(logging.INFO)

# Console handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(log_formatter)
console_handler.setLevel(logging.INFO)

# Configure root logger
root_logger = logging.getLogger()
root_logger.setLevel(logging.INFO)
root_logger.addHandler(file_handler)
root_logger.addHandler(console_handler)

logger = logging.getLogger(__name__)
logger.info(f"Logging initialized: {LOG_FILE}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    logger.info("Preparing catalog database...")
    init_database(seed=SEED_ON_STARTUP)

    yield

    logger.info("Shutting down...")
    await get_redis().aclose()
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Catalog API",
    description="Product catalog and customer baskets",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging_context(request: Request, call_next):
    """Tag every log line emitted during a request with its id and path."""
    set_logging_context(request_id=request.headers.get("x-request-id", uuid.uuid4().hex), path=request.url.path)
    try:
        return await call_next(request)
    finally:
        clear_logging_context()


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as ApiResponse (or ApiValidationErrorResponse for list details)."""
    if isinstance(exc.detail, list):
        body = ApiValidationErrorResponse(errors=[str(e) for e in exc.detail])
    else:
        message = exc.detail if isinstance(exc.detail, str) else None
        # Starlette fills detail with the reason phrase when none is given
        body = ApiResponse.for_status(exc.status_code, message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(by_alias=True), headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed requests are 400s with one message per invalid field."""
    errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()]
    body = ApiValidationErrorResponse(errors=errors)
    return JSONResponse(status_code=HTTPStatus.BAD_REQUEST, content=body.model_dump(by_alias=True))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last-resort 500; the traceback is only exposed in development."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    details = "".join(traceback.format_exception(exc)) if is_development() else None
    body = ApiExceptionResponse.for_exception(str(exc) if is_development() else None, details)
    return JSONResponse(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, content=body.model_dump(by_alias=True))


# Include API routers
app.include_router(products.router, prefix="/api", tags=["products"])
app.include_router(basket.router, prefix="/api", tags=["basket"])


@app.get("/api/health")
def health():
    """Liveness probe"""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    logger.info(f"🚀 Starting Catalog API on {ServerConfig.url()}...")
    uvicorn.run(app, host=ServerConfig.HOST, port=ServerConfig.PORT)
