from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path
import logging
import sys

from api import categories
from config.settings import Settings
from constants import ServerConfig
from database import engine, settings
from init_db import check_schema, init_database
from utils.uuid_helper import generate_uuid
from utils.logging_utils import clear_logging_context, set_logging_context

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(app_settings: Settings, log_to_file: bool = True):
    """
    Configure the root logger with console and rotating file handlers.

    Args:
        app_settings: Runtime settings (log level and directory)
        log_to_file: Also write to <log_dir>/backend.log
    """
    log_formatter = logging.Formatter(LOG_FORMAT)
    level = getattr(logging, app_settings.log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_to_file:
        log_dir = Path(app_settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "backend.log"

        # File handler with rotation (10MB per file, keep 5 backups)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)
        logger.info(f"Logging initialized: {log_file}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    logger.info("Starting catalog admin API...")
    init_database(engine)
    yield
    logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """
    Build the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    app = FastAPI(
        title="Catalog Admin API",
        description="Administration of catalog categories",
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
        """Attach a request ID to every log record emitted while handling a request"""
        request_id = request.headers.get("X-Request-ID") or generate_uuid()
        set_logging_context(request_id=request_id, method=request.method)
        try:
            response = await call_next(request)
        finally:
            clear_logging_context()
        response.headers["X-Request-ID"] = request_id
        return response

    app.include_router(categories.router, prefix=ServerConfig.API_PREFIX, tags=["categories"])

    @app.get(f"{ServerConfig.API_PREFIX}/health")
    def health():
        """Report whether the database schema is in place"""
        missing = check_schema(engine)
        return {"status": "ok" if not missing else "degraded", "missing_tables": missing}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    configure_logging(settings)
    logger.info(f"🚀 Starting Catalog Admin on http://{settings.host}:{settings.port}...")
    uvicorn.run(app, host=settings.host, port=settings.port)
