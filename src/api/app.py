import logging
import time
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from src.api.error import ClientError, client_error_handler, validation_error_handler
from src.api.routes import clients, folders, invoices, reports
from src.depends import ReportingContext

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(config, context: Optional[ReportingContext] = None) -> FastAPI:
    """
    Build the reporting API

    Args:
        config: ApplicationConfig (or any object with the same attributes)
        context: Pre-built reporting context; built from config when omitted

    Returns:
        FastAPI application
    """
    configure_logging(config.LOG_LEVEL)
    reporting = context or ReportingContext.from_config(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await reporting.aclose()
        logger.info("Reporting context closed")

    app = FastAPI(
        title="Invoice Reporting API",
        description="Dashboard statistics, revenue series and paginated invoice/client listings",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.reporting = reporting

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Data-Source"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
            )
            return response

    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(reports.router, prefix=config.API_PREFIX)
    app.include_router(invoices.router, prefix=config.API_PREFIX)
    app.include_router(clients.router, prefix=config.API_PREFIX)
    app.include_router(folders.router, prefix=config.API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok", "store": reporting.connection.state.value}

    return app
