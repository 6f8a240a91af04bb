"""
Base service class for the eTIMS HTTP front-end.
"""

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST
from starlette.exceptions import HTTPException as StarletteHTTPException
from datetime import datetime, timezone
from typing import Dict, Optional
import time
import os

from shared.config import EtimsSettings, get_settings
from shared.logging import clear_context, configure_logging, get_logger, set_request_id
from shared.metrics import get_metrics_collector
from shared.errors import EtimsError, ErrorBody, ErrorResponse, ValidationError, format_error


class BaseService:
    """Base service class with common functionality."""

    health_path = "/health"

    def __init__(self, service_name: str, settings: Optional[EtimsSettings] = None):
        self.service_name = service_name
        self.config = settings or get_settings()
        self.port = self.config.port
        self.logger = get_logger(f"{service_name}.service")
        self.metrics = get_metrics_collector(service_name)
        self._start_time = time.time()

        # Configure logging
        configure_logging(service_name, self.config.log_level)

        # Create FastAPI app
        self.app = self._create_app()

        # Set up middleware
        self._setup_middleware()

        # Set up routes
        self._setup_routes()

    def _create_app(self) -> FastAPI:
        """Create FastAPI application."""
        return FastAPI(
            title=f"{self.service_name.title()} Service",
            description="KRA eTIMS integration layer",
            version="1.0.0",
            docs_url=None if self.config.is_production else "/docs",
            redoc_url=None if self.config.is_production else "/redoc",
        )

    def _setup_middleware(self):
        """Set up middleware."""

        # Request timing middleware (inner; CORS is added after it and wraps it)
        @self.app.middleware("http")
        async def add_request_timing(request: Request, call_next):
            request_id = set_request_id(request.headers.get("X-Request-ID"))
            start_time = time.time()

            try:
                response = await call_next(request)
            except Exception as e:
                # Unclassified errors (transport failures, timeouts) are rendered
                # inside CORS and carry the request id
                self.logger.error("Unhandled exception", path=request.url.path, error=str(e), exc_info=True)
                self.metrics.record_error(type(e).__name__)
                response = JSONResponse(status_code=500, content=format_error(e))
            finally:
                duration = time.time() - start_time

            self.metrics.record_http_request(
                method=request.method,
                endpoint=request.url.path,
                status_code=response.status_code,
                duration=duration
            )

            self.logger.info(
                "HTTP request",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(duration * 1000, 2)
            )

            response.headers["X-Request-ID"] = request_id
            clear_context()
            return response

        origins = self.config.cors_origins
        self.logger.info("CORS allow-list configured", origins=origins)

        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=self.config.cors_allow_credentials,
            allow_methods=self.config.cors_methods or ["*"],
            allow_headers=self.config.cors_headers or ["*"],
            expose_headers=self.config.cors_expose_headers,
            max_age=self.config.cors_max_age,
        )

    def _setup_routes(self):
        """Set up common routes."""

        @self.app.get(self.health_path)
        async def health_check():
            """Health check endpoint."""
            try:
                dependencies = await self._check_dependencies()
                self.metrics.record_health_check("ok")

                return {
                    "service": self.service_name,
                    "status": "ok",
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                    "uptime_seconds": self._get_uptime(),
                    "dependencies": dependencies,
                    "version": "1.0.0",
                    "commit": os.getenv("GIT_COMMIT", "unknown")
                }
            except Exception as e:
                self.logger.error("Health check failed", error=str(e))
                self.metrics.record_health_check("error")
                return JSONResponse(
                    status_code=503,
                    content={
                        "service": self.service_name,
                        "status": "error",
                        "error": str(e)
                    }
                )

        @self.app.get("/metrics")
        async def metrics_endpoint():
            """Prometheus metrics endpoint."""
            return Response(
                content=self.metrics.export(),
                media_type=CONTENT_TYPE_LATEST
            )

        # Error handlers
        @self.app.exception_handler(EtimsError)
        async def etims_exception_handler(request: Request, exc: EtimsError):
            """Render integration-layer errors as failure envelopes."""
            self.logger.error(
                "Error processing request",
                path=request.url.path,
                error_type=type(exc).__name__,
                message=exc.message,
                code=exc.code,
            )
            self.metrics.record_error(type(exc).__name__)
            return JSONResponse(status_code=exc.status_code, content=format_error(exc))

        @self.app.exception_handler(RequestValidationError)
        async def request_validation_handler(request: Request, exc: RequestValidationError):
            """Malformed request bodies are reported like payload validation failures."""
            errors = [
                {
                    "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
                    "message": err.get("msg", "Invalid value"),
                }
                for err in exc.errors()
            ]
            return await etims_exception_handler(request, ValidationError("Validation failed", errors))

        @self.app.exception_handler(StarletteHTTPException)
        async def http_exception_handler(request: Request, exc: StarletteHTTPException):
            message = "Resource not found" if exc.status_code == 404 else str(exc.detail)
            body = ErrorResponse(error=ErrorBody(message=message), status_code=exc.status_code).to_dict()
            body.pop("statusCode")
            return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)

        @self.app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            """Handle unclassified exceptions (transport failures, timeouts, bugs)."""
            self.logger.error("Unhandled exception", path=request.url.path, error=str(exc), exc_info=True)
            self.metrics.record_error(type(exc).__name__)
            return JSONResponse(status_code=500, content=format_error(exc))

    async def _check_dependencies(self) -> Dict[str, str]:
        """Check service dependencies. Override in subclasses."""
        return {}

    def _get_uptime(self) -> float:
        """Get service uptime in seconds."""
        return time.time() - self._start_time

    def run(self):
        """Run the service."""
        import uvicorn
        uvicorn.run(
            self.app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower()
        )
