import logging
from typing import Any, Dict

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__, config, earth_engine
from .errors import ServiceUnavailable
from .logging_setup import setup_logging
from .models import ErrorResponse, SearchRequest, SearchResponse
from .service import SearchService

log = logging.getLogger(__name__)

_service = SearchService()


def get_service() -> SearchService:
    return _service


def _error(status_code: int, **fields) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(**fields).payload())


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(
        title="Forest Sentinel API",
        description="Forest fire risk from SAR, vegetation, active-fire and weather data.",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ServiceUnavailable)
    async def _service_unavailable(request: Request, exc: ServiceUnavailable):
        log.error(f"Service unavailable: {exc.message}")
        return _error(503, error="Service Unavailable", message=exc.message,
                      details=exc.message, missing=exc.missing)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            return JSONResponse(status_code=405, content={"success": False, "error": "Method not allowed"},
                                headers=getattr(exc, "headers", None))
        return _error(exc.status_code, error=str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError):
        details = "; ".join(f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors())
        log.error(f"Search API error: invalid request body: {details}")
        return _error(500, error="Failed to process search request", details=details)

    @app.get("/health", tags=["system"])
    def health() -> Dict[str, Any]:
        """
        Simple health check endpoint.
        """
        return {
            "status": "ok",
            "mode": "production" if config.PRODUCTION else "development",
            "dataMode": "REAL" if earth_engine.session.ready else "DEMO",
            "missingCredentials": config.missing_credentials(),
        }

    @app.post("/api/search", response_model=SearchResponse, tags=["search"])
    def search(payload: SearchRequest, service: SearchService = Depends(get_service)):
        """
        Resolve the query, pull satellite and weather data, and return the
        risk analysis envelope.
        """
        try:
            return service.search(payload.query)
        except ServiceUnavailable:
            raise
        except Exception as e:
            log.error(f"Search API error: {e}", exc_info=True)
            return _error(500, error="Failed to process search request", details=str(e))

    return app


app = create_app()
