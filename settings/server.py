import logging
from datetime import datetime

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from api.capacities import capacities_router
from api.dashboard import dashboard_router
from api.projects import projects_router
from api.tasks import tasks_router
from api.teams import teams_router
from api.time_entries import time_entries_router
from middleware.request_logging_middleware import RequestLoggingMiddleware
from settings.config import get_settings
from settings.datadog_logger import configure_logging

description = """
#### ClarityCanvas APIs
   Projects, time tracking, designer capacity and workload for instructional-design teams.
"""

service_name = "ClarityCanvas"

settings = get_settings()
configure_logging(settings, service=service_name)
logger = logging.getLogger(__name__)

clarity_app = FastAPI(
    title=service_name,
    description=description,
    version="1.0.0",
    docs_url="/docs",
    debug=settings.debug,
)


def failure_response(status_code: int, errors: list) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "status": "failure",
            "data": None,
            "errors": errors
        }
    )


@clarity_app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return failure_response(exc.status_code, [exc.detail])


@clarity_app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    return failure_response(422, errors)


clarity_app.add_middleware(GZipMiddleware, minimum_size=1000)
clarity_app.add_middleware(RequestLoggingMiddleware)

clarity_app.include_router(teams_router)
clarity_app.include_router(projects_router)
clarity_app.include_router(tasks_router)
clarity_app.include_router(time_entries_router)
clarity_app.include_router(capacities_router)
clarity_app.include_router(dashboard_router)


@clarity_app.get('/')
def read_root():
    """
    Root endpoint to check if the ClarityCanvas API is running.
    """
    return {"message": "ClarityCanvas API is running successfully!"}

@clarity_app.get('/health')
def health_check():
    """
    Lightweight health check endpoint for Kubernetes liveness checks.
    """
    return {"status": "healthy", "timestamp": datetime.utcnow().isoformat()}


logger.info(f"{service_name} app initialized (environment={settings.environment})")
