import logging
from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from src.core.config import settings
from src.core.exceptions import AppException
from src.core.response.schemas import ErrorResponse

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)


def render(
    request: Request,
    name: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = status.HTTP_200_OK,
) -> Response:
    """Render a view template with the given model data."""
    return templates.TemplateResponse(
        request, name, context or {}, status_code=status_code
    )


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)


def wants_json(request: Request) -> bool:
    return "application/json" in request.headers.get("accept", "")


def error_response(
    request: Request,
    error_code: str,
    message: str,
    status_code: int,
    details: Optional[list] = None,
) -> Response:
    if wants_json(request):
        body = ErrorResponse(
            message=message, error_code=error_code, error_details=details or []
        )
        return JSONResponse(status_code=status_code, content=body.model_dump())
    return render(
        request,
        "error.html",
        {"error_code": error_code, "message": message, "details": details or []},
        status_code=status_code,
    )


async def app_exception_handler(request: Request, exc: AppException) -> Response:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    else:
        logger.info(f"{request.method} {request.url.path}: {exc.error_code} {exc.detail}")
    return error_response(
        request,
        error_code=exc.error_code,
        message=exc.detail,
        status_code=exc.status_code,
        details=exc.error_details,
    )


async def global_exception_handler(request: Request, exc: Exception) -> Response:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(
        request,
        error_code="INTERNAL_ERROR",
        message="An unexpected error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
