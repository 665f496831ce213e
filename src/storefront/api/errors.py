"""Exception-to-HTTP mapping for the storefront API.

Every error response has the shape ``{"message": str, "errors": {...}}``.
Protean's own handlers are registered first and then overridden for the
exceptions the storefront reports differently.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.integrations.fastapi import register_exception_handlers
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.errors import StorefrontError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def error_response(status_code: int, message: str, errors: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message, "errors": errors or {}})


def _message_of(exc: Exception, default: str) -> str:
    detail = exc.args[0] if exc.args else None
    return detail if isinstance(detail, str) and detail else default


def _field_errors(exc: RequestValidationError) -> dict:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        errors.setdefault(".".join(location) or "request", []).append(error.get("msg", "Invalid value"))
    return errors


async def _storefront_error(request: Request, exc: StorefrontError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("request_failed", path=request.url.path, error=exc.message, exc_info=exc)
    return error_response(exc.status_code, exc.message, exc.errors)


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:  # noqa: ARG001
    errors = exc.messages if isinstance(exc.messages, dict) else {"request": [str(exc.messages)]}
    return error_response(400, "Validation failed", errors)


async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:  # noqa: ARG001
    return error_response(400, "Invalid request", _field_errors(exc))


async def _object_not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:  # noqa: ARG001
    return error_response(404, _message_of(exc, "Resource not found"))


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:  # noqa: ARG001
    return error_response(exc.status_code, str(exc.detail))


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_exception", path=request.url.path, method=request.method, exc_info=exc)
    return error_response(500, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """Install the storefront's exception handlers on ``app``."""
    register_exception_handlers(app)

    app.add_exception_handler(StorefrontError, _storefront_error)
    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(ObjectNotFoundError, _object_not_found)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(Exception, _unexpected_error)
