import uuid
from http import HTTPStatus
from typing import Any, Iterable, Mapping

from fastapi import Request, status
from fastapi.responses import JSONResponse

from kleaners.domain.errors import DomainError, PricingInputError

PROBLEM_TYPE_VALIDATION = "https://example.com/problems/validation-error"
PROBLEM_TYPE_DOMAIN = DomainError.type
PROBLEM_TYPE_PRICING_INPUT = PricingInputError.type
PROBLEM_TYPE_SERVER = "https://example.com/problems/server-error"

# Location prefixes FastAPI adds to request validation errors.
_REQUEST_PARTS = {"body", "query", "path"}


def _resolve_request_id(request: Request) -> str:
    request_id = getattr(request.state, "request_id", None) or request.headers.get("X-Request-ID")
    if not request_id:
        request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    return request_id


def _resolve_title(status_code: int, fallback: str | None) -> str:
    if fallback:
        return fallback
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def _resolve_type(status_code: int, type_override: str | None) -> str:
    if type_override:
        return type_override
    if status_code == status.HTTP_422_UNPROCESSABLE_ENTITY:
        return PROBLEM_TYPE_VALIDATION
    if status_code >= 500:
        return PROBLEM_TYPE_SERVER
    return PROBLEM_TYPE_DOMAIN


def _field_path(loc: Iterable[Any]) -> str:
    return ".".join(str(part) for part in loc if part not in _REQUEST_PARTS) or "body"


def problem_details(
    request: Request,
    *,
    status: int,
    title: str | None,
    detail: str,
    errors: list[dict[str, Any]] | None = None,
    type_: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render an RFC 7807 ``application/problem+json`` response carrying the request id."""
    request_id = _resolve_request_id(request)
    response = JSONResponse(
        status_code=status,
        content={
            "type": _resolve_type(status, type_),
            "title": _resolve_title(status, title),
            "status": status,
            "detail": detail,
            "request_id": request_id,
            "errors": errors or [],
        },
        headers=headers,
        media_type="application/problem+json",
    )
    response.headers.setdefault("X-Request-ID", request_id)
    return response


def validation_problem(request: Request, errors: Iterable[Mapping[str, Any]]) -> JSONResponse:
    """422 for request bodies, query strings or paths that fail schema validation.

    Each pydantic error becomes ``{"field": "property_data.square_footage", "message": ...}``.
    """
    return problem_details(
        request,
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
        title="Validation Error",
        detail="Request validation failed",
        errors=[
            {"field": _field_path(error.get("loc", ())), "message": error.get("msg", "Invalid value")}
            for error in errors
        ],
        type_=PROBLEM_TYPE_VALIDATION,
    )


def domain_problem(request: Request, exc: DomainError) -> JSONResponse:
    """400 for inputs that pass the schema but cannot be priced, e.g. an unknown size tier."""
    return problem_details(
        request,
        status=status.HTTP_400_BAD_REQUEST,
        title=exc.title,
        detail=exc.detail,
        errors=exc.errors or [],
        type_=exc.type or PROBLEM_TYPE_DOMAIN,
    )
