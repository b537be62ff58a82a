"""
JSON response helpers shared by the service layer.
"""
from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred."


def success_response(status_code: int, message: str, data: Any = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            {
                "status_code": status_code,
                "success": True,
                "message": message,
                "data": data,
            }
        ),
    )


def error_response(
    status_code: int, message: str, errors: Optional[Dict[str, str]] = None
) -> JSONResponse:
    content = {
        "status_code": status_code,
        "success": False,
        "message": message,
    }
    if errors is not None:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


def field_errors(errors) -> Dict[str, str]:
    """
    Collapse pydantic error entries to the first message per field.

    Field paths are dotted aliases, e.g. ``account.email`` or ``dependents.0.name``.
    FastAPI's location prefix (``body``, ``query``...) is dropped.
    """
    collected: Dict[str, str] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in {"body", "query", "path", "form"}:
            loc = loc[1:]
        field = ".".join(loc) or "__root__"
        collected.setdefault(field, error.get("msg", "Invalid value."))
    return collected


def validation_error_response(exc: ValidationError, status_code: int = 400) -> JSONResponse:
    """Render a schema failure: first message on top, one message per field below."""
    errors = field_errors(exc.errors())
    message = next(iter(errors.values()), "Invalid request.")
    return error_response(status_code=status_code, message=message, errors=errors)
