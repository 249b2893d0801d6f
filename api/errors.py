from typing import Dict, List
from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)


def field_error(field: str, message: str) -> HTTPException:
    """400 with the same body shape as declarative validation failures"""
    return HTTPException(status_code=400, detail={field: [message]})


def not_found(resource: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"{resource} not found")


def _field_name(loc: tuple) -> str:
    """
    Last named part of an error location, e.g. ("body", "bookName") -> "bookName".
    Locations without one (invalid JSON reports a character offset) map to "body".
    """
    names = [part for part in loc[1:] if isinstance(part, str)]
    return names[-1] if names else "body"


def _message(error: dict) -> str:
    message = error.get("msg", "Invalid value")
    # field_validator messages arrive as "Value error, <message>"
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return message


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures as 400 keyed by field name"""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        errors.setdefault(_field_name(error.get("loc") or ()), []).append(_message(error))

    logger.info(f"Validation failed for {request.method} {request.url.path}: {errors}")
    return JSONResponse(status_code=400, content={"detail": errors})
