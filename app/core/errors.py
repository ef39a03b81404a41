# File: app/core/errors.py

"""
Exception handlers for the API.

- Request bodies that fail to parse or validate answer 400 with a plain-text
  message instead of FastAPI's default 422 JSON.
- Repository errors map onto 404 / 409 / 500.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from app.repositories.errors import (
    DuplicateError,
    NotFoundError,
    RepositoryError,
    UnexpectedError,
)

logger = logging.getLogger(__name__)

VALUE_ERROR_PREFIX = "Value error, "
BODY_PARSE_ERROR_TYPES = ("missing", "model_attributes_type", "dict_type")


def _describe(error: Dict[str, Any]) -> str:
    loc = [str(part) for part in error.get("loc", ()) if part != "body"]
    msg = str(error.get("msg", ""))
    if msg.startswith(VALUE_ERROR_PREFIX):
        msg = msg[len(VALUE_ERROR_PREFIX):]
    if loc:
        return f"{'.'.join(loc)}: {msg}"
    return msg


def format_validation_errors(errors: List[Dict[str, Any]]) -> str:
    """
    Render validation errors as a single line.

    A body that is not JSON at all is reported as a parse error; anything else
    is a validation error listing each failing field.
    """
    for error in errors:
        if error.get("type") == "json_invalid":
            reason = (error.get("ctx") or {}).get("error") or error.get("msg", "")
            return f"Json parse error: [{reason}]"
        # no body, or a body that was not sent as JSON
        if tuple(error.get("loc", ())) == ("body",) and error.get("type") in BODY_PARSE_ERROR_TYPES:
            return f"Json parse error: [{error.get('msg', '')}]"

    details = ", ".join(_describe(error) for error in errors)
    return f"Validation error: [{details}]".replace("\n", ", ")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = format_validation_errors(list(exc.errors()))
    logger.debug("rejected %s %s: %s", request.method, request.url.path, message)
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


async def repository_exception_handler(request: Request, exc: RepositoryError):
    if isinstance(exc, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, DuplicateError):
        status_code = status.HTTP_409_CONFLICT
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if isinstance(exc, UnexpectedError) or status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)

    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(RepositoryError, repository_exception_handler)
