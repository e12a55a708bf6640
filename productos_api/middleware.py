# productos_api/middleware.py

"""
Gate between the validation rules and the route handlers.

`handle_input_errors` turns a set of rule chains into a FastAPI dependency.
The dependency runs every chain against the path parameters and the JSON
body; if any error was collected the request stops with HTTP 400 and the
full error list, otherwise the handler receives the (optionally typed) body.
"""
import json
import logging
from typing import Optional, Type

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from .exceptions import InputValidationError
from .validation import BODY, ValidationChain, run_validations

logger = logging.getLogger(__name__)


def _is_json(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def read_json_body(request: Request) -> dict:
    """
    Return the request body as a dict.
    Only JSON content types are parsed; anything but a JSON object is empty.
    """
    if not _is_json(request.headers.get("content-type", "")):
        return {}
    raw = await request.body()
    if not raw:
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        logger.warning("Request body is not valid JSON; validating it as empty.")
        return {}
    return payload if isinstance(payload, dict) else {}


def _schema_errors(exc: ValidationError, payload: dict):
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"])
        entry = {"type": "field", "msg": error["msg"], "path": field, "location": BODY}
        if field in payload:
            entry["value"] = payload[field]
        errors.append(entry)
    return errors


def handle_input_errors(*chains: ValidationChain, schema: Optional[Type[BaseModel]] = None):
    """
    Build a dependency enforcing `chains` for a route.

    Returns the parsed `schema` instance when one is given, else the raw
    body dict.
    """

    async def dependency(request: Request):
        payload = await read_json_body(request)
        errors = run_validations(chains, request.path_params, payload)
        if errors:
            raise InputValidationError(errors)
        if schema is None:
            return payload
        try:
            return schema.model_validate(payload)
        except ValidationError as e:
            raise InputValidationError(_schema_errors(e, payload))

    return dependency


async def input_validation_exception_handler(request: Request, exc: InputValidationError):
    logger.info(
        f"Rejected {request.method} {request.url.path} with {len(exc.errors)} validation error(s)."
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": exc.errors},
    )
