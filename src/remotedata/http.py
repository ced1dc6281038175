"""Convert an ``httpx.Response`` the caller already received into ``RemoteData``."""

from __future__ import annotations

from typing import Any, overload

import httpx
from pydantic import TypeAdapter, ValidationError

from remotedata._logging import get_logger
from remotedata.exceptions import (
    RemoteDataError,
    ResponseDecodeError,
    ResponseError,
    ResponseValidationError,
)
from remotedata.variants import Failed, RemoteData, Success

ERROR_STATUS_THRESHOLD = 400

logger = get_logger("http")


@overload
def from_response(
    response: httpx.Response, model: None = None
) -> RemoteData[RemoteDataError, Any]: ...


@overload
def from_response[T](
    response: httpx.Response, model: type[T]
) -> RemoteData[RemoteDataError, T]: ...


def from_response(
    response: httpx.Response, model: Any = None
) -> RemoteData[RemoteDataError, Any]:
    """Map a completed response onto ``Success`` or ``Failed``.

    Error statuses become ``Failed(ResponseError)``, a non-JSON body
    ``Failed(ResponseDecodeError)``. With ``model`` the decoded body is
    validated through a pydantic ``TypeAdapter`` and a mismatch becomes
    ``Failed(ResponseValidationError)``. No request is sent.

    Usage:
        response = client.get("/drivers", params={"session_key": 9161})
        drivers = from_response(response, list[Driver])
    """
    if response.status_code >= ERROR_STATUS_THRESHOLD:
        logger.warning("HTTP %d: %s", response.status_code, response.text)
        return Failed(ResponseError(status_code=response.status_code, message=response.text))

    try:
        data = response.json()
    except ValueError as exc:
        logger.warning("Undecodable body (HTTP %d): %s", response.status_code, exc)
        return Failed(_chain(ResponseDecodeError(f"Response body is not JSON: {exc}"), exc))

    if model is None:
        logger.debug("HTTP %d -> Success", response.status_code)
        return Success(data)

    try:
        value = TypeAdapter(model).validate_python(data)
    except ValidationError as exc:
        name = getattr(model, "__name__", repr(model))
        logger.warning("Validation of %s failed: %s", name, exc)
        return Failed(
            _chain(ResponseValidationError(f"Failed to validate {name} response: {exc}"), exc)
        )

    logger.debug("HTTP %d -> Success(%s)", response.status_code, type(value).__name__)
    return Success(value)


def _chain[X: BaseException](error: X, cause: BaseException) -> X:
    error.__cause__ = cause
    return error
