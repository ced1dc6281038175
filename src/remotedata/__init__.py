"""remotedata — the state of a remote resource as a single typed value."""

import logging

from remotedata._logging import LOGGER_NAME, configure_logging
from remotedata.capture import capture, from_awaitable, from_call
from remotedata.combinators import (
    Matcher,
    and_then,
    map,
    map_both,
    map_error,
    match,
    unwrap,
    with_default,
)
from remotedata.exceptions import (
    RemoteDataError,
    ResponseDecodeError,
    ResponseError,
    ResponseValidationError,
)
from remotedata.predicates import is_failure, is_loading, is_not_asked, is_success
from remotedata.variants import Failed, Loading, NotAsked, RemoteData, Success

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = [
    "Failed",
    "Loading",
    "Matcher",
    "NotAsked",
    "RemoteData",
    "RemoteDataError",
    "ResponseDecodeError",
    "ResponseError",
    "ResponseValidationError",
    "Success",
    "and_then",
    "capture",
    "configure_logging",
    "from_awaitable",
    "from_call",
    "is_failure",
    "is_loading",
    "is_not_asked",
    "is_success",
    "map",
    "map_both",
    "map_error",
    "match",
    "unwrap",
    "with_default",
]

__version__ = "0.1.0"
