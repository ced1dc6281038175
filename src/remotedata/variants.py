"""The four states of a remote resource."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


@dataclass(frozen=True)
class NotAsked:
    """No fetch has been attempted yet."""


@dataclass(frozen=True)
class Loading:
    """A fetch is in progress."""


@dataclass(frozen=True)
class Success[T]:
    """The fetch completed with a value.

    Usage:
        Success([1, 2, 3])
    """

    value: T


@dataclass(frozen=True)
class Failed[E]:
    """The fetch completed with an error.

    Usage:
        Failed("Unexpected token '<'")
    """

    error: E


VARIANTS: tuple[type, ...] = (NotAsked, Loading, Success, Failed)


class _RemoteDataSchema:
    """Pydantic marker: accept variant instances as-is, never inspect payloads."""

    def __get_pydantic_core_schema__(
        self, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.union_schema(
            [core_schema.is_instance_schema(cls) for cls in VARIANTS],
        )


type RemoteData[E, T] = Annotated[
    NotAsked | Loading | Failed[E] | Success[T], _RemoteDataSchema()
]
