"""Variant checks usable as type guards."""

from __future__ import annotations

from typing import TypeGuard

from remotedata.variants import Failed, Loading, NotAsked, RemoteData, Success


def is_success[E, T](rd: RemoteData[E, T]) -> TypeGuard[Success[T]]:
    """Return True if ``rd`` is a ``Success``; narrows it so ``rd.value`` is known."""
    return isinstance(rd, Success)


def is_failure[E, T](rd: RemoteData[E, T]) -> TypeGuard[Failed[E]]:
    """Return True if ``rd`` is a ``Failed``; narrows it so ``rd.error`` is known."""
    return isinstance(rd, Failed)


def is_loading[E, T](rd: RemoteData[E, T]) -> TypeGuard[Loading]:
    return isinstance(rd, Loading)


def is_not_asked[E, T](rd: RemoteData[E, T]) -> TypeGuard[NotAsked]:
    return isinstance(rd, NotAsked)
