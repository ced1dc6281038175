"""Shared test fixtures."""

from __future__ import annotations

import logging

import pytest

from remotedata import Failed, Loading, NotAsked, Success

SAMPLE_DRIVER = {
    "driver_number": 1,
    "full_name": "Max VERSTAPPEN",
    "name_acronym": "VER",
    "team_name": "Red Bull Racing",
}


@pytest.fixture(
    params=[
        NotAsked(),
        Loading(),
        Success(1),
        Failed("Network Error"),
    ],
    ids=["not_asked", "loading", "success", "failed"],
)
def any_variant(request: pytest.FixtureRequest):
    """Each of the four variants in turn."""
    return request.param


@pytest.fixture(
    params=[NotAsked(), Loading(), Failed("Network Error")],
    ids=["not_asked", "loading", "failed"],
)
def non_success(request: pytest.FixtureRequest):
    """Every variant that carries no success value."""
    return request.param


@pytest.fixture
def remotedata_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture everything remotedata logs."""
    caplog.set_level(logging.DEBUG, logger="remotedata")
    return caplog


@pytest.fixture
def sample_driver() -> dict:
    return dict(SAMPLE_DRIVER)
