"""Tests for the httpx response bridge."""

from __future__ import annotations

import json

import httpx
import pytest
import respx
from pydantic import BaseModel, ConfigDict, ValidationError

from remotedata import (
    Failed,
    ResponseDecodeError,
    ResponseError,
    ResponseValidationError,
    Success,
    and_then,
    map,
    with_default,
)
from remotedata.http import from_response

BASE_URL = "https://api.openf1.org/v1"


class Driver(BaseModel):
    model_config = ConfigDict(frozen=True)

    driver_number: int
    full_name: str | None = None
    name_acronym: str | None = None
    team_name: str | None = None


class TestFromResponse:
    def test_json_success(self) -> None:
        rd = from_response(httpx.Response(200, json=[{"driver_number": 1}]))
        assert rd == Success([{"driver_number": 1}])

    def test_404(self) -> None:
        rd = from_response(httpx.Response(404, text="Not Found"))
        assert isinstance(rd, Failed)
        assert isinstance(rd.error, ResponseError)
        assert rd.error.status_code == 404
        assert rd.error.message == "Not Found"
        assert str(rd.error) == "HTTP 404: Not Found"

    def test_500(self) -> None:
        rd = from_response(httpx.Response(500, text="Internal Server Error"))
        assert isinstance(rd, Failed)
        assert rd.error.status_code == 500

    def test_3xx_is_not_an_error(self) -> None:
        rd = from_response(httpx.Response(304, json=[]))
        assert rd == Success([])

    def test_not_json(self) -> None:
        rd = from_response(httpx.Response(200, text="<html></html>"))
        assert isinstance(rd, Failed)
        assert isinstance(rd.error, ResponseDecodeError)
        assert isinstance(rd.error.__cause__, json.JSONDecodeError)

    @pytest.mark.parametrize("content", [b"\x80abc", b"\xff\xfe\xfa"], ids=["utf8", "utf16"])
    def test_undecodable_bytes(self, content: bytes) -> None:
        rd = from_response(httpx.Response(200, content=content))
        assert isinstance(rd, Failed)
        assert isinstance(rd.error, ResponseDecodeError)
        assert isinstance(rd.error.__cause__, UnicodeDecodeError)

    def test_status_threshold(self) -> None:
        assert from_response(httpx.Response(399, json=[1])) == Success([1])
        rd = from_response(httpx.Response(400, json=[1]))
        assert isinstance(rd, Failed)
        assert rd.error.status_code == 400

    def test_model_validation(self, sample_driver) -> None:
        rd = from_response(httpx.Response(200, json=[sample_driver]), list[Driver])
        assert isinstance(rd, Success)
        assert rd.value == [Driver(**sample_driver)]

    def test_single_model(self, sample_driver) -> None:
        rd = from_response(httpx.Response(200, json=sample_driver), Driver)
        assert with_default(None, map(lambda d: d.name_acronym, rd)) == "VER"

    def test_model_mismatch(self) -> None:
        rd = from_response(
            httpx.Response(200, json=[{"driver_number": "not a number"}]), list[Driver]
        )
        assert isinstance(rd, Failed)
        assert isinstance(rd.error, ResponseValidationError)
        assert isinstance(rd.error.__cause__, ValidationError)
        assert "Driver" in str(rd.error)

    def test_error_status_skips_validation(self) -> None:
        rd = from_response(httpx.Response(422, json={"detail": "bad"}), list[Driver])
        assert isinstance(rd.error, ResponseError)


class TestFromResponseLogging:
    def test_logs_error_status(self, remotedata_logs) -> None:
        from_response(httpx.Response(503, text="Service Unavailable"))
        records = [r for r in remotedata_logs.records if r.name == "remotedata.http"]
        assert records[0].levelname == "WARNING"
        assert records[0].getMessage() == "HTTP 503: Service Unavailable"

    def test_logs_undecodable_body(self, remotedata_logs) -> None:
        from_response(httpx.Response(200, text="<html></html>"))
        records = [r for r in remotedata_logs.records if r.name == "remotedata.http"]
        assert [r.levelname for r in records] == ["WARNING"]
        assert records[0].getMessage().startswith("Undecodable body (HTTP 200)")

    def test_logs_validation_failure(self, remotedata_logs) -> None:
        from_response(httpx.Response(200, json={"driver_number": "x"}), Driver)
        records = [r for r in remotedata_logs.records if r.name == "remotedata.http"]
        assert [r.levelname for r in records] == ["WARNING"]
        assert records[0].getMessage().startswith("Validation of Driver failed")

    def test_logs_success_at_debug(self, remotedata_logs) -> None:
        from_response(httpx.Response(200, json=[]))
        assert [r.levelname for r in remotedata_logs.records] == ["DEBUG"]


class TestWithClient:
    @respx.mock
    def test_sequenced_fetches(self, sample_driver) -> None:
        respx.get(f"{BASE_URL}/drivers").mock(
            return_value=httpx.Response(200, json=[sample_driver])
        )
        respx.get(f"{BASE_URL}/laps").mock(
            return_value=httpx.Response(200, json=[{"lap_number": 1}, {"lap_number": 2}])
        )

        with httpx.Client(base_url=BASE_URL) as client:

            def laps_for(drivers: list[Driver]):
                response = client.get(
                    "/laps", params={"driver_number": drivers[0].driver_number}
                )
                return from_response(response)

            drivers = from_response(client.get("/drivers"), list[Driver])
            laps = and_then(laps_for, drivers)

        assert laps == Success([{"lap_number": 1}, {"lap_number": 2}])

    @respx.mock
    def test_failed_first_fetch_short_circuits(self) -> None:
        respx.get(f"{BASE_URL}/drivers").mock(
            return_value=httpx.Response(500, text="Internal Server Error")
        )
        laps_route = respx.get(f"{BASE_URL}/laps")

        with httpx.Client(base_url=BASE_URL) as client:
            drivers = from_response(client.get("/drivers"), list[Driver])
            laps = and_then(lambda ds: from_response(client.get("/laps")), drivers)

        assert laps is drivers
        assert not laps_route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_async_client(self, sample_driver) -> None:
        respx.get(f"{BASE_URL}/drivers").mock(
            return_value=httpx.Response(200, json=[sample_driver])
        )
        async with httpx.AsyncClient(base_url=BASE_URL) as client:
            rd = from_response(await client.get("/drivers"), list[Driver])
        assert with_default([], rd)[0].full_name == "Max VERSTAPPEN"
