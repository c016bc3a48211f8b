"""Tests for the concurrent load pipeline with a call-counting fake."""

import asyncio
import copy
from datetime import timedelta

import httpx
import pytest
import respx
from helpers import FROZEN_NOW, SEOUL, TODAY, FakePort, make_bundle

from slopeweather.config.schema import AppConfig, ErrorPolicy, ErrorsConfig, ResortConfig
from slopeweather.ingest.errors import (
    ErrorKind,
    NoDataAvailableError,
    RemoteStatusError,
)
from slopeweather.ingest.openweather_client import OpenWeatherClient
from slopeweather.pipeline.aggregator import CollectAllErrorsPolicy
from slopeweather.pipeline.load_pipeline import LoadPipeline

BASE = "https://test-owm.example.com/data/3.0"


def _key(resort: ResortConfig) -> tuple[float, float]:
    return (resort.latitude, resort.longitude)


def _pipeline(port: FakePort, frozen_clock) -> LoadPipeline:
    return LoadPipeline(port, tz=SEOUL, clock=frozen_clock)


class TestScenarios:
    def test_one_failure_does_not_blank_others(self, three_resorts, frozen_clock):
        r1, r2, r3 = three_resorts
        port = FakePort(default=make_bundle())
        port.responses[_key(r2)] = RemoteStatusError(401, "Invalid API key")
        port.delays[_key(r1)] = 0.0
        port.delays[_key(r3)] = 0.01
        port.delays[_key(r2)] = 0.05

        snap = asyncio.run(_pipeline(port, frozen_clock).run(three_resorts, TODAY))

        assert set(snap.readings) == {"r1", "r3"}
        assert snap.last_error_message == "Invalid API key"
        assert snap.last_error.kinds == ("remote_status",)
        assert len(port.calls) == 3

    def test_last_error_follows_completion_order(self, three_resorts, frozen_clock):
        r1, r2, r3 = three_resorts
        port = FakePort(default=make_bundle())
        port.responses[_key(r1)] = RemoteStatusError(500)
        port.responses[_key(r3)] = RemoteStatusError(502)
        port.delays[_key(r3)] = 0.0
        port.delays[_key(r1)] = 0.05

        snap = asyncio.run(_pipeline(port, frozen_clock).run(three_resorts, TODAY))

        assert set(snap.readings) == {"r2"}
        assert "HTTP 500" in snap.last_error_message

    def test_missing_forecast_day(self, three_resorts, frozen_clock):
        port = FakePort(default=make_bundle(offsets=[0, 1, 2, 4]))
        target = TODAY + timedelta(days=3)

        snap = asyncio.run(_pipeline(port, frozen_clock).run(three_resorts, target))

        assert snap.readings == {}
        assert snap.last_error_message == NoDataAvailableError.default_message
        assert len(port.calls) == 3

    def test_future_day(self, three_resorts, frozen_clock, fake_port):
        target = TODAY + timedelta(days=2)
        snap = asyncio.run(_pipeline(fake_port, frozen_clock).run(three_resorts, target))

        assert len(snap.readings) == 3
        assert all(r.temperature == -12.0 for r in snap.readings.values())
        assert snap.target_date == target

    def test_today_uses_current(self, three_resorts, frozen_clock, fake_port):
        snap = asyncio.run(_pipeline(fake_port, frozen_clock).run(three_resorts, FROZEN_NOW))

        assert snap.target_date == TODAY
        assert {r.temperature for r in snap.readings.values()} == {-2.0}
        assert snap.readings["r2"].resort_name == "Resort Two"


class TestUnsupportedDates:
    @pytest.mark.parametrize("offset", [-1, -7, 8, 20])
    def test_port_never_called(self, three_resorts, frozen_clock, fake_port, offset):
        target = TODAY + timedelta(days=offset)
        snap = asyncio.run(_pipeline(fake_port, frozen_clock).run(three_resorts, target))

        assert fake_port.calls == []
        assert fake_port.historical_calls == []
        assert snap.readings == {}
        assert snap.last_error.kinds == (ErrorKind.NO_DATA_AVAILABLE.value,)


class TestInvariants:
    def test_readings_bounded_by_resorts(self, three_resorts, frozen_clock):
        r1, _, _ = three_resorts
        port = FakePort(default=make_bundle())
        port.responses[_key(r1)] = RemoteStatusError(500)

        snap = asyncio.run(_pipeline(port, frozen_clock).run(three_resorts, TODAY))

        slugs = {r.slug for r in three_resorts}
        assert len(snap.readings) == 2
        assert len(snap.readings) <= len(three_resorts)
        assert set(snap.readings) <= slugs

    def test_empty_resort_list(self, frozen_clock, fake_port):
        snap = asyncio.run(_pipeline(fake_port, frozen_clock).run([], TODAY))

        assert snap.readings == {}
        assert snap.last_error is None
        assert snap.target_date == TODAY
        assert fake_port.calls == []

    def test_all_units_run_even_after_failure(self, three_resorts, frozen_clock):
        r1, r2, r3 = three_resorts
        port = FakePort(default=make_bundle())
        port.responses[_key(r1)] = RemoteStatusError(500)
        port.delays[_key(r2)] = 0.02
        port.delays[_key(r3)] = 0.04

        snap = asyncio.run(_pipeline(port, frozen_clock).run(three_resorts, TODAY))

        assert set(snap.readings) == {"r2", "r3"}

    def test_fetches_overlap(self, three_resorts, frozen_clock):
        port = FakePort(default=make_bundle())

        async def go():
            gate = asyncio.Event()
            port.gate = gate
            task = asyncio.create_task(_pipeline(port, frozen_clock).run(three_resorts, TODAY))
            await asyncio.sleep(0.01)
            # Every resort is in flight before any has been answered.
            started = len(port.calls)
            gate.set()
            return started, await task

        started, snap = asyncio.run(go())
        assert started == 3
        assert len(snap.readings) == 3


class TestFromConfig:
    def test_policy_and_zone(self, three_resorts, frozen_clock):
        config = AppConfig(errors=ErrorsConfig(policy=ErrorPolicy.ALL), resorts=three_resorts)
        port = FakePort(default=RemoteStatusError(500))

        pipeline = LoadPipeline.from_config(config, port, clock=frozen_clock)
        assert isinstance(pipeline.aggregator.policy, CollectAllErrorsPolicy)
        assert pipeline.tz.key == "Asia/Seoul"

        snap = asyncio.run(pipeline.run(config.resorts, TODAY))
        assert set(snap.last_error.by_resort) == {"r1", "r2", "r3"}


class TestMalformedPayload:
    @respx.mock
    def test_bad_payload_fails_only_its_resort(
        self, three_resorts, frozen_clock, onecall_payload: dict
    ):
        r1, r2, r3 = three_resorts
        broken = copy.deepcopy(onecall_payload)
        broken["current"]["weather"] = ["snow"]

        def reply(request: httpx.Request) -> httpx.Response:
            if float(request.url.params["lat"]) == r2.latitude:
                return httpx.Response(200, json=broken)
            return httpx.Response(200, json=onecall_payload)

        respx.get(f"{BASE}/onecall").mock(side_effect=reply)

        async def go():
            async with OpenWeatherClient(api_key="test-key", base_url=BASE) as client:
                return await _pipeline(client, frozen_clock).run(three_resorts, TODAY)

        snap = asyncio.run(go())

        assert set(snap.readings) == {"r1", "r3"}
        assert snap.last_error.kinds == (ErrorKind.MALFORMED_RESPONSE.value,)
