"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml
from helpers import FROZEN_NOW, FakePort, make_bundle

from slopeweather.config.defaults import DEFAULT_RESORTS
from slopeweather.config.schema import AppConfig, ResortConfig


@pytest.fixture
def frozen_clock():
    return lambda: FROZEN_NOW


@pytest.fixture
def fake_port() -> FakePort:
    return FakePort(default=make_bundle())


@pytest.fixture
def three_resorts() -> list[ResortConfig]:
    return [
        ResortConfig(name="Resort One", slug="r1", latitude=37.1, longitude=128.1),
        ResortConfig(name="Resort Two", slug="r2", latitude=37.2, longitude=128.2),
        ResortConfig(name="Resort Three", slug="r3", latitude=37.3, longitude=128.3),
    ]


@pytest.fixture
def default_config() -> AppConfig:
    """Return default AppConfig with default resorts."""
    return AppConfig(resorts=DEFAULT_RESORTS)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"timeout_seconds": 5.0, "lang": "kr"},
        "calendar": {"timezone": "Asia/Seoul"},
        "errors": {"policy": "last"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def onecall_payload(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "onecall_yongpyong.json") as f:
        return json.load(f)


@pytest.fixture
def timemachine_payload(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "timemachine_yongpyong.json") as f:
        return json.load(f)
