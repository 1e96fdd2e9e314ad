import json
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest

from pyairly.client import AirlyClient

DATA_DIR = Path(__file__).parent / "data"
API_KEY = "0123456789abcdef0123456789abcdef"


def load_text(name: str) -> str:
    return (DATA_DIR / name).read_text(encoding="utf-8")


def load_json(name: str) -> Any:
    return json.loads(load_text(name))


def make_response(
    status_code: int = 200, text: str = "", headers: dict[str, str] | None = None
) -> Mock:
    """Build a stand-in for requests.Response."""
    resp = Mock()
    resp.status_code = status_code
    resp.text = text
    resp.headers = headers or {}
    return resp


@pytest.fixture
def api_key() -> str:
    return API_KEY


@pytest.fixture
def session() -> Mock:
    return Mock()


@pytest.fixture
def client(session: Mock) -> AirlyClient:
    return AirlyClient(API_KEY, session=session)


@pytest.fixture
def measurements_json() -> str:
    return load_text("measurements.json")
