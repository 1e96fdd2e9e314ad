from unittest.mock import Mock, patch

import pytest
import requests

from conftest import API_KEY, load_text, make_response
from pyairly.client import AirlyClient
from pyairly.client.errors import (
    AuthenticationError,
    ClientError,
    NetworkError,
    NotFoundError,
    ParseError,
    RateLimitError,
    ServerError,
)
from pyairly.models import IndexType, Installation, Measurements
from pyairly.settings import ClientSettings
from pyairly.types import GeoCircle, GeoPoint

BASE = "https://airapi.airly.eu/v2/"


def _call(session: Mock) -> tuple[str, dict]:
    """Return (url, kwargs) of the single GET the client made."""
    session.get.assert_called_once()
    args, kwargs = session.get.call_args
    return args[0], kwargs


def test_rejects_wrong_key_length() -> None:
    with pytest.raises(ValueError, match="Wrong API key length"):
        AirlyClient("too-short")


def test_rejects_unknown_language() -> None:
    with pytest.raises(ValueError):
        AirlyClient(API_KEY, language="de")


def test_from_settings_copies_values() -> None:
    settings = ClientSettings(api_key=API_KEY, language="pl", timeout=3, base_url="http://x/v2")
    client = AirlyClient.from_settings(settings)
    assert client.language == "pl"
    assert client.timeout == 3
    assert client.base_url == "http://x/v2/"


def test_get_installation(client: AirlyClient, session: Mock) -> None:
    session.get.return_value = make_response(200, load_text("installation.json"))

    inst = client.get_installation(204)

    assert isinstance(inst, Installation)
    assert inst.id == 204
    assert inst.address.city == "Kraków"
    url, kwargs = _call(session)
    assert url == BASE + "installations/204"
    assert kwargs["params"] is None
    assert kwargs["timeout"] == 10


def test_headers_sent(client: AirlyClient, session: Mock) -> None:
    session.get.return_value = make_response(200, load_text("installation.json"))

    client.get_installation(204)

    _, kwargs = _call(session)
    assert kwargs["headers"] == {
        "Accept": "application/json",
        "Accept-Language": "en",
        "apikey": API_KEY,
    }


def test_get_nearest_builds_query(client: AirlyClient, session: Mock) -> None:
    session.get.return_value = make_response(200, load_text("nearest.json"))
    circle = GeoCircle.around(54.347279, 18.653846, 5)

    result = client.get_nearest(circle, max_results=3)

    assert [i.id for i in result] == [8077, 1210]
    url, kwargs = _call(session)
    assert url == BASE + "installations/nearest"
    assert kwargs["params"] == {
        "lat": 54.347279,
        "lng": 18.653846,
        "maxDistanceKM": 5,
        "maxResults": 3,
    }


@pytest.mark.parametrize("max_results", [0, -2])
def test_get_nearest_rejects_bad_max_results(
    client: AirlyClient, session: Mock, max_results: int
) -> None:
    with pytest.raises(ValueError):
        client.get_nearest(GeoCircle.around(50.0, 19.0, 1), max_results=max_results)
    session.get.assert_not_called()


def test_get_nearest_accepts_unlimited(client: AirlyClient, session: Mock) -> None:
    session.get.return_value = make_response(200, "[]")
    assert client.get_nearest(GeoCircle.around(50.0, 19.0, 1), max_results=-1) == []


def test_get_indexes(client: AirlyClient, session: Mock) -> None:
    session.get.return_value = make_response(200, load_text("indexes.json"))

    indexes = client.get_indexes()

    assert indexes[0].name == "AIRLY_CAQI"
    assert len(indexes[0].levels) == 5
    assert _call(session)[0] == BASE + "meta/indexes"


def test_get_measurement_types(client: AirlyClient, session: Mock) -> None:
    session.get.return_value = make_response(200, load_text("measurement_types.json"))

    types = client.get_measurement_types()

    assert types[1].label == "PM2.5"
    assert _call(session)[0] == BASE + "meta/measurements"


def test_installation_measurements_with_wind(
    client: AirlyClient, session: Mock, measurements_json: str
) -> None:
    session.get.return_value = make_response(200, measurements_json)

    result = client.get_installation_measurements(34, "AIRLY_CAQI", include_wind=True)

    assert isinstance(result, Measurements)
    url, kwargs = _call(session)
    assert url == BASE + "measurements/installation"
    assert kwargs["params"] == {
        "includeWind": "true",
        "indexType": "AIRLY_CAQI",
        "installationId": 34,
    }


def test_installation_measurements_without_wind(
    client: AirlyClient, session: Mock, measurements_json: str
) -> None:
    session.get.return_value = make_response(200, measurements_json)

    client.get_installation_measurements(34, IndexType(name="PIJP"))

    _, kwargs = _call(session)
    assert "includeWind" not in kwargs["params"]
    assert kwargs["params"]["indexType"] == "PIJP"


def test_unnamed_index_type_fails_before_request(client: AirlyClient, session: Mock) -> None:
    with pytest.raises(ValueError, match="IndexType.name is None"):
        client.get_point_measurements(GeoPoint.of(50.0, 19.0), IndexType())
    session.get.assert_not_called()


def test_nearest_measurements(
    client: AirlyClient, session: Mock, measurements_json: str
) -> None:
    session.get.return_value = make_response(200, measurements_json)

    client.get_nearest_measurements(GeoCircle.around(54.347279, 18.653846, 5))

    url, kwargs = _call(session)
    assert url == BASE + "measurements/nearest"
    assert kwargs["params"] == {
        "indexType": "AIRLY_CAQI",
        "lat": 54.347279,
        "lng": 18.653846,
        "maxDistanceKM": 5,
    }


def test_point_measurements(
    client: AirlyClient, session: Mock, measurements_json: str
) -> None:
    session.get.return_value = make_response(200, measurements_json)

    result = client.get_point_measurements(GeoPoint.of(54.347279, 18.653846))

    assert result.current is not None
    url, kwargs = _call(session)
    assert url == BASE + "measurements/point"
    assert kwargs["params"] == {"indexType": "AIRLY_CAQI", "lat": 54.347279, "lng": 18.653846}


def test_rate_limit_recorded(client: AirlyClient, session: Mock) -> None:
    session.get.return_value = make_response(
        200,
        load_text("installation.json"),
        {"X-RateLimit-Limit-day": "100", "X-RateLimit-Remaining-day": "42"},
    )

    client.get_installation(204)

    assert client.rate_limit is not None
    assert client.rate_limit.limit_day == 100
    assert client.rate_limit.remaining_day == 42
    assert client.rate_limit.remaining_minute is None


@pytest.mark.parametrize(
    "status, expected_type",
    [
        (401, AuthenticationError),
        (404, NotFoundError),
        (429, RateLimitError),
        (503, ServerError),
    ],
)
def test_error_status_maps_to_exception(
    client: AirlyClient, session: Mock, status: int, expected_type: type
) -> None:
    session.get.return_value = make_response(
        status, '{"errorCode": "X", "message": "Something went wrong"}'
    )

    with pytest.raises(expected_type) as excinfo:
        client.get_installation(1)

    assert excinfo.value.code == status
    assert "Something went wrong" in str(excinfo.value)
    assert excinfo.value.response is not None
    assert excinfo.value.response["errorCode"] == "X"


def test_error_without_json_body_uses_status_text(client: AirlyClient, session: Mock) -> None:
    session.get.return_value = make_response(401, "Unauthorized")

    with pytest.raises(AuthenticationError) as excinfo:
        client.get_installation(1)

    assert "Invalid or missing API key" in str(excinfo.value)


def test_empty_body_with_unmapped_status_uses_default_message(
    client: AirlyClient, session: Mock
) -> None:
    session.get.return_value = make_response(418, "")

    with pytest.raises(ClientError) as excinfo:
        client.get_installation(1)

    assert excinfo.value.message == "Client error"
    assert str(excinfo.value) == "[418] Client error"


def test_network_error_wraps_exception(client: AirlyClient, session: Mock) -> None:
    session.get.side_effect = requests.ConnectionError("BOOM")

    with pytest.raises(NetworkError) as excinfo:
        client.get_indexes()

    assert isinstance(excinfo.value.original_error, requests.ConnectionError)
    assert excinfo.value.code == 0


def test_malformed_body_raises_parse_error(client: AirlyClient, session: Mock) -> None:
    session.get.return_value = make_response(200, "not json")

    with pytest.raises(ParseError):
        client.get_installation(1)


def test_schema_mismatch_raises_parse_error(client: AirlyClient, session: Mock) -> None:
    session.get.return_value = make_response(200, '{"id": "abc"}')

    with pytest.raises(ParseError):
        client.get_installation(1)


def test_context_manager_leaves_injected_session_open(session: Mock) -> None:
    with AirlyClient(API_KEY, session=session) as client:
        assert client.session is session
    session.close.assert_not_called()


def test_context_manager_closes_owned_session() -> None:
    with patch("pyairly.client.api.requests.Session") as session_cls:
        with AirlyClient(API_KEY) as client:
            assert client.session is session_cls.return_value
    session_cls.return_value.close.assert_called_once()
