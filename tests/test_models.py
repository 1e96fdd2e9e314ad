from datetime import UTC, datetime, timedelta

from conftest import load_json
from pyairly.models import (
    AveragedValues,
    IndexType,
    Installation,
    Measurements,
    MeasurementType,
    RateLimit,
)


def test_installation_parses_camel_case() -> None:
    inst = Installation.model_validate(load_json("installation.json"))
    assert inst.location_id == 204
    assert inst.address.display_address1 == "Kraków"
    assert inst.sponsor is not None
    assert inst.sponsor.display_name == "Airly"
    assert inst.point.lat == 50.062006


def test_installation_to_wire_uses_api_names() -> None:
    inst = Installation.model_validate(load_json("installation.json"))
    wire = inst.to_wire()
    assert wire["locationId"] == 204
    assert wire["address"]["displayAddress2"] == "Mikołajska"


def test_address_display_falls_back_to_parts() -> None:
    raw = load_json("nearest.json")
    with_display = Installation.model_validate(raw[0])
    without_display = Installation.model_validate(raw[1])
    assert with_display.address.display == "Kraków, Mikołajska"
    assert without_display.address.display == "Kraków, Poland"


def test_installation_keeps_unknown_fields() -> None:
    raw = load_json("installation.json")
    raw["newField"] = "value"
    inst = Installation.model_validate(raw)
    assert (inst.model_extra or {}).get("newField") == "value"


def test_measurements_parse_datetimes_as_utc() -> None:
    m = Measurements.model_validate(load_json("measurements.json"))
    assert m.current is not None
    assert m.current.from_date_time == datetime(2024, 5, 3, 9, 24, 54, tzinfo=UTC)
    assert m.current.period == timedelta(hours=1)
    assert len(m.history) == 2
    assert len(m.forecast) == 1


def test_naive_datetime_assumed_utc() -> None:
    av = AveragedValues.model_validate({"fromDateTime": "2024-05-03T09:00:00"})
    assert av.from_date_time is not None
    assert av.from_date_time.tzinfo == UTC
    assert av.period is None


def test_averaged_values_helpers() -> None:
    m = Measurements.model_validate(load_json("measurements.json"))
    current = m.current
    assert current is not None
    assert current.get_value("PM10") == 37.78
    assert current.get_value("temperature") == 24.7
    assert current.get_value("NO2") is None
    caqi = current.get_index("AIRLY_CAQI")
    assert caqi is not None and caqi.level == "LOW"
    assert current.get_index() is caqi
    assert current.as_dict()["HUMIDITY"] == 66.67
    assert [s.exceeded for s in current.standards] == [True, False]


def test_empty_measurements() -> None:
    m = Measurements.model_validate({"current": {}, "history": [], "forecast": []})
    assert m.current is not None
    assert m.current.values == []
    assert m.has_current is False
    assert m.current.get_index() is None


def test_history_and_forecast_slices() -> None:
    m = Measurements.model_validate(load_json("measurements.json"))
    assert m.filter_history(1)[0].get_value("PM25") == 18.4
    assert m.filter_history(0) == []
    assert len(m.filter_forecast(5)) == 1


def test_index_type_levels() -> None:
    caqi = IndexType.model_validate(load_json("indexes.json")[0])
    assert caqi.levels[1].max_value == 50.0
    level = caqi.level_for(60)
    assert level is not None and level.level == "MEDIUM"
    open_ended = caqi.level_for(250)
    assert open_ended is not None and open_ended.level == "VERY_HIGH"


def test_measurement_type() -> None:
    mt = MeasurementType.model_validate(load_json("measurement_types.json")[0])
    assert mt.unit == "µg/m³"


def test_rate_limit_from_headers() -> None:
    rl = RateLimit.from_headers(
        {
            "x-ratelimit-limit-day": "1000",
            "X-RateLimit-Remaining-Day": "0",
            "X-RateLimit-Limit-minute": "bogus",
        }
    )
    assert rl.limit_day == 1000
    assert rl.remaining_day == 0
    assert rl.limit_minute is None
    assert rl.exhausted is True
    assert RateLimit.from_headers({}).exhausted is False
