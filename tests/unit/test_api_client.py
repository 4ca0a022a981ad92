# -*- coding: utf-8 -*-
"""
Тесты для core/utils/api_client.py
Тестирует:
- Параметры запроса к Open-Meteo Archive
- Разбор ответа (значения по умолчанию, пропуски, лишние поля)
- Обработку ошибок сети, HTTP-статуса и JSON
- Закрытие сессии после каждого запроса
"""
from datetime import date

import pytest
import requests

from core.utils.api_client import ARCHIVE_URL, ArchiveClient
from core.utils.error_handler import UpstreamFailureError

SAMPLE_BODY = {
    "latitude": 52.52,
    "longitude": 13.42,
    "generationtime_ms": 0.5,
    "hourly_units": {"time": "iso8601", "temperature_2m": "°C"},
    "hourly": {
        "time": ["2024-01-01T00:00", "2024-01-01T01:00", "2024-01-01T02:00"],
        "temperature_2m": [5.0, 9, None],
    },
}


class FakeResponse:
    def __init__(self, body=None, status_code=200, invalid_json=False):
        self.body = body
        self.status_code = status_code
        self.invalid_json = invalid_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.body


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True
        return False

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error:
            raise self.error
        return self.response


def make_client(session, **kwargs):
    return ArchiveClient(session_factory=lambda: session, **kwargs)


def test_request_parameters():
    session = FakeSession(FakeResponse(SAMPLE_BODY))
    client = make_client(session, timeout=3.5)

    client.fetch_hourly_temperatures(52.52, 13.42, date(2024, 1, 1), date(2024, 1, 3))

    assert len(session.calls) == 1
    call = session.calls[0]
    assert call["url"] == ARCHIVE_URL
    assert call["timeout"] == 3.5
    assert call["params"] == {
        "latitude": 52.52,
        "longitude": 13.42,
        "hourly": "temperature_2m",
        "start_date": "2024-01-01",
        "end_date": "2024-01-03",
    }
    assert session.closed


def test_response_parsing():
    client = make_client(FakeSession(FakeResponse(SAMPLE_BODY)))

    weather = client.fetch_hourly_temperatures(52.52, 13.42, date(2024, 1, 1), date(2024, 1, 1))

    assert weather.latitude == 52.52
    assert weather.longitude == 13.42
    assert weather.temperature_unit == "°C"
    assert weather.hourly.time == SAMPLE_BODY["hourly"]["time"]
    assert weather.hourly.temperatures == [5.0, 9.0, None]
    assert len(weather.hourly) == 3


def test_missing_fields_default_to_empty():
    client = make_client(FakeSession(FakeResponse({"latitude": 1.0})))

    weather = client.fetch_hourly_temperatures(1.0, 2.0, date(2024, 1, 1), date(2024, 1, 1))

    assert weather.longitude == 0.0
    assert weather.temperature_unit == ""
    assert weather.hourly.time == []
    assert weather.hourly.temperatures == []


def test_custom_base_url():
    session = FakeSession(FakeResponse(SAMPLE_BODY))
    client = make_client(session, base_url="http://localhost:8080/v1/archive")

    client.fetch_hourly_temperatures(0.0, 0.0, date(2024, 1, 1), date(2024, 1, 1))

    assert session.calls[0]["url"] == "http://localhost:8080/v1/archive"


@pytest.mark.parametrize("session", [
    FakeSession(error=requests.ConnectionError("connection refused")),
    FakeSession(error=requests.Timeout("read timed out")),
    FakeSession(FakeResponse({"error": True, "reason": "bad dates"}, status_code=400)),
    FakeSession(FakeResponse(status_code=503)),
    FakeSession(FakeResponse(invalid_json=True)),
    FakeSession(FakeResponse(["not", "an", "object"])),
    FakeSession(FakeResponse({"hourly": {"time": ["2024-01-01T00:00"], "temperature_2m": []}})),
    FakeSession(FakeResponse({"hourly": {"time": ["2024-01-01T00:00"], "temperature_2m": ["warm"]}})),
    FakeSession(FakeResponse({"hourly": "oops"})),
    FakeSession(FakeResponse({"hourly_units": ["°C"]})),
    FakeSession(FakeResponse({"hourly": {"time": "ab", "temperature_2m": [1.0, 2.0]}})),
])
def test_upstream_failures_are_raised(session):
    client = make_client(session)

    with pytest.raises(UpstreamFailureError) as error:
        client.fetch_hourly_temperatures(52.52, 13.42, date(2024, 1, 1), date(2024, 1, 1))

    assert error.value.user_message == "Сервис погоды недоступен, попробуйте позже"
    assert session.closed


def test_upstream_failure_is_logged(caplog):
    client = make_client(FakeSession(error=requests.ConnectionError("connection refused")))

    with pytest.raises(UpstreamFailureError):
        client.fetch_hourly_temperatures(52.52, 13.42, date(2024, 1, 1), date(2024, 1, 1))

    assert "ошибка запроса" in caplog.text
    assert "52.52" in caplog.text


def test_new_session_per_request():
    sessions = []

    def factory():
        session = FakeSession(FakeResponse(SAMPLE_BODY))
        sessions.append(session)
        return session

    client = ArchiveClient(session_factory=factory)
    client.fetch_hourly_temperatures(0.0, 0.0, date(2024, 1, 1), date(2024, 1, 1))
    client.fetch_hourly_temperatures(0.0, 0.0, date(2024, 1, 2), date(2024, 1, 2))

    assert len(sessions) == 2
    assert all(session.closed for session in sessions)


if __name__ == "__main__":
    test_request_parameters()
    test_response_parsing()
    test_missing_fields_default_to_empty()
