from __future__ import annotations

import pytest
import requests

from app.config import ExternalHTTPSettings, SquadAPISettings
from app.connectors import base as connector_base
from app.connectors import SquadAPIConnector
from app.errors import TransportError
from tests.fakes import FakeHTTPSession, FakeResponse

SQUAD_URL = "https://api.example.test/v1/teams/demo/squad"


def _connector(session: FakeHTTPSession, **http_overrides: float) -> SquadAPIConnector:
    return SquadAPIConnector(
        settings=SquadAPISettings(url=SQUAD_URL, user_agent="TeamCore/test"),
        http_settings=ExternalHTTPSettings(**http_overrides),  # type: ignore[arg-type]
        session=session,  # type: ignore[arg-type]
    )


@pytest.fixture(autouse=True)
def _no_sleep(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    sleeps: list[float] = []
    monkeypatch.setattr(connector_base.time, "sleep", sleeps.append)
    return sleeps


def test_fetch_payload_returns_decoded_json_with_headers() -> None:
    session = FakeHTTPSession([FakeResponse(200, {"players": []})])

    payload = _connector(session, timeout_seconds=7.5).fetch_payload()

    assert payload == {"players": []}
    (call,) = session.calls
    assert call["method"] == "GET"
    assert call["url"] == SQUAD_URL
    assert call["headers"] == {"Accept": "application/json", "User-Agent": "TeamCore/test"}
    assert call["timeout"] == 7.5


def test_non_2xx_raises_transport_error_with_status() -> None:
    session = FakeHTTPSession([FakeResponse(404, reason="Not Found")])

    with pytest.raises(TransportError) as ctx:
        _connector(session).fetch_payload()

    assert ctx.value.status_code == 404
    assert "404" in str(ctx.value)
    assert len(session.calls) == 1


def test_retryable_status_is_not_retried_by_default() -> None:
    session = FakeHTTPSession([FakeResponse(503, reason="Service Unavailable"), FakeResponse(200, {})])

    with pytest.raises(TransportError) as ctx:
        _connector(session).fetch_payload()

    assert ctx.value.status_code == 503
    assert len(session.calls) == 1


def test_retries_transient_failures_when_configured(_no_sleep: list[float]) -> None:
    session = FakeHTTPSession(
        [
            FakeResponse(503, reason="Service Unavailable"),
            requests.ConnectionError("reset"),
            FakeResponse(200, {"players": []}),
        ]
    )

    payload = _connector(session, max_retries=2, backoff_initial_seconds=0.5, backoff_multiplier=2.0).fetch_payload()

    assert payload == {"players": []}
    assert len(session.calls) == 3
    assert _no_sleep == [0.5, 1.0]


def test_connection_error_raises_transport_error_without_status() -> None:
    session = FakeHTTPSession([requests.ConnectionError("connection refused")])

    with pytest.raises(TransportError) as ctx:
        _connector(session).fetch_payload()

    assert ctx.value.status_code is None
    assert "connection refused" in str(ctx.value)
    assert isinstance(ctx.value.__cause__, requests.ConnectionError)


def test_timeout_raises_transport_error() -> None:
    session = FakeHTTPSession([requests.Timeout("read timed out")])

    with pytest.raises(TransportError, match="read timed out"):
        _connector(session).fetch_payload()


def test_invalid_json_raises_transport_error() -> None:
    session = FakeHTTPSession([FakeResponse(200, invalid_json=True)])

    with pytest.raises(TransportError, match="not valid JSON"):
        _connector(session).fetch_payload()
