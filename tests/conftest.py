"""
Shared fixtures for the squad ingestion tests.
"""

from __future__ import annotations

from typing import Any

import pytest

from app.errors import TransportError
from tests.fakes import make_v1_player, make_v2_player


@pytest.fixture()
def v2_payload() -> dict[str, Any]:
    return {"players": [make_v2_player(101), make_v2_player(102, lastName="Zeller")]}


@pytest.fixture()
def v1_payload() -> dict[str, Any]:
    return {"players": [make_v1_player("p-1"), make_v1_player("p-2", lastName="Adler")]}


@pytest.fixture()
def transport_error() -> TransportError:
    return TransportError("squad_api: request failed with status 503 Service Unavailable", status_code=503)
