"""
app/connectors/squad_api_connector.py

Squad API connector for the team roster.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from app.config import ExternalHTTPSettings, SquadAPISettings
from app.connectors.base import BaseConnector

logger = logging.getLogger(__name__)


class SquadAPIConnector(BaseConnector):
    """
    Fetches the raw squad JSON for the configured team.
    """

    def __init__(
        self,
        *,
        settings: SquadAPISettings,
        http_settings: ExternalHTTPSettings,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(source="squad_api", http_settings=http_settings, session=session)
        self._settings = settings

    def fetch_payload(self) -> Any:
        logger.info("Fetching squad payload url=%s", self._settings.url)
        return self._request_json(
            method="GET",
            url=self._settings.url,
            headers={
                "Accept": "application/json",
                "User-Agent": self._settings.user_agent,
            },
        )
