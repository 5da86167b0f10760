"""
Run one squad ingestion from the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict, replace

from app.config import get_external_http_settings, get_squad_api_settings
from app.connectors import SquadAPIConnector
from app.services.player_ingestion_service import PlayerIngestionService, get_player_store


def main() -> int:
    parser = argparse.ArgumentParser(description="Fetch the squad and upsert it into the players table.")
    parser.add_argument(
        "--schema-version",
        dest="schema_version",
        default=None,
        help="Override SQUAD_SCHEMA_VERSION (v1 or v2).",
    )
    parser.add_argument(
        "--url",
        dest="url",
        default=None,
        help="Override SQUAD_API_URL.",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    squad_settings = get_squad_api_settings()
    if args.url:
        squad_settings = replace(squad_settings, url=args.url)

    service = PlayerIngestionService(
        connector=SquadAPIConnector(
            settings=squad_settings,
            http_settings=get_external_http_settings(),
        ),
        store=get_player_store(),
        schema_version=args.schema_version or squad_settings.schema_version,
    )
    result = service.run()

    print(json.dumps(asdict(result), indent=2))
    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
