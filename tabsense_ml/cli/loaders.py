"""Tab snapshot loading for the CLI."""

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter
from tabsense_ml_contracts import TabInput, TimestampUnit

from tabsense_ml.data_models import TabRecord
from tabsense_ml.mappers import to_tab_record

_TAB_LIST = TypeAdapter(list[TabInput])


def _from_synced_clients(clients: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Flatten a synced-tabs export (clients with nested tabs, epoch seconds)."""
    tabs: list[dict[str, Any]] = []
    for client in clients:
        name = client.get("name") or client.get("id") or "client"
        for index, tab in enumerate(client.get("tabs") or []):
            tabs.append(
                {
                    "id": f"{name}:{index}",
                    "title": tab.get("title") or "",
                    "url": tab.get("url") or "",
                    "last_active": tab.get("lastUsed"),
                    "timestamp_unit": "s",
                }
            )
    return tabs


def load_tabs(path: Path, unit: TimestampUnit | None = None) -> list[TabRecord]:
    """Load tabs from a JSON file.

    Accepts a plain list of tab objects or a synced-tabs export (a list
    of clients with a ``tabs`` list each). ``unit`` overrides the
    timestamp unit of every tab.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("tabs", [])
    if data and all(isinstance(item, dict) and "tabs" in item for item in data):
        data = _from_synced_clients(data)

    return [to_tab_record(tab, unit) for tab in _TAB_LIST.validate_python(data)]
