"""YAML-based processor roster loader."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import yaml  # type: ignore[import-untyped]

from core.logging import get_logger

from .models import ProcessorType, Roster, RosterEntry

log = get_logger("processor_loader")

DEFAULT_ROSTER_PATH = Path(__file__).with_name("defaults.yaml")


def _load_entries(data: Dict[str, Any]) -> List[RosterEntry]:
    entries: List[RosterEntry] = []
    for raw in data.get("processors", []):
        name = raw.get("name")
        description = raw.get("description")
        if not name or not description:
            log.warning("roster_entry_skipped", name=name, reason="missing name or description")
            continue
        try:
            ptype = ProcessorType(str(raw.get("type", "")).lower())
        except ValueError:
            log.warning("roster_entry_skipped", name=name, type=raw.get("type"))
            continue
        entries.append(
            RosterEntry(
                name=name,
                description=description,
                type=ptype,
                active=bool(raw.get("active", True)),
            )
        )
    return entries


def load_roster(path: Path = DEFAULT_ROSTER_PATH) -> Roster:
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    return Roster(entries=_load_entries(data))


def roster_to_dict(roster: Roster) -> Dict[str, List[Dict[str, Any]]]:
    return {
        "processors": [
            {"name": e.name, "description": e.description, "type": e.type.value, "active": e.active}
            for e in roster.entries
        ]
    }
