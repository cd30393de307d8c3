"""JSON loader for the read-only session/speaker dataset.

Loads and validates ``schedule.json`` (a ``sessions`` map and a ``speakers``
map, both keyed by id) and freezes it so that no consumer can mutate the
process-wide dataset after startup.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

logger = logging.getLogger(__name__)

_REQUIRED_KEYS: tuple[str, ...] = ("sessions", "speakers")


@dataclass(frozen=True, slots=True)
class Schedule:
    """The immutable schedule dataset.

    Both mappings, and every record inside them, are read-only views.
    """

    sessions: Mapping[str, Mapping[str, Any]]
    speakers: Mapping[str, Mapping[str, Any]]


def freeze(value: Any) -> Any:
    """Recursively convert dicts to read-only mappings and lists to tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(freeze(item) for item in value)
    return value


def build_schedule(data: object) -> Schedule:
    """Validate a decoded ``schedule.json`` document and freeze it.

    Args:
        data: The decoded JSON document.

    Returns:
        The frozen :class:`Schedule`.

    Raises:
        TypeError: If the document, one of its maps, or a record is not a
            mapping.
        ValueError: If ``sessions`` or ``speakers`` is missing.
    """
    if not isinstance(data, Mapping):
        msg = f"schedule must be a mapping, got {type(data).__name__}"
        raise TypeError(msg)
    missing = [key for key in _REQUIRED_KEYS if key not in data]
    if missing:
        msg = f"schedule is missing required keys: {', '.join(missing)}"
        raise ValueError(msg)

    for key in _REQUIRED_KEYS:
        entries = data[key]
        if not isinstance(entries, Mapping):
            msg = f"schedule.{key} must be a mapping, got {type(entries).__name__}"
            raise TypeError(msg)
        for entry_id, record in entries.items():
            if not isinstance(record, Mapping):
                msg = f"schedule.{key}[{entry_id!r}] must be a mapping, got {type(record).__name__}"
                raise TypeError(msg)

    return Schedule(sessions=freeze(data["sessions"]), speakers=freeze(data["speakers"]))


def load_schedule(path: str | Path) -> Schedule:
    """Load and validate a schedule JSON file.

    Args:
        path: Filesystem path to ``schedule.json``.

    Returns:
        The frozen :class:`Schedule`.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If the file is not valid JSON or lacks required keys.
        TypeError: If the document has the wrong shape.
    """
    path = Path(path)
    if not path.exists():
        msg = f"Schedule file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open("rb") as fh:
        try:
            data = json.load(fh)
        except json.JSONDecodeError as exc:
            msg = f"Invalid JSON in {path}: {exc}"
            raise ValueError(msg) from exc

    schedule = build_schedule(data)
    logger.info(
        "Loaded schedule from %s with %d sessions and %d speakers",
        path,
        len(schedule.sessions),
        len(schedule.speakers),
    )
    return schedule
