"""Path-to-content resolution for section pages and AMP popups.

A request path relative to the site mount is split into a *section* and an
optional *rest* segment.  The section must be one of the pages found in the
``sections/`` template directory; *rest*, when present, names a session or a
speaker whose AMP popup page is rendered instead of the section itself.
"""

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from django_devsummit.schedule.loader import Schedule

logger = logging.getLogger(__name__)

TEMPLATE_EXTENSION = ".html"
INDEX_SECTION = "index"

SESSION_TEMPLATE = "_amp-session"
SPEAKER_TEMPLATE = "_amp-speaker"
SESSION_BODY_CLASS = "schedule-popup"
SPEAKER_BODY_CLASS = "speaker-popup"


def discover_sections(filenames: Iterable[str], extension: str = TEMPLATE_EXTENSION) -> tuple[str, ...]:
    """Derive the renderable section names from template file names.

    Only files with *extension* count.  Names starting with ``_`` (partial
    pages such as the AMP popups) or ``.`` are skipped, and ``index`` is
    mapped to ``""`` (the site root).

    Args:
        filenames: File names found in the sections directory.
        extension: Template file extension.

    Returns:
        The section names in sorted order.
    """
    sections: set[str] = set()
    for filename in filenames:
        if not filename.endswith(extension) or filename.startswith(("_", ".")):
            continue
        name = filename[: -len(extension)]
        sections.add("" if name == INDEX_SECTION else name)
    return tuple(sorted(sections))


def scan_sections(directory: str | Path) -> tuple[str, ...]:
    """List *directory* and return its section names (see :func:`discover_sections`)."""
    return discover_sections(os.listdir(directory))


def split_route(route: str) -> tuple[str, str | None]:
    """Split a mount-relative request path into ``(section, rest)``.

    Examples::

        split_route("/")              # ("", None)
        split_route("/schedule")      # ("schedule", None)
        split_route("/schedule/42/")  # ("schedule", "42")
    """
    section, _, rest = route.strip("/").partition("/")
    return section, rest or None


@dataclass(frozen=True, slots=True)
class Resolution:
    """What to render for a request path.

    ``template`` is the section template name (``""`` for the index page),
    or one of the AMP popup templates when an entity was found.
    """

    template: str
    entity_id: str | None = None
    body_class: str | None = None
    payload: Mapping[str, Any] | None = None

    @property
    def is_entity(self) -> bool:
        return self.entity_id is not None


class PathResolver:
    """Resolve section names and session/speaker ids against the dataset.

    Args:
        sections: The known section names (``""`` is the index page).
        schedule: The loaded schedule dataset.
    """

    def __init__(self, sections: Iterable[str], schedule: Schedule) -> None:
        self.sections = frozenset(sections)
        self.schedule = schedule

    def resolve(self, path: str, rest: str | None = None) -> Resolution | None:
        """Resolve a section path and optional entity id.

        Sessions take priority over speakers when an id exists in both maps.
        Ids starting with ``_`` are internal and never resolve.

        Args:
            path: The section name (``""`` for the index page).
            rest: An optional session or speaker id.

        Returns:
            The :class:`Resolution`, or ``None`` when nothing should be
            rendered and the request must fall through to a 404.
        """
        if path not in self.sections:
            logger.debug("Unknown section %r", path)
            return None
        if not rest:
            return Resolution(template=path)

        if rest.startswith("_"):
            logger.debug("Refusing internal id %r", rest)
            return None

        session = self.schedule.sessions.get(rest)
        if session is not None:
            return Resolution(
                template=SESSION_TEMPLATE,
                entity_id=rest,
                body_class=SESSION_BODY_CLASS,
                payload=session,
            )

        speaker = self.schedule.speakers.get(rest)
        if speaker is not None:
            return Resolution(
                template=SPEAKER_TEMPLATE,
                entity_id=rest,
                body_class=SPEAKER_BODY_CLASS,
                payload=speaker,
            )

        logger.debug("No session or speaker with id %r", rest)
        return None
