"""Template tags for the conference site."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from django import template
from django.core.serializers.json import DjangoJSONEncoder
from django.utils.html import json_script
from django.utils.safestring import SafeString

from django_devsummit.stages import stage_reached as _stage_reached

register = template.Library()


class _ScheduleEncoder(DjangoJSONEncoder):
    """Encode the read-only mapping proxies of the frozen dataset."""

    def default(self, o: Any) -> Any:
        if isinstance(o, MappingProxyType):
            return dict(o)
        return super().default(o)


@register.filter
def to_json(value: Any, element_id: str | None = None) -> SafeString:
    """Serialize a (read-only) schedule record into a ``<script>`` JSON block.

    AMP popups embed their payload this way for ``amp-state``.

    Usage in templates::

        {% load devsummit_tags %}
        {{ payload|to_json:"popup-state" }}
    """
    return json_script(value, element_id, encoder=_ScheduleEncoder)


@register.filter
def public_entries(entries: Mapping[str, Any]) -> list[tuple[str, Any]]:
    """Return ``(id, record)`` pairs whose id does not start with ``_``.

    Usage in templates::

        {% for id, session in data.sessions|public_entries %}
            <loc>{{ sitePrefix }}/schedule/{{ id }}</loc>
        {% endfor %}
    """
    return [(key, value) for key, value in entries.items() if not key.startswith("_")]


@register.filter
def stage_reached(current: str, stage: str) -> bool:
    """Tell whether *current* is at or past *stage*.

    Usage in templates::

        {% if stage|stage_reached:"signup" %}...{% endif %}
    """
    return _stage_reached(stage, current)
