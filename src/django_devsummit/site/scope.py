"""View scope assembly for section and popup pages.

The view scope is the template context of a section page: global site
metadata merged with the data resolved for the request.  A new dict is built
for every request; only ``days``, ``payload`` and ``styles`` refer to shared
read-only values.
"""

from collections.abc import Sequence
from typing import Any

from django_devsummit.schedule.calendar import Day
from django_devsummit.settings import DevSummitConfig
from django_devsummit.site.resolver import Resolution


def build_scope(
    config: DevSummitConfig,
    *,
    path: str,
    resolution: Resolution,
    base: str,
    site_prefix: str,
    days: Sequence[Day],
    styles: str | None = None,
) -> dict[str, Any]:
    """Build the template context for a resolved request.

    Args:
        config: The site configuration.
        path: The requested section name (``""`` for the index page).
        resolution: What the path resolved to.
        base: The mount prefix of the site.
        site_prefix: Absolute URL prefix (scheme, host and mount prefix).
        days: The schedule grouped by day.
        styles: Compiled AMP CSS; only used for entity popups.

    Returns:
        The template context dict.
    """
    scope: dict[str, Any] = {
        "year": config.year,
        "eventNo": config.event_number,
        "dateString": config.date_string,
        "prod": config.production,
        "base": base,
        "layout": config.default_layout,
        "ua": config.analytics.ua,
        "conversion": config.analytics.conversion,
        "canonicalUrl": f"{site_prefix}/{path}",
        "path": path,
        "sourcePrefix": config.source_prefix,
        "days": days,
        "stage": config.stage,
        "links": {
            "interestForm": config.links.interest_form,
            "livestreamForm": config.links.livestream_form,
        },
    }

    if resolution.is_entity:
        data = resolution.payload or {}
        scope["canonicalUrl"] += f"/{resolution.entity_id}"
        scope.update(
            layout=config.amp_layout,
            id=resolution.entity_id,
            bodyClass=resolution.body_class,
            sitePrefix=site_prefix,
            title=data.get("name") or "",
            time_label=data.get("time_label") or "",
            description=data.get("description") or "",
            youtube_id=data.get("youtube_id") or False,
            payload=resolution.payload,
            styles=styles,
        )

    return scope
