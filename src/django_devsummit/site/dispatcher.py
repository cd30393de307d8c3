"""Section page dispatcher.

:class:`SiteDispatcher` owns everything derived once at startup -- the
schedule dataset, the day list, the section list, the ``Feature-Policy``
header and the AMP stylesheet cache -- and renders section and popup pages
from them.  :func:`get_dispatcher` builds one per configuration.
"""

import functools
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import render
from django.test.signals import setting_changed

from django_devsummit.schedule.calendar import Day, days
from django_devsummit.schedule.loader import Schedule, load_schedule
from django_devsummit.settings import DevSummitConfig, get_config
from django_devsummit.site.amp import AmpCssCache, compile_less, read_prebuilt_css
from django_devsummit.site.mount import request_mount_url, site_prefix
from django_devsummit.site.policy import feature_policy
from django_devsummit.site.resolver import INDEX_SECTION, PathResolver, scan_sections, split_route
from django_devsummit.site.scope import build_scope

logger = logging.getLogger(__name__)

FEATURE_POLICY_HEADER = "Feature-Policy"


def section_template(name: str) -> str:
    """Return the Django template path of a section (``""`` is the index)."""
    return f"sections/{name or INDEX_SECTION}.html"


@dataclass(slots=True)
class SiteDispatcher:
    """Render section pages and AMP popups for request paths."""

    config: DevSummitConfig
    schedule: Schedule
    days: Sequence[Day]
    resolver: PathResolver
    policy_header: str
    amp_css: AmpCssCache

    @classmethod
    def from_config(cls, config: DevSummitConfig) -> "SiteDispatcher":
        """Load the dataset and derive the startup tables from *config*.

        Raises:
            FileNotFoundError: If the schedule file or sections directory is
                missing.
            ValueError: If the schedule file is invalid.
        """
        schedule = load_schedule(config.schedule_path)
        sections = scan_sections(config.sections_dir)
        preloaded = read_prebuilt_css(config.prebuilt_amp_css_path) if config.production else None
        amp_less_path = config.amp_less_path

        dispatcher = cls(
            config=config,
            schedule=schedule,
            days=days(schedule),
            resolver=PathResolver(sections, schedule),
            policy_header=feature_policy(config.production),
            amp_css=AmpCssCache(
                functools.partial(compile_less, amp_less_path),
                persist=config.production,
                preloaded=preloaded,
            ),
        )
        logger.info(
            "Site dispatcher ready: %d sections, %d days, production=%s",
            len(sections),
            len(dispatcher.days),
            config.production,
        )
        return dispatcher

    def render_section(self, request: HttpRequest, route: str) -> HttpResponse:
        """Render the section or popup page for a mount-relative *route*.

        Raises:
            Http404: If the route names no section, or no public session or
                speaker.
        """
        path, rest = split_route(route)
        resolution = self.resolver.resolve(path, rest)
        if resolution is None:
            msg = f"No section page for {route!r}"
            raise Http404(msg)

        styles = self.amp_css.get() if resolution.is_entity else None
        app_path = f"/{route}"
        scope = build_scope(
            self.config,
            path=path,
            resolution=resolution,
            base=request_mount_url(request, app_path),
            site_prefix=site_prefix(request, production=self.config.production, app_path=app_path),
            days=self.days,
            styles=styles,
        )
        response = render(request, section_template(resolution.template), scope)
        response[FEATURE_POLICY_HEADER] = self.policy_header
        return response


@functools.lru_cache(maxsize=1)
def get_dispatcher() -> SiteDispatcher:
    """Return the dispatcher for the current configuration.

    Built on first use (or eagerly by the app's ``ready()`` hook) and rebuilt
    after ``DJANGO_DEVSUMMIT`` changes.
    """
    return SiteDispatcher.from_config(get_config())


def _clear_dispatcher_cache(*, setting: str, **kwargs: object) -> None:  # noqa: ARG001
    """Drop the cached dispatcher when Django settings change during tests."""
    if setting == "DJANGO_DEVSUMMIT":
        get_dispatcher.cache_clear()


setting_changed.connect(_clear_dispatcher_cache, dispatch_uid="django_devsummit.site.clear_dispatcher_cache")
