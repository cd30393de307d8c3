"""Typed configuration for django-devsummit.

Reads a single ``DJANGO_DEVSUMMIT`` dict from Django settings and exposes it as
composed, frozen dataclasses with sensible defaults.

Usage::

    from django_devsummit.settings import get_config

    config = get_config()
    config.production
    config.analytics.ua
    config.schedule_path
"""

import functools
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from django.conf import settings
from django.test.signals import setting_changed

from django_devsummit.site.templating import DEFAULT_SITE_ROOT

ENVIRONMENT_VARIABLE = "DEVSUMMIT_ENV"
STAGES = ("announce", "signup", "event")


def _production_from_env() -> bool:
    return os.environ.get(ENVIRONMENT_VARIABLE, "") == "production"


@dataclass(frozen=True, slots=True)
class AnalyticsConfig:
    """Google Analytics and AdWords conversion identifiers."""

    ua: str = "UA-41980257-1"
    conversion: int = 935743779


@dataclass(frozen=True, slots=True)
class LinksConfig:
    """External form links rendered on the marketing pages."""

    interest_form: str = (
        "https://docs.google.com/forms/d/e/1FAIpQLSdqEfT0jfgRNIGqibWxBe8X1Dt0a2FcHdituhRhG1tNGL1sBQ/viewform"
    )
    livestream_form: str = "https://goo.gl/forms/738tmXWSbEdIWHf63"


@dataclass(frozen=True, slots=True)
class DevSummitConfig:
    """Top-level django-devsummit configuration.

    ``site_root`` is the directory holding the site content: the
    ``sections/``, ``templates/`` and ``partials/`` template trees,
    ``schedule.json`` and the static asset folders.
    """

    production: bool = field(default_factory=_production_from_env)
    site_root: Path = DEFAULT_SITE_ROOT
    year: int = 2019
    first_year: int = 2012
    date_string: str = "11—12 November 2019"
    stage: str = "announce"
    default_layout: str = "devsummit"
    amp_layout: str = "amp"
    analytics: AnalyticsConfig = field(default_factory=AnalyticsConfig)
    links: LinksConfig = field(default_factory=LinksConfig)

    @property
    def event_number(self) -> int:
        """Return the edition number of the event (2019 is the 7th)."""
        return self.year - self.first_year

    @property
    def source_prefix(self) -> str:
        """Return the asset folder scripts are served from (``res`` or ``src``)."""
        return "res" if self.production else "src"

    @property
    def sections_dir(self) -> Path:
        return self.site_root / "sections"

    @property
    def schedule_path(self) -> Path:
        return self.site_root / "schedule.json"

    @property
    def amp_less_path(self) -> Path:
        return self.site_root / "static" / "styles" / "amp.less"

    @property
    def prebuilt_amp_css_path(self) -> Path:
        return self.site_root / "res" / "amp.css"


@functools.lru_cache(maxsize=1)
def get_config() -> DevSummitConfig:
    """Build and return the site configuration.

    Reads ``settings.DJANGO_DEVSUMMIT`` (a plain dict) and returns a frozen
    :class:`DevSummitConfig`.  The result is cached; the cache is cleared
    automatically when Django's ``setting_changed`` signal fires (e.g. inside
    ``override_settings``).
    """
    raw = getattr(settings, "DJANGO_DEVSUMMIT", {})
    if not isinstance(raw, Mapping):
        msg = "DJANGO_DEVSUMMIT must be a mapping (dict-like object)"
        raise TypeError(msg)
    raw_data = dict(raw)

    analytics_data = raw_data.pop("analytics", {})
    links_data = raw_data.pop("links", {})
    if not isinstance(analytics_data, Mapping):
        msg = "DJANGO_DEVSUMMIT['analytics'] must be a mapping (dict-like object)"
        raise TypeError(msg)
    if not isinstance(links_data, Mapping):
        msg = "DJANGO_DEVSUMMIT['links'] must be a mapping (dict-like object)"
        raise TypeError(msg)
    if "site_root" in raw_data:
        raw_data["site_root"] = Path(raw_data["site_root"])

    config = DevSummitConfig(
        analytics=AnalyticsConfig(**dict(analytics_data)),
        links=LinksConfig(**dict(links_data)),
        **raw_data,
    )
    _validate_devsummit_config(config)
    return config


def _validate_devsummit_config(config: DevSummitConfig) -> None:
    """Validate high-impact configuration values with clear error messages."""
    if not isinstance(config.production, bool):
        msg = "DJANGO_DEVSUMMIT['production'] must be a boolean"
        raise TypeError(msg)
    if not isinstance(config.year, int) or config.year <= 0:
        msg = "DJANGO_DEVSUMMIT['year'] must be a positive integer"
        raise ValueError(msg)
    if not isinstance(config.first_year, int) or config.first_year >= config.year:
        msg = "DJANGO_DEVSUMMIT['first_year'] must be an integer before 'year'"
        raise ValueError(msg)
    if config.stage not in STAGES:
        msg = f"DJANGO_DEVSUMMIT['stage'] must be one of {', '.join(STAGES)}, got {config.stage!r}"
        raise ValueError(msg)
    for key in ("default_layout", "amp_layout"):
        value = getattr(config, key)
        if not isinstance(value, str) or not value.strip():
            msg = f"DJANGO_DEVSUMMIT['{key}'] must be a non-empty string"
            raise ValueError(msg)
    if not isinstance(config.analytics.conversion, int):
        msg = "DJANGO_DEVSUMMIT['analytics']['conversion'] must be an integer"
        raise TypeError(msg)


def _clear_config_cache(*, setting: str, **kwargs: object) -> None:  # noqa: ARG001
    """Clear the cached config when Django settings change during tests."""
    if setting == "DJANGO_DEVSUMMIT":
        get_config.cache_clear()


setting_changed.connect(_clear_config_cache, dispatch_uid="django_devsummit.settings.clear_config_cache")
