"""URL configuration for the conference site.

Mount the site at any prefix in the host project; links and canonical URLs
follow the mount point::

    urlpatterns = [
        path("devsummit/", include("django_devsummit.site.urls")),
    ]

Static asset folders are mounted from the site root: ``res/`` in production,
``static/``, ``src/`` and ``node_modules/`` in development.
"""

from django.urls import URLPattern, path, re_path
from django.views.static import serve

from django_devsummit.settings import DevSummitConfig, get_config
from django_devsummit.site.views import (
    SITE_VERIFICATION_FILE,
    SITEMAP_FILE,
    ScheduleJSONView,
    SectionView,
    ServiceWorkerView,
    SitemapView,
    SiteVerificationView,
)

app_name = "devsummit"

PRODUCTION_ASSET_DIRS = ("res",)
DEVELOPMENT_ASSET_DIRS = ("static", "src", "node_modules")


def asset_patterns(config: DevSummitConfig) -> list[URLPattern]:
    """Return the static mounts for the configured environment."""
    folders = PRODUCTION_ASSET_DIRS if config.production else DEVELOPMENT_ASSET_DIRS
    return [
        re_path(
            rf"^{folder}/(?P<path>.*)$",
            serve,
            {"document_root": config.site_root / folder},
            name=f"assets-{folder.replace('_', '-')}",
        )
        for folder in folders
    ]


urlpatterns = [
    *asset_patterns(get_config()),
    path("sw.js", ServiceWorkerView.as_view(), name="service-worker"),
    path("schedule.json", ScheduleJSONView.as_view(), name="schedule-json"),
    path(SITE_VERIFICATION_FILE, SiteVerificationView.as_view(), name="site-verification"),
    path(SITEMAP_FILE, SitemapView.as_view(), name="sitemap"),
    path("", SectionView.as_view(), name="index"),
    path("<path:route>", SectionView.as_view(), name="section"),
]
