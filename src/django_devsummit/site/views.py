"""Views for the conference site.

Fixed top-level files (service worker, schedule data, site verification and
the sitemap) are served by dedicated views; every other path is handed to the
:class:`~django_devsummit.site.dispatcher.SiteDispatcher`, which renders a
section page or an AMP popup, or raises a 404.
"""

from pathlib import Path

from django.http import FileResponse, Http404, HttpRequest, HttpResponse
from django.views import View
from django.views.generic import TemplateView

from django_devsummit.settings import get_config
from django_devsummit.site.dispatcher import get_dispatcher
from django_devsummit.site.mount import site_prefix

SITE_VERIFICATION_FILE = "googlec6dfdf23945d0d0c.html"
SITEMAP_FILE = "sitemap.xml"


def send_file(path: Path, content_type: str) -> FileResponse:
    """Stream a file from the site root, or raise a 404 if it is missing.

    Args:
        path: Absolute path of the file.
        content_type: Response content type.

    Raises:
        Http404: If the file does not exist.
    """
    if not path.is_file():
        msg = f"{path.name} not found"
        raise Http404(msg)
    return FileResponse(path.open("rb"), content_type=content_type)


class ServiceWorkerView(View):
    """Serve ``sw.js`` from the top level so it controls the whole site.

    The file comes from ``res/`` in production and ``src/`` otherwise.
    """

    def get(self, _request: HttpRequest) -> FileResponse:
        config = get_config()
        return send_file(config.site_root / config.source_prefix / "sw.js", "application/javascript")


class ScheduleJSONView(View):
    """Serve the raw ``schedule.json`` dataset file."""

    def get(self, _request: HttpRequest) -> FileResponse:
        return send_file(get_config().schedule_path, "application/json")


class SiteVerificationView(View):
    """Serve the search console ownership verification file."""

    def get(self, _request: HttpRequest) -> FileResponse:
        return send_file(get_config().site_root / SITE_VERIFICATION_FILE, "text/html")


class SitemapView(TemplateView):
    """Render ``sitemap.xml`` listing every section and public session/speaker."""

    template_name = "sections/_sitemap.html"
    content_type = "text/xml"

    def get_context_data(self, **kwargs: object) -> dict[str, object]:
        """Build the sitemap context.

        Returns:
            Context dict containing ``data`` (the schedule dataset),
            ``sections`` and ``sitePrefix``.
        """
        context = super().get_context_data(**kwargs)
        dispatcher = get_dispatcher()
        context["data"] = dispatcher.schedule
        context["sections"] = sorted(dispatcher.resolver.sections)
        context["sitePrefix"] = site_prefix(
            self.request, production=dispatcher.config.production, app_path=f"/{SITEMAP_FILE}"
        )
        return context


class SectionView(View):
    """Render a section page, or a session/speaker popup under a section."""

    def get(self, request: HttpRequest, route: str = "") -> HttpResponse:
        """Dispatch the mount-relative *route*.

        Raises:
            Http404: If the route names no section, session or speaker.
        """
        return get_dispatcher().render_section(request, route)
