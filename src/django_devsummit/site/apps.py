"""Django app configuration for the conference site app."""

from django.apps import AppConfig


class DjangoDevSummitSiteConfig(AppConfig):
    """Configuration for the conference site app."""

    name = "django_devsummit.site"
    label = "devsummit_site"
    verbose_name = "Dev Summit Site"

    def ready(self) -> None:
        """Load the schedule and derive the startup tables eagerly."""
        from django_devsummit.site.dispatcher import get_dispatcher  # noqa: PLC0415

        get_dispatcher()
