"""Django context processors for django-devsummit."""

from django.http import HttpRequest

from django_devsummit.settings import get_config
from django_devsummit.stages import stage_flags


def devsummit_site(request: HttpRequest) -> dict[str, dict[str, object]]:  # noqa: ARG001
    """Expose the event stage and environment mode to templates.

    Section pages get these values from the dispatcher's view scope; this
    processor covers templates rendered elsewhere, such as the 404 page.

    Add ``"django_devsummit.context_processors.devsummit_site"`` to the
    ``context_processors`` list in your ``TEMPLATES`` setting.

    Usage in templates::

        {% if devsummit.stages.signup %}
            <a href="{{ devsummit.links.livestream_form }}">Sign up</a>
        {% endif %}
    """
    config = get_config()
    return {
        "devsummit": {
            "prod": config.production,
            "stage": config.stage,
            "stages": stage_flags(config.stage),
            "links": config.links,
        }
    }
