"""Template engine settings for the site content tree.

The site root holds three template folders, all using the ``.html``
extension:

- ``sections/`` -- one template per section page, plus the ``_``-prefixed
  AMP popups and sitemap.
- ``templates/`` -- layouts, picked by the ``layout`` scope key.
- ``partials/`` -- fragments pulled in with ``{% include %}``.

This module is safe to import from a Django settings module.
"""

from pathlib import Path

DEFAULT_SITE_ROOT = Path(__file__).resolve().parent.parent / "content"


def template_settings(site_root: str | Path = DEFAULT_SITE_ROOT, *, debug: bool = False) -> dict[str, object]:
    """Return a ``TEMPLATES`` entry that renders the site content tree.

    Usage in a host project's settings::

        from django_devsummit.site.templating import template_settings

        TEMPLATES = [template_settings(BASE_DIR / "site")]

    Args:
        site_root: Directory containing ``sections/``, ``templates/`` and
            ``partials/``.
        debug: Enable template debug information.
    """
    return {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [Path(site_root)],
        "APP_DIRS": True,
        "OPTIONS": {
            "debug": debug,
            "context_processors": [
                "django.template.context_processors.request",
                "django_devsummit.context_processors.devsummit_site",
            ],
        },
    }
