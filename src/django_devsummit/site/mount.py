"""Helpers to find where the site is mounted inside the host project.

The site can sit below a ``SCRIPT_NAME`` prefix, below a URLconf
``include()`` prefix, or both.  The mount prefix is whatever comes before the
path the site's own URLconf matched.
"""

from django.http import HttpRequest
from django.utils.encoding import escape_uri_path


def mount_url(original_url: str | None, url: str) -> str:
    """Return the URL prefix the site is mounted under, without trailing ``/``.

    Args:
        original_url: The full inbound URL path, including the mount prefix.
        url: The URL path as seen by the site, relative to its mount.

    Returns:
        Everything in *original_url* before the last occurrence of *url*, or
        ``""`` when *original_url* is missing or does not contain *url*.
    """
    if original_url is None:
        return ""
    index = original_url.rfind(url)
    if index == -1:
        return ""
    return original_url[:index]


def request_mount_url(request: HttpRequest, app_path: str | None = None) -> str:
    """Return the mount prefix for *request*.

    Args:
        request: The inbound request.
        app_path: The path the site's URLconf matched, with a leading ``/``
            (``"/" + route`` for section pages).  Defaults to
            ``request.path_info``, which only strips ``SCRIPT_NAME``.
    """
    if app_path is None:
        app_path = request.path_info
    return mount_url(escape_uri_path(request.path), escape_uri_path(app_path))


def site_prefix(request: HttpRequest, *, production: bool, app_path: str | None = None) -> str:
    """Return the absolute URL prefix of the site, e.g. ``https://host/cds``.

    Production is always served over HTTPS; development uses plain HTTP.
    """
    scheme = "https://" if production else "http://"
    return f"{scheme}{request.get_host()}{request_mount_url(request, app_path)}"
