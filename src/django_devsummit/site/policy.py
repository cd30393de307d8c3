"""``Feature-Policy`` header for rendered section pages.

The header only depends on the environment mode, so it is built once at
startup and reused for every response.
"""

_YOUTUBE = "https://www.youtube.com"

_BASE_DIRECTIVES: tuple[tuple[str, str], ...] = (
    ("accelerometer", "'none'"),
    ("autoplay", f"'self' {_YOUTUBE}"),
    ("camera", "'none'"),
    ("encrypted-media", f"'self' {_YOUTUBE}"),
    ("fullscreen", f"'self' {_YOUTUBE}"),
    ("geolocation", "'none'"),
    ("gyroscope", "'none'"),
    ("magnetometer", "'none'"),
    ("microphone", "'none'"),
    ("midi", "'none'"),
    ("payment", "'none'"),
    ("picture-in-picture", f"'self' {_YOUTUBE}"),
    ("usb", "'none'"),
)

# Dev tooling (livereload, source maps) still relies on these.
_PROD_ONLY_DIRECTIVES: tuple[tuple[str, str], ...] = (
    ("document-write", "'none'"),
    ("sync-xhr", "'none'"),
)


def feature_policy(production: bool) -> str:
    """Return the ``Feature-Policy`` header value for the given mode."""
    directives = _BASE_DIRECTIVES + (_PROD_ONLY_DIRECTIVES if production else ())
    return "; ".join(f"{name} {allowlist}" for name, allowlist in sorted(directives))
