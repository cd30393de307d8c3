"""Compiled stylesheet for AMP popup pages.

AMP pages must inline their CSS, so the popup templates receive the compiled
``amp.less`` stylesheet as a string.  Production deployments ship a prebuilt
``res/amp.css`` which is read once at startup; otherwise the LESS source is
compiled on the first AMP request.
"""

import logging
from collections.abc import Callable
from pathlib import Path

import lesscpy

logger = logging.getLogger(__name__)


def read_prebuilt_css(path: str | Path) -> str | None:
    """Return the contents of a prebuilt stylesheet, or ``None`` if unreadable."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError:
        logger.debug("No prebuilt AMP CSS at %s, will compile on demand", path)
        return None


def compile_less(path: str | Path) -> str:
    """Compile a LESS file to minified CSS.

    ``@import`` statements are resolved relative to the file's directory.
    """
    with Path(path).open(encoding="utf-8") as fh:
        return lesscpy.compile(fh, minify=True)


class AmpCssCache:
    """Memoizes the AMP stylesheet.

    The cache slot is filled either by *preloaded* CSS (the prebuilt file in
    production) or by the first call to :meth:`get` when *persist* is true.
    With *persist* false every :meth:`get` without preloaded CSS recompiles,
    so stylesheet edits show up in development without a restart.

    Two requests racing on an empty slot may both compile.  Compilation is
    deterministic, so the only cost is redundant work; the last write wins.

    Args:
        compiler: Zero-argument callable returning the compiled CSS.
        persist: Whether to keep freshly compiled CSS for later calls.
        preloaded: CSS that is already available, if any.
    """

    def __init__(self, compiler: Callable[[], str], *, persist: bool, preloaded: str | None = None) -> None:
        self._compiler = compiler
        self.persist = persist
        self._css = preloaded

    @property
    def cached(self) -> str | None:
        return self._css

    def get(self) -> str:
        """Return the stylesheet, compiling it if nothing is cached."""
        css = self._css
        if css is not None:
            return css

        css = self._compiler()
        if self.persist:
            logger.debug("Saving rendered AMP CSS to cache (%d bytes)", len(css))
            self._css = css
        return css
