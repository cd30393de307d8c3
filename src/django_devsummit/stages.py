"""Event stage helpers for django-devsummit.

The site moves through three stages over the life of an event:

1. ``announce`` -- the event is announced, an interest form is shown.
2. ``signup`` -- registration and livestream signup are open.
3. ``event`` -- the event is running; the schedule and livestream are live.

The current stage is configured in ``DJANGO_DEVSUMMIT["stage"]`` and
requires a server restart to change.  There is no post-event stage.
"""

from django_devsummit.settings import STAGES, get_config


def stage_index(stage: str) -> int:
    """Return the position of *stage* in the event lifecycle.

    Raises:
        ValueError: If the stage name is not recognized.
    """
    try:
        return STAGES.index(stage)
    except ValueError:
        msg = f"Unknown stage: {stage!r}"
        raise ValueError(msg) from None


def stage_reached(stage: str, current: str | None = None) -> bool:
    """Check whether the event is at or past *stage*.

    Args:
        stage: Stage name to compare against (e.g. ``"signup"``).
        current: The current stage.  Defaults to the configured stage.

    Returns:
        ``True`` if the current stage is *stage* or a later one.

    Raises:
        ValueError: If either stage name is not recognized.
    """
    if current is None:
        current = get_config().stage
    return stage_index(current) >= stage_index(stage)


def stage_flags(current: str | None = None) -> dict[str, bool]:
    """Return a ``{stage: reached}`` mapping for every known stage."""
    return {stage: stage_reached(stage, current) for stage in STAGES}
