from ..cli_logger import logger
from ..exceptions import ClasspathFinderError


def try_resolving(what, resolver):
    """Run one resolution attempt, turning a failure into None.

    A ClasspathFinderError (missing command, bad coordinate...) or an OSError
    only means this attempt is unavailable; it is logged and the caller moves
    on to the next attempt.
    """
    try:
        result = resolver()
    except (ClasspathFinderError, OSError) as e:
        logger.warning(f"Could not resolve {what}: {e}")
        return None
    if result is not None:
        logger.debug(f"Resolved {what}")
    return result


def first_non_null(*attempts):
    """Evaluate attempts in order and return the first result that is not None."""
    for attempt in attempts:
        result = attempt()
        if result is not None:
            return result
    return None
