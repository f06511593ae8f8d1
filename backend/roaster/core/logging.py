import logging

from roaster.core.settings import settings

logger = logging.getLogger("roaster")


def setup_logging() -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    # httpx logs every request at INFO; keep provider chatter out of the way
    logging.getLogger("httpx").setLevel(logging.WARNING)
