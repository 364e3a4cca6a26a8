import logging
import sys
from datetime import datetime, timezone


class UTCFormatter(logging.Formatter):
    """Custom formatter that uses UTC timestamps in ISO 8601 format"""

    def formatTime(self, record, datefmt=None):
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        # ISO 8601 format: YYYY-MM-DDTHH:MM:SSZ
        return dt.strftime("%Y-%m-%dT%H:%M:%SZ")


def setup_logging(verbose=False, stream=None):
    """Configure root logging on stderr; stdout is reserved for the push result."""
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(
        UTCFormatter(fmt="[%(asctime)s] [%(levelname)s] %(message)s")
    )
    logger.addHandler(console_handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)
