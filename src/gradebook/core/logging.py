"""Logging setup shared by the API process."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the root logger at ``level``."""

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("gradebook").setLevel(level.upper())
