"""Process-wide logging setup, called once by each entrypoint."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
