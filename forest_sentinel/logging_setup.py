# logging_setup.py
import logging

from . import config


def setup_logging(level: str | None = None) -> None:
    logging.basicConfig(level=(level or config.LOG_LEVEL or "INFO").upper(),
                        format="%(asctime)s %(levelname)s: %(name)s: %(message)s")
