"""Logging setup shared by the CDK apps and the deploy CLI."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # botocore is chatty at DEBUG
    logging.getLogger("botocore").setLevel(max(logging.getLogger().level, logging.INFO))
