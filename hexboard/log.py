"""Logging bootstrap for the hexboard entry point."""

from __future__ import annotations

import logging
import logging.config
import pathlib

import yaml

from . import settings


def configure_logging(path: pathlib.Path | None = None) -> None:
    """Configure logging from a YAML dictConfig file.

    Falls back to ``logging.basicConfig`` at ``settings.LOG_LEVEL`` when the
    file does not exist.
    """
    path = path or settings.LOG_CONFIG_PATH
    if not path.is_file():
        logging.basicConfig(level=settings.LOG_LEVEL)
        logging.getLogger(__name__).debug('No logging config at %s', path)
        return

    with path.open() as f:
        config = yaml.safe_load(f)
    logging.config.dictConfig(config)
