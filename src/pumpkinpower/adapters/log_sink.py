"""Log sink adapter writing rule notifications to a named logger."""

from __future__ import annotations

import logging


class LoggingSink:
    def __init__(self, name: str = "Pumpkins"):
        self._logger = logging.getLogger(name)

    def info(self, message: str) -> None:
        self._logger.info(message)
