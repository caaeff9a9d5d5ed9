"""Progress reporting for build runs.

The builder only calls ``info`` and ``notice``; anything with those two
methods can be injected.
"""

from __future__ import annotations

import logging
from typing import Protocol

NOTICE = 25
logging.addLevelName(NOTICE, "NOTICE")


class Reporter(Protocol):
    def info(self, message: str) -> None: ...

    def notice(self, message: str) -> None: ...


class LoggingReporter:
    """Default reporter: forwards to a stdlib logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("icontree.build")

    def info(self, message: str) -> None:
        self.logger.info("[Generate] %s", message)

    def notice(self, message: str) -> None:
        self.logger.log(NOTICE, "[Notice] %s", message)

