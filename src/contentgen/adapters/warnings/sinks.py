from __future__ import annotations

import logging
from dataclasses import dataclass, field

_WARNINGS_LOGGER = "contentgen.warnings"


@dataclass(frozen=True, slots=True)
class LoggingWarningSink:
    """
    Forwards per-item warnings to the logging system at WARNING level.
    """
    logger_name: str = _WARNINGS_LOGGER

    def warn(self, message: str) -> None:
        logging.getLogger(self.logger_name).warning(message)


@dataclass(slots=True)
class CollectingWarningSink:
    """
    Keeps warnings in memory (tests, dry runs).
    """
    messages: list[str] = field(default_factory=list)

    def warn(self, message: str) -> None:
        self.messages.append(message)
