"""Error reporting collaborators.

The resolver never raises recoverable errors; it hands a human-readable
line to a reporter. Anything with a ``report(message)`` method will do.
"""

import logging
from typing import List, Optional, Protocol


PLUGIN_NAME = 'html-partial'


class Reporter(Protocol):
    """Receives one error line per recoverable problem."""

    def report(self, message: str) -> None:
        ...


class LoggingReporter:
    """Reports errors to a stdlib logger, prefixed with the plugin name."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(PLUGIN_NAME)

    def report(self, message: str) -> None:
        self.logger.error(f"{PLUGIN_NAME}: {message}")


class ListReporter:
    """Collects reported messages in memory."""

    def __init__(self):
        self.messages: List[str] = []

    def report(self, message: str) -> None:
        self.messages.append(message)
