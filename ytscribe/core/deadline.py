"""
Request deadlines.

A Deadline is started once per request phase and handed down to every
tool invocation, which uses the remaining budget as its subprocess timeout.
"""

import time

from ytscribe.core.constants import ErrorKind
from ytscribe.core.error_codes import EngineError


class Deadline:
    """Wall-clock budget for one request phase."""

    def __init__(self, seconds: float, label: str = "Request"):
        self.seconds = seconds
        self.label = label
        self._expires_at = time.monotonic() + seconds

    def remaining(self) -> float:
        return max(0.0, self._expires_at - time.monotonic())

    def expired(self) -> bool:
        return self.remaining() <= 0

    def timeout_error(self) -> EngineError:
        return EngineError(ErrorKind.TIMEOUT,
                           f"{self.label} timed out after {self.seconds:g}s")

    def check(self) -> float:
        """Return the remaining budget, raising TIMEOUT if none is left."""
        if self.expired():
            raise self.timeout_error()
        return self.remaining()
