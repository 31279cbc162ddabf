"""
Security utilities for ytscribe.
- Safe subprocess execution (argument arrays only)
- Deadline-bounded tool invocation
"""

import subprocess
import logging

from ytscribe.core.constants import ErrorKind
from ytscribe.core.error_codes import EngineError
from ytscribe.core.deadline import Deadline

logger = logging.getLogger(__name__)


# ── Subprocess safety ─────────────────────────────────────────────────

def run_subprocess(args: list[str], **kwargs) -> subprocess.CompletedProcess:
    """
    Execute a subprocess using argument arrays only.
    shell=True is explicitly forbidden.
    """
    if not isinstance(args, (list, tuple)):
        raise TypeError("Subprocess args must be a list/tuple, not a string")

    # Force shell=False: remove any caller-supplied value, then set it once
    kwargs.pop('shell', None)

    logger.debug("Running subprocess: %s", ' '.join(str(a) for a in args))
    return subprocess.run(args, shell=False, **kwargs)


def run_subprocess_capture(args: list[str], timeout: float = 300, **kwargs) -> subprocess.CompletedProcess:
    """Run subprocess and capture stdout/stderr."""
    return run_subprocess(
        args,
        capture_output=True,
        text=True,
        encoding='utf-8',
        errors='replace',
        timeout=timeout,
        **kwargs,
    )


def run_tool(args: list[str], deadline: Deadline) -> subprocess.CompletedProcess:
    """
    Run an external tool within the deadline's remaining budget.

    subprocess.run kills the child when the timeout fires, so an expired
    deadline never leaves the tool running. Launch failures are wrapped
    into UNKNOWN; the exit status is left to the caller.
    """
    timeout = deadline.check()
    try:
        return run_subprocess_capture(args, timeout=timeout)
    except subprocess.TimeoutExpired:
        logger.warning("%s: killed after deadline: %s", deadline.label, args[0])
        raise deadline.timeout_error()
    except FileNotFoundError:
        raise EngineError(ErrorKind.UNKNOWN, f"Tool not found: {args[0]}")
    except OSError as e:
        raise EngineError(ErrorKind.UNKNOWN, f"Failed to run {args[0]}: {e}")
