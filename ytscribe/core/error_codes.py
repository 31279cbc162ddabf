"""
Standardised error handling for ytscribe.
"""

from ytscribe.core.constants import ErrorKind, STATUS_CODES, RETRYABLE_ERRORS


def is_retryable(kind: str) -> bool:
    return kind in RETRYABLE_ERRORS


class EngineError(Exception):
    """Raised when transcript acquisition hits a known error condition."""

    def __init__(self, kind: str, message: str):
        if kind not in STATUS_CODES:
            kind = ErrorKind.UNKNOWN
        self.kind = kind
        self.message = message
        self.status_code = STATUS_CODES[kind]
        self.retryable = is_retryable(kind)
        super().__init__(f"[{kind}] {message}")


def classify_tool_error(stderr: str) -> EngineError:
    """
    Map yt-dlp diagnostic output to an EngineError.
    Pure pattern match; unmatched text is kept verbatim in an UNKNOWN error.
    """
    stderr = stderr or ""
    if ("Video unavailable" in stderr
            or "is not a valid URL" in stderr
            or "Incomplete YouTube ID" in stderr):
        return EngineError(ErrorKind.VIDEO_NOT_FOUND, "Video not found")
    if "429" in stderr or "Too Many Requests" in stderr:
        return EngineError(ErrorKind.RATE_LIMITED, "Rate limited by YouTube")
    if "Private video" in stderr or "Sign in" in stderr:
        return EngineError(ErrorKind.ACCESS_DENIED,
                           "Video is private or requires authentication")
    return EngineError(ErrorKind.UNKNOWN, f"yt-dlp error: {stderr.strip()}")
