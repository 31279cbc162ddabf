"""
Transcript acquisition engine.

Explicit language: one download attempt, no fallback.

Auto-detect:
    1. list available caption languages and rank them
    2. try the top MAX_RANKED_ATTEMPTS candidates; a RATE_LIMITED failure
       moves on to the next one, any other failure aborts
    3. one last attempt for auto captions in the original language's base
       code, accepting whatever language file comes back

At most MAX_DOWNLOAD_ATTEMPTS downloads per request, with no delay between
them.
"""

import dataclasses
import logging
from pathlib import Path

from ytscribe.core.caption_source import CaptionSource
from ytscribe.core.captions_fetch import fetch_transcript_attempt
from ytscribe.core.deadline import Deadline
from ytscribe.core.error_codes import EngineError
from ytscribe.core.language_select import prioritize_languages, base_code
from ytscribe.core.models import TranscriptResult
from ytscribe.core.constants import (
    ErrorKind, AUTO_LANGUAGE, MAX_RANKED_ATTEMPTS, ACQUISITION_TIMEOUT_SEC,
)

logger = logging.getLogger(__name__)


def is_auto_language(language: str | None) -> bool:
    return not language or language == AUTO_LANGUAGE


class TranscriptEngine:
    """Runs the acquisition cascade against a CaptionSource."""

    def __init__(self, source: CaptionSource, workspace_root: Path | None = None):
        self.source = source
        self.workspace_root = workspace_root

    def _attempt(self, video_url: str, video_id: str, language: str,
                 deadline: Deadline, original_fallback: bool = False) -> TranscriptResult:
        return fetch_transcript_attempt(
            self.source, video_url, video_id, language, deadline,
            workspace_root=self.workspace_root,
            original_fallback=original_fallback,
        )

    def acquire(self, video_url: str, video_id: str, language: str | None = None,
                deadline: Deadline | None = None) -> TranscriptResult:
        deadline = deadline or Deadline(ACQUISITION_TIMEOUT_SEC, "Transcript download")

        if not is_auto_language(language):
            logger.info("Fetching %s captions for %s", language, video_id)
            return self._attempt(video_url, video_id, language, deadline)

        return self._acquire_auto(video_url, video_id, deadline)

    def _acquire_auto(self, video_url: str, video_id: str,
                      deadline: Deadline) -> TranscriptResult:
        availability = self.source.fetch_availability(video_url, deadline)
        available_languages = availability.all_languages()

        candidates = prioritize_languages(availability)
        if not candidates:
            raise EngineError(ErrorKind.NO_SUBTITLES,
                              "No subtitles available for this video")

        def detected(result: TranscriptResult) -> TranscriptResult:
            return dataclasses.replace(result, was_auto_detected=True,
                                       available_languages=available_languages)

        rate_limited: EngineError | None = None
        for candidate in candidates[:MAX_RANKED_ATTEMPTS]:
            try:
                return detected(self._attempt(video_url, video_id,
                                              candidate.language, deadline))
            except EngineError as e:
                if not e.retryable:
                    raise
                logger.warning("Rate limited on %s (%s), trying next candidate",
                               candidate.language,
                               "manual" if candidate.is_manual else "auto")
                rate_limited = rate_limited or e

        original = availability.original_language
        if not original:
            raise rate_limited or EngineError(ErrorKind.NO_SUBTITLES,
                                              "No subtitles available for this video")

        fallback_language = base_code(original)
        logger.info("Falling back to original-language auto captions (%s) for %s",
                    fallback_language, video_id)
        try:
            return detected(self._attempt(video_url, video_id, fallback_language,
                                          deadline, original_fallback=True))
        except EngineError as e:
            if e.retryable:
                raise
            raise rate_limited or e
