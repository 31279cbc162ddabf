"""
Transcript service: one synchronous call per request.

Validates the URL, runs the acquisition engine under its deadline, adds
video metadata under a separate deadline, and shapes the caller-facing
JSON response. Every failure leaves here as one of the seven error kinds.
"""

import logging
from pathlib import Path

from ytscribe.core.caption_source import CaptionSource, YtDlpCaptionSource
from ytscribe.core.config import AppConfig
from ytscribe.core.deadline import Deadline
from ytscribe.core.engine import TranscriptEngine
from ytscribe.core.error_codes import EngineError
from ytscribe.core.models import TranscriptResult, VideoMetadata, PageInfo
from ytscribe.core.page_info import fetch_page_info
from ytscribe.core.url_parse import validate_youtube_url
from ytscribe.core.constants import (
    ErrorKind, ACQUISITION_TIMEOUT_SEC, METADATA_TIMEOUT_SEC,
)

logger = logging.getLogger(__name__)


class TranscriptService:
    """Front door for transcript requests (CLI or any HTTP wrapper)."""

    def __init__(self, source: CaptionSource,
                 workspace_root: Path | None = None,
                 acquisition_timeout_sec: float = ACQUISITION_TIMEOUT_SEC,
                 metadata_timeout_sec: float = METADATA_TIMEOUT_SEC,
                 page_info_fetcher=fetch_page_info):
        self.source = source
        self.engine = TranscriptEngine(source, workspace_root)
        self.acquisition_timeout_sec = acquisition_timeout_sec
        self.metadata_timeout_sec = metadata_timeout_sec
        self.page_info_fetcher = page_info_fetcher

    @classmethod
    def from_config(cls, config: AppConfig) -> "TranscriptService":
        return cls(
            YtDlpCaptionSource.from_config(config),
            workspace_root=config.workspace_root,
            acquisition_timeout_sec=config.acquisition_timeout_sec,
            metadata_timeout_sec=config.metadata_timeout_sec,
        )

    # ── Engine-level calls (raise EngineError) ────────────────────────

    def acquire(self, url: str, language: str | None = None) -> TranscriptResult:
        url = url.strip()
        video_id = validate_youtube_url(url)
        deadline = Deadline(self.acquisition_timeout_sec, "Transcript download")
        return self.engine.acquire(url, video_id, language, deadline)

    def fetch_metadata(self, video_id: str) -> VideoMetadata:
        deadline = Deadline(self.metadata_timeout_sec, "Metadata fetch")
        return self.source.fetch_metadata(video_id, deadline)

    def fetch_page_info(self, video_id: str) -> PageInfo:
        return self.page_info_fetcher(video_id, timeout=self.metadata_timeout_sec)

    # ── Caller-facing call (never raises) ─────────────────────────────

    def get_transcript(self, url: str, language: str | None = None,
                       include_metadata: bool = True,
                       include_page_info: bool = False) -> dict:
        """
        Return {"success": True, "transcript", "metadata"} or
        {"success": False, "error", "code"}; see status_for() for the
        HTTP-style status of a failure.
        """
        try:
            logger.info("Downloading transcript: url=%s lang=%s", url, language or "auto")
            result = self.acquire(url, language)

            metadata = None
            if include_metadata:
                logger.info("Fetching video metadata for %s", result.video_id)
                metadata = self.fetch_metadata(result.video_id)

            page = None
            if include_page_info:
                page = self.fetch_page_info(result.video_id)

            return success_response(result, metadata, page)

        except EngineError as e:
            logger.warning("Transcript request failed: %s", e)
            return error_response(e)
        except Exception as e:
            logger.error("Unexpected error for %s: %s", url, e, exc_info=True)
            return error_response(EngineError(ErrorKind.UNKNOWN, "Internal server error"))


def success_response(result: TranscriptResult,
                     metadata: VideoMetadata | None = None,
                     page: PageInfo | None = None) -> dict:
    meta = {
        "videoId": result.video_id,
        "subtitleType": result.subtitle_type,
        "language": result.detected_language,
        "wasAutoDetected": result.was_auto_detected,
    }
    if result.available_languages is not None:
        meta["availableLanguages"] = result.available_languages
    if metadata is not None:
        meta["description"] = metadata.description
        meta["view_count"] = metadata.view_count
        meta["author"] = metadata.author
    if page is not None:
        meta["title"] = page.title
        meta["thumbnail_url"] = page.thumbnail_url

    return {"success": True, "transcript": result.text, "metadata": meta}


def error_response(error: EngineError) -> dict:
    return {"success": False, "error": error.message, "code": error.kind}


def status_for(response: dict) -> int:
    """HTTP-style status code for a response built by this module."""
    if response.get("success"):
        return 200
    return EngineError(response.get("code", ErrorKind.UNKNOWN), "").status_code
