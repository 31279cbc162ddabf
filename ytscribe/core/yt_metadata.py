"""
YouTube metadata fetching via yt-dlp --print.

Two lookups:
- caption availability (original language, manual and automatic caption maps)
- enrichment metadata (description, view count, uploader)
"""

import json
import logging
from pathlib import Path

from ytscribe.core.security_utils import run_tool
from ytscribe.core.error_codes import EngineError, classify_tool_error
from ytscribe.core.deadline import Deadline
from ytscribe.core.models import CaptionAvailability, VideoMetadata
from ytscribe.core.constants import (
    ErrorKind, CookiesMode, DEFAULT_COOKIES_PATH, DEFAULT_YTDLP_PATH,
    WATCH_URL, METADATA_TIMEOUT_SEC,
)

logger = logging.getLogger(__name__)

_AVAILABILITY_FIELDS = "%(.{language,subtitles,automatic_captions})#j"
_METADATA_FIELDS = "%(.{description,view_count,uploader})#j"


def cookies_args(cookies_mode: str = CookiesMode.OFF,
                 cookies_path: Path | None = None) -> list[str]:
    """yt-dlp --cookies arguments, or nothing if cookies are off or missing."""
    if cookies_mode != CookiesMode.USE_FILE:
        return []
    cp = cookies_path or DEFAULT_COOKIES_PATH
    if not cp.exists():
        logger.warning("Cookies file not found, continuing without: %s", cp)
        return []
    return ["--cookies", str(cp)]


def print_fields(video_url: str, fields: str, deadline: Deadline,
                 ytdlp_path: str = DEFAULT_YTDLP_PATH,
                 extra_args: list[str] | None = None) -> dict:
    """
    Run yt-dlp in metadata-print mode and decode the single JSON object
    it writes to stdout.
    """
    args = [
        ytdlp_path,
        "--skip-download",
        "--no-warnings",
        "--no-playlist",
        "--print", fields,
        *(extra_args or []),
        video_url,
    ]

    result = run_tool(args, deadline)
    if result.returncode != 0:
        raise classify_tool_error(result.stderr)

    try:
        data = json.loads((result.stdout or "").strip())
    except json.JSONDecodeError as e:
        raise EngineError(ErrorKind.UNKNOWN, f"Failed to parse yt-dlp JSON: {e}")
    if not isinstance(data, dict):
        raise EngineError(ErrorKind.UNKNOWN, "Unexpected yt-dlp output: not a JSON object")
    return data


def fetch_caption_availability(video_url: str, deadline: Deadline | None = None,
                               ytdlp_path: str = DEFAULT_YTDLP_PATH,
                               extra_args: list[str] | None = None) -> CaptionAvailability:
    """Learn which caption languages exist for a video."""
    deadline = deadline or Deadline(METADATA_TIMEOUT_SEC, "Caption lookup")
    data = print_fields(video_url, _AVAILABILITY_FIELDS, deadline, ytdlp_path, extra_args)

    availability = CaptionAvailability(
        original_language=data.get('language') or None,
        manual_languages=data.get('subtitles') or {},
        auto_languages=data.get('automatic_captions') or {},
    )
    logger.info("Captions for %s: original=%s manual=%d auto=%d",
                video_url, availability.original_language,
                len(availability.manual_languages), len(availability.auto_languages))
    return availability


def fetch_video_metadata(video_id: str, deadline: Deadline | None = None,
                         ytdlp_path: str = DEFAULT_YTDLP_PATH,
                         extra_args: list[str] | None = None) -> VideoMetadata:
    """Fetch description, view count and author for a video."""
    deadline = deadline or Deadline(METADATA_TIMEOUT_SEC, "Metadata fetch")
    data = print_fields(WATCH_URL.format(video_id=video_id), _METADATA_FIELDS,
                        deadline, ytdlp_path, extra_args)

    return VideoMetadata(
        description=data.get('description') or "",
        view_count=int(data.get('view_count') or 0),
        author=data.get('uploader') or "",
    )
