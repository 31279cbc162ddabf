"""
Page info lookup (title, thumbnail) via YouTube's public oEmbed endpoint.
"""

import json
import logging
import requests

from ytscribe.core.error_codes import EngineError
from ytscribe.core.models import PageInfo
from ytscribe.core.constants import (
    ErrorKind, OEMBED_URL, WATCH_URL, PAGE_INFO_TIMEOUT_SEC,
)

logger = logging.getLogger(__name__)


def fetch_page_info(video_id: str, timeout: float = PAGE_INFO_TIMEOUT_SEC) -> PageInfo:
    """
    Look up the video's title and thumbnail URL.
    Raises EngineError on any failure; never returns placeholder values.
    """
    params = {
        "url": WATCH_URL.format(video_id=video_id),
        "format": "json",
    }

    try:
        resp = requests.get(OEMBED_URL, params=params, timeout=timeout)
    except requests.exceptions.Timeout:
        raise EngineError(ErrorKind.TIMEOUT, "Page info lookup timed out")
    except requests.exceptions.ConnectionError:
        raise EngineError(ErrorKind.UNKNOWN, "Network error: could not reach YouTube")
    except requests.exceptions.RequestException as e:
        raise EngineError(ErrorKind.UNKNOWN, f"Page info lookup failed: {e}")

    if resp.status_code in (400, 404):
        raise EngineError(ErrorKind.VIDEO_NOT_FOUND, "Video not found")
    if resp.status_code in (401, 403):
        raise EngineError(ErrorKind.ACCESS_DENIED,
                          "Video is private or embedding is disabled")
    if resp.status_code == 429:
        raise EngineError(ErrorKind.RATE_LIMITED, "Rate limited by YouTube")
    if resp.status_code != 200:
        raise EngineError(ErrorKind.UNKNOWN,
                          f"oEmbed returned {resp.status_code}: {resp.text[:300]}")

    try:
        data = resp.json()
    except (json.JSONDecodeError, ValueError):
        raise EngineError(ErrorKind.UNKNOWN, "Failed to parse oEmbed response JSON")

    logger.debug("Page info for %s: %s", video_id, data.get('title'))
    return PageInfo(
        title=data.get('title') or "",
        thumbnail_url=data.get('thumbnail_url') or "",
    )
