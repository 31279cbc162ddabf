"""
Shared constants for ytscribe.
Single source of truth — imported by every other module.
"""

import pathlib
import tempfile

# ── Application identity ──────────────────────────────────────────────
APP_NAME = "ytscribe"
APP_VERSION = "1.0.0"

# ── Filesystem paths ─────────────────────────────────────────────────
HOME = pathlib.Path.home()

CONFIG_DIR = HOME / ".config" / APP_NAME
CONFIG_PATH = CONFIG_DIR / "config.json"
LOG_DIR = HOME / ".local" / "state" / APP_NAME
LOG_FILE = LOG_DIR / "app.log"

DEFAULT_OUTPUT_ROOT = HOME / "Downloads" / "YouTube Transcripts"
DEFAULT_WORKSPACE_ROOT = pathlib.Path(tempfile.gettempdir()) / "ytscribe-subs"

# Cookies
DEFAULT_COOKIES_PATH = CONFIG_DIR / "youtube_cookies.txt"

# ── External tool ─────────────────────────────────────────────────────
DEFAULT_YTDLP_PATH = "yt-dlp"
SUB_FORMAT = "vtt"
AUTO_SUB_MARKER = ".auto."

# ── Error kinds ───────────────────────────────────────────────────────
class ErrorKind:
    INVALID_URL = "INVALID_URL"
    VIDEO_NOT_FOUND = "VIDEO_NOT_FOUND"
    RATE_LIMITED = "RATE_LIMITED"
    ACCESS_DENIED = "ACCESS_DENIED"
    NO_SUBTITLES = "NO_SUBTITLES"
    TIMEOUT = "TIMEOUT"
    UNKNOWN = "UNKNOWN"

STATUS_CODES = {
    ErrorKind.INVALID_URL: 400,
    ErrorKind.VIDEO_NOT_FOUND: 404,
    ErrorKind.RATE_LIMITED: 429,
    ErrorKind.ACCESS_DENIED: 403,
    ErrorKind.NO_SUBTITLES: 404,
    ErrorKind.TIMEOUT: 504,
    ErrorKind.UNKNOWN: 500,
}

RETRYABLE_ERRORS = {
    ErrorKind.RATE_LIMITED,
}

# ── Subtitle types ────────────────────────────────────────────────────
class SubtitleType:
    MANUAL = "manual"
    AUTO = "auto"

# ── Language selection ────────────────────────────────────────────────
AUTO_LANGUAGE = "auto"
ENGLISH_PREFIX = "en"
ORIG_SUFFIX = "-orig"
# Keys yt-dlp reports alongside real languages (live streams)
NON_LANGUAGE_KEYS = {"live_chat"}

# ── Cascade budget ────────────────────────────────────────────────────
MAX_RANKED_ATTEMPTS = 2
MAX_DOWNLOAD_ATTEMPTS = MAX_RANKED_ATTEMPTS + 1

# ── Deadlines (seconds) ───────────────────────────────────────────────
ACQUISITION_TIMEOUT_SEC = 30
METADATA_TIMEOUT_SEC = 15
PAGE_INFO_TIMEOUT_SEC = 10

# ── Cookies ───────────────────────────────────────────────────────────
class CookiesMode:
    OFF = "OFF"
    USE_FILE = "USE_FILE"

# ── Page info (oEmbed) ────────────────────────────────────────────────
OEMBED_URL = "https://www.youtube.com/oembed"

# ── URLs ──────────────────────────────────────────────────────────────
WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
YOUTUBE_HOSTS = [
    "youtube.com",
    "www.youtube.com",
    "m.youtube.com",
    "youtu.be",
    "www.youtu.be",
]
SHORT_LINK_HOST = "youtu.be"
EMBED_PATH_PREFIXES = ("v", "embed", "shorts", "live")
VIDEO_ID_RE = r'^[a-zA-Z0-9_-]{11}$'
