"""
Diagnostics: tool version detection and system checks.
"""

import logging
import subprocess
from datetime import datetime, timezone
from pathlib import Path

from ytscribe.core.security_utils import run_subprocess_capture
from ytscribe.core.constants import DEFAULT_COOKIES_PATH, DEFAULT_YTDLP_PATH, APP_VERSION

logger = logging.getLogger(__name__)


def get_ytdlp_version(ytdlp_path: str = DEFAULT_YTDLP_PATH) -> str:
    """Return yt-dlp version string, or error message."""
    try:
        result = run_subprocess_capture([ytdlp_path, "--version"], timeout=10)
        if result.returncode == 0:
            return result.stdout.strip()
        return f"Error (rc={result.returncode})"
    except FileNotFoundError:
        return "Not installed"
    except (OSError, subprocess.SubprocessError) as e:
        return f"Error: {e}"


def check_cookies_file(cookies_path: Path | None = None) -> dict:
    """Check if cookies.txt exists and return info."""
    path = cookies_path or DEFAULT_COOKIES_PATH
    info = {"detected": False, "path": str(path), "last_modified": None}
    if path.exists():
        info["detected"] = True
        stat = path.stat()
        info["last_modified"] = datetime.fromtimestamp(
            stat.st_mtime, tz=timezone.utc
        ).isoformat()
    return info


def get_diagnostics(config) -> dict:
    """Gather all diagnostic information."""
    return {
        "ytscribe_version": APP_VERSION,
        "ytdlp_version": get_ytdlp_version(config.ytdlp_path),
        "cookies_mode": config.cookies_mode,
        "cookies": check_cookies_file(Path(config.cookies_path)),
        "workspace_root": str(config.workspace_root),
    }
