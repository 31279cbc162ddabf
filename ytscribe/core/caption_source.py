"""
Caption source: the engine's only door to the outside world.

The engine calls these three operations and nothing else, so tests can
swap in a fake that writes files or raises EngineError.
"""

from pathlib import Path

from ytscribe.core.captions_fetch import download_captions
from ytscribe.core.deadline import Deadline
from ytscribe.core.models import CaptionAvailability, VideoMetadata
from ytscribe.core.yt_metadata import (
    cookies_args, fetch_caption_availability, fetch_video_metadata,
)
from ytscribe.core.constants import CookiesMode, DEFAULT_YTDLP_PATH


class CaptionSource:
    """Interface for anything that can list, download and describe captions."""

    def fetch_availability(self, video_url: str, deadline: Deadline) -> CaptionAvailability:
        raise NotImplementedError

    def download_captions(self, video_url: str, language: str, work_dir: Path,
                          deadline: Deadline, auto_only: bool = False):
        """Write <video_id>.<lang>[.auto].vtt files into work_dir."""
        raise NotImplementedError

    def fetch_metadata(self, video_id: str, deadline: Deadline) -> VideoMetadata:
        raise NotImplementedError


class YtDlpCaptionSource(CaptionSource):
    """CaptionSource backed by the yt-dlp command-line tool."""

    def __init__(self, ytdlp_path: str = DEFAULT_YTDLP_PATH,
                 cookies_mode: str = CookiesMode.OFF,
                 cookies_path: Path | None = None):
        self.ytdlp_path = ytdlp_path
        self.cookies_mode = cookies_mode
        self.cookies_path = cookies_path

    @classmethod
    def from_config(cls, config) -> "YtDlpCaptionSource":
        return cls(
            ytdlp_path=config.ytdlp_path,
            cookies_mode=config.cookies_mode,
            cookies_path=Path(config.cookies_path),
        )

    def _extra_args(self) -> list[str]:
        return cookies_args(self.cookies_mode, self.cookies_path)

    def fetch_availability(self, video_url, deadline):
        return fetch_caption_availability(video_url, deadline, self.ytdlp_path,
                                          self._extra_args())

    def download_captions(self, video_url, language, work_dir, deadline, auto_only=False):
        download_captions(video_url, language, work_dir, deadline,
                          ytdlp_path=self.ytdlp_path,
                          auto_only=auto_only,
                          extra_args=self._extra_args())

    def fetch_metadata(self, video_id, deadline):
        return fetch_video_metadata(video_id, deadline, self.ytdlp_path,
                                    self._extra_args())
