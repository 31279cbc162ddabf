"""
Data models (plain dataclasses) for ytscribe.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class CaptionAvailability:
    original_language: Optional[str] = None
    manual_languages: dict = field(default_factory=dict)   # lang -> formats
    auto_languages: dict = field(default_factory=dict)

    def all_languages(self) -> list[str]:
        """Manual then auto keys, first occurrence wins."""
        return list(dict.fromkeys([*self.manual_languages, *self.auto_languages]))


@dataclass(frozen=True)
class LanguageCandidate:
    language: str
    is_manual: bool


@dataclass
class CaptionDocument:
    content: str
    subtitle_type: str               # "manual" | "auto"
    language: str
    path: Optional[Path] = None


@dataclass
class TranscriptResult:
    text: str
    video_id: str
    subtitle_type: str
    detected_language: str
    was_auto_detected: bool = False
    available_languages: Optional[list[str]] = None


@dataclass
class VideoMetadata:
    description: str = ""
    view_count: int = 0
    author: str = ""


@dataclass
class PageInfo:
    title: str = ""
    thumbnail_url: str = ""
