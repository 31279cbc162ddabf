"""
Captions fetching: one download attempt for one language.
Uses yt-dlp with --write-subs/--write-auto-subs into a scratch workspace,
then picks the produced VTT file and parses it to text.
"""

import glob
import logging
from pathlib import Path

from ytscribe.core.cleanup import scoped_workspace
from ytscribe.core.captions_parse import parse_vtt_file
from ytscribe.core.deadline import Deadline
from ytscribe.core.error_codes import EngineError, classify_tool_error
from ytscribe.core.models import CaptionDocument, TranscriptResult
from ytscribe.core.security_utils import run_tool
from ytscribe.core.constants import (
    ErrorKind, SubtitleType, SUB_FORMAT, AUTO_SUB_MARKER, DEFAULT_YTDLP_PATH,
)

logger = logging.getLogger(__name__)


def download_captions(video_url: str, language: str, work_dir: Path,
                      deadline: Deadline,
                      ytdlp_path: str = DEFAULT_YTDLP_PATH,
                      auto_only: bool = False,
                      extra_args: list[str] | None = None):
    """
    Ask yt-dlp to write VTT captions for one language into work_dir.
    Writes both creator and auto captions unless auto_only is set.
    """
    args = [ytdlp_path]
    if not auto_only:
        args.append("--write-subs")
    args += [
        "--write-auto-subs",
        "--sub-langs", language,
        "--sub-format", SUB_FORMAT,
        "--skip-download",
        "--no-warnings",
        "--no-playlist",
        "-o", str(work_dir / "%(id)s"),
        *(extra_args or []),
        video_url,
    ]

    result = run_tool(args, deadline)
    if result.returncode != 0:
        raise classify_tool_error(result.stderr)


def _language_from_name(filename: str, video_id: str) -> str:
    # <video_id>.<lang>[.auto].vtt
    stem = filename[len(video_id) + 1:-(len(SUB_FORMAT) + 1)]
    parts = [p for p in stem.split('.') if p and p != 'auto']
    return parts[0] if parts else ""


def find_caption_file(work_dir: Path, video_id: str,
                      language: str | None = None,
                      auto_only: bool = False) -> tuple[Path, str] | None:
    """
    Locate a downloaded caption file for video_id (and language, if given).
    Creator captions win over auto captions.
    Returns (path, subtitle_type) or None.
    """
    lang_part = glob.escape(language) if language else ""
    pattern = f"{glob.escape(video_id)}.{lang_part}*.{SUB_FORMAT}"
    files = sorted(work_dir.glob(pattern))
    marked = [f for f in files if AUTO_SUB_MARKER in f.name]

    for f in files:
        if AUTO_SUB_MARKER not in f.name:
            # Stock yt-dlp names auto-only downloads without the marker
            if auto_only and not marked:
                return f, SubtitleType.AUTO
            return f, SubtitleType.MANUAL
    if marked:
        return marked[0], SubtitleType.AUTO
    return None


def load_caption_document(work_dir: Path, video_id: str,
                          language: str | None = None,
                          auto_only: bool = False) -> CaptionDocument:
    """Parse the caption file for video_id into text, or raise NO_SUBTITLES."""
    found = find_caption_file(work_dir, video_id, language, auto_only)
    if not found:
        raise EngineError(ErrorKind.NO_SUBTITLES,
                          f"No subtitles available for language: {language or 'any'}")

    path, subtitle_type = found
    return CaptionDocument(
        content=parse_vtt_file(path),
        subtitle_type=subtitle_type,
        language=language or _language_from_name(path.name, video_id),
        path=path,
    )


def fetch_transcript_attempt(source, video_url: str, video_id: str,
                             language: str, deadline: Deadline,
                             workspace_root: Path | None = None,
                             original_fallback: bool = False) -> TranscriptResult:
    """
    One acquisition attempt: download into a fresh workspace, locate the
    caption file, parse it. The workspace is gone when this returns or raises.

    With original_fallback, only auto captions are requested and a caption
    file in any language is accepted.
    """
    try:
        with scoped_workspace(video_id, workspace_root) as work_dir:
            source.download_captions(video_url, language, work_dir, deadline,
                                     auto_only=original_fallback)
            document = load_caption_document(
                work_dir, video_id, None if original_fallback else language,
                auto_only=original_fallback,
            )
    except OSError as e:
        logger.error("Workspace I/O failed for %s: %s", video_id, e)
        raise EngineError(ErrorKind.UNKNOWN, f"Caption workspace error: {e}") from e

    text = document.content
    if not text.strip():
        raise EngineError(ErrorKind.NO_SUBTITLES, "Transcript is empty")

    logger.info("Captions acquired for %s: lang=%s type=%s (%d chars)",
                video_id, document.language or language,
                document.subtitle_type, len(text))
    return TranscriptResult(
        text=text,
        video_id=video_id,
        subtitle_type=document.subtitle_type,
        detected_language=document.language or language,
    )
