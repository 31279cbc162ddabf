"""
Output writer: writes final transcript TXT files.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_transcript(text: str, output_root: Path, video_id: str) -> Path:
    """
    Write transcript to <OutputRoot>/<video_id>.txt
    Returns the path to the written file.
    """
    output_root.mkdir(parents=True, exist_ok=True)

    output_file = output_root / f"{video_id}.txt"
    output_file.write_text(text, encoding='utf-8')

    logger.info("Wrote transcript: %s", output_file)
    return output_file


def transcript_exists(output_root: Path, video_id: str) -> bool:
    """
    Check if a transcript file already exists for this video_id.
    Searches <OutputRoot>/**/<video_id>.txt
    """
    if not output_root.exists():
        return False
    return any(output_root.glob(f"**/{video_id}.txt"))
