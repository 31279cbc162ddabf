"""
VTT captions parsing → plain text.
Drops headers, timestamps, cue numbers and NOTE blocks, strips styling tags,
and collapses the repeated lines typical of auto-generated captions.
"""

import re
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

_HTML_TAG_RE = re.compile(r'<[^>]+>')
_CUE_ID_RE = re.compile(r'^\d+$')

_ENTITIES = (
    ('&nbsp;', ' '),
    ('&amp;', '&'),
    ('&lt;', '<'),
    ('&gt;', '>'),
)


def _is_header(line: str) -> bool:
    return (line == 'WEBVTT' or line == ''
            or line.startswith('Kind:') or line.startswith('Language:'))


def _clean_cue_text(line: str) -> str:
    text = _HTML_TAG_RE.sub('', line)
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text.strip()


def parse_vtt(content: str) -> str:
    """
    Convert VTT subtitle text to clean plain text, one cue line per line.
    Never raises; a document without cue text yields "".
    """
    text_lines = []
    in_cue = False

    for raw_line in content.splitlines():
        line = raw_line.strip()

        if _is_header(line):
            in_cue = False
            continue

        # Timing line opens the cue text that follows
        if '-->' in line:
            in_cue = True
            continue

        if _CUE_ID_RE.match(line) or line.startswith('NOTE'):
            continue

        if in_cue:
            cleaned = _clean_cue_text(line)
            if cleaned:
                text_lines.append(cleaned)

    # Auto-generated captions repeat each line across rolling cues
    deduplicated = [
        line for i, line in enumerate(text_lines)
        if i == 0 or line != text_lines[i - 1]
    ]
    return '\n'.join(deduplicated)


def parse_vtt_file(vtt_path: Path) -> str:
    """Read a VTT file from disk and convert it to plain text."""
    content = vtt_path.read_text(encoding='utf-8', errors='replace')
    text = parse_vtt(content)
    logger.debug("Parsed %s: %d chars", vtt_path.name, len(text))
    return text
