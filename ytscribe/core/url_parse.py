"""
YouTube URL parsing and validation.
"""

import re
from urllib.parse import urlparse, parse_qs

from ytscribe.core.constants import (
    ErrorKind, YOUTUBE_HOSTS, SHORT_LINK_HOST, EMBED_PATH_PREFIXES, VIDEO_ID_RE,
)
from ytscribe.core.error_codes import EngineError


def _host_matches(hostname: str, host: str) -> bool:
    return hostname == host or hostname.endswith(f".{host}")


def is_allowed_host(url: str) -> bool:
    """True if the URL's host is, or is a subdomain of, a YouTube host."""
    try:
        hostname = (urlparse(url.strip()).hostname or "").lower()
    except ValueError:
        return False
    if not hostname:
        return False
    return any(_host_matches(hostname, host) for host in YOUTUBE_HOSTS)


def extract_video_id(url: str) -> str | None:
    """
    Extract the 11-character video_id from a YouTube URL.
    Returns None if the URL is not a valid YouTube URL.
    """
    url = url.strip()
    if not url or not is_allowed_host(url):
        return None

    try:
        parsed = urlparse(url)
    except ValueError:
        return None

    hostname = (parsed.hostname or "").lower()
    segments = parsed.path.split('/')
    candidate = None

    if _host_matches(hostname, SHORT_LINK_HOST):
        # youtu.be/<id>
        candidate = segments[1] if len(segments) > 1 else None
    elif parsed.path == '/watch':
        candidate = parse_qs(parsed.query).get('v', [None])[0]
    elif len(segments) > 2 and segments[1] in EMBED_PATH_PREFIXES:
        # /v/<id>, /embed/<id>, /shorts/<id>, /live/<id>
        candidate = segments[2]

    if candidate and re.match(VIDEO_ID_RE, candidate):
        return candidate
    return None


def validate_youtube_url(url: str) -> str:
    """
    Validate a YouTube URL and return the video_id.
    Raises EngineError(INVALID_URL) if invalid. Performs no network I/O.
    """
    video_id = extract_video_id(url or "")
    if not video_id:
        raise EngineError(ErrorKind.INVALID_URL, f"Not a valid YouTube URL: {url}")
    return video_id


def is_youtube_url(url: str) -> bool:
    """Quick check if a string looks like a YouTube URL."""
    return extract_video_id(url) is not None


def parse_input_lines(text: str) -> list[str]:
    """
    Parse pasted text into a list of YouTube URLs.
    - Trims whitespace
    - Ignores empty lines
    - Rejects non-YouTube URLs (silently skips)
    """
    urls = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if is_youtube_url(line):
            urls.append(line)
    return urls


def parse_csv_file(filepath: str) -> list[str]:
    """
    Parse a CSV file for YouTube URLs.
    - If header includes 'url' or 'youtube_url' (case-insensitive), use that column
    - Else use first column
    """
    import csv

    urls = []
    with open(filepath, 'r', encoding='utf-8', errors='replace', newline='') as f:
        rows = list(csv.reader(f))

    if not rows:
        return urls

    header = rows[0]
    url_col_idx = 0
    for i, col in enumerate(header):
        if col.strip().lower() in ('url', 'youtube_url'):
            url_col_idx = i
            rows = rows[1:]
            break
    else:
        # No recognized header; keep the first row only if it is data
        if not (header and is_youtube_url(header[0].strip())):
            rows = rows[1:]

    for row in rows:
        if url_col_idx < len(row):
            cell = row[url_col_idx].strip()
            if is_youtube_url(cell):
                urls.append(cell)

    return urls


def parse_txt_file(filepath: str) -> list[str]:
    """Parse a .txt file containing one URL per line."""
    with open(filepath, 'r', encoding='utf-8', errors='replace') as f:
        return parse_input_lines(f.read())


def parse_input_file(filepath: str) -> list[str]:
    """Parse a .txt or .csv file for YouTube URLs."""
    ext = filepath.lower().rsplit('.', 1)[-1] if '.' in filepath else ''
    if ext == 'csv':
        return parse_csv_file(filepath)
    return parse_txt_file(filepath)
