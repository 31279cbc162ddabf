"""
ytscribe command-line interface.

Thin adapter over TranscriptService: parse arguments, run the request,
print the transcript or the caller-facing JSON response.
"""

import json
import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from ytscribe.core.config import AppConfig
from ytscribe.core.constants import APP_NAME, APP_VERSION, LOG_DIR, LOG_FILE
from ytscribe.core.diagnostics import get_diagnostics
from ytscribe.core.output_writer import write_transcript, transcript_exists
from ytscribe.core.service import TranscriptService
from ytscribe.core.url_parse import extract_video_id, parse_input_file

logger = logging.getLogger(APP_NAME)

# When launched outside a login shell, user-level bin directories may be
# missing from PATH, so yt-dlp is not found.
EXTRA_PATHS = [
    "/opt/homebrew/bin",          # Apple Silicon default
    "/usr/local/bin",             # Intel Mac default
    os.path.expanduser("~/.local/bin"),
]

app = typer.Typer(
    name=APP_NAME,
    help="Fetch plain-text YouTube transcripts via yt-dlp captions.",
    no_args_is_help=True,
)


def _extend_path():
    current_path = os.environ.get("PATH", "")
    for p in EXTRA_PATHS:
        if os.path.isdir(p) and p not in current_path.split(os.pathsep):
            current_path = p + os.pathsep + current_path
    os.environ["PATH"] = current_path


def setup_logging(verbose: bool = False):
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    handlers: list[logging.Handler] = [logging.FileHandler(LOG_FILE, encoding="utf-8")]
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


@app.callback()
def _root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Also log to stderr (DEBUG level)"),
) -> None:
    setup_logging(verbose)
    logger.info("%s v%s starting at %s", APP_NAME, APP_VERSION, datetime.now().isoformat())


@app.command()
def transcript(
    url: str = typer.Argument(..., help="YouTube video URL"),
    lang: Optional[str] = typer.Option(None, "--lang", "-l", help="Caption language, or 'auto'"),
    as_json: bool = typer.Option(False, "--json", help="Print the full JSON response"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write the transcript to this file"),
    no_metadata: bool = typer.Option(False, "--no-metadata", help="Skip description/views/author lookup"),
    page_info: bool = typer.Option(False, "--page-info", help="Also look up title and thumbnail"),
) -> None:
    """Fetch the transcript for one video."""
    config = AppConfig()
    service = TranscriptService.from_config(config)

    response = service.get_transcript(
        url,
        lang or config.default_language,
        include_metadata=not no_metadata,
        include_page_info=page_info,
    )

    if response["success"] and out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(response["transcript"], encoding="utf-8")
        # stdout stays pure JSON with --json
        typer.echo(f"Transcript written to: {out}", err=as_json)

    if as_json:
        typer.echo(json.dumps(response, ensure_ascii=False, indent=2))
    elif response["success"] and not out:
        typer.echo(response["transcript"])

    if not response["success"]:
        if not as_json:
            typer.echo(typer.style(f"✗ {response['code']}: {response['error']}",
                                   fg=typer.colors.RED), err=True)
        raise typer.Exit(code=1)


@app.command()
def batch(
    input_file: Path = typer.Argument(..., exists=True, dir_okay=False, help=".txt or .csv file of URLs"),
    lang: Optional[str] = typer.Option(None, "--lang", "-l", help="Caption language, or 'auto'"),
    out_dir: Optional[Path] = typer.Option(None, "--out-dir", "-o", help="Output directory"),
    force: bool = typer.Option(False, "--force", help="Re-fetch videos that already have a transcript"),
) -> None:
    """Fetch transcripts for every YouTube URL in a file."""
    config = AppConfig()
    service = TranscriptService.from_config(config)
    output_root = out_dir or config.output_root

    urls = parse_input_file(str(input_file))
    if not urls:
        typer.echo("No YouTube URLs found.", err=True)
        raise typer.Exit(code=1)

    failed = 0
    for url in urls:
        video_id = extract_video_id(url)
        if not force and transcript_exists(output_root, video_id):
            typer.echo(f"- {video_id}: already done, skipping")
            continue

        response = service.get_transcript(url, lang or config.default_language,
                                          include_metadata=False)
        if response["success"]:
            path = write_transcript(response["transcript"], output_root, video_id)
            typer.echo(typer.style(f"✓ {video_id}: {path}", fg=typer.colors.GREEN))
        else:
            failed += 1
            typer.echo(typer.style(f"✗ {video_id}: {response['code']}: {response['error']}",
                                   fg=typer.colors.RED), err=True)

    typer.echo(f"{len(urls) - failed}/{len(urls)} done")
    if failed:
        raise typer.Exit(code=1)


@app.command()
def doctor() -> None:
    """Show yt-dlp and cookies status."""
    info = get_diagnostics(AppConfig())
    typer.echo(json.dumps(info, indent=2))


@app.command("config")
def config_cmd(
    key: Optional[str] = typer.Argument(None, help="Setting to show or change"),
    value: Optional[str] = typer.Argument(None, help="New value"),
) -> None:
    """Show all settings, one setting, or change a setting."""
    config = AppConfig()
    if key is None:
        typer.echo(json.dumps(config.as_dict(), indent=2))
        return
    if value is None:
        if key not in config.as_dict():
            typer.echo(f"Unknown config key: {key}", err=True)
            raise typer.Exit(code=1)
        typer.echo(config.get(key))
        return
    try:
        config.set(key, value)
    except KeyError as e:
        typer.echo(e.args[0], err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{key} = {config.get(key)}")


def main():
    _extend_path()
    app()


if __name__ == "__main__":
    main()
