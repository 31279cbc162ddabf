"""
ytscribe — setuptools build script.

Usage:
    # Development (editable install):
    pip install -e .

    # Run:
    ytscribe transcript "https://www.youtube.com/watch?v=dQw4w9WgXcQ"

Requires the yt-dlp executable on PATH (or set with `ytscribe config ytdlp_path ...`).
"""

from setuptools import setup, find_namespace_packages

APP_NAME = "ytscribe"

setup(
    name=APP_NAME,
    version="1.0.0",
    description="YouTube transcript fetcher built on yt-dlp captions",
    packages=find_namespace_packages(include=["ytscribe", "ytscribe.*"]),
    install_requires=[
        "requests>=2.28.0",
        "typer>=0.9.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "ytscribe = ytscribe.cli:main",
        ],
    },
)
