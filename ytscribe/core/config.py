"""
Application configuration manager.
Stores settings in a JSON file under ~/.config/ytscribe.
"""

import json
import logging
from pathlib import Path

from ytscribe.core.constants import (
    CONFIG_PATH, DEFAULT_OUTPUT_ROOT, DEFAULT_WORKSPACE_ROOT, DEFAULT_YTDLP_PATH,
    CookiesMode, DEFAULT_COOKIES_PATH, AUTO_LANGUAGE,
    ACQUISITION_TIMEOUT_SEC, METADATA_TIMEOUT_SEC,
)

# Validation bounds
_ACQUISITION_TIMEOUT_MIN = 5
_ACQUISITION_TIMEOUT_MAX = 300
_METADATA_TIMEOUT_MIN = 5
_METADATA_TIMEOUT_MAX = 120

logger = logging.getLogger(__name__)

_DEFAULTS = {
    'ytdlp_path': DEFAULT_YTDLP_PATH,
    'workspace_root': str(DEFAULT_WORKSPACE_ROOT),
    'output_root': str(DEFAULT_OUTPUT_ROOT),
    'acquisition_timeout_sec': ACQUISITION_TIMEOUT_SEC,
    'metadata_timeout_sec': METADATA_TIMEOUT_SEC,
    'default_language': AUTO_LANGUAGE,
    'cookies_mode': CookiesMode.OFF,
    'cookies_path': str(DEFAULT_COOKIES_PATH),
}


class AppConfig:
    """Manages application configuration stored as JSON."""

    def __init__(self, config_path: Path | None = None):
        self.path = config_path or CONFIG_PATH
        self._data: dict = {}
        self.load()

    def load(self):
        """Load config from disk, merging with defaults."""
        self._data = dict(_DEFAULTS)
        if self.path.exists():
            try:
                with open(self.path, 'r') as f:
                    saved = json.load(f)
                for key, value in saved.items():
                    self._data[key] = self._validate(key, value)
            except (OSError, ValueError, AttributeError) as e:
                logger.warning("Failed to load config: %s", e)

    def save(self):
        """Persist config to disk."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w') as f:
            json.dump(self._data, f, indent=2)

    def get(self, key: str, default=None):
        return self._data.get(key, default)

    def set(self, key: str, value):
        if key not in _DEFAULTS:
            raise KeyError(f"Unknown config key: {key}")
        value = self._validate(key, value)
        self._data[key] = value
        self.save()

    def _validate(self, key: str, value):
        """Validate and coerce config values to safe ranges."""
        if key == 'acquisition_timeout_sec':
            return self._clamp_number(key, value, ACQUISITION_TIMEOUT_SEC,
                                      _ACQUISITION_TIMEOUT_MIN, _ACQUISITION_TIMEOUT_MAX)

        if key == 'metadata_timeout_sec':
            return self._clamp_number(key, value, METADATA_TIMEOUT_SEC,
                                      _METADATA_TIMEOUT_MIN, _METADATA_TIMEOUT_MAX)

        if key == 'cookies_mode':
            if value not in (CookiesMode.OFF, CookiesMode.USE_FILE):
                logger.warning("Invalid cookies_mode %r, using OFF", value)
                return CookiesMode.OFF

        if key == 'default_language':
            value = str(value).strip()
            return value or AUTO_LANGUAGE

        return value

    @staticmethod
    def _clamp_number(key: str, value, default, low, high):
        try:
            value = float(value)
        except (TypeError, ValueError):
            logger.warning("Invalid %s %r, using default", key, value)
            return default
        return max(low, min(high, value))

    def as_dict(self) -> dict:
        return dict(self._data)

    @property
    def ytdlp_path(self) -> str:
        return self._data.get('ytdlp_path', DEFAULT_YTDLP_PATH)

    @property
    def workspace_root(self) -> Path:
        return Path(self._data.get('workspace_root', str(DEFAULT_WORKSPACE_ROOT)))

    @property
    def output_root(self) -> Path:
        return Path(self._data.get('output_root', str(DEFAULT_OUTPUT_ROOT)))

    @property
    def acquisition_timeout_sec(self) -> float:
        return self._data.get('acquisition_timeout_sec', ACQUISITION_TIMEOUT_SEC)

    @property
    def metadata_timeout_sec(self) -> float:
        return self._data.get('metadata_timeout_sec', METADATA_TIMEOUT_SEC)

    @property
    def default_language(self) -> str:
        return self._data.get('default_language', AUTO_LANGUAGE)

    @property
    def cookies_mode(self) -> str:
        return self._data.get('cookies_mode', CookiesMode.OFF)

    @property
    def cookies_path(self) -> str:
        return self._data.get('cookies_path', str(DEFAULT_COOKIES_PATH))
