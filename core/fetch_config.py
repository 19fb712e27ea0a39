# -*- coding: utf-8 -*-
"""
Image fetch configuration

The credential decides the mode once, at startup:
- LIVE: an Unsplash access key is configured, images are searched and downloaded
- PLACEHOLDER: no key, a placeholder mapping file is written and nothing touches the network
"""
import json
import logging
import os
from enum import Enum
from pathlib import Path
from typing import Optional, Dict, Any, Mapping

logger = logging.getLogger(__name__)


ACCESS_KEY_ENV = "UNSPLASH_ACCESS_KEY"


class FetchMode(Enum):
    """Fetch mode"""
    LIVE = "live"                # Unsplash search + download
    PLACEHOLDER = "placeholder"  # offline placeholder mapping


class FetchConfig:
    """Fetch configuration - environment driven, optional JSON overrides"""

    # relative to the working directory, like images_dir and placeholder_file
    CONFIG_FILE = Path("config") / "fetch_config.json"

    def __init__(self, access_key: Optional[str] = None):
        self.access_key: Optional[str] = access_key
        self.images_dir: str = "public/rabbits"
        self.placeholder_file: str = "data/image_placeholders.json"
        self.request_delay: float = 1.0  # seconds between entries that hit the network
        self.per_page: int = 3
        self.orientation: str = "landscape"
        self.api_base_url: str = "https://api.unsplash.com"

    @property
    def mode(self) -> FetchMode:
        if self.access_key and self.access_key.strip():
            return FetchMode.LIVE
        return FetchMode.PLACEHOLDER

    def is_live_mode(self) -> bool:
        return self.mode == FetchMode.LIVE

    def is_placeholder_mode(self) -> bool:
        return self.mode == FetchMode.PLACEHOLDER

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "FetchConfig":
        """Build a config from environment variables

        Args:
            env: mapping to read instead of os.environ (tests)
        """
        env = os.environ if env is None else env
        config = cls(access_key=env.get(ACCESS_KEY_ENV) or None)
        if env.get("RABBIT_IMAGES_DIR"):
            config.images_dir = env["RABBIT_IMAGES_DIR"]
        if env.get("RABBIT_PLACEHOLDER_FILE"):
            config.placeholder_file = env["RABBIT_PLACEHOLDER_FILE"]
        if env.get("RABBIT_REQUEST_DELAY"):
            config.request_delay = _parse_delay(env["RABBIT_REQUEST_DELAY"], config.request_delay)
        return config

    def load(self, path: Optional[Path] = None) -> bool:
        """Apply overrides from a JSON file, if it exists"""
        path = Path(path) if path else self.CONFIG_FILE
        if not path.exists():
            return False
        data = json.loads(path.read_text(encoding='utf-8'))
        self._apply_dict(data)
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict (the key itself is never included)"""
        return {
            "mode": self.mode.value,
            "has_access_key": self.is_live_mode(),
            "images_dir": self.images_dir,
            "placeholder_file": self.placeholder_file,
            "request_delay": self.request_delay,
            "per_page": self.per_page,
            "orientation": self.orientation,
            "api_base_url": self.api_base_url,
        }

    def _apply_dict(self, data: Dict[str, Any]) -> None:
        if "images_dir" in data:
            self.images_dir = str(data["images_dir"])
        if "placeholder_file" in data:
            self.placeholder_file = str(data["placeholder_file"])
        if "request_delay" in data:
            self.request_delay = float(data["request_delay"])
        if "per_page" in data:
            self.per_page = int(data["per_page"])
        if "orientation" in data:
            self.orientation = str(data["orientation"])
        if "api_base_url" in data:
            self.api_base_url = str(data["api_base_url"]).rstrip("/")

    def update(self, **kwargs) -> None:
        """Update known settings, unknown names are ignored"""
        for key, value in kwargs.items():
            if hasattr(self, key) and key != "mode" and value is not None:
                setattr(self, key, value)

    def __repr__(self) -> str:
        key_str = "***" if self.is_live_mode() else "None"
        return f"FetchConfig(mode={self.mode.value}, access_key={key_str}, images_dir={self.images_dir})"


# Global config instance
_fetch_config: Optional[FetchConfig] = None


def get_fetch_config() -> FetchConfig:
    """Return the global config, built from the environment on first use"""
    global _fetch_config
    if _fetch_config is None:
        _fetch_config = FetchConfig.from_env()
        _fetch_config.load()
    return _fetch_config


def reset_fetch_config() -> FetchConfig:
    """Drop and rebuild the global config"""
    global _fetch_config
    _fetch_config = None
    return get_fetch_config()


def _parse_delay(raw: str, default: float) -> float:
    """Seconds from RABBIT_REQUEST_DELAY; bad values fall back to default"""
    try:
        delay = float(raw)
    except ValueError:
        logger.warning("RABBIT_REQUEST_DELAY=%r is not a number, using %s", raw, default)
        return default
    if delay < 0:
        logger.warning("RABBIT_REQUEST_DELAY=%r is negative, using %s", raw, default)
        return default
    return delay
