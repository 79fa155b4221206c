"""Configuration management."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULTS = {
    "quality": None,
    "language": None,
    "mpv_path": "mpv",
    "request_timeout": 15,
    "log_file": str(Path.home() / "mpvyt_error.log"),
}


class Config:
    """Settings loaded from a JSON file over built-in defaults."""

    def __init__(self, config_file: str | Path | None = None):
        if config_file is None:
            config_file = Path.home() / "mpvyt_settings.json"
        self.file = Path(config_file)
        self.data = dict(DEFAULTS)
        self.load()

    def load(self):
        """Load configuration from file. Unreadable files are ignored."""
        if not self.file.exists():
            return
        try:
            with open(self.file, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable config {self.file}: {e}")
            return
        if isinstance(loaded, dict):
            self.data.update({k: v for k, v in loaded.items() if k in DEFAULTS})

    @property
    def quality(self) -> str | None:
        return self.data.get("quality") or None

    @property
    def language(self) -> str | None:
        return self.data.get("language") or None

    @property
    def mpv_path(self) -> str:
        return self.data.get("mpv_path") or DEFAULTS["mpv_path"]

    @property
    def request_timeout(self) -> float:
        """Network timeout in seconds."""
        try:
            timeout = float(self.data["request_timeout"])
        except (TypeError, ValueError):
            return DEFAULTS["request_timeout"]
        return timeout if timeout > 0 else DEFAULTS["request_timeout"]

    @property
    def log_file(self) -> Path:
        return Path(self.data.get("log_file") or DEFAULTS["log_file"]).expanduser()
