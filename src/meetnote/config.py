"""Process settings for Meetnote, read from the environment / .env"""

import logging
import math
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _get_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def _get_float(name: str, default: float, minimum: float = 0.0, strict: bool = False) -> float:
    """Read a finite float >= minimum (> minimum if strict), else the default."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        value = math.nan

    if not math.isfinite(value) or value < minimum or (strict and value == minimum):
        logger.warning("Invalid %s=%r, using %s", name, raw, default)
        return default
    return value


def _get_int(name: str, default: int, minimum: int = 0) -> int:
    return int(_get_float(name, default, minimum=minimum))


class Config:
    """Environment-driven settings. The meeting apps live in config.json."""

    # Meeting configuration file (meetingApps, notificationTitle, notificationMessage)
    CONFIG_PATH = Path(os.getenv("MEETNOTE_CONFIG", "config.json"))

    # Seconds between foreground-app checks
    POLL_INTERVAL = _get_float("POLL_INTERVAL", 5.0, strict=True)

    # Dispatch
    DEEP_LINK = os.getenv("DEEP_LINK", "obsidian://new")
    NOTIFY_COMMAND = os.getenv("NOTIFY_COMMAND", "notify-send")
    OPEN_COMMAND = os.getenv("OPEN_COMMAND", "xdg-open")
    # 0 disables the timeout
    COMMAND_TIMEOUT = _get_float("COMMAND_TIMEOUT", 10.0)

    # "true" ends the loop on the first failed dispatch
    DISPATCH_FATAL = _get_bool("DISPATCH_FATAL", "true")
    DISPATCH_RETRIES = _get_int("DISPATCH_RETRIES", 2)

    # Force a detector: "x11", "windows", "macos", "null" or "static:<App Name>"
    DETECTOR = os.getenv("DETECTOR", "") or None

    DEBUG = _get_bool("DEBUG", "false")

    @property
    def command_timeout(self) -> float | None:
        return self.COMMAND_TIMEOUT if self.COMMAND_TIMEOUT > 0 else None


config = Config()
