"""JSON file adapter producing a structured MeetingConfig."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..core.config_model import MeetingConfig
from ..core.errors import ConfigError

logger = logging.getLogger(__name__)

_APPS_KEY = "meetingApps"
_TITLE_KEY = "notificationTitle"
_MESSAGE_KEY = "notificationMessage"


def load_meeting_config(path: str | Path) -> MeetingConfig:
    """Read and validate the meeting configuration.

    Raises:
        ConfigError: if the file cannot be read, is not valid JSON, or any
            required field is missing or mistyped.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top-level value must be an object")

    apps = _require(data, _APPS_KEY, list, path)
    if not all(isinstance(app, str) for app in apps):
        raise ConfigError(f"{path}: '{_APPS_KEY}' must contain only strings")

    config = MeetingConfig(
        meeting_apps=tuple(apps),
        notification_title=_require(data, _TITLE_KEY, str, path),
        notification_message=_require(data, _MESSAGE_KEY, str, path),
    )
    logger.debug("Loaded %d meeting app(s) from %s", len(config.meeting_apps), path)
    return config


def save_meeting_config(path: str | Path, config: MeetingConfig) -> None:
    data = {
        _APPS_KEY: list(config.meeting_apps),
        _TITLE_KEY: config.notification_title,
        _MESSAGE_KEY: config.notification_message,
    }
    Path(path).write_text(json.dumps(data, indent=4) + "\n", encoding="utf-8")


def add_meeting_app(path: str | Path, app_name: str) -> bool:
    """Append app_name to the configured meeting apps.

    Other keys in the file are kept as they are.
    Returns True if the file was updated, False if the app was already listed.
    """
    config = load_meeting_config(path)
    if config.is_meeting_app(app_name):
        return False

    path = Path(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    data[_APPS_KEY].append(app_name)
    path.write_text(json.dumps(data, indent=4) + "\n", encoding="utf-8")
    return True


def _require(data: dict, key: str, expected: type, path: Path):
    if key not in data:
        raise ConfigError(f"{path}: missing required field '{key}'")
    value = data[key]
    if not isinstance(value, expected):
        raise ConfigError(
            f"{path}: field '{key}' must be {expected.__name__}, got {type(value).__name__}"
        )
    return value
