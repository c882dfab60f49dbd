"""Core configuration model (structured view of config.json)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MeetingConfig:
    meeting_apps: tuple[str, ...]
    notification_title: str
    notification_message: str

    def is_meeting_app(self, app_name: str) -> bool:
        return app_name in self.meeting_apps
