#!/usr/bin/env python3
"""Meetnote: notify and open a note when a meeting app is in focus"""

import logging
import signal
import sys

from .adapters.config_file import load_meeting_config
from .adapters.dispatch import NotificationDispatcher, SubprocessNotifier, SubprocessUrlOpener
from .app_detector import get_app_detector
from .config import config
from .core.cancel_token import CancelToken
from .core.config_model import MeetingConfig
from .core.errors import ConfigError, DispatchError
from .core.monitor import DispatchPolicy, MeetingMonitor
from .core.ports import Dispatcher, ForegroundAppSource
from .platform_utils import IS_WINDOWS, describe_platform

logger = logging.getLogger(__name__)


class Meetnote:
    """Main application - poll, match, notify"""

    def __init__(
        self,
        meeting_config: MeetingConfig,
        detector: ForegroundAppSource | None = None,
        dispatcher: Dispatcher | None = None,
    ):
        self.meeting_config = meeting_config
        self.detector = detector or get_app_detector(config.DETECTOR)
        self.dispatcher = dispatcher or NotificationDispatcher(
            SubprocessNotifier(config.NOTIFY_COMMAND, timeout=config.command_timeout),
            SubprocessUrlOpener(config.OPEN_COMMAND, timeout=config.command_timeout),
            deep_link=config.DEEP_LINK,
        )
        self.monitor = MeetingMonitor(
            meeting_config,
            self.detector,
            self.dispatcher,
            poll_interval=config.POLL_INTERVAL,
            dispatch_policy=DispatchPolicy(
                fatal=config.DISPATCH_FATAL, retries=config.DISPATCH_RETRIES
            ),
        )
        self._cancel_token = CancelToken()

    def run(self):
        """Run the polling loop until shutdown is requested"""
        print("\n" + "=" * 50)
        print("📅 Meetnote")
        print("=" * 50)
        print(f"Platform: {describe_platform()}")
        print(f"Detector: {type(self.detector).__name__}")
        print(f"Meeting apps: {', '.join(self.meeting_config.meeting_apps) or '(none)'}")
        print(f"Checking every {config.POLL_INTERVAL:g}s")
        print("Press Ctrl+C to quit")
        print("=" * 50 + "\n")

        try:
            self.monitor.run(self._cancel_token)
        except KeyboardInterrupt:
            pass

        print("✓ Stopped")

    def request_shutdown(self):
        """Request application shutdown (thread-safe)"""
        self._cancel_token.cancel()


def main():
    logging.basicConfig(
        level=logging.DEBUG if config.DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        meeting_config = load_meeting_config(config.CONFIG_PATH)
    except ConfigError as e:
        logger.error("Failed to load configuration: %s", e)
        sys.exit(1)

    app = Meetnote(meeting_config)

    def signal_handler(sig, frame):
        app.request_shutdown()

    signal.signal(signal.SIGINT, signal_handler)
    if not IS_WINDOWS:
        signal.signal(signal.SIGTERM, signal_handler)

    try:
        app.run()
    except DispatchError as e:
        logger.error("Dispatch failed, stopping: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
