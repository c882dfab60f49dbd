"""Core polling loop for Meetnote.

Keeps the detect -> match -> dispatch cycle in one place, decoupled from
platform-specific implementations via ports.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .cancel_token import CancelToken
from .config_model import MeetingConfig
from .errors import DispatchError
from .ports import Dispatcher, ForegroundAppSource
from .state_machine import MonitorEvent, MonitorState, MonitorStateMachine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchPolicy:
    """What to do when a dispatch fails.

    fatal: re-raise the DispatchError and end the loop.
    retries: extra attempts within the same tick when not fatal.
    """

    fatal: bool = True
    retries: int = 0


class MeetingMonitor:
    """Polls the foreground app and dispatches on meeting apps."""

    def __init__(
        self,
        config: MeetingConfig,
        detector: ForegroundAppSource,
        dispatcher: Dispatcher,
        poll_interval: float = 5.0,
        dispatch_policy: DispatchPolicy | None = None,
    ):
        self._config = config
        self._detector = detector
        self._dispatcher = dispatcher
        self._poll_interval = poll_interval
        self._policy = dispatch_policy or DispatchPolicy()
        self._state = MonitorStateMachine()
        self._cancel_token = CancelToken()
        self.dispatch_count = 0

    @property
    def state(self) -> MonitorState:
        return self._state.state

    def stop(self) -> None:
        """Request the loop to stop at the next boundary (thread-safe)."""
        self._cancel_token.cancel()

    def tick(self) -> bool:
        """Run one iteration. Returns True if a dispatch was performed."""
        app_name = self._detector.detect_foreground_app()
        if app_name is None:
            logger.debug("No foreground app detected")
            return False

        if not self._config.is_meeting_app(app_name):
            logger.debug("Foreground app %r is not a meeting app", app_name)
            return False

        logger.info("Meeting app in focus: %s", app_name)
        self._state.transition(MonitorEvent.MATCH)

        try:
            self._dispatch()
        except DispatchError as e:
            self._state.transition(MonitorEvent.DISPATCH_FAILED)
            if self._policy.fatal:
                raise
            logger.error("Dispatch failed, continuing: %s", e)
            return False

        self._state.transition(MonitorEvent.DISPATCH_DONE)
        self.dispatch_count += 1
        return True

    def _dispatch(self) -> None:
        attempts = 1 if self._policy.fatal else 1 + max(self._policy.retries, 0)
        for attempt in range(1, attempts + 1):
            try:
                self._dispatcher.dispatch(self._config)
                return
            except DispatchError as e:
                if attempt == attempts:
                    raise
                logger.warning("Dispatch attempt %d/%d failed: %s", attempt, attempts, e)

    def run(self, cancel_token: CancelToken | None = None) -> None:
        """Loop until cancelled, waiting poll_interval between ticks."""
        token = cancel_token or self._cancel_token
        if token is not self._cancel_token and self._cancel_token.cancelled:
            token.cancel()
        self._cancel_token = token
        self._state.reset()

        try:
            while not token.cancelled:
                self.tick()
                if token.wait(self._poll_interval):
                    break
        finally:
            self._state.transition(MonitorEvent.STOP)
            logger.debug("Monitor stopped after %d dispatch(es)", self.dispatch_count)
