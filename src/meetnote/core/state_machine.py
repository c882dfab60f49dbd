"""Simple state machine for the monitor loop."""

from __future__ import annotations

from enum import Enum, auto
import logging


class MonitorState(Enum):
    IDLE = auto()
    NOTIFYING = auto()
    STOPPED = auto()


class MonitorEvent(Enum):
    MATCH = auto()
    DISPATCH_DONE = auto()
    DISPATCH_FAILED = auto()
    STOP = auto()


_TRANSITIONS = {
    MonitorState.IDLE: {
        MonitorEvent.MATCH: MonitorState.NOTIFYING,
        MonitorEvent.STOP: MonitorState.STOPPED,
    },
    MonitorState.NOTIFYING: {
        MonitorEvent.DISPATCH_DONE: MonitorState.IDLE,
        MonitorEvent.DISPATCH_FAILED: MonitorState.IDLE,
        MonitorEvent.STOP: MonitorState.STOPPED,
    },
    MonitorState.STOPPED: {},
}


class MonitorStateMachine:
    def __init__(self):
        self.state = MonitorState.IDLE

    def transition(self, event: MonitorEvent) -> MonitorState:
        next_state = _TRANSITIONS.get(self.state, {}).get(event, self.state)
        if next_state == self.state and event not in _TRANSITIONS.get(self.state, {}):
            logging.getLogger(__name__).warning(
                "Invalid state transition: %s --%s--> %s", self.state, event, next_state
            )
        self.state = next_state
        return self.state

    def reset(self) -> MonitorState:
        self.state = MonitorState.IDLE
        return self.state
