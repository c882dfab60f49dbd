import json

import pytest

from meetnote import main as meetnote_main
from meetnote.adapters import dispatch
from meetnote.app_detector import StaticAppDetector
from meetnote.core.config_model import MeetingConfig
from meetnote.core.ports import Dispatcher, ForegroundAppSource


class _Dispatcher(Dispatcher):
    def __init__(self):
        self.calls = []

    def dispatch(self, config):
        self.calls.append(config)


def test_main_exits_before_loop_when_config_missing(monkeypatch, tmp_path):
    calls = []
    monkeypatch.setattr(meetnote_main.config, "CONFIG_PATH", tmp_path / "config.json")
    monkeypatch.setattr(dispatch.subprocess, "run", lambda args, **kw: calls.append(args))
    monkeypatch.setattr(
        meetnote_main.Meetnote, "run", lambda self: pytest.fail("loop should not start")
    )

    with pytest.raises(SystemExit) as excinfo:
        meetnote_main.main()

    assert excinfo.value.code == 1
    assert calls == []


def test_main_exits_on_malformed_config(monkeypatch, tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"meetingApps": ["Zoom"]}), encoding="utf-8")
    monkeypatch.setattr(meetnote_main.config, "CONFIG_PATH", path)

    with pytest.raises(SystemExit) as excinfo:
        meetnote_main.main()

    assert excinfo.value.code == 1


def test_app_runs_until_shutdown_requested():
    app = None

    class _Detector(ForegroundAppSource):
        def __init__(self):
            self.calls = 0

        def detect_foreground_app(self):
            self.calls += 1
            if self.calls == 2:
                app.request_shutdown()
            return "Zoom"

    dispatcher = _Dispatcher()
    app = meetnote_main.Meetnote(
        MeetingConfig(("Zoom",), "Meeting", "Take notes!"),
        detector=_Detector(),
        dispatcher=dispatcher,
    )
    app.monitor._poll_interval = 0

    app.run()

    assert len(dispatcher.calls) == 2


def test_app_uses_configured_detector(monkeypatch):
    monkeypatch.setattr(meetnote_main.config, "DETECTOR", "static:Zoom")

    app = meetnote_main.Meetnote(MeetingConfig(("Zoom",), "t", "m"), dispatcher=_Dispatcher())

    assert isinstance(app.detector, StaticAppDetector)
    assert app.monitor.tick() is True
