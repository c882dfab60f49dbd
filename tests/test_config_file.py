import json

import pytest

from meetnote.adapters.config_file import add_meeting_app, load_meeting_config, save_meeting_config
from meetnote.core.config_model import MeetingConfig
from meetnote.core.errors import ConfigError


VALID = {
    "meetingApps": ["Zoom", "Microsoft Teams"],
    "notificationTitle": "Meeting",
    "notificationMessage": "Take notes!",
}


def _write(tmp_path, data, name="config.json"):
    path = tmp_path / name
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
    return path


def test_load_reproduces_fields(tmp_path):
    config = load_meeting_config(_write(tmp_path, VALID))

    assert config.meeting_apps == ("Zoom", "Microsoft Teams")
    assert config.notification_title == "Meeting"
    assert config.notification_message == "Take notes!"


def test_load_accepts_empty_app_list(tmp_path):
    config = load_meeting_config(_write(tmp_path, {**VALID, "meetingApps": []}))
    assert config.meeting_apps == ()


@pytest.mark.parametrize("missing", ["meetingApps", "notificationTitle", "notificationMessage"])
def test_load_fails_on_missing_field(tmp_path, missing):
    data = {k: v for k, v in VALID.items() if k != missing}

    with pytest.raises(ConfigError, match=missing):
        load_meeting_config(_write(tmp_path, data))


@pytest.mark.parametrize(
    "field,value",
    [
        ("meetingApps", "Zoom"),
        ("meetingApps", ["Zoom", 3]),
        ("notificationTitle", 1),
        ("notificationMessage", None),
    ],
)
def test_load_fails_on_wrong_type(tmp_path, field, value):
    with pytest.raises(ConfigError):
        load_meeting_config(_write(tmp_path, {**VALID, field: value}))


def test_load_fails_on_invalid_json(tmp_path):
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_meeting_config(_write(tmp_path, '{"meetingApps": ['))


def test_load_fails_on_non_object(tmp_path):
    with pytest.raises(ConfigError):
        load_meeting_config(_write(tmp_path, "[1, 2]"))


def test_load_fails_on_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read"):
        load_meeting_config(tmp_path / "absent.json")


def test_save_uses_camel_case_keys(tmp_path):
    path = tmp_path / "config.json"
    save_meeting_config(path, MeetingConfig(("Zoom",), "Meeting", "Take notes!"))

    assert json.loads(path.read_text(encoding="utf-8")) == {
        "meetingApps": ["Zoom"],
        "notificationTitle": "Meeting",
        "notificationMessage": "Take notes!",
    }


def test_add_meeting_app_appends_once(tmp_path):
    path = _write(tmp_path, VALID)

    assert add_meeting_app(path, "Skype") is True
    assert add_meeting_app(path, "Skype") is False

    config = load_meeting_config(path)
    assert config.meeting_apps == ("Zoom", "Microsoft Teams", "Skype")
    assert config.notification_title == "Meeting"


def test_is_meeting_app_ignores_duplicates_and_order():
    config = MeetingConfig(("Zoom", "Webex", "Zoom"), "t", "m")
    assert config.is_meeting_app("Webex")
    assert config.is_meeting_app("Zoom")
    assert not config.is_meeting_app("Slack")


def test_add_meeting_app_keeps_other_keys(tmp_path):
    path = _write(tmp_path, {**VALID, "vault": "Work", "theme": {"dark": True}})

    assert add_meeting_app(path, "Skype") is True

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["vault"] == "Work"
    assert data["theme"] == {"dark": True}
    assert data["meetingApps"] == ["Zoom", "Microsoft Teams", "Skype"]


def test_add_meeting_app_rejects_invalid_file(tmp_path):
    path = _write(tmp_path, {"meetingApps": ["Zoom"]})

    with pytest.raises(ConfigError):
        add_meeting_app(path, "Skype")
    assert json.loads(path.read_text(encoding="utf-8")) == {"meetingApps": ["Zoom"]}
