import json

import pytest

from meetnote import configure


def test_add_app_command(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"meetingApps": ["Zoom"], "notificationTitle": "t", "notificationMessage": "m"}),
        encoding="utf-8",
    )

    configure.main(["Skype", "--config", str(path)])
    configure.main(["Skype", "--config", str(path)])

    out = capsys.readouterr().out
    assert 'Added "Skype"' in out
    assert "already in the meeting apps list" in out
    assert json.loads(path.read_text(encoding="utf-8"))["meetingApps"] == ["Zoom", "Skype"]


def test_add_app_command_fails_on_missing_config(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        configure.main(["Skype", "--config", str(tmp_path / "absent.json")])
    assert excinfo.value.code == 1
