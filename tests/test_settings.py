import json
from arena.core.logging import logger
from arena.system.settings import Settings, SettingsData
from arena.battle.state import DEFAULT_LOG_LIMIT


def test_defaults_when_file_missing(tmp_path):
    s = Settings.load(tmp_path / "settings.json")
    assert s.data == SettingsData()
    assert s.data.log_limit == DEFAULT_LOG_LIMIT


def test_roundtrip_and_backfill(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"text_speed": 3, "seed": 42, "unknown": True}))
    s = Settings.load(path)
    assert s.data.text_speed == 3 and s.data.seed == 42
    assert s.data.log_level == "INFO"
    s.data.log_limit = 20
    s.save()
    assert Settings.load(path).data.log_limit == 20


def test_invalid_values_normalized(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"text_speed": 9, "log_level": "chatty", "log_limit": 0, "seed": "abc"}))
    data = Settings.load(path).data
    assert data.text_speed == 2
    assert data.log_level == "INFO"
    assert data.log_limit == DEFAULT_LOG_LIMIT
    assert data.seed is None


def test_unparsable_file_falls_back(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    s = Settings.load(path)
    assert s.data == SettingsData()
    assert "SettingsParseFailedUsingDefaults" in capsys.readouterr().out


def test_update_notifies_and_sets_log_level(tmp_path, monkeypatch):
    monkeypatch.setattr(logger, "threshold", logger.threshold)
    s = Settings.load(tmp_path / "settings.json")
    seen = []
    s.on_change(lambda d: seen.append(d.log_level))
    s.update(log_level="error")
    assert seen == ["ERROR"]
    assert not logger.enabled("WARN")
    s.update(debug=True)
    assert logger.enabled("DEBUG")
