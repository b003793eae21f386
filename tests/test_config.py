import pytest
from pydantic import ValidationError

from wasteroute.config import Settings


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch, tmp_path):
    monkeypatch.setenv("WASTEROUTE_AVG_SPEED_KMH", "25")
    monkeypatch.setenv("WASTEROUTE_MINUTES_PER_STOP", "10")
    monkeypatch.setenv("WASTEROUTE_DATA_ROOT", str(tmp_path))

    settings = Settings()

    assert settings.avg_speed_kmh == 25.0
    assert settings.minutes_per_stop == 10.0
    assert settings.data_root == tmp_path.resolve()


def test_settings_reject_non_positive_speed(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WASTEROUTE_AVG_SPEED_KMH", "0")
    with pytest.raises(ValidationError):
        Settings()


def test_settings_parse_origins_json_array(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WASTEROUTE_FRONTEND_ALLOWED_ORIGINS", '["http://a.test","http://b.test"]')
    assert Settings().frontend_allowed_origins == ("http://a.test", "http://b.test")


def test_settings_parse_statuses_from_list():
    settings = Settings(closed_report_statuses=["resolved", "rejected", "archived"])
    assert settings.closed_report_statuses == ("resolved", "rejected", "archived")
