"""Tests for YAML settings loading and merging."""

import yaml

from config.settings import SettingsManager


def test_defaults_without_user_file(tmp_path):
    settings = SettingsManager(user_config_path=tmp_path / "missing.yaml").load()
    assert settings.batch.size == 10
    assert settings.source.on_malformed == "abort"
    assert settings.source.skip_entries == 0
    assert settings.export.font_family == "LiberationMono"


def test_user_file_overrides_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.safe_dump({
            "source": {"skip_entries": 2287, "on_malformed": "skip"},
            "batch": {"size": "25"},
            "session": {"quiz": True},
        }),
        encoding="utf-8",
    )
    settings = SettingsManager(user_config_path=path).load()

    assert settings.source.skip_entries == 2287
    assert settings.source.on_malformed == "skip"
    assert settings.batch.size == 25
    assert settings.session.quiz is True
    assert settings.batch.number == 0


def test_bad_values_and_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("batch:\n  size: lots\n  colour: red\n", encoding="utf-8")
    settings = SettingsManager(user_config_path=path).load()
    assert settings.batch.size == 10


def test_broken_yaml_is_ignored(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("batch: [unclosed\n", encoding="utf-8")
    settings = SettingsManager(user_config_path=path).load()
    assert settings.batch.size == 10


def test_singleton(tmp_path):
    first = SettingsManager(user_config_path=tmp_path / "a.yaml")
    second = SettingsManager(user_config_path=tmp_path / "b.yaml")
    assert first is second
    assert second.user_config_path == tmp_path / "a.yaml"


def test_save_round_trip(tmp_path):
    path = tmp_path / "nested" / "config.yaml"
    mgr = SettingsManager(user_config_path=path)
    mgr.load()
    mgr.settings.batch.repeat = 3
    mgr.save()

    SettingsManager.reset_instance()
    assert SettingsManager(user_config_path=path).load().batch.repeat == 3
