"""
Tests for BracketCalculator/config_manager.py
"""

import json

from BracketCalculator import config_manager


def test_missing_file_gives_defaults():
    assert config_manager.load_setting_value("all") == config_manager.DEFAULTS
    assert config_manager.load_setting_value("decimal_places") == 10


def test_unknown_key():
    assert config_manager.load_setting_value("no_such_setting") == 0


def test_partial_file_keeps_defaults(config_dir):
    (config_dir / "config.json").write_text('{"darkmode": true}', encoding="utf-8")
    settings = config_manager.load_setting_value("all")
    assert settings["darkmode"] is True
    assert settings["show_equation"] is False


def test_corrupt_file_gives_defaults(config_dir):
    (config_dir / "config.json").write_text("{not json", encoding="utf-8")
    assert config_manager.load_setting_value("all") == config_manager.DEFAULTS


def test_non_object_file_gives_defaults(config_dir):
    (config_dir / "config.json").write_text("[]", encoding="utf-8")
    assert config_manager.load_setting_value("all") == config_manager.DEFAULTS

    (config_dir / "ui_strings.json").write_text('"Dark mode"', encoding="utf-8")
    assert set(config_manager.load_setting_description("all")) == set(config_manager.DEFAULTS)


def test_save_setting(config_dir):
    settings = config_manager.load_setting_value("all")
    settings["decimal_places"] = 4

    assert config_manager.save_setting(settings) == settings
    assert json.loads((config_dir / "config.json").read_text(encoding="utf-8"))["decimal_places"] == 4
    assert config_manager.load_setting_value("decimal_places") == 4


def test_save_setting_failure(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("BRACKET_CALCULATOR_CONFIG", str(tmp_path / "missing" / "dir"))
    assert config_manager.save_setting({"darkmode": True}) == {}
    assert "Error 5001" in capsys.readouterr().err


def test_descriptions(config_dir):
    (config_dir / "ui_strings.json").write_text('{"darkmode": "Dark mode"}', encoding="utf-8")
    assert config_manager.load_setting_description("darkmode") == "Dark mode"
    assert config_manager.load_setting_description("all") == {"darkmode": "Dark mode"}


def test_missing_descriptions_are_generated():
    descriptions = config_manager.load_setting_description("all")
    assert set(descriptions) == set(config_manager.DEFAULTS)
    assert descriptions["decimal_places"] == "Decimal places"


def test_shipped_files_match():
    with open(config_manager.PACKAGE_DIR / "config.json", encoding="utf-8") as f:
        values = json.load(f)
    with open(config_manager.PACKAGE_DIR / "ui_strings.json", encoding="utf-8") as f:
        descriptions = json.load(f)
    assert set(values) == set(descriptions) == set(config_manager.DEFAULTS)
