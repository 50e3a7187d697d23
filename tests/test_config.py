"""Tests for streamstats.config."""

from streamstats.config import StreamStatsConfig, _level_or, _toml_table, load_config


# ---------------------------------------------------------------------------
# _toml_table
# ---------------------------------------------------------------------------


def test_toml_table_nested(tmp_path):
    toml_file = tmp_path / "test.toml"
    toml_file.write_text("[tool.streamstats]\nlog_level = 'INFO'\n", encoding="utf-8")
    assert _toml_table(toml_file, "tool", "streamstats") == {"log_level": "INFO"}


def test_toml_table_top_level(tmp_path):
    toml_file = tmp_path / "test.toml"
    toml_file.write_text("log_level = 'INFO'\n", encoding="utf-8")
    assert _toml_table(toml_file) == {"log_level": "INFO"}


def test_toml_table_missing_file(tmp_path):
    assert _toml_table(tmp_path / "nonexistent.toml") == {}


def test_toml_table_missing_key(tmp_path):
    toml_file = tmp_path / "test.toml"
    toml_file.write_text("[tool.other]\nx = 1\n", encoding="utf-8")
    assert _toml_table(toml_file, "tool", "streamstats") == {}


def test_toml_table_key_not_a_table(tmp_path):
    toml_file = tmp_path / "test.toml"
    toml_file.write_text("tool = 3\n", encoding="utf-8")
    assert _toml_table(toml_file, "tool", "streamstats") == {}


def test_toml_table_invalid_utf8(tmp_path):
    bad_file = tmp_path / "bad.toml"
    bad_file.write_bytes(b"\x80\x81\x82")
    assert _toml_table(bad_file) == {}


def test_toml_table_invalid_toml(tmp_path):
    bad_file = tmp_path / "bad.toml"
    bad_file.write_text("log_level = = 3\n", encoding="utf-8")
    assert _toml_table(bad_file) == {}


# ---------------------------------------------------------------------------
# _level_or
# ---------------------------------------------------------------------------


def test_level_or_normalises_case():
    assert _level_or("debug", "WARNING") == "DEBUG"


def test_level_or_rejects_unknown_name():
    assert _level_or("chatty", "WARNING") == "WARNING"


def test_level_or_rejects_non_string():
    assert _level_or(10, "INFO") == "INFO"
    assert _level_or(None, "INFO") == "INFO"


# ---------------------------------------------------------------------------
# load_config
# ---------------------------------------------------------------------------


def test_defaults():
    assert StreamStatsConfig().log_level == "WARNING"


def test_load_config_no_files(tmp_path):
    assert load_config(tmp_path) == StreamStatsConfig()


def test_load_config_from_pyproject(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        "[tool.streamstats]\nlog_level = 'info'\n", encoding="utf-8"
    )
    assert load_config(tmp_path).log_level == "INFO"


def test_local_file_overrides_pyproject(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        "[tool.streamstats]\nlog_level = 'INFO'\n", encoding="utf-8"
    )
    (tmp_path / ".streamstats.toml").write_text("log_level = 'ERROR'\n", encoding="utf-8")
    assert load_config(tmp_path).log_level == "ERROR"


def test_invalid_local_value_keeps_pyproject_value(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        "[tool.streamstats]\nlog_level = 'INFO'\n", encoding="utf-8"
    )
    (tmp_path / ".streamstats.toml").write_text("log_level = -1\n", encoding="utf-8")
    assert load_config(tmp_path).log_level == "INFO"


def test_report_settings_are_not_configurable(tmp_path):
    (tmp_path / ".streamstats.toml").write_text(
        "percentiles = [50]\nprecision = -1\n", encoding="utf-8"
    )
    cfg = load_config(tmp_path)
    assert cfg == StreamStatsConfig()
    assert not hasattr(cfg, "precision")
    assert not hasattr(cfg, "percentiles")


def test_load_config_defaults_to_cwd(tmp_path, monkeypatch):
    (tmp_path / ".streamstats.toml").write_text("log_level = 'debug'\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert load_config().log_level == "DEBUG"
