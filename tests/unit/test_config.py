# tests/unit/test_config.py

import pytest

from parser_utils.core.config import NormalizerConfig, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host environment overrides out of the tests."""
    monkeypatch.delenv("PARSER_UTILS_DATA_PROPS", raising=False)
    monkeypatch.delenv("PARSER_UTILS_LOG_LEVEL", raising=False)


class TestNormalizerConfig:
    """Test NormalizerConfig validation and environment overrides."""

    def test_defaults(self):
        config = NormalizerConfig()
        assert config.data_props == ["locals", "data"]
        assert config.flatten_key == "data"
        assert config.log_level == "INFO"
        assert config.json_indent == 2

    def test_defaults_not_shared(self):
        first = NormalizerConfig()
        first.data_props.append("meta")
        assert NormalizerConfig().data_props == ["locals", "data"]

    def test_empty_data_props_rejected(self):
        with pytest.raises(ValueError, match="at least one property"):
            NormalizerConfig(data_props=[])

    def test_canonical_data_props_rejected(self):
        with pytest.raises(ValueError, match="canonical fields"):
            NormalizerConfig(data_props=["locals", "content"])

    def test_log_level_normalized(self):
        assert NormalizerConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            NormalizerConfig(log_level="chatty")

    def test_negative_indent_rejected(self):
        with pytest.raises(ValueError):
            NormalizerConfig(json_indent=-1)

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PARSER_UTILS_DATA_PROPS", "locals, data ,meta,")
        monkeypatch.setenv("PARSER_UTILS_LOG_LEVEL", "warning")

        config = NormalizerConfig(data_props=["data"], log_level="INFO")
        assert config.data_props == ["locals", "data", "meta"]
        assert config.log_level == "WARNING"


class TestLoadConfig:
    """Test YAML configuration loading."""

    def test_load_from_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "data_props:\n  - locals\n  - front\n  - data\n"
            "flatten_key: front\n"
            "json_indent: 4\n",
            encoding="utf-8",
        )

        config = load_config(config_file)
        assert config.data_props == ["locals", "front", "data"]
        assert config.flatten_key == "front"
        assert config.json_indent == 4

    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.yaml")
        assert config == NormalizerConfig()

    def test_empty_file_uses_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("", encoding="utf-8")
        assert load_config(config_file) == NormalizerConfig()

    def test_malformed_yaml_uses_defaults(self, tmp_path, caplog):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("data_props: [locals\n", encoding="utf-8")

        config = load_config(config_file)
        assert config == NormalizerConfig()
        assert "Failed to load config file" in caplog.text

    def test_non_mapping_yaml_uses_defaults(self, tmp_path, caplog):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- locals\n- data\n", encoding="utf-8")

        config = load_config(config_file)
        assert config == NormalizerConfig()
        assert "expected a mapping" in caplog.text

    def test_env_wins_over_file(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("log_level: ERROR\n", encoding="utf-8")
        monkeypatch.setenv("PARSER_UTILS_LOG_LEVEL", "DEBUG")

        assert load_config(config_file).log_level == "DEBUG"

    def test_invalid_values_raise(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("data_props: []\n", encoding="utf-8")

        with pytest.raises(ValueError):
            load_config(config_file)


if __name__ == "__main__":
    pytest.main([__file__])
