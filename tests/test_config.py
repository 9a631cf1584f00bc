"""Tests for configuration loading."""

from pathlib import Path

import pytest

from locscan.config import ScanConfig, load_config
from locscan.exceptions import ConfigurationError, InvalidConfigError


class TestScanConfig:
    def test_defaults(self):
        config = ScanConfig()
        assert config.exclude == ["/spec/"]
        assert config.on_read_error == "skip"
        assert config.encoding == "utf-8"
        assert not config.has_explicit_markers

    def test_invalid_policy(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            ScanConfig(on_read_error="retry")
        assert exc_info.value.key == "on_read_error"

    def test_invalid_format(self):
        with pytest.raises(InvalidConfigError):
            ScanConfig(output_format="xml")

    def test_unknown_encoding(self):
        with pytest.raises(InvalidConfigError, match="encoding"):
            ScanConfig(encoding="no-such-codec")

    def test_exclude_must_be_list(self):
        with pytest.raises(InvalidConfigError):
            ScanConfig(exclude="/spec/")


class TestLoadConfig:
    def test_no_sources(self, tmp_path):
        assert load_config(tmp_path) == ScanConfig()

    def test_project_config_in_root(self, tmp_path):
        (tmp_path / "locscan.toml").write_text(
            'on_read_error = "abort"\nexclude = ["/vendor/"]\n'
        )
        config = load_config(tmp_path)
        assert config.on_read_error == "abort"
        assert config.exclude == ["/vendor/"]

    def test_project_config_ignores_cwd(self, tmp_path, monkeypatch):
        cwd = tmp_path / "cwd"
        cwd.mkdir()
        (cwd / "locscan.toml").write_text('on_read_error = "abort"\n')
        monkeypatch.chdir(cwd)
        root = tmp_path / "root"
        root.mkdir()
        assert load_config(root).on_read_error == "skip"

    def test_global_config(self, tmp_path, isolated_config):
        (isolated_config / ".locscan.toml").write_text('output_format = "json"\n')
        assert load_config(tmp_path).output_format == "json"

    def test_markers_table(self, tmp_path):
        cfg = tmp_path / "custom.toml"
        cfg.write_text('[markers]\nline = "--"\nblock_start = "(*"\nblock_end = "*)"\n')
        config = load_config(tmp_path, config_file=cfg)
        assert config.line_markers == ["--"]
        assert (config.block_start, config.block_end) == ("(*", "*)")

    def test_markers_table_unknown_key(self, tmp_path):
        cfg = tmp_path / "custom.toml"
        cfg.write_text('[markers]\nstart = "/*"\n')
        with pytest.raises(ConfigurationError, match="start"):
            load_config(tmp_path, config_file=cfg)

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path, config_file=tmp_path / "nope.toml")

    def test_malformed_toml(self, tmp_path):
        (tmp_path / "locscan.toml").write_text("this is = = not toml")
        with pytest.raises(ConfigurationError, match="Invalid project config"):
            load_config(tmp_path)

    def test_unknown_key(self, tmp_path):
        (tmp_path / "locscan.toml").write_text("colour = true\n")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config(tmp_path)

    def test_env_vars(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOCSCAN_ON_READ_ERROR", "abort")
        monkeypatch.setenv("LOCSCAN_INCLUDE_HIDDEN", "yes")
        monkeypatch.setenv("LOCSCAN_LANGUAGE", "ruby")
        config = load_config(tmp_path)
        assert config.on_read_error == "abort"
        assert config.include_hidden is True
        assert config.language == "ruby"

    def test_env_bad_bool(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOCSCAN_FOLLOW_SYMLINKS", "maybe")
        with pytest.raises(ConfigurationError, match="LOCSCAN_FOLLOW_SYMLINKS"):
            load_config(tmp_path)

    def test_overrides_win_and_none_is_ignored(self, tmp_path, monkeypatch):
        (tmp_path / "locscan.toml").write_text('on_read_error = "abort"\nlanguage = "c"\n')
        monkeypatch.setenv("LOCSCAN_OUTPUT_FORMAT", "csv")
        config = load_config(tmp_path, on_read_error="skip", language=None, output_format="json")
        assert config.on_read_error == "skip"
        assert config.language == "c"
        assert config.output_format == "json"

    def test_verbose_flags(self, tmp_path):
        assert load_config(tmp_path, verbose=True).verbosity == "verbose"
        assert load_config(tmp_path, quiet=True).verbosity == "quiet"
        assert load_config(tmp_path, verbose=False, quiet=False).verbosity == "normal"

    def test_log_file_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOCSCAN_LOG_FILE", "scan.log")
        assert load_config(tmp_path).log_file == "scan.log"

    def test_log_file_must_be_string(self, tmp_path):
        (tmp_path / "locscan.toml").write_text("log_file = 3\n")
        with pytest.raises(ConfigurationError, match="log_file"):
            load_config(tmp_path)

    def test_root_none(self):
        assert isinstance(load_config(None), ScanConfig)

    def test_accepts_path_strings(self, tmp_path):
        assert load_config(Path(str(tmp_path))) == ScanConfig()
