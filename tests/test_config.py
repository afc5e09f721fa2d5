"""Tests for configuration loading and validation."""

import pytest

from sendtoai.config import DEFAULTS, Config, load_config, validate_overrides
from sendtoai.errors import ConfigurationError


class TestDefaults:
    """Test default values."""

    def test_defaults(self):
        assert DEFAULTS.ai_processes == ("claude", "codex", "opencode")
        assert DEFAULTS.prefer_session is True
        assert DEFAULTS.fallback_clipboard is True
        assert DEFAULTS.path_style == "git_relative"
        assert DEFAULTS.path_style_fallback == "filename_only"
        assert DEFAULTS.max_selection_lines == 10000
        assert DEFAULTS.warn_selection_lines == 5000

    def test_config_is_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULTS.prefer_session = False  # type: ignore[misc]


class TestLoadConfig:
    """Test merging of defaults, file and overrides."""

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(path=tmp_path / "absent.toml") == Config()

    def test_overrides_merge_over_defaults(self, tmp_path):
        config = load_config({"ai_processes": ["aider"], "prefer_session": False}, path=tmp_path / "absent.toml")
        assert config.ai_processes == ("aider",)
        assert config.prefer_session is False
        assert config.path_style == "git_relative"

    def test_reads_toml_file(self, tmp_path):
        path = tmp_path / "sendtoai.toml"
        path.write_text('path_style = "absolute"\nmax_selection_lines = 200\nwarn_selection_lines = 100\n')
        config = load_config(path=path)
        assert config.path_style == "absolute"
        assert config.max_selection_lines == 200

    def test_reads_sendtoai_table(self, tmp_path):
        path = tmp_path / "sendtoai.toml"
        path.write_text('[sendtoai]\nai_processes = ["claude", "gemini"]\n')
        assert load_config(path=path).ai_processes == ("claude", "gemini")

    def test_explicit_overrides_win_over_file(self, tmp_path):
        path = tmp_path / "sendtoai.toml"
        path.write_text("fallback_clipboard = false\n")
        assert load_config({"fallback_clipboard": True}, path=path).fallback_clipboard is True

    def test_finds_file_in_parent_directory(self, tmp_path, monkeypatch):
        (tmp_path / "sendtoai.toml").write_text('path_style = "cwd_relative"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        assert load_config().path_style == "cwd_relative"

    def test_finds_user_config(self, tmp_path, monkeypatch):
        user_dir = tmp_path / "xdg" / "sendtoai"
        user_dir.mkdir(parents=True)
        (user_dir / "config.toml").write_text("prefer_session = false\n")
        work = tmp_path / "work"
        work.mkdir()
        monkeypatch.chdir(work)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        assert load_config().prefer_session is False

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "sendtoai.toml"
        path.write_text("path_style = \n")
        with pytest.raises(ConfigurationError, match="not valid TOML"):
            load_config(path=path)

    def test_warn_above_max_rejected(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config({"max_selection_lines": 10, "warn_selection_lines": 20}, path=tmp_path / "absent.toml")
        assert exc_info.value.field == "warn_selection_lines"
        assert exc_info.value.kind == "configuration_invalid"

    def test_lowered_max_clamps_default_warn(self, tmp_path):
        config = load_config({"max_selection_lines": 1000}, path=tmp_path / "absent.toml")
        assert config.max_selection_lines == 1000
        assert config.warn_selection_lines == 1000

    def test_lowered_max_in_file_clamps_default_warn(self, tmp_path):
        path = tmp_path / "sendtoai.toml"
        path.write_text("max_selection_lines = 200\n")
        assert load_config(path=path).warn_selection_lines == 200

    def test_raised_max_keeps_default_warn(self, tmp_path):
        config = load_config({"max_selection_lines": 20000}, path=tmp_path / "absent.toml")
        assert config.warn_selection_lines == 5000


class TestValidation:
    """Test per-field validation."""

    def test_valid_overrides_pass(self):
        validate_overrides(
            {
                "ai_processes": ["claude"],
                "prefer_session": False,
                "fallback_clipboard": True,
                "path_style": "cwd_relative",
                "path_style_fallback": "absolute",
                "max_selection_lines": 10,
                "warn_selection_lines": 0,
                "command_timeout": 0.5,
            }
        )

    def test_invalid_path_style(self):
        with pytest.raises(ConfigurationError, match="Must be one of: git_relative, cwd_relative, absolute"):
            validate_overrides({"path_style": "relative"})

    def test_invalid_path_style_fallback(self):
        with pytest.raises(ConfigurationError, match="filename_only, cwd_relative, absolute") as exc_info:
            validate_overrides({"path_style_fallback": "git_relative"})
        assert exc_info.value.field == "path_style_fallback"

    def test_empty_ai_processes(self):
        with pytest.raises(ConfigurationError, match="cannot be empty"):
            validate_overrides({"ai_processes": []})

    def test_ai_processes_must_be_list(self):
        with pytest.raises(ConfigurationError, match="must be a list"):
            validate_overrides({"ai_processes": "claude"})

    def test_ai_processes_entries_must_be_strings(self):
        with pytest.raises(ConfigurationError) as exc_info:
            validate_overrides({"ai_processes": ["claude", 3]})
        assert exc_info.value.field == "ai_processes[1]"

    def test_ai_processes_entries_must_be_non_empty(self):
        with pytest.raises(ConfigurationError, match="must not be empty"):
            validate_overrides({"ai_processes": [" "]})

    @pytest.mark.parametrize("value", [0, -5, 1.5, True, "10"])
    def test_max_selection_lines_positive_int(self, value):
        with pytest.raises(ConfigurationError, match="positive number"):
            validate_overrides({"max_selection_lines": value})

    @pytest.mark.parametrize("value", [-1, "5", None])
    def test_warn_selection_lines_non_negative(self, value):
        with pytest.raises(ConfigurationError, match="non-negative"):
            validate_overrides({"warn_selection_lines": value})

    def test_boolean_fields(self):
        with pytest.raises(ConfigurationError, match="true or false"):
            validate_overrides({"prefer_session": "yes"})

    def test_command_timeout_positive(self):
        with pytest.raises(ConfigurationError, match="positive number of seconds"):
            validate_overrides({"command_timeout": 0})

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="unknown option"):
            validate_overrides({"cache_pane_detection": True})
