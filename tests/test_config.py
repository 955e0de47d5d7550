"""Tests for runtime settings and the command line."""

from pathlib import Path

import pytest

from neo_snake.app import build_parser, resolve_settings
from neo_snake.config import DEFAULT_DATA_FILE, load_settings
from neo_snake.errors import ConfigError


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self):
        settings = load_settings({})
        assert settings.data_file == DEFAULT_DATA_FILE
        assert settings.theme == "GREEN"
        assert settings.sound is True
        assert settings.log_level == "WARNING"
        assert settings.debug is False

    def test_reads_environment(self, tmp_path):
        settings = load_settings({
            "NEO_SNAKE_DATA_FILE": str(tmp_path / "s.json"),
            "NEO_SNAKE_THEME": "purple",
            "NEO_SNAKE_SOUND": "off",
            "NEO_SNAKE_LOG_LEVEL": "debug",
        })
        assert settings.data_file == tmp_path / "s.json"
        assert settings.theme == "PURPLE"
        assert settings.sound is False
        assert settings.log_level == "DEBUG"

    def test_unknown_theme(self):
        with pytest.raises(ConfigError, match="NEO_SNAKE_THEME"):
            load_settings({"NEO_SNAKE_THEME": "PINK"})

    def test_bad_sound_flag(self):
        with pytest.raises(ConfigError, match="NEO_SNAKE_SOUND"):
            load_settings({"NEO_SNAKE_SOUND": "maybe"})

    def test_bad_log_level(self):
        with pytest.raises(ConfigError, match="NEO_SNAKE_LOG_LEVEL"):
            load_settings({"NEO_SNAKE_LOG_LEVEL": "LOUD"})


class TestCommandLine:
    """Tests for argument parsing and merging over the environment."""

    def test_arguments_override_environment(self, tmp_path):
        parser = build_parser()
        args = parser.parse_args([
            "--theme", "blue", "--no-sound", "--debug",
            "--data-file", str(tmp_path / "x.json"), "--log-level", "info",
        ])
        settings = resolve_settings(args, parser, environ={"NEO_SNAKE_THEME": "ORANGE"})
        assert settings.theme == "BLUE"
        assert settings.sound is False
        assert settings.debug is True
        assert settings.data_file == Path(tmp_path / "x.json")
        assert settings.log_level == "INFO"

    def test_environment_used_without_arguments(self):
        parser = build_parser()
        settings = resolve_settings(parser.parse_args([]), parser, environ={"NEO_SNAKE_THEME": "ORANGE"})
        assert settings.theme == "ORANGE"
        assert settings.sound is True

    def test_unknown_theme_argument_exits(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--theme", "pink"])

    def test_bad_environment_exits(self):
        parser = build_parser()
        with pytest.raises(SystemExit):
            resolve_settings(parser.parse_args([]), parser, environ={"NEO_SNAKE_SOUND": "?"})
