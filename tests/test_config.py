"""Tests for urlpick.config"""
import pytest

from urlpick.config import Config


class TestConfig:
    def test_defaults(self):
        c = Config()
        assert c.debounce_ms == 200
        assert c.debounce_interval == pytest.approx(0.2)
        assert c.quit_char == "q"
        assert c.cancel_values == ("Cancel", "Exit")
        assert c.log_file is None
        assert c.log_level == "WARNING"

    def test_from_empty_env(self):
        assert Config.from_env({}) == Config()

    def test_from_env(self):
        c = Config.from_env({
            "URLPICK_DEBOUNCE_MS": "350",
            "URLPICK_QUIT_CHAR": "x",
            "URLPICK_LOG_FILE": "/tmp/urlpick.log",
            "URLPICK_LOG_LEVEL": "debug",
        })
        assert c.debounce_ms == 350
        assert c.quit_char == "x"
        assert c.log_file == "/tmp/urlpick.log"
        assert c.log_level == "DEBUG"

    def test_reads_process_env(self, monkeypatch):
        monkeypatch.setenv("URLPICK_DEBOUNCE_MS", "50")
        assert Config.from_env().debounce_ms == 50

    def test_bad_debounce_env(self):
        with pytest.raises(ValueError, match="URLPICK_DEBOUNCE_MS"):
            Config.from_env({"URLPICK_DEBOUNCE_MS": "soon"})

    def test_non_positive_debounce(self):
        with pytest.raises(ValueError):
            Config(debounce_ms=0)

    def test_quit_char_must_be_single(self):
        with pytest.raises(ValueError):
            Config(quit_char="qq")

    def test_unknown_log_level(self):
        with pytest.raises(ValueError):
            Config(log_level="LOUD")

    def test_replace_skips_none(self):
        c = Config().replace(debounce_ms=None, quit_char="z")
        assert c.debounce_ms == 200
        assert c.quit_char == "z"
