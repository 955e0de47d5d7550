"""Tests for the JSON high score store."""

import json
import os
import tempfile

import pytest

from neo_snake.config import HIGHSCORE_KEY
from neo_snake import storage
from neo_snake.storage import HighScoreStore


class TestLoad:
    """Tests for HighScoreStore.load fallbacks."""

    def test_missing_file_is_zero(self, tmp_path):
        assert HighScoreStore(tmp_path / "scores.json").load() == 0

    def test_reads_stored_value(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text(json.dumps({HIGHSCORE_KEY: 340}), encoding="utf-8")
        assert HighScoreStore(path).load() == 340

    def test_numeric_string_is_accepted(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text(json.dumps({HIGHSCORE_KEY: "90"}), encoding="utf-8")
        assert HighScoreStore(path).load() == 90

    def test_garbage_file_is_zero(self, tmp_path, caplog):
        path = tmp_path / "scores.json"
        path.write_text("{not json", encoding="utf-8")
        assert HighScoreStore(path).load() == 0
        assert "Ignoring unreadable score file" in caplog.text

    def test_non_object_is_zero(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert HighScoreStore(path).load() == 0

    def test_unparsable_value_is_zero(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text(json.dumps({HIGHSCORE_KEY: "lots"}), encoding="utf-8")
        assert HighScoreStore(path).load() == 0

    def test_negative_value_is_zero(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text(json.dumps({HIGHSCORE_KEY: -40}), encoding="utf-8")
        assert HighScoreStore(path).load() == 0

    @pytest.mark.parametrize("literal", ["Infinity", "-Infinity", "1e400", "NaN"])
    def test_non_finite_value_is_zero(self, tmp_path, caplog, literal):
        path = tmp_path / "scores.json"
        path.write_text('{"' + HIGHSCORE_KEY + '": ' + literal + "}", encoding="utf-8")
        assert HighScoreStore(path).load() == 0
        assert "Ignoring malformed high score" in caplog.text

    def test_missing_key_is_zero(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text(json.dumps({"other": 5}), encoding="utf-8")
        assert HighScoreStore(path).load() == 0


class TestSave:
    """Tests for HighScoreStore.save."""

    def test_save_then_load(self, tmp_path):
        store = HighScoreStore(tmp_path / "scores.json")
        assert store.save(250) is True
        assert store.load() == 250

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "scores.json"
        HighScoreStore(path).save(10)
        assert json.loads(path.read_text(encoding="utf-8")) == {HIGHSCORE_KEY: 10}

    def test_keeps_other_keys(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text(json.dumps({"theme": "BLUE", HIGHSCORE_KEY: 10}), encoding="utf-8")
        HighScoreStore(path).save(60)
        assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "BLUE", HIGHSCORE_KEY: 60}

    def test_overwrites_garbage(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text("garbage", encoding="utf-8")
        HighScoreStore(path).save(30)
        assert HighScoreStore(path).load() == 30

    def test_write_failure_is_logged_not_raised(self, tmp_path, caplog):
        target = tmp_path / "scores.json"
        target.mkdir()
        assert HighScoreStore(target).save(30) is False
        assert "Could not save high score" in caplog.text
        assert list(tmp_path.iterdir()) == [target]

    def test_custom_key(self, tmp_path):
        path = tmp_path / "scores.json"
        HighScoreStore(path, key="best").save(7)
        assert json.loads(path.read_text(encoding="utf-8")) == {"best": 7}

    def test_temp_descriptor_closed_when_open_fails(self, tmp_path, monkeypatch):
        created = []
        real_mkstemp = tempfile.mkstemp

        def recording_mkstemp(**kwargs):
            fd, name = real_mkstemp(**kwargs)
            created.append((fd, name))
            return fd, name

        def failing_fdopen(*args, **kwargs):
            raise OSError("no file objects left")

        monkeypatch.setattr(storage.tempfile, "mkstemp", recording_mkstemp)
        monkeypatch.setattr(storage.os, "fdopen", failing_fdopen)

        assert HighScoreStore(tmp_path / "scores.json").save(40) is False
        (fd, name), = created
        with pytest.raises(OSError):
            os.fstat(fd)
        assert not os.path.exists(name)
