"""Unit tests for the logger factory and document loaders."""

import json
import logging

import pytest
from python_log_indenter import IndentedLoggerAdapter

from prepare_swagger import common


class TestLogger:
    def test_returns_same_instance(self):
        first = common.logger(level="INFO", reset=True)
        assert isinstance(first, IndentedLoggerAdapter)
        assert common.logger() is first

    def test_reconfigures_on_change(self):
        first = common.logger(level="INFO", reset=True)
        second = common.logger(level="DEBUG")
        assert second is not first
        assert second.logger.level == logging.DEBUG

    def test_structured_file_output(self, tmp_path):
        log_file = tmp_path / "run.log"
        log = common.logger(level="INFO", filename=str(log_file), reset=True)
        log.info("child started")
        for handler in log.logger.handlers:
            handler.flush()
        record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[0])
        assert record["level"] == "INFO"
        assert "child started" in record["message"]

    def test_color_formatter_without_colors(self):
        formatter = common.ColorFormatter(use_colors=False)
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
        output = formatter.format(record)
        assert output.endswith(" - ERROR - boom")
        assert "\x1b[" not in output

    def test_color_formatter_with_colors(self):
        formatter = common.ColorFormatter(use_colors=True)
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
        output = formatter.format(record)
        assert output.startswith(common.ColorFormatter.red)
        assert output.endswith(common.ColorFormatter.reset)

    def test_simple_formatter(self):
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
        assert common.SimpleFormatter().format(record) == "WARNING: careful"


class TestLocate:
    def test_imports_attribute(self):
        import os.path

        assert common.locate("os.path.join") is os.path.join

    def test_requires_module(self):
        with pytest.raises(ImportError):
            common.locate("join")


class TestLoadDocument:
    def test_yaml(self, tmp_path):
        path = tmp_path / "a.yml"
        path.write_text("a: 1\n", encoding="utf-8")
        assert common.load_document(str(path)) == {"a": 1}

    def test_json_with_comments(self, tmp_path):
        path = tmp_path / "a.json"
        path.write_text('{"a": 1 // one\n}', encoding="utf-8")
        assert common.load_document(str(path)) == {"a": 1}

    def test_expand_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SCHEMA_DIR", "/srv/schemas")
        monkeypatch.delenv("UNSET_VAR_FOR_TEST", raising=False)
        path = tmp_path / "a.yaml"
        path.write_text("dir: ${SCHEMA_DIR}\nother: ${UNSET_VAR_FOR_TEST:-none}\n", encoding="utf-8")
        assert common.load_document(str(path), expand_env=True) == {"dir": "/srv/schemas", "other": "none"}

    def test_unknown_extension(self, tmp_path):
        with pytest.raises(ValueError):
            common.load_document(str(tmp_path / "a.ini"))
