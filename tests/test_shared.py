import json
import logging

from shared.console import ToolConsole
from shared.logger import ToolLogger


def test_logger_level_and_name():
    ToolLogger("unit", log_level="debug", console_output=False)
    underlying = logging.getLogger("elfpeek.unit")
    assert underlying.level == logging.DEBUG
    assert underlying.handlers == []
    assert underlying.propagate is False


def test_reinstantiation_does_not_duplicate_handlers():
    ToolLogger("dup")
    ToolLogger("dup")
    assert len(logging.getLogger("elfpeek.dup").handlers) == 1


def _flush(name):
    for handler in logging.getLogger(name).handlers:
        handler.flush()


def test_json_log_file(tmp_path):
    log_file = tmp_path / "tool.log"
    log = ToolLogger("jsonfile", log_level="ERROR", log_file=log_file, json_logs=True, console_output=False)
    with log.operation("read_header"):
        log.error("cannot decode %s", "a.out", path="a.out")
    log.debug("hidden")
    _flush("elfpeek.jsonfile")
    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    entry = json.loads(lines[0])
    assert entry["level"] == "ERROR"
    assert entry["message"] == "cannot decode a.out"
    assert entry["tool_name"] == "jsonfile"
    assert entry["operation"] == "read_header"
    assert entry["extra"] == {"path": "a.out"}


def test_operation_scope_is_restored(tmp_path):
    log_file = tmp_path / "scope.log"
    log = ToolLogger("scope", log_level="DEBUG", log_file=log_file, json_logs=True, console_output=False)
    with log.operation("outer"):
        with log.operation("inner"):
            log.debug("a")
        log.debug("b")
    log.debug("c")
    _flush("elfpeek.scope")
    entries = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert [e.get("operation") for e in entries] == ["inner", "outer", None]


def test_timed_logs_start_and_completion(tmp_path):
    log_file = tmp_path / "timed.log"
    log = ToolLogger("timed", log_level="DEBUG", log_file=log_file, json_logs=True, console_output=False)
    with log.timed("decode"):
        pass
    _flush("elfpeek.timed")
    messages = [json.loads(line)["message"] for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert messages[0] == "Started: decode"
    assert messages[1].startswith("Completed: decode (")


def test_plain_log_file(tmp_path):
    log_file = tmp_path / "nested" / "tool.log"
    log = ToolLogger("plainfile", log_file=log_file, console_output=False)
    log.error("careful")
    _flush("elfpeek.plainfile")
    assert "ERROR    | elfpeek.plainfile | careful" in log_file.read_text(encoding="utf-8")


def test_console_writes_escaped_messages_to_stderr(capsys):
    con = ToolConsole()
    con.error("Cannot read /tmp/[x]: denied")
    con.success("Report saved")
    con.warning("File class is ELF32")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "ERROR: Cannot read /tmp/[x]: denied" in captured.err
    assert "SUCCESS: Report saved" in captured.err
    assert "WARNING: File class is ELF32" in captured.err
