import logging

import pytest

from elfpeek.core.engine import HeaderEngine
from elfpeek.core.errors import FileUnavailable, NotAnElfFile, TruncatedInput
from shared.logger import ToolLogger


@pytest.fixture
def engine():
    return HeaderEngine(logger=ToolLogger("test.engine", log_level="DEBUG", console_output=False))


def test_inspect_file(engine, elf_file):
    header = engine.inspect(elf_file)
    assert header.e_type.display == "EXEC (Executable file)"
    assert header.e_shoff == 8400


def test_reads_only_the_header(engine, elf_file):
    assert len(engine.read_header_bytes(elf_file)) == 64


def test_short_file_returns_what_is_there(engine, tmp_path):
    path = tmp_path / "tiny"
    path.write_bytes(b"\x7fELF")
    assert engine.read_header_bytes(path) == b"\x7fELF"
    with pytest.raises(TruncatedInput):
        engine.inspect(path)


def test_missing_file_wraps_os_error(engine, tmp_path):
    missing = tmp_path / "missing.elf"
    with pytest.raises(FileUnavailable) as excinfo:
        engine.inspect(missing)
    assert isinstance(excinfo.value.os_error, FileNotFoundError)
    assert excinfo.value.__cause__ is excinfo.value.os_error
    assert excinfo.value.path == str(missing)
    assert str(missing) in str(excinfo.value)


def test_bad_magic_propagates(engine, tmp_path):
    path = tmp_path / "text"
    path.write_bytes(b"hello world\n" * 10)
    with pytest.raises(NotAnElfFile):
        engine.inspect(path)


def test_decode_is_logged(engine, elf_file, caplog):
    engine_logger = logging.getLogger("elfpeek.test.engine")
    engine_logger.propagate = True
    try:
        with caplog.at_level(logging.DEBUG, logger="elfpeek.test.engine"):
            engine.inspect(elf_file)
    finally:
        engine_logger.propagate = False
    messages = [r.getMessage() for r in caplog.records]
    assert any("Read 64 of 64 header bytes" in m for m in messages)
    assert any("EXEC (Executable file)" in m for m in messages)
    assert all(r.operation == "read_header" for r in caplog.records)


def test_default_engine_construction(elf_file):
    assert HeaderEngine().inspect(elf_file).e_phnum == 3
