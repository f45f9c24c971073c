import pytest

from shared.config import ElfPeekConfig


def test_defaults_when_explicit_path_absent_is_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        ElfPeekConfig.load(tmp_path / "missing.toml")


def test_load_sections(tmp_path):
    path = tmp_path / "c.toml"
    path.write_text(
        '[global]\nlog_level = "DEBUG"\nlog_json = true\nunknown = 1\n'
        '[readelf]\noutput_format = "json"\n',
        encoding="utf-8",
    )
    config = ElfPeekConfig.load(path)
    assert config.global_settings.log_level == "DEBUG"
    assert config.global_settings.log_json is True
    assert config.readelf.output_format == "json"


def test_missing_keys_fall_back_to_defaults(tmp_path):
    path = tmp_path / "c.toml"
    path.write_text("", encoding="utf-8")
    config = ElfPeekConfig.load(path)
    assert config == ElfPeekConfig()


def test_environment_variable(tmp_path, monkeypatch):
    path = tmp_path / "env.toml"
    path.write_text('[global]\nlog_level = "ERROR"\n', encoding="utf-8")
    monkeypatch.setenv("ELFPEEK_CONFIG", str(path))
    assert ElfPeekConfig.load().global_settings.log_level == "ERROR"


def test_environment_variable_pointing_nowhere(tmp_path, monkeypatch):
    monkeypatch.setenv("ELFPEEK_CONFIG", str(tmp_path / "gone.toml"))
    with pytest.raises(FileNotFoundError):
        ElfPeekConfig.load()


def test_rejects_unknown_output_format(tmp_path):
    path = tmp_path / "c.toml"
    path.write_text('[readelf]\noutput_format = "yaml"\n', encoding="utf-8")
    with pytest.raises(ValueError, match="yaml"):
        ElfPeekConfig.load(path)


def test_invalid_toml(tmp_path):
    path = tmp_path / "c.toml"
    path.write_text("[global\n", encoding="utf-8")
    with pytest.raises(ValueError):
        ElfPeekConfig.load(path)


def test_header_size_is_not_configurable(tmp_path):
    path = tmp_path / "c.toml"
    path.write_text("[readelf]\nheader_size = 16\n[global]\nversion = \"9\"\n", encoding="utf-8")
    config = ElfPeekConfig.load(path)
    assert config == ElfPeekConfig()
    assert not hasattr(config.readelf, "header_size")
    assert not hasattr(config.global_settings, "version")
