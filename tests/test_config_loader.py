import pytest
import yaml

from utils.config_loader import ConfigError, load_config, load_settings


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))


def test_load_config_bad_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("logging: [unclosed\n")
    with pytest.raises(yaml.YAMLError):
        load_config(str(path))


def test_load_settings_from_file(tmp_path):
    path = tmp_path / "validator.yaml"
    path.write_text(
        "logging:\n"
        "  level: DEBUG\n"
        "literal_checker: ipaddress\n"
        "messages:\n"
        "  invalid_subnet: Bad mask\n"
    )

    settings = load_settings(str(path))

    assert settings.logging.level == "DEBUG"
    assert settings.literal_checker == "ipaddress"
    assert settings.message_table()["invalid_subnet"] == "Bad mask"
    assert settings.message_table()["invalid_mac"] == "Invalid MAC address"


def test_load_settings_defaults_without_path(monkeypatch):
    monkeypatch.delenv("ADDRINPUT_CONFIG", raising=False)
    settings = load_settings()
    assert settings.literal_checker == "regex"


def test_load_settings_from_env(monkeypatch, tmp_path):
    path = tmp_path / "env.yaml"
    path.write_text("literal_checker: ipaddress\n")
    monkeypatch.setenv("ADDRINPUT_CONFIG", str(path))

    assert load_settings().literal_checker == "ipaddress"


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_settings(str(path)).logging.file == "validator.log"


@pytest.mark.parametrize(
    "content",
    [
        "literal_checker: native\n",
        "messages:\n  unknown_key: text\n",
        "- just\n- a list\n",
    ],
)
def test_invalid_settings_raise_config_error(tmp_path, content):
    path = tmp_path / "invalid.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError):
        load_settings(str(path))
