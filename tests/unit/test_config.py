"""Unit tests for menu configuration."""

import pytest
from singly_linked_list.core.config import MenuConfig, load_config
from singly_linked_list.core.errors import ConfigError


def test_defaults():
    cfg = MenuConfig()
    assert cfg.separator == "-" * 41
    assert cfg.title == "Linked List Manager"
    assert cfg.log_level == "WARNING"


def test_log_level_is_normalised():
    assert MenuConfig(log_level="debug").log_level == "DEBUG"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"separator_char": "=="},
        {"separator_char": ""},
        {"separator_width": -1},
        {"separator_width": "10"},
        {"separator_width": True},
        {"title": 3},
        {"log_level": "chatty"},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ConfigError):
        MenuConfig(**kwargs)


def test_with_overrides_skips_none():
    cfg = MenuConfig(separator_width=10).with_overrides(separator_width=None, log_level="info")
    assert cfg.separator_width == 10
    assert cfg.log_level == "INFO"


def test_load_menu_table(tmp_path):
    path = tmp_path / "menu.toml"
    path.write_text('[menu]\nseparator_char = "="\nseparator_width = 5\ntitle = "Lists"\n')

    cfg = load_config(path)
    assert cfg.separator == "====="
    assert cfg.title == "Lists"


def test_load_top_level_keys(tmp_path):
    path = tmp_path / "menu.toml"
    path.write_text('log_level = "DEBUG"\n')
    assert load_config(path).log_level == "DEBUG"


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.toml")


def test_load_unknown_key(tmp_path):
    path = tmp_path / "menu.toml"
    path.write_text("colour = 1\n")
    with pytest.raises(ConfigError, match="colour"):
        load_config(path)


def test_load_bad_toml(tmp_path):
    path = tmp_path / "menu.toml"
    path.write_text("separator_width = \n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_non_utf8_file(tmp_path):
    path = tmp_path / "menu.toml"
    path.write_bytes(b'title = "\xff"\n')
    with pytest.raises(ConfigError, match="UTF-8"):
        load_config(path)


@pytest.mark.parametrize(
    "data",
    [
        {"menu": {"title": "x"}, "bogus": 1},
        {"menu": {"title": "x"}, "separator_width": 3},
    ],
)
def test_keys_outside_menu_table_rejected(data):
    with pytest.raises(ConfigError, match="outside"):
        MenuConfig.from_dict(data)


def test_menu_table_must_be_a_table():
    with pytest.raises(ConfigError):
        MenuConfig.from_dict({"menu": 3})
