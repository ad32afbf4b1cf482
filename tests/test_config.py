# =============================================================================
# Configuration Tests
# =============================================================================

import pytest

from mailrender.config import Config, ConfigError, RenderingConfig, get_xdg_config_home


def test_xdg_config_home(isolated_config_home):
    assert get_xdg_config_home() == isolated_config_home / "mailrender"
    assert Config.config_file_path() == isolated_config_home / "mailrender" / "config.toml"


def test_missing_file_gives_defaults(isolated_config_home):
    config = Config.load()

    assert config.strip_urls is True
    assert config.log_level == "WARNING"
    assert config.rendering == RenderingConfig()
    assert config.rendering.strategies == ["w3m", "markdown"]
    assert config.rendering.columns == 120


def test_save_and_load_round_trip(isolated_config_home):
    config = Config(
        strip_urls=False,
        log_level="DEBUG",
        rendering=RenderingConfig(
            strategies=["inscriptis", "markdown"],
            columns=100,
            w3m_command="/usr/local/bin/w3m",
            w3m_timeout=3.0,
        ),
    )
    config.save()

    assert Config.config_file_path().exists()
    assert Config.load() == config


def test_explicit_path(temp_dir):
    path = temp_dir / "nested" / "custom.toml"
    Config(log_level="INFO").save(path)

    assert path.exists()
    assert Config.load(path).log_level == "INFO"


def test_partial_file_fills_in_defaults(temp_dir):
    path = temp_dir / "config.toml"
    path.write_text('[rendering]\ncolumns = 90\n')

    config = Config.load(path)
    assert config.rendering.columns == 90
    assert config.rendering.strategies == ["w3m", "markdown"]
    assert config.strip_urls is True


def test_invalid_toml(temp_dir):
    path = temp_dir / "config.toml"
    path.write_text("[rendering\ncolumns = ")

    with pytest.raises(ConfigError, match="Invalid config file"):
        Config.load(path)


@pytest.mark.parametrize("body, message", [
    ('[rendering]\nstrategies = []\n', "non-empty"),
    ('[rendering]\nstrategies = ["w3m", "lynx"]\n', "lynx"),
    ('[rendering]\ncolumns = 0\n', "columns"),
    ('[rendering]\nw3m_timeout = -1\n', "w3m_timeout"),
    ('[general]\nlog_level = "LOUD"\n', "LOUD"),
    ('[general]\nlog_level = 10\n', "10"),
    ('general = "oops"\n', r"\[general\] must be a table"),
    ('rendering = 3\n', r"\[rendering\] must be a table"),
    ('[general]\nstrip_urls = "yes"\n', "strip_urls"),
    ('[rendering]\ncolumns = true\n', "columns"),
    ('[rendering]\ncolumns = 80.5\n', "columns"),
    ('[rendering]\nw3m_timeout = true\n', "w3m_timeout"),
    ('[rendering]\nw3m_command = ""\n', "w3m_command"),
])
def test_invalid_values(temp_dir, body, message):
    path = temp_dir / "config.toml"
    path.write_text(body)

    with pytest.raises(ConfigError, match=message):
        Config.load(path)


def test_missing_explicit_path_is_an_error(temp_dir):
    with pytest.raises(ConfigError, match="not found"):
        Config.load(temp_dir / "nope.toml")


def test_unreadable_path_is_a_config_error(temp_dir):
    with pytest.raises(ConfigError, match="Could not read config file"):
        Config.load(temp_dir)
