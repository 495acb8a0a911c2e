# tests/unit/test_config.py
"""
Configuration tests - code defaults, YAML overrides, validation
"""

import logging

import pytest

from http_errors.config import (
    DeprecationConfig,
    HttpErrorsConfig,
    PoolConfig,
    StackConfig,
    load_config,
    validate_config,
)
from http_errors.config import loader as loader_module
from http_errors.core.factory import ErrorFactory


@pytest.fixture
def no_home_config(tmp_path, monkeypatch):
    monkeypatch.setattr(loader_module, "DEFAULT_CONFIG_PATH", tmp_path / "missing.yml")


def write_yaml(tmp_path, text):
    path = tmp_path / "config.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults():
    config = HttpErrorsConfig.default()

    assert config.to_dict() == {
        "pool": {"size": 10, "statuses": [400, 401, 403, 404, 500]},
        "stack": {"lazy": True},
        "deprecation": {"enabled": True},
    }
    assert config.validate() == []


def test_yaml_overrides_defaults(tmp_path):
    path = write_yaml(tmp_path, """
pool:
  size: 5
  statuses: [404, 429]
stack:
  lazy: false
""")

    config = load_config(path)

    assert config.pool == PoolConfig(size=5, statuses=(404, 429))
    assert config.stack == StackConfig(lazy=False)
    assert config.deprecation == DeprecationConfig()


def test_yaml_unknown_keys_are_ignored(tmp_path):
    path = write_yaml(tmp_path, """
pool:
  size: 3
  colour: blue
tracing: {}
""")

    config = load_config(path)

    assert config.pool.size == 3
    assert config.pool.statuses == (400, 401, 403, 404, 500)


def test_missing_file_gives_defaults(no_home_config):
    config = HttpErrorsConfig.from_yaml()

    assert config.to_dict() == HttpErrorsConfig.default().to_dict()


def test_invalid_yaml_gives_defaults_and_logs(tmp_path, caplog):
    path = write_yaml(tmp_path, "pool: [unclosed\n")
    caplog.set_level(logging.WARNING, logger="http_errors.config.loader")

    config = load_config(path)

    assert config.pool.size == 10
    assert "Could not read config" in caplog.text


def test_non_mapping_yaml_gives_defaults(tmp_path):
    path = write_yaml(tmp_path, "- 1\n- 2\n")

    assert load_config(path).pool.size == 10


def test_statuses_list_becomes_tuple():
    assert PoolConfig(statuses=[404]).statuses == (404,)


@pytest.mark.parametrize("pool, level, path", [
    (PoolConfig(size=-1), "error", "pool.size"),
    (PoolConfig(statuses=(302,)), "error", "pool.statuses"),
    (PoolConfig(size=0), "warn", "pool.size"),
    (PoolConfig(statuses=(404, 404)), "warn", "pool.statuses"),
])
def test_validate_config_issues(pool, level, path):
    issues = validate_config(HttpErrorsConfig(pool=pool))

    assert len(issues) == 1
    assert issues[0].level == level
    assert issues[0].path == path


def test_factory_uses_yaml_config(tmp_path, registry):
    path = write_yaml(tmp_path, """
pool:
  size: 1
  statuses: [404]
deprecation:
  enabled: false
""")
    factory = ErrorFactory(registry=registry, config=load_config(path))

    first, second = factory[404](), factory[404]()

    assert factory.release_error(first) is True
    assert factory.release_error(second) is False
    assert factory.pool.statuses == [404]


def test_warn_level_issues_are_logged(registry, caplog):
    caplog.set_level(logging.WARNING, logger="http_errors.core.factory")

    ErrorFactory(registry=registry, config=HttpErrorsConfig(pool=PoolConfig(size=0)))

    assert "disables reuse" in caplog.text
