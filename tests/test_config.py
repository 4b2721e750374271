"""Tests for the per-repository config file."""

import json

import pytest

from gitutils.config import CONFIG_FILENAME, Config, load_config
from gitutils.exceptions import ConfigError, GitUtilsError


def test_defaults_without_root():
    config = load_config(None)
    assert config.base_branch == "main"
    assert config.exclude_suffixes == []


def test_defaults_without_file(tmp_path):
    assert load_config(tmp_path) == Config()


def test_reads_values(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text(
        json.dumps({"base_branch": "develop", "exclude_suffixes": [".g.dart"]})
    )

    config = load_config(tmp_path)

    assert config.base_branch == "develop"
    assert config.exclude_suffixes == [".g.dart"]


def test_partial_file_keeps_defaults(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text(json.dumps({"exclude_suffixes": [".lock"]}))
    assert load_config(tmp_path).base_branch == "main"


def test_invalid_json(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text("{not json")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_unknown_key(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text(json.dumps({"base": "main"}))
    with pytest.raises(ConfigError) as exc_info:
        load_config(tmp_path)
    assert isinstance(exc_info.value, GitUtilsError)


def test_wrong_type(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text(json.dumps({"exclude_suffixes": ".g.dart"}))
    with pytest.raises(ConfigError):
        load_config(tmp_path)
