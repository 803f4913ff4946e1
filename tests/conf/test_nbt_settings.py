import doctest
from pathlib import Path

import pytest
from pydantic import ValidationError

import tagtree
from tagtree import conf
from tagtree.conf import get_settings
from tagtree.conf.settings import NbtSettings
from tagtree.nbt import utils, values


def test_defaults() -> None:
    settings = NbtSettings()
    assert settings.MAX_DEPTH == 16
    assert settings.MAX_BYTES is None


def test_default_yaml_matches_defaults() -> None:
    assert NbtSettings.from_yaml(filepath=conf.DEFAULT_SETTINGS_FILEPATH) == NbtSettings()


def test_unittests_yaml_extends_default() -> None:
    settings = NbtSettings.from_yaml(filepath=conf.UNITTESTS_SETTINGS_FILEPATH)
    assert settings.MAX_DEPTH == 16
    assert settings.MAX_BYTES == 1048576


@pytest.mark.parametrize('kwargs', [
    dict(MAX_DEPTH=-1),
    dict(MAX_BYTES=-1),
    dict(UNKNOWN=1),
])
def test_invalid_settings(kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        NbtSettings(**kwargs)


def test_settings_are_frozen() -> None:
    settings = NbtSettings()
    with pytest.raises(ValidationError):
        settings.MAX_DEPTH = 3  # type: ignore[misc]


def test_yaml_extends_relative_file(tmp_path: Path) -> None:
    base = tmp_path / 'base.yml'
    base.write_text('MAX_DEPTH: 4\nMAX_BYTES: 100\n')
    child = tmp_path / 'child.yml'
    child.write_text('extends: base.yml\nMAX_BYTES: 50\n')
    settings = NbtSettings.from_yaml(filepath=str(child))
    assert settings.MAX_DEPTH == 4
    assert settings.MAX_BYTES == 50


def test_yaml_not_a_dict(tmp_path: Path) -> None:
    path = tmp_path / 'bad.yml'
    path.write_text('- 1\n- 2\n')
    with pytest.raises(ValueError):
        NbtSettings.from_yaml(filepath=str(path))


def test_yaml_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        NbtSettings.from_yaml(filepath=str(tmp_path / 'missing.yml'))


def test_global_settings_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / 'custom.yml'
    path.write_text('MAX_DEPTH: 3\n')
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
    monkeypatch.setenv('TAGTREE_CONFIG_YAML', str(path))

    settings = get_settings.get_global_settings()
    assert settings.MAX_DEPTH == 3
    assert get_settings.get_settings_source() == str(path)
    # loaded once
    assert get_settings.get_global_settings() is settings

    monkeypatch.setenv('TAGTREE_CONFIG_YAML', conf.DEFAULT_SETTINGS_FILEPATH)
    with pytest.raises(Exception, match='different file'):
        get_settings.get_global_settings()


def test_writer_uses_global_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    from tagtree.nbt import create_bytes_writer

    path = tmp_path / 'custom.yml'
    path.write_text('MAX_DEPTH: 1\nMAX_BYTES: 2\n')
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
    monkeypatch.setenv('TAGTREE_CONFIG_YAML', str(path))

    writer = create_bytes_writer()
    assert writer.max_depth == 1
    assert writer.serializer.bytes_left == 2  # type: ignore[attr-defined]


@pytest.mark.parametrize('module', [tagtree, values, utils])
def test_examples_do_not_load_global_settings(module, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
    assert doctest.testmod(module).failed == 0
    assert get_settings._settings_singleton is None
