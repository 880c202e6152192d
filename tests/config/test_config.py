"""Tests for the configuration system."""

import logging

import pytest
import yaml

from geocode.config import config, Config
from geocode.config import defaults


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML config file and return its path."""
    def _write(data, name='config.yml'):
        path = tmp_path / name
        with open(path, 'w') as f:
            if isinstance(data, str):
                f.write(data)
            else:
                yaml.dump(data, f)
        return path
    return _write


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    monkeypatch.delenv('GEOCODE_CONFIG', raising=False)


class TestConfigurationSystem:
    """Test the configuration system functionality."""

    def test_global_config(self):
        """Test the global config exposes all sections."""
        assert config is not None
        assert isinstance(config.geocoding, dict)
        assert isinstance(config.logging, dict)

    def test_defaults(self, tmp_path):
        """Test default values without any YAML file."""
        cfg = Config(tmp_path / 'missing.yml')

        assert cfg.get('geocoding.default_variant') == 'geohash'
        assert cfg.get('geocoding.default_precision') == 8
        assert cfg.get('logging.level') == 'INFO'
        assert cfg.get('logging.file') is None

    def test_defaults_not_shared(self, tmp_path):
        """Test settings are copies of the default tables."""
        cfg = Config(tmp_path / 'missing.yml')
        cfg.settings['geocoding']['default_precision'] = 3

        assert defaults.GEOCODING['default_precision'] == 8

    def test_get_dotted_default(self, tmp_path):
        cfg = Config(tmp_path / 'missing.yml')

        assert cfg.get('geocoding.missing', 'fallback') == 'fallback'
        assert cfg.get('nonexistent.section') is None
        assert cfg.get('geocoding.default_precision.too_deep', 1) == 1


class TestYamlOverride:
    """Test YAML configuration overrides."""

    def test_deep_merge(self, write_config):
        """Test YAML values override defaults without dropping siblings."""
        path = write_config({
            'geocoding': {'default_precision': 12},
            'logging': {'level': 'DEBUG'},
        })
        cfg = Config(path)

        assert cfg.get('geocoding.default_precision') == 12
        assert cfg.get('geocoding.default_variant') == 'geohash'
        assert cfg.get('logging.level') == 'DEBUG'
        assert cfg.get('logging.backup_count') == 5

    def test_extra_sections(self, write_config):
        path = write_config({'custom': {'key': 'value'}})
        cfg = Config(path)

        assert cfg.get('custom.key') == 'value'

    def test_env_var(self, write_config, monkeypatch):
        """Test config file discovery through the environment."""
        path = write_config({'geocoding': {'default_variant': 'quadtile'}})
        monkeypatch.setenv('GEOCODE_CONFIG', str(path))

        assert Config().get('geocoding.default_variant') == 'quadtile'

    def test_empty_file(self, write_config):
        cfg = Config(write_config(''))
        assert cfg.get('geocoding.default_precision') == 8

    def test_invalid_yaml_keeps_defaults(self, write_config, caplog):
        """Test broken YAML is reported and ignored."""
        path = write_config("geocoding: [unclosed\n")

        with caplog.at_level(logging.WARNING, logger='geocode.config.config'):
            cfg = Config(path)

        assert cfg.get('geocoding.default_precision') == 8
        assert any('Config file loading failed' in r.getMessage() for r in caplog.records)

    def test_non_mapping_yaml_keeps_defaults(self, write_config):
        cfg = Config(write_config(['a', 'b']))
        assert cfg.get('geocoding.default_variant') == 'geohash'

    def test_missing_file_warns(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger='geocode.config.config'):
            Config(tmp_path / 'missing.yml')

        assert any('not found' in r.getMessage() for r in caplog.records)
