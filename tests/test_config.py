"""
Tests for configuration management system.
"""

import json

import pytest

from discrete_hmm.config import (
    get_config, set_config, load_config_file, reset_config, ConfigManager
)
from discrete_hmm.exceptions import ConfigurationError


def test_default_config():
    """Test that default configuration is loaded correctly."""
    assert get_config('hmm', 'tolerance') == 1e-10
    assert get_config('topology', 'deepness') is None
    assert get_config('topology', 'random') is False
    assert get_config('random', 'seed') == 0
    assert get_config('prediction', 'horizon') == 1
    assert get_config('logging', 'level') == 'INFO'


def test_get_config_section():
    """Test getting entire configuration sections."""
    topology_config = get_config('topology')
    assert isinstance(topology_config, dict)
    assert 'deepness' in topology_config
    assert 'random' in topology_config


def test_set_config():
    """Test setting individual configuration values."""
    set_config('random', 'seed', 99)
    assert get_config('random', 'seed') == 99

    set_config('test_section', 'test_key', 'test_value')
    assert get_config('test_section', 'test_key') == 'test_value'


def test_manager_update():
    """Test updating configuration with dictionary."""
    manager = ConfigManager()
    manager.update({
        'prediction': {
            'horizon': 5,
            'new_setting': True
        },
        'new_section': {
            'key1': 'value1'
        }
    })

    assert manager.get('prediction', 'horizon') == 5
    assert manager.get('prediction', 'new_setting') is True
    assert manager.get('new_section', 'key1') == 'value1'

    # Other values are preserved
    assert manager.get('hmm', 'tolerance') == 1e-10


def test_load_config_file(temp_dir):
    """Values from a JSON file are merged into the current configuration."""
    config_file = temp_dir / "test_config.json"
    config_file.write_text(json.dumps({
        'random': {'seed': 1234},
        'test': {'value': 123}
    }))

    load_config_file(str(config_file))
    assert get_config('random', 'seed') == 1234
    assert get_config('test', 'value') == 123
    assert get_config('hmm', 'tolerance') == 1e-10

    reset_config()
    assert get_config('random', 'seed') == 0
    assert get_config('test', 'value') is None


def test_managers_do_not_share_defaults():
    """Changing one manager leaves fresh managers on the defaults."""
    manager = ConfigManager()
    manager.set('random', 'seed', 99999)

    assert ConfigManager().get('random', 'seed') == 0
    assert get_config('random', 'seed') == 0


def test_reset_config_restores_nested_values():
    """Resetting must undo changes inside nested sections."""
    set_config('hmm', 'tolerance', 0.5)
    set_config('custom', 'key', 'value')

    reset_config()

    assert get_config('hmm', 'tolerance') == 1e-10
    assert get_config('custom', 'key') is None


def test_invalid_config_file(temp_dir):
    """Test handling of invalid configuration files."""
    with pytest.raises(ConfigurationError):
        load_config_file(str(temp_dir / "nonexistent.json"))

    invalid_file = temp_dir / "invalid.json"
    invalid_file.write_text("{ invalid json }")

    with pytest.raises(ValueError):
        load_config_file(str(invalid_file))

    not_an_object = temp_dir / "list.json"
    not_an_object.write_text("[1, 2, 3]")

    with pytest.raises(ConfigurationError):
        load_config_file(str(not_an_object))


def test_environment_overrides(monkeypatch):
    """Environment variables override defaults; invalid values are ignored."""
    monkeypatch.setenv('DISCRETE_HMM_RANDOM_SEED', '17')
    monkeypatch.setenv('DISCRETE_HMM_TOLERANCE', 'not-a-number')

    manager = ConfigManager()

    assert manager.get('random', 'seed') == 17
    assert manager.get('hmm', 'tolerance') == 1e-10


def test_environment_config_file(monkeypatch, temp_dir):
    """DISCRETE_HMM_CONFIG points at a JSON file loaded on startup."""
    config_file = temp_dir / "env_config.json"
    config_file.write_text('{"prediction": {"horizon": 4}}')
    monkeypatch.setenv('DISCRETE_HMM_CONFIG', str(config_file))

    manager = ConfigManager()

    assert manager.get('prediction', 'horizon') == 4
