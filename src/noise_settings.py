import logging

import yaml

from noise_random import DEFAULT_SEED

logger = logging.getLogger(__name__)


class SettingsError(ValueError):
    pass


class NoiseSettings:
    default_seed = DEFAULT_SEED

    # in_circle logs a warning once a single call goes past this many attempts
    rejection_warning_attempts = 32

    log_level = 'WARNING'


_SETTING_KEYS = ('default_seed', 'rejection_warning_attempts', 'log_level')
_LOGGER_NAMES = ('noise_settings', 'noise_stream')


def read_yaml(path):
    """Load a yaml mapping from path, an empty file counts as an empty mapping."""
    with open(path) as yaml_file:
        data = yaml.safe_load(yaml_file)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError("Expected a mapping in " + str(path) + ", got " + type(data).__name__)
    return data


def apply_settings(data):
    for key in data:
        if key not in _SETTING_KEYS:
            raise SettingsError("Unknown setting: " + str(key))

    if 'default_seed' in data:
        seed = data['default_seed']
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise SettingsError("default_seed must be an integer")
        NoiseSettings.default_seed = seed & 0xFFFFFFFF

    if 'rejection_warning_attempts' in data:
        attempts = data['rejection_warning_attempts']
        if isinstance(attempts, bool) or not isinstance(attempts, int) or attempts < 1:
            raise SettingsError("rejection_warning_attempts must be a positive integer")
        NoiseSettings.rejection_warning_attempts = attempts

    if 'log_level' in data:
        level = str(data['log_level']).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise SettingsError("Unknown log level: " + str(data['log_level']))
        NoiseSettings.log_level = level

    for name in _LOGGER_NAMES:
        logging.getLogger(name).setLevel(NoiseSettings.log_level)


def load_settings(path):
    data = read_yaml(path)
    apply_settings(data)
    logger.debug("Loaded %d settings from %s", len(data), path)
    return NoiseSettings
