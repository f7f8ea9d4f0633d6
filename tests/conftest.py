import logging

import pytest

from noise_settings import NoiseSettings, _LOGGER_NAMES, _SETTING_KEYS


@pytest.fixture(autouse=True)
def restore_settings():
    saved = {key: getattr(NoiseSettings, key) for key in _SETTING_KEYS}
    yield
    for key, value in saved.items():
        setattr(NoiseSettings, key, value)
    for name in _LOGGER_NAMES:
        logging.getLogger(name).setLevel(logging.NOTSET)
