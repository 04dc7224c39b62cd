"""Env configuration adapter producing structured PluginSettings."""

from __future__ import annotations

from ..config import config as env_config
from ..core.config_model import PluginSettings


def load_settings() -> PluginSettings:
    return PluginSettings(
        data_dir=env_config.DATA_DIR,
        unaltered_id=env_config.UNALTERED_ID,
        altered_id=env_config.ALTERED_ID,
        logger_name=env_config.LOGGER_NAME,
        debug=env_config.DEBUG,
        data_file_name=env_config.DATA_FILE_NAME,
        config_file_name=env_config.CONFIG_FILE_NAME,
    )
