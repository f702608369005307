"""
Configuration management.

Manifest-driven runtime settings, configuration errors with guidance, and
logging bootstrap.
"""

from .exceptions import (
    ConfigException,
    InvalidAppConfigException,
    InvalidBaseUrlException,
    SettingNotDefinedException,
    SettingValueNotFoundException,
)
from .settings import (
    get_setting,
    get_api_base,
    is_setting_available,
    list_settings,
    print_settings,
    clear_settings_cache,
)
from .logging import bootstrap_logging, get_logger

__all__ = [
    'ConfigException',
    'InvalidAppConfigException',
    'InvalidBaseUrlException',
    'SettingNotDefinedException',
    'SettingValueNotFoundException',
    'get_setting',
    'get_api_base',
    'is_setting_available',
    'list_settings',
    'print_settings',
    'clear_settings_cache',
    'bootstrap_logging',
    'get_logger',
]
