"""
Runtime Settings Management

Provides runtime access to configuration settings via get_setting(name).
Uses a manifest-driven approach: each setting lists its sources in priority
order (environment variable, config/app.yaml, packaged default) and the first
source that yields a value wins. Resolved values are cached.
"""
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import httpx
import yaml
from pydantic import BaseModel

from .exceptions import (
    InvalidAppConfigException,
    InvalidBaseUrlException,
    SettingNotDefinedException,
    SettingValueNotFoundException,
)

logger = logging.getLogger(__name__)

MANIFEST_PATH = Path(__file__).parent / "settings_manifest.yaml"


class SettingDefinition(BaseModel):
    """Definition of a runtime setting from the manifest."""
    name: str
    sources: List[str]
    description: str = ""
    required: bool = True


# Global cache for settings manifest and values
_settings_manifest: Optional[List[SettingDefinition]] = None
_settings_cache: Dict[str, Tuple[Any, Optional[str]]] = {}
_app_config_cache: Optional[Dict[str, Any]] = None


def _load_settings_manifest() -> List[SettingDefinition]:
    """Load and cache the settings manifest from YAML."""
    global _settings_manifest

    if _settings_manifest is not None:
        return _settings_manifest

    if not MANIFEST_PATH.exists():
        raise FileNotFoundError(f"Settings manifest not found at {MANIFEST_PATH}")

    with open(MANIFEST_PATH, 'r') as f:
        manifest_data = yaml.safe_load(f)

    if not isinstance(manifest_data, dict) or 'settings' not in manifest_data:
        raise ValueError("Invalid manifest format: missing 'settings' key")

    _settings_manifest = [SettingDefinition(**entry) for entry in manifest_data['settings']]
    logger.debug(f"Loaded {len(_settings_manifest)} settings from manifest")
    return _settings_manifest


def _load_app_config() -> Dict[str, Any]:
    """Load and cache the app configuration from config/app.yaml."""
    global _app_config_cache

    if _app_config_cache is not None:
        return _app_config_cache

    app_config_path = Path.cwd() / 'config' / 'app.yaml'

    if not app_config_path.exists():
        logger.debug(f"{app_config_path} not found, app-config sources will be skipped")
        _app_config_cache = {}
        return _app_config_cache

    try:
        with open(app_config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise InvalidAppConfigException(app_config_path, f"not valid YAML ({e})") from e

    if not isinstance(config_data, dict):
        raise InvalidAppConfigException(
            app_config_path,
            f"top level must be a mapping, got {type(config_data).__name__}"
        )

    _app_config_cache = config_data
    logger.debug(f"Loaded app config from {app_config_path}")
    return _app_config_cache


def _get_nested_value(data: Dict[str, Any], path: str) -> Any:
    """Get a nested value from a dictionary using dot notation."""
    current = data
    for key in path.split('.'):
        if not isinstance(current, dict) or key not in current:
            raise KeyError(f"Path '{path}' not found")
        current = current[key]
    return current


def _read_source(source: str) -> Optional[Any]:
    """Read one source; None means the source has nothing to offer."""
    source_type, source_param = source.split(':', 1)

    if source_type == 'env-var':
        value = os.environ.get(source_param)
        if value is None or not value.strip():
            return None
        return value.strip()

    elif source_type == 'app-config':
        try:
            return _get_nested_value(_load_app_config(), source_param)
        except KeyError:
            return None

    elif source_type == 'default':
        return source_param

    raise ValueError(f"Unknown source type '{source_type}' in '{source}'")


def _find_setting(name: str) -> SettingDefinition:
    manifest = _load_settings_manifest()
    for setting in manifest:
        if setting.name == name:
            return setting
    raise SettingNotDefinedException(name, [s.name for s in manifest])


def _resolve(name: str) -> Tuple[Any, Optional[str]]:
    """Resolve a setting to (value, source), using the cache."""
    if name in _settings_cache:
        return _settings_cache[name]

    setting = _find_setting(name)
    resolved = (None, None)
    for source in setting.sources:
        value = _read_source(source)
        if value is not None:
            resolved = (value, source)
            break
    else:
        if setting.required:
            raise SettingValueNotFoundException(
                name,
                ', '.join(setting.sources),
                "no source provided a value"
            )

    _settings_cache[name] = resolved
    return resolved


def get_setting(name: str) -> Any:
    """
    Get a setting value by name.

    Args:
        name: The setting name (e.g., 'api-base')

    Returns:
        The setting value, or None for an optional setting with no value

    Raises:
        SettingNotDefinedException: If the setting name is not in the manifest
        SettingValueNotFoundException: If a required setting has no value
    """
    return _resolve(name)[0]


def get_api_base() -> str:
    """Get the configured API base URL.

    Raises:
        InvalidBaseUrlException: If the value is not an absolute http(s) URL
    """
    value, source = _resolve('api-base')
    value = str(value)
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL:
        raise InvalidBaseUrlException(value, source)
    if url.scheme not in ('http', 'https') or not url.host:
        raise InvalidBaseUrlException(value, source)
    return value


def is_setting_available(name: str) -> bool:
    """Check if a setting resolves to a value without raising an exception."""
    try:
        return get_setting(name) is not None
    except (SettingNotDefinedException, SettingValueNotFoundException):
        return False


def list_settings() -> List[Dict[str, Any]]:
    """
    List all available settings with their resolved value and source.

    Returns:
        List of setting information dictionaries
    """
    settings_info = []
    for setting in _load_settings_manifest():
        try:
            value, source = _resolve(setting.name)
        except SettingValueNotFoundException:
            value, source = None, None
        settings_info.append({
            'name': setting.name,
            'value': value,
            'source': source,
            'description': setting.description,
        })
    return settings_info


def print_settings(file=None):
    """Print formatted settings table showing name, value, and source."""
    file = file or sys.stderr
    print("=" * 78, file=file)
    print("📋 Runtime Configuration Settings", file=file)
    print("=" * 78, file=file)
    print(f"{'Setting Name':<15} {'Value':<38} {'Source':<23}", file=file)
    print("-" * 78, file=file)
    for info in list_settings():
        value = info['value'] if info['value'] is not None else "(not set)"
        source = info['source'].split(':', 1)[0] if info['source'] else "-"
        print(f"{info['name']:<15} {str(value):<38} {source:<23}", file=file)
    print("=" * 78, file=file)


def clear_settings_cache():
    """Clear cached manifest, app config and values, e.g. between tests."""
    global _settings_manifest, _app_config_cache
    _settings_manifest = None
    _app_config_cache = None
    _settings_cache.clear()
