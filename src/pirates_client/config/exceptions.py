"""
Exception classes with built-in guidance for configuration loading.
"""
import sys
from typing import List


class ConfigException(Exception):
    """Base exception for all configuration errors."""
    def __init__(self, message: str, setting_name: str = None, source: str = None):
        super().__init__(message)
        self.setting_name = setting_name
        self.source = source
        self.guidance = self._generate_guidance()

    def _get_current_command(self):
        """Get the current command being executed."""
        if len(sys.argv) > 0:
            executable = sys.argv[0].split('/')[-1]
            args = sys.argv[1:]
            if args:
                return f"{executable} {' '.join(args)}"
            return executable
        return "unknown command"

    def _generate_guidance(self):
        """Override in subclasses to provide specific guidance."""
        return f"""
❌ Configuration error: {self}
💡 Check your configuration and try again
"""


class SettingNotDefinedException(ConfigException):
    """Raised when a setting name is not defined in the manifest."""

    def __init__(self, setting_name: str, available_settings: List[str]):
        self.available_settings = available_settings
        super().__init__(
            f"Setting '{setting_name}' is not defined in the settings manifest. "
            f"Available settings: {', '.join(sorted(available_settings))}",
            setting_name=setting_name,
        )

    def _generate_guidance(self):
        return f"""
❌ Unknown setting '{self.setting_name}'
💡 Use one of: {', '.join(sorted(self.available_settings))}
"""


class SettingValueNotFoundException(ConfigException):
    """Raised when a setting is defined but no source provides a value."""

    def __init__(self, setting_name: str, source: str, details: str = ""):
        self.details = details
        message = f"Setting '{setting_name}' is defined but value not found from source '{source}'"
        if details:
            message += f": {details}"
        super().__init__(message, setting_name=setting_name, source=source)


class InvalidBaseUrlException(ConfigException):
    """Raised when the configured API base is not an absolute http(s) URL."""

    def __init__(self, value: str, source: str = None):
        self.value = value
        super().__init__(
            f"Invalid API base URL '{value}': expected http:// or https:// origin",
            setting_name='api-base',
            source=source,
        )

    def _generate_guidance(self):
        command = self._get_current_command()
        return f"""
❌ API base URL '{self.value}' is not usable
💡 Resolve this in one of the following ways:
   1. Set PIRATES_API_BASE environment variable: export PIRATES_API_BASE=https://allyspirates.herokuapp.com
   2. Or set api.base in config/app.yaml
   3. Or pass it explicitly: {command} --base=https://your-host
"""


class InvalidAppConfigException(ConfigException):
    """Raised when config/app.yaml cannot be parsed into a mapping."""

    def __init__(self, path, details: str):
        self.path = str(path)
        self.details = details
        super().__init__(f"Invalid app config {self.path}: {details}", source='app-config')

    def _generate_guidance(self):
        return f"""
❌ App config '{self.path}' could not be used: {self.details}
💡 Resolve this in one of the following ways:
   1. Fix the file so it is valid YAML with a mapping at the top level, e.g.
        api:
          base: https://allyspirates.herokuapp.com
   2. Or remove or rename the file to fall back to environment variables and defaults
"""
