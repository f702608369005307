"""
Unit tests for manifest-driven settings resolution.

Each test runs in a scratch working directory so config/app.yaml can be
written freely.
"""

import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import yaml

from pirates_client.config import (
    ConfigException,
    InvalidAppConfigException,
    InvalidBaseUrlException,
    SettingNotDefinedException,
    clear_settings_cache,
    get_api_base,
    get_setting,
    is_setting_available,
    list_settings,
    print_settings,
)

DEFAULT_BASE = "https://allyspirates.herokuapp.com"


class BaseSettingsTest(unittest.TestCase):
    """Scratch cwd plus a clean environment for settings variables."""

    def setUp(self):
        self._old_cwd = os.getcwd()
        self._tmp = tempfile.TemporaryDirectory()
        os.chdir(self._tmp.name)
        self._env = mock.patch.dict(os.environ)
        self._env.start()
        os.environ.pop("PIRATES_API_BASE", None)
        os.environ.pop("LOG_LEVEL", None)
        clear_settings_cache()

    def tearDown(self):
        clear_settings_cache()
        self._env.stop()
        os.chdir(self._old_cwd)
        self._tmp.cleanup()

    def write_app_config(self, text):
        config_dir = Path(self._tmp.name) / "config"
        config_dir.mkdir(exist_ok=True)
        (config_dir / "app.yaml").write_text(text)


class TestSettingResolution(BaseSettingsTest):

    def test_packaged_default(self):
        self.assertEqual(get_setting("api-base"), DEFAULT_BASE)

    def test_app_config_overrides_default(self):
        self.write_app_config("api:\n  base: http://localhost:5000\n")
        self.assertEqual(get_setting("api-base"), "http://localhost:5000")

    def test_environment_overrides_app_config(self):
        self.write_app_config("api:\n  base: http://localhost:5000\n")
        os.environ["PIRATES_API_BASE"] = "  http://localhost:6000 "
        self.assertEqual(get_setting("api-base"), "http://localhost:6000")

    def test_blank_environment_value_is_ignored(self):
        os.environ["PIRATES_API_BASE"] = "   "
        self.assertEqual(get_setting("api-base"), DEFAULT_BASE)

    def test_values_are_cached_until_cleared(self):
        self.assertEqual(get_setting("api-base"), DEFAULT_BASE)
        os.environ["PIRATES_API_BASE"] = "http://changed.test"
        self.assertEqual(get_setting("api-base"), DEFAULT_BASE)

        clear_settings_cache()
        self.assertEqual(get_setting("api-base"), "http://changed.test")

    def test_optional_setting_without_value(self):
        self.assertIsNone(get_setting("log-level"))
        self.assertFalse(is_setting_available("log-level"))

    def test_optional_setting_from_app_config(self):
        self.write_app_config("logging:\n  level: debug\n")
        self.assertEqual(get_setting("log-level"), "debug")

    def test_unknown_setting(self):
        with self.assertRaises(SettingNotDefinedException) as ctx:
            get_setting("no-such-setting")
        self.assertIn("api-base", str(ctx.exception))
        self.assertIsInstance(ctx.exception, ConfigException)
        self.assertFalse(is_setting_available("no-such-setting"))


class TestApiBase(BaseSettingsTest):

    def test_valid_base(self):
        os.environ["PIRATES_API_BASE"] = "http://127.0.0.1:8080"
        self.assertEqual(get_api_base(), "http://127.0.0.1:8080")

    def test_scheme_is_required(self):
        self.write_app_config("api:\n  base: ftp://pirates.test\n")
        with self.assertRaises(InvalidBaseUrlException) as ctx:
            get_api_base()
        self.assertEqual(ctx.exception.value, "ftp://pirates.test")
        self.assertEqual(ctx.exception.source, "app-config:api.base")
        self.assertIn("PIRATES_API_BASE", ctx.exception.guidance)

    def test_host_is_required(self):
        os.environ["PIRATES_API_BASE"] = "/pirates"
        with self.assertRaises(InvalidBaseUrlException):
            get_api_base()


class TestInvalidAppConfig(BaseSettingsTest):
    """A broken config/app.yaml surfaces as a ConfigException with guidance."""

    def test_non_mapping_top_level(self):
        self.write_app_config("- just\n- a list\n")

        with self.assertRaises(InvalidAppConfigException) as ctx:
            get_setting("log-level")

        self.assertIsInstance(ctx.exception, ConfigException)
        self.assertTrue(ctx.exception.path.endswith("app.yaml"))
        self.assertIn("list", str(ctx.exception))
        self.assertIn("mapping", ctx.exception.guidance)

    def test_invalid_yaml(self):
        self.write_app_config("api: [unclosed\n")

        with self.assertRaises(InvalidAppConfigException) as ctx:
            get_setting("log-level")

        self.assertIsInstance(ctx.exception.__cause__, yaml.YAMLError)
        self.assertIn("not valid YAML", str(ctx.exception))

    def test_environment_wins_before_file_is_read(self):
        self.write_app_config("- just\n- a list\n")
        os.environ["PIRATES_API_BASE"] = "http://localhost:3000"

        self.assertEqual(get_api_base(), "http://localhost:3000")

    def test_empty_file_is_an_empty_mapping(self):
        self.write_app_config("")

        self.assertEqual(get_setting("api-base"), DEFAULT_BASE)


class TestSettingsListing(BaseSettingsTest):

    def test_list_settings_reports_sources(self):
        os.environ["PIRATES_API_BASE"] = "http://localhost:3000"

        by_name = {info["name"]: info for info in list_settings()}

        self.assertEqual(by_name["api-base"]["value"], "http://localhost:3000")
        self.assertEqual(by_name["api-base"]["source"], "env-var:PIRATES_API_BASE")
        self.assertIsNone(by_name["log-level"]["value"])
        self.assertIsNone(by_name["log-level"]["source"])

    def test_print_settings_table(self):
        out = io.StringIO()
        print_settings(file=out)

        text = out.getvalue()
        self.assertIn("api-base", text)
        self.assertIn(DEFAULT_BASE, text)
        self.assertIn("default", text)
        self.assertIn("(not set)", text)


if __name__ == '__main__':
    unittest.main()
