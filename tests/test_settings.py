import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dhcp_data.parsers.errors import UsageError
from dhcp_data.settings import (
    DEFAULT_CONF_PATH,
    DEFAULT_LEASES_PATH,
    ENV_VARS,
    load_settings,
)


def clean_env(**extra):
    env = {k: v for k, v in os.environ.items() if k not in ENV_VARS.values()}
    env.update(extra)
    return mock.patch.dict(os.environ, env, clear=True)


class TestSettings(unittest.TestCase):

    def setUp(self):
        super(TestSettings, self).setUp()
        self.temp_dir = tempfile.mkdtemp(prefix="dhcp-data-test-settings-")
        self.settings_file = Path(self.temp_dir) / "settings.yaml"
        self.missing_default = Path(self.temp_dir) / "absent.yaml"

    def tearDown(self):
        super(TestSettings, self).tearDown()
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def load(self, cli=None, settings_path=None, **env):
        # Файл по умолчанию подменяем несуществующим, чтобы не зависеть от cwd
        with clean_env(**env), mock.patch("dhcp_data.settings.SETTINGS_FILE", self.missing_default):
            return load_settings(cli, settings_path)

    def test_standalone_requires_leases_path(self):
        with self.assertRaises(UsageError):
            self.load({})

    def test_standalone(self):
        settings = self.load({"leases_path": "/tmp/dhcpd.leases"})
        self.assertFalse(settings.join_domains)
        self.assertIsNone(settings.conf_path)
        self.assertEqual(settings.domain_policy, "optional")
        self.assertTrue(settings.strict_leases)
        self.assertFalse(settings.strict_subnets)
        self.assertFalse(settings.verbose)

    def test_domains_use_well_known_paths(self):
        settings = self.load({"join_domains": True})
        self.assertEqual(settings.leases_path, DEFAULT_LEASES_PATH)
        self.assertEqual(settings.conf_path, DEFAULT_CONF_PATH)
        self.assertEqual(settings.domain_policy, "required")

    def test_conf_path_enables_domains(self):
        settings = self.load({"conf_path": "/tmp/dhcpd.conf"})
        self.assertTrue(settings.join_domains)
        self.assertEqual(settings.conf_path, "/tmp/dhcpd.conf")

    def test_env_overrides_file_and_cli_overrides_env(self):
        self.settings_file.write_text(
            "dhcp:\n"
            "  leases_path: /from/yaml.leases\n"
            "  domain_policy: required\n"
            "  strict_subnets: true\n",
            encoding="utf-8",
        )
        settings = self.load(
            {"domain_policy": "optional"},
            self.settings_file,
            DHCP_LEASES_PATH="/from/env.leases",
            DHCP_DOMAIN_POLICY="required",
        )
        self.assertEqual(settings.leases_path, "/from/env.leases")
        self.assertEqual(settings.domain_policy, "optional")
        self.assertTrue(settings.strict_subnets)

    def test_env_booleans(self):
        settings = self.load(
            {"leases_path": "/tmp/dhcpd.leases"},
            DHCP_STRICT_LEASES="false",
            DHCP_STRICT_SUBNETS="1",
            DHCP_VERBOSE="true",
        )
        self.assertFalse(settings.strict_leases)
        self.assertTrue(settings.verbose)
        self.assertTrue(settings.strict_subnets)

    def test_explicit_missing_file(self):
        with self.assertRaises(UsageError):
            self.load({"leases_path": "/tmp/dhcpd.leases"}, self.missing_default)

    def test_empty_file(self):
        self.settings_file.write_text("", encoding="utf-8")
        settings = self.load({"leases_path": "/tmp/dhcpd.leases"}, self.settings_file)
        self.assertEqual(settings.leases_path, "/tmp/dhcpd.leases")

    def test_invalid_value(self):
        with self.assertRaises(UsageError) as ctx:
            self.load({"leases_path": "/tmp/dhcpd.leases"}, DHCP_DOMAIN_POLICY="sometimes")
        self.assertIn("domain_policy", str(ctx.exception))
        self.assertNotIn("\n", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
