#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for php-fpm discovery and its bundled configuration."""

from __future__ import annotations

import pytest
from provide.testkit.mocking import patch

from phpharness.fpm import create_tmp_fpm_conf_file, find_php_fpm, fpm_conf_template
from phpharness.models import Context


class TestFindPhpFpm:
    """Test cases for find_php_fpm."""

    @pytest.mark.parametrize(
        ("php_bin", "expected"),
        [
            ("/usr/bin/php8.1", "/usr/sbin/php-fpm8.1"),
            ("/usr/bin/php", "/usr/sbin/php-fpm"),
            ("/opt/php/8.3/bin/php-zts", "/opt/php/8.3/sbin/php-fpm-zts"),
            ("/usr/local/bin/hhvm", "/usr/local/sbin/php-fpm"),
            ("/bin/php7", "/sbin/php-fpm7"),
            ("bin/php", "sbin/php-fpm"),
        ],
    )
    def test_derives_sibling_sbin_path(self, php_bin: str, expected: str):
        assert find_php_fpm(php_bin, "php-fpm") == expected

    @pytest.mark.parametrize("php_bin", ["/php", "php", "/"])
    def test_no_grandparent(self, php_bin: str):
        assert find_php_fpm(php_bin, "php-fpm") is None

    def test_undecodable_file_name(self):
        assert find_php_fpm("/usr/bin/php\udcff", "php-fpm") is None

    def test_custom_manager_name(self):
        assert find_php_fpm("/usr/bin/php8.2", "php-fpm-debug") == "/usr/sbin/php-fpm-debug8.2"

    def test_manager_name_from_env(self, monkeypatch):
        monkeypatch.setenv("PHPHARNESS_FPM_NAME", "php-cgi")

        assert find_php_fpm("/usr/bin/php8.1") == "/usr/sbin/php-cgi8.1"

    def test_context_method(self, fake_context: Context, monkeypatch):
        monkeypatch.delenv("PHPHARNESS_FPM_NAME", raising=False)

        assert fake_context.find_php_fpm() == "/usr/sbin/php-fpm8.1"

    def test_uses_global_context_by_default(self, fake_context: Context):
        with patch("phpharness.context.discover", return_value=fake_context):
            assert find_php_fpm(manager_name="php-fpm") == "/usr/sbin/php-fpm8.1"


class TestFpmConf:
    """Test cases for the bundled php-fpm configuration."""

    def test_template_is_bundled(self):
        template = fpm_conf_template()

        assert b"[global]" in template
        assert b"[www]" in template

    def test_written_verbatim(self):
        with create_tmp_fpm_conf_file() as conf:
            assert conf.path.read_bytes() == fpm_conf_template()
            assert conf.path.suffix == ".conf"

        assert not conf.path.exists()

    def test_context_method(self, fake_context: Context):
        with fake_context.create_tmp_fpm_conf_file() as conf:
            assert conf.path.exists()


# 🔼⚙️🔚
