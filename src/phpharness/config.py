#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Environment-derived settings for the harness."""

from __future__ import annotations

from collections.abc import Mapping
import os

from attrs import define, field

PHP_CONFIG_ENV_VAR = "PHP_CONFIG"
FPM_NAME_ENV_VAR = "PHPHARNESS_FPM_NAME"

DEFAULT_PHP_CONFIG = "php-config"
DEFAULT_FPM_NAME = "php-fpm"


@define(frozen=True)
class HarnessSettings:
    """Settings controlling how the PHP interpreter is located."""

    php_config: str = field(default=DEFAULT_PHP_CONFIG)
    fpm_name: str = field(default=DEFAULT_FPM_NAME)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> HarnessSettings:
        """Build settings from the environment.

        Unset and empty variables both fall back to the defaults.
        """
        env = os.environ if environ is None else environ
        return cls(
            php_config=env.get(PHP_CONFIG_ENV_VAR) or DEFAULT_PHP_CONFIG,
            fpm_name=env.get(FPM_NAME_ENV_VAR) or DEFAULT_FPM_NAME,
        )


# 🔼⚙️🔚
