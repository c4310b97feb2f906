#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""unitysetup runtime configuration loaded from the environment."""

from __future__ import annotations

from pathlib import Path

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from unitysetup.config.defaults import (
    DEFAULT_EDITOR_ROOT,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_HUB_PATH,
    DEFAULT_IGNORE_RETURN_CODE,
    DEFAULT_INSTALL_TIMEOUT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_RELEASE_API_URL,
    DEFAULT_SILENT,
    VALID_LOG_LEVELS,
)

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_flag(value: str | bool) -> bool:
    """Parse a boolean flag from an environment string."""
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


def parse_timeout(value: str | float | None) -> float | None:
    """Parse an optional timeout in seconds. Empty, zero or negative means no timeout."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    seconds = float(value)
    return seconds if seconds > 0 else None


@define
class UnitySetupRuntimeConfig(RuntimeConfig):
    """Runtime configuration for the macOS editor bootstrapper."""

    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="UNITYSETUP_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for unitysetup operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    ignore_return_code: bool = field(
        default=DEFAULT_IGNORE_RETURN_CODE,
        env_var="UNITYSETUP_IGNORE_RETURN_CODE",
        converter=parse_flag,
        metadata={"help": "Warn instead of failing when brew or Unity Hub exit non-zero"},
    )

    silent: bool = field(
        default=DEFAULT_SILENT,
        env_var="UNITYSETUP_SILENT",
        converter=parse_flag,
        metadata={"help": "Capture installer output instead of streaming it"},
    )

    install_timeout: float | None = field(
        default=DEFAULT_INSTALL_TIMEOUT,
        env_var="UNITYSETUP_INSTALL_TIMEOUT",
        converter=parse_timeout,
        metadata={"help": "Seconds to wait for each install command (unset waits forever)"},
    )

    hub_path: str = field(
        default=DEFAULT_HUB_PATH,
        env_var="UNITYSETUP_HUB_PATH",
        metadata={"help": "Path to the Unity Hub executable"},
    )

    editor_root: str = field(
        default=DEFAULT_EDITOR_ROOT,
        env_var="UNITYSETUP_EDITOR_ROOT",
        metadata={"help": "Directory Unity Hub installs editors into"},
    )

    release_api_url: str = field(
        default=DEFAULT_RELEASE_API_URL,
        env_var="UNITYSETUP_RELEASE_API_URL",
        metadata={"help": "Unity release API endpoint used to resolve changesets"},
    )

    http_timeout: float = field(
        default=DEFAULT_HTTP_TIMEOUT,
        env_var="UNITYSETUP_HTTP_TIMEOUT",
        converter=float,
        metadata={"help": "Timeout in seconds for release API requests"},
    )

    @property
    def hub_binary(self) -> Path:
        return Path(self.hub_path)

    @property
    def editor_root_dir(self) -> Path:
        return Path(self.editor_root)


# 🎮🧰🔚
