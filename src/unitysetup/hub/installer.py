#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Install Unity Hub and Unity Editor versions through their command-line tools."""

from __future__ import annotations

from pathlib import Path
import shlex
from typing import TYPE_CHECKING

from attrs import frozen
from provide.foundation import logger
from provide.foundation.errors.process import ProcessError, ProcessTimeoutError
from provide.foundation.process import run

from unitysetup.config.defaults import (
    BREW_EXECUTABLE,
    DEFAULT_IGNORE_RETURN_CODE,
    DEFAULT_INSTALL_TIMEOUT,
    DEFAULT_SILENT,
    HUB_CASK,
)
from unitysetup.exceptions import InstallationError
from unitysetup.hub.modules import get_module_parameters_for_target_platform
from unitysetup.hub.paths import get_hub_path

if TYPE_CHECKING:
    from unitysetup.config.runtime import UnitySetupRuntimeConfig


@frozen
class InstallPolicy:
    """How install commands are run and how their exit codes are judged.

    ``ignore_return_code`` exists because Unity Hub's log volume can overflow
    the runner's capture buffer and report a failure for an install that
    actually succeeded. With it set, a non-zero exit is logged and ignored.
    """

    ignore_return_code: bool = DEFAULT_IGNORE_RETURN_CODE
    silent: bool = DEFAULT_SILENT
    timeout: float | None = DEFAULT_INSTALL_TIMEOUT

    @classmethod
    def from_config(cls, config: UnitySetupRuntimeConfig) -> InstallPolicy:
        return cls(
            ignore_return_code=config.ignore_return_code,
            silent=config.silent,
            timeout=config.install_timeout,
        )


class HubInstaller:
    """Runs ``brew`` and the Unity Hub headless CLI."""

    def __init__(self, hub_path: str | Path | None = None, policy: InstallPolicy | None = None) -> None:
        self.hub_path = get_hub_path(hub_path)
        self.policy = policy or InstallPolicy()

    def hub_command(self) -> list[str]:
        return [BREW_EXECUTABLE, "install", HUB_CASK]

    def editor_command(self, version: str, changeset: str, target_platform: str) -> list[str]:
        """Headless Hub install command for an editor plus the platform's modules.

        Raises:
            UnsupportedPlatformError: If the platform has no module mapping
        """
        module_arguments = get_module_parameters_for_target_platform(target_platform)
        return [
            str(self.hub_path),
            "--",
            "--headless",
            "install",
            "--version",
            version,
            "--changeset",
            changeset,
            *shlex.split(module_arguments),
        ]

    def install_hub(self) -> bool:
        """Install Unity Hub with Homebrew unless it is already present.

        Returns:
            True if the install command was run
        """
        if self.hub_path.exists():
            logger.debug("Unity Hub already installed", hub_path=str(self.hub_path))
            return False

        logger.info("Installing Unity Hub", hub_path=str(self.hub_path))
        self._execute(self.hub_command())
        return True

    def install_editor(self, version: str, changeset: str, target_platform: str) -> None:
        """Install an editor version with the modules for ``target_platform``."""
        command = self.editor_command(version, changeset, target_platform)
        logger.info(
            "Installing Unity Editor",
            version=version,
            changeset=changeset,
            platform=target_platform,
        )
        self._execute(command)

    def _execute(self, command: list[str]) -> None:
        command_str = shlex.join(command)
        try:
            result = run(
                command,
                check=False,
                capture_output=self.policy.silent,
                timeout=self.policy.timeout,
            )
        except ProcessTimeoutError as e:
            logger.error("Install command timed out", command=command_str, timeout=self.policy.timeout)
            raise InstallationError(cause=e, command=command_str) from e
        except ProcessError as e:
            logger.error("Install command could not be run", command=command_str, error=str(e))
            raise InstallationError(cause=e, command=command_str) from e

        if result.returncode == 0:
            return

        if self.policy.silent and result.stderr:
            logger.error("Install command output", command=command_str, stderr=result.stderr)

        if self.policy.ignore_return_code:
            logger.warning(
                "Install command exited non-zero, continuing",
                command=command_str,
                returncode=result.returncode,
            )
            return

        logger.error("Install command failed", command=command_str, returncode=result.returncode)
        raise InstallationError(command=command_str, return_code=result.returncode)


# 🎮🧰🔚
