#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for unitysetup."""

from __future__ import annotations

from provide.foundation.errors import FoundationError

INSTALL_FAILED_MESSAGE = "There was an error installing the Unity Editor. See logs above for details."


class UnitySetupError(FoundationError):
    """Base exception for all unitysetup errors."""

    pass


class InstallationError(UnitySetupError):
    """Raised when Homebrew or the Unity Hub CLI fails to install something."""

    def __init__(self, message: str = INSTALL_FAILED_MESSAGE, **kwargs: object) -> None:
        super().__init__(message, **kwargs)  # type: ignore[arg-type]

    def _default_code(self) -> str:
        return "UNITY_INSTALL_FAILED"


class UnsupportedPlatformError(UnitySetupError):
    """Raised when a target platform has no matching Unity Hub module."""

    def __init__(self, platform: str) -> None:
        super().__init__(f"Unsupported module for target platform: {platform}.", platform=platform)
        self.platform = platform

    def _default_code(self) -> str:
        return "UNITY_UNSUPPORTED_PLATFORM"


class ChangesetResolutionError(UnitySetupError):
    """Raised when an editor version cannot be mapped to a changeset."""

    def _default_code(self) -> str:
        return "UNITY_CHANGESET_UNRESOLVED"


class ParameterError(UnitySetupError):
    """Raised when action inputs are missing or malformed."""

    def _default_code(self) -> str:
        return "UNITY_INVALID_PARAMETERS"


# 🎮🧰🔚
