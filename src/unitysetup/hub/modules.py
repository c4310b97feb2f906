#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Mapping from Unity build targets to Unity Hub module flags."""

from __future__ import annotations

from unitysetup.config.defaults import CHILD_MODULES_FLAG, MODULE_FLAG, PLATFORM_MODULES
from unitysetup.exceptions import UnsupportedPlatformError


def supported_platforms() -> list[str]:
    """Target platforms that have a module mapping."""
    return list(PLATFORM_MODULES)


def get_module_parameters_for_target_platform(target_platform: str) -> str:
    """Build the Hub ``--module`` arguments for a target platform.

    Args:
        target_platform: Unity build target name (e.g. ``iOS``, ``StandaloneOSX``)

    Returns:
        Argument string such as ``--module ios --childModules``

    Raises:
        UnsupportedPlatformError: If the platform has no module mapping
    """
    module = PLATFORM_MODULES.get(target_platform)
    if module is None:
        raise UnsupportedPlatformError(target_platform)

    return f"{MODULE_FLAG} {module} {CHILD_MODULES_FLAG}"


# 🎮🧰🔚
