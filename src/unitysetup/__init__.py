#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""unitysetup core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from unitysetup.environment import BuildEnvironment, set_environment_variables
from unitysetup.exceptions import (
    ChangesetResolutionError,
    InstallationError,
    ParameterError,
    UnitySetupError,
    UnsupportedPlatformError,
)
from unitysetup.hub import (
    ChangesetResolver,
    InstallPolicy,
    UnityChangeset,
    get_module_parameters_for_target_platform,
    get_unity_changeset,
)
from unitysetup.parameters import BuildParameters
from unitysetup.platforms import SetupResult, SetupState, setup_mac

__version__ = get_version("unitysetup", caller_file=__file__)

__all__ = [
    "BuildEnvironment",
    "BuildParameters",
    "ChangesetResolutionError",
    "ChangesetResolver",
    "InstallPolicy",
    "InstallationError",
    "ParameterError",
    "SetupResult",
    "SetupState",
    "UnityChangeset",
    "UnitySetupError",
    "UnsupportedPlatformError",
    "__version__",
    "get_module_parameters_for_target_platform",
    "get_unity_changeset",
    "set_environment_variables",
    "setup_mac",
]

# 🎮🧰🔚
