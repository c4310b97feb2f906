#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Unity Hub integration: paths, modules, changesets and installs."""

from unitysetup.hub.changeset import (
    ChangesetLookup,
    ChangesetResolver,
    UnityChangeset,
    get_unity_changeset,
)
from unitysetup.hub.installer import HubInstaller, InstallPolicy
from unitysetup.hub.modules import get_module_parameters_for_target_platform, supported_platforms
from unitysetup.hub.paths import get_editor_path, get_hub_path, is_editor_installed, is_hub_installed

__all__ = [
    "ChangesetLookup",
    "ChangesetResolver",
    "HubInstaller",
    "InstallPolicy",
    "UnityChangeset",
    "get_editor_path",
    "get_hub_path",
    "get_module_parameters_for_target_platform",
    "get_unity_changeset",
    "is_editor_installed",
    "is_hub_installed",
    "supported_platforms",
]

# 🎮🧰🔚
