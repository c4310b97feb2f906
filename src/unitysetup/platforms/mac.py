#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""macOS host setup: make sure the editor exists, then publish the build environment."""

from __future__ import annotations

from collections.abc import MutableMapping
from enum import Enum
from pathlib import Path

from attrs import define, field
from provide.foundation import logger

from unitysetup.environment import BuildEnvironment, set_environment_variables
from unitysetup.hub.changeset import ChangesetLookup, ChangesetResolver, UnityChangeset
from unitysetup.hub.installer import HubInstaller, InstallPolicy
from unitysetup.hub.modules import get_module_parameters_for_target_platform
from unitysetup.hub.paths import get_editor_path
from unitysetup.parameters import BuildParameters


class SetupState(str, Enum):
    NOT_INSTALLED = "not_installed"
    INSTALLING = "installing"
    READY = "ready"
    FAILED = "failed"


@define
class SetupResult:
    """Outcome of one ``setup_mac`` call."""

    editor_path: Path
    state: SetupState = SetupState.NOT_INSTALLED
    hub_installed: bool = False
    editor_installed: bool = False
    changeset: UnityChangeset | None = None
    environment: BuildEnvironment | None = field(default=None, repr=False)


def setup_mac(
    params: BuildParameters,
    action_folder: str | Path,
    *,
    policy: InstallPolicy | None = None,
    resolver: ChangesetLookup | None = None,
    environ: MutableMapping[str, str] | None = None,
    changeset: str | None = None,
    hub_path: str | Path | None = None,
    editor_root: str | Path | None = None,
) -> SetupResult:
    """Install the requested editor if needed and publish the build environment.

    Args:
        params: Build parameters for this job
        action_folder: Directory containing the action's build scripts
        policy: Exit code, output and timeout policy for install commands
        resolver: Changeset lookup (defaults to the Unity release API)
        environ: Environment to publish into (defaults to ``os.environ``)
        changeset: Known changeset for ``params.editor_version``; skips the lookup
        hub_path: Unity Hub executable override
        editor_root: Hub editor directory override

    Returns:
        SetupResult in state READY with the published BuildEnvironment

    Raises:
        InstallationError: If brew or Unity Hub fail
        UnsupportedPlatformError: If the target platform has no Hub module
        ChangesetResolutionError: If the editor version cannot be resolved
    """
    result = SetupResult(editor_path=get_editor_path(params.editor_version, editor_root))
    log = logger.bind(version=params.editor_version, platform=params.target_platform)

    if result.editor_path.exists():
        log.info("Unity Editor already installed, skipping install", editor_path=str(result.editor_path))
    else:
        result.state = SetupState.INSTALLING
        try:
            _install(params, result, HubInstaller(hub_path, policy), resolver, changeset)
        except Exception:
            result.state = SetupState.FAILED
            log.error("Unity Editor setup failed", editor_path=str(result.editor_path))
            raise

    result.environment = set_environment_variables(params, action_folder, environ)
    result.state = SetupState.READY
    log.info("macOS host ready", hub_installed=result.hub_installed, editor_installed=result.editor_installed)
    return result


def _install(
    params: BuildParameters,
    result: SetupResult,
    installer: HubInstaller,
    resolver: ChangesetLookup | None,
    changeset: str | None,
) -> None:
    # Fail on an unknown platform before anything is installed or looked up
    get_module_parameters_for_target_platform(params.target_platform)

    result.hub_installed = installer.install_hub()

    if changeset:
        result.changeset = UnityChangeset(version=params.editor_version, changeset=changeset)
    else:
        result.changeset = (resolver or ChangesetResolver()).resolve(params.editor_version)

    installer.install_editor(params.editor_version, result.changeset.changeset, params.target_platform)
    result.editor_installed = True


# 🎮🧰🔚
