#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Host setup command for the unitysetup CLI."""

from __future__ import annotations

import os
from pathlib import Path

import click
from provide.foundation.console import perr, pout

from unitysetup.commands.common import get_runtime_config
from unitysetup.config import parse_timeout
from unitysetup.console import get_command_logger
from unitysetup.exceptions import UnitySetupError
from unitysetup.hub.changeset import ChangesetResolver
from unitysetup.hub.installer import InstallPolicy
from unitysetup.parameters import BuildParameters
from unitysetup.platforms.mac import setup_mac

# Get structured logger for this command
log = get_command_logger("setup")


@click.command("setup")
@click.option(
    "--action-folder",
    type=click.Path(file_okay=False, resolve_path=True),
    envvar="GITHUB_ACTION_PATH",
    default=".",
    help="Directory holding the action's build scripts (default: $GITHUB_ACTION_PATH or cwd)",
)
@click.option(
    "--changeset",
    default=None,
    help="Changeset of the requested editor version; skips the release API lookup",
)
@click.option(
    "--ignore-return-code",
    is_flag=True,
    help="Warn instead of failing when brew or Unity Hub exit non-zero",
)
@click.option(
    "--silent",
    is_flag=True,
    help="Capture installer output instead of streaming it",
)
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Seconds to wait for each install command",
)
@click.option(
    "--no-github-env",
    is_flag=True,
    help="Do not append the build environment to $GITHUB_ENV",
)
@click.pass_context
def setup_command(
    ctx: click.Context,
    action_folder: str,
    changeset: str | None,
    ignore_return_code: bool,
    silent: bool,
    timeout: float | None,
    no_github_env: bool,
) -> None:
    """Install the Unity Editor on this macOS host and export build parameters."""
    config = get_runtime_config(ctx)
    defaults = InstallPolicy.from_config(config)
    policy = InstallPolicy(
        ignore_return_code=ignore_return_code or defaults.ignore_return_code,
        silent=silent or defaults.silent,
        timeout=defaults.timeout if timeout is None else parse_timeout(timeout),
    )

    try:
        params = BuildParameters.from_inputs()
        log.debug(
            "Setup command started",
            version=params.editor_version,
            platform=params.target_platform,
            action_folder=action_folder,
            ignore_return_code=policy.ignore_return_code,
        )
        pout(f"🎮 Setting up Unity {params.editor_version} for {params.target_platform}...")

        result = setup_mac(
            params,
            action_folder,
            policy=policy,
            resolver=ChangesetResolver.from_config(config),
            changeset=changeset,
            hub_path=config.hub_path,
            editor_root=config.editor_root,
        )
    except UnitySetupError as e:
        log.error("Setup failed", error=str(e))
        perr(f"❌ Setup failed: {e}")
        raise click.Abort() from e

    if result.editor_installed:
        changeset_id = result.changeset.changeset if result.changeset else "unknown"
        pout(f"✅ Installed Unity {params.editor_version} ({changeset_id})")
    else:
        pout(f"✅ Unity {params.editor_version} already installed at {result.editor_path}")

    github_env_file = os.environ.get("GITHUB_ENV")
    if github_env_file and not no_github_env and result.environment is not None:
        result.environment.write_github_env(Path(github_env_file))
        pout(f"📝 Exported {len(result.environment)} variables to GITHUB_ENV")


# 🎮🧰🔚
