#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Read-only inspection commands for the unitysetup CLI."""

from __future__ import annotations

import click
from provide.foundation.console import perr, pout
from provide.foundation.serialization import json_dumps

from unitysetup.commands.common import get_runtime_config
from unitysetup.console import get_command_logger
from unitysetup.environment import BuildEnvironment
from unitysetup.exceptions import ChangesetResolutionError, ParameterError, UnsupportedPlatformError
from unitysetup.hub.changeset import ChangesetResolver
from unitysetup.hub.modules import get_module_parameters_for_target_platform, supported_platforms
from unitysetup.parameters import BuildParameters

log = get_command_logger("info")


@click.command("modules")
@click.argument("target_platform", required=False)
def modules_command(target_platform: str | None) -> None:
    """Show the Unity Hub module arguments for a target platform (or all of them)."""
    if target_platform is None:
        for platform in supported_platforms():
            pout(f"{platform}: {get_module_parameters_for_target_platform(platform)}")
        return

    try:
        pout(get_module_parameters_for_target_platform(target_platform))
    except UnsupportedPlatformError as e:
        perr(f"❌ {e}")
        perr(f"Supported platforms: {', '.join(supported_platforms())}")
        raise click.Abort() from e


@click.command("changeset")
@click.argument("version")
@click.pass_context
def changeset_command(ctx: click.Context, version: str) -> None:
    """Resolve a Unity editor version to its changeset."""
    resolver = ChangesetResolver.from_config(get_runtime_config(ctx))
    try:
        changeset = resolver.resolve(version)
    except ChangesetResolutionError as e:
        log.error("Changeset lookup failed", version=version, error=str(e))
        perr(f"❌ {e}")
        raise click.Abort() from e

    pout(changeset.changeset)


@click.command("env")
@click.option(
    "--action-folder",
    envvar="GITHUB_ACTION_PATH",
    default=".",
    help="Value exported as ACTION_FOLDER",
)
@click.option(
    "--show-secrets",
    is_flag=True,
    help="Print serial, keystore and password values unmasked",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Output as JSON",
)
def env_command(action_folder: str, show_secrets: bool, as_json: bool) -> None:
    """Show the environment variables setup would export, without installing anything."""
    try:
        params = BuildParameters.from_inputs()
    except ParameterError as e:
        perr(f"❌ {e}")
        raise click.Abort() from e

    environment = BuildEnvironment.from_parameters(params, action_folder)
    values = environment.as_dict() if show_secrets else environment.redacted()

    if as_json:
        pout(json_dumps(values, indent=2))
        return

    for name, value in values.items():
        pout(f"{name}={value}")


# 🎮🧰🔚
