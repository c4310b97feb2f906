#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""unitysetup command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from unitysetup.commands.info import changeset_command, env_command, modules_command
from unitysetup.commands.setup import setup_command
from unitysetup.config import UnitySetupRuntimeConfig

__version__ = get_version("unitysetup", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="unitysetup",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Unity Editor host setup for macOS CI runners.

    Configure via environment variables:
    - UNITYSETUP_LOG_LEVEL: Log level (trace, debug, info, warning, error)
    - UNITYSETUP_IGNORE_RETURN_CODE: Tolerate non-zero installer exits
    - UNITYSETUP_INSTALL_TIMEOUT: Seconds to wait for each install command
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    config = UnitySetupRuntimeConfig.from_env()
    cli_ctx = CLIContext.from_env()

    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name="unitysetup",
        logging=evolve(
            base_telemetry.logging,
            default_level=config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["config"] = config
    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(setup_command, name="setup")
cli.add_command(modules_command, name="modules")
cli.add_command(changeset_command, name="changeset")
cli.add_command(env_command, name="env")

main = cli

if __name__ == "__main__":
    cli()

# 🎮🧰🔚
