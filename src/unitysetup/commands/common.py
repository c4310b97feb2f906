#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared helpers for CLI commands."""

from __future__ import annotations

import click

from unitysetup.config import UnitySetupRuntimeConfig


def get_runtime_config(ctx: click.Context) -> UnitySetupRuntimeConfig:
    """Runtime config loaded by the CLI group, or fresh from the environment."""
    obj = ctx.find_object(dict)
    if obj and isinstance(obj.get("config"), UnitySetupRuntimeConfig):
        return obj["config"]
    return UnitySetupRuntimeConfig.from_env()


# 🎮🧰🔚
