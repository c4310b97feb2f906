#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the unitysetup CLI."""

from __future__ import annotations

from unitysetup.commands.info import changeset_command, env_command, modules_command
from unitysetup.commands.setup import setup_command

__all__ = [
    "changeset_command",
    "env_command",
    "modules_command",
    "setup_command",
]

# 🎮🧰🔚
