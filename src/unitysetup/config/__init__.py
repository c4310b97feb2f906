#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""unitysetup configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from unitysetup.config.runtime import (
    UnitySetupRuntimeConfig,
    parse_flag,
    parse_log_level,
    parse_timeout,
)

__all__ = [
    "UnitySetupRuntimeConfig",
    "parse_flag",
    "parse_log_level",
    "parse_timeout",
]

# 🎮🧰🔚
