#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Host platform setup."""

from unitysetup.platforms.mac import SetupResult, SetupState, setup_mac

__all__ = ["SetupResult", "SetupState", "setup_mac"]

# 🎮🧰🔚
