#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for unitysetup configuration."""

from __future__ import annotations

# =================================
# Unity Hub / Editor locations (macOS)
# =================================
DEFAULT_HUB_PATH = "/Applications/Unity Hub.app/Contents/MacOS/Unity Hub"
DEFAULT_EDITOR_ROOT = "/Applications/Unity/Hub/Editor"
EDITOR_BINARY_SUBPATH = "Unity.app/Contents/MacOS/Unity"

# =================================
# Package manager
# =================================
BREW_EXECUTABLE = "brew"
HUB_CASK = "unity-hub"

# =================================
# Hub CLI flags
# =================================
CHILD_MODULES_FLAG = "--childModules"
MODULE_FLAG = "--module"

# Target platform -> Unity Hub module id
# https://docs.unity3d.com/ScriptReference/BuildTarget.html
PLATFORM_MODULES = {
    "iOS": "ios",
    "tvOS": "tvos",
    "Android": "android",
    "StandaloneOSX": "mac-il2cpp",
    "WebGL": "webgl",
}

# =================================
# Changeset resolution
# =================================
DEFAULT_RELEASE_API_URL = "https://services.api.unity.com/unity/editor/release/v1/releases"
DEFAULT_HTTP_TIMEOUT = 30.0

# =================================
# Install policy defaults
# =================================
DEFAULT_IGNORE_RETURN_CODE = False
DEFAULT_SILENT = False
DEFAULT_INSTALL_TIMEOUT = None  # Block until the installer exits

# =================================
# Logging
# =================================
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# =================================
# Build parameter defaults
# =================================
DEFAULT_PROJECT_PATH = "."
DEFAULT_BUILD_ROOT = "build"
GITHUB_INPUT_PREFIX = "INPUT_"

# 🎮🧰🔚
