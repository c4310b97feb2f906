#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Filesystem locations of Unity Hub and Hub-managed editors on macOS."""

from __future__ import annotations

from pathlib import Path

from unitysetup.config.defaults import DEFAULT_EDITOR_ROOT, DEFAULT_HUB_PATH, EDITOR_BINARY_SUBPATH


def get_hub_path(hub_path: str | Path | None = None) -> Path:
    """Path to the Unity Hub executable."""
    return Path(hub_path) if hub_path else Path(DEFAULT_HUB_PATH)


def get_editor_path(editor_version: str, editor_root: str | Path | None = None) -> Path:
    """Path to the editor binary Hub installs for ``editor_version``.

    >>> str(get_editor_path("2022.3.10f1"))
    '/Applications/Unity/Hub/Editor/2022.3.10f1/Unity.app/Contents/MacOS/Unity'
    """
    root = Path(editor_root) if editor_root else Path(DEFAULT_EDITOR_ROOT)
    return root / editor_version / EDITOR_BINARY_SUBPATH


def is_hub_installed(hub_path: str | Path | None = None) -> bool:
    return get_hub_path(hub_path).exists()


def is_editor_installed(editor_version: str, editor_root: str | Path | None = None) -> bool:
    return get_editor_path(editor_version, editor_root).exists()


# 🎮🧰🔚
