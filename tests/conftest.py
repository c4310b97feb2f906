#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures for unitysetup tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import MagicMock

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from unitysetup.hub.changeset import UnityChangeset
from unitysetup.parameters import BuildParameters

EDITOR_VERSION = "2022.3.10f1"
CHANGESET = "ff3792e53c62"


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def build_parameters() -> BuildParameters:
    """Android build parameters with every field populated."""
    return BuildParameters(
        editor_version=EDITOR_VERSION,
        target_platform="Android",
        unity_serial="SC-XXXX-XXXX",
        project_path="game",
        build_name="Game",
        build_path="build/Android",
        build_file="Game.aab",
        build_method="BuildScript.Build",
        build_version="1.2.3",
        android_version_code="42",
        android_keystore_name="user.keystore",
        android_keystore_base64="a2V5c3RvcmU=",
        android_keystore_pass="storepass",
        android_keyalias_name="release",
        android_keyalias_pass="aliaspass",
        android_target_sdk_version="AndroidApiLevel31",
        android_sdk_manager_parameters="platforms;android-31",
        android_app_bundle=True,
        export_as_google_android_project=False,
        custom_parameters="-quit -nographics",
        chown_files_to="1000:1000",
    )


@pytest.fixture
def resolver() -> MagicMock:
    """Changeset lookup that always answers with a fixed changeset."""
    mock = MagicMock()
    mock.resolve.return_value = UnityChangeset(version=EDITOR_VERSION, changeset=CHANGESET)
    return mock


@pytest.fixture
def editor_root(tmp_path: Path) -> Path:
    """Empty Hub editor directory."""
    root = tmp_path / "Editor"
    root.mkdir()
    return root


@pytest.fixture
def installed_editor(editor_root: Path) -> Path:
    """Editor binary for EDITOR_VERSION present on disk."""
    binary = editor_root / EDITOR_VERSION / "Unity.app" / "Contents" / "MacOS" / "Unity"
    binary.parent.mkdir(parents=True)
    binary.touch()
    return binary


@pytest.fixture
def hub_binary(tmp_path: Path) -> Path:
    """Unity Hub executable present on disk."""
    binary = tmp_path / "Unity Hub.app" / "Contents" / "MacOS" / "Unity Hub"
    binary.parent.mkdir(parents=True)
    binary.touch()
    return binary


@pytest.fixture
def completed() -> Callable[..., MagicMock]:
    """Factory for stand-ins of CompletedProcess from provide.foundation.process.run."""

    def make(returncode: int = 0, stderr: str = "") -> MagicMock:
        result = MagicMock()
        result.returncode = returncode
        result.stdout = ""
        result.stderr = stderr
        return result

    return make


# 🎮🧰🔚
