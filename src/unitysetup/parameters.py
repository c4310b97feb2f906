#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build parameters consumed by the macOS bootstrapper.

The record is immutable. ``BuildParameters.from_inputs`` reads it from GitHub
Actions style ``INPUT_*`` variables, filling in the values the action derives
(build name, build path, build file, Android SDK manager parameters).
"""

from __future__ import annotations

from collections.abc import Mapping
import os
from pathlib import Path
import re

from attrs import field, frozen
from provide.foundation import logger

from unitysetup.config.defaults import DEFAULT_BUILD_ROOT, DEFAULT_PROJECT_PATH, GITHUB_INPUT_PREFIX
from unitysetup.config.runtime import parse_flag
from unitysetup.exceptions import ParameterError

PROJECT_VERSION_FILE = Path("ProjectSettings") / "ProjectVersion.txt"
_EDITOR_VERSION_RE = re.compile(r"^m_EditorVersion:\s*(\S+)\s*$", re.MULTILINE)
_SDK_LEVEL_RE = re.compile(r"(\d+)$")

WINDOWS_TARGETS = {"StandaloneWindows", "StandaloneWindows64"}


@frozen
class BuildParameters:
    """Immutable build and signing settings for a single CI job."""

    editor_version: str
    target_platform: str
    unity_serial: str = field(default="", repr=False)
    project_path: str = DEFAULT_PROJECT_PATH
    build_name: str = ""
    build_path: str = ""
    build_file: str = ""
    build_method: str = ""
    build_version: str = ""
    android_version_code: str = ""
    android_keystore_name: str = ""
    android_keystore_base64: str = field(default="", repr=False)
    android_keystore_pass: str = field(default="", repr=False)
    android_keyalias_name: str = ""
    android_keyalias_pass: str = field(default="", repr=False)
    android_target_sdk_version: str = ""
    android_sdk_manager_parameters: str = ""
    android_app_bundle: bool = False
    export_as_google_android_project: bool = False
    custom_parameters: str = ""
    chown_files_to: str = ""

    @classmethod
    def from_inputs(cls, environ: Mapping[str, str] | None = None) -> BuildParameters:
        """Load parameters from ``INPUT_*`` variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Fully derived BuildParameters

        Raises:
            ParameterError: If a required input is missing or a flag is malformed
        """
        env = os.environ if environ is None else environ

        def get_input(name: str, default: str = "") -> str:
            return env.get(f"{GITHUB_INPUT_PREFIX}{name.upper()}", default).strip()

        def get_flag(name: str) -> bool:
            raw = get_input(name)
            try:
                return parse_flag(raw)
            except ValueError as e:
                raise ParameterError(f"Input '{name}' must be a boolean, got {raw!r}") from e

        target_platform = get_input("targetPlatform")
        if not target_platform:
            raise ParameterError("Missing required input 'targetPlatform'")

        project_path = get_input("projectPath") or DEFAULT_PROJECT_PATH
        editor_version = get_input("unityVersion")
        if not editor_version or editor_version == "auto":
            editor_version = read_project_editor_version(Path(project_path))

        android_app_bundle = get_flag("androidAppBundle")
        export_as_google_android_project = get_flag("androidExportAsGoogleProject")
        build_name = get_input("buildName") or target_platform
        builds_root = get_input("buildsPath") or DEFAULT_BUILD_ROOT
        target_sdk = get_input("androidTargetSdkVersion")

        params = cls(
            editor_version=editor_version,
            target_platform=target_platform,
            unity_serial=env.get("UNITY_SERIAL", ""),
            project_path=project_path,
            build_name=build_name,
            build_path=f"{builds_root}/{target_platform}",
            build_file=derive_build_file(
                build_name, target_platform, android_app_bundle, export_as_google_android_project
            ),
            build_method=get_input("buildMethod"),
            build_version=get_input("version"),
            android_version_code=get_input("androidVersionCode"),
            android_keystore_name=get_input("androidKeystoreName"),
            android_keystore_base64=get_input("androidKeystoreBase64"),
            android_keystore_pass=get_input("androidKeystorePass"),
            android_keyalias_name=get_input("androidKeyaliasName"),
            android_keyalias_pass=get_input("androidKeyaliasPass"),
            android_target_sdk_version=target_sdk,
            android_sdk_manager_parameters=derive_sdk_manager_parameters(target_sdk),
            android_app_bundle=android_app_bundle,
            export_as_google_android_project=export_as_google_android_project,
            custom_parameters=get_input("customParameters"),
            chown_files_to=get_input("chownFilesTo"),
        )
        logger.debug(
            "Loaded build parameters",
            version=params.editor_version,
            platform=params.target_platform,
            build_path=params.build_path,
        )
        return params


def read_project_editor_version(project_path: Path) -> str:
    """Read the editor version a Unity project was last saved with."""
    version_file = project_path / PROJECT_VERSION_FILE
    try:
        content = version_file.read_text(encoding="utf-8")
    except OSError as e:
        raise ParameterError(
            f"Input 'unityVersion' not set and {version_file} could not be read", cause=e
        ) from e

    match = _EDITOR_VERSION_RE.search(content)
    if not match:
        raise ParameterError(f"No m_EditorVersion entry found in {version_file}")
    return match.group(1)


def derive_build_file(
    build_name: str,
    target_platform: str,
    android_app_bundle: bool = False,
    export_as_google_android_project: bool = False,
) -> str:
    """Name of the artifact Unity writes into the build path."""
    if target_platform in WINDOWS_TARGETS:
        return f"{build_name}.exe"
    if target_platform == "Android" and not export_as_google_android_project:
        return f"{build_name}.aab" if android_app_bundle else f"{build_name}.apk"
    return build_name


def derive_sdk_manager_parameters(target_sdk_version: str) -> str:
    """Translate ``AndroidApiLevel31`` (or ``31``) into an sdkmanager package path."""
    match = _SDK_LEVEL_RE.search(target_sdk_version)
    if not match:
        return ""
    return f"platforms;android-{match.group(1)}"


# 🎮🧰🔚
