#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build environment handed from host setup to the build scripts.

On macOS the build scripts run directly on the host, so every build parameter
they read has to be present as an environment variable. ``BuildEnvironment``
holds those variables as a value; ``apply`` and ``write_github_env`` publish it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
import os
from pathlib import Path
import uuid

from attrs import frozen
from provide.foundation import logger

from unitysetup.parameters import BuildParameters

# Environment variable -> BuildParameters attribute, in publication order
PARAMETER_VARIABLES: tuple[tuple[str, str], ...] = (
    ("UNITY_VERSION", "editor_version"),
    ("UNITY_SERIAL", "unity_serial"),
    ("PROJECT_PATH", "project_path"),
    ("BUILD_TARGET", "target_platform"),
    ("BUILD_NAME", "build_name"),
    ("BUILD_PATH", "build_path"),
    ("BUILD_FILE", "build_file"),
    ("BUILD_METHOD", "build_method"),
    ("VERSION", "build_version"),
    ("ANDROID_VERSION_CODE", "android_version_code"),
    ("ANDROID_KEYSTORE_NAME", "android_keystore_name"),
    ("ANDROID_KEYSTORE_BASE64", "android_keystore_base64"),
    ("ANDROID_KEYSTORE_PASS", "android_keystore_pass"),
    ("ANDROID_KEYALIAS_NAME", "android_keyalias_name"),
    ("ANDROID_KEYALIAS_PASS", "android_keyalias_pass"),
    ("ANDROID_TARGET_SDK_VERSION", "android_target_sdk_version"),
    ("ANDROID_SDK_MANAGER_PARAMETERS", "android_sdk_manager_parameters"),
    ("ANDROID_APP_BUNDLE", "android_app_bundle"),
    ("EXPORT_AS_GOOGLE_ANDROID_PROJECT", "export_as_google_android_project"),
    ("CUSTOM_PARAMETERS", "custom_parameters"),
    ("CHOWN_FILES_TO", "chown_files_to"),
)

VARIABLE_NAMES: tuple[str, ...] = ("ACTION_FOLDER", *(name for name, _ in PARAMETER_VARIABLES))

SECRET_VARIABLES = frozenset(
    {
        "UNITY_SERIAL",
        "ANDROID_KEYSTORE_BASE64",
        "ANDROID_KEYSTORE_PASS",
        "ANDROID_KEYALIAS_PASS",
    }
)

REDACTED = "***"


def _to_env_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return "" if value is None else str(value)


@frozen
class BuildEnvironment(Mapping[str, str]):
    """Ordered, immutable set of environment variables for the build scripts."""

    variables: tuple[tuple[str, str], ...]

    @classmethod
    def from_parameters(cls, params: BuildParameters, action_folder: str | Path) -> BuildEnvironment:
        values = [("ACTION_FOLDER", str(action_folder))]
        values.extend((name, _to_env_value(getattr(params, attr))) for name, attr in PARAMETER_VARIABLES)
        return cls(variables=tuple(values))

    def __getitem__(self, key: str) -> str:
        for name, value in self.variables:
            if name == key:
                return value
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self.variables)

    def __len__(self) -> int:
        return len(self.variables)

    def as_dict(self) -> dict[str, str]:
        return dict(self.variables)

    def redacted(self) -> dict[str, str]:
        """Copy with secret values masked; empty secrets stay empty."""
        return {
            name: (REDACTED if name in SECRET_VARIABLES and value else value) for name, value in self.variables
        }

    def apply(self, environ: MutableMapping[str, str] | None = None) -> None:
        """Assign every variable into ``environ`` (``os.environ`` by default)."""
        target = os.environ if environ is None else environ
        for name, value in self.variables:
            target[name] = value
        logger.debug("Published build environment", count=len(self.variables))

    def write_github_env(self, path: str | Path) -> None:
        """Append the variables to a GitHub Actions ``GITHUB_ENV`` file.

        Later steps of the job run in new processes and only see variables
        written there. Multi-line values use the heredoc form.
        """
        lines = []
        for name, value in self.variables:
            if "\n" in value or "\r" in value:
                delimiter = f"ghadelimiter_{uuid.uuid4()}"
                lines.append(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
            else:
                lines.append(f"{name}={value}\n")

        with Path(path).open("a", encoding="utf-8") as handle:
            handle.writelines(lines)
        logger.debug("Wrote build environment to GITHUB_ENV", path=str(path), count=len(lines))


def set_environment_variables(
    params: BuildParameters,
    action_folder: str | Path,
    environ: MutableMapping[str, str] | None = None,
) -> BuildEnvironment:
    """Build the environment for ``params`` and publish it into ``environ``."""
    environment = BuildEnvironment.from_parameters(params, action_folder)
    environment.apply(environ)
    return environment


# 🎮🧰🔚
