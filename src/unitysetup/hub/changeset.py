#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Resolve Unity editor versions to their changeset ids.

Unity Hub needs both the version and the changeset to install an editor that
is not listed in its own release feed. The public release API is queried for
the exact version string.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Protocol

from attrs import frozen
from provide.foundation import logger
import requests

from unitysetup.config.defaults import DEFAULT_HTTP_TIMEOUT, DEFAULT_RELEASE_API_URL
from unitysetup.exceptions import ChangesetResolutionError

if TYPE_CHECKING:
    from unitysetup.config.runtime import UnitySetupRuntimeConfig

_DEEP_LINK_RE = re.compile(r"^unityhub://(?P<version>[^/]+)/(?P<changeset>[0-9a-f]+)$")


@frozen
class UnityChangeset:
    """An editor version and the changeset it was built from."""

    version: str
    changeset: str


class ChangesetLookup(Protocol):
    def resolve(self, version: str) -> UnityChangeset: ...


class ChangesetResolver:
    """Looks up changesets through Unity's release API."""

    def __init__(
        self,
        api_url: str = DEFAULT_RELEASE_API_URL,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.api_url = api_url
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: UnitySetupRuntimeConfig) -> ChangesetResolver:
        return cls(api_url=config.release_api_url, timeout=config.http_timeout)

    def resolve(self, version: str) -> UnityChangeset:
        """Resolve ``version`` to a changeset.

        Raises:
            ChangesetResolutionError: If the API is unreachable or knows no such version
        """
        logger.debug("Resolving Unity changeset", version=version, api_url=self.api_url)

        for release in self._fetch_releases(version):
            if release.get("version") != version:
                continue
            changeset = self._changeset_from_release(release)
            if changeset:
                logger.info("Resolved Unity changeset", version=version, changeset=changeset)
                return UnityChangeset(version=version, changeset=changeset)

        raise ChangesetResolutionError(f"No changeset found for Unity version {version}", version=version)

    def _fetch_releases(self, version: str) -> list[dict[str, Any]]:
        try:
            response = self.session.get(
                self.api_url,
                params={"version": version, "limit": 25},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise ChangesetResolutionError(
                f"Failed to query Unity release API for {version}: {e}", version=version, cause=e
            ) from e
        except ValueError as e:
            raise ChangesetResolutionError(
                f"Unity release API returned invalid JSON for {version}", version=version, cause=e
            ) from e

        results = payload.get("results", []) if isinstance(payload, dict) else []
        return [r for r in results if isinstance(r, dict)]

    @staticmethod
    def _changeset_from_release(release: dict[str, Any]) -> str | None:
        short_revision = release.get("shortRevision")
        if short_revision:
            return str(short_revision)

        # Older entries only carry the Hub deep link
        match = _DEEP_LINK_RE.match(str(release.get("unityHubDeepLink", "")))
        return match.group("changeset") if match else None


def get_unity_changeset(version: str, resolver: ChangesetLookup | None = None) -> UnityChangeset:
    """Resolve a changeset with the given resolver or a default one."""
    return (resolver or ChangesetResolver()).resolve(version)


# 🎮🧰🔚
