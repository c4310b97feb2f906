#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Test hub/changeset.py - version to changeset resolution."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from unitysetup.config import UnitySetupRuntimeConfig
from unitysetup.exceptions import ChangesetResolutionError
from unitysetup.hub.changeset import ChangesetResolver, UnityChangeset, get_unity_changeset


def make_session(payload: Any = None, error: Exception | None = None) -> MagicMock:
    """Session whose GET returns ``payload`` as JSON, or raises ``error``."""
    session = MagicMock()
    response = MagicMock()
    if error is not None:
        response.raise_for_status.side_effect = error
    response.json.return_value = payload
    session.get.return_value = response
    return session


@pytest.mark.unit
class TestChangesetResolver:
    """Test release API lookups."""

    def test_resolves_short_revision(self) -> None:
        """Test the exact version's shortRevision is returned."""
        session = make_session(
            {
                "results": [
                    {"version": "2022.3.10f1", "shortRevision": "ff3792e53c62"},
                ]
            }
        )
        resolver = ChangesetResolver(api_url="https://example.test/releases", timeout=5.0, session=session)

        assert resolver.resolve("2022.3.10f1") == UnityChangeset(version="2022.3.10f1", changeset="ff3792e53c62")
        session.get.assert_called_once_with(
            "https://example.test/releases",
            params={"version": "2022.3.10f1", "limit": 25},
            timeout=5.0,
        )

    def test_ignores_other_versions(self) -> None:
        """Test prefix matches from the API are skipped."""
        session = make_session(
            {
                "results": [
                    {"version": "2022.3.10f1a", "shortRevision": "000000000000"},
                    {"version": "2022.3.10f1", "shortRevision": "ff3792e53c62"},
                ]
            }
        )

        changeset = ChangesetResolver(session=session).resolve("2022.3.10f1")

        assert changeset.changeset == "ff3792e53c62"

    def test_falls_back_to_deep_link(self) -> None:
        """Test the changeset is read from the Hub deep link when shortRevision is absent."""
        session = make_session(
            {"results": [{"version": "2019.4.40f1", "unityHubDeepLink": "unityhub://2019.4.40f1/ffc62b691db5"}]}
        )

        assert ChangesetResolver(session=session).resolve("2019.4.40f1").changeset == "ffc62b691db5"

    def test_unknown_version(self) -> None:
        """Test an empty result set raises ChangesetResolutionError."""
        session = make_session({"results": []})

        with pytest.raises(ChangesetResolutionError, match="No changeset found for Unity version 9999.1.0f1"):
            ChangesetResolver(session=session).resolve("9999.1.0f1")

    def test_http_error(self) -> None:
        """Test HTTP failures raise ChangesetResolutionError."""
        session = make_session(error=requests.HTTPError("503 Service Unavailable"))

        with pytest.raises(ChangesetResolutionError) as exc_info:
            ChangesetResolver(session=session).resolve("2022.3.10f1")

        assert isinstance(exc_info.value.__cause__, requests.HTTPError)

    def test_connection_error(self) -> None:
        """Test network failures raise ChangesetResolutionError."""
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("no route to host")

        with pytest.raises(ChangesetResolutionError, match="Failed to query Unity release API"):
            ChangesetResolver(session=session).resolve("2022.3.10f1")

    def test_invalid_json(self) -> None:
        """Test a non-JSON body raises ChangesetResolutionError."""
        session = make_session()
        session.get.return_value.json.side_effect = ValueError("Expecting value")

        with pytest.raises(ChangesetResolutionError, match="invalid JSON"):
            ChangesetResolver(session=session).resolve("2022.3.10f1")

    def test_from_config(self) -> None:
        """Test API URL and timeout come from runtime config."""
        config = UnitySetupRuntimeConfig(release_api_url="https://mirror.test/releases", http_timeout=3.5)

        resolver = ChangesetResolver.from_config(config)

        assert resolver.api_url == "https://mirror.test/releases"
        assert resolver.timeout == 3.5


@pytest.mark.unit
def test_get_unity_changeset_uses_given_resolver() -> None:
    """Test the convenience function delegates to the resolver."""
    resolver = MagicMock()
    resolver.resolve.return_value = UnityChangeset(version="2021.3.1f1", changeset="3b70a0754835")

    assert get_unity_changeset("2021.3.1f1", resolver).changeset == "3b70a0754835"
    resolver.resolve.assert_called_once_with("2021.3.1f1")


# 🎮🧰🔚
