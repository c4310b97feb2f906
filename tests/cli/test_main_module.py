#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Test for running unitysetup as a module."""

import runpy
import sys

import pytest


def test_main_module_entrypoint() -> None:
    """Tests that `python -m unitysetup` runs the CLI."""
    # Click's --version flag exits with SystemExit(0)
    with pytest.raises(SystemExit) as e:
        original_argv = sys.argv
        sys.argv = ["unitysetup", "--version"]
        try:
            runpy.run_module("unitysetup", run_name="__main__")
        finally:
            sys.argv = original_argv

    assert e.value.code == 0


# 🎮🧰🔚
