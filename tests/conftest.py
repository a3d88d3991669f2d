"""Pytest configuration and shared fixtures."""

import logging
import os
import stat
from pathlib import Path

import pytest

FAKE_TERRAFORM = """#!/bin/sh
if [ "$1" = "version" ]; then
    echo "Terraform v0.8.5"
    echo "on linux_amd64"
    exit 0
fi
for arg in "$@"; do
    if [ "$arg" = "-fail" ]; then
        echo "Error: boom" >&2
        exit 1
    fi
done
echo "$@"
"""


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo logger configuration done by Terraform(debug=True) or the CLI."""
    yield
    package_logger = logging.getLogger("pyterraform")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def isolated_config(monkeypatch, tmp_path):
    """Point config lookups at an empty temporary tree.

    Returns
    -------
    Path
        The pyterraform user config directory (not created).
    """
    for key in list(os.environ):
        if key.startswith("PYTERRAFORM_") or key == "LOG_LEVEL":
            monkeypatch.delenv(key)

    xdg_home = tmp_path / "xdg"
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg_home))
    monkeypatch.chdir(project_dir)
    return xdg_home / "pyterraform"


@pytest.fixture
def fake_terraform(tmp_path) -> Path:
    """Create an executable standing in for terraform.

    It echoes its arguments, prints a version for ``version``, and writes
    to stderr when given ``-fail``.

    Returns
    -------
    Path
        Path to the executable script.
    """
    script = tmp_path / "bin" / "terraform"
    script.parent.mkdir()
    script.write_text(FAKE_TERRAFORM)
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def work_dir(tmp_path) -> Path:
    """Provide an empty terraform working directory."""
    path = tmp_path / "infra"
    path.mkdir()
    return path


@pytest.fixture
def mock_config():
    """Standard test configuration.

    Returns
    -------
    dict
        Configuration as produced by ConfigLoader.load().
    """
    return {
        "terraform_binary": "terraform",
        "work_dir": "/infra",
        "no_color": False,
        "debug": False,
        "vars": {},
        "log_format": "console",
        "_meta": {"config_sources": []},
    }
