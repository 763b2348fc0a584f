"""
Module: conftest.py

Author: Michael Economou
Date: 2026-09-23

Global pytest configuration and fixtures for the cleanfy test suite.
"""

import os

import pytest

from cleanfy.models.transform_config import CaseMode, DateMode, DateStyle, TransformConfig


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "integration: tests that touch a real temporary directory tree")


@pytest.fixture
def make_tree(tmp_path):
    """Create files and directories below tmp_path.

    Names ending in "/" become directories; everything else becomes a file
    (parent directories are created as needed).
    """

    def _make(*names: str):
        for name in names:
            path = tmp_path / name
            if name.endswith("/"):
                path.mkdir(parents=True, exist_ok=True)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(name, encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture
def lower_config():
    return TransformConfig(case_mode=CaseMode.LOWER)


@pytest.fixture
def make_config():
    """Factory for TransformConfig with keyword overrides."""

    def _make(case="none", date="none", style="iso", delimiter="_"):
        return TransformConfig(
            case_mode=CaseMode(case),
            date_mode=DateMode(date),
            date_style=DateStyle(style),
            delimiter=delimiter,
        )

    return _make


@pytest.fixture
def fixed_mtime():
    """Set a file's modification time to a fixed local moment."""
    from datetime import datetime

    def _set(path, moment: datetime):
        stamp = moment.timestamp()
        os.utime(path, (stamp, stamp))
        return moment

    return _set
