"""Shared fixtures: throwaway vaults on disk."""

import json
from datetime import date

import pytest

from ontask.adapters.clock import FixedClock
from ontask.adapters.file_vault import FileVault
from ontask.core.dates import TodayMatcher


@pytest.fixture
def today():
    return date(2024, 1, 15)


@pytest.fixture
def matcher(today):
    return TodayMatcher(FixedClock(today))


@pytest.fixture
def make_vault(tmp_path):
    """Write {relative_path: content} into a vault directory and return a FileVault."""

    def _make(files: dict[str, str]) -> FileVault:
        for relative, content in files.items():
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return FileVault(tmp_path)

    return _make


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON settings file inside the vault."""

    def _write(relative: str, data) -> None:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")

    return _write
