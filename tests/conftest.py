"""Shared pytest fixtures for datespin tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from datetime import datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from datespin.core.model import BoundedSteppableDateTime
from datespin.domain.units import StepUnit


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no DATESPIN_* overrides.

    Keeps config walk-up discovery from finding files outside the test.
    """
    for key in list(os.environ):
        if key.startswith("DATESPIN_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    CLI invocations reconfigure logging against the runner's stderr.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    ds = logging.getLogger("datespin")
    ds_level = ds.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    ds.setLevel(ds_level)


@pytest.fixture
def bounded_model() -> BoundedSteppableDateTime:
    """Jan 2 2024 between Jan 1 and Jan 3, stepping by days."""
    return BoundedSteppableDateTime(
        datetime(2024, 1, 2),
        minimum=datetime(2024, 1, 1),
        maximum=datetime(2024, 1, 3),
        unit=StepUnit.DAYS,
    )
