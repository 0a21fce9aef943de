"""Shared pytest configuration for the claimflow test suite."""

from __future__ import annotations

import pytest

SETTING_VARS = (
    "CLAIMFLOW_AMOUNT_POLICY",
    "CLAIMFLOW_STRICT_PERIODS",
    "CLAIMFLOW_LABEL_FORMAT",
    "CLAIMFLOW_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test against default settings unless it opts in."""

    for name in SETTING_VARS:
        monkeypatch.delenv(name, raising=False)
