"""Shared fixtures for core module tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def settings_yaml(tmp_path: Path) -> Path:
    """A settings file enabling the median filter on a two-channel image."""
    p = tmp_path / "settings.yaml"
    p.write_text(
        "channels:\n"
        "  ch1: GFP\n"
        "  ch2: DAPI\n"
        "  ch3: none\n"
        "median_filter: true\n"
        "median_size: 5\n"
    )
    return p
