"""Shared fixtures for releaser tests."""

from __future__ import annotations

import pytest

from releaser.lookup.table import ReleaserTable


@pytest.fixture
def fixture_table() -> ReleaserTable:
    """Provide a small lookup table independent of the packaged data."""

    return ReleaserTable.from_mappings(
        names={
            "acid-productions": "ACiD Productions",
            "coop": "TDT / TRSi",
            "trsi": "TRSi",
            "tdu_jam": "TDU Jam!",
            "hashx": "Hash X",
        },
        lowercase=["scenet"],
        uppercase=["beer", "anz-ftp"],
        initialisms={
            "the-dream-team": ["TDT"],
            "razor-1911": ["RZR", "Razor"],
            "razordox": ["RZR", "Razor"],
            "the-firm": ["FiRM", "FRM"],
        },
    )
