"""Pytest configuration and shared fixtures."""

import asyncio
import os
import sys
import tempfile
from pathlib import Path
from typing import Dict, Optional

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.enrichment.exceptions import LookupStatusError
from src.enrichment.interfaces import Dimension, LookupFailure, LookupSuccess


@pytest.fixture
def temp_db():
    """Provide a temporary database file."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = f.name
    yield f"sqlite:///{db_path}"
    # Cleanup
    try:
        os.unlink(db_path)
    except FileNotFoundError:
        pass


class FakeLookupClient:
    """Stands in for LookupClient with canned values, failures and delays."""

    def __init__(
        self,
        values: Optional[Dict[Dimension, object]] = None,
        failing: Optional[Dict[Dimension, int]] = None,
        delays: Optional[Dict[Dimension, float]] = None,
    ):
        self.values = values or {
            Dimension.AGE: 34,
            Dimension.GENDER: "female",
            Dimension.NATIONALITY: "US",
        }
        self.failing = failing or {}  # dimension -> HTTP status
        self.delays = delays or {}
        self.calls = []
        self.finished = []

    async def fetch(self, dimension, name):
        self.calls.append((dimension, name))
        await asyncio.sleep(self.delays.get(dimension, 0))
        self.finished.append(dimension)
        if dimension in self.failing:
            return LookupFailure(
                dimension=dimension,
                error=LookupStatusError(dimension.value, self.failing[dimension]),
            )
        return LookupSuccess(dimension=dimension, value=self.values[dimension])


@pytest.fixture
def fake_lookup_client():
    """Lookup client answering age=34, gender=female, nationality=US."""
    return FakeLookupClient()


@pytest.fixture
def make_lookup_client():
    """Factory for fake lookup clients with custom values, failures or delays."""
    return FakeLookupClient
