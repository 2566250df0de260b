"""Pytest configuration for dataknobs_validator tests."""

import random
import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dataknobs_validator import v  # noqa: E402


@pytest.fixture
def seeded_rng():
    """Deterministic random source for date generation."""
    return random.Random(1234)


@pytest.fixture
def user_schema():
    """Nested object schema shared by composite tests."""
    return v.object({
        "name": v.string().trim().min(2),
        "age": v.number().integer().min(0),
        "email": v.string().email().optional(),
        "tags": v.array(v.string()).optional(),
    })
