"""
Test fixtures for workout-plan-ingestor.

Provides deterministic id/clock sources, sample plan text and a FastAPI
test client.
"""

import itertools
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Repo root: .../workout-plan-ingestor
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import workout_plan_ingestor...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from workout_plan_ingestor.main import app


FIXED_NOW = datetime(2024, 3, 4, 9, 30, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Deterministic identity
# ---------------------------------------------------------------------------


@pytest.fixture
def new_id():
    """Id source yielding '1', '2', '3', ..."""
    counter = itertools.count(1)
    return lambda: str(next(counter))


@pytest.fixture
def clock():
    """Clock frozen at FIXED_NOW."""
    return lambda: FIXED_NOW


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def client() -> TestClient:
    """Per-test FastAPI TestClient."""
    return TestClient(app)


# ---------------------------------------------------------------------------
# Sample Data Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def two_day_plan_text() -> str:
    """Two-day plan with header, equipment and several categories."""
    return (
        "GYM DAILY - IN SEASON WEEK 11\n"
        "MONDAY (Hinge/Push)\n"
        "Equipment: Barbell, Bands\n"
        "Warmup: Jumping Jacks x 30 sec\n"
        "BLOCK 1: Back Squat x 5\n"
        "Cool Down: Child's Pose x 60 sec\n"
        "TUESDAY (Sprint Conditioning)\n"
        "BLOCK 1: Sprints x 6\n"
    )


@pytest.fixture
def single_day_text() -> str:
    """Plan text without weekday markers."""
    return (
        "Warmup:\n"
        "x 2\n"
        "Inchworm x 5\n"
        "World's Greatest Stretch x 3 each\n"
        "BLOCK 1:\n"
        "E2MOM x 4 Rounds\n"
        "Trap Bar Deadlift x 5\n"
        "Box Jump x 3\n"
        "Rest x 90 sec\n"
    )
