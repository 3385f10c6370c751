"""
Pytest fixtures for Mindsync journal tests.
"""
import sys
import pytest
from pathlib import Path
from datetime import date, datetime, timedelta
from dotenv import load_dotenv

# Ensure src/ is on sys.path so tests can import mood_engine.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Load environment variables
load_dotenv()

from mood_engine import Entry  # noqa: E402


# ============================================================================
# Entry Fixtures
# ============================================================================

# Fixed reference day so date arithmetic in tests never depends on the clock.
TODAY = date(2024, 6, 15)


def at(day_offset: int = 0, hour: int = 12, minute: int = 0) -> datetime:
    """Local datetime ``day_offset`` days before TODAY."""
    day = TODAY - timedelta(days=day_offset)
    return datetime(day.year, day.month, day.day, hour, minute)


_counter = {"n": 0}


def make_entry(day_offset: int = 0, label=None, hour: int = 12, **kwargs) -> Entry:
    """Build an Entry ``day_offset`` days before TODAY."""
    _counter["n"] += 1
    kwargs.setdefault("id", f"entry-{_counter['n']}")
    kwargs.setdefault("timestamp", at(day_offset, hour))
    return Entry(mood_label=label, **kwargs)


@pytest.fixture
def today():
    """Return the fixed reference day."""
    return TODAY


@pytest.fixture
def entry_factory():
    """Factory fixture building entries relative to the reference day."""
    return make_entry


@pytest.fixture
def scenario_entries():
    """Joy today, sadness yesterday, anger three days ago."""
    return [
        make_entry(0, "joy"),
        make_entry(1, "sadness"),
        make_entry(3, "anger"),
    ]


# ============================================================================
# Store and API Fixtures
# ============================================================================

@pytest.fixture
def feed():
    """Fresh entry feed, isolated from the global singleton."""
    from server.dashboard_api.services.entry_feed import EntryFeed

    return EntryFeed()


@pytest.fixture
def store(tmp_path, feed):
    """Entry store backed by a temporary SQLite file."""
    from server.dashboard_api.database import EntryStore

    return EntryStore(db_path=str(tmp_path / "journal.db"), feed=feed)


class FakeClassifier:
    """Stand-in for MoodClassifier used by API tests."""

    def __init__(self, result=None, error=None, configured=True):
        self.result = result
        self.error = error
        self.configured = configured
        self.calls = []

    async def classify(self, text):
        self.calls.append(text)
        if self.error:
            raise self.error
        return self.result


@pytest.fixture
def fake_classifier():
    """Classifier that answers "joy" with 0.91 confidence."""
    from server.dashboard_api.services.classifier import ClassificationResult

    return FakeClassifier(
        result=ClassificationResult(
            label="joy",
            score=0.91,
            raw=[[{"label": "joy", "score": 0.91}, {"label": "neutral", "score": 0.05}]],
        )
    )


@pytest.fixture
def client(store, fake_classifier):
    """TestClient with the store and classifier swapped for test doubles."""
    from fastapi.testclient import TestClient
    from server.dashboard_api.main import app
    from server.dashboard_api.database import get_entry_store
    from server.dashboard_api.services.classifier import get_classifier

    app.dependency_overrides[get_entry_store] = lambda: store
    app.dependency_overrides[get_classifier] = lambda: fake_classifier
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
