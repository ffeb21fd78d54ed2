from datetime import datetime, timezone

import pytest

from config import Settings
from graph import Conversation
from models import Location, Place, Tag
from nearby.sessions import SessionStore

TASHKENT = Location(latitude=41.311, longitude=69.240)

# 12:00 in Tashkent (UTC+5)
OPEN_TIME = datetime(2025, 6, 1, 7, 0, tzinfo=timezone.utc)
# 02:00 in Tashkent
CLOSED_TIME = datetime(2025, 6, 1, 21, 0, tzinfo=timezone.utc)


class FakeSearch:
    """Stands in for OverpassClient; records every call."""

    def __init__(self, places: list[Place] | None = None):
        self.places = places or []
        self.calls = []

    async def search(self, location: Location, radius_km: float, tags: list[Tag]) -> list[Place]:
        self.calls.append({"location": location, "radius_km": radius_km, "tags": tags})
        return list(self.places)


def make_places(count: int) -> list[Place]:
    """Helper to create `count` distinct places around Tashkent."""
    return [
        Place(name=f"Place {i}", location=Location(latitude=41.3 + i / 1000, longitude=69.2 + i / 1000))
        for i in range(count)
    ]


def make_config(sessions: SessionStore, search=None, settings: Settings | None = None) -> dict:
    return {
        "configurable": {
            "sessions": sessions,
            "search": search or FakeSearch(),
            "settings": settings or Settings(),
        }
    }


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def sessions():
    return SessionStore()


@pytest.fixture
def search():
    return FakeSearch()


@pytest.fixture
def conversation(sessions, search, settings):
    """Conversation pinned to a time inside the operating window."""
    return Conversation(sessions, search, settings, clock=lambda: OPEN_TIME)
