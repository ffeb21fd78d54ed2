import threading

from models import Location
from nearby.sessions import SessionStore
from tests.conftest import TASHKENT


class TestSessionStore:
    def test_missing_session_is_none(self, sessions):
        assert sessions.get(1) is None

    def test_set_location_creates_session(self, sessions):
        sessions.set_location(1, TASHKENT)
        session = sessions.get(1)
        assert session.conversation_id == 1
        assert session.location == TASHKENT
        assert session.radius_km is None

    def test_set_radius_without_location(self, sessions):
        sessions.set_radius(1, 3.0)
        session = sessions.get(1)
        assert session.location is None
        assert session.radius_km == 3.0

    def test_radius_kept_on_existing_session(self, sessions):
        sessions.set_location(1, TASHKENT)
        sessions.set_radius(1, 6.0)
        assert sessions.get(1).location == TASHKENT
        assert sessions.get(1).radius_km == 6.0

    def test_repeated_writes_are_idempotent(self, sessions):
        sessions.set_location(1, TASHKENT)
        sessions.set_radius(1, 2.0)
        first = sessions.get(1)
        sessions.set_radius(1, 2.0)
        assert sessions.get(1) == first
        assert len(sessions) == 1

    def test_clear(self, sessions):
        sessions.set_location(1, TASHKENT)
        sessions.clear(1)
        assert sessions.get(1) is None

    def test_clear_unknown_is_noop(self, sessions):
        sessions.clear("nobody")
        sessions.clear("nobody")
        assert len(sessions) == 0

    def test_get_returns_copy(self, sessions):
        sessions.set_location(1, TASHKENT)
        copy = sessions.get(1)
        copy.radius_km = 99.0
        copy.location.latitude = 0.0
        assert sessions.get(1).radius_km is None
        assert sessions.get(1).location == TASHKENT

    def test_conversations_do_not_interact(self, sessions):
        sessions.set_location("a", TASHKENT)
        sessions.set_radius("b", 3.0)
        sessions.clear("b")
        assert sessions.get("a").location == TASHKENT
        assert sessions.get("b") is None

    def test_concurrent_writers(self):
        store = SessionStore()

        def writer(cid):
            for i in range(200):
                store.set_location(cid, Location(latitude=i % 90, longitude=i % 180))
                store.set_radius(cid, 3.0)

        threads = [threading.Thread(target=writer, args=(cid,)) for cid in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(store) == 20
        for cid in range(20):
            assert store.get(cid).radius_km == 3.0
