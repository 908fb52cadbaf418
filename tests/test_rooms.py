"""
Tests for room routes
"""
import re

from models.room import Room


class TestCreateRoom:
    """Test room creation endpoint"""

    def test_create_room(self, client):
        response = client.post("/api/rooms")
        assert response.status_code == 201
        data = response.json()
        assert re.fullmatch(r"[A-Z0-9]{6}", data["roomCode"])

    def test_created_room_is_stored(self, client, db_session):
        code = client.post("/api/rooms").json()["roomCode"]

        room = db_session.query(Room).filter(Room.code == code).first()
        assert room is not None
        assert room.messages == []

    def test_codes_are_unique(self, client):
        codes = [client.post("/api/rooms").json()["roomCode"] for _ in range(25)]
        assert len(set(codes)) == len(codes)

    def test_create_room_skips_taken_code(self, client, monkeypatch):
        candidates = iter(["AAAAAA", "AAAAAA", "BBBBBB"])
        monkeypatch.setattr("services.room_codes.generate_room_code", lambda: next(candidates))

        first = client.post("/api/rooms")
        second = client.post("/api/rooms")

        assert first.json()["roomCode"] == "AAAAAA"
        assert second.status_code == 201
        assert second.json()["roomCode"] == "BBBBBB"

    def test_insert_conflict_retries_with_new_code(self, client, db_session, monkeypatch):
        from services.room_store import RoomStore

        candidates = iter(["AAAAAA", "AAAAAA", "BBBBBB"])
        monkeypatch.setattr("services.room_codes.generate_room_code", lambda: next(candidates))
        assert client.post("/api/rooms").json()["roomCode"] == "AAAAAA"

        # Lookup misses the stored room, so only the unique constraint catches it
        monkeypatch.setattr(RoomStore, "find_by_code", lambda self, code: None)
        response = client.post("/api/rooms")

        assert response.status_code == 201
        assert response.json()["roomCode"] == "BBBBBB"
        assert db_session.query(Room).count() == 2

    def test_create_room_exhausted(self, client, monkeypatch):
        monkeypatch.setattr("services.room_codes.generate_room_code", lambda: "AAAAAA")
        assert client.post("/api/rooms").status_code == 201

        response = client.post("/api/rooms")
        assert response.status_code == 503
        assert response.json() == {"error": "Could not allocate a room code"}


class TestGetRoom:
    """Test room lookup endpoint"""

    def test_get_room(self, client):
        code = client.post("/api/rooms").json()["roomCode"]

        response = client.get(f"/api/rooms/{code}")
        assert response.status_code == 200
        assert response.json() == {"roomCode": code}

    def test_get_room_lowercase_code(self, client):
        code = client.post("/api/rooms").json()["roomCode"]

        response = client.get(f"/api/rooms/{code.lower()}")
        assert response.status_code == 200
        assert response.json() == {"roomCode": code}

    def test_get_missing_room(self, client, db_session):
        response = client.get("/api/rooms/ZZZZZZ")
        assert response.status_code == 404
        assert response.json() == {"error": "Room not found"}
        assert db_session.query(Room).count() == 0

    def test_get_malformed_code(self, client):
        response = client.get("/api/rooms/NOT-A-CODE")
        assert response.status_code == 404
        assert response.json() == {"error": "Room not found"}


class TestDeleteRoom:
    """Test room deletion endpoint"""

    def test_delete_room(self, client):
        code = client.post("/api/rooms").json()["roomCode"]

        response = client.delete(f"/api/rooms/{code}")
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Room deleted"}

        assert client.get(f"/api/rooms/{code}").status_code == 404

    def test_delete_room_twice(self, client):
        code = client.post("/api/rooms").json()["roomCode"]
        client.delete(f"/api/rooms/{code}")

        response = client.delete(f"/api/rooms/{code}")
        assert response.status_code == 404

    def test_delete_missing_room(self, client, db_session):
        response = client.delete("/api/rooms/ZZZZZZ")
        assert response.status_code == 404
        assert db_session.query(Room).count() == 0

    def test_delete_room_removes_messages(self, client, db_session):
        from models.message import Message

        code = client.post("/api/rooms").json()["roomCode"]
        client.post(f"/api/rooms/{code}/messages", json={"username": "a", "message": "hi"})

        client.delete(f"/api/rooms/{code}")
        assert db_session.query(Message).count() == 0


class TestRoomLifecycle:
    """End to end flow over the public endpoints"""

    def test_full_flow(self, client):
        create = client.post("/api/rooms")
        assert create.status_code == 201
        code = create.json()["roomCode"]
        assert len(code) == 6

        assert client.get(f"/api/rooms/{code}").json() == {"roomCode": code}

        sent = client.post(f"/api/rooms/{code}/messages", json={"username": "a", "message": "hi"})
        assert sent.status_code == 200
        assert sent.json()["message"]["text"] == "hi"

        listing = client.get(f"/api/rooms/{code}/messages")
        assert listing.status_code == 200
        messages = listing.json()["messages"]
        assert len(messages) == 1
        assert messages[0]["username"] == "a"
        assert messages[0]["text"] == "hi"

        assert client.delete(f"/api/rooms/{code}").status_code == 200
        assert client.get(f"/api/rooms/{code}").status_code == 404
