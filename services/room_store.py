from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.room import Room
from models.message import Message
from services.exceptions import DuplicateRoomCode


class RoomStore:
    """
    Storage for rooms and their messages, bound to one SQLAlchemy session.

    Appending a message inserts one row instead of rewriting the room, so
    concurrent appends to the same room never overwrite each other.
    SQLAlchemy errors other than a duplicate code propagate to the caller.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_code(self, code: str) -> Optional[Room]:
        return self.db.query(Room).filter(Room.code == code).first()

    def insert(self, code: str) -> Room:
        room = Room(code=code)
        self.db.add(room)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateRoomCode(code) from e
        self.db.refresh(room)
        return room

    def append_message(self, room: Room, username: str, text: str) -> Optional[Message]:
        """Insert a message; returns None if the room was deleted meanwhile."""
        message = Message(room_id=room.id, username=username, text=text)
        self.db.add(message)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            return None
        self.db.refresh(message)
        return message

    def list_messages(self, room: Room) -> List[Message]:
        return (
            self.db.query(Message)
            .filter(Message.room_id == room.id)
            .order_by(Message.id)
            .all()
        )

    def delete_by_code(self, code: str) -> Optional[Room]:
        room = self.find_by_code(code)
        if not room:
            return None
        self.db.delete(room)
        self.db.commit()
        return room
