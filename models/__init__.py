from database.connection import Base
from models.room import Room
from models.message import Message

__all__ = ["Base", "Room", "Message"]
