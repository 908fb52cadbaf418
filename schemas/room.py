from pydantic import BaseModel


class RoomResponse(BaseModel):
    roomCode: str


class RoomDeletedResponse(BaseModel):
    success: bool = True
    message: str = "Room deleted"
