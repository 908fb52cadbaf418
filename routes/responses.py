from fastapi import Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from database.connection import get_db
from services.results import ErrorKind
from services.room_store import RoomStore

ERROR_RESPONSES = {
    ErrorKind.VALIDATION: (400, "Invalid input"),
    ErrorKind.NOT_FOUND: (404, "Room not found"),
    ErrorKind.STORAGE: (500, "Server error"),
    ErrorKind.EXHAUSTED: (503, "Could not allocate a room code"),
}


def error_response(kind: ErrorKind) -> JSONResponse:
    status_code, message = ERROR_RESPONSES[kind]
    return JSONResponse(status_code=status_code, content={"error": message})


def get_room_store(db: Session = Depends(get_db)) -> RoomStore:
    return RoomStore(db)
