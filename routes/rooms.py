from fastapi import APIRouter, Depends

from routes.responses import error_response, get_room_store
from schemas.room import RoomResponse, RoomDeletedResponse
from services import rooms as room_service
from services.room_store import RoomStore

router = APIRouter(prefix="/api/rooms")


@router.post("", response_model=RoomResponse, status_code=201)
def create_room(store: RoomStore = Depends(get_room_store)):
    result = room_service.create_room(store)
    if not result.ok:
        return error_response(result.error)
    return RoomResponse(roomCode=result.value.code)


@router.get("/{room_code}", response_model=RoomResponse)
def get_room(room_code: str, store: RoomStore = Depends(get_room_store)):
    result = room_service.get_room(store, room_code)
    if not result.ok:
        return error_response(result.error)
    return RoomResponse(roomCode=result.value.code)


@router.delete("/{room_code}", response_model=RoomDeletedResponse)
def delete_room(room_code: str, store: RoomStore = Depends(get_room_store)):
    result = room_service.delete_room(store, room_code)
    if not result.ok:
        return error_response(result.error)
    return RoomDeletedResponse()
