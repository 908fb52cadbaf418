from fastapi import APIRouter, Depends

from routes.responses import error_response, get_room_store
from schemas.message import (
    MessageCreate,
    MessageCreatedResponse,
    MessageListResponse,
    MessageResponse,
)
from services import rooms as room_service
from services.room_store import RoomStore

router = APIRouter(prefix="/api/rooms")


@router.post("/{room_code}/messages", response_model=MessageCreatedResponse)
def post_message(room_code: str, payload: MessageCreate, store: RoomStore = Depends(get_room_store)):
    result = room_service.post_message(store, room_code, payload.username, payload.message)
    if not result.ok:
        return error_response(result.error)
    return MessageCreatedResponse(message=MessageResponse.model_validate(result.value))


@router.get("/{room_code}/messages", response_model=MessageListResponse)
def list_messages(room_code: str, store: RoomStore = Depends(get_room_store)):
    result = room_service.list_messages(store, room_code)
    if not result.ok:
        return error_response(result.error)
    return MessageListResponse(
        messages=[MessageResponse.model_validate(m) for m in result.value]
    )
