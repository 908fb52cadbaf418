"""
Room operations

Each operation does one lookup or write through the RoomStore and returns a
Result. Expected failures (bad input, unknown room, storage down, no free
code) come back as tagged errors; the routes decide the HTTP status.
"""
from typing import Callable, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from config import settings
from models.message import Message
from models.room import Room
from services.exceptions import DuplicateRoomCode, RoomCodeExhausted
from services.results import ErrorKind, Result
from services import room_codes
from services.room_codes import allocate_room_code, is_valid_room_code, normalize_room_code
from services.room_store import RoomStore
from utils.log import get_logger

logger = get_logger(__name__)


def create_room(
    store: RoomStore,
    max_attempts: Optional[int] = None,
    generate: Optional[Callable[[], str]] = None,
) -> Result[Room]:
    """
    Create a room under a freshly allocated code.

    A duplicate-code conflict on insert means another request took the code
    between our check and our write. It is retried with a new candidate.
    Every candidate drawn, whether it collided on lookup or on insert, counts
    against the same max_attempts.
    """
    max_attempts = max_attempts or settings.ROOM_CODE_MAX_ATTEMPTS
    generate = generate or room_codes.generate_room_code
    attempts = 0

    def candidate() -> str:
        nonlocal attempts
        attempts += 1
        return generate()

    try:
        while attempts < max_attempts:
            code = allocate_room_code(store, max_attempts - attempts, candidate)
            try:
                room = store.insert(code)
            except DuplicateRoomCode:
                logger.warning(f"Room code {code} taken concurrently, retrying")
                continue
            logger.info(f"Room created: {room.code}")
            return Result.success(room)
        raise RoomCodeExhausted(max_attempts)
    except RoomCodeExhausted as e:
        logger.error(str(e))
        return Result.failure(ErrorKind.EXHAUSTED)
    except SQLAlchemyError:
        logger.exception("Storage error while creating room")
        return Result.failure(ErrorKind.STORAGE)


def get_room(store: RoomStore, code: str) -> Result[Room]:
    code = normalize_room_code(code)
    if not is_valid_room_code(code):
        return Result.failure(ErrorKind.NOT_FOUND)
    try:
        room = store.find_by_code(code)
    except SQLAlchemyError:
        logger.exception(f"Storage error while loading room {code}")
        return Result.failure(ErrorKind.STORAGE)
    if not room:
        return Result.failure(ErrorKind.NOT_FOUND)
    return Result.success(room)


def post_message(
    store: RoomStore,
    code: str,
    username: Optional[str],
    text: Optional[str],
) -> Result[Message]:
    """
    Append a message to a room.

    The username must be present and the text must contain something other
    than whitespace. The text is stored as sent; the timestamp is assigned
    by the server.
    """
    if not username or not text or not text.strip():
        return Result.failure(ErrorKind.VALIDATION)

    found = get_room(store, code)
    if not found.ok:
        return Result.failure(found.error)

    try:
        message = store.append_message(found.value, username, text)
    except SQLAlchemyError:
        logger.exception(f"Storage error while posting to room {code}")
        return Result.failure(ErrorKind.STORAGE)
    if message is None:
        return Result.failure(ErrorKind.NOT_FOUND)
    return Result.success(message)


def list_messages(store: RoomStore, code: str) -> Result[List[Message]]:
    found = get_room(store, code)
    if not found.ok:
        return Result.failure(found.error)

    try:
        return Result.success(store.list_messages(found.value))
    except SQLAlchemyError:
        logger.exception(f"Storage error while listing room {code}")
        return Result.failure(ErrorKind.STORAGE)


def delete_room(store: RoomStore, code: str) -> Result[Room]:
    code = normalize_room_code(code)
    if not is_valid_room_code(code):
        return Result.failure(ErrorKind.NOT_FOUND)
    try:
        room = store.delete_by_code(code)
    except SQLAlchemyError:
        logger.exception(f"Storage error while deleting room {code}")
        return Result.failure(ErrorKind.STORAGE)
    if not room:
        return Result.failure(ErrorKind.NOT_FOUND)
    logger.info(f"Room deleted: {code}")
    return Result.success(room)
