"""
Room code allocation.

Codes are 6 characters drawn uniformly from A-Z0-9. A code is only free at
the instant it is checked; the unique constraint on rooms.code is what
finally guarantees uniqueness, and room creation retries on a conflict.
"""
import random
import re
import string
from typing import Callable, Optional

from services.exceptions import RoomCodeExhausted
from utils.log import get_logger

logger = get_logger(__name__)

ROOM_CODE_LENGTH = 6
ROOM_CODE_ALPHABET = string.ascii_uppercase + string.digits
ROOM_CODE_PATTERN = re.compile(rf"[A-Z0-9]{{{ROOM_CODE_LENGTH}}}")

_random = random.SystemRandom()


def generate_room_code() -> str:
    """Generate a random 6-character room code (A-Z, 0-9)."""
    return "".join(_random.choices(ROOM_CODE_ALPHABET, k=ROOM_CODE_LENGTH))


def normalize_room_code(code: str) -> str:
    return code.strip().upper()


def is_valid_room_code(code: str) -> bool:
    return ROOM_CODE_PATTERN.fullmatch(code) is not None


def allocate_room_code(
    store,
    max_attempts: int,
    generate: Optional[Callable[[], str]] = None,
) -> str:
    """
    Return a code that no stored room holds right now.

    Args:
        store: anything with find_by_code(code) -> Room | None
        max_attempts: number of candidates to try before giving up
        generate: candidate generator, defaults to generate_room_code

    Raises:
        RoomCodeExhausted: every candidate was already taken
        sqlalchemy.exc.SQLAlchemyError: storage failures are not retried
    """
    generate = generate or generate_room_code
    for attempt in range(1, max_attempts + 1):
        code = generate()
        if store.find_by_code(code) is None:
            return code
        logger.warning(f"Room code collision on {code} (attempt {attempt}/{max_attempts})")
    raise RoomCodeExhausted(max_attempts)
