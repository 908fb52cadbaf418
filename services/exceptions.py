"""
Room storage and allocation errors.

These never reach the HTTP layer directly: the room service turns them into
tagged results.
"""


class DuplicateRoomCode(Exception):
    """Insert rejected because another live room already holds the code."""

    def __init__(self, code: str):
        super().__init__(f"Room code {code} is already taken")
        self.code = code


class RoomCodeExhausted(Exception):
    """No free room code was found within the attempt bound."""

    def __init__(self, attempts: int):
        super().__init__(f"No free room code after {attempts} attempts")
        self.attempts = attempts
