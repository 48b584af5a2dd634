"""Identifier and clock sources for parsed records."""
import secrets
import string
import time
from datetime import datetime, timezone
from typing import Callable

IdentifierSource = Callable[[], str]
Clock = Callable[[], datetime]

_BASE36 = string.digits + string.ascii_lowercase
_RANDOM_SUFFIX_LENGTH = 9


def new_identifier() -> str:
    """Return '<epoch millis>_<9 random base-36 chars>'."""
    suffix = "".join(secrets.choice(_BASE36) for _ in range(_RANDOM_SUFFIX_LENGTH))
    return f"{int(time.time() * 1000)}_{suffix}"


def utc_now() -> datetime:
    """Current time, timezone-aware UTC."""
    return datetime.now(timezone.utc)


def workout_id(new_id: IdentifierSource) -> str:
    return f"workout_{new_id()}"


def exercise_id(owner_id: str, new_id: IdentifierSource) -> str:
    return f"ex_{owner_id}_{new_id()}"
