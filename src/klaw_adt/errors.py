"""Error types raised by, or carried inside, the klaw-adt containers."""

from __future__ import annotations

__all__ = [
    'NotLeftError',
    'NotRightError',
    'NothingError',
    'UnwrapError',
]


class UnwrapError(RuntimeError):
    """An unwrap-family call was made against the inactive variant.

    Raised by every ``expect*``/``unwrap*`` method without an ``_or`` suffix.
    Subclasses RuntimeError so ``except RuntimeError`` keeps catching unwrap
    failures.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# --- Default conversion payloads ---


class NothingError(Exception):
    """Default error carried by ``Option.ok_or()`` when the option is Nothing."""

    def __init__(self, message: str = 'Option was not a Some') -> None:
        self.message = message
        super().__init__(message)


class NotLeftError(Exception):
    """Default error carried by ``Either.as_result_left()`` on a Right."""

    def __init__(self, message: str = 'Either was not a Left') -> None:
        self.message = message
        super().__init__(message)


class NotRightError(Exception):
    """Default error carried by ``Either.as_result_right()`` on a Left."""

    def __init__(self, message: str = 'Either was not a Right') -> None:
        self.message = message
        super().__init__(message)
