"""Either type: Left[L] | Right[R] for values of one of two types."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, NoReturn, TypeIs

import msgspec

from klaw_adt.errors import NotLeftError, NotRightError, UnwrapError
from klaw_adt.types.option import Nothing, NothingType, Option, Some
from klaw_adt.types.result import Err, Ok, Result

__all__ = ['Either', 'Left', 'Right', 'is_left', 'is_right']

_VARIANTS = frozenset({'Left', 'Right'})


class Either[L, R](msgspec.Struct, frozen=True, gc=False):
    """A value that is either a Left of type L or a Right of type R.

    Either is closed: the only variants are ``Left`` and ``Right``. Neither
    side means success or failure; L and R may even be the same type.

    Every directional operation comes in a left and a right flavor. The
    ``_or`` flavors of the directional mappers always produce the mapped
    side, switching sides when they fall back:

        >>> Either.right(1).map_left_or(str, 'fallback')
        Left(value='fallback')

    Conversions to Option and Result project the requested side:

        >>> Either.left(5).as_option_left()
        Some(value=5)
        >>> Either.left(5).as_option_right()
        Nothing
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__name__ not in _VARIANTS:
            raise TypeError(f'Either is closed to Left and Right, cannot subclass it as {cls.__qualname__}')

    def __post_init__(self) -> None:
        if type(self) is Either:
            raise TypeError('Either cannot be instantiated directly, use Left or Right')

    # --- Construction ---

    @classmethod
    def left(cls, value: L) -> Either[L, R]:
        """Create a Left holding ``value``."""
        return Left(value)

    @classmethod
    def right(cls, value: R) -> Either[L, R]:
        """Create a Right holding ``value``."""
        return Right(value)

    # --- Inspection ---

    def is_left(self) -> bool:
        """Return True if this is Left."""
        raise NotImplementedError

    def is_right(self) -> bool:
        """Return True if this is Right."""
        raise NotImplementedError

    def as_union(self) -> L | R:
        """Return the payload of whichever side is active."""
        raise NotImplementedError

    # --- Unwrapping ---

    def expect_left(self, message: str) -> L:
        """Return the Left value, or raise UnwrapError(message) on Right."""
        raise NotImplementedError

    def expect_right(self, message: str) -> R:
        """Return the Right value, or raise UnwrapError(message) on Left."""
        raise NotImplementedError

    def unwrap_left(self) -> L:
        """Return the Left value, or raise UnwrapError on Right."""
        raise NotImplementedError

    def unwrap_right(self) -> R:
        """Return the Right value, or raise UnwrapError on Left."""
        raise NotImplementedError

    def unwrap_left_or(self, fallback: L) -> L:
        """Return the Left value, or ``fallback`` on Right."""
        raise NotImplementedError

    def unwrap_right_or(self, fallback: R) -> R:
        """Return the Right value, or ``fallback`` on Left."""
        raise NotImplementedError

    # --- Transformation ---

    def map[L2, R2](self, left_op: Callable[[L], L2], right_op: Callable[[R], R2]) -> Either[L2, R2]:
        """Transform whichever side is active, keeping the side.

        Exactly one of ``left_op`` and ``right_op`` is called.
        """
        raise NotImplementedError

    def map_left[L2](self, op: Callable[[L], L2]) -> Either[L2, R]:
        """Transform a Left value; a Right passes through unchanged."""
        raise NotImplementedError

    def map_left_or[L2](self, op: Callable[[L], L2], fallback: L2) -> Either[L2, R]:
        """Transform a Left value, or turn a Right into Left(fallback).

        Args:
            op: Function applied to the Left value. Never called on Right.
            fallback: Value wrapped in a Left when this is Right.

        Returns:
            Always a Left.
        """
        raise NotImplementedError

    def map_right[R2](self, op: Callable[[R], R2]) -> Either[L, R2]:
        """Transform a Right value; a Left passes through unchanged."""
        raise NotImplementedError

    def map_right_or[R2](self, op: Callable[[R], R2], fallback: R2) -> Either[L, R2]:
        """Transform a Right value, or turn a Left into Right(fallback).

        Args:
            op: Function applied to the Right value. Never called on Left.
            fallback: Value wrapped in a Right when this is Left.

        Returns:
            Always a Right.
        """
        raise NotImplementedError

    # --- Branching ---

    def when[U](self, *, left: Callable[[L], U], right: Callable[[R], U]) -> U:
        """Call exactly one of ``left(value)`` or ``right(value)``.

        Returns:
            Whatever the chosen callback returned.
        """
        raise NotImplementedError

    def when_async[U](
        self,
        *,
        left: Callable[[L], Awaitable[U]],
        right: Callable[[R], Awaitable[U]],
    ) -> Awaitable[U]:
        """Call exactly one of the asynchronous callbacks.

        The awaitable returned by the chosen callback is handed back without
        being awaited; await it to sequence work after the branch completes.
        The other callback is never called.
        """
        raise NotImplementedError

    # --- Conversion to Option ---

    def as_option_left(self) -> Option[L]:
        """Return Some(value) for a Left, Nothing for a Right."""
        raise NotImplementedError

    def as_option_right(self) -> Option[R]:
        """Return Some(value) for a Right, Nothing for a Left."""
        raise NotImplementedError

    def as_option_left_or(self, fallback: L) -> Option[L]:
        """Return Some(value) for a Left, Some(fallback) for a Right."""
        raise NotImplementedError

    def as_option_right_or(self, fallback: R) -> Option[R]:
        """Return Some(value) for a Right, Some(fallback) for a Left."""
        raise NotImplementedError

    def filter_left(self, pred: Callable[[L], bool]) -> Option[L]:
        """Return Some(value) for a Left accepted by ``pred``, else Nothing.

        ``pred`` is never called on a Right.
        """
        raise NotImplementedError

    def filter_right(self, pred: Callable[[R], bool]) -> Option[R]:
        """Return Some(value) for a Right accepted by ``pred``, else Nothing.

        ``pred`` is never called on a Left.
        """
        raise NotImplementedError

    # --- Conversion to Result ---

    def as_result_left[E](self, error: E | None = None) -> Result[L, E | NotLeftError]:
        """Convert to Result with the Left side as success.

        Args:
            error: Error carried by the Err when this is Right. Defaults to
                NotLeftError('Either was not a Left').

        Returns:
            Ok(value) on Left, Err(error) on Right.
        """
        raise NotImplementedError

    def as_result_right[E](self, error: E | None = None) -> Result[R, E | NotRightError]:
        """Convert to Result with the Right side as success.

        Args:
            error: Error carried by the Err when this is Left. Defaults to
                NotRightError('Either was not a Right').

        Returns:
            Ok(value) on Right, Err(error) on Left.
        """
        raise NotImplementedError


class Left[L](Either, frozen=True, gc=False):
    """Left variant of Either containing a value of type L.

    Examples:
        >>> Left(1).map_left(lambda x: x + 1)
        Left(value=2)
        >>> Left(1).unwrap_right_or(0)
        0
    """

    value: L

    def is_left(self) -> TypeIs[Left[L]]:
        """Return True since this is Left."""
        return True

    def is_right(self) -> bool:
        """Return False since this is Left."""
        return False

    def as_union(self) -> L:
        return self.value

    def expect_left(self, message: str) -> L:  # noqa: ARG002
        """Return the contained Left value, ignoring the message."""
        return self.value

    def expect_right(self, message: str) -> NoReturn:
        """Raise UnwrapError with the given message since this is Left."""
        raise UnwrapError(message)

    def unwrap_left(self) -> L:
        return self.value

    def unwrap_right(self) -> NoReturn:
        """Raise UnwrapError since Left has no Right value."""
        raise UnwrapError('Cannot unwrap an instance of Left')

    def unwrap_left_or(self, fallback: L) -> L:  # noqa: ARG002
        return self.value

    def unwrap_right_or[R](self, fallback: R) -> R:
        return fallback

    def map[L2, R2](self, left_op: Callable[[L], L2], right_op: Callable[[Any], R2]) -> Left[L2]:  # noqa: ARG002
        return Left(left_op(self.value))

    def map_left[L2](self, op: Callable[[L], L2]) -> Left[L2]:
        return Left(op(self.value))

    def map_left_or[L2](self, op: Callable[[L], L2], fallback: L2) -> Left[L2]:  # noqa: ARG002
        return Left(op(self.value))

    def map_right[R2](self, op: Callable[[Any], R2]) -> Left[L]:  # noqa: ARG002
        """Return self unchanged since this is Left."""
        return self

    def map_right_or[R2](self, op: Callable[[Any], R2], fallback: R2) -> Right[R2]:  # noqa: ARG002
        """Switch sides: return Right(fallback) since this is Left."""
        return Right(fallback)

    def when[U](self, *, left: Callable[[L], U], right: Callable[[Any], U]) -> U:  # noqa: ARG002
        return left(self.value)

    def when_async[U](
        self,
        *,
        left: Callable[[L], Awaitable[U]],
        right: Callable[[Any], Awaitable[U]],  # noqa: ARG002
    ) -> Awaitable[U]:
        return left(self.value)

    def as_option_left(self) -> Some[L]:
        return Some(self.value)

    def as_option_right(self) -> NothingType:
        return Nothing

    def as_option_left_or(self, fallback: L) -> Some[L]:  # noqa: ARG002
        return Some(self.value)

    def as_option_right_or[R](self, fallback: R) -> Some[R]:
        return Some(fallback)

    def filter_left(self, pred: Callable[[L], bool]) -> Option[L]:
        if pred(self.value):
            return Some(self.value)
        return Nothing

    def filter_right(self, pred: Callable[[Any], bool]) -> NothingType:  # noqa: ARG002
        return Nothing

    def as_result_left[E](self, error: E | None = None) -> Ok[L]:  # noqa: ARG002
        return Ok(self.value)

    def as_result_right[E](self, error: E | None = None) -> Err[E | NotRightError]:
        if error is None:
            return Err(NotRightError())
        return Err(error)


class Right[R](Either, frozen=True, gc=False):
    """Right variant of Either containing a value of type R.

    Examples:
        >>> Right(1).map_right(lambda x: x + 1)
        Right(value=2)
        >>> Right(123).filter_left(lambda x: True)
        Nothing
    """

    value: R

    def is_left(self) -> bool:
        """Return False since this is Right."""
        return False

    def is_right(self) -> TypeIs[Right[R]]:
        """Return True since this is Right."""
        return True

    def as_union(self) -> R:
        return self.value

    def expect_left(self, message: str) -> NoReturn:
        """Raise UnwrapError with the given message since this is Right."""
        raise UnwrapError(message)

    def expect_right(self, message: str) -> R:  # noqa: ARG002
        """Return the contained Right value, ignoring the message."""
        return self.value

    def unwrap_left(self) -> NoReturn:
        """Raise UnwrapError since Right has no Left value."""
        raise UnwrapError('Cannot unwrap an instance of Right')

    def unwrap_right(self) -> R:
        return self.value

    def unwrap_left_or[L](self, fallback: L) -> L:
        return fallback

    def unwrap_right_or(self, fallback: R) -> R:  # noqa: ARG002
        return self.value

    def map[L2, R2](self, left_op: Callable[[Any], L2], right_op: Callable[[R], R2]) -> Right[R2]:  # noqa: ARG002
        return Right(right_op(self.value))

    def map_left[L2](self, op: Callable[[Any], L2]) -> Right[R]:  # noqa: ARG002
        """Return self unchanged since this is Right."""
        return self

    def map_left_or[L2](self, op: Callable[[Any], L2], fallback: L2) -> Left[L2]:  # noqa: ARG002
        """Switch sides: return Left(fallback) since this is Right."""
        return Left(fallback)

    def map_right[R2](self, op: Callable[[R], R2]) -> Right[R2]:
        return Right(op(self.value))

    def map_right_or[R2](self, op: Callable[[R], R2], fallback: R2) -> Right[R2]:  # noqa: ARG002
        return Right(op(self.value))

    def when[U](self, *, left: Callable[[Any], U], right: Callable[[R], U]) -> U:  # noqa: ARG002
        return right(self.value)

    def when_async[U](
        self,
        *,
        left: Callable[[Any], Awaitable[U]],  # noqa: ARG002
        right: Callable[[R], Awaitable[U]],
    ) -> Awaitable[U]:
        return right(self.value)

    def as_option_left(self) -> NothingType:
        return Nothing

    def as_option_right(self) -> Some[R]:
        return Some(self.value)

    def as_option_left_or[L](self, fallback: L) -> Some[L]:
        return Some(fallback)

    def as_option_right_or(self, fallback: R) -> Some[R]:  # noqa: ARG002
        return Some(self.value)

    def filter_left(self, pred: Callable[[Any], bool]) -> NothingType:  # noqa: ARG002
        return Nothing

    def filter_right(self, pred: Callable[[R], bool]) -> Option[R]:
        if pred(self.value):
            return Some(self.value)
        return Nothing

    def as_result_left[E](self, error: E | None = None) -> Err[E | NotLeftError]:
        if error is None:
            return Err(NotLeftError())
        return Err(error)

    def as_result_right[E](self, error: E | None = None) -> Ok[R]:  # noqa: ARG002
        return Ok(self.value)


def is_left[L, R](either: Either[L, R]) -> TypeIs[Left[L]]:
    """Return True if ``either`` is Left."""
    return either.is_left()


def is_right[L, R](either: Either[L, R]) -> TypeIs[Right[R]]:
    """Return True if ``either`` is Right."""
    return either.is_right()
