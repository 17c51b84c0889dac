"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, NoReturn, TypeIs

import msgspec

from klaw_adt.errors import NothingError, UnwrapError
from klaw_adt.types.result import Err, Ok, Result

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'is_none', 'is_some']

_VARIANTS = frozenset({'Some', 'NothingType'})


class Option[T](msgspec.Struct, frozen=True, gc=False):
    """Either a present value (Some) or no value (Nothing).

    Option is closed: the only variants are ``Some`` and ``NothingType``, whose
    single instance is ``Nothing``. ``Some`` may hold any value, including
    ``None`` and other falsy values; only ``from_nullable``/``of`` treat
    ``None`` as absence.

    Examples:
        >>> Option.some('123').map(int).unwrap()
        123
        >>> Option.from_nullable(None).unwrap_or(0)
        0
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__name__ not in _VARIANTS:
            raise TypeError(f'Option is closed to Some and NothingType, cannot subclass it as {cls.__qualname__}')

    def __post_init__(self) -> None:
        if type(self) is Option:
            raise TypeError('Option cannot be instantiated directly, use Some or Nothing')

    # --- Construction ---

    @classmethod
    def some(cls, value: T) -> Option[T]:
        """Create a Some holding ``value``, even if it is falsy or None."""
        return Some(value)

    @classmethod
    def none(cls) -> Option[T]:
        """Return Nothing."""
        return Nothing

    @classmethod
    def from_nullable(cls, value: T | None) -> Option[T]:
        """Create Nothing if ``value`` is None, otherwise Some(value).

        Examples:
            >>> Option.from_nullable(0)
            Some(value=0)
            >>> Option.from_nullable(None)
            Nothing
        """
        if value is None:
            return Nothing
        return Some(value)

    from_ = from_nullable

    @classmethod
    def of(cls, action: Callable[[], T | None]) -> Option[T]:
        """Call ``action`` and wrap its result as ``from_nullable`` does.

        Exceptions raised by ``action`` propagate.
        """
        return cls.from_nullable(action())

    # --- Inspection ---

    def is_some(self) -> bool:
        """Return True if this is Some."""
        raise NotImplementedError

    def is_none(self) -> bool:
        """Return True if this is Nothing."""
        raise NotImplementedError

    # --- Unwrapping ---

    def expect(self, message: str) -> T:
        """Return the Some value, or raise UnwrapError(message) on Nothing."""
        raise NotImplementedError

    def unwrap(self) -> T:
        """Return the Some value, or raise UnwrapError on Nothing."""
        raise NotImplementedError

    def unwrap_or(self, fallback: T) -> T:
        """Return the Some value, or ``fallback`` on Nothing."""
        raise NotImplementedError

    def as_nullable(self) -> T | None:
        """Return the Some value, or None on Nothing."""
        raise NotImplementedError

    # --- Transformation ---

    def map[U](self, op: Callable[[T], U]) -> Option[U]:
        """Transform the Some value.

        Args:
            op: Function applied to the Some value. Never called on Nothing.

        Returns:
            Some(op(value)), or Nothing.
        """
        raise NotImplementedError

    def map_or[U](self, op: Callable[[T], U], else_: U | Callable[[], U]) -> Option[U]:
        """Transform the Some value, or fall back to ``else_`` on Nothing.

        Unlike ``map`` this always returns Some. If ``else_`` is callable it is
        called with no arguments to produce the fallback; otherwise it is the
        fallback itself. Use ``map_or_else`` when the fallback value is itself
        a callable.

        Args:
            op: Function applied to the Some value.
            else_: Fallback value, or zero-argument factory for it.

        Returns:
            Some(op(value)) on Some, Some(fallback) on Nothing.
        """
        raise NotImplementedError

    def map_or_else[U](self, op: Callable[[T], U], default: Callable[[], U]) -> Option[U]:
        """Like ``map_or`` but the fallback is always a zero-argument factory."""
        raise NotImplementedError

    def filter(self, pred: Callable[[T], bool]) -> Option[T]:
        """Keep the Some value only if ``pred`` accepts it.

        Args:
            pred: Predicate called with the Some value. Never called on Nothing.

        Returns:
            This Some if pred(value) is truthy, otherwise Nothing.
        """
        raise NotImplementedError

    # --- Branching ---

    def when[U](self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:
        """Call exactly one of ``some(value)`` or ``none()``.

        Returns:
            Whatever the chosen callback returned.
        """
        raise NotImplementedError

    def when_async[U](
        self,
        *,
        some: Callable[[T], Awaitable[U]],
        none: Callable[[], Awaitable[U]],
    ) -> Awaitable[U]:
        """Call exactly one of the asynchronous callbacks.

        The awaitable returned by the chosen callback is handed back without
        being awaited; await it to sequence work after the branch completes.
        The other callback is never called.
        """
        raise NotImplementedError

    # --- Conversion ---

    def ok_or[E](self, error: E | None = None) -> Result[T, E | NothingError]:
        """Convert to Result.

        Args:
            error: Error carried by the Err when this is Nothing. Defaults to
                NothingError('Option was not a Some').

        Returns:
            Ok(value) on Some, Err(error) on Nothing.
        """
        raise NotImplementedError


class Some[T](Option, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> match some:
        ...     case Some(value):
        ...         print(value)
        42
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> bool:
        """Return False since this is Some."""
        return False

    def expect(self, message: str) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the message."""
        return self.value

    def unwrap(self) -> T:
        """Return the contained Some value."""
        return self.value

    def unwrap_or(self, fallback: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the fallback."""
        return self.value

    def as_nullable(self) -> T:
        return self.value

    def map[U](self, op: Callable[[T], U]) -> Some[U]:
        return Some(op(self.value))

    def map_or[U](self, op: Callable[[T], U], else_: U | Callable[[], U]) -> Some[U]:  # noqa: ARG002
        return Some(op(self.value))

    def map_or_else[U](self, op: Callable[[T], U], default: Callable[[], U]) -> Some[U]:  # noqa: ARG002
        return Some(op(self.value))

    def filter(self, pred: Callable[[T], bool]) -> Option[T]:
        if pred(self.value):
            return self
        return Nothing

    def when[U](self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:  # noqa: ARG002
        return some(self.value)

    def when_async[U](
        self,
        *,
        some: Callable[[T], Awaitable[U]],
        none: Callable[[], Awaitable[U]],  # noqa: ARG002
    ) -> Awaitable[U]:
        return some(self.value)

    def ok_or[E](self, error: E | None = None) -> Ok[T]:  # noqa: ARG002
        """Convert to Result, returning Ok(value)."""
        return Ok(self.value)


class NothingType(Option, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the ``Nothing`` constant (or ``Option.none()``)
    instead of instantiating directly. Any NothingType instance compares equal
    to ``Nothing``.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def __repr__(self) -> str:
        return 'Nothing'

    def is_some(self) -> bool:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def expect(self, message: str) -> NoReturn:
        """Raise UnwrapError with the given message.

        Raises:
            UnwrapError: Always, since Nothing has no value.
        """
        raise UnwrapError(message)

    def unwrap(self) -> NoReturn:
        """Raise UnwrapError since Nothing has no value to unwrap."""
        raise UnwrapError('Cannot unwrap an instance of None')

    def unwrap_or[T](self, fallback: T) -> T:
        """Return the fallback since this is Nothing."""
        return fallback

    def as_nullable(self) -> None:
        return None

    def map[U](self, op: Callable[[Any], U]) -> NothingType:  # noqa: ARG002
        """Return Nothing since there's no value to map."""
        return self

    def map_or[U](self, op: Callable[[Any], U], else_: U | Callable[[], U]) -> Some[U]:  # noqa: ARG002
        if callable(else_):
            return Some(else_())
        return Some(else_)

    def map_or_else[U](self, op: Callable[[Any], U], default: Callable[[], U]) -> Some[U]:  # noqa: ARG002
        return Some(default())

    def filter(self, pred: Callable[[Any], bool]) -> NothingType:  # noqa: ARG002
        """Return Nothing since there's no value to filter."""
        return self

    def when[U](self, *, some: Callable[[Any], U], none: Callable[[], U]) -> U:  # noqa: ARG002
        return none()

    def when_async[U](
        self,
        *,
        some: Callable[[Any], Awaitable[U]],  # noqa: ARG002
        none: Callable[[], Awaitable[U]],
    ) -> Awaitable[U]:
        return none()

    def ok_or[E](self, error: E | None = None) -> Err[E | NothingError]:
        """Convert to Result, returning Err(error) or Err(NothingError())."""
        if error is None:
            return Err(NothingError())
        return Err(error)


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


def is_some[T](option: Option[T]) -> TypeIs[Some[T]]:
    """Return True if ``option`` is Some.

    Examples:
        >>> is_some(Some(0))
        True
    """
    return option.is_some()


def is_none[T](option: Option[T]) -> TypeIs[NothingType]:
    """Return True if ``option`` is Nothing.

    Examples:
        >>> is_none(Nothing)
        True
    """
    return option.is_none()
