"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, NoReturn, TypeIs

import msgspec

from klaw_adt._logging import get_logger
from klaw_adt.errors import UnwrapError

__all__ = ['Err', 'Ok', 'Result', 'is_err', 'is_ok']

logger = get_logger(__name__)

_VARIANTS = frozenset({'Ok', 'Err'})


class Result[T, E = Exception](msgspec.Struct, frozen=True, gc=False):
    """Either a success (Ok) holding a value or a failure (Err) holding an error.

    Result is closed: the only variants are ``Ok`` and ``Err``. Build instances
    through the class methods or the variant constructors directly.

    Examples:
        >>> Result.ok(42).map(lambda x: x * 2)
        Ok(value=84)
        >>> Result.of(lambda: int('nope')).is_err()
        True
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__name__ not in _VARIANTS:
            raise TypeError(f'Result is closed to Ok and Err, cannot subclass it as {cls.__qualname__}')

    def __post_init__(self) -> None:
        if type(self) is Result:
            raise TypeError('Result cannot be instantiated directly, use Ok or Err')

    # --- Construction ---

    @classmethod
    def ok(cls, value: T) -> Result[T, E]:
        """Create an Ok holding ``value``."""
        return Ok(value)

    @classmethod
    def error(cls, error: E) -> Result[T, E]:
        """Create an Err holding ``error``."""
        return Err(error)

    err = error

    @classmethod
    def of(cls, action: Callable[[], T]) -> Result[T, Exception]:
        """Run a synchronous action, capturing any exception it raises.

        The exception is wrapped as-is, whatever its type. Signals that are
        not Exception subclasses (KeyboardInterrupt, SystemExit, ...) propagate.

        Args:
            action: Zero-argument callable producing the value.

        Returns:
            Ok with the action's return value, or Err with the raised exception.
        """
        try:
            return Ok(action())
        except Exception as exc:
            return Err(exc)

    @classmethod
    async def from_async(cls, action: Callable[[], Awaitable[T]]) -> Result[T, Exception]:
        """Await an asynchronous action, capturing any exception it raises.

        Cancellation of the awaiting task propagates as CancelledError.

        Args:
            action: Zero-argument callable returning an awaitable.

        Returns:
            Ok with the awaited value, or Err with the raised exception.
        """
        try:
            return Ok(await action())
        except Exception as exc:
            return Err(exc)

    @classmethod
    def from_callback(
        cls,
        action: Callable[[Callable[[T], None], Callable[[E], None]], object],
    ) -> asyncio.Future[Result[T, E]]:
        """Bridge a resolve/reject callback pair into a future Result.

        ``action`` is called immediately with ``resolve`` and ``reject``.
        Calling ``resolve(value)`` completes the future with ``Ok(value)``;
        calling ``reject(error)`` completes it with ``Err(error)``. Both may be
        called from any thread. The first call wins: later calls are ignored
        and logged at debug level. If neither is ever called the future never
        completes, so callers should bound the wait (``asyncio.wait_for``).

        Must be called with a running event loop. An exception raised by
        ``action`` itself, before it returns, is not captured as Err: it
        propagates out of ``from_callback`` and no future is returned.

        Args:
            action: Callable receiving ``(resolve, reject)``.

        Returns:
            An asyncio.Future resolving to Ok or Err.

        Raises:
            RuntimeError: If there is no running event loop.
            Exception: Whatever ``action`` raises synchronously.
        """
        loop = asyncio.get_running_loop()
        future: asyncio.Future[Result[T, E]] = loop.create_future()

        def settle(outcome: Result[T, E]) -> None:
            if future.done():
                logger.debug('callback_already_settled', ignored=repr(outcome))
                return
            future.set_result(outcome)

        def resolve(value: T) -> None:
            loop.call_soon_threadsafe(settle, Ok(value))

        def reject(error: E) -> None:
            loop.call_soon_threadsafe(settle, Err(error))

        action(resolve, reject)
        return future

    # --- Inspection ---

    def is_ok(self) -> bool:
        """Return True if this is Ok."""
        raise NotImplementedError

    def is_err(self) -> bool:
        """Return True if this is Err."""
        raise NotImplementedError

    # --- Unwrapping ---

    def expect(self, message: str) -> T:
        """Return the Ok value, or raise UnwrapError(message) on Err."""
        raise NotImplementedError

    def expect_err(self, message: str) -> E:
        """Return the Err error, or raise UnwrapError(message) on Ok."""
        raise NotImplementedError

    def unwrap(self) -> T:
        """Return the Ok value, or raise UnwrapError on Err."""
        raise NotImplementedError

    def unwrap_err(self) -> E:
        """Return the Err error, or raise UnwrapError on Ok."""
        raise NotImplementedError

    def unwrap_or(self, fallback: T) -> T:
        """Return the Ok value, or ``fallback`` on Err."""
        raise NotImplementedError

    # --- Transformation ---

    def map[U](self, op: Callable[[T], U]) -> Result[U, E]:
        """Transform the Ok value; an Err passes through untouched.

        Args:
            op: Function applied to the Ok value. Never called on Err.

        Returns:
            Ok(op(value)), or this Err.
        """
        raise NotImplementedError

    def map_or[U](self, op: Callable[[T], U], else_: U | Callable[[], U]) -> Result[U, E]:
        """Transform the Ok value, or fall back to ``else_`` on Err.

        Unlike ``map`` this always returns Ok. If ``else_`` is callable it is
        called with no arguments to produce the fallback; otherwise it is the
        fallback itself. Use ``map_or_else`` when the fallback value is itself
        a callable.

        Args:
            op: Function applied to the Ok value.
            else_: Fallback value, or zero-argument factory for it.

        Returns:
            Ok(op(value)) on Ok, Ok(fallback) on Err.
        """
        raise NotImplementedError

    def map_or_else[U](self, op: Callable[[T], U], default: Callable[[], U]) -> Result[U, E]:
        """Like ``map_or`` but the fallback is always a zero-argument factory."""
        raise NotImplementedError

    # --- Branching ---

    def when[U](self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Call exactly one of ``ok(value)`` or ``err(error)``.

        Returns:
            Whatever the chosen callback returned.
        """
        raise NotImplementedError

    def when_async[U](
        self,
        *,
        ok: Callable[[T], Awaitable[U]],
        err: Callable[[E], Awaitable[U]],
    ) -> Awaitable[U]:
        """Call exactly one of the asynchronous callbacks.

        The awaitable returned by the chosen callback is handed back without
        being awaited; await it to sequence work after the branch completes.
        The other callback is never called.
        """
        raise NotImplementedError


class Ok[T](Result, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> bool:
        """Return False since this is Ok."""
        return False

    def expect(self, message: str) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def expect_err(self, message: str) -> NoReturn:
        """Raise UnwrapError with the given message since this is Ok."""
        raise UnwrapError(message)

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise UnwrapError since Ok has no error to unwrap."""
        raise UnwrapError('Cannot unwrap an instance of Ok')

    def unwrap_or(self, fallback: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback."""
        return self.value

    def map[U](self, op: Callable[[T], U]) -> Ok[U]:
        return Ok(op(self.value))

    def map_or[U](self, op: Callable[[T], U], else_: U | Callable[[], U]) -> Ok[U]:  # noqa: ARG002
        return Ok(op(self.value))

    def map_or_else[U](self, op: Callable[[T], U], default: Callable[[], U]) -> Ok[U]:  # noqa: ARG002
        return Ok(op(self.value))

    def when[U](self, *, ok: Callable[[T], U], err: Callable[[Any], U]) -> U:  # noqa: ARG002
        return ok(self.value)

    def when_async[U](
        self,
        *,
        ok: Callable[[T], Awaitable[U]],
        err: Callable[[Any], Awaitable[U]],  # noqa: ARG002
    ) -> Awaitable[U]:
        return ok(self.value)


class Err[E](Result, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    The error is carried exactly as given; it is never inspected or converted.

    Examples:
        >>> err = Err(ValueError('boom'))
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> bool:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def _fail(self, message: str) -> NoReturn:
        if isinstance(self.error, BaseException):
            raise UnwrapError(message) from self.error
        raise UnwrapError(message)

    def expect(self, message: str) -> NoReturn:
        """Raise UnwrapError with the given message, chained to the error."""
        self._fail(message)

    def expect_err(self, message: str) -> E:  # noqa: ARG002
        """Return the contained error, ignoring the message."""
        return self.error

    def unwrap(self) -> NoReturn:
        """Raise UnwrapError since Err has no Ok value to unwrap."""
        self._fail('Cannot unwrap an instance of Err')

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def unwrap_or[T](self, fallback: T) -> T:
        """Return the fallback since this is Err."""
        return fallback

    def map[U](self, op: Callable[[Any], U]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged since this is Err."""
        return self

    def map_or[U](self, op: Callable[[Any], U], else_: U | Callable[[], U]) -> Ok[U]:  # noqa: ARG002
        if callable(else_):
            return Ok(else_())
        return Ok(else_)

    def map_or_else[U](self, op: Callable[[Any], U], default: Callable[[], U]) -> Ok[U]:  # noqa: ARG002
        return Ok(default())

    def when[U](self, *, ok: Callable[[Any], U], err: Callable[[E], U]) -> U:  # noqa: ARG002
        return err(self.error)

    def when_async[U](
        self,
        *,
        ok: Callable[[Any], Awaitable[U]],  # noqa: ARG002
        err: Callable[[E], Awaitable[U]],
    ) -> Awaitable[U]:
        return err(self.error)


def is_ok[T, E](result: Result[T, E]) -> TypeIs[Ok[T]]:
    """Return True if ``result`` is Ok.

    Examples:
        >>> is_ok(Ok(1))
        True
    """
    return result.is_ok()


def is_err[T, E](result: Result[T, E]) -> TypeIs[Err[E]]:
    """Return True if ``result`` is Err.

    Examples:
        >>> is_err(Err(ValueError()))
        True
    """
    return result.is_err()
