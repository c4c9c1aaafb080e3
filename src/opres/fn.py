#
#   ___        ____
#  / _ \ _ __ |  _ \ ___  ___
# | | | | '_ \| |_) / _ \/ __|
# | |_| | |_) |  _ <  __/\__ \
#  \___/| .__/|_| \_\___||___/
#       |_|
#

"""Option and Result containers with Rust flavoured combinators"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterator, NoReturn, TypeVar

from opres.panic import panic


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                          Types                           ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛

A = TypeVar('A')  # Success type
B = TypeVar('B')  # Error type
C = TypeVar('C')
D = TypeVar('D')
F = TypeVar('F')

# Marks an empty Option, so that None stays a valid payload
_EMPTY: Any = object()


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                          Option                          ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


class Option(Generic[A]):
    """A value that is either present (Some) or absent (Nothing).

    Options are mutable: `take`, `replace`, `get_or_insert` and
    `get_or_insert_with` rebind the receiver in place. Every other method
    leaves the receiver untouched.
    """

    __slots__ = ('_value',)

    def __init__(self, value: A = _EMPTY) -> None:
        self._value = value

    def is_some(self) -> bool:
        return self._value is not _EMPTY

    def is_none(self) -> bool:
        return not self.is_some()

    def expect(self, message: str) -> A:
        if self.is_none():
            panic(message)
        return self._value

    def unwrap(self) -> A:
        return self.expect('called Option.unwrap() on a Nothing value')

    def unwrap_or(self, default: A) -> A:
        return self._value if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], A]) -> A:
        return self._value if self.is_some() else f()

    def map(self, f: Callable[[A], C]) -> Option[C]:
        if self.is_none():
            return Nothing()
        return Some(f(self._value))

    def map_or(self, default: C, f: Callable[[A], C]) -> C:
        """Apply `f` to the payload, or return `default` untransformed."""
        return f(self._value) if self.is_some() else default

    def map_or_else(self, default: Callable[[], C], f: Callable[[A], C]) -> C:
        return f(self._value) if self.is_some() else default()

    def ok_or(self, error: B) -> Result[A, B]:
        if self.is_none():
            return Err(error)
        return Ok(self._value)

    def ok_or_else(self, f: Callable[[], B]) -> Result[A, B]:
        if self.is_none():
            return Err(f())
        return Ok(self._value)

    def ok_or_raise(self, error: BaseException | Callable[[], BaseException]) -> A:
        """Return the payload or raise `error`.

        `error` is either an exception or a zero-argument callable that
        builds one; the callable is only invoked when the option is empty.
        """
        if self.is_some():
            return self._value
        if isinstance(error, BaseException):
            raise error
        raise error()

    def and_(self, other: Option[C]) -> Option[C]:
        return other if self.is_some() else Nothing()

    def and_then(self, f: Callable[[A], Option[C]]) -> Option[C]:
        if self.is_none():
            return Nothing()
        return f(self._value)

    def filter(self, predicate: Callable[[A], bool]) -> Option[A]:
        if self.is_some() and predicate(self._value):
            return Some(self._value)
        return Nothing()

    def or_(self, other: Option[A]) -> Option[A]:
        return Some(self._value) if self.is_some() else other

    def or_else(self, f: Callable[[], Option[A]]) -> Option[A]:
        return Some(self._value) if self.is_some() else f()

    def xor(self, other: Option[A]) -> Option[A]:
        match (self.is_some(), other.is_some()):
            case (True, False):
                return Some(self._value)
            case (False, True):
                return other
            case _:
                return Nothing()

    def get_or_insert(self, value: A) -> A:
        """Store `value` if the option is empty, then return the payload.

        Like `dict.setdefault`, the returned object is the one held by the
        option: mutating it in place is visible through the option, while
        rebinding an immutable payload needs `replace`.
        """
        if self.is_none():
            self._value = value
        return self._value

    def get_or_insert_with(self, f: Callable[[], A]) -> A:
        if self.is_none():
            self._value = f()
        return self._value

    def take(self) -> Option[A]:
        old = Option(self._value)
        self._value = _EMPTY
        return old

    def replace(self, value: A) -> Option[A]:
        old = Option(self._value)
        self._value = value
        return old

    def transpose(self: Option[Result[C, D]]) -> Result[Option[C], D]:
        """Option[Result[C, D]] -> Result[Option[C], D]

        Nothing      -> Ok(Nothing)
        Some(Ok(c))  -> Ok(Some(c))
        Some(Err(d)) -> Err(d)
        """
        if self.is_none():
            return Ok(Nothing())
        match self._value:
            case Ok(value=value):
                return Ok(Some(value))
            case Err(value=error):
                return Err(error)
            case other:
                _not_nested('Option.transpose', Result, other)

    def flatten(self: Option[Option[C]]) -> Option[C]:
        if self.is_none():
            return Nothing()
        match self._value:
            case Option() as inner:
                return Option(inner._value)
            case other:
                _not_nested('Option.flatten', Option, other)

    def to_optional(self) -> A | None:
        return self._value if self.is_some() else None

    def __iter__(self) -> Iterator[A]:
        if self.is_some():
            yield self._value

    def __eq__(self, value: object, /) -> bool:
        if not isinstance(value, Option):
            return NotImplemented
        if self.is_none() or value.is_none():
            return self.is_none() and value.is_none()
        return self._value == value._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'Some({self._value!r})' if self.is_some() else 'Nothing()'


def Some(value: A) -> Option[A]:
    return Option(value)


def Nothing() -> Option[Any]:
    return Option()


def from_optional(value: A | None) -> Option[A]:
    return Nothing() if value is None else Some(value)


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                          Result                          ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


class Result(ABC, Generic[A, B]):
    """Either a success (Ok) holding A or a failure (Err) holding B."""

    __slots__ = ()
    __match_args__ = ('value',)

    @property
    @abstractmethod
    def value(self) -> A | B:
        raise NotImplementedError

    @abstractmethod
    def is_ok(self) -> bool:
        raise NotImplementedError

    def is_err(self) -> bool:
        return not self.is_ok()

    @abstractmethod
    def ok(self) -> Option[A]:
        raise NotImplementedError

    @abstractmethod
    def err(self) -> Option[B]:
        raise NotImplementedError

    @abstractmethod
    def expect(self, message: str) -> A:
        raise NotImplementedError

    @abstractmethod
    def unwrap(self) -> A:
        raise NotImplementedError

    @abstractmethod
    def expect_err(self, message: str) -> B:
        raise NotImplementedError

    @abstractmethod
    def unwrap_err(self) -> B:
        raise NotImplementedError

    @abstractmethod
    def unwrap_or(self, default: A) -> A:
        raise NotImplementedError

    @abstractmethod
    def unwrap_or_else(self, f: Callable[[B], A]) -> A:
        raise NotImplementedError

    @abstractmethod
    def map(self, f: Callable[[A], C]) -> Result[C, B]:
        raise NotImplementedError

    @abstractmethod
    def map_err(self, f: Callable[[B], F]) -> Result[A, F]:
        raise NotImplementedError

    @abstractmethod
    def and_(self, other: Result[C, B]) -> Result[C, B]:
        raise NotImplementedError

    @abstractmethod
    def and_then(self, f: Callable[[A], Result[C, B]]) -> Result[C, B]:
        raise NotImplementedError

    @abstractmethod
    def or_(self, other: Result[A, F]) -> Result[A, F]:
        raise NotImplementedError

    @abstractmethod
    def or_else(self, f: Callable[[B], Result[A, F]]) -> Result[A, F]:
        raise NotImplementedError

    @abstractmethod
    def transpose(self: Result[Option[C], B]) -> Option[Result[C, B]]:
        raise NotImplementedError

    @abstractmethod
    def flatten(self: Result[Result[C, B], B]) -> Result[C, B]:
        raise NotImplementedError


class Ok(Result[A, B]):
    __slots__ = ('_value',)

    def __init__(self, value: A) -> None:
        self._value = value

    @property
    def value(self) -> A:
        return self._value

    def is_ok(self) -> bool:
        return True

    def ok(self) -> Option[A]:
        return Some(self._value)

    def err(self) -> Option[B]:
        return Nothing()

    def expect(self, message: str) -> A:
        return self._value

    def unwrap(self) -> A:
        return self._value

    def expect_err(self, message: str) -> NoReturn:
        panic(f'{message}: {self._value}')

    def unwrap_err(self) -> NoReturn:
        panic(f'called Result.unwrap_err() on an Ok value: {self._value}')

    def unwrap_or(self, default: A) -> A:
        return self._value

    def unwrap_or_else(self, f: Callable[[B], A]) -> A:
        return self._value

    def map(self, f: Callable[[A], C]) -> Result[C, B]:
        return Ok(f(self._value))

    def map_err(self, f: Callable[[B], F]) -> Result[A, F]:
        return Ok(self._value)

    def and_(self, other: Result[C, B]) -> Result[C, B]:
        return other

    def and_then(self, f: Callable[[A], Result[C, B]]) -> Result[C, B]:
        return f(self._value)

    def or_(self, other: Result[A, F]) -> Result[A, F]:
        return Ok(self._value)

    def or_else(self, f: Callable[[B], Result[A, F]]) -> Result[A, F]:
        return Ok(self._value)

    def transpose(self: Ok[Option[C], B]) -> Option[Result[C, B]]:
        match self._value:
            case Option() as inner:
                return inner.map(Ok)
            case other:
                _not_nested('Result.transpose', Option, other)

    def flatten(self: Ok[Result[C, B], B]) -> Result[C, B]:
        match self._value:
            case Result() as inner:
                return inner
            case other:
                _not_nested('Result.flatten', Result, other)

    def __eq__(self, value: object, /) -> bool:
        return isinstance(value, Ok) and self._value == value._value

    def __hash__(self) -> int:
        return hash((Ok, self._value))

    def __repr__(self) -> str:
        return f'Ok({self._value!r})'


class Err(Result[A, B]):
    __slots__ = ('_error',)

    def __init__(self, value: B) -> None:
        self._error = value

    @property
    def value(self) -> B:
        return self._error

    def is_ok(self) -> bool:
        return False

    def ok(self) -> Option[A]:
        return Nothing()

    def err(self) -> Option[B]:
        return Some(self._error)

    def expect(self, message: str) -> NoReturn:
        panic(f'{message}: {self._error}')

    def unwrap(self) -> NoReturn:
        panic(f'called Result.unwrap() on an Err value: {self._error}')

    def expect_err(self, message: str) -> B:
        return self._error

    def unwrap_err(self) -> B:
        return self._error

    def unwrap_or(self, default: A) -> A:
        return default

    def unwrap_or_else(self, f: Callable[[B], A]) -> A:
        return f(self._error)

    def map(self, f: Callable[[A], C]) -> Result[C, B]:
        return self  # type: ignore[return-value]

    def map_err(self, f: Callable[[B], F]) -> Result[A, F]:
        return Err(f(self._error))

    def and_(self, other: Result[C, B]) -> Result[C, B]:
        return self  # type: ignore[return-value]

    def and_then(self, f: Callable[[A], Result[C, B]]) -> Result[C, B]:
        return self  # type: ignore[return-value]

    def or_(self, other: Result[A, F]) -> Result[A, F]:
        return other

    def or_else(self, f: Callable[[B], Result[A, F]]) -> Result[A, F]:
        return f(self._error)

    def transpose(self: Err[Option[C], B]) -> Option[Result[C, B]]:
        return Some(Err(self._error))

    def flatten(self: Err[Result[C, B], B]) -> Result[C, B]:
        return self  # type: ignore[return-value]

    def __eq__(self, value: object, /) -> bool:
        return isinstance(value, Err) and self._error == value._error

    def __hash__(self) -> int:
        return hash((Err, self._error))

    def __repr__(self) -> str:
        return f'Err({self._error!r})'


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                        Functions                         ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def _not_nested(method: str, expected: type, got: object) -> NoReturn:
    raise TypeError(
        f'{method}() requires a {expected.__name__} payload, '
        f'got {type(got).__name__}'
    )
