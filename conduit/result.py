"""
Two-variant result type returned by every store-facing operation.

An operation either succeeds with ``Ok(value)`` or fails with
``Err(error)``; failures never cross the boundary as raised exceptions.
``Either[E, T]`` reads left-to-right like the error/value pair it holds::

    async def exists(slug: Slug) -> Either[Unexpected, bool]: ...

    result = await store.exists(slug)
    if result.is_err():
        logger.warning(result.error.description)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class UnwrapError(Exception):
    """Raised by ``Err.unwrap()``; carries the error value."""

    def __init__(self, error) -> None:
        super().__init__(f"called unwrap() on Err: {error!r}")
        self.error = error


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))

    def map_err(self, fn: Callable) -> "Ok[T]":
        return self

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable) -> "Err[E]":
        return self

    def map_err(self, fn: Callable[[E], F]) -> "Err[F]":
        return Err(fn(self.error))

    def unwrap(self) -> NoReturn:
        raise UnwrapError(self.error)


Either = Union[Err[E], Ok[T]]
