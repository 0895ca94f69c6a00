"""Lightweight, typed Result container for explicit success/failure returns.

Motivation
----------
Card store mutations have ordinary, expected failure modes (a duplicate term,
a missing card). Those are not exceptional: the session simply reports them
and carries on. The store therefore returns a `Result[T, E]`:
- `Ok(value)` / `Err(error)` variants,
- `unwrap`, `unwrap_err` to extract the payload once the branch is known.

Exceptions stay reserved for the conditions that end a session.

Example
-------
>>> from flashdeck.core.result import ok, err, Result
>>> def parse_count(x: str) -> Result[int, str]:
...     return ok(int(x)) if x.isdigit() else err("not a number")
>>> parse_count("3").unwrap()
3
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, cast

T = TypeVar("T")
E = TypeVar("E")


class Result(Generic[T, E]):
    """Sum type representing either success (`Ok[T]`) or failure (`Err[E]`)."""

    def is_ok(self) -> bool:
        """Return ``True`` if this is an :class:`Ok` value."""
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        """Return ``True`` if this is an :class:`Err` value."""
        return isinstance(self, Err)

    def unwrap(self) -> T:
        """Return the success value, or raise ``RuntimeError`` on ``Err``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        raise RuntimeError(f"Attempted to unwrap Err: {self!r}")

    def unwrap_err(self) -> E:
        """Return the error value if ``Err``, else raise."""
        if isinstance(self, Err):
            return cast(Err[T, E], self).error
        raise RuntimeError(f"Attempted to unwrap_err on Ok: {self!r}")


@dataclass(frozen=True)
class Ok(Result[T, E]):
    """Successful result wrapping a value of type ``T``."""

    value: T


@dataclass(frozen=True)
class Err(Result[T, E]):
    """Failed result wrapping an error payload of type ``E``."""

    error: E


def ok(value: T) -> Result[T, E]:
    """Construct :class:`Ok` with better type inference at call sites."""
    return Ok(value)


def err(error: E) -> Result[T, E]:
    """Construct :class:`Err` with better type inference at call sites."""
    return Err(error)
