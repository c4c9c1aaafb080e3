"""Branching helpers on plain booleans"""

from __future__ import annotations

from typing import Callable, TypeVar

from opres.fn import Nothing, Option, Some

A = TypeVar('A')


def map_bool(flag: bool, f: Callable[[bool], A]) -> A:
    return f(flag)


def then(flag: bool, f: Callable[[], A]) -> Option[A]:
    """Some(f()) when `flag` is true, otherwise Nothing() without calling `f`."""
    return Some(f()) if flag else Nothing()


def otherwise(flag: bool, f: Callable[[], A]) -> Option[A]:
    return Nothing() if flag else Some(f())


def if_then_else(flag: bool, then_fn: Callable[[], A], else_fn: Callable[[], A]) -> A:
    if flag:
        return then_fn()
    return else_fn()
