"""Cache hints that resolvers give while a request runs."""

from __future__ import annotations

import contextvars
import enum
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import timedelta


class Scope(enum.IntEnum):
    """Who may cache a response."""

    PUBLIC = 0
    PRIVATE = 1


@dataclass(frozen=True)
class Hint:
    """How long, and by whom, something may be cached."""

    max_age: timedelta | None = None
    scope: Scope = Scope.PUBLIC

    def __str__(self) -> str:
        """Return the HTTP Cache-Control value of the hint."""
        if self.max_age is None:
            raise ValueError("hint has no max age")
        name = "private" if self.scope is Scope.PRIVATE else "public"
        return f"{name}, max-age={int(self.max_age.total_seconds())}"


def ttl(seconds: float) -> timedelta:
    """Return a cache duration of ``seconds``."""
    return timedelta(seconds=seconds)


def resolve_hints(hints: Iterable[Hint]) -> Hint:
    """Combine hints into the most restrictive one."""
    min_age: timedelta | None = None
    scope = Scope.PUBLIC
    for hint in hints:
        if hint.scope is Scope.PRIVATE:
            scope = Scope.PRIVATE
        if hint.max_age is not None and (min_age is None or hint.max_age < min_age):
            min_age = hint.max_age
    return Hint(max_age=min_age if min_age is not None else timedelta(0), scope=scope)


class HintCollector:
    """Gathers the hints given during one request."""

    def __init__(self) -> None:
        self._hints: list[Hint] = []
        self._closed = False

    def add(self, hint: Hint) -> None:
        if self._closed:
            raise RuntimeError("hint collector is closed")
        self._hints.append(hint)

    def resolve(self) -> Hint:
        return resolve_hints(self._hints)

    def _close(self) -> None:
        self._closed = True


_current: contextvars.ContextVar[HintCollector | None] = contextvars.ContextVar(
    "gqlcore_cache_hints", default=None
)


def add_hint(hint: Hint) -> None:
    """Record a hint for the current request; ignored outside ``hintable``."""
    collector = _current.get()
    if collector is not None:
        collector.add(hint)


@contextmanager
def hintable() -> Iterator[HintCollector]:
    """Collect the hints given inside the block."""
    collector = HintCollector()
    token = _current.set(collector)
    try:
        yield collector
    finally:
        _current.reset(token)
        collector._close()