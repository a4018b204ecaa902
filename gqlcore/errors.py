"""Query errors, error locations and panic handling."""

from __future__ import annotations

import abc
import json
import re
from dataclasses import dataclass
from typing import Any

_VERB = re.compile(r"%([%vsdq])")


@dataclass(frozen=True, order=False)
class Location:
    """A position in a query document."""

    line: int
    column: int

    def before(self, other: Location) -> bool:
        """Return True if this location comes before ``other``."""
        return self.line < other.line or (
            self.line == other.line and self.column < other.column
        )

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}


class QueryError(Exception):
    """An error reported to a GraphQL client."""

    def __init__(
        self,
        message: str,
        *,
        locations: list[Location] | None = None,
        path: list[Any] | None = None,
        rule: str = "",
        resolver_error: BaseException | None = None,
        extensions: dict[str, Any] | None = None,
        err: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.locations = list(locations or [])
        self.path = list(path or [])
        self.rule = rule
        self.resolver_error = resolver_error
        self.extensions = extensions
        self.err = err
        if err is not None:
            self.__cause__ = err

    def __str__(self) -> str:
        text = f"graphql: {self.message}"
        for loc in self.locations:
            text += f" (line {loc.line}, column {loc.column})"
        return text

    def __repr__(self) -> str:
        return f"QueryError({self.message!r}, path={self.path!r})"

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form of the error, leaving out empty members."""
        result: dict[str, Any] = {"message": self.message}
        if self.locations:
            result["locations"] = [loc.to_dict() for loc in self.locations]
        if self.path:
            result["path"] = list(self.path)
        if self.extensions:
            result["extensions"] = dict(self.extensions)
        return result


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    remaining = iter(args)

    def replace(match: re.Match[str]) -> str:
        verb = match.group(1)
        if verb == "%":
            return "%"
        try:
            value = next(remaining)
        except StopIteration:
            return f"%!{verb}(MISSING)"
        if verb == "q":
            return json.dumps(str(value), ensure_ascii=False)
        if verb == "d":
            return str(int(value))
        return str(value)

    return _VERB.sub(replace, fmt)


def errorf(fmt: str, *args: Any) -> QueryError:
    """Build a QueryError from a format string.

    If the last argument is an exception, it becomes the wrapped cause.
    """
    cause = args[-1] if args and isinstance(args[-1], BaseException) else None
    return QueryError(_format(fmt, args), err=cause)


class PanicHandler(abc.ABC):
    """Turns an unexpected failure during execution into a QueryError."""

    @abc.abstractmethod
    def make_panic_error(self, ctx: Any, value: Any) -> QueryError:
        """Create the error reported for ``value``."""


class DefaultPanicHandler(PanicHandler):
    """The panic handler used unless another one is configured."""

    def make_panic_error(self, ctx: Any, value: Any) -> QueryError:
        return errorf("panic occurred: %v", value)