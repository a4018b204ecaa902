"""Custom scalar types that can be read from GraphQL input."""

from __future__ import annotations

import json
from typing import Any, Protocol, runtime_checkable

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@runtime_checkable
class Unmarshaler(Protocol):
    """A type mapped to a custom GraphQL scalar."""

    def implements_graphql_type(self, name: str) -> bool:
        """Return True if this type stands for the scalar ``name``."""
        ...

    @classmethod
    def unmarshal_graphql(cls, value: Any) -> Any:
        """Build a value of this type from GraphQL input."""
        ...


class ID(str):
    """GraphQL's ``ID`` scalar."""

    def implements_graphql_type(self, name: str) -> bool:
        return name == "ID"

    @classmethod
    def unmarshal_graphql(cls, value: Any) -> ID:
        return unmarshal_id(value)

    def to_json(self) -> str:
        """Return the ID as a JSON string literal."""
        return json.dumps(str(self), ensure_ascii=False)


def unmarshal_id(value: Any) -> ID:
    """Read an ID from a string or a 32-bit integer."""
    if isinstance(value, str):
        return ID(value)
    if (
        isinstance(value, int)
        and not isinstance(value, bool)
        and _INT32_MIN <= value <= _INT32_MAX
    ):
        return ID(str(value))
    raise TypeError(f"wrong type for ID: {type(value).__name__}")


class GraphQLMap(dict):
    """A ``Map`` scalar holding an arbitrary object."""

    def implements_graphql_type(self, name: str) -> bool:
        return name == "Map"

    @classmethod
    def unmarshal_graphql(cls, value: Any) -> GraphQLMap:
        return unmarshal_map(value)


def unmarshal_map(value: Any) -> GraphQLMap:
    """Read a Map from an object value."""
    if not isinstance(value, dict):
        raise TypeError("wrong type")
    return GraphQLMap(value)