"""An example schema whose resolver reports errors with extensions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gqlcore.scalars import ID

SCHEMA = """
	schema {
		query: Query
	}
	type Query {
		droid(id: ID!): Droid!
	}
	# An autonomous mechanical character in the Star Wars universe
	type Droid {
		# The ID of the droid
		id: ID!
		# What others call this droid
		name: String!
	}
"""


@dataclass(frozen=True)
class _Droid:
    id: ID
    name: str


_DROIDS = [
    _Droid(ID("2000"), "C-3PO"),
    _Droid(ID("2001"), "R2-D2"),
]

_DROID_DATA = {droid.id: droid for droid in _DROIDS}


class DroidNotFoundError(Exception):
    """Raised when no droid has the requested ID."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"error [{self.code}]: {self.message}"

    def extensions(self) -> dict[str, Any]:
        """Return the extra data reported with the error."""
        return {"code": self.code, "message": self.message}


@dataclass(frozen=True)
class DroidResolver:
    """Resolves the fields of a droid."""

    _droid: _Droid

    @property
    def id(self) -> ID:
        return self._droid.id

    @property
    def name(self) -> str:
        return self._droid.name


class Resolver:
    """Root resolver of the custom errors example."""

    def droid(self, id: str) -> DroidResolver:
        found = _DROID_DATA.get(ID(id))
        if found is None:
            raise DroidNotFoundError(
                "NotFound", "This is not the droid you are looking for"
            )
        return DroidResolver(found)