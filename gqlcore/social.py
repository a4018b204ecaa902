"""An example schema of users, admins and search results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Protocol, runtime_checkable

from gqlcore.scalars import ID

SCHEMA = """
	schema {
		query: Query
	}
	
	type Query {
		admin(id: ID!, role: Role = ADMIN): Admin!
		user(id: ID!): User!
		search(text: String!): [SearchResult]!
	}
	
	interface Admin {
		id: ID!
		name: String!
		role: Role!
	}

	interface Person {
		name: String!
	}

	scalar Time	

	type User implements Admin & Person {
		id: ID!
		name: String!
		email: String!
		role: Role!
		phone: String!
		address: [String!]
		friends(page: Pagination): [User]
		createdAt: Time!
	}

	input Pagination {
	  	first: Int
	  	last: Int
	}
	
	enum Role {
		ADMIN
		USER
	}

	union SearchResult = User
"""


@dataclass(frozen=True)
class Page:
    """Pagination arguments for a list of friends."""

    first: float | None = None
    last: float | None = None


@dataclass(frozen=True)
class Contact:
    """How to reach a user."""

    email: str
    phone: str


@runtime_checkable
class Admin(Protocol):
    """Anything that can act as an admin."""

    @property
    def id(self) -> ID: ...

    @property
    def name(self) -> str: ...

    @property
    def role(self) -> str: ...


@dataclass(eq=False)
class User:
    """A user of the social example."""

    id: ID
    name: str
    role: str
    contact: Contact
    address: list[str] | None = None
    friends: list[User] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def email(self) -> str:
        return self.contact.email

    @property
    def phone(self) -> str:
        return self.contact.phone

    def friends_resolver(self, page: Page | None = None) -> list[User]:
        """Return the friends selected by ``page``.

        ``first`` is the index of the first friend, ``last`` the index after
        the last one; a ``last`` of 0 or past the end means the whole rest.
        """
        count = len(self.friends)
        start, end = 0, count
        if page is not None:
            if page.first is not None:
                start = int(page.first)
                if start > count:
                    raise ValueError("not enough users")
            if page.last is not None:
                end = int(page.last)
                if end == 0 or end > count:
                    end = count
        if start > end or start < 0 or end < 0:
            raise ValueError(f"slice bounds out of range [{start}:{end}]")
        return self.friends[start:end]


@dataclass(frozen=True)
class AdminResolver:
    """Resolves an admin and whichever concrete type stands behind it."""

    admin: Admin

    @property
    def id(self) -> ID:
        return self.admin.id

    @property
    def name(self) -> str:
        return self.admin.name

    @property
    def role(self) -> str:
        return self.admin.role

    def to_user(self) -> User | None:
        """Return the admin as a User, or None if it is not one."""
        return self.admin if isinstance(self.admin, User) else None


@dataclass(frozen=True)
class SearchResult:
    """One hit of a search."""

    result: object

    def to_user(self) -> User | None:
        """Return the hit as a User, or None if it is not one."""
        return self.result if isinstance(self.result, User) else None


def _build_users() -> tuple[User, ...]:
    contact = Contact(email="[email]", phone="[phone]")
    albus = User(ID("0x01"), "Albus Dumbledore", "ADMIN", contact,
                 ["Office @ Hogwarts", "where Horcruxes are"])
    harry = User(ID("0x02"), "Harry Potter", "USER", contact,
                 ["123 dorm room @ Hogwarts", "456 random place"])
    hermione = User(ID("0x03"), "Hermione Granger", "USER", contact,
                    ["233 dorm room @ Hogwarts", "786 @ random place"])
    ronald = User(ID("0x04"), "Ronald Weasley", "USER", contact,
                  ["411 dorm room @ Hogwarts", "981 @ random place"])
    albus.friends = [harry]
    harry.friends = [albus, hermione, ronald]
    hermione.friends = [harry, ronald]
    ronald.friends = [harry, hermione]
    return (albus, harry, hermione, ronald)


USERS: tuple[User, ...] = _build_users()
_USERS_BY_ID = {u.id: u for u in USERS}


class Resolver:
    """Root resolver of the social example."""

    def admin(self, id: str, role: str = "ADMIN") -> AdminResolver:
        found = _USERS_BY_ID.get(ID(id))
        if found is not None and found.role == role:
            return AdminResolver(found)
        raise LookupError(f"user with id={id} and role={role} does not exist")

    def user(self, id: str) -> User:
        found = _USERS_BY_ID.get(ID(id))
        if found is None:
            raise LookupError(f"user with id={id} does not exist")
        return found

    def search(self, text: str) -> list[SearchResult]:
        return [SearchResult(u) for u in USERS if text in u.name]