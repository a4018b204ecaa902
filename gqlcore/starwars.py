"""An example schema and resolvers built on Star Wars characters."""

from __future__ import annotations

import base64
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from gqlcore.scalars import ID

SCHEMA = """
	schema {
		query: Query
		mutation: Mutation
	}
	# The query type, represents all of the entry points into our object graph
	type Query {
		hero(episode: Episode = NEWHOPE): Character
		reviews(episode: Episode!): [Review]!
		search(text: String!): [SearchResult]!
		character(id: ID!): Character
		droid(id: ID!): Droid
		human(id: ID!): Human
		starship(id: ID!): Starship
	}
	# The mutation type, represents all updates we can make to our data
	type Mutation {
		createReview(episode: Episode!, review: ReviewInput!): Review
	}
	# The episodes in the Star Wars trilogy
	enum Episode {
		# Star Wars Episode IV: A New Hope, released in 1977.
		NEWHOPE
		# Star Wars Episode V: The Empire Strikes Back, released in 1980.
		EMPIRE
		# Star Wars Episode VI: Return of the Jedi, released in 1983.
		JEDI
	}
	# A character from the Star Wars universe
	interface Character {
		# The ID of the character
		id: ID!
		# The name of the character
		name: String!
		# The friends of the character, or an empty list if they have none
		friends: [Character]
		# The friends of the character exposed as a connection with edges
		friendsConnection(first: Int, after: ID): FriendsConnection!
		# The movies this character appears in
		appearsIn: [Episode!]!
	}
	# Units of height
	enum LengthUnit {
		# The standard unit around the world
		METER
		# Primarily used in the United States
		FOOT
	}
	# A humanoid creature from the Star Wars universe
	type Human implements Character {
		# The ID of the human
		id: ID!
		# What this human calls themselves
		name: String!
		# Height in the preferred unit, default is meters
		height(unit: LengthUnit = METER): Float!
		# Mass in kilograms, or null if unknown
		mass: Float
		# This human's friends, or an empty list if they have none
		friends: [Character]
		# The friends of the human exposed as a connection with edges
		friendsConnection(first: Int, after: ID): FriendsConnection!
		# The movies this human appears in
		appearsIn: [Episode!]!
		# A list of starships this person has piloted, or an empty list if none
		starships: [Starship]
	}
	# An autonomous mechanical character in the Star Wars universe
	type Droid implements Character {
		# The ID of the droid
		id: ID!
		# What others call this droid
		name: String!
		# This droid's friends, or an empty list if they have none
		friends: [Character]
		# The friends of the droid exposed as a connection with edges
		friendsConnection(first: Int, after: ID): FriendsConnection!
		# The movies this droid appears in
		appearsIn: [Episode!]!
		# This droid's primary function
		primaryFunction: String
	}
	# A connection object for a character's friends
	type FriendsConnection {
		# The total number of friends
		totalCount: Int!
		# The edges for each of the character's friends.
		edges: [FriendsEdge]
		# A list of the friends, as a convenience when edges are not needed.
		friends: [Character]
		# Information for paginating this connection
		pageInfo: PageInfo!
	}
	# An edge object for a character's friends
	type FriendsEdge {
		# A cursor used for pagination
		cursor: ID!
		# The character represented by this friendship edge
		node: Character
	}
	# Information for paginating this connection
	type PageInfo {
		startCursor: ID
		endCursor: ID
		hasNextPage: Boolean!
	}
	# Represents a review for a movie
	type Review {
		# The number of stars this review gave, 1-5
		stars: Int!
		# Comment about the movie
		commentary: String
	}
	# The input object sent when someone is creating a new review
	input ReviewInput {
		# 0-5 stars
		stars: Int!
		# Comment about the movie, optional
		commentary: String
	}
	type Starship {
		# The ID of the starship
		id: ID!
		# The name of the starship
		name: String!
		# Length of the starship, along the longest axis
		length(unit: LengthUnit = METER): Float!
	}
	union SearchResult = Human | Droid | Starship
"""

_FEET_PER_METER = 3.28084
_ALL_EPISODES = ("NEWHOPE", "EMPIRE", "JEDI")


@dataclass(frozen=True)
class Human:
    """A humanoid character."""

    id: ID
    name: str
    friends: tuple[ID, ...]
    appears_in: tuple[str, ...]
    height: float
    mass: int
    starships: tuple[ID, ...] = ()


@dataclass(frozen=True)
class Droid:
    """A mechanical character."""

    id: ID
    name: str
    friends: tuple[ID, ...]
    appears_in: tuple[str, ...]
    primary_function: str


@dataclass(frozen=True)
class Starship:
    """A starship with its length in meters."""

    id: ID
    name: str
    length: float


@dataclass(frozen=True)
class Review:
    """A review of an episode."""

    stars: int
    commentary: str | None = None


def _ids(*values: str) -> tuple[ID, ...]:
    return tuple(ID(v) for v in values)


HUMANS: tuple[Human, ...] = (
    Human(ID("1000"), "Luke Skywalker", _ids("1002", "1003", "2000", "2001"),
          _ALL_EPISODES, 1.72, 77, _ids("3001", "3003")),
    Human(ID("1001"), "Darth Vader", _ids("1004"), _ALL_EPISODES, 2.02, 136,
          _ids("3002")),
    Human(ID("1002"), "Han Solo", _ids("1000", "1003", "2001"), _ALL_EPISODES,
          1.8, 80, _ids("3000", "3003")),
    Human(ID("1003"), "Leia Organa", _ids("1000", "1002", "2000", "2001"),
          _ALL_EPISODES, 1.5, 49),
    Human(ID("1004"), "Wilhuff Tarkin", _ids("1001"), ("NEWHOPE",), 1.8, 0),
)

DROIDS: tuple[Droid, ...] = (
    Droid(ID("2000"), "C-3PO", _ids("1000", "1002", "1003", "2001"),
          _ALL_EPISODES, "Protocol"),
    Droid(ID("2001"), "R2-D2", _ids("1000", "1002", "1003"),
          _ALL_EPISODES, "Astromech"),
)

STARSHIPS: tuple[Starship, ...] = (
    Starship(ID("3000"), "Millennium Falcon", 34.37),
    Starship(ID("3001"), "X-Wing", 12.5),
    Starship(ID("3002"), "TIE Advanced x1", 9.2),
    Starship(ID("3003"), "Imperial shuttle", 20.0),
)

_HUMAN_DATA = {h.id: h for h in HUMANS}
_DROID_DATA = {d.id: d for d in DROIDS}
_STARSHIP_DATA = {s.id: s for s in STARSHIPS}


def convert_length(meters: float, unit: str) -> float:
    """Convert a length in meters to ``unit`` (METER or FOOT)."""
    if unit == "METER":
        return meters
    if unit == "FOOT":
        return meters * _FEET_PER_METER
    raise ValueError("invalid unit")


def encode_cursor(index: int) -> ID:
    """Return the opaque cursor for the item at ``index``."""
    return ID(base64.b64encode(f"cursor{index + 1}".encode()).decode("ascii"))


def _decode_cursor(cursor: str) -> int:
    raw = base64.b64decode(cursor, validate=True).decode()
    return int(raw.removeprefix("cursor"))


@dataclass(frozen=True)
class HumanResolver:
    """Resolves the fields of a human."""

    human: Human

    @property
    def id(self) -> ID:
        return self.human.id

    @property
    def name(self) -> str:
        return self.human.name

    @property
    def appears_in(self) -> list[str]:
        return list(self.human.appears_in)

    def height(self, unit: str = "METER") -> float:
        return convert_length(self.human.height, unit)

    def mass(self) -> float | None:
        """Return the mass in kilograms, or None when it is unknown."""
        return float(self.human.mass) if self.human.mass else None

    def friends(self) -> list[Character]:
        return resolve_characters(self.human.friends)

    def friends_connection(
        self, first: int | None = None, after: str | None = None
    ) -> FriendsConnection:
        return FriendsConnection.create(self.human.friends, first, after)

    def starships(self) -> list[StarshipResolver]:
        return [StarshipResolver(_STARSHIP_DATA[i]) for i in self.human.starships]


@dataclass(frozen=True)
class DroidResolver:
    """Resolves the fields of a droid."""

    droid: Droid

    @property
    def id(self) -> ID:
        return self.droid.id

    @property
    def name(self) -> str:
        return self.droid.name

    @property
    def appears_in(self) -> list[str]:
        return list(self.droid.appears_in)

    def friends(self) -> list[Character]:
        return resolve_characters(self.droid.friends)

    def friends_connection(
        self, first: int | None = None, after: str | None = None
    ) -> FriendsConnection:
        return FriendsConnection.create(self.droid.friends, first, after)

    def primary_function(self) -> str | None:
        return self.droid.primary_function or None


@dataclass(frozen=True)
class StarshipResolver:
    """Resolves the fields of a starship."""

    starship: Starship

    @property
    def id(self) -> ID:
        return self.starship.id

    @property
    def name(self) -> str:
        return self.starship.name

    def length(self, unit: str = "METER") -> float:
        return convert_length(self.starship.length, unit)


Character = Union[HumanResolver, DroidResolver]
SearchResult = Union[HumanResolver, DroidResolver, StarshipResolver]


def resolve_character(id: str) -> Character | None:
    """Return the human or droid with ``id``, or None."""
    key = ID(id)
    if key in _HUMAN_DATA:
        return HumanResolver(_HUMAN_DATA[key])
    if key in _DROID_DATA:
        return DroidResolver(_DROID_DATA[key])
    return None


def resolve_characters(ids: Any) -> list[Character]:
    """Return the characters for ``ids``, skipping unknown ones."""
    return [c for c in map(resolve_character, ids) if c is not None]


@dataclass(frozen=True)
class PageInfo:
    """Pagination details of a connection."""

    start_cursor: ID
    end_cursor: ID
    has_next_page: bool


@dataclass(frozen=True)
class FriendsEdge:
    """One friend in a connection, with its cursor."""

    cursor: ID
    id: ID

    def node(self) -> Character | None:
        return resolve_character(self.id)


@dataclass(frozen=True)
class FriendsConnection:
    """A page of a character's friends."""

    ids: tuple[ID, ...]
    start: int
    end: int

    @classmethod
    def create(
        cls, ids: Any, first: int | None = None, after: str | None = None
    ) -> FriendsConnection:
        """Build the page after cursor ``after`` holding at most ``first`` items."""
        ids = tuple(ids)
        start = _decode_cursor(after) if after is not None else 0
        end = len(ids)
        if first is not None:
            end = min(start + first, len(ids))
        return cls(ids, start, end)

    def total_count(self) -> int:
        return len(self.ids)

    def edges(self) -> list[FriendsEdge]:
        return [
            FriendsEdge(encode_cursor(i), self.ids[i])
            for i in range(self.start, self.end)
        ]

    def friends(self) -> list[Character]:
        return resolve_characters(self.ids[self.start:self.end])

    def page_info(self) -> PageInfo:
        return PageInfo(
            start_cursor=encode_cursor(self.start),
            end_cursor=encode_cursor(self.end - 1),
            has_next_page=self.end < len(self.ids),
        )


@dataclass
class Resolver:
    """Root resolver of the Star Wars example."""

    _reviews: dict[str, list[Review]] = field(default_factory=dict)

    def hero(self, episode: str = "NEWHOPE") -> Character:
        if episode == "EMPIRE":
            return HumanResolver(_HUMAN_DATA[ID("1000")])
        return DroidResolver(_DROID_DATA[ID("2001")])

    def reviews(self, episode: str) -> list[Review]:
        return list(self._reviews.get(episode, []))

    def search(self, text: str) -> list[SearchResult]:
        results: list[SearchResult] = []
        results.extend(HumanResolver(h) for h in HUMANS if text in h.name)
        results.extend(DroidResolver(d) for d in DROIDS if text in d.name)
        results.extend(StarshipResolver(s) for s in STARSHIPS if text in s.name)
        return results

    def character(self, id: str) -> Character | None:
        return resolve_character(id)

    def human(self, id: str) -> HumanResolver | None:
        found = _HUMAN_DATA.get(ID(id))
        return HumanResolver(found) if found is not None else None

    def droid(self, id: str) -> DroidResolver | None:
        found = _DROID_DATA.get(ID(id))
        return DroidResolver(found) if found is not None else None

    def starship(self, id: str) -> StarshipResolver | None:
        found = _STARSHIP_DATA.get(ID(id))
        return StarshipResolver(found) if found is not None else None

    def create_review(self, episode: str, review: Mapping[str, Any]) -> Review:
        """Store a review given as a ReviewInput object and return it."""
        created = Review(
            stars=int(review["stars"]), commentary=review.get("commentary")
        )
        self._reviews.setdefault(episode, []).append(created)
        return created