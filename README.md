# gqlcore

Building blocks for GraphQL servers. It provides query errors, custom
scalars and cache hints. It also includes several example resolver sets
that work on in-memory data.

## Installation

```
pip install gqlcore
```

To run the test suite, install the test extra:

```
pip install "gqlcore[test]"
pytest
```

## Modules

### `gqlcore.errors`

- `QueryError` is an exception that holds the error reported to a client:
  - `message`
  - `locations`, a list of `Location`
  - `path`
  - `rule`
  - `resolver_error`
  - `extensions`
  - `err`, the wrapped cause, which is also set as `__cause__`

  `str()` gives `graphql: <message>`, followed by ` (line L, column C)` for
  each location. `to_dict()` returns the JSON form of the error. It leaves
  out an empty `locations`, `path` or `extensions`.
- `Location(line, column)` is a position in a query. `before(other)`
  compares two positions.
- `errorf(fmt, *args)` builds a `QueryError` from a format string that uses
  `%v`, `%s`, `%d`, `%q` and `%%`. When the last argument is an exception,
  it becomes the wrapped cause.
- `PanicHandler` is the abstract base for turning an unexpected failure into
  a `QueryError`.
- `DefaultPanicHandler` is the default handler. It produces
  `panic occurred: <value>`.

### `gqlcore.scalars`

- `ID` is a `str` subclass for the `ID` scalar. `to_json()` returns the ID as
  a JSON string literal.
- `unmarshal_id(value)` accepts a string or a 32-bit integer. For anything
  else it raises `TypeError`.
- `GraphQLMap` is a `dict` subclass for a `Map` scalar.
- `unmarshal_map(value)` accepts only a dict. For anything else it raises
  `TypeError`.
- `Unmarshaler` is the runtime-checkable protocol that these scalars
  satisfy. It consists of `implements_graphql_type(name)` and the
  `unmarshal_graphql(value)` class method.

### `gqlcore.cache`

- `Scope` has two members, `PUBLIC` and `PRIVATE`.
- `Hint(max_age, scope)` describes how long a result may be cached, and by
  whom. `str()` gives a `Cache-Control` value such as
  `private, max-age=60`.
- `ttl(seconds)` returns a `timedelta` of that many seconds.
- `resolve_hints(hints)` combines hints into one:
  - it keeps the smallest max age, or zero if no hint sets one;
  - the scope is private if any hint is private.
- `hintable()` is a context manager that yields a `HintCollector`.
- `add_hint(hint)` records a hint with the collector of the enclosing
  `hintable()` block. Outside such a block it does nothing.
- `HintCollector.add(hint)` records a hint.
- `HintCollector.resolve()` returns the combined hint.
- Adding to a collector after its block has ended raises `RuntimeError`.

### Example resolver sets

Each example module has a `SCHEMA` string and a `Resolver` class.

- `gqlcore.caching_example`:
  - `hello(name)` gives a public one-hour hint.
  - `me()` gives a private one-minute hint and returns a `UserProfile`.
- `gqlcore.customerrors`: `Resolver.droid(id)` returns a `DroidResolver`.
  For an unknown ID it raises `DroidNotFoundError`. That error's
  `extensions()` carries `code` and `message`.
- `gqlcore.starwars` covers humans, droids and starships.
  - The `Resolver` methods are `hero`, `reviews`, `search`, `character`,
    `human`, `droid`, `starship` and `create_review`.
  - Friend lists are paged through `FriendsConnection`, with base64 cursors
    from `encode_cursor`.
  - `convert_length(meters, unit)` converts a length to `METER` or `FOOT`.
- `gqlcore.social` covers users and admins.
  - The `Resolver` methods are `admin`, `user` and `search`.
  - `User.friends_resolver(page)` pages a user's friends.
  - `AdminResolver.to_user()` and `SearchResult.to_user()` narrow a result
    to a `User`.

## Examples

Build a query error:

```python
from gqlcore.errors import errorf, Location

err = errorf("field %s is wrong", "name")
err.locations.append(Location(line=3, column=5))
print(err)  # graphql: field name is wrong (line 3, column 5)
```

Collect cache hints while resolving:

```python
from gqlcore.cache import hintable, add_hint, Hint, Scope, ttl

with hintable() as collector:
    add_hint(Hint(max_age=ttl(3600), scope=Scope.PUBLIC))
    add_hint(Hint(max_age=ttl(60), scope=Scope.PRIVATE))
print(collector.resolve())  # private, max-age=60
```

Call the example resolvers directly:

```python
from gqlcore.starwars import Resolver

hero = Resolver().hero("EMPIRE")
print(hero.name)  # Luke Skywalker
```

## What this package does not do

The package contains no schema parser, no query validator and no query
executor. The `SCHEMA` strings are plain text. Nothing parses them or checks
them against the resolvers. The resolvers are ordinary Python objects that
you call yourself.

There is no HTTP server or handler, and no command-line tool. Data lives
only in memory. For example, reviews created through the Star Wars resolver
are kept only on that `Resolver` instance.