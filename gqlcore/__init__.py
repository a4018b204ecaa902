"""GraphQL query errors, custom scalars, cache hints and example resolvers."""

__version__ = "0.1.0"
__all__ = ["__version__"]