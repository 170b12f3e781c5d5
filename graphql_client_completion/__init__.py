"""Schema-aware completion for GraphQL typesafe client APIs."""

__version__ = "0.1.0"
