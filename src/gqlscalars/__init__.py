"""gqlscalars: coercion rules for the built-in GraphQL scalar types."""

__version__ = "0.1.0"
