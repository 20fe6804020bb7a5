"""gqldoc - Reference documentation generator for GraphQL schemas."""

from .core import GQLDoc

__version__ = "0.1.0"
__all__ = ["GQLDoc"]
