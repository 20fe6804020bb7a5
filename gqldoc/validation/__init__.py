"""Validation of generated examples."""

from .query_check import ExampleQueryChecker

__all__ = ["ExampleQueryChecker"]
