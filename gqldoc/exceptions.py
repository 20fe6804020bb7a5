"""Custom exceptions for gqldoc with enhanced error messages."""

from typing import Optional, Dict, Any, List
import uuid


class GQLDocError(Exception):
    """Base exception for all gqldoc errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        correlation_id: Optional[str] = None
    ):
        """
        Initialize gqldoc error with rich context.

        Args:
            message: The error message
            error_code: Optional error code for categorization
            context: Additional context about the error
            suggestions: List of suggestions to fix the error
            correlation_id: ID to track this error across logs
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "GQLDOC_ERROR"
        self.context = context or {}
        self.suggestions = suggestions or []
        self.correlation_id = correlation_id or str(uuid.uuid4())

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
            "suggestions": self.suggestions,
            "correlation_id": self.correlation_id
        }

    def __str__(self) -> str:
        """Return formatted error message."""
        parts = [f"[{self.error_code}] {self.message}"]

        if self.context:
            parts.append(f"Context: {self.context}")

        if self.suggestions:
            parts.append("Suggestions:")
            for i, suggestion in enumerate(self.suggestions, 1):
                parts.append(f"  {i}. {suggestion}")

        parts.append(f"Correlation ID: {self.correlation_id}")

        return "\n".join(parts)


class SchemaError(GQLDocError):
    """Error while loading a schema source or selecting operations from it."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        operation: Optional[str] = None,
        **kwargs
    ):
        context = kwargs.pop("context", {})
        if source:
            context["source"] = source
        if operation:
            context["operation"] = operation

        error_code = kwargs.pop("error_code", "SCHEMA_ERROR")

        super().__init__(
            message=message,
            error_code=error_code,
            context=context,
            **kwargs
        )


class UnresolvedTypeError(SchemaError):
    """A base type name does not resolve in the type graph (strict mode only)."""

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        **kwargs
    ):
        context = kwargs.pop("context", {})
        if type_name:
            context["type"] = type_name

        suggestions = kwargs.pop("suggestions", [])
        if not suggestions:
            suggestions = [
                "Check that the type is declared in the schema",
                "Run without --strict to document unresolved types as empty objects"
            ]

        super().__init__(
            message=message,
            error_code="UNRESOLVED_TYPE",
            context=context,
            suggestions=suggestions,
            **kwargs
        )


def enhance_graphql_error(original_error: Exception, **context) -> GQLDocError:
    """
    Transform a graphql-core exception into a user-friendly gqldoc error.

    Args:
        original_error: The original exception raised while building a schema
        **context: Additional context to include

    Returns:
        Enhanced gqldoc error with helpful information
    """
    error_message = str(original_error)
    error_type = type(original_error).__name__

    # Syntax errors from the SDL parser
    if error_message.startswith("Syntax Error"):
        return SchemaError(
            "Schema SDL could not be parsed",
            suggestions=[
                "Check the schema for unbalanced braces or stray characters",
                "Validate the SDL with a GraphQL linter"
            ],
            context={"original_error": error_message, **context}
        )

    # Unknown type references
    elif "Unknown type" in error_message:
        import re

        # Pattern: "Unknown type: 'Widget'."
        match = re.search(r"Unknown type:?\s*['\"]?(\w+)['\"]?", error_message)
        type_name = match.group(1) if match else "unknown"

        return SchemaError(
            f"Type '{type_name}' is referenced but never declared",
            suggestions=[
                f"Declare type '{type_name}' or fix the spelling of the reference",
                "Add a 'scalar' declaration for custom scalars"
            ],
            context={"type": type_name, "original_error": error_message, **context}
        )

    # Introspection payloads that are not what build_client_schema expects
    elif "introspection" in error_message.lower():
        return SchemaError(
            "Introspection result is malformed",
            suggestions=[
                "Pass the full response of the standard introspection query",
                "Ensure the payload contains a '__schema' key"
            ],
            context={"original_error": error_message, **context}
        )

    # Generic fallback
    else:
        return SchemaError(
            f"Schema error: {error_message}",
            context={"error_type": error_type, **context}
        )
