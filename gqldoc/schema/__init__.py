"""Schema loading and type expression parsing."""

from .introspection import (
    Argument,
    EnumType,
    EnumValue,
    FieldDefinition,
    ObjectType,
    ScalarBuiltin,
    ScalarType,
    SchemaDocument,
    SchemaIntrospector,
    TypeGraph,
    load_schema,
)
from .types import BUILTIN_SCALARS, TypeRef, resolve_type

__all__ = [
    "Argument",
    "EnumType",
    "EnumValue",
    "FieldDefinition",
    "ObjectType",
    "ScalarBuiltin",
    "ScalarType",
    "SchemaDocument",
    "SchemaIntrospector",
    "TypeGraph",
    "load_schema",
    "BUILTIN_SCALARS",
    "TypeRef",
    "resolve_type",
]
