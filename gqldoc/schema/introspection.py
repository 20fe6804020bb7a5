"""Schema introspection into a read-only type graph."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Dict, Any, Optional, Union
import json
import logging

import strawberry
from graphql import (
    GraphQLError,
    GraphQLNamedType,
    GraphQLSchema,
    build_client_schema,
    build_schema,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
)

from .types import BUILTIN_SCALARS
from ..exceptions import SchemaError, UnresolvedTypeError, enhance_graphql_error

logger = logging.getLogger(__name__)


@dataclass
class Argument:
    """An operation argument."""
    name: str
    type: str
    description: Optional[str] = None


@dataclass
class FieldDefinition:
    """A field of an object type, or a root operation with its arguments."""
    name: str
    type: str
    description: Optional[str] = None
    args: List[Argument] = field(default_factory=list)


@dataclass(frozen=True)
class EnumValue:
    """One declared value of an enum type."""
    value: Any
    name: str
    description: Optional[str] = None


@dataclass
class ScalarBuiltin:
    """One of the built-in scalars with a fixed example value."""
    name: str


@dataclass
class ScalarType:
    """A schema-declared scalar without a built-in example value."""
    name: str
    description: Optional[str] = None


@dataclass
class EnumType:
    """An enum type with its values in declaration order."""
    name: str
    values: List[EnumValue]
    description: Optional[str] = None


@dataclass
class ObjectType:
    """An object, interface or input type with its fields in declaration order."""
    name: str
    fields: Dict[str, FieldDefinition]
    description: Optional[str] = None


TypeDefinition = Union[ScalarBuiltin, ScalarType, EnumType, ObjectType]
FieldLike = Union[FieldDefinition, Argument]


class TypeGraph:
    """Read-only lookup from type name to TypeDefinition."""

    def __init__(self, types: Optional[Dict[str, TypeDefinition]] = None, strict: bool = False):
        self._types: Dict[str, TypeDefinition] = dict(types or {})
        self.strict = strict

    def lookup(self, type_name: str) -> Optional[TypeDefinition]:
        """
        Resolve a base type name.

        Built-in scalar names always resolve. Unknown names return None, or
        raise UnresolvedTypeError when the graph is strict.
        """
        if type_name in BUILTIN_SCALARS:
            return ScalarBuiltin(type_name)

        definition = self._types.get(type_name)
        if definition is None:
            if self.strict:
                raise UnresolvedTypeError(
                    f"Type '{type_name}' is not defined in the schema",
                    type_name=type_name
                )
            logger.debug(f"Type '{type_name}' is not defined, treating it as a leaf")
        return definition

    def names(self) -> List[str]:
        return list(self._types)

    def __contains__(self, type_name: str) -> bool:
        return type_name in BUILTIN_SCALARS or type_name in self._types

    def __len__(self) -> int:
        return len(self._types)


@dataclass
class SchemaDocument:
    """The type graph with the root operations of a schema."""
    graph: TypeGraph
    queries: Dict[str, FieldDefinition]
    mutations: Dict[str, FieldDefinition] = field(default_factory=dict)


class SchemaIntrospector:
    """Introspects a graphql-core schema into a TypeGraph."""

    def __init__(self, schema: GraphQLSchema, source: Optional[str] = None):
        if schema.query_type is None:
            raise SchemaError(
                "Schema has no query root type",
                source=source,
                suggestions=[
                    "Declare a 'type Query' with at least one field",
                    "Or add 'schema { query: ... }' naming the query root"
                ]
            )
        self.schema = schema
        self.source = source

    @classmethod
    def from_graphql_schema(cls, schema: GraphQLSchema, source: Optional[str] = None) -> "SchemaIntrospector":
        """Build from an existing graphql-core schema."""
        return cls(schema, source=source)

    @classmethod
    def from_sdl(cls, sdl: str, source: Optional[str] = None) -> "SchemaIntrospector":
        """Build from schema definition language text."""
        try:
            schema = build_schema(sdl)
        except (GraphQLError, TypeError) as e:
            raise enhance_graphql_error(e, source=source or "<sdl>") from e
        return cls(schema, source=source)

    @classmethod
    def from_introspection(cls, result: Dict[str, Any], source: Optional[str] = None) -> "SchemaIntrospector":
        """Build from an introspection query result, with or without the 'data' envelope."""
        if isinstance(result, dict) and "data" in result and isinstance(result["data"], dict):
            result = result["data"]

        if not isinstance(result, dict) or "__schema" not in result:
            raise SchemaError(
                "Introspection result is malformed",
                source=source,
                suggestions=[
                    "Pass the full response of the standard introspection query",
                    "Ensure the payload contains a '__schema' key"
                ]
            )

        try:
            schema = build_client_schema(result)
        except (GraphQLError, TypeError) as e:
            raise enhance_graphql_error(e, source=source or "<introspection>") from e
        return cls(schema, source=source)

    @classmethod
    def from_strawberry(cls, schema: strawberry.Schema) -> "SchemaIntrospector":
        """Build from a strawberry schema via its underlying graphql-core schema."""
        query_name = getattr(schema.query, "__name__", "Query")
        return cls(schema._schema, source=f"strawberry:{query_name}")

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "SchemaIntrospector":
        """Build from a file: ``.json`` as introspection result, anything else as SDL."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise SchemaError(
                f"Cannot read schema file: {e.strerror or e}",
                source=str(path),
                suggestions=[
                    "Check that the file exists and is readable"
                ]
            ) from e

        if path.suffix.lower() == ".json":
            try:
                data = json.loads(text)
            except json.JSONDecodeError as e:
                raise SchemaError(
                    f"Schema file is not valid JSON: {e.msg}",
                    source=str(path),
                    context={"line": e.lineno, "column": e.colno}
                ) from e
            return cls.from_introspection(data, source=str(path))

        return cls.from_sdl(text, source=str(path))

    def get_types(self) -> Dict[str, TypeDefinition]:
        """Get definitions for every named type, skipping introspection types."""
        types = {}
        for name, named_type in self.schema.type_map.items():
            if name.startswith("__"):
                continue
            definition = self._build_definition(named_type)
            if definition is not None:
                types[name] = definition
        return types

    def get_queries(self) -> Dict[str, FieldDefinition]:
        """Get the query root fields in declaration order."""
        return self._root_fields(self.schema.query_type)

    def get_mutations(self) -> Dict[str, FieldDefinition]:
        """Get the mutation root fields in declaration order."""
        return self._root_fields(self.schema.mutation_type)

    def get_graph(self, strict: bool = False) -> TypeGraph:
        return TypeGraph(self.get_types(), strict=strict)

    def get_document(self, strict: bool = False) -> SchemaDocument:
        """Get the type graph together with the root operations."""
        document = SchemaDocument(
            graph=self.get_graph(strict=strict),
            queries=self.get_queries(),
            mutations=self.get_mutations()
        )
        logger.debug(
            f"Introspected {len(document.graph)} types, {len(document.queries)} queries, "
            f"{len(document.mutations)} mutations from {self.source or 'schema'}"
        )
        return document

    def _root_fields(self, root_type) -> Dict[str, FieldDefinition]:
        if root_type is None:
            return {}
        return {
            name: self._build_field(name, root_field)
            for name, root_field in root_type.fields.items()
        }

    def _build_definition(self, named_type: GraphQLNamedType) -> Optional[TypeDefinition]:
        """Convert one graphql-core named type."""
        name = named_type.name

        if name in BUILTIN_SCALARS:
            return ScalarBuiltin(name)

        if is_enum_type(named_type):
            values = []
            for value_name, enum_value in named_type.values.items():
                values.append(EnumValue(
                    value=enum_value.value if enum_value.value is not None else value_name,
                    name=value_name,
                    description=enum_value.description
                ))
            return EnumType(name=name, values=values, description=named_type.description)

        if is_object_type(named_type) or is_interface_type(named_type) or is_input_object_type(named_type):
            fields = {
                field_name: self._build_field(field_name, type_field)
                for field_name, type_field in named_type.fields.items()
            }
            return ObjectType(name=name, fields=fields, description=named_type.description)

        if is_union_type(named_type):
            # Unions have no own fields
            return ObjectType(name=name, fields={}, description=named_type.description)

        if is_scalar_type(named_type):
            return ScalarType(name=name, description=named_type.description)

        return None

    @staticmethod
    def _build_field(name: str, type_field: Any) -> FieldDefinition:
        """Convert a graphql-core field or input field."""
        args = getattr(type_field, "args", None) or {}
        return FieldDefinition(
            name=name,
            type=str(type_field.type),
            description=type_field.description,
            args=[
                Argument(name=arg_name, type=str(arg.type), description=arg.description)
                for arg_name, arg in args.items()
            ]
        )


def load_schema(source: Any) -> SchemaIntrospector:
    """
    Create an introspector from any supported schema source.

    Accepts a graphql-core schema, a strawberry schema, an introspection
    result dict, a Path, or a string that is either a file path or SDL text.
    """
    if isinstance(source, SchemaIntrospector):
        return source
    if isinstance(source, strawberry.Schema):
        return SchemaIntrospector.from_strawberry(source)
    if isinstance(source, GraphQLSchema):
        return SchemaIntrospector.from_graphql_schema(source)
    if isinstance(source, dict):
        return SchemaIntrospector.from_introspection(source)
    if isinstance(source, Path):
        return SchemaIntrospector.from_path(source)
    if isinstance(source, str):
        # SDL text always contains a brace; file paths practically never do
        if "{" not in source and Path(source).exists():
            return SchemaIntrospector.from_path(source)
        return SchemaIntrospector.from_sdl(source)

    raise SchemaError(
        f"Unsupported schema source: {type(source).__name__}",
        suggestions=[
            "Pass SDL text, a schema file path, an introspection result, "
            "a graphql-core GraphQLSchema or a strawberry Schema"
        ]
    )
