"""Assembly of per-operation documentation blocks."""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional, List
import json
import logging

from ..exceptions import SchemaError, UnresolvedTypeError
from ..schema.introspection import FieldDefinition, SchemaDocument
from ..validation import ExampleQueryChecker
from .examples import ExampleSynthesizer
from .field_table import FieldRow, FieldTableRenderer
from .selection import SelectionBuilder

logger = logging.getLogger(__name__)


LINE_BREAK = '  \n'

REQUEST_TABLE_HEADER = [
    '|Parameter|Type|Required|Description|',
    '|----|----|-----|-----|',
    '|query|String|Yes|GraphQL query document|',
    '|variables|Object|Yes|Query variables|',
]

RESPONSE_TABLE_HEADER = [
    '|Field|Type|Required|Description|',
    '|----|----|-----|-----|',
]


@dataclass
class OperationDoc:
    """Everything generated for one root operation."""
    name: str
    kind: str
    description: Optional[str]
    argument_rows: List[FieldRow]
    response_rows: List[FieldRow]
    selection: str
    query_text: str
    variables: Dict[str, Any]
    example_response: Any
    warnings: List[str] = field(default_factory=list)

    @property
    def heading(self) -> str:
        return self.description or self.name

    @property
    def request_body(self) -> Dict[str, Any]:
        return {"query": self.query_text, "variables": prune_empty(self.variables)}

    @property
    def response_body(self) -> Dict[str, Any]:
        return {"data": prune_empty(self.example_response)}


def prune_empty(value: Any) -> Any:
    """Drop mapping entries whose example value is the empty marker (None)."""
    if isinstance(value, dict):
        return {key: prune_empty(item) for key, item in value.items() if item is not None}
    if isinstance(value, list):
        return [prune_empty(item) for item in value]
    return value


def to_json(value: Any) -> str:
    return json.dumps(value, indent=4, ensure_ascii=False, default=str)


def build_query_text(kind: str, operation: FieldDefinition, selection: str) -> str:
    """
    Wrap a selection in the example request template.

    The operation result is aliased to ``data`` and every argument is passed
    through a variable of the same name.
    """
    declarations = ', '.join(f"${arg.name}: {arg.type}" for arg in operation.args)
    arguments = ', '.join(f"{arg.name}: ${arg.name}" for arg in operation.args)

    header = f"{kind} search({declarations})" if declarations else f"{kind} search"
    call = f"{operation.name}({arguments})" if arguments else operation.name
    if selection:
        call = f"{call} {selection}"

    return f"{header} {{\n    data: {call}\n}}"


class DocumentBuilder:
    """Builds and renders documentation for the root operations of a schema."""

    def __init__(
        self,
        document: SchemaDocument,
        endpoint: str = "http://host:port/graphql",
        method: str = "POST",
        title: str = "API Reference",
        introduction: Optional[str] = None,
        indent_char: str = "-",
        include_mutations: bool = False,
        checker: Optional[ExampleQueryChecker] = None
    ):
        """
        Initialize the document builder.

        Args:
            document: Type graph and root operations to document
            endpoint: URL shown in the endpoint boilerplate
            method: HTTP method shown in the endpoint boilerplate
            title: Top-level heading of the document
            introduction: Optional paragraph below the title
            indent_char: Character repeated per depth level in field tables
            include_mutations: Whether to document mutation root fields
            checker: Optional validator for the example queries
        """
        self.document = document
        self.endpoint = endpoint
        self.method = method
        self.title = title
        self.introduction = introduction
        self.indent_char = indent_char
        self.include_mutations = include_mutations
        self.checker = checker

        self.renderer = FieldTableRenderer(document.graph)
        self.synthesizer = ExampleSynthesizer(document.graph)
        self.selection_builder = SelectionBuilder(document.graph)

    def operations(self) -> Dict[str, tuple]:
        """Get ``name -> (kind, field)`` for every documented operation, queries first."""
        operations = {name: ("query", operation) for name, operation in self.document.queries.items()}
        if self.include_mutations:
            for name, operation in self.document.mutations.items():
                # A mutation never shadows a query of the same name
                operations.setdefault(name, ("mutation", operation))
        return operations

    def build_operation(self, name: str, operation: FieldDefinition, kind: str = "query") -> OperationDoc:
        """Generate the tables and examples for one operation."""
        logger.debug(f"Documenting {kind} '{name}'")

        try:
            argument_rows: List[FieldRow] = []
            variables: Dict[str, Any] = {}
            for arg in operation.args:
                argument_rows.extend(self.renderer.render(1, arg, ()))
                variables[arg.name] = self.synthesizer.synthesize(arg, ())

            response_rows = self.renderer.render(0, operation, ())
            selection = self.selection_builder.shape(operation, ())
            example_response = self.synthesizer.synthesize(operation, ())
        except UnresolvedTypeError as e:
            e.context.setdefault("operation", name)
            raise

        query_text = build_query_text(kind, operation, selection)

        warnings: List[str] = []
        if self.checker is not None:
            warnings = self.checker.check(query_text)
            for warning in warnings:
                logger.warning(f"Example query for '{name}' does not validate: {warning}")

        return OperationDoc(
            name=name,
            kind=kind,
            description=operation.description,
            argument_rows=argument_rows,
            response_rows=response_rows,
            selection=selection,
            query_text=query_text,
            variables=variables,
            example_response=example_response,
            warnings=warnings
        )

    def build_all(self, names: Optional[List[str]] = None) -> List[OperationDoc]:
        """
        Generate documentation for all operations, or only the named ones.

        Raises:
            SchemaError: If a requested operation does not exist
        """
        operations = self.operations()

        if names:
            unknown = [name for name in names if name not in operations]
            if unknown:
                raise SchemaError(
                    f"Unknown operation '{unknown[0]}'",
                    operation=unknown[0],
                    context={"available": sorted(operations)},
                    suggestions=[
                        "Check the operation name for typos",
                        "Use 'gqldoc operations <schema>' to list available operations"
                    ]
                )
            selected = [(name, operations[name]) for name in names]
        else:
            selected = list(operations.items())

        return [self.build_operation(name, operation, kind) for name, (kind, operation) in selected]

    def render_header(self) -> List[str]:
        """Render the boilerplate that precedes all operations."""
        lines = [f"# {self.title}"]
        if self.introduction:
            lines.extend(["", self.introduction])
        lines.extend([
            "",
            "## Usage",
            "### Endpoint",
            f"<code>{self.method} {self.endpoint}</code>",
            "### Request Body",
            "Build the request body following GraphQL syntax, with 'query' and 'variables' fields.",
        ])
        return lines

    def render_operation(self, doc: OperationDoc) -> List[str]:
        """Render one operation block as markdown lines."""
        lines = [
            "",
            f"### {doc.heading}",
            f"#### Endpoint {self.endpoint}",
            f"#### Method {self.method}",
            f"#### Operation \\<{doc.name}\\>",
        ]
        lines.extend(REQUEST_TABLE_HEADER)
        lines.extend(row.to_markdown(self.indent_char) for row in doc.argument_rows)

        lines.extend(["", "#### Response Type"])
        lines.extend(RESPONSE_TABLE_HEADER)
        lines.extend(row.to_markdown(self.indent_char) for row in doc.response_rows)

        lines.extend(["", "#### Request Example", "```json", to_json(doc.request_body), "```"])
        lines.extend(["#### Response Example", "```json", to_json(doc.response_body), "```"])
        return lines

    def render(self, docs: List[OperationDoc]) -> str:
        """Render the full document."""
        lines = self.render_header()
        for doc in docs:
            lines.extend(self.render_operation(doc))
        return LINE_BREAK.join(lines)
