"""Field table rendering for operation arguments and return types."""

from dataclasses import dataclass
from typing import List, Sequence, Tuple
import logging

from ..schema.introspection import EnumType, FieldLike, ObjectType, TypeGraph
from ..schema.types import resolve_type

logger = logging.getLogger(__name__)


def escape_cell(text: str) -> str:
    """Escape text for use inside a markdown table cell."""
    return text.replace('|', '\\|').replace('\r\n', ' ').replace('\n', ' ')


@dataclass
class FieldRow:
    """One row of a field table."""
    depth: int
    name: str
    type_text: str
    required: bool
    description: str = ""

    def to_markdown(self, indent_char: str = '-') -> str:
        type_text = self.type_text.replace('<', '\\<').replace('>', '\\>')
        required = 'Yes' if self.required else 'No'
        return (
            f"|{indent_char * self.depth}{self.name}|{type_text}|{required}|"
            f"{escape_cell(self.description)}|"
        )


def describe_enum(description: str, enum_type: EnumType) -> str:
    """Append the ``value: name description`` listing of an enum to a description."""
    listing = ';'.join(
        f"{enum_value.value}: {enum_value.name} {enum_value.description or ''}".strip()
        for enum_value in enum_type.values
    )
    return ' '.join(part for part in (description, listing) if part)


class FieldTableRenderer:
    """Renders a field and everything reachable from it as table rows."""

    def __init__(self, graph: TypeGraph):
        self.graph = graph

    def render(
        self,
        depth: int,
        field: FieldLike,
        visit_path: Sequence[str] = ()
    ) -> List[FieldRow]:
        """
        Render one row for ``field`` followed by rows for its nested fields.

        Args:
            depth: Indentation level of the first row
            field: Field, operation or argument to render
            visit_path: Type names already expanded on this branch

        Returns:
            Rows in depth-first declaration order
        """
        rows: List[FieldRow] = []
        self._render(depth, field, tuple(visit_path), rows)
        return rows

    def _render(
        self,
        depth: int,
        field: FieldLike,
        visit_path: Tuple[str, ...],
        rows: List[FieldRow]
    ) -> None:
        ref = resolve_type(field.type)

        # List fields are never displayed as required
        row = FieldRow(
            depth=depth,
            name=field.name,
            type_text=ref.display(),
            required=ref.is_required and not ref.is_list,
            description=field.description or ""
        )
        rows.append(row)

        if ref.base_name in visit_path:
            logger.debug(f"Cycle at '{field.name}': {' -> '.join(visit_path)} -> {ref.base_name}")
            return
        path = visit_path + (ref.base_name,)

        if ref.is_builtin_scalar:
            return

        definition = self.graph.lookup(ref.base_name)
        if isinstance(definition, EnumType):
            row.description = describe_enum(row.description, definition)
        elif isinstance(definition, ObjectType):
            for child in definition.fields.values():
                self._render(depth + 1, child, path, rows)


def render_field_table(
    graph: TypeGraph,
    field: FieldLike,
    depth: int = 0,
    visit_path: Sequence[str] = ()
) -> List[FieldRow]:
    """Render the field table rows for one field."""
    return FieldTableRenderer(graph).render(depth, field, visit_path)
