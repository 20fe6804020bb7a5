"""Selection set construction for example queries."""

from typing import Sequence, Tuple
import logging

from ..schema.introspection import EnumType, FieldLike, ObjectType, TypeGraph
from ..schema.types import resolve_type

logger = logging.getLogger(__name__)


class SelectionBuilder:
    """
    Builds the minimal selection set that selects every leaf field.

    The call for the operation itself is the root: it has no leading field
    name, and a root that needs no sub-selection yields an empty string.
    """

    def __init__(self, graph: TypeGraph):
        self.graph = graph

    def shape(self, field: FieldLike, visit_path: Sequence[str] = ()) -> str:
        return self._shape(field, tuple(visit_path))

    def _shape(self, field: FieldLike, visit_path: Tuple[str, ...]) -> str:
        base_name = resolve_type(field.type).base_name

        # Back-edges are dropped from the query
        if base_name in visit_path:
            logger.debug(f"Cycle at '{field.name}', dropped from selection")
            return ''
        path = visit_path + (base_name,)
        is_root = len(path) == 1

        definition = self.graph.lookup(base_name)
        if definition is None or isinstance(definition, EnumType):
            return ''

        if not isinstance(definition, ObjectType):
            # Built-in and custom scalars are leaf selections
            return '' if is_root else field.name

        selected = ' '.join(
            sub for sub in (self._shape(child, path) for child in definition.fields.values())
            if sub
        )
        if not selected:
            return '' if is_root else field.name
        if is_root:
            return f"{{ {selected} }}"
        return f"{field.name} {{ {selected} }}"


def build_selection(
    graph: TypeGraph,
    field: FieldLike,
    visit_path: Sequence[str] = ()
) -> str:
    """Build the selection text for one field."""
    return SelectionBuilder(graph).shape(field, visit_path)
