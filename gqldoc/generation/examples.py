"""Example value synthesis for request variables and response bodies."""

from typing import Any, Dict, Sequence, Tuple
import logging

from ..schema.introspection import EnumType, FieldLike, ObjectType, TypeGraph
from ..schema.types import TypeRef, resolve_type

logger = logging.getLogger(__name__)


# Stand-in values for built-in scalars; String uses the field description
SCALAR_EXAMPLES: Dict[str, Any] = {
    'Boolean': False,
    'Int': 1,
    'Long': 1,
    'Float': 1.1,
}

STRING_PLACEHOLDER = 'String'


def wrap_list(value: Any, ref: TypeRef) -> Any:
    """Wrap a value in a one-element list per list level of ``ref``."""
    for _ in range(ref.list_depth):
        value = [value]
    return value


class ExampleSynthesizer:
    """Builds a structural example value for a field."""

    def __init__(self, graph: TypeGraph):
        self.graph = graph

    def synthesize(self, field: FieldLike, visit_path: Sequence[str] = ()) -> Any:
        """
        Synthesize an example value for ``field``.

        Returns None when the field's type is already on the visit path. A
        list field that cycles back yields None rather than an empty list.
        """
        return self._synthesize(field, tuple(visit_path))

    def _synthesize(self, field: FieldLike, visit_path: Tuple[str, ...]) -> Any:
        ref = resolve_type(field.type)

        if ref.base_name in visit_path:
            logger.debug(f"Cycle at '{field.name}', no example value")
            return None
        path = visit_path + (ref.base_name,)

        if ref.base_name == 'String':
            return wrap_list(field.description or STRING_PLACEHOLDER, ref)
        if ref.base_name in SCALAR_EXAMPLES:
            return wrap_list(SCALAR_EXAMPLES[ref.base_name], ref)

        definition = self.graph.lookup(ref.base_name)
        if isinstance(definition, EnumType):
            if definition.values:
                return wrap_list(definition.values[0].value, ref)
            return wrap_list(None, ref)

        example: Dict[str, Any] = {}
        if isinstance(definition, ObjectType):
            for child in definition.fields.values():
                example[child.name] = self._synthesize(child, path)
        return wrap_list(example, ref)


def synthesize_example(
    graph: TypeGraph,
    field: FieldLike,
    visit_path: Sequence[str] = ()
) -> Any:
    """Synthesize the example value for one field."""
    return ExampleSynthesizer(graph).synthesize(field, visit_path)
