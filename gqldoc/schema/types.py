"""Type expression parsing for GraphQL field declarations."""

from dataclasses import dataclass


# Scalars with a fixed stand-in example value
BUILTIN_SCALARS = ('String', 'Int', 'Long', 'Boolean', 'Float')

NON_NULL_MARKER = '!'
LIST_OPEN = '['
LIST_CLOSE = ']'


@dataclass(frozen=True)
class TypeRef:
    """A type expression split into its base name and wrapper markers."""
    base_name: str
    is_required: bool = False
    is_list: bool = False
    list_depth: int = 0

    @property
    def is_builtin_scalar(self) -> bool:
        return self.base_name in BUILTIN_SCALARS

    def display(self) -> str:
        """Render as ``Array<T>`` per list level, else the bare base name."""
        text = self.base_name
        for _ in range(self.list_depth):
            text = f"Array<{text}>"
        return text


def resolve_type(type_expression: str) -> TypeRef:
    """
    Parse a type expression such as ``[User!]!`` into a TypeRef.

    Required-ness comes from the presence of the non-null marker anywhere in
    the expression, list-ness from a leading bracket once the non-null
    markers are stripped. Nested lists are counted in ``list_depth``.
    """
    raw = str(type_expression).strip()
    is_required = NON_NULL_MARKER in raw

    unwrapped = raw.replace(NON_NULL_MARKER, '')
    list_depth = 0
    while unwrapped.startswith(LIST_OPEN):
        list_depth += 1
        unwrapped = unwrapped[1:]

    base_name = unwrapped.replace(LIST_OPEN, '').replace(LIST_CLOSE, '').strip()

    return TypeRef(
        base_name=base_name,
        is_required=is_required,
        is_list=list_depth > 0,
        list_depth=list_depth,
    )
