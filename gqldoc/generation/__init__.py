"""Field tables, example values and example queries."""

from .field_table import FieldRow, FieldTableRenderer, render_field_table
from .examples import ExampleSynthesizer, synthesize_example
from .selection import SelectionBuilder, build_selection
from .document import DocumentBuilder, OperationDoc, build_query_text

__all__ = [
    "FieldRow",
    "FieldTableRenderer",
    "render_field_table",
    "ExampleSynthesizer",
    "synthesize_example",
    "SelectionBuilder",
    "build_selection",
    "DocumentBuilder",
    "OperationDoc",
    "build_query_text",
]
