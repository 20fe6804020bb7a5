"""Tests for example value synthesis."""

import pytest

from gqldoc.generation.examples import ExampleSynthesizer, synthesize_example
from gqldoc.schema import EnumType, FieldDefinition, ObjectType, ScalarType, TypeGraph
from .example_schemas import create_cyclic_graph, create_user_graph, get_user_operation


class TestScalarExamples:
    """Test stand-in values for built-in scalars."""

    @pytest.mark.parametrize('type_expression,expected', [
        ('String', 'String'),
        ('Boolean', False),
        ('Int!', 1),
        ('Long', 1),
        ('Float', 1.1),
        ('[Int]', [1]),
        ('[Boolean!]!', [False]),
        ('[[Float]]', [[1.1]]),
    ])
    def test_scalars(self, type_expression, expected):
        """Test each built-in scalar, plain and list-wrapped."""
        assert synthesize_example(TypeGraph(), FieldDefinition('value', type_expression)) == expected

    def test_string_uses_description(self):
        """Test that strings show the field description when there is one."""
        field = FieldDefinition('tags', '[String!]!', description='X')

        assert synthesize_example(TypeGraph(), field) == ['X']

    def test_string_placeholder(self):
        """Test the placeholder for undocumented strings."""
        assert synthesize_example(TypeGraph(), FieldDefinition('name', 'String!')) == 'String'


class TestExampleSynthesizer:
    """Test example synthesis over object graphs."""

    @pytest.fixture
    def synthesizer(self):
        """Create a synthesizer for the user graph."""
        return ExampleSynthesizer(create_user_graph())

    def test_self_referential_object(self, synthesizer):
        """Test that the cyclic field yields the empty marker."""
        example = synthesizer.synthesize(get_user_operation(), ())

        assert example == {'id': 1, 'name': 'String', 'friends': None}
        assert list(example) == ['id', 'name', 'friends']

    def test_cyclic_list_is_not_empty_list(self):
        """Test a list field cycling back yields None, not []."""
        example = synthesize_example(create_cyclic_graph(), FieldDefinition('root', 'A'))

        assert example['b']['back'] is None

    def test_mutual_cycle(self):
        """Test the full example over A -> B -> A."""
        example = synthesize_example(create_cyclic_graph(), FieldDefinition('root', '[A]'))

        assert example == [{
            'label': 'Label of A',
            'b': {
                'count': 1,
                'back': None,
                'level': 1,
                'ghost': {},
            },
        }]

    def test_enum_first_value(self):
        """Test enums use their first declared value."""
        graph = create_cyclic_graph()

        assert synthesize_example(graph, FieldDefinition('level', 'Level')) == 1
        assert synthesize_example(graph, FieldDefinition('levels', '[Level!]!')) == [1]

    def test_enum_without_values(self):
        """Test a degenerate enum does not fail."""
        graph = TypeGraph({'Empty': EnumType('Empty', [])})

        assert synthesize_example(graph, FieldDefinition('value', 'Empty')) is None

    def test_unresolved_type(self):
        """Test unknown types become empty mappings."""
        assert synthesize_example(TypeGraph(), FieldDefinition('ghost', 'Ghost')) == {}
        assert synthesize_example(TypeGraph(), FieldDefinition('ghosts', '[Ghost]')) == [{}]

    def test_custom_scalar(self):
        """Test custom scalars have no stand-in value."""
        graph = TypeGraph({'DateTime': ScalarType('DateTime')})

        assert synthesize_example(graph, FieldDefinition('at', 'DateTime')) == {}

    def test_siblings_both_expand(self):
        """Test sibling branches see independent visit paths."""
        graph = TypeGraph({
            'Pair': ObjectType('Pair', {
                'first': FieldDefinition('first', 'Point'),
                'second': FieldDefinition('second', 'Point'),
            }),
            'Point': ObjectType('Point', {'x': FieldDefinition('x', 'Int')}),
        })

        assert synthesize_example(graph, FieldDefinition('pair', 'Pair')) == {
            'first': {'x': 1},
            'second': {'x': 1},
        }

    def test_visit_path_prefix(self, synthesizer):
        """Test a caller-supplied path truncates immediately."""
        assert synthesizer.synthesize(get_user_operation(), ['User']) is None

    def test_idempotent(self, synthesizer):
        """Test repeated calls give identical values."""
        assert synthesizer.synthesize(get_user_operation()) == synthesizer.synthesize(get_user_operation())
