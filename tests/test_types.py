"""Tests for type expression parsing."""

import pytest

from gqldoc.schema.types import BUILTIN_SCALARS, TypeRef, resolve_type


class TestResolveType:
    """Test splitting type expressions into base name and wrappers."""

    def test_bare_type(self):
        """Test a nullable named type."""
        ref = resolve_type('String')

        assert ref.base_name == 'String'
        assert not ref.is_required
        assert not ref.is_list
        assert ref.list_depth == 0

    def test_non_null_type(self):
        """Test a required named type."""
        ref = resolve_type('User!')

        assert ref.base_name == 'User'
        assert ref.is_required
        assert not ref.is_list

    def test_nullable_list(self):
        """Test a nullable list of nullable items."""
        ref = resolve_type('[User]')

        assert ref.base_name == 'User'
        assert not ref.is_required
        assert ref.is_list
        assert ref.list_depth == 1

    def test_required_list_of_required(self):
        """Test that every marker is stripped from the base name."""
        ref = resolve_type('[User!]!')

        assert ref.base_name == 'User'
        assert ref.is_required
        assert ref.is_list

    def test_inner_non_null_counts_as_required(self):
        """Required-ness comes from the marker anywhere in the expression."""
        assert resolve_type('[String!]').is_required

    def test_nested_lists(self):
        """Test nested list depth."""
        ref = resolve_type('[[Int!]!]')

        assert ref.base_name == 'Int'
        assert ref.list_depth == 2
        assert ref.display() == 'Array<Array<Int>>'

    @pytest.mark.parametrize('expression,expected', [
        ('Int', 'Int'),
        ('Int!', 'Int'),
        ('[Int]', 'Array<Int>'),
        ('[Int!]!', 'Array<Int>'),
    ])
    def test_display(self, expression, expected):
        """Test the rendered type text."""
        assert resolve_type(expression).display() == expected

    def test_surrounding_whitespace(self):
        """Test that whitespace does not leak into the base name."""
        assert resolve_type('  [Book!]! ').base_name == 'Book'

    def test_builtin_scalars(self):
        """Test built-in scalar classification."""
        for name in ('String', 'Int', 'Long', 'Boolean', 'Float'):
            assert name in BUILTIN_SCALARS
            assert resolve_type(f'{name}!').is_builtin_scalar

        assert not resolve_type('ID').is_builtin_scalar
        assert not resolve_type('User').is_builtin_scalar

    def test_type_ref_is_immutable(self):
        """Test that parsed references are value objects."""
        ref = resolve_type('[User]')

        assert ref == TypeRef('User', False, True, 1)
        with pytest.raises(AttributeError):
            ref.base_name = 'Other'
