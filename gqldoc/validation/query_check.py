"""Validation of synthesized example queries against the source schema."""

from typing import List

from graphql import GraphQLError, GraphQLSchema, parse, validate


class ExampleQueryChecker:
    """
    Checks that a generated example query is a valid document for the schema.

    Problems are returned as messages instead of raised: an example that
    does not validate is still documented, with a warning attached.
    """

    def __init__(self, schema: GraphQLSchema):
        """
        Initialize the checker.

        Args:
            schema: The graphql-core schema the examples were generated from
        """
        self.schema = schema

    def check(self, query_text: str) -> List[str]:
        """
        Validate one example query.

        Args:
            query_text: The full query document text

        Returns:
            Validation messages, empty when the query is valid
        """
        try:
            document = parse(query_text)
        except GraphQLError as e:
            return [e.message]

        return [error.message for error in validate(self.schema, document)]
