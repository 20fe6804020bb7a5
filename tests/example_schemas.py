"""Example GraphQL schemas for testing."""

from gqldoc.schema import (
    Argument,
    EnumType,
    EnumValue,
    FieldDefinition,
    ObjectType,
    TypeGraph,
)

# Self-referential user schema
USER_SCHEMA = '''
"""A registered user"""
type User {
    id: Int!
    name: String
    friends: [User]
}

type Query {
    "Fetch a user by id"
    getUser(id: Int!): User!
}
'''

# Library schema with enums, inputs, custom scalars and a mutual cycle
LIBRARY_SCHEMA = '''
scalar DateTime
scalar Long

"""Availability of a book"""
enum Status {
    "On the shelf"
    AVAILABLE
    LOANED
}

type Author {
    id: ID!
    name: String!
    books: [Book!]!
}

type Book {
    id: ID!
    title: String!
    tags: [String!]!
    status: Status
    rating: Float
    inPrint: Boolean
    pages: Long
    author: Author
    publishedAt: DateTime
}

input BookFilter {
    title: String
    status: Status
}

type Query {
    "Look up a book"
    book(id: ID!): Book
    books(filter: BookFilter, limit: Int): [Book!]!
    shelfCount: Int!
    statuses: [Status!]!
}

type Mutation {
    "Create a book"
    addBook(title: String!): Book!
}
'''

# Object whose only field needs no selection
FLAGS_SCHEMA = '''
enum Status {
    ON
    OFF
}

type Flags {
    status: Status
}

type Query {
    flags: Flags
}
'''


def create_user_graph() -> TypeGraph:
    """Hand-built graph equivalent to USER_SCHEMA."""
    return TypeGraph({
        'User': ObjectType('User', {
            'id': FieldDefinition('id', 'Int!'),
            'name': FieldDefinition('name', 'String'),
            'friends': FieldDefinition('friends', '[User]'),
        }),
    })


def get_user_operation() -> FieldDefinition:
    return FieldDefinition(
        'getUser',
        'User!',
        description='Fetch a user by id',
        args=[Argument('id', 'Int!')]
    )


def create_cyclic_graph() -> TypeGraph:
    """Graph with a mutual cycle (A -> B -> A), an enum and an unresolved type."""
    return TypeGraph({
        'A': ObjectType('A', {
            'label': FieldDefinition('label', 'String', description='Label of A'),
            'b': FieldDefinition('b', 'B'),
        }),
        'B': ObjectType('B', {
            'count': FieldDefinition('count', 'Int'),
            'back': FieldDefinition('back', '[A!]'),
            'level': FieldDefinition('level', 'Level!'),
            'ghost': FieldDefinition('ghost', 'Ghost'),
        }),
        'Level': EnumType('Level', [EnumValue(1, 'A'), EnumValue(2, 'B')]),
    })
