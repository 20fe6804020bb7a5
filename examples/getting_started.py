"""
Getting Started with gqldoc

This example shows the basics of generating reference documentation
from a GraphQL schema.
"""

from gqldoc import GQLDoc


SCHEMA = '''
"""Department of the company"""
enum Department {
    ENGINEERING
    SALES
    HR
}

type Employee {
    id: Int!
    "Full name"
    name: String!
    department: Department
    salary: Float
    isActive: Boolean
    manager: Employee
    reports: [Employee!]!
}

type Query {
    "Fetch a single employee"
    employee(id: Int!): Employee
    "List employees, optionally by department"
    employees(department: Department, limit: Int): [Employee!]!
}
'''


def main():
    """Basic gqldoc usage example."""
    print("📚 Getting Started with gqldoc\n")

    docs = GQLDoc(
        SCHEMA,
        endpoint="https://api.example.com/graphql",
        title="Employee API"
    )

    print("Documented operations:")
    for name in docs.operation_names():
        print(f"  - {name}")

    # Manager and reports point back to Employee, so they are cut off
    doc = docs.get_operation("employee")
    print(f"\nSelection for 'employee': {doc.selection}")
    print(f"Example variables: {doc.variables}")

    print("\n📝 Full document:\n")
    print(docs.generate())


if __name__ == "__main__":
    main()
