"""GraphQL documents and response helpers shared by the test modules."""

GRAPHQL_URL = "/api/v1/graphql"

CREATE_USER = """
mutation CreateUser($input: CreateUserInput!) {
  createUser(input: $input)
}
"""

LOGIN = """
mutation Login($identifier: String!, $password: String!) {
  login(identifier: $identifier, password: $password) {
    id
    username
    email
  }
}
"""


def error_code(body: dict) -> str:
    """Return the machine-readable code of the first GraphQL error."""
    assert body.get("errors"), body
    return body["errors"][0]["extensions"]["code"]
