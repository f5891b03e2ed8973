"""
GraphQL surface of the link feed.

The schema is built with Strawberry and mounted on FastAPI through
``create_graphql_router``.
"""

from .router import create_graphql_router  # noqa: F401
from .schema import schema  # noqa: F401
