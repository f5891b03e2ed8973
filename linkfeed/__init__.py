"""
linkfeed: a small GraphQL API for a Hackernews-style link feed.

Use ``linkfeed.index.build_app`` to create the FastAPI application or run
``python -m linkfeed`` to serve it with uvicorn.
"""

__version__ = "0.1.0"
