from __future__ import annotations

from typing import Any, Dict

from strawberry.fastapi import GraphQLRouter
from strawberry.subscriptions import (
    GRAPHQL_TRANSPORT_WS_PROTOCOL,
    GRAPHQL_WS_PROTOCOL,
    MULTIPART_SUBSCRIPTION_PROTOCOL,
)

from ..links import LinkStore
from .schema import schema


def create_graphql_router(
    store: LinkStore,
    *,
    decorate_descriptions: bool = False,
    graphiql: bool = True,
) -> GraphQLRouter:
    """
    Build the router serving the schema over HTTP and WebSocket.

    Resolvers see ``store`` and ``decorate_descriptions`` in their context,
    next to the ``request``/``response`` handles Strawberry adds itself.
    Multipart bodies are parsed so file uploads reach ``getFileName``, and
    subscriptions are served over WebSocket and multipart HTTP responses.
    """

    async def get_context() -> Dict[str, Any]:
        return {"store": store, "decorate_descriptions": decorate_descriptions}

    return GraphQLRouter(
        schema,
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
        multipart_uploads_enabled=True,
        subscription_protocols=(
            GRAPHQL_TRANSPORT_WS_PROTOCOL,
            GRAPHQL_WS_PROTOCOL,
            MULTIPART_SUBSCRIPTION_PROTOCOL,
        ),
    )
