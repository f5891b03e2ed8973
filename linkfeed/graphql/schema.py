import logging
from typing import Annotated, AsyncGenerator, List, NewType, Optional

import strawberry
from graphql.error import GraphQLError
from strawberry.extensions import SchemaExtension
from strawberry.schema.config import StrawberryConfig
from strawberry.types import ExecutionContext, Info

from ..links import Link
from ..services.countdown import Countdown

logger = logging.getLogger(__name__)

INFO_TEXT = "This is the API of a Hackernews Clone"
DESCRIPTION_PREFIX = "DESCRIPTION: "


File = NewType("File", object)

FILE_SCALAR = strawberry.scalar(
    name="File",
    description="A file part of a multipart GraphQL request.",
    serialize=lambda value: getattr(value, "filename", None),
    parse_value=lambda value: value,
)


@strawberry.type(name="Link")
class LinkNode:
    id: strawberry.ID
    url: str
    stored_description: strawberry.Private[str]

    @strawberry.field
    def description(self, info: Info) -> str:
        if info.context.get("decorate_descriptions"):
            return DESCRIPTION_PREFIX + self.stored_description
        return self.stored_description

    @classmethod
    def from_link(cls, link: Link) -> "LinkNode":
        return cls(id=strawberry.ID(link.id), url=link.url, stored_description=link.description)


@strawberry.type
class Query:
    @strawberry.field
    def hello(self) -> Optional[str]:
        return "world"

    @strawberry.field
    def is_fastify(self, info: Info) -> Optional[bool]:
        """True when the HTTP request and response handles reached the resolver."""
        return info.context.get("request") is not None and info.context.get("response") is not None

    @strawberry.field
    def info(self) -> str:
        return INFO_TEXT

    @strawberry.field
    async def feed(self, info: Info) -> List[LinkNode]:
        links = await info.context["store"].list_all()
        return [LinkNode.from_link(link) for link in links]


@strawberry.type
class Mutation:
    @strawberry.mutation
    def hello(self) -> Optional[str]:
        return "world"

    @strawberry.mutation
    async def post_link(self, info: Info, url: str, description: str) -> LinkNode:
        link = await info.context["store"].append(url, description)
        logger.info(f"Posted {link.id}")
        return LinkNode.from_link(link)

    @strawberry.mutation
    def get_file_name(self, file: File) -> Optional[str]:
        return getattr(file, "filename", None)


@strawberry.type
class Subscription:
    @strawberry.subscription
    async def countdown(
        self,
        from_: Annotated[int, strawberry.argument(name="from")],
        interval: Optional[int] = None,
    ) -> AsyncGenerator[int, None]:
        stream = Countdown(from_, interval)
        try:
            async for value in stream:
                yield value
        finally:
            # the client unsubscribed or disconnected mid-stream
            if not stream.done:
                stream.cancel()


class OperationLogger(SchemaExtension):
    def on_operation(self):
        name = self.execution_context.operation_name or "<anonymous>"
        logger.debug(f"GraphQL operation started: {name}")
        yield
        logger.debug(f"GraphQL operation finished: {name}")


class LinkFeedSchema(strawberry.Schema):
    def process_errors(
        self,
        errors: List[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        for error in errors:
            logger.error(f"GraphQL error: {error.message}", exc_info=error.original_error)


schema = LinkFeedSchema(
    query=Query,
    mutation=Mutation,
    subscription=Subscription,
    extensions=[OperationLogger],
    config=StrawberryConfig(scalar_map={File: FILE_SCALAR}),
)
