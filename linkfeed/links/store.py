from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List, Optional

from .schemas import Link

logger = logging.getLogger(__name__)

ID_PREFIX = "link-"

SEED_LINKS = (
    Link(
        id="link-0",
        url="https://graphql-yoga.com/foo",
        description="The easiest way of setting up a GraphQL server",
    ),
    Link(
        id="link-1",
        url="https://graphql-yoga.com/bar",
        description="The medium difficulty way of setting up a GraphQL server",
    ),
    Link(
        id="link-2",
        url="https://graphql-yoga.com/fizz",
        description="The hard way of setting up a GraphQL server",
    ),
)


class LinkStore:
    """Ordered, append-only, in-memory collection of links."""

    def __init__(self, links: Optional[Iterable[Link]] = None) -> None:
        self._lock = asyncio.Lock()
        self._links: List[Link] = list(links or [])

    @classmethod
    def seeded(cls) -> "LinkStore":
        return cls(SEED_LINKS)

    def __len__(self) -> int:
        return len(self._links)

    async def list_all(self) -> List[Link]:
        async with self._lock:
            return list(self._links)

    async def append(self, url: str, description: str) -> Link:
        # id and position are assigned under the same lock
        async with self._lock:
            link = Link(id=f"{ID_PREFIX}{len(self._links)}", url=url, description=description)
            self._links.append(link)
        logger.debug(f"Stored {link.id} ({link.url})")
        return link
