from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Link(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    url: str
    description: str
