"""Shared request body models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIRequest(BaseModel):
    """Request body accepting camelCase keys (snake_case also accepted)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
