"""Suggest post titles use case."""

from pydantic import BaseModel, Field

from mindful.application.usecase.base import ResponseModel
from mindful.domain.service import AssistantService


class SuggestTitlesRequest(BaseModel):
    """Suggest titles request."""

    tags: list[str] = Field(default_factory=list)


class SuggestTitlesResponse(ResponseModel):
    """Suggest titles response."""

    suggestions: list[str]


class SuggestTitlesUseCase:
    """Use case for asking the assistant for post title ideas."""

    def __init__(self, assistant_service: AssistantService) -> None:
        self.assistant_service = assistant_service

    async def execute(self, request: SuggestTitlesRequest) -> SuggestTitlesResponse:
        suggestions = await self.assistant_service.suggest_titles(request.tags)
        return SuggestTitlesResponse(suggestions=suggestions)
