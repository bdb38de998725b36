"""Assistant chat routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Query, status

from mindful.application.usecase.auth import GetCurrentUserRequest, GetCurrentUserUseCase
from mindful.application.usecase.chat import (
    ChatMessageResponse,
    GetChatMessagesRequest,
    GetChatMessagesUseCase,
    SendChatMessageRequest,
    SendChatMessageResponse,
    SendChatMessageUseCase,
)
from mindful.domain.error import DomainError, ValidationError
from mindful.interface.api.schema import APIRequest
from mindful.interface.api.security import read_auth_token

router = APIRouter(prefix="/chat", tags=["chat"], route_class=DishkaRoute)


class SendChatMessageAPIRequest(APIRequest):
    """API request for a message to the assistant."""

    content: str = ""


@router.get("/messages", response_model=list[ChatMessageResponse])
async def get_chat_messages(
    get_chat_messages_use_case: FromDishka[GetChatMessagesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    limit: int = Query(default=50, ge=1, le=100),
    auth_token: str | None = Depends(read_auth_token),
) -> list[ChatMessageResponse]:
    """Get the caller's most recent messages in chronological order."""
    user = await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )
    return await get_chat_messages_use_case.execute(
        GetChatMessagesRequest(user_id=user.id, limit=limit)
    )


@router.post("/messages", response_model=SendChatMessageResponse)
async def send_chat_message(
    request: SendChatMessageAPIRequest,
    send_chat_message_use_case: FromDishka[SendChatMessageUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Depends(read_auth_token),
) -> SendChatMessageResponse:
    """Send a message to the assistant and get its reply.

    A failing language model produces a fixed supportive reply instead of an
    error.

    Raises:
        UnauthenticatedError: If not authenticated (401)
        ValidationError: If the message is empty (400)
    """
    user = await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )
    if not request.content.strip():
        raise ValidationError("Message content is required")

    try:
        return await send_chat_message_use_case.execute(
            SendChatMessageRequest(user_id=user.id, content=request.content)
        )
    except DomainError:
        raise
    except Exception as e:
        logfire.error("Unexpected error sending chat message", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send message",
        )
