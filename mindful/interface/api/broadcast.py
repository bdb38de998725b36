"""Realtime chat broadcast.

Every connected client receives every valid chat frame, its own included.
"""

import asyncio
import json
from datetime import datetime, timezone
from typing import Literal

import logfire
from fastapi import WebSocket
from pydantic import Field
from pydantic import ValidationError as PydanticValidationError

from mindful.interface.api.schema import APIRequest


class ChatFrame(APIRequest):
    """Inbound chat frame."""

    type: Literal["chat"]
    content: str = Field(min_length=1)
    user_id: str = Field(min_length=1)


def parse_frame(raw: str) -> ChatFrame | None:
    """Parse an inbound frame, returning None for anything but a valid chat frame.

    Args:
        raw: Text received from the socket

    Returns:
        The chat frame, or None if the text is malformed or of another type
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logfire.warn("Ignoring malformed websocket frame", error=str(e))
        return None

    try:
        return ChatFrame.model_validate(data)
    except PydanticValidationError as e:
        logfire.info("Ignoring websocket frame", error_count=e.error_count())
        return None


def chat_response(frame: ChatFrame) -> dict[str, str]:
    """Build the outbound frame rebroadcast for a chat frame."""
    return {
        "type": "chat_response",
        "content": frame.content,
        "userId": frame.user_id,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


class ConnectionManager:
    """Tracks open websocket connections and fans messages out to them."""

    def __init__(self) -> None:
        self.connections: set[WebSocket] = set()
        self._lock = asyncio.Lock()

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        async with self._lock:
            self.connections.add(websocket)
        logfire.info("WebSocket client connected", connections=len(self.connections))

    async def disconnect(self, websocket: WebSocket) -> None:
        async with self._lock:
            self.connections.discard(websocket)
        logfire.info(
            "WebSocket client disconnected", connections=len(self.connections)
        )

    async def broadcast(self, message: dict[str, str]) -> None:
        """Send a message to every open connection.

        Connections that fail to receive are dropped.
        """
        async with self._lock:
            targets = list(self.connections)

        failed = []
        for websocket in targets:
            try:
                await websocket.send_json(message)
            except (RuntimeError, OSError) as e:
                logfire.warn("WebSocket send failed, dropping client", error=str(e))
                failed.append(websocket)

        if failed:
            async with self._lock:
                self.connections.difference_update(failed)
