"""Realtime chat websocket route."""

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from mindful.interface.api.broadcast import ConnectionManager, chat_response, parse_frame

router = APIRouter(tags=["realtime"])


@router.websocket("/ws")
async def chat_socket(websocket: WebSocket) -> None:
    """Rebroadcast chat frames to every connected client.

    Malformed frames are ignored and the connection stays open.
    """
    manager: ConnectionManager = websocket.app.state.connection_manager
    await manager.connect(websocket)
    try:
        while True:
            raw = await websocket.receive_text()
            frame = parse_frame(raw)
            if frame is not None:
                await manager.broadcast(chat_response(frame))
    except WebSocketDisconnect:
        pass
    finally:
        await manager.disconnect(websocket)
