from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from services.websocket_manager import websocket_manager
from datetime import datetime, timezone
import logging
import json

logger = logging.getLogger(__name__)

router = APIRouter()


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.websocket("/ws")
async def dashboard_websocket(websocket: WebSocket):
    """
    Публічний WebSocket для дашборду: рахунок у live-матчах, статуси матчів
    і оновлення рейтингу факультетів.

    Підключення: ws://host/ws
    Клієнт може надсилати "ping" (або {"type": "ping"}) - відповідь {"type": "pong"}.
    """
    await websocket_manager.connect(websocket)

    try:
        await websocket.send_json({
            "type": "connected",
            "message": "Connected to sports week live updates",
            "timestamp": _timestamp(),
        })

        while True:
            data = await websocket.receive_text()

            is_ping = data == "ping"
            if not is_ping and data.startswith("{"):
                try:
                    is_ping = json.loads(data).get("type") == "ping"
                except (json.JSONDecodeError, AttributeError):
                    logger.debug(f"Ignoring malformed websocket message: {data[:100]}")

            if is_ping:
                await websocket.send_json({"type": "pong", "timestamp": _timestamp()})

    except WebSocketDisconnect:
        logger.info("Dashboard websocket closed by client")
    finally:
        await websocket_manager.disconnect(websocket)
