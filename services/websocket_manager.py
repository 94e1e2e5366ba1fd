from typing import Set
from fastapi import WebSocket
import logging

logger = logging.getLogger(__name__)


class DashboardWebSocketManager:
    """
    Менеджер WebSocket підключень публічного дашборду.
    Всі клієнти отримують всі події (рахунок, статус матчу, рейтинг).
    """

    def __init__(self):
        self.connections: Set[WebSocket] = set()

    async def connect(self, websocket: WebSocket):
        await websocket.accept()
        self.connections.add(websocket)
        logger.info(f"Dashboard client connected ({len(self.connections)} total)")

    async def disconnect(self, websocket: WebSocket):
        if websocket not in self.connections:
            return
        self.connections.discard(websocket)
        logger.info(f"Dashboard client disconnected ({len(self.connections)} total)")

    async def broadcast(self, message: dict):
        """Відправити повідомлення всім підключеним клієнтам"""
        disconnected = []
        for ws in list(self.connections):
            try:
                await ws.send_json(message)
            except Exception as e:
                logger.warning(f"Failed to send message to dashboard client: {e}")
                disconnected.append(ws)

        # Очищаємо мертві підключення
        for ws in disconnected:
            await self.disconnect(ws)

    def get_connection_count(self) -> int:
        return len(self.connections)


# Глобальний інстанс менеджера
websocket_manager = DashboardWebSocketManager()
