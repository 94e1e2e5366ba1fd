"""
Dashboard websocket manager and endpoint
"""
import asyncio

from services.websocket_manager import DashboardWebSocketManager


class FakeSocket:
    def __init__(self, fail=False):
        self.fail = fail
        self.accepted = False
        self.sent = []

    async def accept(self):
        self.accepted = True

    async def send_json(self, message):
        if self.fail:
            raise RuntimeError("socket closed")
        self.sent.append(message)


def test_broadcast_reaches_all_clients():
    manager = DashboardWebSocketManager()
    first, second = FakeSocket(), FakeSocket()

    async def scenario():
        await manager.connect(first)
        await manager.connect(second)
        await manager.broadcast({"type": "leaderboard_update"})

    asyncio.run(scenario())

    assert first.accepted and second.accepted
    assert first.sent == [{"type": "leaderboard_update"}]
    assert second.sent == [{"type": "leaderboard_update"}]
    assert manager.get_connection_count() == 2


def test_broadcast_drops_dead_clients():
    manager = DashboardWebSocketManager()
    alive, dead = FakeSocket(), FakeSocket(fail=True)

    async def scenario():
        await manager.connect(alive)
        await manager.connect(dead)
        await manager.broadcast({"type": "score_update"})

    asyncio.run(scenario())

    assert manager.get_connection_count() == 1
    assert alive.sent == [{"type": "score_update"}]


def test_dashboard_ping_pong(client):
    with client.websocket_connect("/ws") as websocket:
        assert websocket.receive_json()["type"] == "connected"

        websocket.send_text("ping")
        assert websocket.receive_json()["type"] == "pong"

        websocket.send_text('{"type": "ping"}')
        assert websocket.receive_json()["type"] == "pong"
