import asyncio
import json
import logging
from asyncio import Queue, Task
from typing import Any, Dict, List, Optional

from fastapi import WebSocket, WebSocketDisconnect


class WebSocketManager:
    """
    Keeps the webview's WebSocket connections and pushes export browser
    messages (catalog changes, preview switches, toasts) to them.

    Broadcasts are queued and sent by one background task, so publishers
    never wait on a slow client.
    """

    def __init__(self):
        self._connections: List[WebSocket] = []
        self._message_queue: Queue = Queue()
        self._sender_task: Task | None = None
        logging.info("WebSocketManager initialized")

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    def start_sender_task(self):
        """Start the background task draining the broadcast queue."""
        if self._sender_task is None:
            self._sender_task = asyncio.create_task(self._message_sender_task())
            logging.info("WebSocket message sender task started.")

    def stop_sender_task(self):
        """Cancel the background sender. Queued messages are dropped."""
        if self._sender_task:
            self._sender_task.cancel()
            self._sender_task = None
            logging.info("WebSocket message sender task stopped.")

    async def _message_sender_task(self):
        """Send queued messages to all clients, one message at a time."""
        while True:
            try:
                message_data = await self._message_queue.get()
                await self._broadcast_to_connections(message_data)
                self._message_queue.task_done()
            except asyncio.CancelledError:
                logging.info("Message sender task cancelled.")
                break
            except Exception as e:
                logging.error(f"Error in message sender task: {e}")

    async def _broadcast_to_connections(self, message_data: Dict[str, Any]):
        if not self._connections:
            return

        message_json = json.dumps(message_data, default=str)
        disconnected_clients = []

        for websocket in list(self._connections):
            if not await self._send(websocket, message_json):
                disconnected_clients.append(websocket)

        for websocket in disconnected_clients:
            self.disconnect(websocket)

    async def _send(self, websocket: WebSocket, message_json: str) -> bool:
        """Send to one client. False means the client is gone and should be dropped."""
        try:
            await websocket.send_text(message_json)
            return True
        except WebSocketDisconnect:
            logging.debug("Client disconnected during broadcast")
        except Exception as e:
            logging.warning(f"Error sending to client: {e}")
        return False

    async def connect(
        self, websocket: WebSocket, initial_message: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Accept a webview connection.

        ``initial_message`` (normally the current catalog snapshot) is sent to
        this client alone before it starts receiving broadcasts, so a freshly
        opened page does not wait for the next change to show the list.
        """
        await websocket.accept()

        if initial_message is not None:
            if not await self._send(websocket, json.dumps(initial_message, default=str)):
                return

        self._connections.append(websocket)
        logging.info(f"WebSocket client connected. Total connections: {len(self._connections)}")

    def disconnect(self, websocket: WebSocket) -> None:
        """Forget a connection. Unknown connections are ignored."""
        if websocket in self._connections:
            self._connections.remove(websocket)
        logging.info(f"WebSocket client disconnected. Total connections: {len(self._connections)}")

    def broadcast_message(self, message_data: Dict[str, Any]) -> None:
        """Queue a message for all connected clients. Never blocks."""
        self._message_queue.put_nowait(message_data)
