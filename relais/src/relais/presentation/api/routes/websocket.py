"""
WebSocket relay endpoint with production logging.
"""

import asyncio
import time

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from relais.di import Container
from relais.domain.entities import Connection
from relais.infrastructure.websocket import WebSocketSink
from relais.presentation.api.dependencies import get_container

router = APIRouter(tags=["websocket"])


@router.websocket("/")
async def websocket_endpoint(
    websocket: WebSocket,
    container: Container = Depends(get_container),
):
    """
    WebSocket endpoint for the relay.

    Each connection gets an outbound writer task; inbound frames are
    decoded and handed to the MessageRouter. Undecodable frames are
    logged and dropped without a reply. Every exit path goes through a
    single on_close.

    Connection example:
        - ws://localhost:3055/
    """
    reporter = container.reporter
    relay = container.message_router
    validate_msg_uc = container.get_validate_message_use_case()

    await websocket.accept()

    sink = WebSocketSink(websocket, reporter=reporter)
    connection = Connection(sink)
    sink.connection_id = connection.id
    writer_task = asyncio.create_task(sink.run())

    container.increment_stat("total_connections")

    connection_start_time = time.time()
    messages_processed = 0
    decode_failures = 0

    relay.on_open(connection)

    try:
        while True:
            message = await websocket.receive()

            if message["type"] == "websocket.disconnect":
                break

            raw = message.get("text")
            if raw is None:
                raw = message.get("bytes") or b""

            container.increment_stat("total_messages_received")
            messages_processed += 1

            validation_result = validate_msg_uc.validate_message(raw)

            if not validation_result.valid:
                decode_failures += 1
                container.increment_stat("decode_failures")
                reporter.error(
                    f"Error handling message [conn={connection.id}] "
                    f"[errors={validation_result.errors}]",
                    context="WebSocket",
                )
                continue

            reporter.debug(
                f"Received message [conn={connection.id}] "
                f"[type={validation_result.message_type}] "
                f"[size={validation_result.size_bytes}]",
                context="WebSocket",
            )

            relay.on_message(connection, validation_result.payload)

    except WebSocketDisconnect:
        pass

    except Exception as e:
        reporter.error(
            f"WebSocket connection error [conn={connection.id}]: "
            f"{type(e).__name__}: {str(e)}",
            context="WebSocket",
        )

    finally:
        relay.on_close(connection)
        sink.close()
        await writer_task

        reporter.info(
            f"Connection closed [conn={connection.id}] "
            f"[duration={time.time() - connection_start_time:.2f}s] "
            f"[messages={messages_processed}] "
            f"[sent={sink.sent_count}] "
            f"[decode_failures={decode_failures}]",
            context="WebSocket",
        )
