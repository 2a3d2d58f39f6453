"""
Server-sent event framing shared by the streaming endpoints.
"""

from typing import Any, AsyncIterator, Awaitable, Callable, Dict
import asyncio
import json

from fastapi.responses import StreamingResponse

from agents.exceptions import BrandKitError
from setup_logging_optimized import get_logger

logger = get_logger(__name__)

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}

POLL_INTERVAL = 0.05


def _sse(event: str, data: Any) -> bytes:
    try:
        return f"event: {event}\ndata: {json.dumps(data)}\n\n".encode("utf-8")
    except (TypeError, ValueError):
        return b"event: error\ndata: {\"error\": \"serialization_failed\"}\n\n"


async def progress_events(
    run: Callable[[Callable[[Any], None]], Awaitable[Any]],
    serialize: Callable[[Any], Dict[str, Any]],
    failure_message: str,
) -> AsyncIterator[bytes]:
    """Run `run(on_progress)` and stream its progress, then `complete` or `error`.

    Progress objects must expose to_dict(); the final result goes through
    `serialize`.
    """
    buffered: asyncio.Queue = asyncio.Queue()
    task = asyncio.create_task(run(lambda progress: buffered.put_nowait(progress.to_dict())))

    try:
        while not task.done():
            while not buffered.empty():
                yield _sse("progress", buffered.get_nowait())
            await asyncio.sleep(POLL_INTERVAL)

        while not buffered.empty():
            yield _sse("progress", buffered.get_nowait())

        try:
            result = task.result()
        except BrandKitError as e:
            logger.error(f"{failure_message}: {e}")
            yield _sse("error", {"error": e.message})
            return
        except Exception as e:
            logger.exception(f"{failure_message}: {e}")
            yield _sse("error", {"error": str(e) or failure_message})
            return

        yield _sse("complete", serialize(result))
    finally:
        if not task.done():
            task.cancel()


def event_stream(events: AsyncIterator[bytes]) -> StreamingResponse:
    return StreamingResponse(events, media_type="text/event-stream", headers=SSE_HEADERS)
