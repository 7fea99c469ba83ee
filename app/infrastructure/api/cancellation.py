"""Run request work that stops when the client goes away or a deadline passes."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Protocol, TypeVar

T = TypeVar("T")


class ClientDisconnected(Exception):
    """The inbound connection closed before the response was ready."""


class _DisconnectAware(Protocol):
    async def is_disconnected(self) -> bool: ...


async def _wait_for_disconnect(request: _DisconnectAware, poll_interval: float) -> None:
    while not await request.is_disconnected():
        await asyncio.sleep(poll_interval)


async def run_cancellable(
    request: _DisconnectAware,
    work: Awaitable[T],
    timeout: float | None = None,
    poll_interval: float = 0.1,
) -> T:
    """Await `work`, cancelling it on client disconnect or after `timeout` seconds.

    Raises:
        ClientDisconnected: the client disconnected first.
        asyncio.TimeoutError: the deadline passed first.
    """
    work_task: asyncio.Future[Any] = asyncio.ensure_future(work)
    watcher = asyncio.ensure_future(_wait_for_disconnect(request, poll_interval))
    try:
        done, _ = await asyncio.wait(
            {work_task, watcher},
            timeout=timeout,
            return_when=asyncio.FIRST_COMPLETED,
        )
    finally:
        pending = [t for t in (work_task, watcher) if not t.done()]
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

    if work_task in done:
        return work_task.result()
    if watcher in done:
        # Surface watcher failures instead of misreporting them as a disconnect
        watcher.result()
        raise ClientDisconnected()
    raise asyncio.TimeoutError(f"request exceeded {timeout}s deadline")
