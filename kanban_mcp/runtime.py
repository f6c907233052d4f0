"""
Runtime binding: selects the active board API and delivers push updates.

A host backend is used when one is available; otherwise the runtime falls
back to the in-memory mock store. Push payloads are decoded, validated and
queued, then handed to a single subscriber one at a time.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from kanban_mcp.enums import RunMode
from kanban_mcp.ports import BoardApi
from kanban_mcp.store import create_mock_store
from kanban_mcp.utils.payloads import normalize_state_payload, sanitize_task_list

logger = logging.getLogger(__name__)

InitCallback = Callable[..., Awaitable[None] | None]
ApiChangedCallback = Callable[[BoardApi, RunMode], None]
UpdateHandler = Callable[[dict[str, Any]], Awaitable[None] | None]
ApiFactory = Callable[[], BoardApi]
HostApiProvider = Callable[[], BoardApi | None]


def decode_update(raw: Any) -> dict[str, Any]:
    """Decode a pushed payload and sanitize any task list it carries."""
    payload = normalize_state_payload(raw)
    if "tasks" in payload:
        payload["tasks"] = sanitize_task_list(payload["tasks"])
    return payload


class BoardRuntime:
    """Owns the active board API for one session."""

    def __init__(
        self,
        *,
        on_init: InitCallback | None = None,
        on_realtime_update: UpdateHandler | None = None,
        on_api_changed: ApiChangedCallback | None = None,
        mock_api_factory: ApiFactory | None = None,
        host_api_provider: HostApiProvider | None = None,
    ) -> None:
        self._on_init = on_init
        self._on_api_changed = on_api_changed
        self._handler = on_realtime_update
        self._mock_api_factory = mock_api_factory or create_mock_store
        self._host_api_provider = host_api_provider
        self._api: BoardApi | None = None
        self._run_mode = RunMode.MOCK
        self._updates: asyncio.Queue[dict[str, Any]] = asyncio.Queue()

    @property
    def api(self) -> BoardApi | None:
        return self._api

    @property
    def run_mode(self) -> RunMode:
        return self._run_mode

    @property
    def pending_updates(self) -> int:
        return self._updates.qsize()

    def _host_api(self) -> BoardApi | None:
        if self._host_api_provider is None:
            return None
        return self._host_api_provider()

    async def start(self) -> BoardApi:
        """Select the host API if present, else a fresh mock store."""
        api = self._host_api()
        if api is not None:
            await self._assign(api, RunMode.HOST)
        else:
            api = self._mock_api_factory()
            await self._assign(api, RunMode.MOCK)
        return api

    async def host_ready(self, api: BoardApi | None = None) -> bool:
        """
        Handle a host readiness event.

        Swaps to the host API once per event. Returns False (and leaves the
        current API in place) when no host API is available.
        """
        host = api if api is not None else self._host_api()
        if host is None:
            logger.debug("Host ready signalled without an API; keeping %s", self._run_mode.value)
            return False
        await self._assign(host, RunMode.HOST)
        return True

    async def _assign(self, api: BoardApi, run_mode: RunMode) -> None:
        self._api = api
        self._run_mode = run_mode
        logger.info("Board API selected run_mode=%s", run_mode.value)

        if self._on_api_changed is not None:
            try:
                self._on_api_changed(api, run_mode)
            except Exception:
                logger.exception("on_api_changed callback failed")

        if self._on_init is not None:
            try:
                result = self._on_init(api, run_mode, force=True)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception("Initialization callback failed")

    # ---- push channel ----

    def subscribe(self, handler: UpdateHandler | None) -> None:
        """Register the update handler, replacing any previous one."""
        self._handler = handler

    def receive_update(self, raw: Any) -> None:
        """Queue a pushed payload (dict, or JSON string) for delivery."""
        self._updates.put_nowait(decode_update(raw))

    async def _deliver(self, payload: dict[str, Any]) -> bool:
        """Hand one payload to the handler. False if there was none to hand it to."""
        handler = self._handler
        if handler is None:
            logger.debug("No update handler registered; dropping payload")
            return False
        try:
            result = handler(payload)
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("Failed to apply pushed payload")
        return True

    async def process_updates(self) -> int:
        """
        Drain the queue in order.

        Returns how many payloads reached a handler; payloads dropped for
        lack of a handler are drained but not counted.
        """
        delivered = 0
        while not self._updates.empty():
            payload = self._updates.get_nowait()
            try:
                if await self._deliver(payload):
                    delivered += 1
            finally:
                self._updates.task_done()
        return delivered

    async def run_updates(self) -> None:
        """Consume the update queue until cancelled."""
        while True:
            payload = await self._updates.get()
            try:
                await self._deliver(payload)
            finally:
                self._updates.task_done()
