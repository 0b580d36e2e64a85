# infrastructure/dispatch/loop_dispatcher.py
from __future__ import annotations

import asyncio
from typing import Any, Callable

from application.ports.dispatcher import CompletionDispatcherPort


class LoopDispatcher(CompletionDispatcherPort):
    """Delivers completion callbacks on a designated (foreground) event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop

    def dispatch(self, callback: Callable[..., None], *args: Any) -> None:
        self._loop.call_soon_threadsafe(callback, *args)
