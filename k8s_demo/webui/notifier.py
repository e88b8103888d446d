from __future__ import annotations

import asyncio
from typing import Callable

from k8s_demo.webui.surface import Notice, NoticeKind, Surface


class Notifier:
    """Shows one transient notice at a time on a surface.

    A notice is cleared after `duration_s`. Showing a new notice replaces the
    current one and restarts the timer. Must be used from a running event loop.
    `on_change` is called after a notice expires so a front end can redraw.
    """

    def __init__(
        self,
        surface: Surface,
        *,
        duration_s: float = 3.0,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._surface = surface
        self._duration_s = float(duration_s)
        self._timer: asyncio.TimerHandle | None = None
        self.on_change = on_change

    @property
    def duration_s(self) -> float:
        return self._duration_s

    def show(self, message: str, kind: NoticeKind = NoticeKind.INFO) -> None:
        self._cancel_timer()
        self._surface.notice = Notice(message=message, kind=kind)
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self._duration_s, self._expire)

    def clear(self) -> None:
        self._cancel_timer()
        self._surface.notice = None

    def _expire(self) -> None:
        self._timer = None
        self._surface.notice = None
        if self.on_change is not None:
            self.on_change()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
