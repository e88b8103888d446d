from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, Callable, Union


class ConnectionState(Enum):
    CONNECTING = "connecting"
    CONNECTED = "connected"
    ERROR = "error"


class NoticeKind(Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class StatusBadge:
    state: ConnectionState = ConnectionState.CONNECTING
    label: str = "Connecting..."


@dataclass(frozen=True)
class InfoRow:
    label: str
    value: str
    is_error: bool = False


@dataclass(frozen=True)
class InfoPanel:
    title: str = "🖥️ Server Info"
    rows: tuple[InfoRow, ...] = ()


@dataclass(frozen=True)
class ItemCard:
    icon: str
    name: str
    description: str
    is_error: bool = False


@dataclass(frozen=True)
class Notice:
    message: str
    kind: NoticeKind = NoticeKind.INFO


Handler = Callable[[], Union[Awaitable[None], None]]


@dataclass
class Surface:
    """Presentation state of the dashboard.

    Each region is replaced as a whole by exactly one kind of operation
    (status/info by the info fetch, cards by the items fetch, notice by the
    notifier), so concurrent fetches never write the same field.
    """

    status: StatusBadge = field(default_factory=StatusBadge)
    info: InfoPanel = field(default_factory=InfoPanel)
    cards: tuple[ItemCard, ...] = ()
    notice: Notice | None = None
    _listeners: dict[str, list[Handler]] = field(default_factory=dict, repr=False)

    def add_event_listener(self, event: str, handler: Handler) -> None:
        self._listeners.setdefault(event, []).append(handler)

    async def dispatch(self, event: str) -> None:
        for handler in list(self._listeners.get(event, ())):
            result = handler()
            if inspect.isawaitable(result):
                await result
