from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from k8s_demo.webui.surface import ConnectionState, NoticeKind, Surface


_STATUS_STYLE = {
    ConnectionState.CONNECTING: "yellow",
    ConnectionState.CONNECTED: "green",
    ConnectionState.ERROR: "magenta",
}

_NOTICE_STYLE = {
    NoticeKind.INFO: "cyan",
    NoticeKind.SUCCESS: "green",
    NoticeKind.ERROR: "red",
}


def render_surface(surface: Surface) -> RenderableType:
    """Turn the dashboard surface into a rich renderable."""
    status = Text.assemble(("● ", _STATUS_STYLE[surface.status.state]), surface.status.label)

    info = Table(title=surface.info.title, show_header=True, header_style="bold")
    info.add_column("Label", style="dim")
    info.add_column("Value")
    for row in surface.info.rows:
        info.add_row(row.label, Text(row.value, style="magenta" if row.is_error else ""))

    cards = [
        Panel(
            Text(card.description),
            title=f"{card.icon} {card.name}",
            border_style="red" if card.is_error else "blue",
        )
        for card in surface.cards
    ]

    parts: list[RenderableType] = [status, info, *cards]
    if surface.notice is not None:
        parts.append(Text(surface.notice.message, style=f"bold {_NOTICE_STYLE[surface.notice.kind]}"))
    return Group(*parts)
