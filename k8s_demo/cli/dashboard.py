from __future__ import annotations

import argparse
import asyncio
import sys

from rich.console import Console

from k8s_demo.config.load_config import LOG_LEVELS, ConfigError, configure_logging, load_dashboard_config
from k8s_demo.webui.client import CatalogClient
from k8s_demo.webui.dashboard import Dashboard, create_dashboard
from k8s_demo.webui.render import render_surface


HELP_LINE = "[dim]r[/dim] refresh  [dim]h[/dim] health check  [dim]q[/dim] quit"

COMMANDS = {
    "r": "refresh",
    "refresh": "refresh",
    "h": "health",
    "health": "health",
}


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Terminal dashboard for the k8s-demo catalog service.")
    parser.add_argument(
        "--api-url",
        default="",
        help="Backend base URL (default: env API_URL or http://localhost:3001).",
    )
    parser.add_argument(
        "--notice-seconds",
        type=float,
        default=None,
        help="How long transient notices stay visible (default: 3).",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        type=str.lower,
        choices=sorted(LOG_LEVELS),
        help="Logging level for fetch errors.",
    )
    return parser.parse_args(argv)


def _draw(console: Console, dashboard: Dashboard) -> None:
    console.clear()
    console.print(render_surface(dashboard.surface))
    console.print(HELP_LINE)


async def run(dashboard: Dashboard, console: Console) -> None:
    # Expired notices must disappear from the screen without waiting for input.
    dashboard.notifier.on_change = lambda: _draw(console, dashboard)
    await dashboard.surface.dispatch("ready")
    _draw(console, dashboard)
    while True:
        try:
            line = await asyncio.to_thread(input, "> ")
        except EOFError:
            return
        cmd = line.strip().lower()
        if cmd in {"q", "quit", "exit"}:
            return
        event = COMMANDS.get(cmd)
        if event is None:
            console.print(f"[yellow]Unknown command: {cmd!r}[/yellow]")
            continue
        await dashboard.surface.dispatch(event)
        _draw(console, dashboard)


async def _amain(api_url: str, notice_duration_s: float) -> None:
    console = Console()
    async with CatalogClient(api_url) as client:
        dashboard = create_dashboard(client, notice_duration_s=notice_duration_s)
        await run(dashboard, console)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv or sys.argv[1:])
    try:
        configure_logging(args.log_level)
        cfg = load_dashboard_config(api_url=args.api_url or None, notice_duration_s=args.notice_seconds)
    except ConfigError as e:
        print(str(e), file=sys.stderr)
        return 2

    try:
        asyncio.run(_amain(cfg.api_url, cfg.notice_duration_s))
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
