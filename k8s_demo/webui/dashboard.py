from __future__ import annotations

import asyncio
import logging

from k8s_demo.webui.client import BackendUnavailableError, CatalogClient
from k8s_demo.webui.notifier import Notifier
from k8s_demo.webui.surface import (
    ConnectionState,
    InfoPanel,
    InfoRow,
    ItemCard,
    NoticeKind,
    StatusBadge,
    Surface,
)


logger = logging.getLogger(__name__)

UNREACHABLE_MESSAGE = "Unable to connect to backend"
ITEMS_ERROR_CARD = ItemCard(icon="⚠️", name="Error", description="Failed to load items", is_error=True)


class Dashboard:
    """Controller that drives the catalog service and updates a surface.

    Fetch failures are logged and rendered inline; no dashboard method raises
    BackendUnavailableError to its caller.
    """

    def __init__(self, client: CatalogClient, surface: Surface, notifier: Notifier) -> None:
        self.client = client
        self.surface = surface
        self.notifier = notifier
        self._initialized = False

    def bind(self) -> None:
        self.surface.add_event_listener("ready", self.on_ready)
        self.surface.add_event_listener("refresh", self.refresh)
        self.surface.add_event_listener("health", self.check_health)

    async def on_ready(self) -> None:
        if self._initialized:
            return
        self._initialized = True
        await self.refresh()

    async def refresh(self) -> None:
        self.notifier.show("Refreshing data...", NoticeKind.INFO)
        await asyncio.gather(self.fetch_server_info(), self.fetch_items())
        self.notifier.show("Data refreshed!", NoticeKind.SUCCESS)

    async def fetch_server_info(self) -> None:
        try:
            info = await self.client.get_info()
        except BackendUnavailableError as e:
            logger.error("Error fetching server info: %s", e)
            self.surface.status = StatusBadge(state=ConnectionState.ERROR, label="Connection Failed")
            self.surface.info = InfoPanel(rows=(InfoRow("Status", UNREACHABLE_MESSAGE, is_error=True),))
            return

        self.surface.status = StatusBadge(state=ConnectionState.CONNECTED, label="Connected")
        self.surface.info = InfoPanel(
            rows=(
                InfoRow("Service", info.service),
                InfoRow("Version", info.version),
                InfoRow("Hostname", info.hostname),
                InfoRow("Pod Name", info.pod_name),
                InfoRow("Environment", info.node_env),
            )
        )

    async def fetch_items(self) -> None:
        try:
            payload = await self.client.list_items()
        except BackendUnavailableError as e:
            logger.error("Error fetching items: %s", e)
            self.surface.cards = (ITEMS_ERROR_CARD,)
            return

        self.surface.cards = tuple(
            ItemCard(icon=it.icon, name=it.name, description=it.description) for it in payload.items
        )

    async def check_health(self) -> None:
        try:
            health = await self.client.health()
        except BackendUnavailableError as e:
            logger.warning("Health check failed: %s", e)
            self.notifier.show("✗ Backend health check failed", NoticeKind.ERROR)
            return
        self.notifier.show(f"✓ Backend healthy: {health.timestamp}", NoticeKind.SUCCESS)


def create_dashboard(
    client: CatalogClient,
    *,
    surface: Surface | None = None,
    notice_duration_s: float = 3.0,
) -> Dashboard:
    """Build a dashboard with its event listeners registered on the surface."""
    surface = surface if surface is not None else Surface()
    dashboard = Dashboard(client, surface, Notifier(surface, duration_s=notice_duration_s))
    dashboard.bind()
    return dashboard
