from __future__ import annotations

import asyncio
from typing import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from k8s_demo.api.app import create_app
from k8s_demo.webui.client import BackendUnavailableError, CatalogClient
from k8s_demo.webui.dashboard import ITEMS_ERROR_CARD, UNREACHABLE_MESSAGE, Dashboard, create_dashboard
from k8s_demo.webui.surface import ConnectionState, NoticeKind


pytestmark = pytest.mark.asyncio


def _refused(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


@pytest_asyncio.fixture
async def live_dashboard(clean_env: pytest.MonkeyPatch) -> AsyncIterator[Dashboard]:
    transport = httpx.ASGITransport(app=create_app())
    async with CatalogClient("http://test", transport=transport) as client:
        yield create_dashboard(client, notice_duration_s=60)


@pytest_asyncio.fixture
async def offline_dashboard() -> AsyncIterator[Dashboard]:
    async with CatalogClient("http://test", transport=httpx.MockTransport(_refused)) as client:
        yield create_dashboard(client, notice_duration_s=60)


async def test_initial_surface_is_connecting(live_dashboard: Dashboard) -> None:
    surface = live_dashboard.surface
    assert surface.status.state is ConnectionState.CONNECTING
    assert surface.cards == ()
    assert surface.notice is None


async def test_refresh_renders_info_and_items(live_dashboard: Dashboard) -> None:
    await live_dashboard.refresh()
    surface = live_dashboard.surface

    assert surface.status.state is ConnectionState.CONNECTED
    assert surface.status.label == "Connected"
    rows = {row.label: row.value for row in surface.info.rows}
    assert rows == {
        "Service": "k8s-demo-backend",
        "Version": "1.0.0",
        "Hostname": "unknown",
        "Pod Name": "local",
        "Environment": "development",
    }
    assert [card.name for card in surface.cards] == ["Kubernetes", "Docker", "Node.js", "React"]
    assert surface.cards[0].icon == "☸️"
    assert surface.notice is not None
    assert surface.notice.message == "Data refreshed!"
    assert surface.notice.kind is NoticeKind.SUCCESS


async def test_refresh_against_unreachable_backend(offline_dashboard: Dashboard) -> None:
    await offline_dashboard.refresh()
    surface = offline_dashboard.surface

    assert surface.status.state is ConnectionState.ERROR
    assert surface.status.label == "Connection Failed"
    assert len(surface.info.rows) == 1
    assert surface.info.rows[0].value == UNREACHABLE_MESSAGE
    assert surface.info.rows[0].is_error
    assert surface.cards == (ITEMS_ERROR_CARD,)
    # Refresh still completes normally.
    assert surface.notice is not None and surface.notice.message == "Data refreshed!"

    # Later interaction keeps working.
    await offline_dashboard.check_health()
    assert surface.notice.message == "✗ Backend health check failed"
    assert surface.notice.kind is NoticeKind.ERROR


async def test_non_success_status_is_a_transport_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/info":
            return httpx.Response(503, json={"error": "unavailable"})
        return httpx.Response(200, json={"items": [{"id": 1, "name": "n", "description": "d", "icon": "i"}], "count": 1})

    async with CatalogClient("http://test", transport=httpx.MockTransport(handler)) as client:
        dashboard = create_dashboard(client, notice_duration_s=60)
        await dashboard.refresh()

    # Info failure does not affect the items panel.
    assert dashboard.surface.status.state is ConnectionState.ERROR
    assert [card.name for card in dashboard.surface.cards] == ["n"]


async def test_malformed_body_is_a_transport_failure() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"unexpected": True}))
    async with CatalogClient("http://test", transport=transport) as client:
        with pytest.raises(BackendUnavailableError):
            await client.list_items()


async def test_refresh_runs_fetches_concurrently(live_dashboard: Dashboard) -> None:
    started: list[str] = []
    release = asyncio.Event()

    async def slow_info() -> None:
        started.append("info")
        await release.wait()

    async def slow_items() -> None:
        started.append("items")
        await release.wait()

    live_dashboard.fetch_server_info = slow_info  # type: ignore[method-assign]
    live_dashboard.fetch_items = slow_items  # type: ignore[method-assign]

    task = asyncio.create_task(live_dashboard.refresh())
    for _ in range(5):
        await asyncio.sleep(0)
    assert sorted(started) == ["info", "items"]
    assert live_dashboard.surface.notice.message == "Refreshing data..."
    assert not task.done()

    release.set()
    await task
    assert live_dashboard.surface.notice.message == "Data refreshed!"


async def test_health_probe_reports_timestamp_and_keeps_status(live_dashboard: Dashboard) -> None:
    await live_dashboard.check_health()
    notice = live_dashboard.surface.notice
    assert notice is not None
    assert notice.kind is NoticeKind.SUCCESS
    assert notice.message.startswith("✓ Backend healthy: ")
    assert notice.message.endswith("Z")
    assert live_dashboard.surface.status.state is ConnectionState.CONNECTING


async def test_ready_event_triggers_exactly_one_refresh(live_dashboard: Dashboard) -> None:
    calls = 0
    original = live_dashboard.refresh

    async def counting_refresh() -> None:
        nonlocal calls
        calls += 1
        await original()

    live_dashboard.refresh = counting_refresh  # type: ignore[method-assign]
    await live_dashboard.surface.dispatch("ready")
    await live_dashboard.surface.dispatch("ready")
    assert calls == 1
    assert live_dashboard.surface.status.state is ConnectionState.CONNECTED


async def test_bound_events_drive_controller(live_dashboard: Dashboard) -> None:
    await live_dashboard.surface.dispatch("refresh")
    assert len(live_dashboard.surface.cards) == 4

    await live_dashboard.surface.dispatch("health")
    assert live_dashboard.surface.notice.message.startswith("✓ Backend healthy")


async def test_failed_health_probe_keeps_connected_status(clean_env: pytest.MonkeyPatch) -> None:
    app_transport = httpx.ASGITransport(app=create_app())

    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/health":
            raise httpx.ConnectError("Connection reset", request=request)
        return await app_transport.handle_async_request(request)

    async with CatalogClient("http://test", transport=httpx.MockTransport(handler)) as client:
        dashboard = create_dashboard(client, notice_duration_s=60)
        await dashboard.refresh()
        assert dashboard.surface.status.state is ConnectionState.CONNECTED

        await dashboard.check_health()

    assert dashboard.surface.notice is not None
    assert dashboard.surface.notice.message == "✗ Backend health check failed"
    assert dashboard.surface.status.state is ConnectionState.CONNECTED
    assert dashboard.surface.status.label == "Connected"
