"""Shared fixtures: mirror settings, httpx-backed use case and an app wired to it."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterator

import pytest
from fastapi.testclient import TestClient

from core.config import MirrorSettings, ProxySettings
from infrastructure.http_clients.mirror_client import MirrorHttpClient
from presentation.app import create_app
from presentation.routers.media_proxy import get_fetch_media_uc
from use_cases import FetchMediaUseCase
from use_cases.mappers import mirror_from_settings

MIRROR_BASE = "https://cdn.jsdelivr.net/gh/user/repo@main"
USER_AGENT = "Mozilla/5.0 (compatible; MediaMirrorProxy/1.0)"


@pytest.fixture
def mirror_settings() -> MirrorSettings:
    return MirrorSettings(
        username="user",
        repository="repo",
        branch="main",
        hosting_method="cdn",
        user_agent=USER_AGENT,
    )


@pytest.fixture
def proxy_settings() -> ProxySettings:
    return ProxySettings(path_prefix="/uploads/", fallback_root="wp-content")


def build_use_case(
    client: MirrorHttpClient,
    mirror_settings: MirrorSettings,
    proxy_settings: ProxySettings,
) -> FetchMediaUseCase:
    return FetchMediaUseCase(
        fetcher=client,
        mirror=mirror_from_settings(mirror_settings),
        proxy_settings=proxy_settings,
        mirror_settings=mirror_settings,
    )


@pytest.fixture
async def fetch_uc(
    mirror_settings: MirrorSettings, proxy_settings: ProxySettings
) -> AsyncIterator[FetchMediaUseCase]:
    """Use case backed by a real httpx client, intercepted with respx."""
    client = MirrorHttpClient(mirror_settings)
    yield build_use_case(client, mirror_settings, proxy_settings)
    await client.aclose()


@pytest.fixture
def test_client(
    mirror_settings: MirrorSettings, proxy_settings: ProxySettings
) -> Iterator[TestClient]:
    """App with the media proxy dependency pointed at the test mirror."""
    client = MirrorHttpClient(mirror_settings)
    use_case = build_use_case(client, mirror_settings, proxy_settings)
    app = create_app()
    app.dependency_overrides[get_fetch_media_uc] = lambda: use_case
    yield TestClient(app)
    asyncio.run(client.aclose())
