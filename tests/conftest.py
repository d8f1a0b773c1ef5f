"""
Configuracion de fixtures para pytest.

El upstream de Airtable se reemplaza por un httpx.MockTransport que registra
cada peticion; ningun test sale a la red.
"""
from typing import AsyncGenerator, List

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from airtable_gateway.core.config import Settings, load_settings
from airtable_gateway.infrastructure.external.airtable import (
    AirtableClient,
    AirtableCredentials,
)
from airtable_gateway.main import create_application


TEST_SECRET = "test-secret-123"


class FakeAirtable:
    """Upstream falso: responde siempre status_code/payload y guarda las peticiones."""
    
    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.payload = {"records": []}
    
    def respond_with(self, status_code: int, payload) -> None:
        self.status_code = status_code
        self.payload = payload
    
    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)


def build_settings(**overrides) -> Settings:
    values = {
        "AIRTABLE_API_TOKEN": "pat-test-token",
        "AIRTABLE_BASE_ID": "appTEST",
        "AIRTABLE_TABLE_NAME": "My Table",
        "MCP_SERVER_SECRET": TEST_SECRET,
        "ENABLE_DEBUG_ENDPOINT": False,
        "_env_file": None,
    }
    values.update(overrides)
    return load_settings(**values)


@pytest.fixture
def settings() -> Settings:
    return build_settings()


@pytest.fixture
def fake_airtable() -> FakeAirtable:
    return FakeAirtable()


@pytest_asyncio.fixture
async def airtable_client(
    settings: Settings, fake_airtable: FakeAirtable
) -> AsyncGenerator[AirtableClient, None]:
    client = AirtableClient(
        AirtableCredentials(
            token=settings.AIRTABLE_API_TOKEN,
            base_id=settings.AIRTABLE_BASE_ID,
            table_name=settings.AIRTABLE_TABLE_NAME,
        ),
        client=httpx.AsyncClient(transport=httpx.MockTransport(fake_airtable.handler)),
        base_url=settings.AIRTABLE_API_URL,
    )
    yield client
    await client.close()


@pytest.fixture
def app(settings: Settings, airtable_client: AirtableClient):
    """App FastAPI apuntando al upstream falso."""
    application = create_application(settings, airtable_client)
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def api_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def auth_headers() -> dict:
    return {"Authorization": f"Bearer {TEST_SECRET}"}


@pytest.fixture
def make_settings():
    """Factory de Settings con overrides puntuales."""
    return build_settings
