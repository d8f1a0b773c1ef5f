"""
Tests del cliente de Airtable contra un httpx.MockTransport.

Verifica metodo, ruta, query, body y headers de cada operacion, y que
cualquier fallo del upstream se convierta en AirtableApiError.
"""
from __future__ import annotations

import json

import httpx
import pytest

from airtable_gateway.infrastructure.external.airtable import (
    AirtableApiError,
    AirtableClient,
    AirtableCredentials,
    build_table_url,
)


def _path(request: httpx.Request) -> bytes:
    return request.url.raw_path.split(b"?")[0]


def test_build_table_url_escapes_spaces_once() -> None:
    url = build_table_url("https://api.airtable.com/v0", "appX", "My Table")
    assert url == "https://api.airtable.com/v0/appX/My%20Table"
    assert "%2520" not in url


def test_build_table_url_escapes_reserved_characters() -> None:
    url = build_table_url("https://api.airtable.com/v0/", "appX", "a/b?c&d")
    assert url == "https://api.airtable.com/v0/appX/a%2Fb%3Fc%26d"


@pytest.mark.asyncio
async def test_list_records_sends_default_max_records(airtable_client, fake_airtable) -> None:
    fake_airtable.respond_with(200, {"records": [{"id": "rec1", "fields": {}}]})

    data = await airtable_client.list_records()

    assert data == {"records": [{"id": "rec1", "fields": {}}]}
    assert len(fake_airtable.requests) == 1
    request = fake_airtable.requests[0]
    assert request.method == "GET"
    assert _path(request) == b"/v0/appTEST/My%20Table"
    assert request.url.params["maxRecords"] == "10"
    assert "filterByFormula" not in request.url.params
    assert "view" not in request.url.params
    assert request.headers["Authorization"] == "Bearer pat-test-token"


@pytest.mark.asyncio
async def test_list_records_forwards_filter_and_view(airtable_client, fake_airtable) -> None:
    await airtable_client.list_records(
        max_records=3, filter_by_formula="{Status} = 'Done'", view="Grid view"
    )

    params = fake_airtable.requests[0].url.params
    assert params["maxRecords"] == "3"
    assert params["filterByFormula"] == "{Status} = 'Done'"
    assert params["view"] == "Grid view"


@pytest.mark.asyncio
async def test_list_records_does_not_follow_offset(airtable_client, fake_airtable) -> None:
    fake_airtable.respond_with(200, {"records": [], "offset": "itrNext"})

    data = await airtable_client.list_records()

    assert data["offset"] == "itrNext"
    assert len(fake_airtable.requests) == 1


@pytest.mark.asyncio
async def test_create_record_posts_fields(airtable_client, fake_airtable) -> None:
    fake_airtable.respond_with(200, {"id": "recNew", "fields": {"Name": "Ada"}})

    data = await airtable_client.create_record({"Name": "Ada"})

    assert data["id"] == "recNew"
    request = fake_airtable.requests[0]
    assert request.method == "POST"
    assert _path(request) == b"/v0/appTEST/My%20Table"
    assert json.loads(request.content) == {"fields": {"Name": "Ada"}}
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["Authorization"] == "Bearer pat-test-token"


@pytest.mark.asyncio
async def test_update_record_patches_by_id(airtable_client, fake_airtable) -> None:
    await airtable_client.update_record("rec123", {"Status": "Done"})

    request = fake_airtable.requests[0]
    assert request.method == "PATCH"
    assert _path(request) == b"/v0/appTEST/My%20Table/rec123"
    assert json.loads(request.content) == {"fields": {"Status": "Done"}}
    assert request.headers["Content-Type"] == "application/json"


@pytest.mark.asyncio
async def test_delete_record_targets_id(airtable_client, fake_airtable) -> None:
    fake_airtable.respond_with(200, {"id": "rec123", "deleted": True})

    data = await airtable_client.delete_record("rec123")

    assert data == {"id": "rec123", "deleted": True}
    request = fake_airtable.requests[0]
    assert request.method == "DELETE"
    assert _path(request) == b"/v0/appTEST/My%20Table/rec123"
    assert "Content-Type" not in request.headers


@pytest.mark.asyncio
async def test_non_2xx_raises_with_upstream_message(airtable_client, fake_airtable) -> None:
    fake_airtable.respond_with(
        404, {"error": {"type": "NOT_FOUND", "message": "Could not find record"}}
    )

    with pytest.raises(AirtableApiError) as exc_info:
        await airtable_client.delete_record("rec404")

    assert exc_info.value.upstream_status == 404
    assert "404" in exc_info.value.message
    assert "Could not find record" in exc_info.value.message


@pytest.mark.asyncio
async def test_string_error_body_is_embedded(airtable_client, fake_airtable) -> None:
    fake_airtable.respond_with(403, {"error": "NOT_AUTHORIZED"})

    with pytest.raises(AirtableApiError) as exc_info:
        await airtable_client.list_records()

    assert "NOT_AUTHORIZED" in exc_info.value.message


def _client_with_handler(handler) -> AirtableClient:
    return AirtableClient(
        AirtableCredentials(token="t", base_id="appX", table_name="Tasks"),
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        timeout_s=2.5,
    )


@pytest.mark.asyncio
async def test_plain_text_error_body_is_embedded() -> None:
    client = _client_with_handler(lambda request: httpx.Response(502, text="Bad gateway upstream"))

    with pytest.raises(AirtableApiError) as exc_info:
        await client.list_records()
    await client.close()

    assert exc_info.value.upstream_status == 502
    assert "Bad gateway upstream" in exc_info.value.message


@pytest.mark.asyncio
async def test_transport_error_raises_without_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _client_with_handler(handler)

    with pytest.raises(AirtableApiError) as exc_info:
        await client.create_record({"Name": "Ada"})
    await client.close()

    assert exc_info.value.upstream_status is None
    assert "connection refused" in exc_info.value.message


@pytest.mark.asyncio
async def test_timeout_raises_airtable_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("read timed out", request=request)

    client = _client_with_handler(handler)

    with pytest.raises(AirtableApiError) as exc_info:
        await client.list_records()
    await client.close()

    assert "timed out after 2.5s" in exc_info.value.message
