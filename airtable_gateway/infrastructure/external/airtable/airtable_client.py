"""
Cliente minimo de Airtable REST API (sin SDKs externos).

Cubre exactamente cuatro operaciones sobre una tabla:
- listar registros (solo la primera pagina)
- crear registro
- actualizar registro (PATCH parcial)
- eliminar registro
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

import httpx
from loguru import logger

from airtable_gateway.shared.exceptions.base import AppException

DEFAULT_BASE_URL = "https://api.airtable.com/v0"

# Mismo conjunto de caracteres que encodeURIComponent deja sin escapar
_TABLE_NAME_SAFE_CHARS = "!~*'()"


@dataclass(frozen=True)
class AirtableCredentials:
    token: str
    base_id: str
    table_name: str


class AirtableApiError(AppException):
    """
    Error de integracion con Airtable.

    upstream_status es el codigo HTTP devuelto por Airtable, o None si la
    llamada fallo antes de recibir respuesta (red, timeout).
    """

    def __init__(self, message: str, upstream_status: Optional[int] = None) -> None:
        self.upstream_status = upstream_status
        super().__init__(
            message=message,
            status_code=502,
            error_code="AIRTABLE_API_ERROR",
            details={"upstream_status": upstream_status},
        )


def build_table_url(base_url: str, base_id: str, table_name: str) -> str:
    """
    Compone la URL de la tabla: {base_url}/{base_id}/{tabla escapada}.

    El nombre de tabla se escapa una sola vez (puede tener espacios o
    caracteres reservados). El base_id se usa tal cual.
    """
    escaped_table = quote(table_name, safe=_TABLE_NAME_SAFE_CHARS)
    return f"{base_url.rstrip('/')}/{base_id}/{escaped_table}"


def _extract_error_detail(resp: httpx.Response) -> str:
    """
    Obtiene el texto de error de una respuesta de Airtable.

    Airtable responde {"error": {"type": ..., "message": ...}} o a veces
    {"error": "NOT_FOUND"}; si el body no es JSON se usa el texto crudo.
    """
    try:
        body = resp.json()
    except ValueError:
        return resp.text or resp.reason_phrase

    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        message = error.get("message")
        error_type = error.get("type")
        if message and error_type:
            return f"{error_type}: {message}"
        return str(message or error_type or body)
    if error:
        return str(error)
    return resp.text or resp.reason_phrase


class AirtableClient:
    """
    Cliente HTTP asincrono de Airtable para una unica tabla.

    Importante:
    - No transforma los payloads: devuelve el JSON de Airtable tal cual.
    - El record_id se agrega crudo a la URL; no debe contener '/' ni '?'.
    - Comparte un httpx.AsyncClient entre peticiones; cerrar con close().
    """

    def __init__(
        self,
        credentials: AirtableCredentials,
        *,
        client: Optional[httpx.AsyncClient] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout_s: float = 30.0,
    ) -> None:
        self._creds = credentials
        self._timeout_s = timeout_s
        self._table_url = build_table_url(
            base_url, credentials.base_id, credentials.table_name
        )
        self._client = client or httpx.AsyncClient(timeout=timeout_s)

    @property
    def table_url(self) -> str:
        return self._table_url

    async def list_records(
        self,
        *,
        max_records: int = 10,
        filter_by_formula: Optional[str] = None,
        view: Optional[str] = None,
    ) -> Any:
        """
        Lista registros de la tabla. Solo se devuelve la primera pagina: si
        Airtable incluye 'offset' en la respuesta, no se sigue.
        """
        params: dict[str, Any] = {"maxRecords": max_records}
        if filter_by_formula:
            params["filterByFormula"] = filter_by_formula
        if view:
            params["view"] = view

        return await self._request_json("GET", self._table_url, params=params)

    async def create_record(self, fields: dict[str, Any]) -> Any:
        return await self._request_json(
            "POST", self._table_url, json_body={"fields": fields}
        )

    async def update_record(self, record_id: str, fields: dict[str, Any]) -> Any:
        return await self._request_json(
            "PATCH", f"{self._table_url}/{record_id}", json_body={"fields": fields}
        )

    async def delete_record(self, record_id: str) -> Any:
        return await self._request_json("DELETE", f"{self._table_url}/{record_id}")

    async def close(self) -> None:
        """Libera el pool de conexiones."""
        await self._client.aclose()

    async def _request_json(
        self,
        method: str,
        url: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json_body: Optional[dict[str, Any]] = None,
    ) -> Any:
        """
        Ejecuta una sola peticion HTTP y retorna el JSON de la respuesta.

        - 2xx: retorna el body parseado.
        - cualquier otro status, error de red o timeout: AirtableApiError.
        """
        headers = {"Authorization": f"Bearer {self._creds.token}"}
        if json_body is not None:
            headers["Content-Type"] = "application/json"

        logger.debug(f"Airtable {method} {url}")

        try:
            resp = await self._client.request(
                method,
                url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self._timeout_s,
            )
        except httpx.TimeoutException as e:
            raise AirtableApiError(
                f"Airtable request timed out after {self._timeout_s}s"
            ) from e
        except httpx.HTTPError as e:
            raise AirtableApiError(f"Airtable request failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            detail = _extract_error_detail(resp)
            raise AirtableApiError(
                f"Airtable request failed with status {resp.status_code}: {detail}",
                upstream_status=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as e:
            raise AirtableApiError(
                f"Airtable returned a non-JSON response (status {resp.status_code})",
                upstream_status=resp.status_code,
            ) from e
