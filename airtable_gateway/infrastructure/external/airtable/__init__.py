"""
Integracion con la Airtable REST API.

Una llamada HTTP por operacion: sin paginacion, sin reintentos y sin
backoff. Los errores del upstream se levantan como AirtableApiError y el
caso de uso decide como mostrarlos.
"""
from .airtable_client import (
    AirtableApiError,
    AirtableClient,
    AirtableCredentials,
    build_table_url,
)

__all__ = [
    "AirtableApiError",
    "AirtableClient",
    "AirtableCredentials",
    "build_table_url",
]
