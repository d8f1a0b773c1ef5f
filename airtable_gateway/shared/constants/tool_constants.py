"""
Constantes de las herramientas expuestas por el gateway.
"""
from enum import Enum
from typing import Optional


class ToolName(str, Enum):
    """Herramientas soportadas. Conjunto cerrado: no se registran en runtime."""
    GET_RECORDS = "airtable_get_records"
    CREATE_RECORD = "airtable_create_record"
    UPDATE_RECORD = "airtable_update_record"
    DELETE_RECORD = "airtable_delete_record"
    
    @classmethod
    def parse(cls, value: str) -> Optional["ToolName"]:
        """Retorna el miembro para un nombre recibido por HTTP, o None si no existe."""
        try:
            return cls(value)
        except ValueError:
            return None


# Valor usado cuando no llega maxRecords (o llega vacio / 0)
DEFAULT_MAX_RECORDS = 10

# Prefijo de todo texto de error mostrado al cliente
ERROR_PREFIX = "Error: "
