"""
Catalogo estatico de herramientas para descubrimiento (GET /tools).

El inputSchema es documentacion: no se usa para validar invocaciones.
"""
from typing import Any, Dict, List, Optional

from airtable_gateway.application.dto.tool_dto import ToolDescriptorDTO
from airtable_gateway.shared.constants.tool_constants import DEFAULT_MAX_RECORDS, ToolName


class ToolRegistry:
    """
    Registro de solo lectura con los descriptores de las cuatro herramientas.
    
    Uso:
        tools = ToolRegistry.list_tools()
        descriptor = ToolRegistry.get("airtable_get_records")
    """
    
    # Definicion de herramientas en el orden en que se publican
    TOOLS_DEFINITION: List[Dict[str, Any]] = [
        {
            "name": ToolName.GET_RECORDS.value,
            "description": "Get records from Airtable table",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "maxRecords": {"type": "number", "default": DEFAULT_MAX_RECORDS},
                    "filterByFormula": {"type": "string"},
                    "view": {"type": "string"}
                }
            }
        },
        {
            "name": ToolName.CREATE_RECORD.value,
            "description": "Create a new record in Airtable table",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "fields": {"type": "object"}
                },
                "required": ["fields"]
            }
        },
        {
            "name": ToolName.UPDATE_RECORD.value,
            "description": "Update an existing record in Airtable table",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "recordId": {"type": "string"},
                    "fields": {"type": "object"}
                },
                "required": ["recordId", "fields"]
            }
        },
        {
            "name": ToolName.DELETE_RECORD.value,
            "description": "Delete a record from Airtable table",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "recordId": {"type": "string"}
                },
                "required": ["recordId"]
            }
        },
    ]
    
    _TOOLS: List[ToolDescriptorDTO] = [
        ToolDescriptorDTO.model_validate(definition) for definition in TOOLS_DEFINITION
    ]
    
    @classmethod
    def list_tools(cls) -> List[ToolDescriptorDTO]:
        """Retorna los descriptores en orden de publicacion."""
        return [tool.model_copy(deep=True) for tool in cls._TOOLS]
    
    @classmethod
    def get(cls, name: str) -> Optional[ToolDescriptorDTO]:
        """Busca un descriptor por nombre."""
        for tool in cls._TOOLS:
            if tool.name == name:
                return tool.model_copy(deep=True)
        return None
