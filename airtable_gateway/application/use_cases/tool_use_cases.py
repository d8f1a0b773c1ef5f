"""
Casos de uso de invocacion de herramientas.

Traduce (nombre, argumentos) a una llamada del AirtableClient y normaliza
cualquier resultado en un ToolResultDTO. Ningun error sale de execute().
"""
import json
from typing import Any, Mapping, Optional

from loguru import logger
from pydantic import ValidationError

from airtable_gateway.application.dto.tool_dto import ToolResultDTO
from airtable_gateway.application.tools.operations import (
    ARGS_MODELS,
    CreateRecordArgs,
    DeleteRecordArgs,
    GetRecordsArgs,
    ToolArgs,
    UpdateRecordArgs,
)
from airtable_gateway.infrastructure.external.airtable import AirtableApiError, AirtableClient
from airtable_gateway.shared.constants.tool_constants import ToolName
from airtable_gateway.shared.exceptions.base import AppException
from airtable_gateway.shared.exceptions.domain import (
    InvalidToolArgumentsException,
    UnknownToolException,
)


def _to_json(payload: Any) -> str:
    """Serializa el payload de Airtable con indentacion de 2 espacios."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


class ToolUseCases:
    """Casos de uso para ejecutar herramientas contra Airtable."""
    
    def __init__(self, airtable_client: AirtableClient):
        """
        Inicializa los casos de uso.
        
        Args:
            airtable_client: Cliente de la tabla de Airtable configurada
        """
        self.airtable_client = airtable_client
    
    async def execute(
        self,
        tool_name: str,
        arguments: Optional[Mapping[str, Any]] = None
    ) -> ToolResultDTO:
        """
        Ejecuta una herramienta y retorna el resultado normalizado.
        
        Args:
            tool_name: Nombre recibido en la URL
            arguments: Objeto JSON del body (puede venir vacio)
            
        Returns:
            ToolResultDTO: isError=false con el payload, o isError=true con
            un texto que empieza con 'Error: '
        """
        try:
            tool = self._resolve_tool(tool_name)
            args = self._parse_arguments(tool, arguments or {})
            text = await self._run(tool, args)
        except AirtableApiError as e:
            logger.warning(
                f"Herramienta {tool_name} fallo en Airtable "
                f"(status={e.upstream_status}): {e.message}"
            )
            return ToolResultDTO.failure(e.message)
        except AppException as e:
            logger.info(f"Herramienta {tool_name} rechazada: {e.error_code}")
            return ToolResultDTO.failure(e.message)
        except Exception as e:
            logger.exception(f"Error inesperado ejecutando {tool_name}")
            return ToolResultDTO.failure(str(e) or e.__class__.__name__)
        
        logger.info(f"Herramienta {tool_name} ejecutada correctamente")
        return ToolResultDTO.success(text)
    
    @staticmethod
    def _resolve_tool(tool_name: str) -> ToolName:
        tool = ToolName.parse(tool_name)
        if tool is None:
            raise UnknownToolException(tool_name)
        return tool
    
    @staticmethod
    def _parse_arguments(tool: ToolName, arguments: Mapping[str, Any]) -> ToolArgs:
        try:
            return ARGS_MODELS[tool].model_validate(dict(arguments))
        except ValidationError as e:
            raise InvalidToolArgumentsException(tool.value, e.errors()) from e
    
    async def _run(self, tool: ToolName, args: ToolArgs) -> str:
        """Ejecuta la llamada a Airtable y arma el texto de exito."""
        match args:
            case GetRecordsArgs():
                data = await self.airtable_client.list_records(
                    max_records=args.max_records,
                    filter_by_formula=args.filter_by_formula,
                    view=args.view,
                )
                return _to_json(data)
            case CreateRecordArgs():
                data = await self.airtable_client.create_record(args.fields)
                return f"Record created: {_to_json(data)}"
            case UpdateRecordArgs():
                data = await self.airtable_client.update_record(args.record_id, args.fields)
                return f"Record updated: {_to_json(data)}"
            case DeleteRecordArgs():
                data = await self.airtable_client.delete_record(args.record_id)
                return f"Record deleted: {_to_json(data)}"
        raise UnknownToolException(tool.value)
