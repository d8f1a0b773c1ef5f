"""
Excepciones relacionadas con la invocacion de herramientas.

Estas excepciones no llegan al cliente como errores HTTP: el caso de uso
las convierte en un ToolResult con isError=true.
"""
from typing import Any, Dict, List

from airtable_gateway.shared.exceptions.base import AppException


class DomainException(AppException):
    """Excepcion base para errores de dominio."""
    
    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR", details=None):
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details
        )


class UnknownToolException(DomainException):
    """Excepcion cuando el nombre de herramienta no esta registrado."""
    
    def __init__(self, tool_name: str):
        super().__init__(
            message=f"Unknown tool: {tool_name}",
            error_code="UNKNOWN_TOOL",
            details={"tool": tool_name}
        )
        self.status_code = 404


class InvalidToolArgumentsException(DomainException):
    """Excepcion cuando los argumentos no sirven para armar la llamada a Airtable."""
    
    def __init__(self, tool_name: str, errors: List[Dict[str, Any]]):
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ())) or 'body'}: {err.get('msg')}"
            for err in errors
        )
        super().__init__(
            message=f"Invalid arguments for {tool_name}: {problems}",
            error_code="INVALID_TOOL_ARGUMENTS",
            details={"tool": tool_name}
        )


class InvalidRequestBodyException(DomainException):
    """El cuerpo de la peticion no es un objeto JSON valido."""
    
    def __init__(self):
        super().__init__(
            message="Invalid JSON body",
            error_code="INVALID_REQUEST_BODY"
        )


class FeatureDisabledException(AppException):
    """Endpoint deshabilitado por configuracion; se responde como 404."""
    
    def __init__(self, feature: str):
        super().__init__(
            message="Not found",
            status_code=404,
            error_code="FEATURE_DISABLED",
        )
        self.feature = feature
