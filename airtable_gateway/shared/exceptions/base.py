"""
Excepcion base para todas las excepciones personalizadas del gateway.
"""
from typing import Optional, Dict, Any


class AppException(Exception):
    """
    Excepcion base de la aplicacion.
    Todas las excepciones personalizadas deben heredar de esta clase.
    """
    
    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Inicializa la excepcion.
        
        Args:
            message: Mensaje de error descriptivo (se muestra al cliente)
            status_code: Codigo de estado HTTP cuando se responde como error HTTP
            error_code: Codigo de error interno, util para logs
            details: Detalles adicionales del error
        """
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)
    
    def to_response_body(self) -> Dict[str, Any]:
        """Cuerpo JSON con el que se responde esta excepcion."""
        body: Dict[str, Any] = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body
