"""
Excepciones de configuracion del proceso.
"""
from typing import List

from airtable_gateway.shared.exceptions.base import AppException


class ConfigurationException(AppException):
    """
    Faltan variables de entorno requeridas o tienen valores invalidos.
    Es fatal: el servidor no debe empezar a aceptar conexiones.
    """
    
    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(
            message=(
                "Missing or invalid environment variables: "
                + ", ".join(self.missing)
            ),
            status_code=500,
            error_code="CONFIGURATION_ERROR",
            details={"missing": self.missing}
        )
