"""
Excepciones relacionadas con autenticacion del token bearer.
"""
from airtable_gateway.shared.exceptions.base import AppException


class AuthException(AppException):
    """Excepcion base para errores de autenticacion."""
    
    def __init__(self, message: str, error_code: str = "AUTH_ERROR", details=None):
        super().__init__(
            message=message,
            status_code=401,
            error_code=error_code,
            details=details
        )


class UnauthorizedException(AuthException):
    """Token bearer ausente o distinto del secreto configurado."""
    
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(
            message=message,
            error_code="UNAUTHORIZED"
        )
