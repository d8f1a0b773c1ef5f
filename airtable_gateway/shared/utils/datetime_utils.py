"""
Utilidades para manejo de fechas y horas.
"""
from datetime import datetime, timezone


class DateTimeUtils:
    """Clase de utilidades para operaciones con fechas y horas."""
    
    @staticmethod
    def now_utc() -> datetime:
        """
        Obtiene la fecha y hora actual en UTC.
        
        Returns:
            datetime: Fecha y hora actual en UTC
        """
        return datetime.now(timezone.utc)
    
    @staticmethod
    def to_iso_string(dt: datetime) -> str:
        """
        Convierte un datetime a ISO 8601 en UTC con milisegundos y sufijo 'Z'
        (ej: 2025-12-16T10:15:00.000Z).
        
        Args:
            dt: Objeto datetime; si es naive se asume UTC
            
        Returns:
            str: Fecha en formato ISO 8601
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        dt_utc = dt.astimezone(timezone.utc)
        return dt_utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    
    @classmethod
    def now_iso(cls) -> str:
        """Timestamp actual listo para respuestas JSON."""
        return cls.to_iso_string(cls.now_utc())
