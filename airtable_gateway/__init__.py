"""
Gateway HTTP que expone un conjunto fijo de herramientas CRUD sobre una
tabla de Airtable, protegido por un token bearer.
"""

__version__ = "1.0.0"
