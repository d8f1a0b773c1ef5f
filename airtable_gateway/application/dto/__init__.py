"""
DTOs de entrada/salida del gateway.
"""
