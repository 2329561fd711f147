"""Modelos y entidades del dominio.

Estructuras de datos puras (Pydantic v2): no conocen HTTP, CLI ni el sistema
de archivos.
"""
