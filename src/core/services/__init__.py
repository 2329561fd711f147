"""Servicios del Core: orquestación de lookups y edición del hosts."""
