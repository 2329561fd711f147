"""Núcleo: configuración, modelos, errores y servicios."""
