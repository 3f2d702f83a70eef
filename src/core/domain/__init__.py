"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2) y la
  tabla de locales.
- El dominio no conoce HTTP, CLI, ni el dispositivo: solo conceptos del problema.
"""
