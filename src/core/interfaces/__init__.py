"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) para el directorio de locales y el dispositivo.
- El pipeline depende de estos contratos, no de httpx ni de subprocess.
"""
