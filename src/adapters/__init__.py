"""Adaptadores de I/O: directorio de locales (HTTP), dispositivo (shell), exportación."""
