"""Errores del dominio.

Por qué una jerarquía de excepciones:
- La CLI distingue abortos fatales (validación/resolución) de avisos
  best-effort al aplicar propiedades sin inspeccionar mensajes.
- Cada variante lleva los datos que necesita para reportarse.
"""

from __future__ import annotations


class GeoSpooferError(Exception):
    """Base de todos los errores de GeoSpoofer."""


class InvalidLocale(GeoSpooferError):
    """El locale no pertenece a la tabla de referencia."""

    def __init__(self, locale: str) -> None:
        self.locale = locale
        super().__init__(f"The locale code '{locale}' is not valid.")


class ResolveError(GeoSpooferError):
    """No se pudo resolver el país de un locale en el directorio remoto."""

    def __init__(self, locale: str, detail: str) -> None:
        self.locale = locale
        self.detail = detail
        super().__init__(f"Could not resolve '{locale}': {detail}")


class TransportError(ResolveError):
    """Fallo de red o status HTTP no exitoso."""

    def __init__(self, locale: str, detail: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(locale, detail)


class MalformedResponse(ResolveError):
    """El cuerpo no es JSON o el valor raíz no es un array."""


class LocaleNotFound(ResolveError):
    """Ningún registro del directorio tiene ese `locale`."""

    def __init__(self, locale: str) -> None:
        super().__init__(locale, "locale not present in the directory response")


class IncompleteCountryData(ResolveError):
    """El registro existe pero le falta `name`/`capital_latitude`/`capital_longitude`."""

    def __init__(self, locale: str, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(locale, f"incomplete country data ({', '.join(missing)})")


class PropertyApplyFailure(GeoSpooferError):
    """Falló un comando individual sobre el dispositivo (no fatal)."""

    def __init__(self, action: str, detail: str) -> None:
        self.action = action
        self.detail = detail
        super().__init__(f"{action}: {detail}")
