"""Contrato del directorio de locales."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import CountryInfo


@runtime_checkable
class LocaleDirectory(Protocol):
    def resolve(self, locale: str) -> CountryInfo:
        """Devuelve nombre y coordenadas de la capital para `locale`.

        Lanza una subclase de `ResolveError` si no es posible.
        """

        ...
