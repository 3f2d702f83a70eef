"""Cliente del directorio remoto de locales.

El servicio devuelve un array JSON de registros:

    [{"locale": "fr-CA", "country": {"name": "Canada",
      "capital_latitude": 45.4215, "capital_longitude": -75.6972, ...}}, ...]

Se pide una vez por ejecución (sin caché, sin reintentos).
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.errors import (
    IncompleteCountryData,
    LocaleNotFound,
    MalformedResponse,
    TransportError,
)
from core.domain.models import CountryInfo, DirectoryCountry
from core.interfaces.directory import LocaleDirectory

_REQUIRED_FIELDS = ("name", "capital_latitude", "capital_longitude")


class LocaleDirectoryClient(LocaleDirectory):
    """Resuelve un locale a país + coordenadas de la capital."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    @property
    def url(self) -> str:
        return self._settings.locale_directory_url

    def fetch(self, locale: str) -> list[Any]:
        """Descarga el directorio completo; `locale` solo se usa para los errores."""

        try:
            with build_client(self._settings, transport=self._transport) as client:
                response = client.get(self.url)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                locale,
                f"HTTP {exc.response.status_code} from {self.url}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(locale, f"request to {self.url} failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedResponse(locale, "response body is not JSON") from exc

        if not isinstance(payload, list):
            raise MalformedResponse(
                locale, f"expected a JSON array, got {type(payload).__name__}"
            )
        return payload

    def resolve(self, locale: str) -> CountryInfo:
        return find_country(self.fetch(locale), locale)


def find_country(records: list[Any], locale: str) -> CountryInfo:
    """Busca el primer registro cuyo `locale` coincide exactamente.

    Raises:
        LocaleNotFound: ningún registro coincide.
        IncompleteCountryData: el registro no trae nombre/coordenadas válidos.
    """

    for record in records:
        if not isinstance(record, dict) or record.get("locale") != locale:
            continue

        country = record.get("country")
        if not isinstance(country, dict):
            raise IncompleteCountryData(locale, list(_REQUIRED_FIELDS))
        try:
            return DirectoryCountry.model_validate(country).to_country_info()
        except ValidationError as exc:
            missing = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
            raise IncompleteCountryData(locale, missing or list(_REQUIRED_FIELDS)) from exc

    raise LocaleNotFound(locale)
