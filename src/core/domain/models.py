"""Modelos del dominio (Pydantic v2).

Por qué modelos congelados:
- Un `ResolvedCountry` se crea vacío tras validar el locale y se completa una
  sola vez con lo que devuelve el directorio; después no se muta.
- Facilita exportar el resultado de una ejecución a JSON.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictFloat, StrictStr
from pydantic.config import ConfigDict


class LocaleCode(BaseModel):
    """Locale validado contra la tabla de referencia."""

    model_config = ConfigDict(frozen=True)

    raw: str = Field(
        ...,
        min_length=1,
        description="Locale tal cual se escribió en la CLI (p.ej. 'fr-CA').",
    )
    language: str = Field(
        ...,
        min_length=1,
        description="Parte anterior al primer guion (p.ej. 'fr').",
    )
    region: str = Field(
        ...,
        description="Parte posterior al primer guion, en minúsculas (p.ej. 'ca').",
    )


class CountryInfo(BaseModel):
    """País de un registro del directorio remoto."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Nombre del país.")
    latitude: float = Field(..., description="Latitud de la capital.")
    longitude: float = Field(..., description="Longitud de la capital.")


class DirectoryCountry(BaseModel):
    """Objeto `country` tal como lo sirve el directorio de locales.

    Tipos estrictos: un campo ausente o de tipo incorrecto es un error, no un
    valor por defecto.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: StrictStr = Field(..., description="Nombre del país.")
    capital_latitude: StrictFloat = Field(..., description="Latitud de la capital.")
    capital_longitude: StrictFloat = Field(..., description="Longitud de la capital.")

    def to_country_info(self) -> CountryInfo:
        return CountryInfo(
            name=self.name,
            latitude=self.capital_latitude,
            longitude=self.capital_longitude,
        )


class ResolvedCountry(BaseModel):
    model_config = ConfigDict(frozen=True)

    country_code: str = Field(
        ...,
        description="Código de país en minúsculas (p.ej. 'ca').",
    )
    language_code: str = Field(
        ...,
        description="Código de idioma (p.ej. 'fr').",
    )
    name: str | None = Field(default=None, description="Nombre del país.")
    latitude: float | None = Field(default=None, description="Latitud de la capital.")
    longitude: float | None = Field(default=None, description="Longitud de la capital.")

    @classmethod
    def from_locale(cls, locale: LocaleCode) -> "ResolvedCountry":
        """Registro vacío (sin nombre ni coordenadas) justo tras validar."""

        return cls(country_code=locale.region, language_code=locale.language)

    @property
    def is_resolved(self) -> bool:
        return self.name is not None

    def resolved_with(self, info: CountryInfo) -> "ResolvedCountry":
        """Devuelve una copia completada con la info del directorio."""

        if self.is_resolved:
            raise ValueError("country already resolved")
        return self.model_copy(
            update={
                "name": info.name,
                "latitude": info.latitude,
                "longitude": info.longitude,
            }
        )


class CarrierCodes(BaseModel):
    """MCC/MNC a inyectar en las propiedades de operador."""

    model_config = ConfigDict(frozen=True)

    mcc: str = Field(..., pattern=r"^\d{3}$", description="Mobile Country Code.")
    mnc: str = Field(..., pattern=r"^\d{2,3}$", description="Mobile Network Code.")

    @property
    def numeric(self) -> str:
        return f"{self.mcc}{self.mnc}"


class SpoofResult(BaseModel):
    """Resultado de una ejecución completa del pipeline."""

    locale: LocaleCode
    country: ResolvedCountry
    carrier: CarrierCodes
    latitude: float = Field(..., description="Latitud aplicada al GPS.")
    longitude: float = Field(..., description="Longitud aplicada al GPS.")
    warnings: list[str] = Field(
        default_factory=list,
        description="Fallos no fatales al aplicar propiedades.",
    )
    properties: dict[str, str] = Field(
        default_factory=dict,
        description="Valores leídos del dispositivo tras aplicar.",
    )
