"""Orquestación del spoofing.

Este módulo encadena las tres etapas de una ejecución:

    Start -> Validated -> Resolved -> Applied

Validación y resolución son fatales (la excepción se propaga y no se toca el
dispositivo). La aplicación de propiedades es best-effort: cada fallo se
anota como aviso y se continúa con la siguiente propiedad. La capa CLI se
limita a imprimir; aquí no hay efectos de consola.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from core.domain.errors import PropertyApplyFailure
from core.domain.locales import validate_locale
from core.domain.models import (
    CarrierCodes,
    LocaleCode,
    ResolvedCountry,
    SpoofResult,
)
from core.interfaces.device import DeviceController
from core.interfaces.directory import LocaleDirectory

ZYGOTE = "zygote"

READBACK_PROPERTIES: tuple[str, ...] = (
    "persist.sys.locale",
    "persist.sys.language",
    "persist.sys.country",
    "gsm.sim.operator.iso-country",
    "gsm.sim.operator.numeric",
)


@dataclass
class SpoofRequest:
    """Parámetros de una ejecución (ya parseados por la CLI)."""

    locale: str = "en-US"
    mcc: str = "310"
    mnc: str = "260"
    latitude: float | None = None
    longitude: float | None = None


@dataclass
class PipelineHooks:
    """Callbacks opcionales para la UI (progreso, avisos)."""

    warning: Callable[[str], None] | None = None
    resolved: Callable[[ResolvedCountry], None] | None = None
    step: Callable[[str], None] | None = None


@dataclass
class _ApplyLog:
    hooks: PipelineHooks
    warnings: list[str] = field(default_factory=list)

    def step(self, message: str) -> None:
        if self.hooks.step:
            self.hooks.step(message)

    def failure(self, exc: PropertyApplyFailure) -> None:
        message = str(exc)
        self.warnings.append(message)
        if self.hooks.warning:
            self.hooks.warning(message)


def resolve_country(locale: LocaleCode, directory: LocaleDirectory) -> ResolvedCountry:
    """Completa el `ResolvedCountry` vacío con los datos del directorio.

    Propaga cualquier `ResolveError`.
    """

    country = ResolvedCountry.from_locale(locale)
    info = directory.resolve(locale.raw)
    return country.resolved_with(info)


def locale_properties(locale: LocaleCode) -> list[tuple[str, str]]:
    return [
        ("persist.sys.locale", locale.raw),
        ("persist.sys.language", locale.language),
        ("persist.sys.country", locale.region),
    ]


def carrier_properties(country_code: str, carrier: CarrierCodes) -> list[tuple[str, str]]:
    return [
        ("gsm.sim.operator.iso-country", country_code),
        ("gsm.sim.operator.numeric", carrier.numeric),
        ("gsm.operator.iso-country", country_code),
        ("gsm.operator.numeric", carrier.numeric),
    ]


def _set_all(device: DeviceController, props: list[tuple[str, str]], log: _ApplyLog) -> None:
    for key, value in props:
        log.step(f"{key}={value}")
        try:
            device.set_prop(key, value)
        except PropertyApplyFailure as exc:
            log.failure(exc)


def apply_to_device(
    device: DeviceController,
    *,
    locale: LocaleCode,
    carrier: CarrierCodes,
    latitude: float,
    longitude: float,
    hooks: PipelineHooks | None = None,
) -> tuple[list[str], dict[str, str]]:
    """Aplica locale, operador y GPS; devuelve (avisos, propiedades leídas)."""

    log = _ApplyLog(hooks=hooks or PipelineHooks())

    _set_all(device, locale_properties(locale), log)

    log.step(f"restart {ZYGOTE}")
    try:
        device.restart(ZYGOTE)
    except PropertyApplyFailure as exc:
        log.failure(exc)

    _set_all(device, carrier_properties(locale.region, carrier), log)

    log.step(f"geo fix {latitude},{longitude}")
    try:
        device.geo_fix(latitude, longitude)
    except PropertyApplyFailure as exc:
        log.failure(exc)

    current: dict[str, str] = {}
    for key in READBACK_PROPERTIES:
        try:
            current[key] = device.get_prop(key)
        except PropertyApplyFailure as exc:
            log.failure(exc)

    return log.warnings, current


def run_spoof(
    request: SpoofRequest,
    *,
    directory: LocaleDirectory,
    device: DeviceController,
    hooks: PipelineHooks | None = None,
) -> SpoofResult:
    """Ejecuta el pipeline completo.

    Raises:
        InvalidLocale: el locale no está en la tabla de referencia.
        ResolveError: el directorio no devolvió datos utilizables.
        pydantic.ValidationError: MCC/MNC con formato inválido (la CLI los
            valida antes; solo ocurre llamando al pipeline directamente).
    """

    hooks = hooks or PipelineHooks()

    locale = validate_locale(request.locale)
    carrier = CarrierCodes(mcc=request.mcc, mnc=request.mnc)

    country = resolve_country(locale, directory)
    if hooks.resolved:
        hooks.resolved(country)

    latitude = request.latitude if request.latitude is not None else country.latitude
    longitude = request.longitude if request.longitude is not None else country.longitude
    assert latitude is not None and longitude is not None

    warnings, current = apply_to_device(
        device,
        locale=locale,
        carrier=carrier,
        latitude=latitude,
        longitude=longitude,
        hooks=hooks,
    )

    return SpoofResult(
        locale=locale,
        country=country,
        carrier=carrier,
        latitude=latitude,
        longitude=longitude,
        warnings=warnings,
        properties=current,
    )
