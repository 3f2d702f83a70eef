"""Contrato del controlador de dispositivo.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir adb/setprop por un fake en tests sin tocar el pipeline.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DeviceController(Protocol):
    """Operaciones mínimas sobre el dispositivo.

    Reglas de diseño:
    - Cada operación es independiente: si falla lanza `PropertyApplyFailure`
      y el llamador decide si sigue.
    """

    def set_prop(self, key: str, value: str) -> None:
        ...

    def get_prop(self, key: str) -> str:
        ...

    def restart(self, component: str) -> None:
        """Reinicia un servicio del sistema (p.ej. zygote)."""

        ...

    def geo_fix(self, latitude: float, longitude: float) -> None:
        ...
