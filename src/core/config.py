"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/dispositivo) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOCALE_DIRECTORY_URL = "https://locale-directory.example.com/api/locales"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "geospoofer"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "geospoofer"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "geospoofer"
    return Path.home() / ".config" / "geospoofer"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Un valor `None` elimina la variable del fichero.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    for key, value in values.items():
        if value is None:
            existing.pop(key, None)
        else:
            existing[key] = value

    lines = ["# GeoSpoofer user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class DeviceMode(str, Enum):
    """Cómo llegan los comandos al dispositivo."""

    ADB = "adb"
    LOCAL = "local"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="GEOSPOOFER_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request al directorio de locales (segundos).",
    )
    user_agent: str = Field(
        default="geospoofer/0.1",
        min_length=1,
        description="User-Agent para el directorio de locales.",
    )
    locale_directory_url: str = Field(
        default=DEFAULT_LOCALE_DIRECTORY_URL,
        min_length=8,
        description="Endpoint que devuelve el array JSON locale -> país.",
    )

    device_mode: DeviceMode = Field(
        default=DeviceMode.ADB,
        description="'adb' (host -> dispositivo) o 'local' (ejecutando en el propio dispositivo).",
    )
    adb_path: str = Field(
        default="adb",
        min_length=1,
        description="Ejecutable de adb.",
    )
    adb_serial: str | None = Field(
        default=None,
        description="Serial del dispositivo (adb -s) cuando hay varios conectados.",
    )
    command_timeout_seconds: float = Field(
        default=15.0,
        gt=0,
        description="Timeout por comando de dispositivo (segundos).",
    )
