"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Guarda la API key en un fichero JSON por usuario (`ConfigStore`), de forma
  que la CLI no necesita editar `.env` a mano.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.errors import ConfigStoreError, UsageError

logger = logging.getLogger(__name__)

PROJECT_NAME = "vatapi-cli"
API_KEY = "apiKey"

# Esquema del perfil persistido: clave -> valor por defecto.
CONFIG_SCHEMA: dict[str, str] = {API_KEY: ""}


def get_user_config_dir(project_name: str = PROJECT_NAME) -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / project_name
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / project_name

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / project_name
    return Path.home() / ".config" / project_name


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Todo lo que no es la credencial persistida vive aquí y se puede
    sobrescribir con variables `VATAPI_*`.
    """

    model_config = SettingsConfigDict(
        env_prefix="VATAPI_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default="https://vatapi.com/v1",
        min_length=8,
        description="Base URL of the VAT API.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds (unset = wait indefinitely).",
    )
    user_agent: str = Field(
        default="vatapi-cli/1.0.0",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    api_key: str | None = Field(
        default=None,
        description="API key override; takes precedence over the stored profile.",
    )
    config_dir: Path | None = Field(
        default=None,
        description="Directory holding config.json (defaults to the user config dir).",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Logging level for the stderr handler.",
    )


class ConfigStore:
    """Perfil persistido `vatapi-cli` con una única clave (`apiKey`).

    Un valor vacío equivale a "no configurado". Las lecturas nunca fallan:
    un fichero ausente o corrupto devuelve los valores por defecto.
    """

    filename = "config.json"

    def __init__(self, directory: Path | None = None) -> None:
        self._directory = directory or get_user_config_dir()

    @property
    def path(self) -> Path:
        return self._directory / self.filename

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable config file %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, Any]) -> None:
        tmp = self.path.with_suffix(".json.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            raise ConfigStoreError(f"Could not write configuration to {self.path}: {exc}") from exc
        logger.debug("Wrote configuration to %s", self.path)

    def get(self, key: str) -> str:
        value = self._load().get(key)
        if isinstance(value, str):
            return value
        return CONFIG_SCHEMA.get(key, "")

    def set(self, key: str, value: str) -> None:
        if key not in CONFIG_SCHEMA:
            raise UsageError(f"Unknown configuration key: {key}")
        data = self.all()
        data[key] = value
        self._write(data)

    def all(self) -> dict[str, str]:
        return {key: self.get(key) for key in CONFIG_SCHEMA}

    def clear(self) -> None:
        self._write(dict(CONFIG_SCHEMA))

    def is_configured(self) -> bool:
        return bool(self.get(API_KEY))


def resolve_api_key(settings: AppSettings, store: ConfigStore) -> str:
    """Credencial efectiva: `VATAPI_API_KEY` si existe, si no la guardada."""

    if settings.api_key:
        return settings.api_key
    return store.get(API_KEY)


def mask_api_key(api_key: str) -> str:
    """Oculta la key dejando visibles los últimos 4 caracteres."""

    return "*" * 8 + api_key[-4:]
