"""Estado compartido de la CLI y frontera de errores.

El estado se construye una vez por proceso (en el callback raíz) y viaja en
`ctx.obj`; los tests pasan el suyo con `CliRunner.invoke(..., obj=...)`.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator

import typer
from rich.text import Text

from adapters.vatapi_client import VatApiClient
from cli.ui_components import err_console, print_config_hint, print_error
from core.config import AppSettings, ConfigStore, resolve_api_key
from core.errors import PreconditionError, VatApiCliError
from core.interfaces.vat_service import VatService

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str, AppSettings], VatService]


def _default_client_factory(api_key: str, settings: AppSettings) -> VatService:
    return VatApiClient(api_key, settings)


@dataclass
class CliState:
    settings: AppSettings
    store: ConfigStore
    client_factory: ClientFactory = field(default=_default_client_factory)

    @classmethod
    def from_environment(cls) -> "CliState":
        settings = AppSettings()
        return cls(settings=settings, store=ConfigStore(settings.config_dir))

    @property
    def api_key(self) -> str:
        return resolve_api_key(self.settings, self.store)

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def require_auth(self) -> None:
        if not self.is_configured():
            raise PreconditionError()

    def fetch(self, message: str, operation: Callable[[VatService], Any]) -> Any:
        """Ejecuta una llamada con el indicador de progreso activo.

        El indicador se limpia antes de devolver o propagar, así nunca se
        mezcla con la salida.
        """

        service = self.client_factory(self.api_key, self.settings)
        try:
            with err_console.status(Text(message)):
                return operation(service)
        finally:
            service.close()


def get_state(ctx: typer.Context) -> CliState:
    if ctx.obj is None:
        ctx.obj = CliState.from_environment()
    return ctx.obj


@contextmanager
def command_errors() -> Iterator[None]:
    """Convierte cualquier error en una línea de fallo y exit code 1."""

    try:
        yield
    except typer.Exit:
        raise
    except PreconditionError as exc:
        print_error(err_console, str(exc))
        print_config_hint(err_console)
        raise typer.Exit(code=1) from exc
    except VatApiCliError as exc:
        print_error(err_console, str(exc))
        raise typer.Exit(code=1) from exc
    except Exception as exc:
        logger.debug("Unexpected error", exc_info=True)
        print_error(err_console, str(exc) or exc.__class__.__name__)
        raise typer.Exit(code=1) from exc
