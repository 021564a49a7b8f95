from __future__ import annotations

from pathlib import Path
from typing import Any

import httpx
import pytest

from adapters.vatapi_client import VatApiClient
from cli.context import CliState
from core.config import API_KEY, AppSettings, ConfigStore


class FakeVatApi:
    """Records every request and answers with a canned response."""

    def __init__(self, payload: Any = None, status: int = 200, *, text: str | None = None, exc: Exception | None = None):
        self.payload = payload if payload is not None else {}
        self.status = status
        self.text = text
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def _handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.text is not None:
            return httpx.Response(self.status, text=self.text)
        return httpx.Response(self.status, json=self.payload)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handler)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(_env_file=None, api_key=None, config_dir=tmp_path)


@pytest.fixture
def store(tmp_path: Path) -> ConfigStore:
    return ConfigStore(tmp_path)


@pytest.fixture
def make_state(settings: AppSettings, store: ConfigStore):
    def _make(api: FakeVatApi, *, api_key: str = "secret-key-1234") -> CliState:
        if api_key:
            store.set(API_KEY, api_key)
        return CliState(
            settings=settings,
            store=store,
            client_factory=lambda key, s: VatApiClient(key, s, transport=api.transport()),
        )

    return _make
