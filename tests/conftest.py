"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from clients.intake import IntakeClient
from clients.viacep import AddressResolver
from form.controller import FormController
from form.notifications import NotificationLog

TEST_ORIGIN = "https://cadastro.test"


@pytest.fixture
def viacep_body():
    """ViaCEP response for CEP 01001-000."""
    return {
        "cep": "01001-000",
        "logradouro": "Praça da Sé",
        "complemento": "lado ímpar",
        "bairro": "Sé",
        "localidade": "São Paulo",
        "uf": "SP",
        "ibge": "3550308",
        "ddd": "11",
    }


@pytest.fixture
def fixed_now():
    return datetime(2024, 1, 15, 10, 0, 0, 123000, tzinfo=timezone.utc)


@pytest.fixture
def mock_resolver():
    """Address resolver whose lookup finds nothing by default."""
    resolver = MagicMock(spec=AddressResolver)
    resolver.lookup = AsyncMock(return_value=None)
    resolver.close = AsyncMock()
    return resolver


@pytest.fixture
def mock_intake():
    """Intake client whose send succeeds by default."""
    intake = MagicMock(spec=IntakeClient)
    intake.send = AsyncMock(return_value=None)
    intake.close = AsyncMock()
    return intake


@pytest.fixture
def notifications():
    return NotificationLog()


@pytest.fixture
def controller(mock_resolver, mock_intake, notifications):
    """Form controller wired to mocked network boundaries."""
    return FormController(
        resolver=mock_resolver,
        intake=mock_intake,
        notify=notifications,
        origin=TEST_ORIGIN,
    )


@pytest.fixture
def mock_http_client():
    """Factory for AsyncClients whose requests are answered by `handler(request)`."""

    def _make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make
