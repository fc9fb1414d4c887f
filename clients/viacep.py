"""
ViaCEP client: resolves a Brazilian postal code (CEP) to a street address.
API docs: https://viacep.com.br
"""

from typing import Any, Dict, Optional

import httpx
import pydantic

from config import settings
from models.business import ResolvedAddress
from utils.constants import POSTAL_CODE_DIGITS
from utils.exceptions import LookupFailure
from utils.logging_config import setup_logging

logger = setup_logging(name=__name__)


def build_http_client(timeout: Optional[float] = None) -> httpx.AsyncClient:
    """Create an AsyncClient; without a timeout the httpx default applies."""
    if timeout is None:
        return httpx.AsyncClient(follow_redirects=True)
    return httpx.AsyncClient(timeout=timeout, follow_redirects=True)


class AddressResolver:
    """Client for the ViaCEP address lookup API."""

    def __init__(
        self,
        url_template: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the resolver.

        Args:
            url_template: Lookup URL containing a {cep} placeholder
                (default: settings.address_lookup_url)
            client: Shared HTTP client; one is created when omitted
        """
        if url_template is None:
            settings.validate_endpoints()
        self.url_template = url_template or settings.address_lookup_url
        self.client = client or build_http_client(settings.http_timeout_seconds)

    async def close(self):
        """Close HTTP client."""
        await self.client.aclose()

    async def lookup(self, cep: str) -> Optional[ResolvedAddress]:
        """
        Fetch the address for a CEP.

        Args:
            cep: Exactly 8 digits, no mask

        Returns:
            The resolved address, or None if the service reports the CEP
            as unknown

        Raises:
            ValueError: If cep is not 8 digits
            LookupFailure: On transport errors, HTTP errors or an
                unreadable response body
        """
        if not cep or not cep.isdigit() or len(cep) != POSTAL_CODE_DIGITS:
            raise ValueError(f"CEP must be {POSTAL_CODE_DIGITS} digits, got {cep!r}")

        url = self.url_template.format(cep=cep)
        logger.debug(f"Looking up CEP {cep}")

        try:
            response = await self.client.get(url)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            raise LookupFailure(f"Address lookup for CEP {cep} failed: {e}") from e
        except ValueError as e:
            raise LookupFailure(f"Invalid JSON from address lookup for CEP {cep}") from e

        if not isinstance(data, dict):
            raise LookupFailure(f"Unexpected address lookup response for CEP {cep}")

        if self._is_not_found(data):
            logger.info(f"CEP {cep} not found")
            return None

        try:
            return ResolvedAddress.from_viacep(data)
        except pydantic.ValidationError as e:
            raise LookupFailure(f"Malformed address for CEP {cep}: {e}") from e

    @staticmethod
    def _is_not_found(data: Dict[str, Any]) -> bool:
        # ViaCEP answers {"erro": true}; newer deployments send "true"
        erro = data.get("erro")
        return erro is True or (isinstance(erro, str) and erro.lower() == "true")
