"""
Intake webhook client.

The intake endpoint is treated as an opaque sink: the response is never
inspected, so a request that completes without raising counts as delivered.
Only transport failures are reported.
"""

from typing import Any, Dict, Optional

import httpx

from config import settings
from clients.viacep import build_http_client
from utils.exceptions import SubmissionTransportError
from utils.logging_config import setup_logging

logger = setup_logging(name=__name__)


class IntakeClient:
    """Posts onboarding payloads to the intake webhook."""

    def __init__(
        self,
        url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        if url is None:
            settings.validate_endpoints()
        self.url = url or settings.intake_webhook_url
        self.client = client or build_http_client(settings.http_timeout_seconds)

    async def close(self):
        """Close HTTP client."""
        await self.client.aclose()

    async def send(self, payload: Dict[str, Any]) -> None:
        """
        POST the payload as JSON.

        Args:
            payload: JSON-serializable payload

        Raises:
            SubmissionTransportError: If the request could not be completed
        """
        try:
            response = await self.client.post(
                self.url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            raise SubmissionTransportError(f"Failed to post to intake endpoint: {e}") from e

        # Status is logged only; delivery is not inferred from it
        logger.debug(f"Intake endpoint answered HTTP {response.status_code}")
