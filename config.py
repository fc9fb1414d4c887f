"""
Configuration module for the clinic onboarding form.
Loads environment variables and provides typed configuration.
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(dotenv_path=env_path)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Address autofill (ViaCEP). Must contain the {cep} placeholder.
    address_lookup_url: str = "https://viacep.com.br/ws/{cep}/json/"

    # Intake webhook receiving the final submission
    intake_webhook_url: str = "https://flow.cactoai.com/webhook/cadastro-clinica"

    # Sent as `triggered_from` in every payload
    site_origin: str = "http://localhost:8080"

    # None keeps the httpx default timeout
    http_timeout_seconds: Optional[float] = None

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None  # e.g. "onboarding.log"
    log_dir: str = "logs"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def validate_endpoints(self) -> None:
        """
        Validate that both endpoint URLs are usable.

        Raises:
            ValueError: If an endpoint is empty, not http(s), or the lookup
                template lacks the {cep} placeholder
        """
        invalid = []
        for field in ("address_lookup_url", "intake_webhook_url"):
            value = (getattr(self, field, None) or "").strip()
            if not value.startswith(("http://", "https://")):
                invalid.append(field)

        if "address_lookup_url" not in invalid and "{cep}" not in self.address_lookup_url:
            invalid.append("address_lookup_url")

        if invalid:
            raise ValueError(
                f"Missing or invalid endpoint configuration: "
                f"{', '.join(invalid)}. "
                f"Endpoints must be http(s) URLs and the address lookup "
                f"URL must contain a {{cep}} placeholder."
            )


# Global settings instance
settings = Settings()
