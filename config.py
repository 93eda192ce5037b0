"""Application configuration."""
import os
from dataclasses import dataclass


@dataclass
class PrestaShopApiConfig:
    """PrestaShop webservice configuration."""

    base_url: str = "http://localhost"
    api_key: str = ""  # Webservice key, read from .env or user input
    output_format: str = "JSON"  # "JSON" or "XML"
    timeout: int = 60

    @classmethod
    def from_env(cls) -> "PrestaShopApiConfig":
        """Load config from environment variables."""
        return cls(
            base_url=os.getenv("PRESTASHOP_URL", "http://localhost"),
            api_key=os.getenv("PRESTASHOP_API_KEY", ""),
            output_format=os.getenv("PRESTASHOP_OUTPUT_FORMAT", "JSON").upper(),
            timeout=int(os.getenv("PRESTASHOP_TIMEOUT", "60")),
        )


@dataclass
class AppConfig:
    """Application configuration."""

    state_dir: str = "./.state"
    prestashop_api: PrestaShopApiConfig = None

    def __post_init__(self):
        """Initialize default values."""
        if self.prestashop_api is None:
            self.prestashop_api = PrestaShopApiConfig.from_env()

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load config from environment variables."""
        return cls(
            state_dir=os.getenv("PRESTASHOP_STATE_DIR", "./.state"),
            prestashop_api=PrestaShopApiConfig.from_env(),
        )


# Global instance
app_config = AppConfig()
