# catalog_gateway/config.py
import logging
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, Field

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging for the gateway process."""
    logging.basicConfig(level=logging.getLevelName(level.upper()), format=LOG_FORMAT, force=True)
    logger.info(f"Logging configured at {level.upper()}")


class AgentModel(BaseModel):
    """Intent classifier model settings."""
    name: str = Field(default="catalog_intent_classifier")
    model: str = Field(default="gemini-2.0-flash")


class CatalogSettings(BaseModel):
    """Connection settings handed to the WooCommerce client."""
    base_url: str
    consumer_key: str = ""
    consumer_secret: str = ""
    timeout: float = 10.0
    search_page_size: int = 5
    variations_page_size: int = 50
    color_attribute: str = "pa_colore"
    size_attribute: str = "pa_taglia"


class Config(BaseSettings):
    """Configuration settings for the catalog gateway."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=True,
        env_file_encoding='utf-8',
        extra='ignore'
    )

    agent_settings: AgentModel = Field(default=AgentModel())
    app_name: str = "catalog_gateway"
    LOG_LEVEL: str = Field(default="INFO")

    # Google Gen AI settings (intent classifier)
    CLOUD_PROJECT: str | None = Field(default=None, alias="GOOGLE_CLOUD_PROJECT")
    CLOUD_LOCATION: str = Field(default="us-central1", alias="GOOGLE_CLOUD_LOCATION")
    GENAI_USE_VERTEXAI: str = Field(default="0", alias="GOOGLE_GENAI_USE_VERTEXAI")
    API_KEY: str | None = Field(default="", alias="GOOGLE_API_KEY")

    # Integration settings
    INTEGRATION_MODE: str = Field(default="woocommerce")  # "woocommerce", "mock"

    # WooCommerce settings
    WOO_URL: str | None = Field(default=None)
    WC_KEY: str | None = Field(default=None)
    WC_SECRET: str | None = Field(default=None)
    CATALOG_TIMEOUT: float = Field(default=10.0)

    # Catalog query shape
    SEARCH_PAGE_SIZE: int = Field(default=5)
    VARIATIONS_PAGE_SIZE: int = Field(default=50)
    COLOR_ATTRIBUTE: str = Field(default="pa_colore")
    SIZE_ATTRIBUTE: str = Field(default="pa_taglia")
    SIZE_ATTRIBUTE_KEYWORDS: List[str] = Field(default=["size", "taglia"])

    def catalog_settings(self) -> CatalogSettings:
        """Build the explicit settings object for the catalog client."""
        return CatalogSettings(
            base_url=(self.WOO_URL or "").rstrip("/"),
            consumer_key=self.WC_KEY or "",
            consumer_secret=self.WC_SECRET or "",
            timeout=self.CATALOG_TIMEOUT,
            search_page_size=self.SEARCH_PAGE_SIZE,
            variations_page_size=self.VARIATIONS_PAGE_SIZE,
            color_attribute=self.COLOR_ATTRIBUTE,
            size_attribute=self.SIZE_ATTRIBUTE,
        )
