"""Configuration management for Bistro using Pydantic."""

import logging
from datetime import time

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BISTRO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Demo Restaurant Configuration
    demo_restaurant_name: str = Field(
        default="Amelie's cafe", description="Demo restaurant name"
    )
    demo_restaurant_location: str = Field(
        default="Chennai", description="Demo restaurant location"
    )
    demo_opening_time: time = Field(
        default=time(10, 30), description="Demo restaurant opening time"
    )
    demo_closing_time: time = Field(
        default=time(22, 0), description="Demo restaurant closing time"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")

    def model_post_init(self, __context) -> None:
        """Validate configuration after initialization."""
        if self.demo_opening_time >= self.demo_closing_time:
            logger.warning(
                "BISTRO_DEMO_OPENING_TIME is not before BISTRO_DEMO_CLOSING_TIME - "
                "demo restaurant cannot be created"
            )


# Global config instance
config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global config
    if config is None:
        config = Config()
    return config


def setup_logging(cfg: Config | None = None) -> None:
    """Configure logging for the application."""
    if cfg is None:
        cfg = get_config()

    log_level = getattr(logging, cfg.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
