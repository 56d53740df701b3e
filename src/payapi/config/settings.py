"""
Configuration settings management.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from loguru import logger

load_dotenv()


@dataclass
class Settings:
    """Application settings configuration."""

    # API configuration
    api_title: str
    api_version: str
    api_description: str

    # Environment
    environment: str
    debug: bool

    # Security
    allowed_hosts: str

    @classmethod
    def load_from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            api_title="PayRouter API",
            api_version="1.0.0",
            api_description="Routes payment requests to the matching payment method handler",
            environment=os.getenv("ENVIRONMENT", "development"),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            allowed_hosts=os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1"),
        )

    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    def get_allowed_hosts(self) -> list[str]:
        """Get allowed hosts as a list."""
        return [host.strip() for host in self.allowed_hosts.split(",") if host.strip()]


# Global settings instance
settings = Settings.load_from_env()
logger.info(f"Settings loaded for environment: {settings.environment}")
