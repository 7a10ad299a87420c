"""Configuration management for GitHub Exporter."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_API_URL = "https://api.github.com"


@dataclass
class Config:
    """Application configuration."""

    github_token: str | None
    github_api_url: str = DEFAULT_API_URL

    # Pagination
    per_page: int = 100  # GitHub maximum for list endpoints

    # Timeouts
    request_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        # override=False ensures environment variables take precedence over .env
        load_dotenv(override=False)

        # GITHUB_EXPORTER_TOKEN wins over the generic GITHUB_TOKEN
        token = os.getenv("GITHUB_EXPORTER_TOKEN") or os.getenv("GITHUB_TOKEN")

        return cls(
            github_token=token,
            github_api_url=os.getenv("GITHUB_API_URL", DEFAULT_API_URL),
        )

    @property
    def is_authenticated(self) -> bool:
        """Check if a GitHub token is configured."""
        return bool(self.github_token)

    def with_token(self, token: str | None) -> "Config":
        """Return a copy using ``token`` when one is given."""
        if not token:
            return self
        return Config(
            github_token=token,
            github_api_url=self.github_api_url,
            per_page=self.per_page,
            request_timeout=self.request_timeout,
        )


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Config | None) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config
