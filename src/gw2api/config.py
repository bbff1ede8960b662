import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

SUPPORTED_LANGUAGES = ("en", "es", "de", "fr", "zh")


@dataclass(frozen=True)
class Settings:
    """Client settings loaded from environment variables."""

    # API
    base_url: str = os.getenv("GW2API_BASE_URL", "https://api.guildwars2.com")
    schema_version: str = os.getenv("GW2API_SCHEMA_VERSION", "2022-03-23T19:00:00.000Z")
    timeout: float = float(os.getenv("GW2API_TIMEOUT", "30.0"))

    # Auth (APIKEY is the name used by the integration tests)
    access_token: str | None = os.getenv("GW2API_ACCESS_TOKEN") or os.getenv("APIKEY")

    # Localization
    language: str = os.getenv("GW2API_LANGUAGE", "en")

    @property
    def has_access_token(self) -> bool:
        """Check if an API key is configured.

        Returns:
            True if an access token is set, False otherwise
        """
        return bool(self.access_token)

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"GW2API_BASE_URL must be an http(s) URL, got {self.base_url!r}")

        if self.timeout <= 0:
            raise ValueError(f"GW2API_TIMEOUT must be positive, got {self.timeout}")

        if self.language not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"GW2API_LANGUAGE must be one of {list(SUPPORTED_LANGUAGES)}, "
                f"got {self.language!r}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
