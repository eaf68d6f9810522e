"""Environment settings - loads NetBox credentials from environment or .env file.

Priority:
1. Environment variables (highest priority)
2. .env file values
3. Default values in this file
"""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_PATH = Path.cwd() / ".env"


class EnvSettings(BaseSettings):
    """Environment-based configuration for the NetBox connection."""

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============================================
    # NetBox Integration
    # ============================================
    netbox_url: str = ""
    netbox_token: str = ""
    netbox_verify_ssl: bool = True
    netbox_timeout: float = 10.0  # seconds, per request

    # ============================================
    # Logging
    # ============================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @property
    def netbox_configured(self) -> bool:
        """Whether both URL and token are set."""
        return bool(self.netbox_url and self.netbox_token)


settings = EnvSettings()
