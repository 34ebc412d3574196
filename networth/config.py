from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Zapper Provider
    enable_zapper: bool = Field(default=True, description="Enable Zapper provider")
    zapper_graphql_url: str = Field(
        default="https://zapper.xyz/z/graphql",
        description="GraphQL endpoint used for portfolio queries",
    )
    zapper_referrer: str = Field(
        default="https://zapper.xyz/",
        description="Referer header sent with portfolio queries",
    )
    zapper_cookie: str = Field(
        default="",
        description="Cookie header forwarded verbatim to Zapper",
    )
    zapper_api_key: str = Field(
        default="",
        description="Zapper API key forwarded verbatim when present",
        validation_alias=AliasChoices("zapper_api_key", "ZAPPER_KEY"),
    )
    request_timeout_seconds: Optional[float] = Field(
        default=None,
        description="Request timeout (None waits indefinitely)",
    )

    # Output Defaults
    balance_threshold: float = Field(
        default=0.0,
        description="Default USD floor; balances at or below it are ignored",
    )
    data_folder: str = Field(
        default="",
        description="Default folder for snapshot files (empty prints to stdout)",
    )

    @property
    def has_zapper_cookie(self) -> bool:
        return bool(self.zapper_cookie)

    @property
    def has_zapper_api_key(self) -> bool:
        return bool(self.zapper_api_key)


# Global settings instance
settings = Settings()
