# formbridge/core/config.py
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # —–– monday.com
    MONDAY_API_TOKEN: Optional[str] = Field(None, description="Personal or app API token")
    MONDAY_BOARD_ID: Optional[int] = Field(None, description="Numeric id of the target board")
    MONDAY_API_URL: str = Field("https://api.monday.com/v2")
    MONDAY_API_VERSION: Optional[str] = Field(None, description="Sent as the API-Version header when set")
    MONDAY_HTTP_TIMEOUT: Optional[float] = Field(None, description="Seconds; transport default when unset")

    # —–– CORS
    CORS_ORIGINS: str = Field("*")

    # —–– Logs
    LOG_LEVEL: str = Field("INFO")
    LOG_JSON: bool = Field(True)

    # —–– Serveur
    HOST: str = Field("0.0.0.0")
    PORT: int = Field(3000)

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    def cors_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def board_config(self) -> "BoardConfig":
        return BoardConfig(
            api_token=self.MONDAY_API_TOKEN or "",
            board_id=self.MONDAY_BOARD_ID,
            api_url=self.MONDAY_API_URL,
            api_version=self.MONDAY_API_VERSION,
            timeout=self.MONDAY_HTTP_TIMEOUT,
        )


@dataclass(frozen=True)
class BoardConfig:
    """Connection settings for one board, built once at startup."""

    api_token: str
    board_id: Optional[int]
    api_url: str = "https://api.monday.com/v2"
    api_version: Optional[str] = None
    timeout: Optional[float] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.api_token) and self.board_id is not None


@lru_cache
def get_settings() -> Settings:
    return Settings()
