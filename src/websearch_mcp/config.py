from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    # Brave Search config
    BRAVE_API_KEY: Optional[str] = None
    BRAVE_SEARCH_URL: str = "https://api.search.brave.com/res/v1/web/search"
    # None disables the client timeout
    BRAVE_SEARCH_TIMEOUT: Optional[float] = None

    # MCP server config
    MCP_SERVER_NAME: str = "Web Search Agent"
    MCP_STATELESS_HTTP: bool = True
    MCP_JSON_RESPONSE: bool = True
    MCP_ALLOWED_HOSTS: list[str] = []
    MCP_ALLOWED_ORIGINS: list[str] = []

    # CORS config
    CORS_ALLOWED_ORIGINS: list[str] = ["*"]

    # App server config
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

@lru_cache()
def get_settings() -> Settings:
    return Settings()
