# The module is to define the configuration settings for the Celestial Node MCP server.
# Date: 2026-10-18
# Version: 1.1.0

from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    """
    The Settings class is used to define the configuration settings for the server.
    It inherits from BaseSettings, which allows it to load environment variables
    and provides type validation for the settings.
    Attributes:
        CELESTIAL_NODE_API_KEY (Optional[str]): Bearer credential for the Celestial Node API.
            When it is not set, requests are sent unauthenticated.
        CELESTIAL_NODE_API_BASE (str): Base URL every tool path is appended to.
        CELESTIAL_NODE_TIMEOUT (float): Timeout in seconds for a single outbound request.
        MCP_SERVER_NAME (str): Name announced to MCP clients.
        MCP_SERVER_VERSION (str): Version announced to MCP clients.
        LOG_LEVEL (str): Logging level of the console logger.
    """
    # CELESTIAL_NODE_API
    CELESTIAL_NODE_API_KEY: Optional[str] = None
    CELESTIAL_NODE_API_BASE: str = "https://celestialnode.com/api/v1"
    CELESTIAL_NODE_TIMEOUT: float = 30.0

    # MCP_SERVER
    MCP_SERVER_NAME: str = "celestial-node"
    MCP_SERVER_VERSION: str = "1.1.0"

    # LOGGING
    LOG_LEVEL: str = "INFO"


    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = 'ignore'

    @property
    def api_base(self) -> str:
        return self.CELESTIAL_NODE_API_BASE.rstrip('/')

    @property
    def has_api_key(self) -> bool:
        return bool(self.CELESTIAL_NODE_API_KEY)

# lru_cache to cache the settings instance.
@lru_cache
def get_settings():
    return Settings()
