"""
brush-translate - Configuration Module
"""
from typing import Optional

from loguru import logger
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "brush-translate"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Translation defaults
    DEFAULT_PROVIDER: str = "deepseek"
    DEFAULT_SOURCE_LANG: str = "auto"
    DEFAULT_TARGET_LANG: str = "zh-Hans"

    # Every provider call shares this upper bound (seconds)
    REQUEST_TIMEOUT: float = 15.0

    # Result cache
    CACHE_CAPACITY: int = 200

    # Provider endpoints
    DEEPSEEK_BASE_URL: str = "https://api.deepseek.com"
    DOUBAO_BASE_URL: str = "https://ark.cn-beijing.volces.com/api/v3"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    YOUDAO_API_URL: str = "https://openapi.youdao.com/api"

    # Provider credentials (loaded from environment)
    DEEPSEEK_API_KEY: Optional[str] = None
    DOUBAO_API_KEY: Optional[str] = None
    GEMINI_API_KEY: Optional[str] = None
    YOUDAO_APP_KEY: Optional[str] = None
    YOUDAO_APP_SECRET: Optional[str] = None

    # Proxy Settings
    PROXY_URL: Optional[str] = None

    class Config:
        env_prefix = "BRUSH_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()


def get_httpx_client_kwargs(timeout: Optional[float] = None, config: Optional[Settings] = None) -> dict:
    """Get httpx client kwargs including proxy if configured"""
    config = config or settings
    kwargs = {"timeout": timeout if timeout is not None else config.REQUEST_TIMEOUT}
    if config.PROXY_URL:
        kwargs["proxy"] = config.PROXY_URL
        logger.debug(f"Using proxy: {config.PROXY_URL}")
    return kwargs
